"""
Runtime configuration.

Reads configuration from environment variables (a local .env file is loaded
first when present):
- SOQL_BUILDER_LOG_LEVEL: level of the soql_builder logger (default WARNING)
- SOQL_BUILDER_DEFAULT_DIRECTION: order_by direction when none is given (default ASC)
"""

import logging
import os
import sys
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

load_dotenv()

PACKAGE_LOGGER = "soql_builder"


class BuilderSettings(BaseModel):
    """Configuration for the SOQL builder."""

    log_level: str = "WARNING"
    default_direction: str = "ASC"

    @field_validator("log_level", "default_direction")
    @classmethod
    def upper_case(cls, value: str) -> str:
        return value.strip().upper()


@lru_cache(maxsize=1)
def get_settings() -> BuilderSettings:
    """Settings built from the environment; cached after the first call."""
    return BuilderSettings(
        log_level=os.getenv("SOQL_BUILDER_LOG_LEVEL", "WARNING"),
        default_direction=os.getenv("SOQL_BUILDER_DEFAULT_DIRECTION", "ASC"),
    )


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Args:
        level: Log level name. If not provided, reads SOQL_BUILDER_LOG_LEVEL.

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    level_name = (level or get_settings().log_level).upper()
    logger.setLevel(getattr(logging, level_name, logging.WARNING))

    # Prevent duplicate handlers
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s")
        )
        logger.addHandler(handler)

    return logger
