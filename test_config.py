"""
Tests for environment configuration and logging setup.
"""

import logging

import pytest

from soql_builder import QueryBuilder
from soql_builder.config import PACKAGE_LOGGER, configure_logging, get_settings


@pytest.fixture
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch, fresh_settings):
    monkeypatch.delenv("SOQL_BUILDER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SOQL_BUILDER_DEFAULT_DIRECTION", raising=False)

    settings = get_settings()
    assert settings.log_level == "WARNING"
    assert settings.default_direction == "ASC"


def test_default_direction_from_env(monkeypatch, fresh_settings):
    monkeypatch.setenv("SOQL_BUILDER_DEFAULT_DIRECTION", "desc")

    qb = QueryBuilder().from_("Acc").add_select("Id").order_by("Name").order_by("Id", "ASC")
    assert qb.to_soql() == "SELECT Id FROM Acc ORDER BY Name DESC, Id ASC"


def test_configure_logging(monkeypatch, fresh_settings):
    monkeypatch.setenv("SOQL_BUILDER_LOG_LEVEL", "debug")
    logger = logging.getLogger(PACKAGE_LOGGER)
    previous_level, previous_handlers = logger.level, list(logger.handlers)
    try:
        assert configure_logging() is logger
        assert logger.level == logging.DEBUG
        configure_logging("info")
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
    finally:
        logger.setLevel(previous_level)
        logger.handlers = previous_handlers


def test_render_logs_query(caplog):
    with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
        QueryBuilder().from_("Acc").add_select("Id").to_soql()
    assert "SELECT Id FROM Acc" in caplog.text
