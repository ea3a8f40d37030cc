"""
Query translation coordinator.

Delegates translation to a concrete translator implementation.
"""

import logging
from typing import Any, Dict, List

from soql_builder.core.interfaces import IQueryTranslator

logger = logging.getLogger(__name__)


class QueryTranslator:
    """
    Coordinates translation from structured filters to SOQL.

    This class wraps a concrete query translator and provides common
    pre/post-processing logic.
    """

    def __init__(self, translator: IQueryTranslator):
        """
        Initialize query translator.

        Args:
            translator: Concrete query translator implementation
        """
        self.translator = translator

    def translate(
        self, filters: Dict[str, Any], model_info: Dict[str, Any]
    ) -> List[str]:
        """
        Translate filters to SOQL queries.

        Args:
            filters: Structured filters ({"filters": [slice, ...]})
            model_info: Field information for typing values

        Returns:
            List of SOQL query strings
        """
        # An empty payload still yields one unfiltered query
        if not filters or not filters.get("filters"):
            filters = {"filters": [{"conditions": []}]}

        queries = self.translator.translate(filters, model_info)
        logger.debug("Translated %d filter slice(s)", len(queries))
        return queries
