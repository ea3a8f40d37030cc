"""
Abstract interfaces for query translators.

These protocols define the contract a translator must implement to plug into
the translation coordinator.
"""

from typing import Any, Dict, List, Protocol


class IQueryTranslator(Protocol):
    """
    Translate structured filters to SOQL.

    Takes a structured filter payload and converts it to one SOQL query
    string per filter slice.
    """

    def translate(
        self,
        filters: Dict[str, Any],
        model_info: Dict[str, Any]
    ) -> List[str]:
        """
        Convert structured filters to SOQL queries.

        Args:
            filters: Structured filters ({"filters": [slice, ...]})
            model_info: Field information, e.g. {"CreatedDate": {"type": "date"}}

        Returns:
            List of SOQL query strings (one per filter slice)
        """
        ...
