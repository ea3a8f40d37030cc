"""
Salesforce query translator.

Converts structured filters to SOQL SELECT statements.
"""

import logging
from datetime import date
from typing import Any, Dict, List

from pydantic import BaseModel

from soql_builder.core.models import RawValue
from soql_builder.query.builder import QueryBuilder

logger = logging.getLogger(__name__)

# Operators that map directly onto a comparison
_COMPARISON_OPERATORS = {
    ">": ">",
    "<": "<",
    "is": "=",
    "different": "!=",
}


class SoqlQueryTranslator:
    """
    Translates structured filters to SOQL queries.

    Implements the IQueryTranslator interface for Salesforce. Each filter
    slice becomes one query against the same sObject and field list.
    """

    def __init__(self, sobject: str, fields: List[str]):
        """
        Initialize SOQL query translator.

        Args:
            sobject: sObject to query (e.g. "Account")
            fields: Fields to select in every query
        """
        self.sobject = sobject
        self.fields = list(fields)

    def translate(
        self, filters: Any, model_info: Dict[str, Any]
    ) -> List[str]:
        """
        Convert structured filters to SOQL queries.

        Args:
            filters: Structured filters ({"filters": [slice, ...]}), as a
                dict or a pydantic model
            model_info: Field information; fields typed "date" are inlined
                unquoted

        Returns:
            List of SOQL query strings

        Raises:
            InvalidQueryError: If the configured sObject or fields are empty
        """
        if isinstance(filters, BaseModel):
            filters = filters.model_dump(mode="json")

        if not filters or not filters.get("filters"):
            return [self._new_builder().to_soql()]

        return [
            self._translate_slice(filter_slice, model_info or {})
            for filter_slice in filters["filters"]
        ]

    def _new_builder(self) -> QueryBuilder:
        return QueryBuilder().from_(self.sobject).select(self.fields)

    def _translate_slice(
        self, filter_slice: Dict[str, Any], model_info: Dict[str, Any]
    ) -> str:
        """Translate a single query slice to SOQL."""
        builder = self._new_builder()

        for condition in filter_slice.get("conditions") or []:
            self._translate_condition(builder, condition, model_info)

        for key in ("group_by", "aggregations"):
            if filter_slice.get(key):
                logger.warning("Ignoring unsupported slice option '%s'", key)

        for s in filter_slice.get("sort") or []:
            direction = "DESC" if s.get("order", "asc") == "desc" else "ASC"
            builder.order_by(s["field"], direction)

        if filter_slice.get("limit") is not None:
            builder.limit(filter_slice["limit"])

        return builder.to_soql()

    @staticmethod
    def _is_date_field(condition: Dict[str, Any], model_info: Dict[str, Any]) -> bool:
        field_type = model_info.get(condition["field"], {}).get("type")
        return field_type == "date" or condition.get("type") == "DateFilter"

    @staticmethod
    def _date_literal(value: Any) -> RawValue:
        if isinstance(value, date):
            return RawValue(value=value.isoformat())
        return RawValue(value=str(value))

    def _translate_condition(
        self,
        builder: QueryBuilder,
        condition: Dict[str, Any],
        model_info: Dict[str, Any],
    ) -> None:
        """Append the clause(s) for a single condition to the builder."""
        field = condition["field"]
        operator = condition["operator"]
        value = condition.get("value")

        # LIKE patterns stay quoted strings; other operators inline dates unquoted
        if (
            operator != "contains"
            and self._is_date_field(condition, model_info)
            and value is not None
            and not isinstance(value, bool)
        ):
            if isinstance(value, list):
                value = [self._date_literal(v) for v in value]
            else:
                value = self._date_literal(value)

        if operator in _COMPARISON_OPERATORS:
            builder.where(field, _COMPARISON_OPERATORS[operator], value)
            return
        elif operator == "isin":
            if isinstance(value, list):
                builder.where_in(field, value)
            else:
                builder.where(field, "=", value)
            return
        elif operator == "notin":
            if isinstance(value, list):
                builder.where_not_in(field, value)
            else:
                builder.where(field, "!=", value)
            return
        elif operator == "between":
            if isinstance(value, list) and len(value) == 2:
                (
                    builder.start_where()
                    .where(field, ">=", value[0])
                    .where(field, "<=", value[1])
                    .end_where()
                )
                return
        elif operator == "contains":
            builder.where(field, "LIKE", f"%{value}%")
            return
        elif operator == "exists":
            if value is True:
                builder.where(field, "!=", None)
                return
            elif value is False:
                builder.where(field, "=", None)
                return

        logger.warning(
            "Skipping condition on '%s': unsupported operator/value %r", field, operator
        )
