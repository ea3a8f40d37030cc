"""Query building and translation components."""

from soql_builder.query.builder import QueryBuilder
from soql_builder.query.translator import QueryTranslator

__all__ = ["QueryBuilder", "QueryTranslator"]
