"""
SOQL Builder - fluent construction of Salesforce SOQL SELECT statements.

Main entry point for building queries.
"""

from soql_builder.core.exceptions import InvalidQueryError
from soql_builder.query.builder import QueryBuilder

__all__ = ["QueryBuilder", "InvalidQueryError"]
