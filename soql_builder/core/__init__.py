"""Core interfaces and models for the SOQL builder."""

from soql_builder.core.exceptions import InvalidQueryError
from soql_builder.core.interfaces import IQueryTranslator
from soql_builder.core.models import (
    BoolValue,
    Clause,
    NullValue,
    NumericValue,
    RawValue,
    SoqlValue,
    StringValue,
    prepare_value,
    to_value,
)

__all__ = [
    "InvalidQueryError",
    "IQueryTranslator",
    "BoolValue",
    "Clause",
    "NullValue",
    "NumericValue",
    "RawValue",
    "SoqlValue",
    "StringValue",
    "prepare_value",
    "to_value",
]
