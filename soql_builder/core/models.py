"""
Shared data models for the SOQL builder.

Literal values are modelled as a tagged union so that the formatting rule for
each kind of value lives in one place.
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field


class StringValue(BaseModel):
    """String literal, emitted in single quotes."""

    type: Literal["string"] = "string"
    value: str

    def render(self) -> str:
        # Embedded quotes are the caller's responsibility
        return f"'{self.value}'"


class BoolValue(BaseModel):
    """Boolean literal, emitted as lowercase true/false."""

    type: Literal["bool"] = "bool"
    value: bool

    def render(self) -> str:
        return "true" if self.value else "false"


class NullValue(BaseModel):
    """The null literal."""

    type: Literal["null"] = "null"

    def render(self) -> str:
        return "null"


class NumericValue(BaseModel):
    """Numbers and anything else rendered through its natural string form."""

    type: Literal["numeric"] = "numeric"
    value: Any

    def render(self) -> str:
        return str(self.value)


class RawValue(BaseModel):
    """Text inlined verbatim (date literals, SOQL date functions)."""

    type: Literal["raw"] = "raw"
    value: str

    def render(self) -> str:
        return self.value


SoqlValue = Annotated[
    Union[StringValue, BoolValue, NullValue, NumericValue, RawValue],
    Field(discriminator="type"),
]

_VALUE_TYPES = (StringValue, BoolValue, NullValue, NumericValue, RawValue)


def to_value(raw: Any) -> Union[StringValue, BoolValue, NullValue, NumericValue, RawValue]:
    """
    Classify a Python value into its literal variant.

    Args:
        raw: Value given to a where-method, or an already built variant

    Returns:
        The matching value variant
    """
    if isinstance(raw, _VALUE_TYPES):
        return raw
    if isinstance(raw, str):
        return StringValue(value=raw)
    # bool before numbers: bool is a subclass of int
    if isinstance(raw, bool):
        return BoolValue(value=raw)
    if raw is None:
        return NullValue()
    return NumericValue(value=raw)


def prepare_value(raw: Any) -> str:
    """Render a value as a SOQL literal."""
    return to_value(raw).render()


class Clause(BaseModel):
    """One filter condition plus the connective joining it to the previous one."""

    column: str
    operator: Optional[str] = None
    value: str  # already prepared
    boolean: str = "AND"
