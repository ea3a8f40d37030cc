"""Errors raised by the SOQL builder."""


class InvalidQueryError(ValueError):
    """Builder state cannot be rendered into a query."""
