"""
Fluent SOQL query builder.

Accumulates fields, filter clauses, grouping markers, ordering and paging,
and renders them into a single SELECT statement.
"""

import logging
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from soql_builder.config import get_settings
from soql_builder.core.exceptions import InvalidQueryError
from soql_builder.core.models import Clause, NullValue, RawValue, prepare_value

logger = logging.getLogger(__name__)


class QueryBuilder:
    """
    Builds SOQL SELECT statements from chained method calls.

    Every mutator returns the builder itself and never raises; all
    validation happens in to_soql().

    Example:
        >>> (QueryBuilder()
        ...     .from_("Account")
        ...     .select(["Id", "Name"])
        ...     .where("Name", "=", "Mikhail")
        ...     .to_soql())
        "SELECT Id, Name FROM Account WHERE Name = 'Mikhail'"
    """

    def __init__(self):
        """Initialize an empty builder."""
        self._fields: List[str] = []
        self._object: Optional[str] = None
        self._where: List[Clause] = []
        self._group_starts: List[int] = []
        self._group_ends: List[int] = []
        self._orders: List[str] = []
        self._limit: Optional[int] = None
        self._offset: Optional[int] = None

    def __repr__(self) -> str:
        return (
            f"<QueryBuilder object={self._object!r} fields={len(self._fields)} "
            f"clauses={len(self._where)} orders={len(self._orders)}>"
        )

    # Read-only views

    @property
    def sobject(self) -> Optional[str]:
        return self._object

    @property
    def fields(self) -> List[str]:
        """Selected fields, duplicates removed, in first-seen order."""
        return list(dict.fromkeys(self._fields))

    @property
    def clauses(self) -> Tuple[Clause, ...]:
        return tuple(self._where)

    # Field selection

    def select(self, fields: Iterable[str]) -> "QueryBuilder":
        # A bare string is one field name, not a sequence of characters
        if isinstance(fields, str):
            fields = [fields]
        self._fields.extend(fields)
        return self

    def add_select(self, field: str) -> "QueryBuilder":
        self._fields.append(field)
        return self

    def from_(self, name: str) -> "QueryBuilder":
        self._object = name
        return self

    # Filtering

    def _add_clause(
        self, column: str, operator: Optional[str], value: str, boolean: str
    ) -> "QueryBuilder":
        self._where.append(
            Clause(column=column, operator=operator, value=value, boolean=boolean)
        )
        return self

    def where(
        self, column: str, operator: str, value: Any, boolean: str = "AND"
    ) -> "QueryBuilder":
        """
        Add a condition; the value is formatted as a SOQL literal.

        Strings are single-quoted, booleans become true/false, None becomes
        null and everything else is rendered as is.
        """
        return self._add_clause(column, operator, prepare_value(value), boolean)

    def or_where(self, column: str, operator: str, value: Any) -> "QueryBuilder":
        return self.where(column, operator, value, "OR")

    def where_date(
        self, column: str, operator: str, value: Any, boolean: str = "AND"
    ) -> "QueryBuilder":
        """
        Add a condition whose value is emitted unquoted, e.g. 2019-10-10.

        None still renders as null.
        """
        literal = NullValue() if value is None else RawValue(value=str(value))
        return self._add_clause(column, operator, literal.render(), boolean)

    def or_where_date(self, column: str, operator: str, value: Any) -> "QueryBuilder":
        return self.where_date(column, operator, value, "OR")

    def where_column(
        self, conditions: Iterable[Sequence[Any]], boolean: str = "AND"
    ) -> "QueryBuilder":
        """
        Add one condition per (column, operator, value) triple.

        Args:
            conditions: Triples such as [("A", ">", 3), ("B", "<", 8)]
            boolean: Connective used for every added condition
        """
        # Items past the third are ignored
        for condition in conditions:
            self.where(condition[0], condition[1], condition[2], boolean)
        return self

    def where_in(
        self,
        column: str,
        restrictions: Iterable[Any],
        boolean: str = "AND",
        negate: bool = False,
    ) -> "QueryBuilder":
        values = ", ".join(prepare_value(r) for r in restrictions)
        operator = "NOT IN" if negate else "IN"
        return self._add_clause(column, operator, f"({values})", boolean)

    def where_not_in(self, column: str, restrictions: Iterable[Any]) -> "QueryBuilder":
        return self.where_in(column, restrictions, "AND", True)

    def or_where_in(self, column: str, restrictions: Iterable[Any]) -> "QueryBuilder":
        return self.where_in(column, restrictions, "OR")

    def or_where_not_in(self, column: str, restrictions: Iterable[Any]) -> "QueryBuilder":
        return self.where_in(column, restrictions, "OR", True)

    def where_function(
        self, column: str, function: str, value: Any, boolean: str = "AND"
    ) -> "QueryBuilder":
        """
        Add a condition of the form `column function(value)`.

        A list value is formatted element by element and comma-joined,
        e.g. where_function("Tags__c", "INCLUDES", ["a", "b"]) renders
        Tags__c INCLUDES('a', 'b').
        """
        if isinstance(value, list):
            prepared = ", ".join(prepare_value(v) for v in value)
        else:
            prepared = prepare_value(value)
        return self._add_clause(column, None, f"{function}({prepared})", boolean)

    # Grouping

    def start_where(self) -> "QueryBuilder":
        """Open a parenthesis before the next condition added."""
        self._group_starts.append(len(self._where))
        return self

    def end_where(self) -> "QueryBuilder":
        """Close a parenthesis after the last condition added."""
        self._group_ends.append(len(self._where) - 1)
        return self

    # Ordering and paging

    def order_by(self, column: str, direction: Optional[str] = None) -> "QueryBuilder":
        direction = direction or get_settings().default_direction
        self._orders.append(f"{column} {direction}")
        return self

    def order_by_desc(self, column: str) -> "QueryBuilder":
        return self.order_by(column, "DESC")

    def limit(self, limit: int) -> "QueryBuilder":
        self._limit = limit
        return self

    def offset(self, offset: int) -> "QueryBuilder":
        self._offset = offset
        return self

    # Rendering

    def _validate(self) -> None:
        if not self._object:
            raise InvalidQueryError("Query must contain an sObject name")
        if not self._fields:
            raise InvalidQueryError("Query must contain fields for select")
        if len(self._group_starts) != len(self._group_ends):
            raise InvalidQueryError(
                f"Unbalanced where grouping: {len(self._group_starts)} start(s) "
                f"and {len(self._group_ends)} end(s)"
            )

    def _render_where(self) -> str:
        parts: List[str] = []
        for i, clause in enumerate(self._where):
            column = "(" * self._group_starts.count(i) + clause.column
            value = clause.value + ")" * self._group_ends.count(i)
            tokens = [column, value] if clause.operator is None else [column, clause.operator, value]
            text = " ".join(tokens)
            if i > 0:
                text = f"{clause.boolean} {text}"
            parts.append(text)
        return " ".join(parts)

    def to_soql(self) -> str:
        """
        Render the accumulated state as a SOQL query.

        Returns:
            The query string

        Raises:
            InvalidQueryError: If the sObject or fields are missing, or
                start_where()/end_where() calls are unbalanced
        """
        self._validate()

        soql = "SELECT " + ", ".join(self.fields)
        soql += " FROM " + self._object

        if self._where:
            soql += " WHERE " + self._render_where()

        if self._orders:
            soql += " ORDER BY " + ", ".join(self._orders)

        # 0 means "not set" for both limit and offset
        if self._limit:
            soql += f" LIMIT {self._limit}"

        if self._offset:
            soql += f" OFFSET {self._offset}"

        logger.debug("Rendered SOQL query: %s", soql)
        return soql
