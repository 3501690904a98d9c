from __future__ import annotations
from typing import Protocol, Any, runtime_checkable

from .column_metadata import ColumnMetadata

# NOTE: a column reference is either a 1-based position or a case-insensitive column name
ColumnReference = int | str


@runtime_checkable
class ResultSetLike(Protocol):
    """The forward-only, read-only result set interface that a MockCursor stands in for."""

    # Introspection
    def get_metadata(self) -> ColumnMetadata: ...

    # Movement
    def next(self) -> bool: ...
    def previous(self) -> None: ...
    def is_last(self) -> bool: ...

    # Typed accessors
    def get_boolean(self, column:ColumnReference) -> bool: ...
    def get_byte(self, column:ColumnReference) -> int: ...
    def get_short(self, column:ColumnReference) -> int: ...
    def get_int(self, column:ColumnReference) -> int: ...
    def get_long(self, column:ColumnReference) -> int: ...
    def get_float(self, column:ColumnReference) -> float: ...
    def get_double(self, column:ColumnReference) -> float: ...
    def get_string(self, column:ColumnReference) -> str | None: ...
    def get_object(self, column:ColumnReference) -> Any: ...
    def was_null(self) -> bool: ...

    # Lifecycle
    def close(self) -> None: ...
