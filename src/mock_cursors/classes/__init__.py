from .column_metadata import ColumnMetadata, MockColumnMetadata
from .result_set import ResultSetLike, ColumnReference
from .row_cursor import RowCursor, Row
from .mock_cursor import MockCursor, ByPosition, ByName, ColumnRef, column_ref_from_argument, coerce_text

__all__ = [
    "ColumnMetadata",
    "MockColumnMetadata",
    "ResultSetLike",
    "ColumnReference",
    "RowCursor",
    "Row",
    "MockCursor",
    "ByPosition",
    "ByName",
    "ColumnRef",
    "column_ref_from_argument",
    "coerce_text",
]
