from .classes import MockCursor, RowCursor, MockColumnMetadata, ColumnMetadata, ResultSetLike
from .utils.proxy import ResultSetProxy, create_mock_cursor
from .exceptions import (
    MockCursorError,
    InvalidArgumentType,
    ColumnNotFound,
    CursorPositionError,
    CursorStateError,
    ColumnIndexOutOfRange,
    CoercionError,
    UnsupportedOperation,
)

__all__ = [
    "MockCursor",
    "RowCursor",
    "MockColumnMetadata",
    "ColumnMetadata",
    "ResultSetLike",
    "ResultSetProxy",
    "create_mock_cursor",
    "MockCursorError",
    "InvalidArgumentType",
    "ColumnNotFound",
    "CursorPositionError",
    "CursorStateError",
    "ColumnIndexOutOfRange",
    "CoercionError",
    "UnsupportedOperation",
]
