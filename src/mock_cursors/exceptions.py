class MockCursorError(Exception):
    """Base class for every error raised by a MockCursor (the mocked cursor interface's exception type)."""


class InvalidArgumentType(MockCursorError, TypeError):
    """Raised when a column reference is neither an integer position nor a string column name."""

    def __init__(self, argument:object, missing:bool=False):
        self.argument = argument
        if missing:
            super().__init__('A column reference (int position or str name) is required.')
        else:
            super().__init__(f'{argument!r} must be an int position or a str column name (got {type(argument).__name__}).')


class ColumnNotFound(MockCursorError, LookupError):
    """Raised when a column name does not match any column in the current row's range."""

    def __init__(self, column_name:str):
        self.column_name = column_name
        super().__init__(f'"{column_name}" is not a valid column name.')


class CursorPositionError(MockCursorError, IndexError):
    """Base class for reads that cannot be served from the current cursor position."""


class CursorStateError(CursorPositionError):
    """Raised when a column value is read before the cursor has been positioned on a row."""

    def __init__(self, calling_func:str='read'):
        self.calling_func = calling_func
        super().__init__(f'Cannot {calling_func}: the cursor is not positioned on a row (call next() first).')


class ColumnIndexOutOfRange(CursorPositionError):
    """Raised when a 1-based column position falls outside the current row."""

    def __init__(self, position:int, row_length:int):
        self.position = position
        self.row_length = row_length
        super().__init__(f'Column position {position} is out of range; valid positions are 1..{row_length}.')


class CoercionError(MockCursorError, ValueError):
    """Raised when a raw column value cannot be parsed into the requested type."""

    def __init__(self, value:object, target_type:str, reason:str):
        self.value = value
        self.target_type = target_type
        self.reason = reason
        super().__init__(reason)


class UnsupportedOperation(MockCursorError, NotImplementedError):
    """Raised when an operation name is not in the MockCursor routing table."""

    def __init__(self, operation_name:str):
        self.operation_name = operation_name
        super().__init__(f'Unsupported method: {operation_name}')
