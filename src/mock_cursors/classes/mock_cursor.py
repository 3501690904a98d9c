from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Sequence

import numpy as np
import pandas as pd

from ..utils.general import LoggingMixin, normalize_row
from ..exceptions import InvalidArgumentType, ColumnNotFound, CoercionError, UnsupportedOperation
from .column_metadata import ColumnMetadata, MockColumnMetadata
from .result_set import ColumnReference
from .row_cursor import RowCursor


# ---- Column references (tagged variant: by position or by name) ---- #
@dataclass(frozen=True)
class ByPosition:
    position:int


@dataclass(frozen=True)
class ByName:
    name:str


ColumnRef = ByPosition | ByName


def column_ref_from_argument(argument:Any) -> ColumnRef:
    """Converts a raw column reference argument into a ByPosition or ByName."""

    # NOTE: bool is a subclass of int but is not a column position
    if isinstance(argument, (int, np.integer)) and not isinstance(argument, (bool, np.bool_)):
        return ByPosition(int(argument))
    if isinstance(argument, str):
        return ByName(argument)
    raise InvalidArgumentType(argument)


# ---- Typed coercion ---- #

# Signed bounds for the integer accessors
_INTEGER_BOUNDS:dict[str, np.iinfo] = {
    "byte": np.iinfo(np.int8),
    "short": np.iinfo(np.int16),
    "int": np.iinfo(np.int32),
    "long": np.iinfo(np.int64),
}

# Value returned when the raw value is NULL
_NULL_VALUES:dict[str, Any] = {
    "boolean": False,
    "byte": 0,
    "short": 0,
    "int": 0,
    "long": 0,
    "float": 0.0,
    "double": 0.0,
    "string": None,
    "object": None,
}


def coerce_text(text:str, target_type:str) -> Any:
    """Parses the textual form of a column value into [target_type]. Raises ValueError if it can't be parsed.

    NOTE:
        - boolean is True only for "true" (any case); every other text is False, never an error
        - byte/short/int/long must be integer text within the signed 8/16/32/64-bit range
        - float is rounded to single precision
    """
    match target_type:

        # BOOLEAN
        case "boolean":
            return text.strip().lower() == "true"

        # INTEGERS
        case "byte" | "short" | "int" | "long":
            value:int = int(text)
            bounds = _INTEGER_BOUNDS[target_type]
            if value < bounds.min or value > bounds.max:
                raise ValueError(f'Value out of range. Value:"{text}" Radix:10')
            return value

        # FLOATING POINT
        case "double":
            return float(text)
        case "float":
            return float(np.float32(text))

        # TEXT
        case "string":
            return text

        # UNSUPPORTED
        case _:
            raise ValueError(f'Unknown target type: {target_type}')


# MockCursor class definition
class MockCursor(LoggingMixin):
    """In-memory, forward-only, read-only result set for tests.

    Every call goes through handle(operation_name, arguments), which routes the operation by name to a typed
    accessor, to the RowCursor, or to the identity operations. The named methods on this class (next(),
    get_int(), ...) are thin wrappers around handle().

    Example:
        cursor = MockCursor.from_columns(["ID", "NAME"], [[1, "Alice"], [2, "Bob"]])
        while cursor.next():
            cursor.get_int("id"), cursor.get_string(2)
    """

    metadata:ColumnMetadata                         # Column names for this result
    row_cursor:RowCursor                            # Position, remaining rows, null flag
    owner:object                                    # The object identity operations refer to (a proxy, or self)
    _routes:dict[str, Callable[[tuple], Any]]       # Operation name -> handler(arguments)


    def __init__(
            self,
            metadata:ColumnMetadata,
            rows:Iterable[Sequence[Any]]|None=None,
            *,
            enable_logging:bool=False,
            log_file_path:str='./mock_cursor.log',
            logger_name:str='mock_cursor_logger',
            logger_min_level:int=logging.DEBUG,
            logger_format:str="%(asctime)s - %(levelname)s: %(message)s"
        ):

        # Setup logging if configured
        self.configure_logging(enable_logging, log_file_path, logger_name, logger_min_level, logger_format)

        # Set the base attributes
        self.metadata = metadata
        self.row_cursor = RowCursor(rows)
        self.row_cursor.share_logging(self)
        self.owner = self

        # Build the routing table
        self._routes = {
            "get_metadata": lambda args: self.metadata,
            "next": lambda args: self.row_cursor.advance(),
            "previous": lambda args: None,
            "close": lambda args: None,
            "was_null": lambda args: self.row_cursor.was_last_value_null(),
            "is_last": lambda args: self.row_cursor.is_at_last_row(),
            "__hash__": lambda args: id(self.owner),
            "__str__": lambda args: self._describe(),
            "__repr__": lambda args: self._describe(),
            "__eq__": lambda args: bool(args) and args[0] is self.owner,
        }
        for type_name in _NULL_VALUES:
            self._routes[f"get_{type_name}"] = self._accessor_route(type_name)

        # Cursor interface spellings of the same operations
        aliases:dict[str, str] = {
            "getMetaData": "get_metadata",
            "wasNull": "was_null",
            "isLast": "is_last",
            "hashCode": "__hash__",
            "toString": "__str__",
            "equals": "__eq__",
        }
        for type_name in _NULL_VALUES:
            aliases[f"get{type_name.capitalize()}"] = f"get_{type_name}"
        for alias, target in aliases.items():
            self._routes[alias] = self._routes[target]


    # ---- Alternate constructors ---- #
    @classmethod
    def from_columns(cls, column_names:Iterable[str], rows:Iterable[Sequence[Any]]|None=None, **kwargs) -> "MockCursor":
        """Builds a MockCursor from a list of column names and rows."""
        return cls(MockColumnMetadata(column_names), rows, **kwargs)


    @classmethod
    def from_dataframe(cls, df:pd.DataFrame, **kwargs) -> "MockCursor":
        """Builds a MockCursor over the rows of a DataFrame. Missing values (NaN, NA, NaT) read as NULL.

        NOTE:
            - columns are converted to pandas nullable dtypes first, so an integer column with gaps (stored as
              float64) still reads back as integers
            - numpy scalars are unwrapped to plain Python values
            - the index is not included; use df.reset_index() first to expose it as a column
        """
        rows = map(normalize_row, df.convert_dtypes().itertuples(index=False, name=None))
        return cls(MockColumnMetadata.from_dataframe(df), rows, **kwargs)


    @classmethod
    def from_db_cursor(cls, cursor:Any, **kwargs) -> "MockCursor":
        """Snapshots an executed DB-API cursor (e.g. sqlite3.Cursor): its description and all remaining rows."""
        metadata = MockColumnMetadata.from_description(cursor.description)
        rows:list = cursor.fetchall() if cursor.description else []
        return cls(metadata, rows, **kwargs)


    # ---- Dispatch ---- #
    def handle(self, operation_name:str, arguments:Sequence[Any]|None=None) -> Any:
        """Runs the named operation with the given arguments and returns its result."""
        args:tuple = tuple(arguments) if arguments is not None else ()

        # Find the handler
        handler = self._routes.get(operation_name)
        if handler is None:
            e = UnsupportedOperation(operation_name)
            self.log_error('handle()', e)
            raise e

        self.log_debug('handle()', '%s%r', operation_name, args)
        return handler(args)


    def supported_operations(self) -> list[str]:
        """Returns every operation name handle() accepts."""
        return sorted(self._routes)


    def resolve_column(self, arguments:Sequence[Any]) -> int:
        """Returns the 1-based column position named by the first argument (an int position or a column name)."""
        if not arguments:
            e = InvalidArgumentType(None, missing=True)
            self.log_error('resolve_column()', e)
            raise e

        try:
            ref:ColumnRef = column_ref_from_argument(arguments[0])
        except InvalidArgumentType as e:
            self.log_error('resolve_column()', e)
            raise

        match ref:
            case ByPosition(position=position):
                return position
            case ByName(name=name):
                return self._column_name_to_position(name)


    def _column_name_to_position(self, column_name:str) -> int:
        """Case-insensitive lookup of [column_name] over the current row's columns. Returns a 1-based position.

        NOTE: only positions that both the current row and the metadata cover are searched
        """
        wanted:str = column_name.casefold()
        row_length:int = self.row_cursor.row_length(f'look up column "{column_name}"')
        for position in range(1, min(row_length, self.metadata.column_count()) + 1):
            if self.metadata.column_name(position).casefold() == wanted:
                return position

        e = ColumnNotFound(column_name)
        self.log_error('_column_name_to_position()', e)
        raise e


    def _accessor_route(self, type_name:str) -> Callable[[tuple], Any]:
        """Returns the routing table handler for get_[type_name]."""
        def route(args:tuple) -> Any:
            return self._read(self.resolve_column(args), type_name)
        return route


    def _read(self, position:int, type_name:str) -> Any:
        """Reads the value at [position], records whether it was NULL, and coerces it to [type_name]."""
        raw:Any = self.row_cursor.current_row_value(position)
        self.row_cursor.mark_value(raw)

        # NULL -> the type's null value
        if raw is None:
            return _NULL_VALUES[type_name]

        # Objects are returned as-is
        if type_name == "object":
            return raw

        try:
            return coerce_text(str(raw), type_name)
        except ValueError as e:
            err = CoercionError(raw, type_name, str(e))
            self.log_error('_read()', err)
            raise err from e


    def _describe(self) -> str:
        return f"MockCursor {id(self.owner)}"


    # NOTE: == and hash() keep Python's default identity semantics on the engine itself; the "__eq__" and
    # "__hash__" routes refer to [owner], which is a ResultSetProxy once the engine is wrapped
    def __str__(self) -> str:
        return self.handle("__str__")

    def __repr__(self) -> str:
        return self.handle("__repr__")


    # ---- Named operations (all forward to handle()) ---- #
    def get_metadata(self) -> ColumnMetadata:
        return self.handle("get_metadata")

    def next(self) -> bool:
        return self.handle("next")

    def previous(self) -> None:
        return self.handle("previous")

    def close(self) -> None:
        return self.handle("close")

    def is_last(self) -> bool:
        return self.handle("is_last")

    def was_null(self) -> bool:
        return self.handle("was_null")

    def get_boolean(self, column:ColumnReference) -> bool:
        return self.handle("get_boolean", (column,))

    def get_byte(self, column:ColumnReference) -> int:
        return self.handle("get_byte", (column,))

    def get_short(self, column:ColumnReference) -> int:
        return self.handle("get_short", (column,))

    def get_int(self, column:ColumnReference) -> int:
        return self.handle("get_int", (column,))

    def get_long(self, column:ColumnReference) -> int:
        return self.handle("get_long", (column,))

    def get_float(self, column:ColumnReference) -> float:
        return self.handle("get_float", (column,))

    def get_double(self, column:ColumnReference) -> float:
        return self.handle("get_double", (column,))

    def get_string(self, column:ColumnReference) -> str|None:
        return self.handle("get_string", (column,))

    def get_object(self, column:ColumnReference) -> Any:
        return self.handle("get_object", (column,))
