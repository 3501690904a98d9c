from __future__ import annotations
from typing import Any, Iterable, Iterator, Sequence

from ..utils.general import LoggingMixin
from ..exceptions import CursorStateError, ColumnIndexOutOfRange

# NOTE: a row is stored as an immutable tuple of nullable values (None == SQL NULL)
Row = tuple[Any, ...]

# Marker for "nothing buffered" in the look-ahead slot (None is a legal row value)
_EMPTY = object()


# RowCursor class definition
class RowCursor(LoggingMixin):
    """Forward-only cursor over a single-pass sequence of rows.

    States:
        - UNPOSITIONED: no advance() has succeeded yet; current_row is None
        - POSITIONED: current_row holds the last row fetched by advance()
    There is no separate exhausted state: once the sequence runs out, advance() returns False and current_row
    keeps the last row that was fetched.

    The null flag records whether the most recent column read was NULL. Movement never changes it.
    """

    current_row:Row|None            # The row the cursor is on, or None before the first successful advance()
    rows_consumed:int               # Number of successful advance() calls
    _rows:Iterator[Sequence[Any]]   # The remaining rows
    _peeked:Any                     # One-row look-ahead buffer (or _EMPTY)
    _last_value_null:bool           # Null flag for the most recent read


    def __init__(self, rows:Iterable[Sequence[Any]]|None=None):

        # NOTE: no rows is the same as an empty sequence
        if rows is None: rows = ()

        self._rows = iter(rows)
        self._peeked = _EMPTY
        self.current_row = None
        self.rows_consumed = 0
        self._last_value_null = False


    # ---- Look-ahead over the remaining rows ---- #
    def _has_next(self) -> bool:
        """Returns True if another row remains, buffering it without consuming it."""
        if self._peeked is _EMPTY:
            self._peeked = next(self._rows, _EMPTY)
        return self._peeked is not _EMPTY


    def _take_next(self) -> Sequence[Any]:
        """Removes and returns the buffered row. Only call after _has_next() returned True."""
        row = self._peeked
        self._peeked = _EMPTY
        return row


    # ---- Movement ---- #
    def advance(self) -> bool:
        """Moves to the next row. Returns False (and stays on the current row) when no rows remain."""
        if not self._has_next():
            self.log_debug('advance()', 'No rows remain after %d row(s).', self.rows_consumed)
            return False

        self.current_row = tuple(self._take_next())
        self.rows_consumed += 1
        self.log_debug('advance()', 'Positioned on row %d.', self.rows_consumed)
        return True


    def is_at_last_row(self) -> bool:
        """Returns True if no further rows remain.

        NOTE: this is look-ahead on the remaining rows, so it is True before any advance() on an empty cursor
        and False before any advance() on a non-empty one.
        """
        return not self._has_next()


    def is_positioned(self) -> bool:
        """Returns True once advance() has succeeded at least once."""
        return self.current_row is not None


    # ---- Reading the current row ---- #
    def row_length(self, calling_func:str='read the current row') -> int:
        """Returns the number of values in the current row."""
        if self.current_row is None:
            e = CursorStateError(calling_func)
            self.log_error('row_length()', e)
            raise e
        return len(self.current_row)


    def current_row_value(self, position:int) -> Any:
        """Returns the raw value at the given 1-based position in the current row."""
        length:int = self.row_length(f'read column {position}')

        # NOTE: positions are 1-based, so 0 and negatives are out of range too
        if position < 1 or position > length:
            e = ColumnIndexOutOfRange(position, length)
            self.log_error('current_row_value()', e)
            raise e

        return self.current_row[position - 1]


    # ---- Null bookkeeping ---- #
    def mark_value(self, raw:Any) -> None:
        """Sets the null flag from the value that was just read."""
        self._last_value_null = raw is None


    def was_last_value_null(self) -> bool:
        return self._last_value_null
