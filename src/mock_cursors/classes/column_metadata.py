from __future__ import annotations
from typing import Protocol, Any, Iterable, Sequence, runtime_checkable

import pandas as pd 


@runtime_checkable
class ColumnMetadata(Protocol):
    """Read-only description of a result's columns. Positions are 1-based."""

    def column_count(self) -> int: ...
    def column_name(self, position:int) -> str: ...


class MockColumnMetadata(object): 
    """Simple ColumnMetadata backed by a tuple of column names."""

    names:tuple[str, ...]       # The column names, in positional order

    def __init__(self, names:Iterable[str]):
        self.names = tuple(str(n) for n in names)


    @classmethod
    def from_description(cls, description:Sequence[Sequence[Any]]|None) -> "MockColumnMetadata":
        """Builds metadata from a DB-API cursor.description (7-item sequences where item 0 is the column name)."""
        if not description: return cls([])
        return cls([d[0] for d in description])


    @classmethod
    def from_dataframe(cls, df:pd.DataFrame) -> "MockColumnMetadata":
        """Builds metadata from the columns of a DataFrame."""
        return cls(df.columns)


    def column_count(self) -> int:
        return len(self.names)


    def column_name(self, position:int) -> str:
        """Returns the name of the column at the given 1-based position."""
        if position < 1 or position > len(self.names):
            raise IndexError(f'Column position {position} is out of range; valid positions are 1..{len(self.names)}.')
        return self.names[position - 1]


    def __repr__(self) -> str:
        return f'MockColumnMetadata({list(self.names)!r})'
