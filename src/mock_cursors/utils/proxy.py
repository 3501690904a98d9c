from __future__ import annotations
from typing import Any, Iterable, Sequence

from ..classes.column_metadata import ColumnMetadata
from ..classes.mock_cursor import MockCursor


class ResultSetProxy(object):
    """Presents a MockCursor's handle() contract as an ordinary object: every method call on the proxy is
    forwarded to handle() as (method name, arguments). Equality, hashing, and str()/repr() go through the
    engine's identity operations, so they are based on this proxy's identity."""

    __slots__ = ("_handler",)

    def __init__(self, handler:MockCursor):
        object.__setattr__(self, "_handler", handler)
        handler.owner = self


    def __getattr__(self, name:str):
        # NOTE: only reached for names not defined on the proxy itself
        if name.startswith("__"):
            raise AttributeError(name)
        handler:MockCursor = object.__getattribute__(self, "_handler")

        def forward(*args:Any) -> Any:
            return handler.handle(name, args)
        forward.__name__ = name
        return forward


    def __setattr__(self, name:str, value:Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")


    def __eq__(self, other:object) -> bool:
        return self._handler.handle("__eq__", (other,))

    def __ne__(self, other:object) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return self._handler.handle("__hash__")

    def __str__(self) -> str:
        return self._handler.handle("__str__")

    def __repr__(self) -> str:
        return self._handler.handle("__repr__")


def create_mock_cursor(metadata:ColumnMetadata, rows:Iterable[Sequence[Any]]|None=None, **kwargs) -> ResultSetProxy:
    """Builds a MockCursor and wraps it in a ResultSetProxy. [rows] of None means an empty result."""
    return ResultSetProxy(MockCursor(metadata, rows, **kwargs))
