from __future__ import annotations
import sys


class Symbol:
    """An atom token. Interned so equality and hashing stay cheap.

    Symbols read from source remember where they were read; the position
    takes no part in equality or hashing.
    """

    __slots__ = ("id", "line", "column")

    def __init__(self, name: str, line: int | None = None, column: int | None = None):
        self.id = sys.intern(name)
        self.line = line
        self.column = column

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


def position_of(expr) -> tuple[int | None, int | None]:
    """(line, column) of `expr`, or of the leftmost positioned symbol in a list."""
    pending = [expr]
    while pending:
        item = pending.pop()
        if isinstance(item, Symbol):
            if item.line is not None:
                return item.line, item.column
        elif isinstance(item, list):
            pending.extend(reversed(item))
    return None, None
