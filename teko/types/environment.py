"""Runtime environment for Teko.

The Environment is one table per interpreter run mapping each Symbol to a
binding stack. The top cell of a stack is the visible binding. Function and
macro calls push parameters on entry and pop them on exit, which is all there
is to dynamic scope: a free variable resolves to whatever the current call
chain has most recently pushed.

Numerals are constants that are never stored up front. On a miss, the text of
the symbol is handed to the numeric resolver and, if it spells a number, an
immutable binding is installed on the spot.
"""

from __future__ import annotations

import logging
from typing import Iterator

from teko import Value
from teko.errors import DuplicateDefinition, UnboundVariable, ImmutableBinding
from teko.reader.numeric import resolve as resolve_numeral
from teko.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Cell:
    __slots__ = ("value", "immutable")

    def __init__(self, value: Value, immutable: bool = False):
        self.value = value
        self.immutable = immutable

    def __repr__(self) -> str:
        flag = " const" if self.immutable else ""
        return f"<Cell{flag} {self.value!r}>"


class Environment:
    """Mapping from Symbols to stacks of binding cells."""

    __slots__ = ("stacks",)

    def __init__(self):
        self.stacks: dict[Symbol, list[Cell]] = {}

    def _stack(self, name: Symbol) -> list[Cell] | None:
        """Return the binding stack for `name`, seeding numerals on demand."""
        stack = self.stacks.get(name)
        if stack:
            return stack
        number = resolve_numeral(name.id)
        if number is None:
            return None
        stack = [Cell(number, immutable=True)]
        self.stacks[name] = stack
        return stack

    def create(self, name: Symbol, value: Value, immutable: bool = False) -> None:
        """Install a fresh one-cell binding for `name`.

        Raises DuplicateDefinition if `name` is already bound (numerals are
        always considered bound).
        """
        if self._stack(name):
            raise DuplicateDefinition(f"Cannot define {name}: it is already bound", name.line, name.column)
        self.stacks[name] = [Cell(value, immutable)]
        logger.debug("create %s%s", name, " (immutable)" if immutable else "")

    def mutate(self, name: Symbol, value: Value) -> None:
        """Replace the value of the top cell for `name` in place.

        Raises UnboundVariable if `name` has no binding and ImmutableBinding
        if the top cell is a constant.
        """
        stack = self._stack(name)
        if not stack:
            raise UnboundVariable(f"Cannot set unbound symbol {name}", name.line, name.column)
        top = stack[-1]
        if top.immutable:
            raise ImmutableBinding(f"Cannot set constant {name}", name.line, name.column)
        top.value = value

    def push(self, name: Symbol, value: Value) -> None:
        stack = self.stacks.get(name)
        if stack is None:
            self.stacks[name] = [Cell(value)]
        else:
            stack.append(Cell(value))

    def pop(self, name: Symbol) -> None:
        stack = self.stacks.get(name)
        if not stack:
            # Pushes and pops are paired by the evaluator; this is a host bug.
            raise RuntimeError(f"Binding stack for {name} is empty")
        stack.pop()
        if not stack:
            del self.stacks[name]

    def lookup(self, name: Symbol) -> Value:
        """Return the visible value of `name`, or raise UnboundVariable."""
        stack = self.stacks.get(name)
        if stack:
            return stack[-1].value
        stack = self._stack(name)
        if not stack:
            raise UnboundVariable(f"Unbound symbol {name}", name.line, name.column)
        return stack[-1].value

    def is_bound(self, name: Symbol) -> bool:
        return bool(self._stack(name))

    def depth(self, name: Symbol) -> int:
        """Number of cells on the binding stack of `name` (0 when unbound)."""
        return len(self.stacks.get(name, ()))

    def __contains__(self, name: Symbol) -> bool:
        return self.is_bound(name)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(list(self.stacks))

    def __repr__(self) -> str:
        return f"<Environment {len(self.stacks)} symbols>"
