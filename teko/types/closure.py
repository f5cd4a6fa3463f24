"""Callable values: user closures, user macros and host primitives.

Closures carry no environment. Scoping is dynamic, so free variables in a
body resolve against whatever bindings are live when the body runs.
"""

from __future__ import annotations

from io import StringIO
from typing import Callable

from teko import Expression, Value
from teko.types.symbol import Symbol


def _write_body(buffer: StringIO, body: list[Expression]) -> None:
    from teko.printer import to_string
    for form in body:
        buffer.write(" ")
        buffer.write(to_string(form))


class Function:
    """A first-class function: ordered parameter symbols plus body forms."""

    __slots__ = ("params", "body")

    def __init__(self, params: list[Symbol], body: list[Expression]):
        self.params: list[Symbol] = params
        self.body: list[Expression] = body

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(fn (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(")")
            _write_body(buffer, self.body)
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)


class Macro:
    """A first-class macro: one parameter bound to the raw argument list."""

    __slots__ = ("param", "body")

    def __init__(self, param: Symbol, body: list[Expression]):
        self.param: Symbol = param
        self.body: list[Expression] = body

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write(f"(mo {self.param}")
            _write_body(buffer, self.body)
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)


class Primitive:
    """Host function. Called as fn(evaluator, args) with evaluated args."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[..., Value]):
        self.name = name
        self.fn = fn

    def __repr__(self) -> str:
        return f"<primitive {self.name}>"


class PrimitiveMacro:
    """Host macro. Called as fn(evaluator, args) with unevaluated args."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[..., Value]):
        self.name = name
        self.fn = fn

    def __repr__(self) -> str:
        return f"<primitive-macro {self.name}>"
