"""Builtin macros for Teko (implemented in Python).

A primitive macro is called as fn(evaluator, args) with the raw argument
expressions and returns a value directly; unlike a user macro its result is
not evaluated again.
"""

from __future__ import annotations

from teko import Expression, Value
from teko.errors import ArityMismatch, TekoTypeError
from teko.printer import display
from teko.reader.numeric import resolve as resolve_numeral
from teko.types.closure import PrimitiveMacro
from teko.types.environment import Environment
from teko.types.null import Null
from teko.types.symbol import Symbol


def quote_macro(ev, args: list[Expression]) -> Value:
    """(quote expr) => expr, unevaluated. (quote ()) is Null."""
    if len(args) != 1:
        raise ArityMismatch("quote requires exactly 1 argument")
    expr = args[0]
    return Null if expr == [] else expr


def _char_codes(form: list[Expression]) -> str:
    chars = []
    for item in form:
        code = resolve_numeral(item.id) if isinstance(item, Symbol) else None
        if code is None or not code.is_integer or code.real < 0:
            raise TekoTypeError('(" ...) character codes must be non-negative integers')
        try:
            chars.append(chr(int(code)))
        except (ValueError, OverflowError):
            raise TekoTypeError(f'(" ...) character code {code} is out of range')
    return "".join(chars)


def string_macro(ev, args: list[Expression]) -> str:
    """
    (" word word (code...) word ...) => string

    Adjacent words are joined by a single space. A sub-list of numerals is
    spliced in as raw character codes, and no space is inserted next to it:

        (" Lorem ipsum)            => "Lorem ipsum"
        (" (32) Lorem (10) ipsum)  => " Lorem\\nipsum"
    """
    parts: list[str] = []
    previous_was_word = False
    for item in args:
        if isinstance(item, list):
            parts.append(_char_codes(item))
            previous_was_word = False
        else:
            if previous_was_word:
                parts.append(" ")
            parts.append(display(item))
            previous_was_word = True
    return "".join(parts)


MACROS = {
    "quote": quote_macro,
    '"': string_macro,
}


def register(env: Environment) -> None:
    """Register builtin macros in the provided Environment."""
    for name, fn in MACROS.items():
        env.create(Symbol(name), PrimitiveMacro(name, fn))
