"""Printed forms of Teko values."""

from __future__ import annotations

from teko import Value
from teko.types.closure import Function, Macro, Primitive, PrimitiveMacro
from teko.types.error_value import Error
from teko.types.null import NullType
from teko.types.number import Gaussian
from teko.types.symbol import Symbol


def to_string(value: Value) -> str:
    """Render a value the way it would be written back as source."""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, NullType):
        return "()"
    if isinstance(value, (Symbol, Gaussian)):
        return str(value)
    if isinstance(value, str):
        return _string_source(value)
    if isinstance(value, list):
        return "(" + " ".join(to_string(v) for v in value) + ")"
    if isinstance(value, Error):
        return f"(error {to_string(value.payload)})"
    if isinstance(value, (Function, Macro)):
        return str(value)
    if isinstance(value, (Primitive, PrimitiveMacro)):
        return repr(value)
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, complex):
        return f"{value.real!r}{'+' if value.imag >= 0 else '-'}{abs(value.imag)!r}i"
    return repr(value)


def display(value: Value) -> str:
    """Like to_string, but strings are written raw."""
    if isinstance(value, str):
        return value
    return to_string(value)


def _is_word_char(ch: str) -> bool:
    return not ch.isspace() and ch not in "()"


def _string_source(text: str) -> str:
    """Write `text` as a (" ...) form that reads back as the same string.

    Runs of word characters are written as words; a single space between two
    words is implied by the macro. Any other character becomes a code in a
    sub-list, which the macro splices in without spacing.
    """
    parts: list[str] = []
    codes: list[str] = []
    last_was_word = False
    i, n = 0, len(text)
    while i < n:
        ch = text[i]
        if _is_word_char(ch):
            j = i
            while j < n and _is_word_char(text[j]):
                j += 1
            if codes:
                parts.append("(" + " ".join(codes) + ")")
                codes = []
            parts.append(text[i:j])
            last_was_word = True
            i = j
        elif ch == " " and last_was_word and not codes and i + 1 < n and _is_word_char(text[i + 1]):
            # Implied separator: the next word joins with one space.
            i += 1
        else:
            codes.append(str(ord(ch)))
            last_was_word = False
            i += 1
    if codes:
        parts.append("(" + " ".join(codes) + ")")
    return "(" + " ".join(['"'] + parts) + ")"
