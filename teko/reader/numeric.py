"""Numeric literal resolution.

Numerals are ordinary atoms: the environment asks this module whether an
unbound symbol's text spells a number before reporting it unbound.

Grammar (no whitespace, case-sensitive):

    number := sign? real (sign real? 'i')?
    real   := (digits '/' digits | digits '.' digits? | '.' digits | digits) ('e' sign? digits)?

Examples: 3, -3, 3., .5, 3.14, 1/3, 2e10, 1.5e-3, 2+3i, 1/2-i

Text that matches the grammar but is too large to hold exactly (an exponent
beyond MAX_EXPONENT, or more than MAX_DIGITS digits in one part) raises
TekoDomainError rather than being treated as an ordinary symbol.
"""

from __future__ import annotations

import re
from fractions import Fraction
from typing import Optional

from teko.errors import TekoDomainError
from teko.types.number import Gaussian


MAX_EXPONENT = 4096
MAX_DIGITS = 4000

_REAL = r"(?:\d+/\d+|\d+\.\d*|\.\d+|\d+)(?:e[+-]?\d+)?"

NUMBER_RE = re.compile(
    rf"(?P<sign>[+-]?)(?P<real>{_REAL})"
    rf"(?:(?P<isign>[+-])(?P<imag>{_REAL})?i)?"
)


def _parse_real(text: str) -> Optional[Fraction]:
    mantissa, _, exponent = text.partition("e")
    if len(mantissa) > MAX_DIGITS or len(exponent) > MAX_DIGITS:
        raise TekoDomainError(f"Numeral {text[:20]}... has more than {MAX_DIGITS} digits")
    if "/" in mantissa:
        num, den = mantissa.split("/")
        if int(den) == 0:
            return None
        value = Fraction(int(num), int(den))
    else:
        whole, _, decimals = mantissa.partition(".")
        scale = 10 ** len(decimals)
        value = Fraction(int(whole or "0") * scale + int(decimals or "0"), scale)
    if exponent:
        power = int(exponent)
        if abs(power) > MAX_EXPONENT:
            raise TekoDomainError(f"Exponent of {text} is outside [-{MAX_EXPONENT}, {MAX_EXPONENT}]")
        value *= Fraction(10) ** power
    return value


def resolve(text: str) -> Optional[Gaussian]:
    """Return the exact value spelled by `text`, or None if it is not a numeral."""
    m = NUMBER_RE.fullmatch(text)
    if m is None:
        return None

    real = _parse_real(m.group("real"))
    if real is None:
        return None
    if m.group("sign") == "-":
        real = -real

    imag = Fraction(0)
    if m.group("isign"):
        imag_text = m.group("imag")
        imag = _parse_real(imag_text) if imag_text else Fraction(1)
        if imag is None:
            return None
        if m.group("isign") == "-":
            imag = -imag

    return Gaussian(real, imag)


def is_numeral(text: str) -> bool:
    return resolve(text) is not None
