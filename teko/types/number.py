"""Exact Gaussian rationals.

A Gaussian rational is a complex number whose real and imaginary parts are
both exact rationals. Parts are stored as `fractions.Fraction`, which keeps
them in lowest terms with arbitrary-precision numerators and denominators.

The only inexact number in the language is the `pi` approximation, a plain
Python float. Mixing a float into arithmetic yields a float (or complex)
result; everything else stays exact.
"""

from __future__ import annotations

from fractions import Fraction
from numbers import Rational

from teko.errors import TekoTypeError, TekoDomainError


class Gaussian:
    __slots__ = ("real", "imag")

    def __init__(self, real: Rational | int = 0, imag: Rational | int = 0):
        object.__setattr__(self, "real", Fraction(real))
        object.__setattr__(self, "imag", Fraction(imag))

    def __setattr__(self, name, value):
        raise AttributeError("Gaussian is immutable")

    # --- inspection ---
    @property
    def is_real(self) -> bool:
        return self.imag == 0

    @property
    def is_integer(self) -> bool:
        return self.is_real and self.real.denominator == 1

    def conjugate(self) -> Gaussian:
        return Gaussian(self.real, -self.imag)

    def __complex__(self) -> complex:
        return complex(float(self.real), float(self.imag))

    def __float__(self) -> float:
        if not self.is_real:
            raise TekoTypeError(f"Cannot convert {self} to a real float")
        return float(self.real)

    def __int__(self) -> int:
        if not self.is_integer:
            raise TekoTypeError(f"Expected an integer, got {self}")
        return self.real.numerator

    # --- equality / hashing ---
    def __eq__(self, other) -> bool:
        if isinstance(other, Gaussian):
            return self.real == other.real and self.imag == other.imag
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.real, self.imag))

    # --- ordering (real values only) ---
    def _real_part(self, other: Gaussian) -> tuple[Fraction, Fraction]:
        if not (self.is_real and other.is_real):
            raise TekoTypeError(f"Cannot order complex numbers {self} and {other}")
        return self.real, other.real

    def __lt__(self, other):
        if not isinstance(other, Gaussian):
            return NotImplemented
        a, b = self._real_part(other)
        return a < b

    def __le__(self, other):
        if not isinstance(other, Gaussian):
            return NotImplemented
        a, b = self._real_part(other)
        return a <= b

    def __gt__(self, other):
        if not isinstance(other, Gaussian):
            return NotImplemented
        a, b = self._real_part(other)
        return a > b

    def __ge__(self, other):
        if not isinstance(other, Gaussian):
            return NotImplemented
        a, b = self._real_part(other)
        return a >= b

    # --- arithmetic ---
    def __neg__(self) -> Gaussian:
        return Gaussian(-self.real, -self.imag)

    def __add__(self, other):
        if isinstance(other, Gaussian):
            return Gaussian(self.real + other.real, self.imag + other.imag)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Gaussian):
            return Gaussian(self.real - other.real, self.imag - other.imag)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Gaussian):
            a, b, c, d = self.real, self.imag, other.real, other.imag
            return Gaussian(a * c - b * d, a * d + b * c)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Gaussian):
            a, b, c, d = self.real, self.imag, other.real, other.imag
            norm = c * c + d * d
            if norm == 0:
                raise TekoDomainError("Division by zero")
            return Gaussian((a * c + b * d) / norm, (b * c - a * d) / norm)
        return NotImplemented

    # --- printing ---
    def __str__(self) -> str:
        if self.is_real:
            return str(self.real)
        imag = "" if abs(self.imag) == 1 else str(abs(self.imag))
        sign = "-" if self.imag < 0 else "+"
        return f"{self.real}{sign}{imag}i"

    def __repr__(self) -> str:
        return f"Gaussian({self.real!s}, {self.imag!s})"


def to_inexact(value: Gaussian | float | complex) -> float | complex:
    """Coerce a number to the host's inexact representation."""
    if isinstance(value, Gaussian):
        return float(value.real) if value.is_real else complex(value)
    return value


def is_number(value) -> bool:
    return isinstance(value, (Gaussian, float, complex)) and not isinstance(value, bool)
