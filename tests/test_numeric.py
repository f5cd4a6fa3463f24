from fractions import Fraction

import pytest

from teko.errors import TekoDomainError, TekoTypeError
from teko.reader.numeric import MAX_DIGITS, MAX_EXPONENT, is_numeral, resolve
from teko.types.number import Gaussian, is_number, to_inexact


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0", Gaussian(0)),
        ("42", Gaussian(42)),
        ("-7", Gaussian(-7)),
        ("+7", Gaussian(7)),
        ("3.14", Gaussian(Fraction(157, 50))),
        ("1/3", Gaussian(Fraction(1, 3))),
        ("4/6", Gaussian(Fraction(2, 3))),
        (".5", Gaussian(Fraction(1, 2))),
        ("5.", Gaussian(5)),
        ("1e3", Gaussian(1000)),
        ("1.5e-3", Gaussian(Fraction(3, 2000))),
        ("2+3i", Gaussian(2, 3)),
        ("-2-i", Gaussian(-2, -1)),
        ("0+i", Gaussian(0, 1)),
        ("1/2-1/3i", Gaussian(Fraction(1, 2), Fraction(-1, 3))),
    ],
)
def test_resolve_numerals(text, expected):
    assert resolve(text) == expected


@pytest.mark.parametrize(
    "text",
    ["abc", "+", "-", "3i", "1e", "2+3", "1/0", "1/", "3..4", "pi", "1,000", "x1"],
)
def test_non_numerals(text):
    assert resolve(text) is None
    assert not is_numeral(text)


def test_decimal_literals_are_exact():
    assert resolve("0.1") + resolve("0.2") == resolve("0.3")


def test_gaussian_arithmetic():
    a = Gaussian(1, 2)
    b = Gaussian(3, -1)
    assert a + b == Gaussian(4, 1)
    assert a - b == Gaussian(-2, 3)
    assert a * b == Gaussian(5, 5)
    assert (a / b) * b == a
    assert -a == Gaussian(-1, -2)
    assert a.conjugate() == Gaussian(1, -2)


def test_i_squared_is_minus_one():
    i = Gaussian(0, 1)
    assert i * i == Gaussian(-1)
    assert (i * i).is_integer


def test_division_by_zero():
    with pytest.raises(TekoDomainError):
        Gaussian(1) / Gaussian(0)


def test_ordering_only_for_reals():
    assert Gaussian(1) < Gaussian(Fraction(3, 2))
    assert Gaussian(2) >= Gaussian(2)
    with pytest.raises(TekoTypeError):
        Gaussian(1, 1) < Gaussian(2)


@pytest.mark.parametrize(
    "value, text",
    [
        (Gaussian(5), "5"),
        (Gaussian(-5), "-5"),
        (Gaussian(Fraction(157, 50)), "157/50"),
        (Gaussian(2, 3), "2+3i"),
        (Gaussian(2, -1), "2-i"),
        (Gaussian(0, 1), "0+i"),
        (Gaussian(Fraction(1, 2), Fraction(-3, 4)), "1/2-3/4i"),
    ],
)
def test_gaussian_printing(value, text):
    assert str(value) == text


def test_gaussians_are_immutable_and_hashable():
    g = Gaussian(1, 1)
    with pytest.raises(AttributeError):
        g.real = Fraction(2)
    assert {g: "x"}[Gaussian(1, 1)] == "x"


def test_inexact_coercion():
    assert to_inexact(Gaussian(Fraction(1, 4))) == 0.25
    assert to_inexact(Gaussian(1, 2)) == complex(1, 2)
    assert to_inexact(2.5) == 2.5


def test_is_number():
    assert is_number(Gaussian(1))
    assert is_number(3.0)
    assert is_number(1j)
    assert not is_number(True)
    assert not is_number("1")


def test_exponents_are_bounded():
    assert resolve(f"1e{MAX_EXPONENT}") == Gaussian(10 ** MAX_EXPONENT)
    assert resolve(f"1e-{MAX_EXPONENT}") == Gaussian(Fraction(1, 10 ** MAX_EXPONENT))
    with pytest.raises(TekoDomainError):
        resolve("1e30000000")
    with pytest.raises(TekoDomainError):
        resolve(f"1+1e{MAX_EXPONENT + 1}i")


def test_overlong_numerals_are_rejected():
    with pytest.raises(TekoDomainError):
        resolve("1" * (MAX_DIGITS + 1))
    assert resolve("9" * MAX_DIGITS) == Gaussian(10 ** MAX_DIGITS - 1)


def test_oversized_numeral_is_a_catchable_fault(interp):
    assert interp.eval("(error? (wind 1e30000000))") is True
