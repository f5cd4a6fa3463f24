import pytest

from teko.errors import TekoTypeError


@pytest.mark.parametrize(
    "source, expected",
    [
        ('(" Example)', "Example"),
        ('("  Example)', "Example"),
        ('(" Lorem ipsum)', "Lorem ipsum"),
        ('(" Lorem    ipsum   dolor)', "Lorem ipsum dolor"),
        ('(")', ""),
        ('(" (32) Lorem (10) ipsum)', " Lorem\nipsum"),
        ('(" a (33) b)', "a!b"),
        ('(" (72 105))', "Hi"),
        ('(" ())', ""),
        ('(" 3.14 is pi)', "3.14 is pi"),
    ],
)
def test_string_macro(interp, source, expected):
    assert interp.eval(source) == expected


def test_words_are_not_evaluated(interp):
    assert interp.eval('(" undefined-word)') == "undefined-word"


def test_string_predicates(interp):
    assert interp.eval('(string? (" a))') is True
    assert interp.eval("(string? (quote a))") is False


def test_string_append(interp):
    assert interp.eval('(string-append (" foo) (" bar))') == "foobar"
    assert interp.eval('(string-append (" n=) 3)') == "n=3"


def test_symbol_conversions(interp):
    assert interp.eval('(symbol->string (quote abc))') == "abc"
    assert interp.eval('(eq? (string->symbol (" abc)) (quote abc))') is True


@pytest.mark.parametrize("source", ['(" (a))', '(" (-1))', '(" (1/2))', '(" (99999999999))'])
def test_bad_character_codes(interp, source):
    with pytest.raises(TekoTypeError):
        interp.eval(source)


def test_hash_words_are_ordinary_atoms(interp):
    assert interp.eval('(" #1 item)') == "#1 item"
    assert interp.eval("(symbol->string (quote #tag))") == "#tag"
