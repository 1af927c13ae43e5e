import string

import pytest

from cubkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_whitespace,
    to_lower,
    to_upper,
)

ALL_CODES = range(-5, 300)


def test_is_alpha_matches_ascii_letters():
    for code in ALL_CODES:
        assert is_alpha(code) == (0 <= code < 128 and chr(code) in string.ascii_letters)


def test_is_digit_matches_ascii_digits():
    for code in ALL_CODES:
        assert is_digit(code) == (0 <= code < 128 and chr(code) in string.digits)


def test_is_alnum_is_union_of_alpha_and_digit():
    for code in ALL_CODES:
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@pytest.mark.parametrize("code,expected", [(-1, False), (0, True), (127, True), (128, False)])
def test_is_ascii_bounds(code, expected):
    assert is_ascii(code) is expected


@pytest.mark.parametrize("code,expected", [(31, False), (32, True), (126, True), (127, False)])
def test_is_print_bounds(code, expected):
    assert is_print(code) is expected


def test_is_whitespace_only_space_and_tab():
    assert is_whitespace(" ") is True
    assert is_whitespace("\t") is True
    assert is_whitespace("\n") is False
    assert is_whitespace("\r") is False
    assert is_whitespace("x") is False


def test_string_and_code_forms_agree():
    for ch in string.printable:
        assert is_alpha(ch) == is_alpha(ord(ch))
        assert is_print(ch) == is_print(ord(ch))
        assert to_upper(ord(ch)) == ord(to_upper(ch))


def test_case_conversion_of_letters():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_lower(upper) == lower
        assert to_upper(lower) == upper
        assert to_lower(ord(upper)) == ord(lower)


def test_case_conversion_leaves_other_characters():
    for ch in string.digits + string.punctuation + " ":
        assert to_lower(ch) == ch
        assert to_upper(ch) == ch
    assert to_upper("é") == "é"


def test_rejects_multi_character_string():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_rejects_non_character():
    with pytest.raises(TypeError):
        is_digit(1.5)