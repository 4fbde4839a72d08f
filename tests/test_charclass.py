import string

import pytest

from pipex.charclass import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_letters_are_alpha(ch):
    assert is_alpha(ch) is True
    assert is_alpha(ord(ch)) is True


@pytest.mark.parametrize("ch", list(string.digits))
def test_digits(ch):
    assert is_digit(ch) is True
    assert is_alpha(ch) is False
    assert is_alnum(ch) is True


@pytest.mark.parametrize("ch", ["@", "[", "`", "{", " ", "é", "/", ":"])
def test_non_alnum(ch):
    assert is_alnum(ch) is False
    assert is_alpha(ch) is False
    assert is_digit(ch) is False


def test_alnum_is_alpha_or_digit_for_all_bytes():
    for code in range(256):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False
    assert is_ascii("é") is False


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False
    assert is_print("\n") is False


def test_printable_matches_string_module():
    printable = set(string.ascii_letters + string.digits + string.punctuation + " ")
    for code in range(256):
        assert is_print(code) == (chr(code) in printable)


@pytest.mark.parametrize("ch", list(string.ascii_uppercase))
def test_to_lower_letters(ch):
    assert to_lower(ch) == ch.lower()
    assert to_lower(ord(ch)) == ord(ch.lower())


@pytest.mark.parametrize("ch", list(string.ascii_lowercase))
def test_to_upper_letters(ch):
    assert to_upper(ch) == ch.upper()
    assert to_upper(ord(ch)) == ord(ch.upper())


@pytest.mark.parametrize("ch", ["1", "@", "[", "é", "É", " "])
def test_case_conversion_leaves_others(ch):
    assert to_lower(ch) == ch
    assert to_upper(ch) == ch


def test_case_round_trip():
    for ch in string.ascii_letters:
        assert to_lower(to_upper(ch)) == ch.lower()
        assert to_upper(to_lower(ch)) == ch.upper()


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_lower("")