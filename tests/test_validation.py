import string

import pytest

from run_collapse.validation import (
    InvalidCharacterError,
    is_valid_character,
    is_valid_string,
    normalize_input,
    validate_or_raise,
)


def test_all_lowercase_letters_are_valid() -> None:
    assert all(is_valid_character(ch) for ch in string.ascii_lowercase)


@pytest.mark.parametrize("ch", ["A", "Z", "0", "9", " ", "!", "@", "[", "]", "\t", "\n", "é", "ab", ""])
def test_invalid_characters(ch: str) -> None:
    assert not is_valid_character(ch)


@pytest.mark.parametrize("text", [None, "", "a", "abc", "xyz", string.ascii_lowercase, "aaabbbccc"])
def test_valid_strings(text: str | None) -> None:
    assert is_valid_string(text)


@pytest.mark.parametrize(
    "text", ["A", "ABC", "aBc", "Xyz", "123", "abc123", "abc ", " abc", "a bc", "a@b", "a-b", "a\nb"]
)
def test_invalid_strings(text: str) -> None:
    assert not is_valid_string(text)


def test_normalize_input() -> None:
    assert normalize_input(None) == ""
    text = "test"
    assert normalize_input(text) is text
    assert normalize_input("   ") == "   "


def test_validate_or_raise_reports_first_offender() -> None:
    with pytest.raises(InvalidCharacterError, match="position 3") as exc_info:
        validate_or_raise("abc1d2")
    assert exc_info.value.character == "1"
    assert exc_info.value.position == 3
    assert isinstance(exc_info.value, ValueError)


@pytest.mark.parametrize("text", [None, "", "validstring"])
def test_validate_or_raise_accepts_valid_input(text: str | None) -> None:
    validate_or_raise(text)
