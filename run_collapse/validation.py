from __future__ import annotations


class InvalidCharacterError(ValueError):
    """Raised when input contains a character outside ``a``-``z``."""

    def __init__(self, character: str, position: int) -> None:
        self.character = character
        self.position = position
        super().__init__(
            f"Invalid character {character!r} at position {position}. "
            "Only lowercase letters (a-z) are allowed."
        )


def normalize_input(text: str | None) -> str:
    return "" if text is None else text


def is_valid_character(ch: str) -> bool:
    return len(ch) == 1 and "a" <= ch <= "z"


def is_valid_string(text: str | None) -> bool:
    if not text:
        return True
    return all(is_valid_character(ch) for ch in text)


def validate_or_raise(text: str | None) -> None:
    for position, ch in enumerate(normalize_input(text)):
        if not is_valid_character(ch):
            raise InvalidCharacterError(ch, position)
