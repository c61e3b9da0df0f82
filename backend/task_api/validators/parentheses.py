"""Validation of parenthesis strings that may contain ``*`` wildcards."""

from __future__ import annotations

ALPHABET = frozenset("()*")


class UnsupportedCharacterError(ValueError):
    """Raised when a string contains a character outside ``ALPHABET``."""

    def __init__(self, character: str, position: int) -> None:
        self.character = character
        self.position = position
        super().__init__(
            f"Unsupported character {character!r} at position {position}; "
            "only '(', ')' and '*' are allowed."
        )


def is_valid_string(value: str) -> bool:
    """Return whether ``value`` can be read as a balanced parenthesis string.

    Each ``*`` may stand for ``(``, ``)`` or nothing. Instead of enumerating
    those choices the function tracks the range ``[low, high]`` of unmatched
    opening parentheses that are still possible after every character.
    """
    if not isinstance(value, str):
        raise TypeError(f"Expected a string, got {type(value).__name__}")

    for position, character in enumerate(value):
        if character not in ALPHABET:
            raise UnsupportedCharacterError(character, position)

    low = 0
    high = 0
    for character in value:
        if character == "(":
            low += 1
            high += 1
        elif character == ")":
            low -= 1
            high -= 1
        else:
            low -= 1
            high += 1

        if high < 0:
            return False
        if low < 0:
            low = 0

    return low == 0
