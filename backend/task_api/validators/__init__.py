"""String validators exposed by the API."""

from .parentheses import ALPHABET, UnsupportedCharacterError, is_valid_string

__all__ = ["ALPHABET", "UnsupportedCharacterError", "is_valid_string"]
