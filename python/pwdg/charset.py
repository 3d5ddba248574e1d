"""
Character categories used for password generation.
"""

import string
from enum import Enum
from typing import Optional

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
DIGITS = string.digits

# Same 32 members as string.punctuation, different order
SPECIAL_CHARS = "!@#$%^&*()_+-={}[]|:;\"'<>,.?/~\\`"


class CharCategory(Enum):
    """One of the four fixed character domains."""

    UPPER = "upper"
    LOWER = "lower"
    DIGIT = "digit"
    SPECIAL = "special"

    @property
    def chars(self) -> str:
        return _DOMAINS[self]


_DOMAINS = {
    CharCategory.UPPER: UPPERCASE,
    CharCategory.LOWER: LOWERCASE,
    CharCategory.DIGIT: DIGITS,
    CharCategory.SPECIAL: SPECIAL_CHARS,
}


def category_of(char: str) -> Optional[CharCategory]:
    """
    Find the category a character belongs to.

    Args:
        char: A single character

    Returns:
        The matching CharCategory, or None if the character is in no category
    """
    if len(char) != 1:
        return None

    for category in CharCategory:
        if char in category.chars:
            return category
    return None
