"""
Custom exceptions for pwdg.
"""

from .charset import CharCategory


class PwdgException(Exception):
    """Base exception for pwdg."""

    pass


class LengthTooShortError(PwdgException):
    """Requested password length is below the minimum."""

    def __init__(self, length: int, min_length: int):
        self.length = length
        self.min_length = min_length
        super().__init__(f"Password length must be at least {min_length} characters.")


class MinimumsExceedLengthError(PwdgException):
    """Sum of minimum character requirements exceeds the password length."""

    def __init__(self, length: int):
        self.length = length
        super().__init__("Sum of minimum character requirements exceeds password length.")


class InsufficientCharactersError(PwdgException):
    """A category has fewer characters left than its minimum requires."""

    def __init__(self, category: CharCategory):
        self.category = category
        super().__init__(f"Insufficient characters available for {category.value}.")

    @property
    def category_name(self) -> str:
        return self.category.value


class EmptyAlphabetError(PwdgException):
    """Every character was excluded."""

    def __init__(self) -> None:
        super().__init__("No characters left to build a password after exclusions.")
