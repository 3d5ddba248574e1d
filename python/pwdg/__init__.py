"""
pwdg - generate random passwords with per-category minimums.
"""

from .charset import SPECIAL_CHARS, CharCategory
from .exceptions import (
    EmptyAlphabetError,
    InsufficientCharactersError,
    LengthTooShortError,
    MinimumsExceedLengthError,
    PwdgException,
)
from .generator import (
    DEFAULT_OPTIONS,
    MIN_LENGTH,
    PasswordGenerator,
    PwdGenOptions,
    generate_password,
)
from .random_source import RandomSource, SecureRandomSource

__version__ = "0.1.0"

__all__ = [
    'CharCategory',
    'DEFAULT_OPTIONS',
    'EmptyAlphabetError',
    'InsufficientCharactersError',
    'LengthTooShortError',
    'MIN_LENGTH',
    'MinimumsExceedLengthError',
    'PasswordGenerator',
    'PwdGenOptions',
    'PwdgException',
    'RandomSource',
    'SPECIAL_CHARS',
    'SecureRandomSource',
    'generate_password',
]
