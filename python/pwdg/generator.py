"""
Secure password generation with per-category minimums.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .charset import CharCategory
from .exceptions import (
    EmptyAlphabetError,
    InsufficientCharactersError,
    LengthTooShortError,
    MinimumsExceedLengthError,
)
from .random_source import RandomSource, default_random_source
from .utils.arithmetic import checked_sum
from .utils.filter import filtered_range

MIN_LENGTH = 8


@dataclass(frozen=True)
class PwdGenOptions:
    """
    Constraints for password generation.

    Attributes:
        min_upper: Minimum number of uppercase letters
        min_lower: Minimum number of lowercase letters
        min_digit: Minimum number of digits
        min_special: Minimum number of special characters
        exclude: Characters that must never appear in the password
    """

    min_upper: int = 0
    min_lower: int = 0
    min_digit: int = 0
    min_special: int = 0
    exclude: Optional[str] = None

    def __post_init__(self) -> None:
        for category, value in zip(CharCategory, self.minimums()):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"min_{category.value} must be an integer")
            if value < 0:
                raise ValueError(f"min_{category.value} cannot be negative")

        if self.exclude is not None and not isinstance(self.exclude, str):
            raise ValueError("exclude must be a string")

        # An empty exclusion string means no exclusions
        if self.exclude == "":
            object.__setattr__(self, "exclude", None)

    @classmethod
    def strong(cls, exclude: Optional[str] = None) -> "PwdGenOptions":
        """Options requiring at least one character of every category."""
        return cls(min_upper=1, min_lower=1, min_digit=1, min_special=1, exclude=exclude)

    def minimum(self, category: CharCategory) -> int:
        return {
            CharCategory.UPPER: self.min_upper,
            CharCategory.LOWER: self.min_lower,
            CharCategory.DIGIT: self.min_digit,
            CharCategory.SPECIAL: self.min_special,
        }[category]

    def minimums(self) -> Tuple[int, int, int, int]:
        """Minimums in category order (upper, lower, digit, special)."""
        return (self.min_upper, self.min_lower, self.min_digit, self.min_special)


DEFAULT_OPTIONS = PwdGenOptions()


class PasswordGenerator:
    """
    Generate secure passwords under a fixed set of constraints.

    All validation happens in the constructor, so generate() cannot fail on a
    constructed instance. Instances are immutable and may be shared between
    threads.
    """

    __slots__ = ('_length', '_options', '_pools', '_charset', '_random')

    def __init__(self,
                 length: int = MIN_LENGTH,
                 options: Optional[PwdGenOptions] = None,
                 random_source: Optional[RandomSource] = None):
        """
        Initialize and validate a password generator.

        Args:
            length: Password length (minimum MIN_LENGTH)
            options: Constraints to apply (default: DEFAULT_OPTIONS)
            random_source: Source of randomness (default: secure system source)

        Raises:
            LengthTooShortError: length is below MIN_LENGTH
            MinimumsExceedLengthError: the minimums add up to more than length
            InsufficientCharactersError: exclusions left a category too small
            EmptyAlphabetError: exclusions removed every character
        """
        if isinstance(length, bool) or not isinstance(length, int):
            raise TypeError("length must be an integer")

        if options is None:
            options = DEFAULT_OPTIONS

        pools = self._validate_input(length, options)
        charset = ''.join(pools[category] for category in CharCategory)

        if not charset:
            raise EmptyAlphabetError()

        object.__setattr__(self, '_length', length)
        object.__setattr__(self, '_options', options)
        object.__setattr__(self, '_pools', pools)
        object.__setattr__(self, '_charset', charset)
        object.__setattr__(self, '_random', random_source or default_random_source())

    @staticmethod
    def _validate_input(length: int, options: PwdGenOptions) -> dict:
        """Check feasibility and build the filtered pool of every category."""
        if length < MIN_LENGTH:
            raise LengthTooShortError(length, MIN_LENGTH)

        min_total = checked_sum(options.minimums())
        if min_total is None or min_total > length:
            raise MinimumsExceedLengthError(length)

        exclude = set(options.exclude or "")

        pools = {}
        for category in CharCategory:
            pool = filtered_range(category.chars, exclude)
            if len(pool) < options.minimum(category):
                raise InsufficientCharactersError(category)
            pools[category] = pool

        return pools

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other):
        if not isinstance(other, PasswordGenerator):
            return NotImplemented
        return (self._length, self._options, self._charset) == \
            (other._length, other._options, other._charset)

    def __hash__(self):
        return hash((self._length, self._options, self._charset))

    def __repr__(self):
        return f"PasswordGenerator(length={self._length!r}, options={self._options!r})"

    @property
    def length(self) -> int:
        return self._length

    @property
    def options(self) -> PwdGenOptions:
        return self._options

    @property
    def charset(self) -> str:
        """All usable characters, upper then lower then digit then special."""
        return self._charset

    def pool(self, category: CharCategory) -> str:
        """Usable characters of one category after exclusions."""
        return self._pools[category]

    @property
    def upper(self) -> str:
        return self._pools[CharCategory.UPPER]

    @property
    def lower(self) -> str:
        return self._pools[CharCategory.LOWER]

    @property
    def digit(self) -> str:
        return self._pools[CharCategory.DIGIT]

    @property
    def special(self) -> str:
        return self._pools[CharCategory.SPECIAL]

    def generate(self) -> str:
        """
        Generate a secure password.

        Returns:
            Generated password string of exactly self.length characters
        """
        chars: List[str] = []

        # Guaranteed characters first, then fill from the whole charset
        for category in CharCategory:
            self._add_random_chars(chars, self._pools[category], self._options.minimum(category))
        self._add_random_chars(chars, self._charset, self._length - len(chars))

        # Shuffle so the guaranteed characters are not always up front
        self._random.shuffle(chars)

        return ''.join(chars)

    def generate_many(self, count: int) -> List[str]:
        """
        Generate several independent passwords.

        Args:
            count: Number of passwords to generate

        Returns:
            List of generated passwords
        """
        if count < 0:
            raise ValueError("count cannot be negative")
        return [self.generate() for _ in range(count)]

    def _add_random_chars(self, chars: List[str], pool: str, count: int) -> None:
        chars.extend(self._random.choice(pool) for _ in range(count))

    def describe(self) -> str:
        """
        Get human-readable description of the constraints.

        Returns:
            Description such as "16 characters, at least 1 upper, 2 digit"
        """
        required = [
            f"{self._options.minimum(category)} {category.value}"
            for category in CharCategory
            if self._options.minimum(category) > 0
        ]

        info = f"{self._length} characters"
        if required:
            info += ", at least " + ", ".join(required)
        if self._options.exclude:
            info += " (excluding some chars)"

        return info


def generate_password(length: int = MIN_LENGTH,
                      options: Optional[PwdGenOptions] = None,
                      random_source: Optional[RandomSource] = None) -> str:
    """
    Convenience function to generate a password.

    Args:
        length: Password length (minimum MIN_LENGTH)
        options: Constraints to apply (default: DEFAULT_OPTIONS)
        random_source: Source of randomness (default: secure system source)

    Returns:
        Generated password string
    """
    generator = PasswordGenerator(length=length, options=options, random_source=random_source)

    return generator.generate()
