"""
Sources of randomness for password generation.

The generator only needs two primitives, a uniform index draw and a uniform
in-place shuffle. Production code uses the operating system CSPRNG through the
secrets module; tests can substitute a seeded source.
"""

import secrets
from abc import ABC, abstractmethod
from typing import Any, List, Sequence, TypeVar

T = TypeVar('T')


class RandomSource(ABC):
    """Interface for the random primitives used by PasswordGenerator."""

    @abstractmethod
    def randbelow(self, n: int) -> int:
        """Return a uniformly chosen integer in [0, n)."""
        pass

    @abstractmethod
    def shuffle(self, items: List[Any]) -> None:
        """Uniformly permute items in place."""
        pass

    def choice(self, seq: Sequence[T]) -> T:
        """Return a uniformly chosen element of a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self.randbelow(len(seq))]


class SecureRandomSource(RandomSource):
    """Cryptographically secure source backed by the secrets module."""

    def __init__(self) -> None:
        self._system_random = secrets.SystemRandom()

    def randbelow(self, n: int) -> int:
        return secrets.randbelow(n)

    def shuffle(self, items: List[Any]) -> None:
        # SystemRandom.shuffle is Fisher-Yates over os.urandom
        self._system_random.shuffle(items)


_default_source = SecureRandomSource()


def default_random_source() -> RandomSource:
    """Get the shared secure random source."""
    return _default_source
