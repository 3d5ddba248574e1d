"""
Shared fixtures for pwdg tests.
"""

import random
from typing import Any, List

import pytest

from pwdg.charset import CharCategory, category_of
from pwdg.random_source import RandomSource


class SeededRandomSource(RandomSource):
    """Deterministic source for reproducible tests. Not for real passwords."""

    def __init__(self, seed: int):
        self._random = random.Random(seed)

    def randbelow(self, n: int) -> int:
        return self._random.randrange(n)

    def shuffle(self, items: List[Any]) -> None:
        self._random.shuffle(items)


def count_category(password: str, category: CharCategory) -> int:
    return sum(1 for c in password if category_of(c) is category)


@pytest.fixture
def seeded_source():
    """Random source seeded with a fixed value."""
    return SeededRandomSource(1234)
