"""
Unit tests for password generation functionality.
"""

import threading
import pytest

from pwdg import (
    DEFAULT_OPTIONS,
    MIN_LENGTH,
    SPECIAL_CHARS,
    CharCategory,
    PasswordGenerator,
    PwdGenOptions,
    generate_password,
)
from pwdg.charset import LOWERCASE, UPPERCASE
from pwdg.random_source import RandomSource

from .conftest import SeededRandomSource, count_category


class RecordingRandomSource(RandomSource):
    """Always picks index 0 and records shuffles without reordering."""

    def __init__(self):
        self.shuffled = []

    def randbelow(self, n: int) -> int:
        return 0

    def shuffle(self, items):
        self.shuffled.append(list(items))


class TestPasswordGenerator:
    """Test password generator."""

    def test_default_password(self):
        """Test default password generation."""
        password = generate_password()

        assert len(password) == MIN_LENGTH
        assert all(c in PasswordGenerator().charset for c in password)

    def test_custom_length(self):
        """Test custom password length."""
        for length in [8, 10, 16, 32, 64, 100]:
            password = generate_password(length=length)
            assert len(password) == length

    def test_length_ten_default_options(self):
        """Test a 10 character password with default constraints."""
        generator = PasswordGenerator(10, DEFAULT_OPTIONS)
        assert len(generator.generate()) == 10

    def test_minimums_met(self):
        """Test that every category minimum is satisfied."""
        options = PwdGenOptions(min_upper=3, min_lower=3, min_digit=3, min_special=3)
        generator = PasswordGenerator(15, options)

        for _ in range(50):
            password = generator.generate()
            assert len(password) == 15
            for category in CharCategory:
                assert count_category(password, category) >= 3

    def test_exact_sum_of_minimums_equals_length(self):
        """Test that minimums summing to the length are met exactly."""
        options = PwdGenOptions(min_upper=3, min_lower=3, min_digit=3, min_special=3)
        generator = PasswordGenerator(12, options)

        for _ in range(50):
            password = generator.generate()
            assert len(password) == 12
            for category in CharCategory:
                assert count_category(password, category) == 3

    def test_excluded_characters_never_appear(self):
        """Test character exclusion."""
        options = PwdGenOptions(min_upper=2, min_lower=2, min_digit=2, min_special=2,
                                exclude="Aa1@")
        generator = PasswordGenerator(12, options)

        for _ in range(50):
            password = generator.generate()
            assert not set(password) & set("Aa1@")

    def test_exclude_whole_category_with_zero_minimum(self):
        """Test that an emptied category is fine when its minimum is zero."""
        options = PwdGenOptions(min_lower=4, exclude=SPECIAL_CHARS)
        generator = PasswordGenerator(20, options)

        assert generator.special == ""
        for _ in range(20):
            password = generator.generate()
            assert count_category(password, CharCategory.SPECIAL) == 0
            assert count_category(password, CharCategory.LOWER) >= 4

    def test_only_one_category_left(self):
        """Test generation when exclusions leave only digits."""
        exclude = UPPERCASE + LOWERCASE + SPECIAL_CHARS
        password = generate_password(16, PwdGenOptions(exclude=exclude))

        assert len(password) == 16
        assert password.isdigit()

    def test_strong_options(self):
        """Test the strong preset."""
        generator = PasswordGenerator(8, PwdGenOptions.strong())

        for _ in range(20):
            password = generator.generate()
            for category in CharCategory:
                assert count_category(password, category) >= 1

    def test_password_uniqueness(self):
        """Test that generated passwords are unique."""
        generator = PasswordGenerator(16)
        passwords = set(generator.generate() for _ in range(100))

        assert len(passwords) == 100

    def test_generate_many(self):
        """Test batch generation."""
        generator = PasswordGenerator(12, PwdGenOptions.strong())
        passwords = generator.generate_many(5)

        assert len(passwords) == 5
        assert all(len(p) == 12 for p in passwords)

        assert generator.generate_many(0) == []
        with pytest.raises(ValueError):
            generator.generate_many(-1)

    def test_describe(self):
        """Test constraint description display."""
        generator = PasswordGenerator(16, PwdGenOptions(min_upper=1, min_digit=2, exclude="0O"))

        info = generator.describe()
        assert info.startswith("16 characters")
        assert "1 upper" in info
        assert "2 digit" in info
        assert "lower" not in info
        assert "excluding" in info

        assert PasswordGenerator(8).describe() == "8 characters"

    def test_concurrent_generation(self):
        """Test sharing one generator between threads."""
        generator = PasswordGenerator(20, PwdGenOptions.strong())
        results = []
        lock = threading.Lock()

        def worker():
            for _ in range(25):
                password = generator.generate()
                with lock:
                    results.append(password)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 100
        assert all(len(p) == 20 for p in results)


class TestInjectedRandomSource:
    """Test generation with a substituted random source."""

    def test_seeded_source_is_reproducible(self):
        """Test that equal seeds give equal passwords."""
        options = PwdGenOptions(min_upper=2, min_special=2)

        first = PasswordGenerator(16, options, SeededRandomSource(42)).generate_many(3)
        second = PasswordGenerator(16, options, SeededRandomSource(42)).generate_many(3)

        assert first == second

    def test_seeded_source_still_meets_constraints(self, seeded_source):
        """Test constraints with a deterministic source."""
        options = PwdGenOptions(min_upper=1, min_lower=1, min_digit=5, min_special=1)
        password = generate_password(10, options, seeded_source)

        assert len(password) == 10
        assert count_category(password, CharCategory.DIGIT) >= 5

    def test_draw_order_and_shuffle(self):
        """Test minimums are drawn per category before the fill and then shuffled."""
        source = RecordingRandomSource()
        options = PwdGenOptions(min_upper=1, min_lower=1, min_digit=1, min_special=1,
                                exclude="AB")
        password = PasswordGenerator(8, options, source).generate()

        # Index 0 of each pool, then index 0 of the combined charset
        assert source.shuffled == [list("Ca0!CCCC")]
        assert password == "Ca0!CCCC"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
