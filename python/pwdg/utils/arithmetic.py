"""
Overflow-safe arithmetic for lengths and character counts.

Lengths and counts are treated as unsigned 64-bit integers, so user supplied
minimums that would not fit are rejected instead of growing without bound.
"""

from typing import Iterable, Optional

MAX_COUNT = 2 ** 64 - 1


def checked_sum(values: Iterable[int], limit: int = MAX_COUNT) -> Optional[int]:
    """
    Add values, stopping as soon as the total no longer fits.

    Args:
        values: Non-negative integers to add
        limit: Largest representable total (default: MAX_COUNT)

    Returns:
        The sum, or None if any value or partial sum exceeds limit
    """
    total = 0
    for value in values:
        if value > limit - total:
            return None
        total += value
    return total
