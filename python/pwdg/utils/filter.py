"""
Character filtering helpers.
"""

from typing import Container, Iterable, Optional


def filtered_range(chars: Iterable[str], exclude: Optional[Container[str]]) -> str:
    """Return chars in their original order with every excluded character removed."""
    if exclude is None:
        return ''.join(chars)
    return ''.join(c for c in chars if c not in exclude)
