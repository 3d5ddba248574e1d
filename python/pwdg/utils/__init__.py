"""
Helper utilities for pwdg.
"""

from .arithmetic import MAX_COUNT, checked_sum
from .filter import filtered_range

__all__ = ['MAX_COUNT', 'checked_sum', 'filtered_range']
