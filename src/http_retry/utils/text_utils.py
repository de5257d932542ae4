"""
Text formatting utilities for report messages.
"""

from collections.abc import Sized
from typing import Union


def count_of(items: Union[Sized, int], subject: str = "item") -> str:
    """
    Format a count with a count noun.
    
    Args:
        items: A sized collection (its length is used) or a count
        subject: Singular noun
        
    Returns:
        "<count> <subject>" with an "s" appended unless count is exactly 1
        
    Examples:
        >>> count_of([1], "attempt")
        '1 attempt'
        >>> count_of(3, "attempt")
        '3 attempts'
    """
    count = items if isinstance(items, int) else len(items)
    plural = "" if count == 1 else "s"
    return f"{count} {subject}{plural}"
