"""
Stateless helpers used by the retry engine.

Components:
- duration: Duration values ("100 ms", "2s", 250) to milliseconds
- text_utils: Count-noun formatting for report messages
"""

from http_retry.utils.duration import to_milliseconds
from http_retry.utils.text_utils import count_of

__all__ = [
    "to_milliseconds",
    "count_of",
]
