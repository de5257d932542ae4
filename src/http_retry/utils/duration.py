"""
Duration parsing.

Converts human-readable durations into integer milliseconds. Accepts plain
numbers (already milliseconds) or strings made of a number and an optional
unit, e.g. "100 ms", "2s", "1.5 minutes", "250".
"""

import re
from typing import Union

_DURATION_PATTERN = re.compile(
    r"^\s*(?P<value>\d+(?:\.\d+)?|\.\d+)\s*(?P<unit>[a-zA-Z]*)\s*$"
)

_UNIT_FACTORS: dict[str, float] = {
    "": 1,
    "ms": 1,
    "msec": 1,
    "msecs": 1,
    "millisecond": 1,
    "milliseconds": 1,
    "s": 1000,
    "sec": 1000,
    "secs": 1000,
    "second": 1000,
    "seconds": 1000,
    "m": 60_000,
    "min": 60_000,
    "mins": 60_000,
    "minute": 60_000,
    "minutes": 60_000,
    "h": 3_600_000,
    "hr": 3_600_000,
    "hrs": 3_600_000,
    "hour": 3_600_000,
    "hours": 3_600_000,
}


def to_milliseconds(value: Union[int, float, str]) -> int:
    """
    Resolve a duration to whole milliseconds.
    
    Args:
        value: Milliseconds as int/float, or a duration string
        
    Returns:
        Non-negative integer milliseconds (fractions are rounded)
        
    Raises:
        ValueError: Unparseable string, unknown unit or negative number
        
    Examples:
        >>> to_milliseconds("100 ms")
        100
        >>> to_milliseconds("1.5s")
        1500
        >>> to_milliseconds(250)
        250
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid duration: {value!r}")
    
    if isinstance(value, (int, float)):
        if value < 0:
            raise ValueError(f"Duration must be >= 0, got {value!r}")
        return int(round(value))
    
    if not isinstance(value, str):
        raise ValueError(f"Invalid duration: {value!r}")
    
    match = _DURATION_PATTERN.match(value)
    if match is None:
        raise ValueError(f"Invalid duration: {value!r}")
    
    unit = match.group("unit").lower()
    factor = _UNIT_FACTORS.get(unit)
    if factor is None:
        raise ValueError(f"Unknown duration unit {unit!r} in {value!r}")
    
    return int(round(float(match.group("value")) * factor))
