"""Leading-number parsing of raw text.

Query strings and provider fields are read the way browsers and Node read
them: leading whitespace is skipped, the longest numeric prefix is taken and
the rest is ignored ("40.7128N" reads as 40.7128). Only ASCII digits count,
underscores end the number, and infinity is spelled "Infinity".
"""
import re
from typing import Optional

_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)
_INT_PREFIX = re.compile(r"[+-]?\d+", re.ASCII)


def parse_leading_float(text: str) -> Optional[float]:
    """Return the float at the start of ``text``, or None if there is none."""
    match = _FLOAT_PREFIX.match(text.lstrip())
    if match is None:
        return None
    number = match.group(0)
    if number.lstrip("+-") == "Infinity":
        return float("-inf") if number.startswith("-") else float("inf")
    return float(number)


def parse_leading_int(text: str) -> Optional[int]:
    """Return the base-10 integer at the start of ``text``, or None."""
    match = _INT_PREFIX.match(text.lstrip())
    if match is None:
        return None
    return int(match.group(0))
