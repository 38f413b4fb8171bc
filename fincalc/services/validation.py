"""Input validation shared by the calculator services.

Every check raises InvalidInputError naming the offending field, so a
calculation either completes with a full result or produces nothing.
"""
import math
import numbers
import re
from typing import Optional

from fincalc.exceptions import InvalidInputError

# Longest numeric prefix, the way a browser's parseFloat reads form text
_NUMERIC_PREFIX = re.compile(r'\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')


def require_number(field: str, value) -> float:
    """Return value as a finite float.
    
    Raises:
        InvalidInputError: If value is missing, a bool, non-numeric, NaN or infinite.
    """
    if value is None:
        raise InvalidInputError(field, value, "is required")
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInputError(field, value, "must be a number")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidInputError(field, value, "must be finite")
    return value


def require_positive(field: str, value) -> float:
    value = require_number(field, value)
    if value <= 0:
        raise InvalidInputError(field, value, "must be greater than 0")
    return value


def require_non_negative(field: str, value) -> float:
    value = require_number(field, value)
    if value < 0:
        raise InvalidInputError(field, value, "must not be negative")
    return value


def parse_number(text) -> Optional[float]:
    """Read a number from raw form text.
    
    Leading whitespace is skipped and the longest numeric prefix is used,
    so "12abc" reads as 12.0. Numbers pass through unchanged.
    
    Args:
        text: Raw field value.
        
    Returns:
        The parsed float, or None if the text has no numeric prefix.
    """
    if text is None:
        return None
    if isinstance(text, numbers.Real) and not isinstance(text, bool):
        return float(text)
    match = _NUMERIC_PREFIX.match(str(text))
    if not match:
        return None
    return float(match.group(1))
