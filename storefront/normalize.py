"""
Value normalization utilities used across the storefront catalog core.

Raw spec bags come from an external API and are untyped at the
boundary, so every helper here is total: it accepts anything and
degrades to a documented default ('' for text, 0 for numbers) rather
than raising.  Keeping these rules centralized ensures the resolvers,
the formatter and the recommendation engine agree on what counts as
"a number" or "a price".
"""

import math
from typing import Any, Optional

from .config import RATING_MAX, RATING_MIN


# ---------------------------
# Type checks
# ---------------------------

def is_number(value: Any) -> bool:
    """
    True for int/float values, excluding bool (which Python treats as
    an int subclass but the API uses as a flag).
    """
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_finite_number(value: Any) -> bool:
    """
    True for numbers a float can represent.  JSON integers too large
    for a float count as infinite.
    """
    if not is_number(value):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


# ---------------------------
# Field defaults
# ---------------------------

def trim_or_empty(value: Any) -> str:
    """
    Strip a text field, returning '' for missing or non-string values.
    A whitespace-only string also becomes '' and is indistinguishable
    from an absent field.
    """
    if not isinstance(value, str):
        return ""
    return value.strip()


def clamp_rating(value: Any) -> float:
    """
    Clamp a rating value to the 0-10 range, returning 0 for missing or
    non-finite values.
    """
    if not is_finite_number(value):
        return RATING_MIN
    if value < RATING_MIN:
        return RATING_MIN
    if value > RATING_MAX:
        return RATING_MAX
    return value


def non_negative_number(value: Any) -> float:
    """Finite, non-negative numbers pass through; everything else is 0."""
    if not is_finite_number(value) or value < 0:
        return 0
    return value


def flag(value: Any) -> bool:
    """Only a literal boolean True counts as set."""
    return value is True


def positive_price(value: Any) -> Optional[float]:
    """
    Return the price when it is a finite number above zero, else None.
    A price of 0 is treated as "unknown", not as free.
    """
    if not is_finite_number(value) or value <= 0:
        return None
    return value
