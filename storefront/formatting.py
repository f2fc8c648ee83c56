"""
Spec formatting for display.

Turns an arbitrary key/value spec bag into ordered label/value
strings.  Unlike the resolvers this module treats the bag as opaque:
any key is accepted, and entries whose value cannot be rendered are
dropped rather than shown as blanks.
"""

from typing import Any, Dict, List, Optional

from .config import BRAND_NAMES, NUMBER_MAX_FRACTION_DIGITS, SPEC_UNITS, SpecEntry
from .normalize import is_finite_number, is_number


def format_spec_label(key: str) -> str:
    """Convert an underscore_key into a human-readable label."""
    words = [w for w in key.split("_") if w]
    return " ".join(BRAND_NAMES.get(w.lower(), w[:1].upper() + w[1:]) for w in words)


def format_number(value: float) -> str:
    """
    Render a non-negative number with thousands separators and at most
    three fraction digits, trailing zeros dropped: 26000 -> '26,000',
    59.5 -> '59.5'.
    """
    text = f"{abs(value):,.{NUMBER_MAX_FRACTION_DIGITS}f}"
    return text.rstrip("0").rstrip(".")


def format_spec_value(value: Any, key: str) -> Optional[str]:
    """Format a spec value for display.  Returns None for non-renderable values."""
    if value is None:
        return None

    # bool before number: True is an int in Python
    if isinstance(value, bool):
        return "Yes" if value else "No"

    if is_number(value):
        if not is_finite_number(value) or value < 0:
            return None
        return f"{format_number(value)}{SPEC_UNITS.get(key, '')}"

    if isinstance(value, str):
        trimmed = value.strip()
        return trimmed or None

    return None


def get_spec_entries(specs: Optional[Dict[str, Any]]) -> List[SpecEntry]:
    """Get renderable spec entries, in the bag's own key order."""
    if not isinstance(specs, dict):
        return []

    entries: List[SpecEntry] = []
    for key, value in specs.items():
        if not isinstance(key, str) or not key.strip():
            continue
        formatted = format_spec_value(value, key)
        if formatted is None:
            continue
        entries.append(SpecEntry(label=format_spec_label(key), value=formatted))
    return entries
