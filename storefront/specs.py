from __future__ import annotations

"""
Per-category spec resolvers.

A product's ``specs`` bag is partial and untrusted.  The resolvers in
this module project it onto a fully-populated pydantic model for the
product's category so filter and comparison code never needs null
checks.  Each resolver only reads the bag when the product actually
belongs to its category; for any other product it returns the
all-defaults model.  Resolvers never raise.

Default values:

- text fields: ``''`` (unknown / unspecified)
- ratings: ``0`` (clamped into 0-10)
- other numeric fields: ``0``
- boolean flags: ``False``
"""

from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel

from .config import (
    Product,
    ResolvedIemSpecs,
    ResolvedKeyboardSpecs,
    ResolvedMousepadSpecs,
    ResolvedMouseSpecs,
)
from .normalize import clamp_rating, flag, non_negative_number, trim_or_empty


def _raw_specs(product: Product, category: str) -> Dict[str, Any]:
    """Return the product's spec bag if it belongs to ``category``, else {}."""
    if product.category != category or not product.specs:
        return {}
    return product.specs


def resolve_mouse_specs(product: Product) -> ResolvedMouseSpecs:
    raw = _raw_specs(product, "mouse")
    return ResolvedMouseSpecs(
        weight=non_negative_number(raw.get("weight")),
        sensor=trim_or_empty(raw.get("sensor")),
        dpi=non_negative_number(raw.get("dpi")),
        polling_rate=non_negative_number(raw.get("polling_rate")),
        battery_life=trim_or_empty(raw.get("battery_life")),
        connectivity=trim_or_empty(raw.get("connectivity")),
        shape=trim_or_empty(raw.get("shape")),
        dimensions=trim_or_empty(raw.get("dimensions")),
        switch_type=trim_or_empty(raw.get("switch_type")),
    )


def resolve_keyboard_specs(product: Product) -> ResolvedKeyboardSpecs:
    raw = _raw_specs(product, "keyboard")
    return ResolvedKeyboardSpecs(
        switch_type=trim_or_empty(raw.get("switch_type")),
        layout=trim_or_empty(raw.get("layout")),
        connectivity=trim_or_empty(raw.get("connectivity")),
        actuation_point=trim_or_empty(raw.get("actuation_point")),
        rapid_trigger=flag(raw.get("rapid_trigger")),
        analog_input=flag(raw.get("analog_input")),
        keycap_type=trim_or_empty(raw.get("keycap_type")),
    )


def resolve_mousepad_specs(product: Product) -> ResolvedMousepadSpecs:
    """
    Extract typed mousepad specs from a product.

    Ratings are clamped into 0-10 so every resolved value can be
    compared directly; an unset rating resolves to 0.
    """
    raw = _raw_specs(product, "mousepad")
    return ResolvedMousepadSpecs(
        surface_type=trim_or_empty(raw.get("surface_type")),
        speed_rating=clamp_rating(raw.get("speed_rating")),
        control_rating=clamp_rating(raw.get("control_rating")),
        size=trim_or_empty(raw.get("size")),
        thickness=trim_or_empty(raw.get("thickness")),
        base_type=trim_or_empty(raw.get("base_type")),
        humidity_resistance=trim_or_empty(raw.get("humidity_resistance")),
    )


def resolve_iem_specs(product: Product) -> ResolvedIemSpecs:
    raw = _raw_specs(product, "iem")
    return ResolvedIemSpecs(
        driver_type=trim_or_empty(raw.get("driver_type")),
        impedance=trim_or_empty(raw.get("impedance")),
        frequency_response=trim_or_empty(raw.get("frequency_response")),
        connectivity=trim_or_empty(raw.get("connectivity")),
        microphone=flag(raw.get("microphone")),
    )


RESOLVERS: Dict[str, Callable[[Product], BaseModel]] = {
    "mouse": resolve_mouse_specs,
    "keyboard": resolve_keyboard_specs,
    "mousepad": resolve_mousepad_specs,
    "iem": resolve_iem_specs,
}


def resolve_specs(product: Product) -> Optional[BaseModel]:
    """Resolve a product with the resolver for its own category.

    Products in the ``other`` category have no spec variant and
    resolve to ``None``.
    """
    resolver = RESOLVERS.get(product.category)
    if resolver is None:
        return None
    return resolver(product)
