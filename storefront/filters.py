from __future__ import annotations

"""
Filter predicates over resolved mousepad specs.

Each matcher is total and independent so callers can AND them across
fields.  All matchers operate on the resolved form from
:mod:`storefront.specs`, never on the raw spec bag.
"""

from typing import Iterable, List

from loguru import logger
from pydantic import BaseModel, Field, field_validator

from .config import (
    MOUSEPAD_SIZES,
    RATING_MAX,
    RATING_MIN,
    SURFACE_TYPES,
    Product,
    ResolvedMousepadSpecs,
)
from .specs import resolve_mousepad_specs


def matches_exact(value: str, filter_value: str) -> bool:
    """Case-insensitive equality; an empty filter matches everything."""
    if filter_value == "":
        return True
    return value.lower() == filter_value.lower()


def matches_surface_type(resolved: ResolvedMousepadSpecs, filter_value: str) -> bool:
    """
    Check whether a product's surface_type matches one of the known
    filter values.  Comparison is case-insensitive to handle
    inconsistent API data.
    """
    return matches_exact(resolved.surface_type, filter_value)


def matches_mousepad_size(resolved: ResolvedMousepadSpecs, filter_value: str) -> bool:
    return matches_exact(resolved.size, filter_value)


def matches_rating_range(value: float, min_value: float, max_value: float) -> bool:
    """
    Check whether a rating falls within ``[min_value, max_value]``.

    A range covering 0-10 is no filter at all.  A rating of exactly 0
    means "unset" after resolution, so it only passes when the lower
    bound is also 0.
    """
    if min_value <= RATING_MIN and max_value >= RATING_MAX:
        return True
    if value == 0:
        return min_value <= RATING_MIN
    return min_value <= value <= max_value


def _canonical_option(value: str, options: List[str], field: str) -> str:
    """Map a filter value onto its listed spelling; '' means no filter."""
    value = value.strip()
    if value == "":
        return value
    for option in options:
        if option.lower() == value.lower():
            return option
    raise ValueError(f"{field} must be one of {options} or empty")


class MousepadFilter(BaseModel):
    surface_type: str = ""
    size: str = ""
    speed_min: float = Field(default=RATING_MIN, ge=RATING_MIN, le=RATING_MAX)
    speed_max: float = Field(default=RATING_MAX, ge=RATING_MIN, le=RATING_MAX)
    control_min: float = Field(default=RATING_MIN, ge=RATING_MIN, le=RATING_MAX)
    control_max: float = Field(default=RATING_MAX, ge=RATING_MIN, le=RATING_MAX)

    @field_validator("surface_type")
    @classmethod
    def _known_surface_type(cls, v: str) -> str:
        return _canonical_option(v, SURFACE_TYPES, "surface_type")

    @field_validator("size")
    @classmethod
    def _known_size(cls, v: str) -> str:
        return _canonical_option(v, MOUSEPAD_SIZES, "size")

    def matches(self, resolved: ResolvedMousepadSpecs) -> bool:
        return (
            matches_surface_type(resolved, self.surface_type)
            and matches_mousepad_size(resolved, self.size)
            and matches_rating_range(resolved.speed_rating, self.speed_min, self.speed_max)
            and matches_rating_range(resolved.control_rating, self.control_min, self.control_max)
        )


def filter_mousepads(products: Iterable[Product], mousepad_filter: MousepadFilter) -> List[Product]:
    """Return the mousepads matching every field of ``mousepad_filter``.

    Non-mousepad products are dropped.  Catalog order is preserved.
    """
    out: List[Product] = []
    for product in products:
        if product.category != "mousepad":
            continue
        if mousepad_filter.matches(resolve_mousepad_specs(product)):
            out.append(product)
    logger.debug("Mousepad filter {} kept {} products", mousepad_filter.model_dump(), len(out))
    return out
