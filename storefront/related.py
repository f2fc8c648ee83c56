from __future__ import annotations

"""
Related-products selection for a product detail page.

Given one product and the full catalog this module assembles a short
list of other products from the same category.  When the current
product has a usable price, products within a +/-30% price band are
preferred; if fewer than ``PRICE_MATCH_MIN`` of them exist the list is
backfilled with the remaining same-category products.  Ordering is
always the catalog's own iteration order, with no secondary sort, so
the output is deterministic for a given catalog snapshot.

Nothing here crosses categories: a product with no same-category
neighbours gets an empty list.
"""

from typing import Iterable, List

from loguru import logger

from .config import (
    FALLBACK_CATEGORY_SLUG,
    PRICE_BAND_HIGH,
    PRICE_BAND_LOW,
    PRICE_MATCH_MIN,
    RELATED_DEFAULT_LIMIT,
    Product,
)
from .normalize import positive_price


def effective_category_slug(product: Product) -> str:
    return product.category_slug or FALLBACK_CATEGORY_SLUG


def _same_category(current: Product, catalog: Iterable[Product]) -> List[Product]:
    """Same-category products other than ``current``, first occurrence per id."""
    slug = effective_category_slug(current)
    seen = {current.id}
    out: List[Product] = []
    for p in catalog:
        if p.id in seen or effective_category_slug(p) != slug:
            continue
        seen.add(p.id)
        out.append(p)
    return out


def in_price_band(product: Product, reference_price: float) -> bool:
    price = positive_price(product.retail_price)
    if price is None:
        return False
    return reference_price * PRICE_BAND_LOW <= price <= reference_price * PRICE_BAND_HIGH


def get_related_products(
    current: Product,
    catalog: Iterable[Product],
    limit: int = RELATED_DEFAULT_LIMIT,
) -> List[Product]:
    """Return up to ``limit`` related products for ``current``.

    The result never contains ``current`` itself and never contains
    the same product twice.  A negative ``limit`` is treated as 0.
    """
    limit = max(0, limit)
    same_category = _same_category(current, catalog)
    if not same_category:
        logger.debug("No same-category products for {}", current.slug)
        return []

    display_price = positive_price(current.retail_price)
    if display_price is None:
        # No reference price: keep catalog order
        return same_category[:limit]

    price_filtered = [p for p in same_category if in_price_band(p, display_price)]
    if len(price_filtered) >= PRICE_MATCH_MIN:
        return price_filtered[:limit]

    # Backfill: price matches first, then the rest of the category
    matched_ids = {p.id for p in price_filtered}
    backfill = [p for p in same_category if p.id not in matched_ids]
    logger.debug(
        "Backfilling related for {}: {} in-band, {} others",
        current.slug,
        len(price_filtered),
        len(backfill),
    )
    return (price_filtered + backfill)[:limit]
