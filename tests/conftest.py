"""Shared fixtures for the storefront catalog tests."""

import itertools

import pytest

from storefront.config import CATEGORY_MAP, Product

_ids = itertools.count(1)


def make_product(category="mouse", price=None, specs=None, **overrides) -> Product:
    """Build a Product with a unique id/slug unless given explicitly."""
    pid = overrides.pop("id", next(_ids))
    record = {
        "id": pid,
        "slug": overrides.pop("slug", f"{category}-{pid}"),
        "product_name": f"Product {pid}",
        "category": category,
        "category_slug": CATEGORY_MAP.get(category),
        "retail_price": price,
        "specs": specs,
    }
    record.update(overrides)
    return Product.model_validate(record)


@pytest.fixture
def product_factory():
    return make_product
