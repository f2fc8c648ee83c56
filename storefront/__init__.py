"""
Top-level package for the storefront catalog core.

This package turns loosely-typed product records from the inventory
API into three derived views: resolved per-category specs for filter
controls, formatted label/value spec entries for display, and a
bounded list of related products.  Every transformation is a pure
function over in-memory data; the only I/O lives in
:mod:`storefront.catalog_client` and :mod:`storefront.catalog_snapshot`.
There are no side-effects on import.
"""
from __future__ import annotations
