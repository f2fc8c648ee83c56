from __future__ import annotations

"""
Helpers to parse product records and persist catalog snapshots.

The inventory API returns a JSON list of product records.  This module
validates those records into :class:`~storefront.config.Product`
objects, skipping (and logging) any record that cannot be parsed, and
can read or write the same list as a local JSON snapshot so the API
and CLI can run without network access.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple, Type, TypeVar

from loguru import logger
from pydantic import BaseModel, ValidationError

from .config import CATALOG_SNAPSHOT_PATH, Product


ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_records(model: Type[ModelT], records: Any) -> List[ModelT]:
    """Validate raw records into ``model`` objects, dropping the invalid ones."""
    name = model.__name__
    if not isinstance(records, list):
        logger.warning("Expected a list of {} records, got {}", name, type(records).__name__)
        return []
    out: List[ModelT] = []
    for i, record in enumerate(records):
        try:
            out.append(model.model_validate(record))
        except ValidationError as e:
            logger.warning("Skipping {} record {}: {} error(s)", name, i, e.error_count())
    return out


def parse_products(records: Any) -> List[Product]:
    return parse_records(Product, records)


def load_catalog_snapshot(path: Path = CATALOG_SNAPSHOT_PATH) -> List[Product]:
    """
    Load a catalog snapshot written by :func:`write_catalog_snapshot`
    (or saved straight from the API).
    """
    logger.info("Loading catalog snapshot from {}", path)
    with open(path, "r", encoding="utf-8") as f:
        records = json.load(f)
    products = parse_products(records)
    logger.info("Loaded catalog snapshot with {} products", len(products))
    return products


def write_catalog_snapshot(products: Iterable[Product], path: Path = CATALOG_SNAPSHOT_PATH) -> Path:
    records = [p.model_dump(mode="json") for p in products]
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(records, f, ensure_ascii=False, indent=2)
    logger.info("Catalog snapshot written with {} products to {}", len(records), path)
    return path


_snapshot_cache: Dict[Path, Tuple[int, List[Product]]] = {}


def load_catalog_snapshot_cached(path: Path = CATALOG_SNAPSHOT_PATH) -> List[Product]:
    """
    Like :func:`load_catalog_snapshot`, but re-reads the file only when
    its modification time changes.  Callers must not mutate the list.
    """
    mtime = path.stat().st_mtime_ns
    cached = _snapshot_cache.get(path)
    if cached is not None and cached[0] == mtime:
        return cached[1]
    products = load_catalog_snapshot(path)
    _snapshot_cache[path] = (mtime, products)
    return products
