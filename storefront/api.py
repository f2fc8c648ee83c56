from __future__ import annotations

"""
FastAPI application exposing the derived catalog views.

- ``/products/{slug}/specs``: display-ready label/value spec entries
- ``/products/{slug}/resolved-specs``: default-filled specs for filter UIs
- ``/products/{slug}/related``: bounded related-products list
- ``/mousepads``: mousepads matching surface/size/rating filters
- ``/categories``, ``/contact``: static navigation and contact data

Each request works on one catalog list: the local snapshot when one
exists (re-read only when the file changes), otherwise a fresh fetch
from the inventory API.
"""

from typing import Any, Dict, List

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from pydantic import ValidationError

from .catalog_client import contact_info, get_creator_profile, get_products, is_valid_slug
from .catalog_snapshot import load_catalog_snapshot_cached
from .config import (
    CATALOG_SNAPSHOT_PATH,
    CATEGORY_LABELS,
    CATEGORY_SLUGS,
    RATING_MAX,
    RATING_MIN,
    RELATED_DEFAULT_LIMIT,
    RELATED_MAX_LIMIT,
    CategoryInfo,
    ContactInfo,
    HealthResponse,
    Product,
    RelatedResponse,
    SpecsResponse,
)
from .filters import MousepadFilter, filter_mousepads
from .formatting import get_spec_entries
from .related import get_related_products
from .specs import resolve_specs

app = FastAPI(title="storefront-catalog")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)


def get_catalog() -> List[Product]:
    if CATALOG_SNAPSHOT_PATH.exists():
        return load_catalog_snapshot_cached(CATALOG_SNAPSHOT_PATH)
    products = get_products()
    logger.info("Fetched {} products from inventory API", len(products))
    return products


def _find_product(catalog: List[Product], slug: str) -> Product:
    if not is_valid_slug(slug):
        logger.warning("Rejected invalid slug {!r}", slug)
        raise HTTPException(status_code=404, detail="Product not found")
    for p in catalog:
        if p.slug == slug:
            return p
    raise HTTPException(status_code=404, detail="Product not found")


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="healthy")


@app.get("/categories", response_model=List[CategoryInfo])
def categories() -> List[CategoryInfo]:
    return [CategoryInfo(slug=s, label=CATEGORY_LABELS[s]) for s in CATEGORY_SLUGS]


@app.get("/contact", response_model=ContactInfo)
def contact() -> ContactInfo:
    return contact_info(get_creator_profile())


@app.get("/products/{slug}/specs", response_model=SpecsResponse)
def product_specs(slug: str, catalog: List[Product] = Depends(get_catalog)) -> SpecsResponse:
    product = _find_product(catalog, slug)
    return SpecsResponse(slug=slug, specs=get_spec_entries(product.specs))


@app.get("/products/{slug}/resolved-specs")
def product_resolved_specs(
    slug: str, catalog: List[Product] = Depends(get_catalog)
) -> Dict[str, Any]:
    product = _find_product(catalog, slug)
    resolved = resolve_specs(product)
    return {
        "slug": slug,
        "category": product.category,
        "specs": resolved.model_dump() if resolved is not None else None,
    }


@app.get("/products/{slug}/related", response_model=RelatedResponse)
def product_related(
    slug: str,
    limit: int = Query(RELATED_DEFAULT_LIMIT, ge=0, le=RELATED_MAX_LIMIT),
    catalog: List[Product] = Depends(get_catalog),
) -> RelatedResponse:
    product = _find_product(catalog, slug)
    related = get_related_products(product, catalog, limit)
    logger.info("Related for {}: {} products", slug, len(related))
    return RelatedResponse(slug=slug, related=related)


@app.get("/mousepads", response_model=List[Product])
def mousepads(
    surface_type: str = "",
    size: str = "",
    speed_min: float = Query(RATING_MIN, ge=RATING_MIN, le=RATING_MAX),
    speed_max: float = Query(RATING_MAX, ge=RATING_MIN, le=RATING_MAX),
    control_min: float = Query(RATING_MIN, ge=RATING_MIN, le=RATING_MAX),
    control_max: float = Query(RATING_MAX, ge=RATING_MIN, le=RATING_MAX),
    catalog: List[Product] = Depends(get_catalog),
) -> List[Product]:
    try:
        mousepad_filter = MousepadFilter(
            surface_type=surface_type,
            size=size,
            speed_min=speed_min,
            speed_max=speed_max,
            control_min=control_min,
            control_max=control_max,
        )
    except ValidationError as e:
        detail = [{"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()]
        raise HTTPException(status_code=422, detail=detail)
    return filter_mousepads(catalog, mousepad_filter)
