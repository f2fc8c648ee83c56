from __future__ import annotations

"""
Client for the public inventory API.

Every failure (bad HTTP status, timeout, transport error, malformed
JSON, invalid slug) is logged and reported as "not found": ``None``
for single lookups and ``[]`` for lists.  Nothing raises into the
caller, so page code can treat a missing product and an unreachable
API the same way.  Requests are not retried.
"""

from typing import Any, List, Optional

import httpx
from loguru import logger

from .config import (
    API_BASE_URL,
    API_KEY,
    API_TIMEOUT_SECONDS,
    DEFAULT_SOCIAL_LINKS,
    SLUG_RE,
    Company,
    ContactInfo,
    CreatorProfile,
    Product,
)
from .catalog_snapshot import parse_products, parse_records


def is_valid_slug(slug: Any) -> bool:
    return isinstance(slug, str) and SLUG_RE.fullmatch(slug) is not None


def _make_client() -> httpx.Client:
    return httpx.Client(
        base_url=API_BASE_URL,
        headers={"X-API-Key": API_KEY, "Accept": "application/json"},
        timeout=httpx.Timeout(API_TIMEOUT_SECONDS),
    )


def api_fetch(endpoint: str, client: Optional[httpx.Client] = None) -> Any:
    """
    GET ``endpoint`` from the inventory API and return the decoded JSON,
    or ``None`` on any failure.

    Parameters
    ----------
    endpoint : str
        Path relative to ``API_BASE_URL``, e.g. ``/products``.
    client : httpx.Client, optional
        Pre-configured client (tests pass one built on a mock
        transport).  When omitted a short-lived client is created.
    """
    owns_client = client is None
    if client is None:
        client = _make_client()
    try:
        r = client.get(endpoint)
        if r.status_code >= 400:
            logger.error("API error: {} {} for {}", r.status_code, r.reason_phrase, endpoint)
            return None
        return r.json()
    except httpx.TimeoutException:
        logger.error("API fetch timed out for {}", endpoint)
        return None
    except httpx.HTTPError as e:
        logger.error("API fetch failed for {}: {}", endpoint, e)
        return None
    except ValueError as e:
        logger.error("API returned invalid JSON for {}: {}", endpoint, e)
        return None
    finally:
        if owns_client:
            client.close()


def get_products(client: Optional[httpx.Client] = None) -> List[Product]:
    data = api_fetch("/products", client)
    if data is None:
        return []
    return parse_products(data)


def get_product_by_slug(slug: str, client: Optional[httpx.Client] = None) -> Optional[Product]:
    """Look up one product; invalid slugs are rejected before any request."""
    if not is_valid_slug(slug):
        logger.error("Invalid slug: {!r}", slug)
        return None
    data = api_fetch(f"/products/{slug}", client)
    if data is None:
        return None
    products = parse_products([data])
    return products[0] if products else None


def get_picks(client: Optional[httpx.Client] = None) -> List[Product]:
    """Products the creator has flagged with a pick category."""
    return [p for p in get_products(client) if p.pick_category]


def get_companies(client: Optional[httpx.Client] = None) -> List[Company]:
    data = api_fetch("/companies", client)
    if data is None:
        return []
    return parse_records(Company, data)


def get_creator_profile(client: Optional[httpx.Client] = None) -> Optional[CreatorProfile]:
    data = api_fetch("/creator-profile", client)
    if data is None:
        return None
    profiles = parse_records(CreatorProfile, [data])
    return profiles[0] if profiles else None


def contact_info(profile: Optional[CreatorProfile]) -> ContactInfo:
    """Contact details from the profile, falling back to the static defaults."""
    if profile is None:
        return ContactInfo(social_links=dict(DEFAULT_SOCIAL_LINKS))
    return ContactInfo(
        display_name=profile.display_name,
        social_links=profile.social_links or dict(DEFAULT_SOCIAL_LINKS),
    )
