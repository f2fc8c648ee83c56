from __future__ import annotations
"""
Configuration for the storefront catalog core.
"""

import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

# Paths
PROJECT_ROOT = Path(__file__).resolve().parents[1]
DATA_DIR = PROJECT_ROOT / "data"
CATALOG_SNAPSHOT_PATH = Path(
    os.getenv("CATALOG_SNAPSHOT_PATH", str(DATA_DIR / "catalog_snapshot.json"))
)

# Inventory API
API_BASE_URL = os.getenv("API_BASE_URL", "http://mouse-domination:5000/api/v1/public")
API_KEY = os.getenv("API_KEY", "")
API_TIMEOUT_SECONDS = float(os.getenv("API_TIMEOUT_SECONDS", "10"))

# Slugs are lowercase, URL-safe and never start with a hyphen
SLUG_RE = re.compile(r"^[a-z0-9][a-z0-9-]*$")

# Categories (singular as stored in the CRM, plural as used in URLs)
INVENTORY_CATEGORIES: List[str] = ["mouse", "keyboard", "mousepad", "iem", "other"]
CATEGORY_MAP: Dict[str, Optional[str]] = {
    "mouse": "mice",
    "keyboard": "keyboards",
    "mousepad": "mousepads",
    "iem": "iems",
    "other": None,
}
CATEGORY_SLUGS: List[str] = ["mice", "keyboards", "mousepads", "iems"]
CATEGORY_LABELS: Dict[str, str] = {
    "mice": "Mice",
    "keyboards": "Keyboards",
    "mousepads": "Mousepads",
    "iems": "IEMs",
}
FALLBACK_CATEGORY_SLUG = "other"

# Spec display
SPEC_UNITS: Dict[str, str] = {
    "weight": "g",
    "dpi": " DPI",
    "polling_rate": " Hz",
    "speed_rating": "/10",
    "control_rating": "/10",
}
BRAND_NAMES: Dict[str, str] = {
    "dpi": "DPI",
    "iem": "IEM",
    "usb": "USB",
}
NUMBER_MAX_FRACTION_DIGITS = 3

# Mousepad filter options
SURFACE_TYPES: List[str] = ["Speed", "Control", "Hybrid"]
MOUSEPAD_SIZES: List[str] = ["Small", "Medium", "Large", "XL", "Desk Mat"]

# Ratings are 0-10; 0 doubles as "no rating data"
RATING_MIN = 0
RATING_MAX = 10

# Related products
RELATED_DEFAULT_LIMIT = 4
RELATED_MAX_LIMIT = 24
PRICE_BAND_LOW = 0.7
PRICE_BAND_HIGH = 1.3
PRICE_MATCH_MIN = 3  # below this many in-band matches we backfill

# YouTube embeds
YOUTUBE_ID_RE = re.compile(r"^[A-Za-z0-9_-]{11}$")
YOUTUBE_EMBED_BASE = "https://www.youtube-nocookie.com/embed/"
YOUTUBE_HOSTS = {"youtube.com", "youtube-nocookie.com", "m.youtube.com"}

# Fallbacks when the creator profile is unavailable
CONTACT_EMAIL = "business@dazztrazak.com"
DEFAULT_SOCIAL_LINKS: Dict[str, str] = {
    "youtube": "https://youtube.com/@dazztrazak",
    "twitter": "https://twitter.com/dazztrazak",
}


# Pydantic schemas
class Product(BaseModel):
    """Product as returned by the public inventory API.

    Validation is lenient: the record comes from an external system,
    so malformed classification, price or display-metadata fields
    degrade to their "unknown" values instead of rejecting the whole
    product.
    """

    model_config = ConfigDict(extra="ignore")

    id: int
    slug: str
    product_name: str = ""
    category: str = "other"
    category_slug: Optional[str] = None
    image_url: Optional[str] = None
    retail_price: Optional[float] = None
    short_verdict: Optional[str] = None
    pros: Optional[List[str]] = None
    cons: Optional[List[str]] = None
    rating: Optional[float] = None
    specs: Optional[Dict[str, Any]] = None
    video_url: Optional[str] = None
    pick_category: Optional[str] = None
    date_acquired: Optional[str] = None
    company_name: Optional[str] = None
    company_website: Optional[str] = None
    affiliate_link: Optional[str] = None
    affiliate_code: Optional[str] = None

    @field_validator("category", mode="before")
    @classmethod
    def _known_category(cls, v):
        if isinstance(v, str) and v.strip().lower() in INVENTORY_CATEGORIES:
            return v.strip().lower()
        return "other"

    @field_validator("category_slug", mode="before")
    @classmethod
    def _known_category_slug(cls, v):
        if isinstance(v, str) and v.strip().lower() in CATEGORY_SLUGS:
            return v.strip().lower()
        return None

    @field_validator("retail_price", "rating", mode="before")
    @classmethod
    def _finite_number(cls, v):
        from .normalize import is_finite_number

        return float(v) if is_finite_number(v) else None

    @field_validator("pros", "cons", mode="before")
    @classmethod
    def _string_list_or_none(cls, v):
        if not isinstance(v, list):
            return None
        return [item for item in v if isinstance(item, str)]

    @field_validator("specs", mode="before")
    @classmethod
    def _mapping_or_none(cls, v):
        return dict(v) if isinstance(v, dict) else None


class ResolvedMouseSpecs(BaseModel):
    weight: float = 0
    sensor: str = ""
    dpi: float = 0
    polling_rate: float = 0
    battery_life: str = ""
    connectivity: str = ""
    shape: str = ""
    dimensions: str = ""
    switch_type: str = ""


class ResolvedKeyboardSpecs(BaseModel):
    switch_type: str = ""
    layout: str = ""
    connectivity: str = ""
    actuation_point: str = ""
    rapid_trigger: bool = False
    analog_input: bool = False
    keycap_type: str = ""


class ResolvedMousepadSpecs(BaseModel):
    """Mousepad specs with guaranteed non-null defaults for filtering."""

    surface_type: str = ""
    speed_rating: float = 0
    control_rating: float = 0
    size: str = ""
    thickness: str = ""
    base_type: str = ""
    humidity_resistance: str = ""


class ResolvedIemSpecs(BaseModel):
    driver_type: str = ""
    impedance: str = ""
    frequency_response: str = ""
    connectivity: str = ""
    microphone: bool = False


class SpecEntry(BaseModel):
    label: str
    value: str


class RelatedResponse(BaseModel):
    slug: str
    related: List[Product]


class SpecsResponse(BaseModel):
    slug: str
    specs: List[SpecEntry]


class HealthResponse(BaseModel):
    status: str


class CategoryInfo(BaseModel):
    slug: str
    label: str


class Company(BaseModel):
    """Company as returned by the public inventory API."""

    model_config = ConfigDict(extra="ignore")

    id: int
    name: str
    category: str = ""
    website: Optional[str] = None
    affiliate_link: Optional[str] = None
    affiliate_code: Optional[str] = None


class CreatorProfile(BaseModel):
    model_config = ConfigDict(extra="ignore")

    display_name: str
    tagline: Optional[str] = None
    bio: Optional[str] = None
    photo_url: Optional[str] = None
    location: Optional[str] = None
    website_url: Optional[str] = None
    social_links: Optional[Dict[str, str]] = None
    platform_stats: Optional[Dict[str, Any]] = None
    audience_demographics: Optional[Dict[str, Any]] = None
    content_niches: Optional[List[str]] = None

    @field_validator("social_links", mode="before")
    @classmethod
    def _string_links_only(cls, v):
        if not isinstance(v, dict):
            return None
        return {k: u for k, u in v.items() if isinstance(k, str) and isinstance(u, str)}


class ContactInfo(BaseModel):
    """Contact details for the "work with me" page, with fallbacks applied."""

    display_name: Optional[str] = None
    email: str = CONTACT_EMAIL
    social_links: Dict[str, str]
