"""Tests for the inventory API client and catalog snapshots.

The client is exercised against ``httpx.MockTransport`` so no network
access is needed.
"""

import json
import os

import httpx
import pytest

from storefront import catalog_client, catalog_snapshot
from storefront.catalog_client import (
    api_fetch,
    contact_info,
    get_companies,
    get_creator_profile,
    get_picks,
    get_product_by_slug,
    get_products,
    is_valid_slug,
)
from storefront.catalog_snapshot import (
    load_catalog_snapshot,
    load_catalog_snapshot_cached,
    parse_products,
    write_catalog_snapshot,
)

BASE = "http://inventory.test/api/v1/public"

RECORDS = [
    {"id": 1, "slug": "viper-v3", "category": "mouse", "category_slug": "mice", "retail_price": 159.99, "pick_category": "Best Wireless"},
    {"id": 2, "slug": "artisan-zero", "category": "mousepad", "category_slug": "mousepads", "retail_price": 55, "specs": {"speed_rating": 6}},
    {"slug": "missing-id"},
]


def _client(handler) -> httpx.Client:
    return httpx.Client(base_url=BASE, transport=httpx.MockTransport(handler))


class TestSlugValidation:
    @pytest.mark.parametrize("slug", ["viper-v3", "a", "0-pad", "g-pro-x-superlight-2"])
    def test_valid(self, slug):
        assert is_valid_slug(slug)

    @pytest.mark.parametrize("slug", ["", "-leading", "Upper", "has space", "a/b", "a_b", "pad\n", None, 5])
    def test_invalid(self, slug):
        assert not is_valid_slug(slug)


class TestApiFetch:
    def test_returns_json(self):
        client = _client(lambda request: httpx.Response(200, json={"ok": True}))
        assert api_fetch("/anything", client) == {"ok": True}

    def test_http_error_is_none(self):
        client = _client(lambda request: httpx.Response(503))
        assert api_fetch("/products", client) is None

    def test_transport_error_is_none(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        assert api_fetch("/products", _client(handler)) is None

    def test_timeout_is_none(self):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        assert api_fetch("/products", _client(handler)) is None

    def test_invalid_json_is_none(self):
        client = _client(lambda request: httpx.Response(200, content=b"<html>"))
        assert api_fetch("/products", client) is None


class TestProducts:
    def test_get_products_skips_invalid_records(self):
        seen = []

        def handler(request):
            seen.append(request.url.path)
            return httpx.Response(200, json=RECORDS)

        products = get_products(_client(handler))
        assert [p.slug for p in products] == ["viper-v3", "artisan-zero"]
        assert seen == ["/api/v1/public/products"]

    def test_get_products_failure_is_empty(self):
        assert get_products(_client(lambda request: httpx.Response(500))) == []

    def test_get_product_by_slug(self):
        def handler(request):
            assert request.url.path == "/api/v1/public/products/artisan-zero"
            return httpx.Response(200, json=RECORDS[1])

        product = get_product_by_slug("artisan-zero", _client(handler))
        assert product is not None
        assert product.id == 2
        assert product.specs == {"speed_rating": 6}

    def test_invalid_slug_makes_no_request(self):
        def handler(request):
            raise AssertionError("request should not be sent")

        assert get_product_by_slug("../admin", _client(handler)) is None

    def test_not_found(self):
        assert get_product_by_slug("gone", _client(lambda request: httpx.Response(404))) is None

    def test_get_picks(self):
        picks = get_picks(_client(lambda request: httpx.Response(200, json=RECORDS)))
        assert [p.slug for p in picks] == ["viper-v3"]

    def test_default_client_sends_api_key(self, monkeypatch):
        captured = {}

        def handler(request):
            captured.update(request.headers)
            return httpx.Response(200, json=[])

        def fake_client():
            return httpx.Client(
                base_url=BASE,
                headers={"X-API-Key": "secret", "Accept": "application/json"},
                transport=httpx.MockTransport(handler),
            )

        monkeypatch.setattr(catalog_client, "_make_client", fake_client)
        assert get_products() == []
        assert captured["x-api-key"] == "secret"
        assert captured["accept"] == "application/json"


class TestProductParsing:
    def test_lenient_fields(self):
        [product] = parse_products([
            {"id": 7, "slug": "odd", "category": "MOUSEPAD", "category_slug": "pads", "retail_price": "cheap", "specs": ["x"]}
        ])
        assert product.category == "mousepad"
        assert product.category_slug is None
        assert product.retail_price is None
        assert product.specs is None

    def test_non_list_payload(self):
        assert parse_products({"products": []}) == []

    def test_oversized_price_is_unknown(self):
        big = json.loads("1" + "0" * 400)
        [product] = parse_products([{"id": 1, "slug": "a", "retail_price": big, "rating": big}])
        assert product.retail_price is None
        assert product.rating is None

    def test_oversized_price_in_api_payload_keeps_catalog(self):
        body = '[{"id": 1, "slug": "a", "retail_price": 1' + "0" * 400 + '}, {"id": 2, "slug": "b"}]'
        client = _client(lambda request: httpx.Response(200, content=body.encode()))
        assert [p.slug for p in get_products(client)] == ["a", "b"]

    @pytest.mark.parametrize("pros, expected", [("Great shape", None), ([1, "Light", None], ["Light"]), (None, None)])
    def test_malformed_pros_cons_keep_product(self, pros, expected):
        [product] = parse_products([{"id": 3, "slug": "c", "pros": pros, "cons": {"bad": 1}}])
        assert product.pros == expected
        assert product.cons is None


def test_snapshot_round_trip(tmp_path):
    products = parse_products(RECORDS)
    path = write_catalog_snapshot(products, tmp_path / "nested" / "catalog.json")
    assert json.loads(path.read_text(encoding="utf-8"))[0]["slug"] == "viper-v3"
    assert load_catalog_snapshot(path) == products


def test_cached_snapshot_rereads_only_when_file_changes(tmp_path, monkeypatch):
    path = write_catalog_snapshot(parse_products(RECORDS), tmp_path / "catalog.json")
    calls = []
    real_load = catalog_snapshot.load_catalog_snapshot

    def counting_load(p):
        calls.append(p)
        return real_load(p)

    monkeypatch.setattr(catalog_snapshot, "_snapshot_cache", {})
    monkeypatch.setattr(catalog_snapshot, "load_catalog_snapshot", counting_load)

    first = load_catalog_snapshot_cached(path)
    assert load_catalog_snapshot_cached(path) is first
    assert len(calls) == 1

    mtime = path.stat().st_mtime_ns
    os.utime(path, ns=(mtime, mtime + 2_000_000_000))
    assert load_catalog_snapshot_cached(path) == first
    assert len(calls) == 2


class TestCompaniesAndProfile:
    PROFILE = {
        "display_name": "DazzTrazak",
        "tagline": "Peripheral reviews",
        "social_links": {"youtube": "https://youtube.com/@example", "bad": 3},
    }

    def test_get_companies(self):
        def handler(request):
            assert request.url.path == "/api/v1/public/companies"
            return httpx.Response(200, json=[{"id": 1, "name": "Pulsar", "category": "mouse"}, {"name": "no id"}])

        companies = get_companies(_client(handler))
        assert [c.name for c in companies] == ["Pulsar"]

    def test_get_companies_failure_is_empty(self):
        assert get_companies(_client(lambda request: httpx.Response(502))) == []

    def test_get_creator_profile(self):
        def handler(request):
            assert request.url.path == "/api/v1/public/creator-profile"
            return httpx.Response(200, json=self.PROFILE)

        profile = get_creator_profile(_client(handler))
        assert profile is not None
        assert profile.social_links == {"youtube": "https://youtube.com/@example"}

    def test_get_creator_profile_failure_is_none(self):
        assert get_creator_profile(_client(lambda request: httpx.Response(500))) is None

    def test_contact_info_falls_back_without_profile(self):
        info = contact_info(None)
        assert info.email == "business@dazztrazak.com"
        assert info.social_links == {
            "youtube": "https://youtube.com/@dazztrazak",
            "twitter": "https://twitter.com/dazztrazak",
        }

    def test_contact_info_uses_profile_links(self):
        profile = get_creator_profile(_client(lambda request: httpx.Response(200, json=self.PROFILE)))
        info = contact_info(profile)
        assert info.display_name == "DazzTrazak"
        assert info.social_links == {"youtube": "https://youtube.com/@example"}

    def test_contact_info_profile_without_links(self):
        profile = get_creator_profile(
            _client(lambda request: httpx.Response(200, json={"display_name": "X", "social_links": None}))
        )
        assert contact_info(profile).social_links["twitter"] == "https://twitter.com/dazztrazak"
