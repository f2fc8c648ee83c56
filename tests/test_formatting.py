"""Tests for the display spec formatter."""

import json
import math

import pytest

from storefront.config import SpecEntry
from storefront.formatting import (
    format_number,
    format_spec_label,
    format_spec_value,
    get_spec_entries,
)


class TestFormatSpecLabel:
    @pytest.mark.parametrize(
        "key, label",
        [
            ("dpi", "DPI"),
            ("switch_type", "Switch Type"),
            ("max_dpi", "Max DPI"),
            ("usb_iem_adapter", "USB IEM Adapter"),
            ("Polling_rate", "Polling Rate"),
            ("__weight__", "Weight"),
            ("DPI", "DPI"),
        ],
    )
    def test_labels(self, key, label):
        assert format_spec_label(key) == label


class TestFormatSpecValue:
    def test_drop_rules(self):
        assert format_spec_value(-1, "weight") is None
        assert format_spec_value(math.nan, "dpi") is None
        assert format_spec_value(math.inf, "dpi") is None
        assert format_spec_value("", "sensor") is None
        assert format_spec_value("   ", "sensor") is None
        assert format_spec_value(None, "sensor") is None

    def test_booleans(self):
        assert format_spec_value(True, "rapid_trigger") == "Yes"
        assert format_spec_value(False, "microphone") == "No"

    def test_units(self):
        assert format_spec_value(54, "weight") == "54g"
        assert format_spec_value(26000, "dpi") == "26,000 DPI"
        assert format_spec_value(8000, "polling_rate") == "8,000 Hz"
        assert format_spec_value(7.5, "speed_rating") == "7.5/10"

    def test_unknown_key_has_no_unit(self):
        assert format_spec_value(3, "buttons") == "3"

    def test_zero_is_renderable(self):
        assert format_spec_value(0, "control_rating") == "0/10"

    def test_strings_are_trimmed(self):
        assert format_spec_value("  PAW3395 ", "sensor") == "PAW3395"

    @pytest.mark.parametrize("value", [["a"], {"a": 1}, (1, 2), object()])
    def test_other_types_dropped(self, value):
        assert format_spec_value(value, "misc") is None


def test_format_number():
    assert format_number(1234567) == "1,234,567"
    assert format_number(59.5) == "59.5"
    assert format_number(1.23456) == "1.235"
    assert format_number(100.0) == "100"
    assert format_number(0) == "0"


class TestGetSpecEntries:
    def test_preserves_insertion_order(self):
        specs = {"weight": 60, "sensor": "Focus Pro", "dpi": 30000, "wireless": True}
        assert get_spec_entries(specs) == [
            SpecEntry(label="Weight", value="60g"),
            SpecEntry(label="Sensor", value="Focus Pro"),
            SpecEntry(label="DPI", value="30,000 DPI"),
            SpecEntry(label="Wireless", value="Yes"),
        ]

    def test_drops_non_renderable_and_blank_keys(self):
        specs = {"": "x", "  ": "y", "sensor": "", "weight": -5, "shape": None, "layout": "TKL"}
        assert get_spec_entries(specs) == [SpecEntry(label="Layout", value="TKL")]

    @pytest.mark.parametrize("specs", [None, [], "weight"])
    def test_missing_bag(self, specs):
        assert get_spec_entries(specs) == []


def test_oversized_json_number_is_dropped():
    big = json.loads("1" + "0" * 400)
    assert format_spec_value(big, "dpi") is None
    assert get_spec_entries({"dpi": big, "sensor": "PAW3395"}) == [
        SpecEntry(label="Sensor", value="PAW3395")
    ]
