# file: tests/test_regions.py
from __future__ import annotations

import pytest

from lupn.core import regions
from lupn.core.regions import UNKNOWN_REGION, country_name, parse_region, region_display_name


def test_country_name_empty_is_unknown_region() -> None:
    assert country_name("") == UNKNOWN_REGION == "Unknown Region"


def test_country_name_zz_sentinel_is_unknown_region() -> None:
    assert country_name("ZZ") == "Unknown Region"
    assert country_name("zz") == "Unknown Region"


def test_country_name_zz_without_display_data_is_unknown_region(monkeypatch) -> None:
    monkeypatch.setattr(regions, "region_display_name", lambda region: "")
    assert country_name("ZZ") == "Unknown Region"
    assert country_name("DE") == "DE"


def test_country_name_resolves_english_name() -> None:
    assert country_name("DE") == "Germany"
    assert country_name("de") == "Germany"


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        ("RU", "Russia"),
        ("KR", "South Korea"),
        ("TW", "Taiwan"),
        ("GB", "United Kingdom"),
        ("US", "United States"),
        ("AC", "Ascension Island"),
        ("TA", "Tristan da Cunha"),
        ("XK", "Kosovo"),
        ("001", "World"),
    ],
)
def test_country_name_uses_cldr_display_names(code: str, expected: str) -> None:
    assert country_name(code) == expected


def test_country_name_numeric_and_alpha3_codes() -> None:
    assert country_name("276") == "Germany"
    assert country_name("DEU") == "Germany"
    assert country_name("deu") == "Germany"


@pytest.mark.parametrize("code", ["QQ", "QQQ", "999"])
def test_country_name_well_formed_without_name_is_returned_unchanged(code: str) -> None:
    assert country_name(code) == code


@pytest.mark.parametrize("code", ["D3", "Germany", "1", "+49", "DE1"])
def test_country_name_malformed_code_is_returned_unchanged(code: str) -> None:
    assert country_name(code) == code


def test_parse_region_shapes() -> None:
    assert parse_region("gb") == "GB"
    assert parse_region("GBR") == "GB"
    assert parse_region("840") == "US"
    assert parse_region("001") == "001"
    assert parse_region("G8") is None
    assert parse_region("") is None


def test_region_display_name_missing_is_empty() -> None:
    assert region_display_name("QQ") == ""
