# file: lupn/core/regions.py
"""
Region code to English display name resolution.

Region codes come from `phonenumbers` (ISO 3166-1 alpha-2, plus the "ZZ"
sentinel for unknown and "001" for non-geographic entities). Display names
come from the CLDR territory table shipped with `babel`; `pycountry` maps ISO
alpha-3 and numeric country codes onto their alpha-2 form first.
"""

from __future__ import annotations

import logging
import re

import pycountry
from babel import Locale

logger = logging.getLogger(__name__)

UNKNOWN_REGION = "Unknown Region"
UNKNOWN_REGION_CODE = "ZZ"

_ENGLISH = Locale("en")

_ALPHA2 = re.compile(r"[A-Za-z]{2}")
_ALPHA3 = re.compile(r"[A-Za-z]{3}")
_NUMERIC = re.compile(r"[0-9]{3}")


def _iso_to_alpha2(**query: str) -> str | None:
    try:
        country = pycountry.countries.get(**query)
    except (KeyError, LookupError):
        country = None
    return country.alpha_2 if country is not None else None


def parse_region(code: str) -> str | None:
    """
    Return the canonical form of a region identifier, or None if malformed.

    Accepts ISO 3166-1 alpha-2 and alpha-3 (case-insensitive) and three-digit
    UN M.49 codes. Alpha-3 and numeric country codes are canonicalized to
    alpha-2; numeric area codes such as "001" and unknown alpha-3 codes are
    kept as given.
    """

    if _ALPHA2.fullmatch(code):
        return code.upper()
    if _ALPHA3.fullmatch(code):
        return _iso_to_alpha2(alpha_3=code.upper()) or code.upper()
    if _NUMERIC.fullmatch(code):
        return _iso_to_alpha2(numeric=code) or code
    return None


def region_display_name(region: str) -> str:
    """Return the CLDR English name for a canonical region, or ""."""

    return _ENGLISH.territories.get(region) or ""


def country_name(region_code: str) -> str:
    """
    Convert a region code (e.g. "DE") into an English country name ("Germany").

    Never raises. Empty input and the "ZZ" sentinel map to "Unknown Region";
    malformed codes and codes without a known name are returned unchanged.
    """

    if not region_code:
        return UNKNOWN_REGION

    region = parse_region(region_code)
    if region is None:
        logger.debug("Unparseable region code %r", region_code)
        return region_code

    name = region_display_name(region)
    if not name:
        if region_code == UNKNOWN_REGION_CODE:
            return UNKNOWN_REGION
        return region_code

    return name
