# file: lupn/core/lookup.py
"""
Phone number / calling-code prefix lookup.

`lookup_number` never raises for bad input: a full number yields a
`NumberAnalysis`, a recognised calling-code prefix yields a `PrefixMatch`, and
anything else yields `NoMatch`. All number metadata comes from `phonenumbers`.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Union

import phonenumbers
from phonenumbers import NumberParseException

from lupn.core.regions import country_name

logger = logging.getLogger(__name__)

# Country calling codes are at most 3 digits; one extra digit is scanned.
DEFAULT_MAX_PREFIX_LENGTH = 4

_NUMERIC_PREFIX = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True, slots=True)
class NumberAnalysis:
    """A complete number that parsed successfully."""

    raw: str
    input: str
    country_code: int
    region_code: str
    country_name: str
    national_number: int
    valid: bool
    possible: bool


@dataclass(frozen=True, slots=True)
class PrefixMatch:
    """
    Only a leading calling code was recognised.

    Validity is not computed: there is no complete number to check.
    """

    raw: str
    input: str
    country_code: int
    region_codes: tuple[str, ...]
    country_names: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class NoMatch:
    raw: str
    input: str


LookupResult = Union[NumberAnalysis, PrefixMatch, NoMatch]


def ensure_plus(raw: str) -> str:
    """Prefix `raw` with "+" unless it already starts with one."""

    return raw if raw.startswith("+") else f"+{raw}"


def prefix_candidates(digits: str, *, max_length: int = DEFAULT_MAX_PREFIX_LENGTH) -> list[str]:
    """Leading substrings of `digits`, longest first, capped at `max_length`."""

    return [digits[:i] for i in range(min(len(digits), max_length), 0, -1)]


def _as_calling_code(candidate: str) -> int | None:
    if not _NUMERIC_PREFIX.fullmatch(candidate):
        return None
    return int(candidate)


def analyze_number(raw: str, normalized: str) -> NumberAnalysis:
    """
    Parse a full international number and describe it.

    Raises:
        NumberParseException: if `phonenumbers` cannot parse `normalized`.
    """

    # No default region: the number must carry its own country code.
    parsed = phonenumbers.parse(normalized, None)
    region = phonenumbers.region_code_for_number(parsed) or ""
    return NumberAnalysis(
        raw=raw,
        input=normalized,
        country_code=int(parsed.country_code or 0),
        region_code=region,
        country_name=country_name(region),
        national_number=int(parsed.national_number or 0),
        valid=phonenumbers.is_valid_number(parsed),
        possible=phonenumbers.is_possible_number(parsed),
    )


def match_prefix(
    raw: str, normalized: str, *, max_length: int = DEFAULT_MAX_PREFIX_LENGTH
) -> PrefixMatch | NoMatch:
    """
    Find the longest leading calling code of `normalized`.

    The first candidate (scanning longest to shortest) with at least one
    registered region wins; shorter prefixes are not considered after that.
    """

    digits = normalized[1:] if normalized.startswith("+") else normalized
    if not digits:
        return NoMatch(raw=raw, input=normalized)

    for candidate in prefix_candidates(digits, max_length=max_length):
        code = _as_calling_code(candidate)
        if code is None:
            logger.debug("Skipping non-numeric prefix %r", candidate)
            continue

        regions = tuple(phonenumbers.region_codes_for_country_code(code))
        if not regions:
            logger.debug("No regions for calling code %d", code)
            continue

        logger.debug("Prefix %r matched calling code %d: %s", candidate, code, regions)
        return PrefixMatch(
            raw=raw,
            input=normalized,
            country_code=code,
            region_codes=regions,
            country_names=tuple(country_name(r) for r in regions),
        )

    return NoMatch(raw=raw, input=normalized)


def lookup_number(raw: str, *, max_prefix_length: int = DEFAULT_MAX_PREFIX_LENGTH) -> LookupResult:
    """
    Look up country information for a full number or a calling-code prefix.

    Args:
        raw: User input such as "+4912345678", "49" or "+822".
        max_prefix_length: Longest prefix tried when full parsing fails.
    """

    normalized = ensure_plus(raw)
    try:
        return analyze_number(raw, normalized)
    except NumberParseException as exc:
        logger.debug("Full parse of %r failed (%s); trying prefixes", normalized, exc)

    return match_prefix(raw, normalized, max_length=max_prefix_length)
