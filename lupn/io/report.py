# file: lupn/io/report.py
"""
Report rendering for lookup results.

Results are rendered either as the human-readable report printed by the CLI or
as a plain JSON-serializable dictionary.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

from lupn.core.lookup import LookupResult, NoMatch, NumberAnalysis, PrefixMatch

HINT = "Hint: Try a valid prefix like +49 or a full number like +4912345678"

_KINDS: dict[type, str] = {
    NumberAnalysis: "number",
    PrefixMatch: "prefix",
    NoMatch: "none",
}


def _bool(value: bool) -> str:
    return "true" if value else "false"


def human_lines(result: LookupResult) -> list[str]:
    """Return the report for `result`, one output line per item."""

    if isinstance(result, NumberAnalysis):
        return [
            "📞 Phone Number Analysis:",
            f"• Input: {result.input}",
            f"• Country Code: +{result.country_code}",
            f"• Country: {result.country_name}",
            f"• National Number: {result.national_number}",
            f"• Valid: {_bool(result.valid)}",
            f"• Possibly Valid: {_bool(result.possible)}",
        ]

    if isinstance(result, PrefixMatch):
        return [
            "📞 Partial Match (Country Code only):",
            f"• Input: {result.input}",
            f"• Identified Country Code: +{result.country_code}",
            f"• Possible Countries/Regions: {', '.join(result.country_names)}",
        ]

    return [
        f"❌ Could not identify country or region for input: {result.input}",
        HINT,
    ]


def human_text(result: LookupResult) -> str:
    return "\n".join(human_lines(result)) + "\n"


def to_dict(result: LookupResult) -> dict[str, Any]:
    """JSON-serializable view of a result, tagged with its `kind`."""

    data: dict[str, Any] = {"kind": _KINDS[type(result)]}
    for key, value in asdict(result).items():
        data[key] = list(value) if isinstance(value, tuple) else value
    return data


def to_json(result: LookupResult) -> str:
    return json.dumps(to_dict(result), indent=2, sort_keys=True, ensure_ascii=False)
