# file: lupn/__init__.py
"""
lupn - look up country information for a phone number or calling-code prefix.

Full numbers are parsed and validated with `phonenumbers`; anything that does
not parse falls back to a longest-prefix match against the country calling
code table. Region codes are turned into English names with `pycountry`.
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
