"""Ranked-list position detection."""

from __future__ import annotations

import re

NUMBERED_LINE = re.compile(r"^[ \t]*(\d{1,2})[.):\-]\s+(.+)", re.MULTILINE)
"""A numbered list item such as ``1. ``, ``2) ``, ``3: `` or ``4 - ``."""


def brand_pattern(brand_name: str, brand_domain: str) -> re.Pattern[str] | None:
    """Build a case-insensitive pattern matching the brand name or domain.

    Empty identifiers are left out; returns None when both are empty.
    """
    parts = [re.escape(p) for p in (brand_name, brand_domain) if p]
    if not parts:
        return None
    return re.compile("|".join(parts), re.IGNORECASE)


def detect_position(response: str, brand_name: str, brand_domain: str = "") -> int | None:
    """Return the list number of the first numbered line naming the brand."""
    pattern = brand_pattern(brand_name, brand_domain)
    if pattern is None:
        return None

    for match in NUMBERED_LINE.finditer(response):
        if pattern.search(match.group(2)):
            return int(match.group(1))
    return None
