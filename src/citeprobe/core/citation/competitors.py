"""Competitor co-mention detection."""

from __future__ import annotations

from collections.abc import Iterable

from citeprobe.core.models import Competitor


def detect_competitors(response: str, competitors: Iterable[Competitor]) -> tuple[str, ...]:
    """Return names of competitors whose name or domain appears in the response.

    Order follows ``competitors``; matching is a case-insensitive substring
    search and empty names or domains never match.
    """
    lower_response = response.lower()
    mentioned: list[str] = []

    for competitor in competitors:
        needles = [n.lower() for n in (competitor.name, competitor.domain) if n]
        if any(n in lower_response for n in needles):
            mentioned.append(competitor.name)

    return tuple(mentioned)
