"""
Autocomplete suggestions: Photon (Komoot) with a local city fallback.

API docs: https://photon.komoot.io/
"""

from __future__ import annotations

import logging
from typing import Any

from nature_near.errors import MalformedResponse, ProviderEmpty, ProviderError
from nature_near.reference.places import COMMON_CITIES
from nature_near.schemas import Coordinate, Suggestion
from nature_near.services.http import get_json

logger = logging.getLogger(__name__)

PROVIDER = "photon"
API_URL = "https://photon.komoot.io/api/"
LIMIT = 5


def format_photon_name(props: dict[str, Any]) -> str | None:
    """'Name, State' from Photon properties, or None if neither exists."""
    parts = [p for p in (props.get("name"), props.get("state")) if p]
    return ", ".join(parts) if parts else None


def fetch_photon(query: str) -> dict[str, Any]:
    data: dict[str, Any] = get_json(
        PROVIDER, API_URL, params={"q": query, "limit": LIMIT, "osm_tag": "place"}
    )
    return data


def parse_photon(data: Any) -> list[Suggestion]:
    """Normalize GeoJSON features; unnamed ones are skipped."""
    if not isinstance(data, dict):
        raise MalformedResponse(PROVIDER, "expected a GeoJSON object")
    features = data.get("features") or []
    if not features:
        raise ProviderEmpty(PROVIDER, "no results")

    suggestions: list[Suggestion] = []
    for feature in features:
        name = format_photon_name(feature.get("properties") or {})
        coords = (feature.get("geometry") or {}).get("coordinates") or []
        if not name or len(coords) < 2:
            continue
        suggestions.append(
            Suggestion(name=name, coordinate=Coordinate(latitude=coords[1], longitude=coords[0]))
        )
    return suggestions


def local_matches(query: str) -> list[Suggestion]:
    """Case-insensitive substring match against the offline city list."""
    needle = query.lower()
    return [
        Suggestion(name=name, coordinate=Coordinate(latitude=lat, longitude=lon))
        for name, lat, lon in COMMON_CITIES
        if needle in name.lower()
    ]


def suggest(query: str) -> list[Suggestion]:
    """Photon first, then the local list; ``[]`` when both come up empty."""
    try:
        return parse_photon(fetch_photon(query))
    except ProviderError as exc:
        logger.info("Photon failed (%s), using local city list", exc)
    matches = local_matches(query)
    if not matches:
        logger.warning("All autocomplete sources failed for %r", query)
    return matches
