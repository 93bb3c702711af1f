"""Wikipedia REST API: articles near a point, filtered to heritage topics."""

from __future__ import annotations

from typing import Any

from nature_near.errors import MalformedResponse
from nature_near.schemas import Coordinate, HeritageSite
from nature_near.services.http import get_json

PROVIDER = "wikipedia"
API_URL = "https://en.wikipedia.org/api/rest_v1/page/nearby"
RADIUS_M = 50_000
LIMIT = 10

HERITAGE_KEYWORDS = (
    "archaeological",
    "historic",
    "monument",
    "ruins",
    "cemetery",
    "battlefield",
    "fort",
    "pueblo",
    "mound",
    "site",
    "park",
    "museum",
)


def fetch_nearby_pages(coord: Coordinate) -> dict[str, Any]:
    """GET up to ``LIMIT`` articles within ``RADIUS_M`` metres."""
    params = {"lat": coord.latitude, "lng": coord.longitude, "radius": RADIUS_M, "limit": LIMIT}
    data: dict[str, Any] = get_json(PROVIDER, API_URL, params=params)
    return data


def is_heritage_page(page: dict[str, Any]) -> bool:
    """True when the title or description mentions a heritage keyword."""
    title = (page.get("title") or "").lower()
    description = (page.get("description") or "").lower()
    return any(k in title or k in description for k in HERITAGE_KEYWORDS)


def _page_point(page: dict[str, Any]) -> Coordinate | None:
    coords = page.get("coordinates")
    if isinstance(coords, list):
        coords = coords[0] if coords else None
    if isinstance(coords, dict) and coords.get("lat") is not None and coords.get("lon") is not None:
        return Coordinate(latitude=coords["lat"], longitude=coords["lon"])
    return None


def parse_nearby_pages(data: Any, origin: Coordinate | None = None) -> list[HeritageSite]:
    """Keep keyword-matching pages."""
    if not isinstance(data, dict):
        raise MalformedResponse(PROVIDER, "expected a JSON object")
    pages = data.get("pages", [])
    if not isinstance(pages, list):
        raise MalformedResponse(PROVIDER, "'pages' is not a list")

    return [
        HeritageSite(
            source=PROVIDER,
            coordinate=_page_point(page),
            name=page.get("title") or "Untitled",
            description=page.get("description") or "Wikipedia article",
            kind="wikipedia",
        )
        for page in pages
        if isinstance(page, dict) and is_heritage_page(page)
    ]
