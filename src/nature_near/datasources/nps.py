"""
National Park Service park catalog.

API docs: https://www.nps.gov/subjects/developer/api-documentation.htm

The ``/parks`` endpoint has no radius filter, so the whole catalog is paged
through and parks are filtered by great-circle distance here.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from nature_near.config import get_settings
from nature_near.errors import MalformedResponse
from nature_near.reference.geography import PARK_RADIUS_KM, haversine_km
from nature_near.schemas import Coordinate, Park
from nature_near.services.http import get_json

PROVIDER = "nps"
API_URL = "https://developer.nps.gov/api/v1/parks"
PAGE_SIZE = 50
MAX_PAGES = 10


def fetch_parks(coord: Coordinate | None = None, *, max_pages: int = MAX_PAGES) -> dict[str, Any]:
    """
    Fetch the park catalog with ``start``/``limit`` pagination.

    ``coord`` is accepted for chain compatibility; the catalog is global.

    Returns:
        ``{"total": int, "data": [...]}`` with every page's parks concatenated
        in provider order.
    """
    api_key = get_settings().nps_api_key
    parks: list[dict[str, Any]] = []
    total = 0
    for page in range(max_pages):
        params = {"limit": PAGE_SIZE, "start": page * PAGE_SIZE, "api_key": api_key}
        data = get_json(PROVIDER, API_URL, params=params)
        if not isinstance(data, dict):
            raise MalformedResponse(PROVIDER, "expected an object with 'data'")
        batch = data.get("data", [])
        if not isinstance(batch, list):
            raise MalformedResponse(PROVIDER, "'data' is not a list")
        parks.extend(batch)
        try:
            total = int(data.get("total") or 0)
        except (TypeError, ValueError):
            total = 0
        if not batch or len(parks) >= total:
            break
    return {"total": total, "data": parks}


def _park_point(park: dict[str, Any]) -> tuple[float, float] | None:
    try:
        lat = float(park.get("latitude") or "")
        lng = float(park.get("longitude") or "")
    except (TypeError, ValueError):
        return None
    return lat, lng


def parks_within(
    catalog: list[dict[str, Any]],
    origin: Coordinate,
    max_km: float = PARK_RADIUS_KM,
    distance: Callable[[float, float, float, float], float] = haversine_km,
) -> list[dict[str, Any]]:
    """Keep catalog entries within ``max_km`` (inclusive), in catalog order."""
    nearby: list[dict[str, Any]] = []
    for park in catalog:
        if not isinstance(park, dict):
            continue
        point = _park_point(park)
        if point is None:
            continue
        if distance(origin.latitude, origin.longitude, point[0], point[1]) <= max_km:
            nearby.append(park)
    return nearby


def parse_parks(data: Any, origin: Coordinate) -> list[Park]:
    """Normalize the catalog, keeping only parks near ``origin``."""
    if not isinstance(data, dict) or not isinstance(data.get("data", []), list):
        raise MalformedResponse(PROVIDER, "expected an object with a 'data' list")

    parks: list[Park] = []
    for entry in parks_within(data.get("data", []), origin):
        lat, lng = _park_point(entry)  # type: ignore[misc]
        parks.append(
            Park(
                source=PROVIDER,
                coordinate=Coordinate(latitude=lat, longitude=lng),
                name=entry.get("fullName") or entry.get("name") or "Unnamed park",
                designation=entry.get("designation") or "",
                description=entry.get("description") or "",
                url=entry.get("url") or None,
            )
        )
    return parks
