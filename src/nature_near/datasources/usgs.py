"""
USGS earthquake catalog (FDSN event web service, GeoJSON output).

API docs: https://earthquake.usgs.gov/fdsnws/event/1/
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from nature_near.errors import MalformedResponse
from nature_near.schemas import Coordinate, Quake
from nature_near.services.http import get_json

PROVIDER = "usgs"
API_URL = "https://earthquake.usgs.gov/fdsnws/event/1/query"
MAX_RADIUS_KM = 200
LIMIT = 3


def fetch_quakes(coord: Coordinate) -> dict[str, Any]:
    """GET the most recent events within ``MAX_RADIUS_KM``."""
    params = {
        "format": "geojson",
        "latitude": coord.latitude,
        "longitude": coord.longitude,
        "maxradiuskm": MAX_RADIUS_KM,
        "orderby": "time",
        "limit": LIMIT,
    }
    data: dict[str, Any] = get_json(PROVIDER, API_URL, params=params)
    return data


def _parse_feature(f: dict[str, Any]) -> Quake | None:
    props = f.get("properties") or {}
    coords = (f.get("geometry") or {}).get("coordinates") or []
    if len(coords) < 2:
        return None
    lng, lat = coords[0], coords[1]

    millis = props.get("time")
    when = datetime.fromtimestamp(millis / 1000, tz=UTC) if isinstance(millis, int | float) else None

    return Quake(
        source=PROVIDER,
        coordinate=Coordinate(latitude=lat, longitude=lng),
        magnitude=props.get("mag"),
        place=props.get("place") or "",
        time=when,
    )


def parse_quakes(data: Any, origin: Coordinate | None = None) -> list[Quake]:
    """Normalize a GeoJSON FeatureCollection."""
    if not isinstance(data, dict):
        raise MalformedResponse(PROVIDER, "expected a GeoJSON object")
    features = data.get("features", [])
    if not isinstance(features, list):
        raise MalformedResponse(PROVIDER, "'features' is not a list")

    quakes: list[Quake] = []
    for f in features:
        if not isinstance(f, dict):
            continue
        parsed = _parse_feature(f)
        if parsed is not None:
            quakes.append(parsed)
    return quakes
