"""
iNaturalist insect observations near a point.

API docs: https://api.inaturalist.org/v1/docs/
Rate limits: ~1 req/sec, 10k/day
"""

from __future__ import annotations

import threading
import time
from datetime import date, datetime
from typing import Any

from nature_near.errors import MalformedResponse
from nature_near.schemas import Coordinate, InsectObservation
from nature_near.services.http import get_json

PROVIDER = "inaturalist"
API_BASE = "https://api.inaturalist.org/v1"

INSECTA = 47158  # Class Insecta
RADIUS_KM = 15
PER_PAGE = 4

# ---------------------------------------------------------------------------
# Rate limiting (module-level state)
# ---------------------------------------------------------------------------
_last_request_time: float = 0.0
_rate_lock = threading.Lock()
MIN_REQUEST_INTERVAL: float = 1.1  # seconds, stays under 1 req/s


def _rate_limit() -> None:
    """Sleep if needed to honour the ~1 req/s rate limit."""
    global _last_request_time  # noqa: PLW0603
    with _rate_lock:
        elapsed = time.monotonic() - _last_request_time
        if elapsed < MIN_REQUEST_INTERVAL:
            time.sleep(MIN_REQUEST_INTERVAL - elapsed)
        _last_request_time = time.monotonic()


def fetch_insects(coord: Coordinate) -> dict[str, Any]:
    """GET /observations: newest insect observations within ``RADIUS_KM``."""
    _rate_limit()
    params: dict[str, Any] = {
        "lat": coord.latitude,
        "lng": coord.longitude,
        "radius": RADIUS_KM,
        "taxon_id": INSECTA,
        "per_page": PER_PAGE,
        "quality_grade": "research,needs_id",
        "order": "desc",
        "order_by": "created_at",
    }
    data: dict[str, Any] = get_json(PROVIDER, f"{API_BASE}/observations", params=params)
    return data


def _observed(obs: dict[str, Any]) -> str:
    raw = obs.get("observed_on") or obs.get("created_at")
    if not raw:
        return ""
    try:
        return date.fromisoformat(raw).isoformat()
    except ValueError:
        try:
            return datetime.fromisoformat(raw).date().isoformat()
        except ValueError:
            return str(raw)


def _parse_observation(obs: dict[str, Any]) -> InsectObservation:
    """Parse a single observation. Location is optional."""
    taxon = obs.get("taxon") or {}
    user = obs.get("user") or {}
    scientific = taxon.get("name") or ""

    coordinate = None
    geojson = obs.get("geojson") or {}
    coords = geojson.get("coordinates") or []
    if len(coords) == 2:
        lng, lat = coords
        coordinate = Coordinate(latitude=lat, longitude=lng)

    return InsectObservation(
        source=PROVIDER,
        coordinate=coordinate,
        common_name=taxon.get("preferred_common_name") or scientific or "Unknown species",
        scientific_name=scientific,
        observer=user.get("name") or user.get("login") or "Anonymous",
        observed=_observed(obs),
    )


def parse_insects(data: Any, origin: Coordinate | None = None) -> list[InsectObservation]:
    """Normalize an /observations response."""
    if not isinstance(data, dict):
        raise MalformedResponse(PROVIDER, "expected an object with 'results'")
    results = data.get("results", [])
    if not isinstance(results, list):
        raise MalformedResponse(PROVIDER, "'results' is not a list")
    return [_parse_observation(obs) for obs in results if isinstance(obs, dict)]
