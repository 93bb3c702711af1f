"""
eBird recent observations near a point.

API docs: https://documenter.getpostman.com/view/664302/S1ENwy59
Requires an API token (``NATURE_NEAR_EBIRD_API_KEY``).
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from nature_near.config import get_settings
from nature_near.errors import MalformedResponse
from nature_near.schemas import BirdSighting, Coordinate
from nature_near.services.http import get_json

PROVIDER = "ebird"
API_URL = "https://api.ebird.org/v2/data/obs/geo/recent"


def fetch_birds(coord: Coordinate) -> list[dict[str, Any]]:
    """GET recent sightings around ``coord``."""
    params = {"lat": coord.latitude, "lng": coord.longitude}
    headers = {"X-eBirdApiToken": get_settings().ebird_api_key}
    data: list[dict[str, Any]] = get_json(PROVIDER, API_URL, params=params, headers=headers)
    return data


def _observed_date(obs_dt: str | None) -> str:
    """'2024-05-01 08:30' → '2024-05-01'."""
    if not obs_dt:
        return ""
    try:
        return datetime.fromisoformat(obs_dt).date().isoformat()
    except ValueError:
        return obs_dt


def parse_birds(data: Any, origin: Coordinate | None = None) -> list[BirdSighting]:
    """Normalize the observation list. Records without a common name are skipped."""
    if not isinstance(data, list):
        raise MalformedResponse(PROVIDER, "expected a list of observations")

    birds: list[BirdSighting] = []
    for obs in data:
        if not isinstance(obs, dict):
            continue
        name = obs.get("comName")
        if not name:
            continue
        lat, lng = obs.get("lat"), obs.get("lng")
        coordinate = Coordinate(latitude=lat, longitude=lng) if lat and lng else None
        birds.append(
            BirdSighting(
                source=PROVIDER,
                coordinate=coordinate,
                common_name=name,
                scientific_name=obs.get("sciName"),
                observed=_observed_date(obs.get("obsDt")),
                location_name=obs.get("locName"),
            )
        )
    return birds
