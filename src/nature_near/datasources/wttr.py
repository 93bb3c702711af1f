"""
Current conditions from wttr.in (JSON format ``j1``).

Current conditions sit one level down, in ``current_condition[0]``; every
value is a string.
"""

from __future__ import annotations

from typing import Any

from nature_near.errors import MalformedResponse
from nature_near.schemas import Coordinate, WeatherSnapshot
from nature_near.services.http import get_json

PROVIDER = "wttr.in"
API_URL = "https://wttr.in/{lat},{lng}"


def fetch_weather(coord: Coordinate) -> dict[str, Any]:
    """GET current conditions for ``coord``."""
    url = API_URL.format(lat=coord.latitude, lng=coord.longitude)
    data: dict[str, Any] = get_json(PROVIDER, url, params={"format": "j1"})
    return data


def _int(value: Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def parse_weather(data: Any, origin: Coordinate | None = None) -> list[WeatherSnapshot]:
    """Normalize to a single snapshot, or ``[]`` when no current conditions."""
    if not isinstance(data, dict):
        raise MalformedResponse(PROVIDER, "expected a JSON object")
    conditions = data.get("current_condition") or []
    if not conditions:
        return []

    if not isinstance(conditions, list) or not isinstance(conditions[0], dict):
        raise MalformedResponse(PROVIDER, "expected a list of current conditions")
    current = conditions[0]
    try:
        description = current["weatherDesc"][0]["value"]
    except (KeyError, IndexError, TypeError) as exc:
        raise MalformedResponse(PROVIDER, "missing weatherDesc") from exc

    return [
        WeatherSnapshot(
            source=PROVIDER,
            description=description,
            temp_f=_int(current.get("temp_F")),
            feels_like_f=_int(current.get("FeelsLikeF")),
            wind_mph=_int(current.get("windspeedMiles")),
        )
    ]
