"""
Nominatim (OpenStreetMap) forward and reverse geocoding.

API docs: https://nominatim.org/release-docs/latest/api/Overview/
Usage policy: max 1 req/s, identifying User-Agent required.

Forward search goes through a process-wide ``Cooldown`` so that at most one
request fires per second; reverse lookups are best-effort and unthrottled.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from nature_near.config import get_settings
from nature_near.datasources.geocoding.models import UNKNOWN_LOCATION, YOUR_LOCATION, Place
from nature_near.errors import LocationNotFound, ProviderError
from nature_near.schemas import Coordinate
from nature_near.services.http import get_json
from nature_near.services.throttle import Cooldown

logger = logging.getLogger(__name__)

PROVIDER = "nominatim"
SEARCH_URL = "https://nominatim.openstreetmap.org/search"
REVERSE_URL = "https://nominatim.openstreetmap.org/reverse"
DEFAULT_COUNTRY = "United States"

#: Process-wide cooldown for forward search.
search_cooldown = Cooldown(get_settings().geocode_cooldown_seconds)


# =============================================================================
# Labels
# =============================================================================


def format_location_label(address: dict[str, Any], display_name: str | None = None) -> str:
    """
    Label a structured address.

    ``"City, ST 87501"`` or ``"City, ST"`` when the address has a city and
    state; otherwise the first three comma-separated tokens of
    ``display_name``; otherwise ``"Unknown location"``.
    """
    city = address.get("city") or address.get("town") or address.get("village")
    state = address.get("state")
    postcode = address.get("postcode")

    if city and state:
        return f"{city}, {state} {postcode}" if postcode else f"{city}, {state}"
    display = display_name or address.get("display_name")
    if display:
        return ",".join(display.split(",")[:3]).strip()
    return UNKNOWN_LOCATION


def reverse_label(address: dict[str, Any]) -> tuple[str, str | None, str | None]:
    """Label a reverse-geocoded address. Returns ``(label, city, state)``."""
    city = (
        address.get("city")
        or address.get("town")
        or address.get("village")
        or address.get("hamlet")
        or address.get("suburb")
    )
    if not city or city == "location":
        city = address.get("municipality") or address.get("county") or address.get("region")
    state = address.get("state")

    if city and state:
        return f"{city}, {state}", city, state
    if city:
        return city, city, None
    if state:
        return state, None, state
    return YOUR_LOCATION, None, None


# =============================================================================
# Forward search
# =============================================================================


def fetch_search(query: str) -> list[dict[str, Any]]:
    """GET the single best US match for ``query``."""
    params = {
        "q": query,
        "format": "json",
        "addressdetails": 1,
        "limit": 1,
        "countrycodes": "us",
    }
    data: list[dict[str, Any]] = get_json(PROVIDER, SEARCH_URL, params=params)
    return data


def parse_search(query: str, data: Any) -> Place:
    """Build a Place from the first (highest-ranked) result."""
    if not isinstance(data, list) or not data:
        raise LocationNotFound(f"Could not find '{query}'. Please try a different search.")

    location = data[0]
    try:
        coordinate = Coordinate(latitude=float(location["lat"]), longitude=float(location["lon"]))
    except (KeyError, TypeError, ValueError) as exc:
        raise LocationNotFound(f"Could not find '{query}'. Please try a different search.") from exc

    address: dict[str, Any] = location.get("address") or {}
    label = format_location_label(address, location.get("display_name"))
    city = (
        address.get("city") or address.get("town") or address.get("village") or address.get("county")
    )
    return Place(
        coordinate=coordinate,
        label=label,
        city=city,
        state=address.get("state"),
        country=address.get("country") or DEFAULT_COUNTRY,
    )


async def search(query: str) -> Place:
    """
    Rate-limited free-text geocoding.

    Raises:
        LocationNotFound: No result, or the provider failed.
    """

    async def _call() -> list[dict[str, Any]]:
        return await asyncio.to_thread(fetch_search, query)

    logger.info("Searching for location: %s", query)
    try:
        data = await search_cooldown.run(_call)
    except ProviderError as exc:
        raise LocationNotFound(f"Failed to search for location: {exc}") from exc
    return parse_search(query, data)


# =============================================================================
# Reverse lookup
# =============================================================================


def fetch_reverse(coord: Coordinate) -> dict[str, Any]:
    """GET the address at ``coord``."""
    params = {"lat": coord.latitude, "lon": coord.longitude, "format": "json"}
    data: dict[str, Any] = get_json(PROVIDER, REVERSE_URL, params=params)
    return data


async def reverse(coord: Coordinate) -> Place:
    """Best-effort label for device coordinates; never raises."""
    try:
        data = await asyncio.to_thread(fetch_reverse, coord)
        address: dict[str, Any] = data.get("address") or {}
    except (ProviderError, AttributeError) as exc:
        logger.warning("Reverse geocoding failed, using fallback label: %s", exc)
        return Place(coordinate=coord, label=YOUR_LOCATION)

    label, city, state = reverse_label(address)
    return Place(
        coordinate=coord,
        label=label,
        city=city,
        state=state,
        country=address.get("country") or DEFAULT_COUNTRY,
    )
