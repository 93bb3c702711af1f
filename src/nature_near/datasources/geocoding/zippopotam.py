"""
Zippopotam.us postal code lookup (US only).

API docs: https://docs.zippopotam.us/
"""

from __future__ import annotations

from typing import Any

from nature_near.datasources.geocoding.models import Place
from nature_near.errors import LocationNotFound, ProviderError
from nature_near.schemas import Coordinate
from nature_near.services.http import get_json

PROVIDER = "zippopotam"
API_URL = "https://api.zippopotam.us/us/{zip}"
COUNTRY = "United States"


def parse_zip(zip_code: str, data: Any) -> Place:
    """Build a Place labelled ``"City, ST ZIP"`` from the first listed place."""
    try:
        first = data["places"][0]
        lat = float(first["latitude"])
        lon = float(first["longitude"])
        city = first["place name"]
        state = first["state abbreviation"]
    except (KeyError, IndexError, TypeError, ValueError) as exc:
        raise LocationNotFound(f"Could not find location for ZIP code {zip_code}.") from exc

    return Place(
        coordinate=Coordinate(latitude=lat, longitude=lon),
        label=f"{city}, {state} {zip_code}",
        city=city,
        state=state,
        country=COUNTRY,
    )


def lookup_zip(zip_code: str) -> Place:
    """
    Resolve a 5-digit US ZIP code.

    Raises:
        LocationNotFound: Non-2xx status (unknown ZIP) or malformed payload.
    """
    try:
        data = get_json(PROVIDER, API_URL.format(zip=zip_code))
    except ProviderError as exc:
        raise LocationNotFound(f"Could not find location for ZIP code {zip_code}.") from exc
    return parse_zip(zip_code, data)
