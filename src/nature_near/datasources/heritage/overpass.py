"""OpenStreetMap Overpass API: tagged historic features near a point."""

from __future__ import annotations

from typing import Any

from nature_near.errors import MalformedResponse
from nature_near.schemas import Coordinate, HeritageSite
from nature_near.services.http import get_json

PROVIDER = "overpass"
API_URL = "https://overpass-api.de/api/interpreter"

QUERY_TEMPLATE = """
[out:json][timeout:25];
(
  node["historic"](around:50000,{lat},{lng});
  way["historic"](around:50000,{lat},{lng});
  node["tourism"="museum"](around:25000,{lat},{lng});
  node["amenity"="grave_yard"](around:25000,{lat},{lng});
);
out geom;
"""

HISTORIC_DESCRIPTIONS = {
    "archaeological_site": "Archaeological excavation site",
    "castle": "Historic castle or fortress",
    "church": "Historic church or religious building",
    "monument": "Historical monument",
    "ruins": "Ancient ruins",
    "cemetery": "Historic cemetery",
    "battlefield": "Historical battlefield",
    "fort": "Military fortification",
    "building": "Historic building",
}


def fetch_osm_heritage(coord: Coordinate) -> dict[str, Any]:
    """Run the heritage Overpass query around ``coord``."""
    query = QUERY_TEMPLATE.format(lat=coord.latitude, lng=coord.longitude)
    data: dict[str, Any] = get_json(PROVIDER, API_URL, params={"data": query})
    return data


def historic_description(tags: dict[str, Any] | None) -> str:
    """Describe an element from its ``historic`` tag."""
    if not tags:
        return "Historical site"
    historic = tags.get("historic")
    if historic in HISTORIC_DESCRIPTIONS:
        return HISTORIC_DESCRIPTIONS[historic]
    return tags.get("description") or f"Historic {historic or 'site'}"


def _element_point(element: dict[str, Any]) -> Coordinate | None:
    lat, lon = element.get("lat"), element.get("lon")
    if lat is None or lon is None:
        center = element.get("center")
        if not isinstance(center, dict):
            return None
        lat, lon = center.get("lat"), center.get("lon")
    if lat is None or lon is None:
        return None
    return Coordinate(latitude=lat, longitude=lon)


def parse_osm_heritage(data: Any, origin: Coordinate | None = None) -> list[HeritageSite]:
    """Normalize elements that have a point location."""
    if not isinstance(data, dict):
        raise MalformedResponse(PROVIDER, "expected a JSON object")
    elements = data.get("elements", [])
    if not isinstance(elements, list):
        raise MalformedResponse(PROVIDER, "'elements' is not a list")

    sites: list[HeritageSite] = []
    for element in elements:
        if not isinstance(element, dict):
            continue
        point = _element_point(element)
        if point is None:
            continue
        tags = element.get("tags") or {}
        sites.append(
            HeritageSite(
                source=PROVIDER,
                coordinate=point,
                name=tags.get("name") or tags.get("historic") or "Historic Site",
                description=historic_description(tags),
                kind=tags.get("historic") or tags.get("tourism") or "historic",
            )
        )
    return sites
