"""
Macrostrat bedrock geology at a point.

API docs: https://macrostrat.org/api/v2

``maps/identify`` returns every mapped unit under the point; only the first
is used.
"""

from __future__ import annotations

from typing import Any

from nature_near.errors import MalformedResponse
from nature_near.reference.geology import geologic_context, parse_age
from nature_near.schemas import BedrockUnit, Coordinate
from nature_near.services.http import get_json

PROVIDER = "macrostrat"
API_URL = "https://macrostrat.org/api/v2/maps/identify"


def fetch_bedrock(coord: Coordinate) -> dict[str, Any]:
    """GET the mapped units under ``coord``."""
    params = {"x": coord.longitude, "y": coord.latitude}
    data: dict[str, Any] = get_json(PROVIDER, API_URL, params=params)
    return data


def parse_bedrock(data: Any, origin: Coordinate | None = None) -> list[BedrockUnit]:
    """Normalize the first unit, or ``[]`` when nothing is mapped there."""
    if not isinstance(data, dict):
        raise MalformedResponse(PROVIDER, "expected a JSON object")
    if not data.get("success"):
        return []
    payload = data.get("data") or {}
    units = payload.get("units") if isinstance(payload, dict) else None
    if units is not None and not isinstance(units, list):
        raise MalformedResponse(PROVIDER, "'units' is not a list")
    if not units:
        return []
    if not isinstance(units[0], dict):
        raise MalformedResponse(PROVIDER, "expected a unit object")

    unit = units[0]
    return [
        BedrockUnit(
            source=PROVIDER,
            name=unit.get("strat_name") or "Unnamed formation",
            age_ma=parse_age(unit.get("age")),
            lithology=unit.get("lith") or unit.get("lith_class") or "rock",
            description=unit.get("descr") or "",
            context=geologic_context(unit.get("age")),
        )
    ]
