"""
Paleobiology Database fossil occurrences.

API docs: https://paleobiodb.org/data1.2/occs/list_doc.html

Queried with a ±9° lat/lon box rather than a true radius. Responses use the
compact 3-letter vocabulary (``tna`` taxon name, ``eag``/``lag`` early/late
age in Ma, ``oei`` early interval, ``cll`` class).
"""

from __future__ import annotations

from typing import Any

from nature_near.errors import MalformedResponse
from nature_near.reference.geography import FOSSIL_BOX_DEGREES, BoundingBox
from nature_near.schemas import Coordinate, Fossil
from nature_near.services.http import get_json

PROVIDER = "pbdb"
API_URL = "https://paleobiodb.org/data1.2/occs/list.json"
LIMIT = 20


def fetch_fossils(coord: Coordinate) -> dict[str, Any]:
    """GET occurrences inside the box around ``coord``."""
    box = BoundingBox.around(coord.latitude, coord.longitude, FOSSIL_BOX_DEGREES)
    params: dict[str, Any] = {**box.as_params(), "show": "coords,time,class", "limit": LIMIT}
    data: dict[str, Any] = get_json(PROVIDER, API_URL, params=params)
    return data


def _as_float(value: Any) -> float | None:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def format_age(record: dict[str, Any]) -> str:
    """'485.4 - 443.8 Ma' when both bounds exist, else the era name."""
    early = _as_float(record.get("eag"))
    late = _as_float(record.get("lag"))
    if early and late:
        return f"{early:.1f} - {late:.1f} Ma"
    return record.get("oei") or "Unknown age"


def parse_fossils(data: Any, origin: Coordinate | None = None) -> list[Fossil]:
    """Normalize occurrence records."""
    if not isinstance(data, dict):
        raise MalformedResponse(PROVIDER, "expected an object with 'records'")
    records = data.get("records", [])
    if not isinstance(records, list):
        raise MalformedResponse(PROVIDER, "'records' is not a list")

    fossils: list[Fossil] = []
    for rec in records:
        if not isinstance(rec, dict):
            continue
        lat, lng = _as_float(rec.get("lat")), _as_float(rec.get("lng"))
        coordinate = Coordinate(latitude=lat, longitude=lng) if lat and lng else None
        fossils.append(
            Fossil(
                source=PROVIDER,
                coordinate=coordinate,
                taxon=rec.get("tna") or rec.get("idn") or "Unknown organism",
                classification=rec.get("cll") or None,
                age=format_age(rec),
            )
        )
    return fossils
