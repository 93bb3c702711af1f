"""Distance helpers and search radii."""

from __future__ import annotations

import math
from dataclasses import dataclass

EARTH_RADIUS_KM = 6371.0
KM_PER_MILE = 1.60934

# NPS has no radius filter; parks are filtered client-side.
PARK_RADIUS_MILES = 600
PARK_RADIUS_KM = PARK_RADIUS_MILES * KM_PER_MILE

# Curated heritage fallback radius.
HERITAGE_RADIUS_KM = 300.0

# PBDB is queried with a lat/lon box, not a true radius.
FOSSIL_BOX_DEGREES = 9.0


@dataclass(frozen=True)
class BoundingBox:
    """Min/max lat-lon bounding box."""

    latmin: float
    latmax: float
    lngmin: float
    lngmax: float

    @classmethod
    def around(cls, lat: float, lon: float, half_size_deg: float) -> BoundingBox:
        return cls(
            latmin=lat - half_size_deg,
            latmax=lat + half_size_deg,
            lngmin=lon - half_size_deg,
            lngmax=lon + half_size_deg,
        )

    def as_params(self) -> dict[str, float]:
        return {
            "latmin": self.latmin,
            "latmax": self.latmax,
            "lngmin": self.lngmin,
            "lngmax": self.lngmax,
        }


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometres."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
