"""Curated heritage sites, filtered by distance from the query point."""

from __future__ import annotations

from nature_near.reference.geography import HERITAGE_RADIUS_KM, haversine_km
from nature_near.reference.heritage_sites import CURATED_SITES, CuratedSite
from nature_near.schemas import Coordinate, HeritageSite

PROVIDER = "curated"


def fetch_curated_sites(coord: Coordinate | None = None) -> list[CuratedSite]:
    """Return the static list (no network)."""
    return list(CURATED_SITES)


def parse_curated_sites(sites: list[CuratedSite], origin: Coordinate) -> list[HeritageSite]:
    """Keep sites within ``HERITAGE_RADIUS_KM`` of ``origin``."""
    return [
        HeritageSite(
            source=PROVIDER,
            coordinate=Coordinate(latitude=site.lat, longitude=site.lng),
            name=site.name,
            description=site.description,
            kind="curated",
        )
        for site in sites
        if haversine_km(origin.latitude, origin.longitude, site.lat, site.lng) <= HERITAGE_RADIUS_KM
    ]
