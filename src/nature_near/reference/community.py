"""Curated community feed.

The feed shown to users is editorial content, not read back from the
community store.
"""

from __future__ import annotations

from nature_near.schemas import CuratedLocation

CURATED_COMMUNITY: list[CuratedLocation] = [
    CuratedLocation(
        city="Boulder",
        state="Colorado",
        activity="mountain exploring",
        ago="2h",
        description="🏔️ Amazing bird watching, fossils, and mountain views",
    ),
    CuratedLocation(
        city="Asheville",
        state="North Carolina",
        activity="wildlife spotting",
        ago="4h",
        description="🌲 Rich biodiversity and beautiful hiking trails",
    ),
    CuratedLocation(
        city="Moab",
        state="Utah",
        activity="red rock exploring",
        ago="6h",
        description="🏜️ Incredible geological formations and archaeology",
    ),
]
