"""Geocoding result model."""

from __future__ import annotations

from dataclasses import dataclass

from nature_near.schemas import Coordinate

UNKNOWN_LOCATION = "Unknown location"
YOUR_LOCATION = "Your location"


@dataclass(frozen=True)
class Place:
    """A resolved place: where it is, what to call it, and what to remember."""

    coordinate: Coordinate
    label: str
    city: str | None = None
    state: str | None = None
    country: str | None = None

    @property
    def recordable(self) -> bool:
        """Whether this place may be saved to search history."""
        return bool(self.city and self.state) and self.label != UNKNOWN_LOCATION
