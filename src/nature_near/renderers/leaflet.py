"""Leaflet map renderer.

``LeafletMap`` is the render collaborator the resolution pipeline draws
on. It keeps the map state in memory (center, zoom, pins, background) and
turns it into a (map_div_html, map_script_js) pair for the dashboard page.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Any

from nature_near.renderers import render_template
from nature_near.schemas import Coordinate

logger = logging.getLogger(__name__)

BACKGROUND_IMAGES = [
    "aerial-forest-landscape.webp",
    "coastal-cliffs-ocean.webp",
    "desert-canyon-formation.webp",
    "earth-crust.webp",
    "lake-mountain-reflection.webp",
    "mountain-valley-vista.webp",
]

# Marker colors keyed by pin icon
ICON_COLORS: dict[str, str] = {
    "🌋": "#ff4444",
    "🐦": "#4a90e2",
    "🦋": "#9c27b0",
    "🏺": "#8b4513",
    "🦴": "#888888",
    "🏞️": "#22c55e",
    "📍": "#00ff88",
}
DEFAULT_COLOR = "#555555"

TILE_URL = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
TILE_ATTRIBUTION = "&copy; OpenStreetMap contributors"


class MapAlreadyInitialized(RuntimeError):
    """Raised when a second map would be created over a live one."""


@dataclass
class Pin:
    lat: float
    lon: float
    icon: str
    popup: str
    color: str = DEFAULT_COLOR


@dataclass
class LeafletMap:
    """In-memory Leaflet map. At most one map is live at a time."""

    rng: random.Random = field(default_factory=random.Random)
    center: Coordinate | None = None
    zoom: int = 10
    pins: list[Pin] = field(default_factory=list)
    background: str | None = None

    @property
    def live(self) -> bool:
        return self.center is not None

    def init_map(self, coordinate: Coordinate, zoom: int) -> None:
        if self.live:
            msg = "A map is already live; destroy it first"
            raise MapAlreadyInitialized(msg)
        self.center = coordinate
        self.zoom = zoom

    def destroy_map(self) -> None:
        self.center = None
        self.pins = []

    def clear_layer(self) -> None:
        self.pins = []

    def place_pin(self, coordinate: Coordinate, icon: str, popup_html: str) -> None:
        if not self.live:
            logger.debug("Ignoring pin %s: no map", icon)
            return
        self.pins.append(
            Pin(
                lat=coordinate.latitude,
                lon=coordinate.longitude,
                icon=icon,
                popup=popup_html,
                color=ICON_COLORS.get(icon, DEFAULT_COLOR),
            )
        )

    def set_background(self) -> None:
        self.background = self.rng.choice(BACKGROUND_IMAGES)

    def markers(self) -> list[dict[str, Any]]:
        return [
            {
                "lat": p.lat,
                "lon": p.lon,
                "icon": p.icon,
                "popup": p.popup,
                "color": p.color,
            }
            for p in self.pins
        ]

    def render(self) -> tuple[str, str]:
        """Return a (map_div_html, map_script_js) tuple."""
        if self.center is None:
            return ("<p>No map to show yet.</p>", "")

        map_div = render_template("map.html.j2", pin_count=len(self.pins))
        map_script = render_template(
            "map_script.html.j2",
            center=[self.center.latitude, self.center.longitude],
            zoom=self.zoom,
            markers=self.markers(),
            tile_url=TILE_URL,
            attribution=TILE_ATTRIBUTION,
        )
        return (map_div, map_script)
