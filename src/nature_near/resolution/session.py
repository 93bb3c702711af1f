"""
Per-resolution session state.

A ``MapSession`` is created for every successful resolution and replaced
wholesale by the next one. It owns the coordinate, the place label, the
panel contents and (through the render collaborator) the marker layer.
Every async completion asks ``is_current()`` before touching shared state.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from markupsafe import escape

from nature_near.reference.places import location_emoji
from nature_near.schemas import Category, Coordinate, WeatherSnapshot

if TYPE_CHECKING:
    from nature_near.resolution.categories import CategoryResult
    from nature_near.resolution.state import FeatureStateStore

logger = logging.getLogger(__name__)

USER_PIN_ICON = "📍"


class MapRenderer(Protocol):
    """Render collaborator consumed by the pipeline."""

    def init_map(self, coordinate: Coordinate, zoom: int) -> None: ...

    def destroy_map(self) -> None: ...

    def clear_layer(self) -> None: ...

    def place_pin(self, coordinate: Coordinate, icon: str, popup_html: str) -> None: ...

    def set_background(self) -> None: ...


class GenerationCounter:
    """Monotonically increasing resolution id."""

    def __init__(self) -> None:
        self.current = 0

    def advance(self) -> int:
        self.current += 1
        return self.current


class MapSession:
    """The currently displayed place and everything resolved for it."""

    def __init__(
        self,
        generation: int,
        counter: GenerationCounter,
        coordinate: Coordinate,
        label: str,
        renderer: MapRenderer,
        state: FeatureStateStore,
    ) -> None:
        self.generation = generation
        self.coordinate = coordinate
        self.label = label
        self.renderer = renderer
        self.state = state
        self.panels: dict[Category, CategoryResult] = {}
        self._counter = counter

    def is_current(self) -> bool:
        """False once a newer resolution has started."""
        return self._counter.current == self.generation

    def open(self, zoom: int) -> None:
        """Replace whatever map exists with a fresh one centered here."""
        self.renderer.destroy_map()
        self.renderer.init_map(self.coordinate, zoom)
        self.renderer.set_background()
        self.renderer.place_pin(
            self.coordinate,
            USER_PIN_ICON,
            f"<strong>📍 You are here</strong><br/>{escape(self.label)}",
        )
        logger.info("Map opened at (%s, %s) for %s", self.coordinate.latitude, self.coordinate.longitude, self.label)

    def place_pin(self, coordinate: Coordinate, icon: str, popup_html: str) -> None:
        if self.is_current():
            self.renderer.place_pin(coordinate, icon, popup_html)

    @property
    def weather(self) -> WeatherSnapshot | None:
        result = self.panels.get(Category.WEATHER)
        if result is None or not result.features:
            return None
        snapshot = result.features[0]
        return snapshot if isinstance(snapshot, WeatherSnapshot) else None

    def confirmation_message(self) -> str:
        """'🌵 Today you're in Santa Fe, NM 87501 🌵 It's 72°F and sunny. ...'"""
        emoji = location_emoji(self.label)
        text = f"{emoji} Today you're in {self.label} {emoji}"
        weather = self.weather
        if weather is not None and weather.temp_f is not None:
            text += f" It's {weather.temp_f}°F and {weather.description.lower()}."
        return text + " Here are some amazing things to do outside!"
