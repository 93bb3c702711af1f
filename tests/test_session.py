"""Tests for per-resolution map sessions."""

from __future__ import annotations

from nature_near.renderers.leaflet import LeafletMap
from nature_near.resolution.categories import CategoryResult
from nature_near.resolution.session import GenerationCounter, MapSession
from nature_near.resolution.state import FeatureStateStore
from nature_near.schemas import Category, CategoryStatus, Coordinate, WeatherSnapshot

HERE = Coordinate(latitude=35.687, longitude=-105.9378)


def make_session(label: str = "Santa Fe, NM 87501") -> tuple[MapSession, GenerationCounter, LeafletMap]:
    counter = GenerationCounter()
    renderer = LeafletMap()
    session = MapSession(counter.advance(), counter, HERE, label, renderer, FeatureStateStore())
    return session, counter, renderer


class TestGenerationCounter:
    def test_monotonic(self) -> None:
        counter = GenerationCounter()
        assert [counter.advance() for _ in range(3)] == [1, 2, 3]
        assert counter.current == 3


class TestMapSession:
    def test_open_places_user_pin(self) -> None:
        session, _, renderer = make_session("Taos <NM>")
        session.open(10)
        assert renderer.center == HERE
        assert renderer.background is not None
        [pin] = renderer.pins
        assert pin.icon == "📍"
        assert pin.popup == "<strong>📍 You are here</strong><br/>Taos &lt;NM&gt;"

    def test_reopen_replaces_map(self) -> None:
        session, _, renderer = make_session()
        session.open(10)
        session.open(10)
        assert len(renderer.pins) == 1

    def test_stale_session_cannot_pin(self) -> None:
        session, counter, renderer = make_session()
        session.open(10)
        counter.advance()
        session.place_pin(HERE, "🐦", "late bird")
        assert len(renderer.pins) == 1
        assert not session.is_current()

    def test_confirmation_without_weather(self) -> None:
        session, _, _ = make_session()
        assert session.confirmation_message() == (
            "🌵 Today you're in Santa Fe, NM 87501 🌵 Here are some amazing things to do outside!"
        )

    def test_confirmation_with_weather(self) -> None:
        session, _, _ = make_session("Seattle, WA")
        session.panels[Category.WEATHER] = CategoryResult(
            category=Category.WEATHER,
            status=CategoryStatus(found=True, icon="🌦️"),
            message="Current conditions from wttr.in",
            features=[WeatherSnapshot(source="wttr.in", description="Light Rain", temp_f=54)],
        )
        assert session.confirmation_message() == (
            "🌲 Today you're in Seattle, WA 🌲 It's 54°F and light rain."
            " Here are some amazing things to do outside!"
        )
