"""Tests for the category table and category resolvers."""

from __future__ import annotations

import asyncio
from typing import Any
from unittest.mock import MagicMock, patch

import requests

from nature_near.errors import ProviderUnavailable
from nature_near.renderers.leaflet import LeafletMap
from nature_near.resolution.categories import (
    CATEGORY_TABLE,
    CategoryResolver,
    CategorySpec,
)
from nature_near.resolution.chain import Attempt, AttemptStatus, ChainOutcome, ProviderStep
from nature_near.resolution.session import GenerationCounter, MapSession
from nature_near.resolution.state import FeatureStateStore
from nature_near.schemas import Category, Coordinate, Feature, Quake, WeatherSnapshot

SANTA_FE = Coordinate(latitude=35.687, longitude=-105.9378)
MID_ATLANTIC = Coordinate(latitude=30.0, longitude=-40.0)
CHACO_CANYON = Coordinate(latitude=36.06, longitude=-107.96)


def make_session(coordinate: Coordinate = SANTA_FE) -> MapSession:
    counter = GenerationCounter()
    renderer = LeafletMap()
    state = FeatureStateStore()
    state.reset("Test place")
    session = MapSession(counter.advance(), counter, coordinate, "Test place", renderer, state)
    session.open(10)
    return session


def quakes(n: int) -> list[Feature]:
    return [
        Quake(source="usgs", coordinate=SANTA_FE, magnitude=2.0 + i, place=f"Quake {i}")
        for i in range(n)
    ]


def quake_spec(*steps: ProviderStep, limit: int = 3) -> CategorySpec:
    return CategorySpec(
        category=Category.QUAKES,
        steps=steps,
        limit=limit,
        icon="🌋",
        headline="📍 Found {count} earthquakes nearby {source}",
        no_data_message="No recent earthquakes nearby.",
        failure_message="Failed to load earthquake data.",
    )


def fixed(name: str, features: list[Feature] | None = None, error: Exception | None = None) -> ProviderStep:
    def fetch(coord: Coordinate) -> Any:
        if error is not None:
            raise error
        return features

    return ProviderStep(name, fetch, lambda raw, origin: raw, "from USGS monitoring")


class TestCategoryTable:
    def test_every_category_configured(self) -> None:
        assert set(CATEGORY_TABLE) == set(Category)

    def test_limits(self) -> None:
        limits = {c: spec.limit for c, spec in CATEGORY_TABLE.items()}
        assert limits[Category.QUAKES] == 3
        assert limits[Category.BIRDS] == 6
        assert limits[Category.INSECTS] == 4
        assert limits[Category.PARKS] == 4
        assert limits[Category.FOSSILS] == 3
        assert limits[Category.HERITAGE] == 6

    def test_heritage_fallback_order(self) -> None:
        names = [s.name for s in CATEGORY_TABLE[Category.HERITAGE].steps]
        assert names == ["wikipedia", "overpass", "curated"]

    def test_bedrock_not_tracked(self) -> None:
        assert not CATEGORY_TABLE[Category.BEDROCK].tracked


class TestCategoryResolver:
    def test_found_caps_to_limit(self) -> None:
        session = make_session()
        result = asyncio.run(CategoryResolver(quake_spec(fixed("usgs", quakes(5)))).fetch(session))

        assert result is not None
        assert len(result.features) == 3
        assert result.status.found
        assert result.status.count == 3
        assert result.message == "📍 Found 3 earthquakes nearby from USGS monitoring"

    def test_found_updates_state_and_pins(self) -> None:
        session = make_session()
        asyncio.run(CategoryResolver(quake_spec(fixed("usgs", quakes(2)))).fetch(session))

        assert session.state.found() == [Category.QUAKES]
        assert "🌋 2 earthquakes" in session.state.summary
        renderer = session.renderer
        assert isinstance(renderer, LeafletMap)
        assert [p.icon for p in renderer.pins].count("🌋") == 2
        assert session.panels[Category.QUAKES].provider == "usgs"

    def test_no_data_message(self) -> None:
        session = make_session()
        result = asyncio.run(CategoryResolver(quake_spec(fixed("usgs", []))).fetch(session))
        assert result is not None
        assert result.message == "No recent earthquakes nearby."
        assert not result.status.found

    def test_failure_message(self) -> None:
        session = make_session()
        spec = quake_spec(fixed("usgs", error=ProviderUnavailable("usgs", "timeout")))
        result = asyncio.run(CategoryResolver(spec).fetch(session))
        assert result is not None
        assert result.message == "Failed to load earthquake data."
        assert session.state.found() == []

    def test_crashing_chain_completes_with_failure_message(self) -> None:
        session = make_session()
        spec = quake_spec(fixed("usgs", error=RuntimeError("bug")), fixed("backup", quakes(1)))
        result = asyncio.run(CategoryResolver(spec).fetch(session))
        assert result is not None
        assert result.message == "Failed to load earthquake data."
        assert result.status.count == 0
        assert session.panels[Category.QUAKES] is result

    def test_stale_session_discarded(self) -> None:
        session = make_session()
        session._counter.advance()  # a newer resolution started
        result = asyncio.run(CategoryResolver(quake_spec(fixed("usgs", quakes(2)))).fetch(session))
        assert result is None
        assert session.panels == {}
        assert session.state.found() == []

    def test_weather_not_counted(self) -> None:
        spec = CATEGORY_TABLE[Category.WEATHER]
        resolver = CategoryResolver(spec)
        snapshot = WeatherSnapshot(source="wttr.in", description="Sunny", temp_f=72)
        result = resolver.build_result(
            ChainOutcome([Attempt("wttr.in", AttemptStatus.FOUND, [snapshot], source_label="from wttr.in")])
        )
        assert result.status.found
        assert result.status.count == 0


def _routed_get(routes: dict[str, Any]) -> Any:
    def fake_get(url: str, **kwargs: Any) -> MagicMock:
        for prefix, payload in routes.items():
            if url.startswith(prefix):
                resp = MagicMock()
                if isinstance(payload, Exception):
                    resp.raise_for_status.side_effect = payload
                else:
                    resp.json.return_value = payload
                return resp
        raise AssertionError(f"unexpected URL {url}")

    return fake_get


class TestHeritageChain:
    spec = CATEGORY_TABLE[Category.HERITAGE]

    @patch("nature_near.services.http.session.get")
    def test_wikipedia_wins(self, mock_get: MagicMock) -> None:
        mock_get.side_effect = _routed_get(
            {
                "https://en.wikipedia.org": {
                    "pages": [
                        {
                            "title": "Palace of the Governors",
                            "description": "Historic building in Santa Fe",
                            "coordinates": [{"lat": 35.688, "lon": -105.938}],
                        },
                        {"title": "Some Bakery", "description": "Restaurant"},
                    ]
                }
            }
        )
        result = asyncio.run(CategoryResolver(self.spec).fetch(make_session()))
        assert result is not None
        assert result.provider == "wikipedia"
        assert [f.title for f in result.features] == ["Palace of the Governors"]
        assert result.message == "📍 Found 1 historical sites nearby from Wikipedia's historical database"

    @patch("nature_near.services.http.session.get")
    def test_falls_back_to_overpass(self, mock_get: MagicMock) -> None:
        mock_get.side_effect = _routed_get(
            {
                "https://en.wikipedia.org": requests.HTTPError("503"),
                "https://overpass-api.de": {
                    "elements": [
                        {
                            "lat": 35.7,
                            "lon": -105.9,
                            "tags": {"name": "Old Fort Marcy", "historic": "fort"},
                        }
                    ]
                },
            }
        )
        result = asyncio.run(CategoryResolver(self.spec).fetch(make_session()))
        assert result is not None
        assert result.provider == "overpass"
        assert result.features[0].subtitle == "Military fortification"
        assert [a.provider for a in result.attempts] == ["wikipedia", "overpass"]

    @patch("nature_near.services.http.session.get")
    def test_falls_back_to_curated(self, mock_get: MagicMock) -> None:
        mock_get.side_effect = _routed_get(
            {
                "https://en.wikipedia.org": {"pages": []},
                "https://overpass-api.de": {"elements": []},
            }
        )
        result = asyncio.run(CategoryResolver(self.spec).fetch(make_session()))
        assert result is not None
        assert result.provider == "curated"
        assert "Bandelier" in [f.title for f in result.features]
        assert result.message.endswith("from historical archives")

    @patch("nature_near.services.http.session.get")
    def test_mid_ocean_no_data(self, mock_get: MagicMock) -> None:
        mock_get.side_effect = _routed_get(
            {
                "https://en.wikipedia.org": {"pages": []},
                "https://overpass-api.de": {"elements": []},
            }
        )
        session = make_session(MID_ATLANTIC)
        result = asyncio.run(CategoryResolver(self.spec).fetch(session))
        assert result is not None
        assert result.features == []
        assert result.message.startswith("🧭 No documented archaeological sites found within 300km.")
        assert Category.HERITAGE not in session.state.found()

    @patch("nature_near.services.http.session.get")
    def test_malformed_wikipedia_falls_through(self, mock_get: MagicMock) -> None:
        mock_get.side_effect = _routed_get(
            {
                "https://en.wikipedia.org": {"pages": {}},
                "https://overpass-api.de": {"elements": []},
            }
        )
        result = asyncio.run(CategoryResolver(self.spec).fetch(make_session(CHACO_CANYON)))
        assert result is not None
        assert [a.status for a in result.attempts] == [
            AttemptStatus.FAILED,
            AttemptStatus.EMPTY,
            AttemptStatus.FOUND,
        ]
        assert result.provider == "curated"
        assert "Chaco Canyon" in [f.title for f in result.features]

    @patch("nature_near.services.http.session.get")
    def test_null_pages_fall_through_to_curated(self, mock_get: MagicMock) -> None:
        mock_get.side_effect = _routed_get(
            {
                "https://en.wikipedia.org": {"pages": [None]},
                "https://overpass-api.de": {"elements": [None, 7]},
            }
        )
        result = asyncio.run(CategoryResolver(self.spec).fetch(make_session(CHACO_CANYON)))
        assert result is not None
        assert result.provider == "curated"
        assert result.message.endswith("from historical archives")
