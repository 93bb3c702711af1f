"""Tests for the geocoding datasources."""

from __future__ import annotations

import asyncio
from unittest.mock import MagicMock, patch

import pytest
import requests

from nature_near.datasources.geocoding import nominatim, photon, zippopotam
from nature_near.datasources.geocoding.models import UNKNOWN_LOCATION, Place
from nature_near.errors import LocationNotFound
from nature_near.schemas import Coordinate

SANTA_FE = Coordinate(latitude=35.687, longitude=-105.9378)


class TestZippopotam:
    def test_parse(self) -> None:
        data = {
            "places": [
                {
                    "place name": "Santa Fe",
                    "state abbreviation": "NM",
                    "latitude": "35.6869",
                    "longitude": "-105.9378",
                }
            ]
        }
        place = zippopotam.parse_zip("87501", data)
        assert place.label == "Santa Fe, NM 87501"
        assert (place.city, place.state, place.country) == ("Santa Fe", "NM", "United States")

    def test_parse_empty(self) -> None:
        with pytest.raises(LocationNotFound):
            zippopotam.parse_zip("00000", {})

    @patch("nature_near.services.http.session.get")
    def test_http_error(self, mock_get: MagicMock) -> None:
        mock_get.return_value.raise_for_status.side_effect = requests.HTTPError("404")
        with pytest.raises(LocationNotFound, match="00000"):
            zippopotam.lookup_zip("00000")


class TestNominatimLabels:
    def test_city_state_postcode(self) -> None:
        address = {"city": "Santa Fe", "state": "New Mexico", "postcode": "87501"}
        assert nominatim.format_location_label(address) == "Santa Fe, New Mexico 87501"

    def test_town_without_postcode(self) -> None:
        assert nominatim.format_location_label({"town": "Taos", "state": "New Mexico"}) == "Taos, New Mexico"

    def test_display_name_tokens(self) -> None:
        label = nominatim.format_location_label({}, "Sandia Peak, Bernalillo County, New Mexico, United States")
        assert label == "Sandia Peak, Bernalillo County, New Mexico"

    def test_unknown(self) -> None:
        assert nominatim.format_location_label({}) == UNKNOWN_LOCATION

    def test_reverse_label_fallbacks(self) -> None:
        assert nominatim.reverse_label({"county": "Rio Arriba County", "state": "New Mexico"}) == (
            "Rio Arriba County, New Mexico",
            "Rio Arriba County",
            "New Mexico",
        )
        assert nominatim.reverse_label({"state": "Nevada"}) == ("Nevada", None, "Nevada")
        assert nominatim.reverse_label({}) == ("Your location", None, None)


class TestNominatimSearch:
    def test_parse_search(self) -> None:
        data = [
            {
                "lat": "35.687",
                "lon": "-105.9378",
                "display_name": "Santa Fe, Santa Fe County, New Mexico, United States",
                "address": {"city": "Santa Fe", "state": "New Mexico", "country": "United States"},
            }
        ]
        place = nominatim.parse_search("Santa Fe", data)
        assert place.coordinate == SANTA_FE
        assert place.label == "Santa Fe, New Mexico"
        assert place.recordable

    def test_county_counts_as_city_for_history(self) -> None:
        data = [{"lat": "1", "lon": "2", "address": {"county": "Mora County", "state": "New Mexico"}}]
        place = nominatim.parse_search("Mora", data)
        assert place.city == "Mora County"
        assert place.country == "United States"

    def test_no_results(self) -> None:
        with pytest.raises(LocationNotFound):
            nominatim.parse_search("Atlantis", [])

    @patch("nature_near.services.http.session.get")
    def test_search_query_params(self, mock_get: MagicMock) -> None:
        mock_get.return_value.json.return_value = [{"lat": "35.687", "lon": "-105.9378", "address": {}}]
        asyncio.run(nominatim.search("Santa Fe"))
        params = mock_get.call_args[1]["params"]
        assert params["countrycodes"] == "us"
        assert params["limit"] == 1
        assert params["addressdetails"] == 1

    @patch("nature_near.services.http.session.get")
    def test_search_transport_failure(self, mock_get: MagicMock) -> None:
        mock_get.side_effect = requests.ConnectionError("offline")
        with pytest.raises(LocationNotFound):
            asyncio.run(nominatim.search("Santa Fe"))


class TestPlace:
    def test_recordable_requires_city_and_state(self) -> None:
        assert not Place(SANTA_FE, "Santa Fe", city="Santa Fe").recordable
        assert not Place(SANTA_FE, UNKNOWN_LOCATION, "X", "Y").recordable


class TestPhoton:
    @patch("nature_near.services.http.session.get")
    def test_suggestions(self, mock_get: MagicMock) -> None:
        mock_get.return_value.json.return_value = {
            "features": [
                {"properties": {"name": "Santa Fe", "state": "New Mexico"}, "geometry": {"coordinates": [-105.9, 35.7]}},
                {"properties": {}, "geometry": {"coordinates": [0, 0]}},
            ]
        }
        suggestions = photon.suggest("santa f")
        assert [s.name for s in suggestions] == ["Santa Fe, New Mexico"]
        params = mock_get.call_args[1]["params"]
        assert params == {"q": "santa f", "limit": 5, "osm_tag": "place"}

    @patch("nature_near.services.http.session.get")
    def test_falls_back_to_local_list(self, mock_get: MagicMock) -> None:
        mock_get.side_effect = requests.ConnectionError("offline")
        names = [s.name for s in photon.suggest("santa")]
        assert names == ["Santa Fe, NM", "Santa Barbara, CA", "Santa Monica, CA"]

    @patch("nature_near.services.http.session.get")
    def test_empty_photon_uses_local_list(self, mock_get: MagicMock) -> None:
        mock_get.return_value.json.return_value = {"features": []}
        assert [s.name for s in photon.suggest("DENVER")] == ["Denver, CO"]

    @patch("nature_near.services.http.session.get")
    def test_nothing_anywhere(self, mock_get: MagicMock) -> None:
        mock_get.side_effect = requests.ConnectionError("offline")
        assert photon.suggest("zzzz") == []
