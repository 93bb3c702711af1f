"""Tests for the wttr.in weather datasource."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from nature_near.datasources import wttr
from nature_near.errors import MalformedResponse
from nature_near.schemas import Coordinate

ORIGIN = Coordinate(latitude=35.687, longitude=-105.9378)

SAMPLE_RESPONSE = {
    "current_condition": [
        {
            "temp_F": "72",
            "FeelsLikeF": "70",
            "windspeedMiles": "8",
            "weatherDesc": [{"value": "Sunny"}],
        }
    ]
}


class TestFetchWeather:
    @patch("nature_near.services.http.session.get")
    def test_url_and_format(self, mock_get: MagicMock) -> None:
        mock_get.return_value.json.return_value = SAMPLE_RESPONSE
        wttr.fetch_weather(ORIGIN)
        assert mock_get.call_args[0][0] == "https://wttr.in/35.687,-105.9378"
        assert mock_get.call_args[1]["params"] == {"format": "j1"}


class TestParseWeather:
    def test_snapshot(self) -> None:
        [snapshot] = wttr.parse_weather(SAMPLE_RESPONSE)
        assert snapshot.description == "Sunny"
        assert snapshot.temp_f == 72
        assert snapshot.feels_like_f == 70
        assert snapshot.wind_mph == 8
        assert snapshot.coordinate is None

    def test_no_current_conditions(self) -> None:
        assert wttr.parse_weather({"current_condition": []}) == []

    def test_missing_description(self) -> None:
        with pytest.raises(MalformedResponse):
            wttr.parse_weather({"current_condition": [{"temp_F": "50"}]})

    def test_condition_not_an_object(self) -> None:
        with pytest.raises(MalformedResponse):
            wttr.parse_weather({"current_condition": ["sunny"]})
