"""Tests for the iNaturalist insect datasource."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from nature_near.datasources import inaturalist
from nature_near.errors import MalformedResponse
from nature_near.schemas import Coordinate

ORIGIN = Coordinate(latitude=35.687, longitude=-105.9378)

SAMPLE_RESPONSE = {
    "total_results": 2,
    "results": [
        {
            "observed_on": "2026-04-28",
            "taxon": {"name": "Vanessa cardui", "preferred_common_name": "Painted Lady"},
            "user": {"login": "moth_fan", "name": "Ana"},
            "geojson": {"type": "Point", "coordinates": [-105.95, 35.70]},
        },
        {
            "created_at": "2026-04-27T14:02:00-06:00",
            "taxon": {"name": "Apis mellifera"},
            "user": {},
        },
    ],
}


class TestFetchInsects:
    @patch("nature_near.datasources.inaturalist._rate_limit")
    @patch("nature_near.services.http.session.get")
    def test_query_parameters(self, mock_get: MagicMock, mock_rate: MagicMock) -> None:
        mock_get.return_value.json.return_value = SAMPLE_RESPONSE
        inaturalist.fetch_insects(ORIGIN)

        mock_rate.assert_called_once()
        url = mock_get.call_args[0][0]
        params = mock_get.call_args[1]["params"]
        assert url.endswith("/observations")
        assert params["taxon_id"] == 47158
        assert params["radius"] == 15
        assert params["per_page"] == 4
        assert params["order_by"] == "created_at"


class TestParseInsects:
    def test_normalizes(self) -> None:
        insects = inaturalist.parse_insects(SAMPLE_RESPONSE)
        assert len(insects) == 2

        lady = insects[0]
        assert lady.title == "Painted Lady"
        assert lady.subtitle == "Observed: 2026-04-28 by Ana"
        assert lady.coordinate == Coordinate(latitude=35.70, longitude=-105.95)

    def test_falls_back_to_scientific_name_and_anonymous(self) -> None:
        bee = inaturalist.parse_insects(SAMPLE_RESPONSE)[1]
        assert bee.common_name == "Apis mellifera"
        assert bee.observer == "Anonymous"
        assert bee.observed == "2026-04-27"
        assert bee.coordinate is None

    def test_empty(self) -> None:
        assert inaturalist.parse_insects({"results": []}) == []

    def test_malformed(self) -> None:
        with pytest.raises(MalformedResponse):
            inaturalist.parse_insects({"results": "nope"})

    def test_skips_non_object_results(self) -> None:
        data = {"results": [None, *SAMPLE_RESPONSE["results"]]}
        assert len(inaturalist.parse_insects(data)) == len(SAMPLE_RESPONSE["results"])
