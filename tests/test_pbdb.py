"""Tests for the Paleobiology Database datasource."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from nature_near.datasources import pbdb
from nature_near.errors import MalformedResponse
from nature_near.schemas import Coordinate

ORIGIN = Coordinate(latitude=35.0, longitude=-106.0)


class TestFetchFossils:
    @patch("nature_near.services.http.session.get")
    def test_bounding_box(self, mock_get: MagicMock) -> None:
        mock_get.return_value.json.return_value = {"records": []}
        pbdb.fetch_fossils(ORIGIN)

        params = mock_get.call_args[1]["params"]
        assert params["latmin"] == 26.0
        assert params["latmax"] == 44.0
        assert params["lngmin"] == -115.0
        assert params["lngmax"] == -97.0
        assert params["show"] == "coords,time,class"
        assert params["limit"] == 20


class TestFormatAge:
    def test_range(self) -> None:
        assert pbdb.format_age({"eag": 485.4, "lag": 443.8}) == "485.4 - 443.8 Ma"

    def test_interval_name(self) -> None:
        assert pbdb.format_age({"oei": "Cretaceous"}) == "Cretaceous"

    def test_unknown(self) -> None:
        assert pbdb.format_age({}) == "Unknown age"


class TestParseFossils:
    def test_normalizes(self) -> None:
        data = {
            "records": [
                {"tna": "Coelophysis bauri", "cll": "Reptilia", "eag": 221.5, "lag": 205.6, "lat": 36.3, "lng": -106.5},
                {"idn": "Ammonoidea indet.", "oei": "Late Cretaceous"},
            ]
        }
        fossils = pbdb.parse_fossils(data)
        assert fossils[0].title == "Coelophysis bauri (Reptilia)"
        assert fossils[0].subtitle == "Age: 221.5 - 205.6 Ma"
        assert fossils[0].coordinate == Coordinate(latitude=36.3, longitude=-106.5)
        assert fossils[1].title == "Ammonoidea indet."
        assert fossils[1].coordinate is None

    def test_unknown_organism(self) -> None:
        assert pbdb.parse_fossils({"records": [{}]})[0].taxon == "Unknown organism"

    def test_malformed(self) -> None:
        with pytest.raises(MalformedResponse):
            pbdb.parse_fossils([])

    def test_skips_non_object_records(self) -> None:
        fossils = pbdb.parse_fossils({"records": [None, 3, {"tna": "Coelophysis"}]})
        assert [f.taxon for f in fossils] == ["Coelophysis"]

    def test_records_not_a_list(self) -> None:
        with pytest.raises(MalformedResponse):
            pbdb.parse_fossils({"records": {}})
