"""
Domain models for Nature Near Me.

Pydantic models for data from external APIs and internal state.
These define the canonical schema - datasources normalize API responses to these.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Categories
# =============================================================================


class Category(StrEnum):
    """Feature categories, one resolver each."""

    QUAKES = "quakes"
    BIRDS = "birds"
    INSECTS = "insects"
    PARKS = "parks"
    FOSSILS = "fossils"
    HERITAGE = "heritage"
    WEATHER = "weather"
    BEDROCK = "bedrock"


class CategoryStatus(BaseModel):
    """Found/count summary for one category."""

    found: bool = False
    count: int = Field(default=0, ge=0)
    icon: str = ""


# =============================================================================
# Geographic
# =============================================================================


class Coordinate(BaseModel):
    """Geographic point. Immutable once produced by a resolver."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class Suggestion(BaseModel):
    """An autocomplete candidate."""

    name: str
    coordinate: Coordinate


# =============================================================================
# Features
# =============================================================================


class Feature(BaseModel):
    """A normalized observation, site or event.

    ``coordinate`` is None for categories that describe the query point
    itself (weather, bedrock) and for records the provider left unlocated.
    """

    category: ClassVar[Category]

    source: str = Field(..., description="Provider name")
    coordinate: Coordinate | None = None

    @property
    def title(self) -> str:
        raise NotImplementedError

    @property
    def subtitle(self) -> str:
        return ""


class Quake(Feature):
    category: ClassVar[Category] = Category.QUAKES

    magnitude: float | None = None
    place: str = ""
    time: datetime | None = None

    @property
    def title(self) -> str:
        mag = "?" if self.magnitude is None else f"{self.magnitude:g}"
        return f"M {mag} Earthquake"

    @property
    def subtitle(self) -> str:
        return self.place


class BirdSighting(Feature):
    category: ClassVar[Category] = Category.BIRDS

    common_name: str
    scientific_name: str | None = None
    observed: str = ""
    location_name: str | None = None

    @property
    def title(self) -> str:
        return self.common_name

    @property
    def subtitle(self) -> str:
        return f"Spotted: {self.observed}" if self.observed else ""


class InsectObservation(Feature):
    category: ClassVar[Category] = Category.INSECTS

    common_name: str
    scientific_name: str = ""
    observer: str = "Anonymous"
    observed: str = ""

    @property
    def title(self) -> str:
        return self.common_name

    @property
    def subtitle(self) -> str:
        return f"Observed: {self.observed} by {self.observer}"


class Park(Feature):
    category: ClassVar[Category] = Category.PARKS

    name: str
    designation: str = ""
    description: str = ""
    url: str | None = None

    @property
    def title(self) -> str:
        return self.name

    @property
    def subtitle(self) -> str:
        return self.designation or "National Park Service"


class Fossil(Feature):
    category: ClassVar[Category] = Category.FOSSILS

    taxon: str
    classification: str | None = None
    age: str = "Unknown age"

    @property
    def title(self) -> str:
        if self.classification:
            return f"{self.taxon} ({self.classification})"
        return self.taxon

    @property
    def subtitle(self) -> str:
        return f"Age: {self.age}"


class HeritageSite(Feature):
    category: ClassVar[Category] = Category.HERITAGE

    name: str
    description: str = ""
    kind: str | None = None

    @property
    def title(self) -> str:
        return self.name

    @property
    def subtitle(self) -> str:
        return self.description


class WeatherSnapshot(Feature):
    category: ClassVar[Category] = Category.WEATHER

    description: str
    temp_f: int | None = None
    feels_like_f: int | None = None
    wind_mph: int | None = None

    @property
    def title(self) -> str:
        return self.description

    @property
    def subtitle(self) -> str:
        return f"Temp: {self.temp_f}°F (Feels like {self.feels_like_f}°F)"


class BedrockUnit(Feature):
    category: ClassVar[Category] = Category.BEDROCK

    name: str = "Unnamed formation"
    age_ma: float | None = None
    lithology: str = "rock"
    description: str = ""
    context: str = "Unknown time period"

    @property
    def title(self) -> str:
        return self.name

    @property
    def subtitle(self) -> str:
        return f"Formed {self.context}"


# =============================================================================
# Search history
# =============================================================================


class SearchRecord(BaseModel):
    """One of the user's own recent searches."""

    city: str
    state: str
    country: str
    timestamp: str = Field(..., description="ISO-8601 timestamp")
    display_name: str

    @property
    def key(self) -> tuple[str, str, str]:
        return (self.city, self.state, self.country)


class CommunityRecord(SearchRecord):
    """A search forwarded to the simulated community feed."""

    session_id: str


class CuratedLocation(BaseModel):
    """Editorial entry shown in the community feed."""

    city: str
    state: str
    country: str = "United States"
    activity: str
    ago: str
    description: str

    @property
    def display_name(self) -> str:
        if self.country == "United States":
            return f"{self.city}, {self.state}"
        return f"{self.city}, {self.state}, {self.country}"
