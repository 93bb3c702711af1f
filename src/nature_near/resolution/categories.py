"""
Category table and the resolver that runs one category's chain.

The table maps each category to its ordered provider steps, display limit
and messages. Tests substitute fake steps with ``dataclasses.replace``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from nature_near.datasources import ebird, inaturalist, macrostrat, nps, pbdb, usgs, wttr
from nature_near.datasources.heritage import curated, overpass, wikipedia
from nature_near.renderers.popups import popup_html
from nature_near.resolution.chain import Attempt, ChainOutcome, ProviderStep, run_chain
from nature_near.resolution.session import MapSession
from nature_near.resolution.state import TRACKED_CATEGORIES
from nature_near.schemas import Category, CategoryStatus, Feature

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategorySpec:
    """Configuration for one category."""

    category: Category
    steps: tuple[ProviderStep, ...]
    limit: int
    icon: str
    headline: str  # formatted with {count} and {source}
    no_data_message: str
    failure_message: str
    counted: bool = True  # show a count in the summary
    tracked: bool = True  # part of the FeatureStateStore / summary


@dataclass
class CategoryResult:
    """What a category resolved to: status, records and the panel message."""

    category: Category
    status: CategoryStatus
    message: str
    features: list[Feature] = field(default_factory=list)
    provider: str | None = None
    attempts: list[Attempt] = field(default_factory=list)


def _icon(category: Category, default: str = "") -> str:
    return TRACKED_CATEGORIES.get(category, ("", default))[1]


def default_category_table() -> dict[Category, CategorySpec]:
    """Build the production category → chain table."""
    specs = [
        CategorySpec(
            category=Category.QUAKES,
            steps=(ProviderStep("usgs", usgs.fetch_quakes, usgs.parse_quakes, "from USGS monitoring"),),
            limit=3,
            icon=_icon(Category.QUAKES),
            headline="📍 Found {count} earthquakes nearby {source}",
            no_data_message="No recent earthquakes nearby.",
            failure_message="Failed to load earthquake data.",
        ),
        CategorySpec(
            category=Category.BIRDS,
            steps=(
                ProviderStep(
                    "ebird", ebird.fetch_birds, ebird.parse_birds, "from the eBird community database"
                ),
            ),
            limit=6,
            icon=_icon(Category.BIRDS),
            headline="📍 Found {count} birds nearby {source}",
            no_data_message="No recent sightings nearby.",
            failure_message="Failed to load species data.",
        ),
        CategorySpec(
            category=Category.INSECTS,
            steps=(
                ProviderStep(
                    "inaturalist",
                    inaturalist.fetch_insects,
                    inaturalist.parse_insects,
                    "from the iNaturalist community",
                ),
            ),
            limit=4,
            icon=_icon(Category.INSECTS),
            headline="📍 Found {count} insect observations nearby {source}",
            no_data_message="No recent insect observations nearby.",
            failure_message="Failed to load insect observation data.",
        ),
        CategorySpec(
            category=Category.PARKS,
            steps=(ProviderStep("nps", nps.fetch_parks, nps.parse_parks, "from the National Park Service"),),
            limit=4,
            icon=_icon(Category.PARKS),
            headline="📍 Found {count} parks nearby {source}",
            no_data_message="No NPS parks found within 600 miles.",
            failure_message="Failed to load park data. API may be temporarily unavailable.",
        ),
        CategorySpec(
            category=Category.FOSSILS,
            steps=(
                ProviderStep(
                    "pbdb", pbdb.fetch_fossils, pbdb.parse_fossils, "from the Paleobiology Database"
                ),
            ),
            limit=3,
            icon=_icon(Category.FOSSILS),
            headline="📍 Found {count} fossil discoveries nearby {source}",
            no_data_message="No fossil discoveries found within 600 miles.",
            failure_message="Failed to load fossil data. API may be temporarily unavailable.",
        ),
        CategorySpec(
            category=Category.HERITAGE,
            steps=(
                ProviderStep(
                    "wikipedia",
                    wikipedia.fetch_nearby_pages,
                    wikipedia.parse_nearby_pages,
                    "from Wikipedia's historical database",
                ),
                ProviderStep(
                    "overpass",
                    overpass.fetch_osm_heritage,
                    overpass.parse_osm_heritage,
                    "from OpenStreetMap records",
                ),
                ProviderStep(
                    "curated",
                    curated.fetch_curated_sites,
                    curated.parse_curated_sites,
                    "from historical archives",
                ),
            ),
            limit=6,
            icon=_icon(Category.HERITAGE),
            headline="📍 Found {count} historical sites nearby {source}",
            no_data_message=(
                "🧭 No documented archaeological sites found within 300km. This region may have "
                "undocumented sites or require specialized archaeological databases."
            ),
            failure_message="Failed to load historical site data.",
        ),
        CategorySpec(
            category=Category.WEATHER,
            steps=(ProviderStep("wttr.in", wttr.fetch_weather, wttr.parse_weather, "from wttr.in"),),
            limit=1,
            icon=_icon(Category.WEATHER),
            headline="Current conditions {source}",
            no_data_message="No weather data available.",
            failure_message="Failed to load weather.",
            counted=False,
        ),
        CategorySpec(
            category=Category.BEDROCK,
            steps=(
                ProviderStep(
                    "macrostrat", macrostrat.fetch_bedrock, macrostrat.parse_bedrock, "from Macrostrat"
                ),
            ),
            limit=1,
            icon="🪨",
            headline="Bedrock geology {source}",
            no_data_message=(
                "We couldn't find geologic data for that location. "
                "Try a different ZIP code or enable geolocation."
            ),
            failure_message="Failed to load geology data.",
            counted=False,
            tracked=False,
        ),
    ]
    return {spec.category: spec for spec in specs}


CATEGORY_TABLE: dict[Category, CategorySpec] = default_category_table()


class CategoryResolver:
    """Runs one category's fallback chain against a session."""

    def __init__(self, spec: CategorySpec) -> None:
        self.spec = spec

    def build_result(self, outcome: ChainOutcome) -> CategoryResult:
        spec = self.spec
        attempts = outcome.attempts
        winner = outcome.winner
        if winner is None:
            all_failed = outcome.all_failed
            return CategoryResult(
                category=spec.category,
                status=CategoryStatus(found=False, count=0, icon=spec.icon),
                message=spec.failure_message if all_failed else spec.no_data_message,
                attempts=attempts,
            )

        features = winner.features[: spec.limit]
        count = len(features) if spec.counted else 0
        return CategoryResult(
            category=spec.category,
            status=CategoryStatus(found=True, count=count, icon=spec.icon),
            message=spec.headline.format(count=len(features), source=winner.source_label).strip(),
            features=features,
            provider=winner.provider,
            attempts=attempts,
        )

    def failed_result(self) -> CategoryResult:
        """Result for a chain that crashed outright."""
        return CategoryResult(
            category=self.spec.category,
            status=CategoryStatus(found=False, count=0, icon=self.spec.icon),
            message=self.spec.failure_message,
        )

    async def fetch(self, session: MapSession) -> CategoryResult | None:
        """
        Resolve this category for ``session``.

        Returns None (and changes nothing) when the session was superseded
        while providers were in flight. A crash inside the chain still
        completes the category with its failure message.
        """
        outcome: ChainOutcome | None
        try:
            outcome = await run_chain(self.spec.steps, session.coordinate)
        except Exception:
            logger.exception("%s chain crashed", self.spec.category)
            outcome = None

        if not session.is_current():
            logger.debug(
                "Discarding stale %s result for generation %d", self.spec.category, session.generation
            )
            return None

        result = self.failed_result() if outcome is None else self.build_result(outcome)
        self._complete(session, result)
        return result

    def _complete(self, session: MapSession, result: CategoryResult) -> None:
        session.panels[self.spec.category] = result
        if self.spec.tracked:
            session.state.update(self.spec.category, result.status)
        for feature in result.features:
            if feature.coordinate is not None:
                session.place_pin(feature.coordinate, self.spec.icon, popup_html(feature))
        logger.info("%s: %s", self.spec.category, result.message)
