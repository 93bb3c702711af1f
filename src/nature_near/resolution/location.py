"""
Top-level orchestration: raw query → place → new session → every category.

Three input paths:

  - ``"87501"``             ZIP lookup (single provider)
  - ``"Santa Fe, NM"``      rate-limited free-text geocoding
  - ``Coordinate(...)``     device location with a best-effort reverse label

Geocoding happens before anything is torn down, so a ``LocationNotFound``
leaves the previous session, map and summary exactly as they were.
"""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Mapping

from nature_near.config import get_settings
from nature_near.datasources import geocoding
from nature_near.datasources.geocoding import Place
from nature_near.history import SearchHistoryStore
from nature_near.resolution.categories import CATEGORY_TABLE, CategoryResolver, CategorySpec
from nature_near.resolution.session import GenerationCounter, MapRenderer, MapSession
from nature_near.resolution.state import FeatureStateStore
from nature_near.schemas import Category, Coordinate, SearchRecord

logger = logging.getLogger(__name__)

ZIP_PATTERN = re.compile(r"^\d{5}$")


class LocationResolver:
    """Resolves places and fans out to every category resolver."""

    def __init__(
        self,
        renderer: MapRenderer,
        history: SearchHistoryStore | None = None,
        table: Mapping[Category, CategorySpec] | None = None,
        zoom: int | None = None,
    ) -> None:
        self.renderer = renderer
        self.history = history
        self.zoom = zoom if zoom is not None else get_settings().map_zoom
        self.state = FeatureStateStore()
        self.generation = GenerationCounter()
        self.session: MapSession | None = None
        self.resolvers = [CategoryResolver(spec) for spec in (table or CATEGORY_TABLE).values()]

    # -------------------------------------------------------------------------
    # Entry points
    # -------------------------------------------------------------------------

    async def resolve(self, query: str | Coordinate) -> MapSession:
        """
        Resolve a ZIP, free-text query or device coordinate.

        Raises:
            LocationNotFound: The place could not be geocoded.
        """
        if isinstance(query, Coordinate):
            place = await geocoding.reverse(query)
        else:
            text = query.strip()
            if ZIP_PATTERN.match(text):
                logger.info("Looking up ZIP code: %s", text)
                place = await asyncio.to_thread(geocoding.lookup_zip, text)
            else:
                place = await geocoding.search(text)
        return await self._open(place, save=True)

    async def select(self, coordinate: Coordinate, label: str) -> MapSession:
        """Open a session for an already-known place (autocomplete pick)."""
        return await self._open(Place(coordinate=coordinate, label=label), save=False)

    async def resolve_recent(self, record: SearchRecord) -> MapSession:
        """Re-run a recent search by its display name."""
        logger.info("Selected recent search: %s", record.display_name)
        return await self.resolve(record.display_name)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    async def _open(self, place: Place, *, save: bool) -> MapSession:
        generation = self.generation.advance()
        self.state.reset(place.label)

        session = MapSession(
            generation=generation,
            counter=self.generation,
            coordinate=place.coordinate,
            label=place.label,
            renderer=self.renderer,
            state=self.state,
        )
        session.open(self.zoom)
        self.session = session

        if save and self.history is not None:
            if place.recordable:
                self.history.add_search(place.city, place.state, place.country or "United States")
            else:
                logger.info("Skipping recent search - missing city or state for %s", place.label)

        results = await asyncio.gather(
            *(resolver.fetch(session) for resolver in self.resolvers),
            return_exceptions=True,
        )
        for resolver, result in zip(self.resolvers, results, strict=True):
            if isinstance(result, BaseException):
                logger.error(
                    "%s resolver crashed: %s", resolver.spec.category, result, exc_info=result
                )
        return session
