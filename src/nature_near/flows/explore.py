"""
Prefect flow for exploring a place and writing the dashboard page.

Resolves a ZIP code, free-text place or coordinate, runs every category
chain for it, and renders the result into ``site/index.html``.

Run locally:
    python -m nature_near.flows.explore "Santa Fe, NM"
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from prefect import flow, task
from prefect.cache_policies import NO_CACHE

from nature_near.config import get_settings
from nature_near.history import CommunityStore, SearchHistoryStore, render_community_feed
from nature_near.renderers import render_template
from nature_near.renderers.leaflet import LeafletMap
from nature_near.renderers.panels import build_panels_html
from nature_near.renderers.searches import build_community_html, build_recent_searches_html
from nature_near.resolution import CategoryResult, LocationResolver
from nature_near.schemas import Category, Coordinate, CuratedLocation, SearchRecord
from nature_near.storage import FileStorage, MemoryStorage, Storage

# Session storage lives as long as the process
session_storage = MemoryStorage()


def open_history(storage: Storage | None = None) -> SearchHistoryStore:
    """History store backed by the configured storage directory."""
    durable = storage or FileStorage(get_settings().storage_dir)
    return SearchHistoryStore(durable, CommunityStore(durable, session_storage))


@dataclass
class DashboardView:
    """Everything the dashboard page shows for one resolution."""

    label: str
    coordinate: Coordinate
    summary: str
    confirmation: str
    panels: dict[Category, CategoryResult]
    map_html: str
    map_script: str
    background: str | None = None
    recent: list[SearchRecord] = field(default_factory=list)
    community: list[CuratedLocation] = field(default_factory=list)

    @property
    def found(self) -> list[Category]:
        return [c for c, result in self.panels.items() if result.status.found]


@task(name="resolve-location", cache_policy=NO_CACHE)
async def resolve_location(
    query: str | Coordinate,
    history: SearchHistoryStore | None = None,
) -> DashboardView:
    """Geocode ``query`` and resolve every category around it."""
    history = history or open_history()
    renderer = LeafletMap()
    resolver = LocationResolver(renderer, history=history)
    session = await resolver.resolve(query)

    map_html, map_script = renderer.render()
    return DashboardView(
        label=session.label,
        coordinate=session.coordinate,
        summary=resolver.state.summary,
        confirmation=session.confirmation_message(),
        panels=dict(session.panels),
        map_html=map_html,
        map_script=map_script,
        background=renderer.background,
        recent=history.searches(),
        community=render_community_feed(),
    )


def build_html(view: DashboardView, now: datetime | None = None) -> str:
    """Render the full dashboard page."""
    now = now or datetime.now(UTC)
    return render_template(
        "dashboard.html.j2",
        label=view.label,
        summary=view.summary,
        confirmation=view.confirmation,
        map_html=view.map_html,
        map_script=view.map_script,
        panels_html=build_panels_html(view.panels),
        recent_html=build_recent_searches_html(view.recent, now),
        community_html=build_community_html(view.community),
        background=view.background,
        updated=now.strftime("%Y-%m-%d %H:%M UTC"),
    )


@task(name="write-dashboard", cache_policy=NO_CACHE)
def write_dashboard(view: DashboardView, site_dir: Path | None = None) -> Path:
    """Write the dashboard page to the site directory."""
    site_dir = site_dir or get_settings().site_dir
    site_dir.mkdir(parents=True, exist_ok=True)
    output_path = site_dir / "index.html"
    with output_path.open("w", encoding="utf-8") as f:
        f.write(build_html(view))
    return output_path


@flow(name="explore", log_prints=True)
async def explore(
    query: str | None = None,
    lat: float | None = None,
    lon: float | None = None,
    site_dir: Path | None = None,
) -> dict[str, Any]:
    """
    Explore a place and build the dashboard.

    Pass either ``query`` (ZIP code or free text) or ``lat``/``lon``
    (device location).

    Raises:
        LocationNotFound: The place could not be geocoded.
    """
    target: str | Coordinate
    if lat is not None and lon is not None:
        target = Coordinate(latitude=lat, longitude=lon)
        print(f"Exploring around ({lat}, {lon})...")
    elif query:
        target = query
        print(f"Exploring {query}...")
    else:
        msg = "Provide a query or both lat and lon"
        raise ValueError(msg)

    view = await resolve_location(target)
    print(view.summary)
    for result in view.panels.values():
        print(f"  {result.category}: {result.message}")

    print("Writing dashboard...")
    output_path = write_dashboard(view, site_dir)

    print(f"Dashboard built: {output_path}")
    return {
        "label": view.label,
        "found": [str(c) for c in view.found],
        "output": str(output_path),
    }


if __name__ == "__main__":
    import asyncio

    result = asyncio.run(explore(" ".join(sys.argv[1:]) or "Santa Fe, NM"))
    print(f"Flow complete: {result}")
