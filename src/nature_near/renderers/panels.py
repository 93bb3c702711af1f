"""Category panels: one card per category with its message and records."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from nature_near.renderers import render_template
from nature_near.resolution.categories import CategoryResult
from nature_near.schemas import Category

PANEL_HEADINGS: dict[Category, str] = {
    Category.WEATHER: "🌦️ Current Weather",
    Category.QUAKES: "🌋 Recent Earthquakes",
    Category.BIRDS: "🐦 Bird Sightings",
    Category.INSECTS: "🦋 Insects & Butterflies",
    Category.PARKS: "🏞️ National Parks",
    Category.FOSSILS: "🦴 Fossils",
    Category.HERITAGE: "🏺 Archaeology & Heritage",
    Category.BEDROCK: "🪨 Bedrock Geology",
}

LOADING_MESSAGE = "Loading..."


def _panel(category: Category, result: CategoryResult | None) -> dict[str, Any]:
    if result is None:
        return {
            "id": str(category),
            "heading": PANEL_HEADINGS[category],
            "message": LOADING_MESSAGE,
            "found": False,
            "items": [],
        }
    return {
        "id": str(category),
        "heading": PANEL_HEADINGS[category],
        "message": result.message,
        "found": result.status.found,
        "items": [{"title": f.title, "subtitle": f.subtitle} for f in result.features],
    }


def build_panels_html(panels: Mapping[Category, CategoryResult]) -> str:
    """Render every category's panel, in display order.

    Categories that have not completed yet show a loading message.
    """
    cards = [_panel(category, panels.get(category)) for category in PANEL_HEADINGS]
    return render_template("panels.html.j2", panels=cards)
