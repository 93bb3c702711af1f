"""
Which categories are currently showing, and the sentence describing them.

One store lives for the whole process. It is reset at the start of every
resolution so counts from a previous place never carry over, and the summary
is recomputed after every single update because categories finish in any
order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from nature_near.schemas import Category, CategoryStatus

logger = logging.getLogger(__name__)

# Summary order, display name and icon. Bedrock is not part of the summary.
TRACKED_CATEGORIES: dict[Category, tuple[str, str]] = {
    Category.QUAKES: ("earthquakes", "🌋"),
    Category.BIRDS: ("birds", "🐦"),
    Category.INSECTS: ("insects", "🦋"),
    Category.PARKS: ("parks", "🏞️"),
    Category.FOSSILS: ("fossils", "🦴"),
    Category.HERITAGE: ("archaeology", "🏺"),
    Category.WEATHER: ("weather", "🌦️"),
}

EMPTY_PROMPT = "🔍 Select your location to reveal nearby events and features on this interactive map."


def join_phrases(items: list[str]) -> str:
    """'a' / 'a, and b' / 'a, b, and c'."""
    if len(items) <= 1:
        return "".join(items)
    return ", ".join(items[:-1]) + ", and " + items[-1]


class FeatureStateStore:
    """Found/count per tracked category plus the derived summary."""

    def __init__(self, on_change: Callable[[str], None] | None = None) -> None:
        self.on_change = on_change
        self.label = ""
        self.statuses: dict[Category, CategoryStatus] = {}
        self.summary = EMPTY_PROMPT
        self.reset()

    def reset(self, label: str = "") -> None:
        """Zero every status for a new resolution."""
        self.label = label
        self.statuses = {
            category: CategoryStatus(icon=icon)
            for category, (_name, icon) in TRACKED_CATEGORIES.items()
        }
        self._refresh()

    def update(self, category: Category, status: CategoryStatus) -> None:
        """Record one category's result and re-render the summary."""
        if category not in TRACKED_CATEGORIES:
            msg = f"{category} is not tracked in the summary"
            raise ValueError(msg)
        self.statuses[category] = status
        self._refresh()

    def found(self) -> list[Category]:
        return [c for c, s in self.statuses.items() if s.found]

    def render_summary(self) -> str:
        """One human sentence listing what the map is showing."""
        phrases = []
        for category, (name, _icon) in TRACKED_CATEGORIES.items():
            status = self.statuses[category]
            if not status.found:
                continue
            count = f"{status.count} " if status.count > 0 else ""
            phrases.append(f"{status.icon} {count}{name}")

        if not phrases:
            return EMPTY_PROMPT
        place = f" around {self.label}" if self.label else ""
        return f"🗺️ Your map is now showing: {join_phrases(phrases)}{place}!"

    def _refresh(self) -> None:
        self.summary = self.render_summary()
        logger.debug("Summary: %s", self.summary)
        if self.on_change is not None:
            self.on_change(self.summary)
