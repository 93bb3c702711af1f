"""Recent searches and community feed fragments."""

from __future__ import annotations

from datetime import datetime

from nature_near.history import format_time_ago
from nature_near.renderers import render_template
from nature_near.schemas import CuratedLocation, SearchRecord

EMPTY_HISTORY = "No recent searches yet. Start exploring!"


def build_recent_searches_html(records: list[SearchRecord], now: datetime | None = None) -> str:
    """List of the user's recent searches, newest first."""
    rows = [
        {"name": r.display_name, "ago": format_time_ago(r.timestamp, now)} for r in records
    ]
    return render_template("recent_searches.html.j2", rows=rows, empty_message=EMPTY_HISTORY)


def build_community_html(entries: list[CuratedLocation]) -> str:
    """What other explorers are finding."""
    rows = [
        {
            "name": e.display_name,
            "activity": e.activity,
            "ago": e.ago,
            "description": e.description,
        }
        for e in entries
    ]
    return render_template("community.html.j2", rows=rows)
