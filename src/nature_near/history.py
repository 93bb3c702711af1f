"""Recent searches and the simulated community feed.

Personal history: most recent first, one entry per (city, state, country),
at most 10. Every search is also forwarded, tagged with this session's id,
to a community list capped at 20 across all sessions.

The community list is written but never read back for display:
``render_community_feed`` always returns the curated editorial entries.
"""

from __future__ import annotations

import json
import logging
import random
import string
import time
from datetime import UTC, datetime

from pydantic import ValidationError

from nature_near.errors import PersistenceFailure
from nature_near.reference.community import CURATED_COMMUNITY
from nature_near.schemas import CommunityRecord, CuratedLocation, SearchRecord
from nature_near.storage import Storage

logger = logging.getLogger(__name__)

PERSONAL_KEY = "naturenear-recent-searches"
COMMUNITY_KEY = "community-searches"
SESSION_KEY = "nature-session-id"

MAX_PERSONAL = 10
MAX_COMMUNITY = 20

_BASE36 = string.digits + string.ascii_lowercase


def format_display_name(city: str, state: str | None, country: str | None) -> str:
    """'Santa Fe, NM' for US places, 'City, State, Country' elsewhere."""
    if state and country == "United States":
        return f"{city}, {state}"
    if state and country:
        return f"{city}, {state}, {country}"
    if country:
        return f"{city}, {country}"
    return city


def format_time_ago(timestamp: str, now: datetime | None = None) -> str:
    """'Just now', '3h ago' or '2d ago'."""
    now = now or datetime.now(UTC)
    then = datetime.fromisoformat(timestamp)
    if then.tzinfo is None:
        then = then.replace(tzinfo=UTC)
    hours = (now - then).total_seconds() / 3600
    if hours < 1:
        return "Just now"
    if hours < 24:
        return f"{int(hours)}h ago"
    return f"{int(hours // 24)}d ago"


def new_session_id() -> str:
    """'user_' + 9 base-36 characters + '_' + unix millis."""
    token = "".join(random.choices(_BASE36, k=9))
    return f"user_{token}_{int(time.time() * 1000)}"


def _load(storage: Storage, key: str, model: type[SearchRecord]) -> list[SearchRecord]:
    raw = storage.get(key)
    if not raw:
        return []
    try:
        return [model.model_validate(item) for item in json.loads(raw)]
    except (ValueError, TypeError, ValidationError) as exc:
        logger.warning("Ignoring unreadable %s: %s", key, exc)
        return []


def _save(storage: Storage, key: str, records: list[SearchRecord]) -> bool:
    payload = json.dumps([r.model_dump() for r in records])
    try:
        storage.set(key, payload)
    except PersistenceFailure as exc:
        logger.error("Error saving %s: %s", key, exc)
        return False
    return True


class CommunityStore:
    """Capped, multi-session list of forwarded searches."""

    def __init__(self, storage: Storage, session_storage: Storage) -> None:
        self.storage = storage
        self.session_storage = session_storage

    def session_id(self) -> str:
        """This session's id, generated on first use and then reused."""
        sid = self.session_storage.get(SESSION_KEY)
        if not sid:
            sid = new_session_id()
            self.session_storage.set(SESSION_KEY, sid)
        return sid

    def records(self) -> list[CommunityRecord]:
        return _load(self.storage, COMMUNITY_KEY, CommunityRecord)  # type: ignore[return-value]

    def add(self, record: SearchRecord) -> CommunityRecord:
        entry = CommunityRecord(**record.model_dump(), session_id=self.session_id())
        updated = [entry, *self.records()][:MAX_COMMUNITY]
        if _save(self.storage, COMMUNITY_KEY, updated):
            logger.info("Community now has %d searches", len(updated))
        return entry


class SearchHistoryStore:
    """The user's own recent searches."""

    def __init__(self, storage: Storage, community: CommunityStore) -> None:
        self.storage = storage
        self.community = community

    def searches(self) -> list[SearchRecord]:
        return _load(self.storage, PERSONAL_KEY, SearchRecord)

    def add_search(self, city: str | None, state: str | None, country: str) -> SearchRecord | None:
        """
        Record a search, moving an existing entry for the same place to the front.

        Returns the new record, or None when city or state is missing.
        """
        if not city or not state:
            logger.info("Skipping recent search - missing city or state (%r, %r)", city, state)
            return None

        record = SearchRecord(
            city=city,
            state=state,
            country=country,
            timestamp=datetime.now(UTC).isoformat(),
            display_name=format_display_name(city, state, country),
        )
        searches = [s for s in self.searches() if s.key != record.key]
        searches = [record, *searches][:MAX_PERSONAL]
        if _save(self.storage, PERSONAL_KEY, searches):
            logger.info("Added to recent searches: %s (%d total)", record.display_name, len(searches))

        self.community.add(record)
        return record

    def clear(self) -> None:
        """Erase personal history. The community list is left alone."""
        try:
            self.storage.remove(PERSONAL_KEY)
        except PersistenceFailure as exc:
            logger.error("Error clearing recent searches: %s", exc)
            return
        logger.info("Cleared recent searches")


def render_community_feed() -> list[CuratedLocation]:
    """Curated "other explorers" entries; stored community data is not used."""
    return list(CURATED_COMMUNITY)
