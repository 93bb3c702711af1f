"""
Ordered provider fallback.

Each provider call is turned into a tagged ``Attempt`` (found / empty /
failed) exactly once, at the boundary; the chain then walks attempts left to
right and stops at the first one that found something.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from nature_near.errors import ProviderEmpty, ProviderError
from nature_near.schemas import Coordinate, Feature

logger = logging.getLogger(__name__)


class AttemptStatus(StrEnum):
    FOUND = "found"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(frozen=True)
class ProviderStep:
    """One provider in a category's chain.

    ``fetch`` may be a plain function (run in a worker thread) or a coroutine
    function. ``parse`` normalizes the raw response relative to the query
    point.
    """

    name: str
    fetch: Callable[[Coordinate], Any]
    parse: Callable[[Any, Coordinate], Sequence[Feature]]
    source_label: str = ""


@dataclass
class Attempt:
    provider: str
    status: AttemptStatus
    features: list[Feature] = field(default_factory=list)
    error: str | None = None
    source_label: str = ""


@dataclass
class ChainOutcome:
    attempts: list[Attempt] = field(default_factory=list)

    @property
    def winner(self) -> Attempt | None:
        """The attempt that found records, if any."""
        if self.attempts and self.attempts[-1].status is AttemptStatus.FOUND:
            return self.attempts[-1]
        return None

    @property
    def all_failed(self) -> bool:
        """True when every provider errored (as opposed to answering empty)."""
        return bool(self.attempts) and all(
            a.status is AttemptStatus.FAILED for a in self.attempts
        )


async def attempt(step: ProviderStep, coord: Coordinate) -> Attempt:
    """Call one provider and tag the result."""
    try:
        if inspect.iscoroutinefunction(step.fetch):
            raw = await step.fetch(coord)
        else:
            raw = await asyncio.to_thread(step.fetch, coord)
        features = list(step.parse(raw, coord))
    except ProviderEmpty:
        return Attempt(step.name, AttemptStatus.EMPTY, source_label=step.source_label)
    except ProviderError as exc:
        return Attempt(step.name, AttemptStatus.FAILED, error=str(exc), source_label=step.source_label)
    except (AttributeError, IndexError, KeyError, TypeError, ValueError) as exc:
        # Parser tripped over an unexpected shape (includes pydantic ValidationError)
        return Attempt(
            step.name,
            AttemptStatus.FAILED,
            error=f"{step.name}: malformed response ({exc})",
            source_label=step.source_label,
        )

    if not features:
        return Attempt(step.name, AttemptStatus.EMPTY, source_label=step.source_label)
    return Attempt(step.name, AttemptStatus.FOUND, features, source_label=step.source_label)


async def run_chain(steps: Sequence[ProviderStep], coord: Coordinate) -> ChainOutcome:
    """Try ``steps`` in order until one finds at least one record."""
    outcome = ChainOutcome()
    for step in steps:
        result = await attempt(step, coord)
        outcome.attempts.append(result)
        if result.status is AttemptStatus.FOUND:
            logger.debug("%s: %d records", step.name, len(result.features))
            break
        logger.info("%s %s%s", step.name, result.status, f" ({result.error})" if result.error else "")
    return outcome
