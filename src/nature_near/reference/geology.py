"""Geologic era captions for bedrock ages (millions of years)."""

from __future__ import annotations

UNKNOWN_PERIOD = "Unknown time period"

# Ordered, non-overlapping: first threshold the age exceeds wins.
ERA_BUCKETS: list[tuple[float, str]] = [
    (2500, "from the Archean — Earth was still cooling"),
    (541, "from the Precambrian — life was microbial"),
    (250, "before the dinosaurs"),
    (66, "during the Age of Dinosaurs"),
    (2.6, "from the Age of Mammals"),
]
YOUNGEST_ERA = "from the Ice Age and beyond"


def parse_age(age: object) -> float | None:
    """Coerce a provider age value to Ma. Missing, zero or non-numeric → None."""
    if age is None or isinstance(age, bool):
        return None
    try:
        value = float(age)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if value != value or value == 0:  # NaN or zero
        return None
    return value


def geologic_context(age: object) -> str:
    """Caption an age in Ma, e.g. 700 → 'from the Precambrian — life was microbial'."""
    value = parse_age(age)
    if value is None:
        return UNKNOWN_PERIOD
    for threshold, caption in ERA_BUCKETS:
        if value > threshold:
            return caption
    return YOUNGEST_ERA
