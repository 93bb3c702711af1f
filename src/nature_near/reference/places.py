"""Local place data: autocomplete fallback cities and regional emoji."""

from __future__ import annotations

# Offline autocomplete fallback: (display name, lat, lon)
COMMON_CITIES: list[tuple[str, float, float]] = [
    ("Santa Fe, NM", 35.687, -105.9378),
    ("Santa Barbara, CA", 34.4208, -119.6982),
    ("Santa Monica, CA", 34.0195, -118.4912),
    ("San Francisco, CA", 37.7749, -122.4194),
    ("San Diego, CA", 32.7157, -117.1611),
    ("Los Angeles, CA", 34.0522, -118.2437),
    ("Seattle, WA", 47.6062, -122.3321),
    ("Portland, OR", 45.5152, -122.6784),
    ("Denver, CO", 39.7392, -104.9903),
    ("Austin, TX", 30.2672, -97.7431),
    ("Phoenix, AZ", 33.4484, -112.074),
    ("Las Vegas, NV", 36.1699, -115.1398),
    ("Salt Lake City, UT", 40.7608, -111.891),
    ("Albuquerque, NM", 35.0844, -106.6504),
    ("Tucson, AZ", 32.2226, -110.9747),
]

# Substring rules checked in order against the lower-cased place label.
# States first, then cities.
REGION_EMOJI: list[tuple[tuple[str, ...], str]] = [
    (("alaska", "ak"), "🐻"),
    (("hawaii", "hi"), "🌺"),
    (("florida", "fl"), "🐊"),
    (("california", "ca"), "🌴"),
    (("texas", "tx"), "🤠"),
    (("colorado", "co"), "🏔️"),
    (("montana", "mt"), "🦬"),
    (("wyoming", "wy"), "🦬"),
    (("maine", "me"), "🦞"),
    (("arizona", "az"), "🌵"),
    (("new mexico", "nm"), "🌵"),
    (("nevada", "nv"), "🏜️"),
    (("utah", "ut"), "🏜️"),
    (("minnesota", "mn"), "🦆"),
    (("wisconsin", "wi"), "🧀"),
    (("louisiana", "la"), "🐊"),
    (("washington", "wa"), "🌲"),
    (("oregon", "or"), "🌲"),
    (("idaho", "id"), "🥔"),
    (("michigan", "mi"), "🏞️"),
    (("new york", "ny"), "🍎"),
    (("vermont", "vt"), "🍁"),
    (("new hampshire", "nh"), "🍁"),
    (("seattle",), "☕"),
    (("portland",), "🌹"),
    (("denver",), "🏔️"),
    (("san francisco", "sf"), "🌉"),
    (("los angeles", "la"), "🌴"),
    (("miami",), "🏖️"),
    (("chicago",), "🌊"),
    (("boston",), "🦞"),
    (("new orleans",), "🎷"),
    (("las vegas",), "🎰"),
    (("nashville",), "🎸"),
    (("austin",), "🎵"),
    (("phoenix",), "🌵"),
    (("salt lake",), "🏔️"),
]
DEFAULT_EMOJI = "🌲"


def location_emoji(label: str) -> str:
    """Pick a regional emoji for a place label."""
    loc = label.lower()
    for needles, emoji in REGION_EMOJI:
        if any(n in loc for n in needles):
            return emoji
    return DEFAULT_EMOJI
