"""Geocoding data sources.

Public API:
  - zippopotam: lookup_zip (US ZIP → coordinate + "City, ST ZIP")
  - nominatim: search (rate-limited free text), reverse (best-effort label)
  - photon: suggest (autocomplete with a local fallback list)
  - models: Place
"""

from nature_near.datasources.geocoding.models import UNKNOWN_LOCATION, YOUR_LOCATION, Place
from nature_near.datasources.geocoding.nominatim import reverse, search
from nature_near.datasources.geocoding.photon import suggest
from nature_near.datasources.geocoding.zippopotam import lookup_zip

__all__ = [
    "UNKNOWN_LOCATION",
    "YOUR_LOCATION",
    "Place",
    "lookup_zip",
    "reverse",
    "search",
    "suggest",
]
