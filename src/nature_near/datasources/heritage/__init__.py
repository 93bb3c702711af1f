"""Historical and archaeological sites near a point.

Three independent sources, tried in this order by the heritage resolver:

  - wikipedia: nearby articles filtered by heritage keywords
  - overpass: OpenStreetMap historic/museum/cemetery features
  - curated: static list of notable sites within 300 km
"""

from nature_near.datasources.heritage.curated import fetch_curated_sites, parse_curated_sites
from nature_near.datasources.heritage.overpass import (
    fetch_osm_heritage,
    historic_description,
    parse_osm_heritage,
)
from nature_near.datasources.heritage.wikipedia import (
    HERITAGE_KEYWORDS,
    fetch_nearby_pages,
    parse_nearby_pages,
)

__all__ = [
    "HERITAGE_KEYWORDS",
    "fetch_curated_sites",
    "fetch_nearby_pages",
    "fetch_osm_heritage",
    "historic_description",
    "parse_curated_sites",
    "parse_nearby_pages",
    "parse_osm_heritage",
]
