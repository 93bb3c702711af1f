"""Nature Near Me - what's happening in nature around a place.

Architecture::

    datasources/   External APIs (USGS, eBird, iNaturalist, NPS, PBDB, wttr.in,
                   Macrostrat, heritage sources, geocoders)
    reference/     Static tables (curated sites, geologic eras, regional emoji)
    resolution/    Fallback chains, category table, sessions, summary state
    history.py     Recent searches and the community feed
    storage.py     Durable (file) and session (memory) key/value storage
    renderers/     Pure data → HTML (panels, popups, Leaflet map, history)
    flows/         Prefect orchestration (explore a place, write the dashboard)
    services/      Shared utilities (HTTP client with retry, rate limiting)

Data flow: query → geocoding → session → category chains (concurrently)
→ summary + pins + panels → renderers → site/index.html

Extension points - see each package's docstring for step-by-step guides:
  - New data source:   datasources/__init__.py
  - New UI module:     renderers/__init__.py
"""

__version__ = "0.1.0"

from nature_near.config import Settings
from nature_near.schemas import Category, Coordinate

__all__ = ["Category", "Coordinate", "Settings", "__version__"]
