"""Static reference data.

Data that doesn't change with API calls: distance helpers and radii,
geologic era buckets, curated heritage sites, the curated community feed,
the local autocomplete city list and regional emoji.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/dataclasses
2. Re-export from this ``__init__.py``
"""

from nature_near.reference.geography import EARTH_RADIUS_KM as EARTH_RADIUS_KM
from nature_near.reference.geography import BoundingBox as BoundingBox
from nature_near.reference.geography import haversine_km as haversine_km
from nature_near.reference.geology import geologic_context as geologic_context
from nature_near.reference.places import location_emoji as location_emoji
