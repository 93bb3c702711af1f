"""Multi-provider resolution pipeline.

    location.py    LocationResolver: query → geocode → new session → fan-out
    categories.py  Category table (ordered provider chains) + CategoryResolver
    chain.py       Tagged attempts and left-to-right fallback
    state.py       FeatureStateStore and the summary sentence
    session.py     MapSession (one per resolution) and the generation counter
"""

from nature_near.resolution.categories import (
    CATEGORY_TABLE,
    CategoryResolver,
    CategoryResult,
    CategorySpec,
    default_category_table,
)
from nature_near.resolution.chain import Attempt, AttemptStatus, ChainOutcome, ProviderStep, run_chain
from nature_near.resolution.location import LocationResolver
from nature_near.resolution.session import GenerationCounter, MapRenderer, MapSession
from nature_near.resolution.state import FeatureStateStore

__all__ = [
    "CATEGORY_TABLE",
    "Attempt",
    "AttemptStatus",
    "CategoryResolver",
    "CategoryResult",
    "CategorySpec",
    "ChainOutcome",
    "FeatureStateStore",
    "GenerationCounter",
    "LocationResolver",
    "MapRenderer",
    "MapSession",
    "ProviderStep",
    "default_category_table",
    "run_chain",
]
