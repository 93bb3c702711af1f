"""Exception hierarchy.

Provider errors (``ProviderUnavailable``, ``ProviderEmpty``,
``MalformedResponse``) are recovered inside a category's fallback chain and
never reach the caller. ``LocationNotFound`` aborts a resolution and is shown
to the user. ``PersistenceFailure`` is logged and swallowed by the history
stores.
"""

from __future__ import annotations


class NatureNearError(Exception):
    """Base class for all package errors."""


class ProviderError(NatureNearError):
    """A single data provider could not produce usable records."""

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(f"{provider}: {message}")
        self.provider = provider


class ProviderUnavailable(ProviderError):
    """Network failure or non-2xx HTTP status."""


class ProviderEmpty(ProviderError):
    """Valid response carrying zero usable records."""


class MalformedResponse(ProviderError):
    """Response body did not match the provider's expected schema."""


class LocationNotFound(NatureNearError):
    """Geocoding or ZIP lookup yielded no location."""


class PersistenceFailure(NatureNearError):
    """Durable storage rejected a write."""
