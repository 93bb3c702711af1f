"""
Shared HTTP client with automatic retry.

Provides a pre-configured ``requests.Session`` that retries on transient
gateway errors (502/503/504) with a short backoff. All datasource modules
should use this instead of bare ``requests.get``.

Usage::

    from nature_near.services.http import session

    resp = session.get("https://api.example.com/v1/data")
    resp.raise_for_status()
"""

from __future__ import annotations

from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from nature_near.config import get_settings
from nature_near.errors import MalformedResponse, ProviderUnavailable

#: Default retry strategy: gateway hiccups only, no rate-limit backoff.
DEFAULT_RETRY = Retry(
    total=2,
    backoff_factor=0.5,  # 0s, 1s between retries
    status_forcelist=[502, 503, 504],
    allowed_methods=["GET", "HEAD", "OPTIONS"],
    raise_on_status=False,  # let resp.raise_for_status() handle it
)

DEFAULT_TIMEOUT = 30  # seconds


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str | None = None,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
        user_agent: ``User-Agent`` header (defaults to the configured one).
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = user_agent or get_settings().user_agent

    # Inject a default timeout so callers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


def get_json(
    provider: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> Any:
    """
    GET ``url`` and decode the JSON body.

    Raises:
        ProviderUnavailable: Network failure or non-2xx status.
        MalformedResponse: Body is not valid JSON.
    """
    try:
        resp = session.get(url, params=params or {}, headers=headers)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise ProviderUnavailable(provider, str(exc)) from exc
    try:
        return resp.json()
    except ValueError as exc:
        raise MalformedResponse(provider, "response body is not JSON") from exc


#: Module-level session. Import and use directly.
session: requests.Session = create_session(timeout=get_settings().http_timeout)
