"""Pure rendering functions: resolved state -> HTML strings.

All renderers follow the same pattern:
  - Input: session results, history records or curated entries
  - Output: str (HTML fragment, not a full page)
  - No I/O, no Prefect decorators

``leaflet.LeafletMap`` is the exception: it is also the stateful render
collaborator the resolution pipeline draws pins on.

Used by flows/explore.py, which assembles the dashboard page.

Public API:
  - popups: popup_html
  - panels: build_panels_html
  - searches: build_recent_searches_html, build_community_html
  - leaflet: LeafletMap
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
