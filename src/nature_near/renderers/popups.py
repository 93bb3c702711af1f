"""Map popup HTML for a single feature.

Provider text is untrusted: every value is escaped before it lands in the
popup markup.
"""

from __future__ import annotations

from markupsafe import Markup

from nature_near.schemas import (
    BirdSighting,
    Feature,
    Fossil,
    HeritageSite,
    InsectObservation,
    Park,
    Quake,
)

DESCRIPTION_PREVIEW = 100


def _preview(text: str, limit: int = DESCRIPTION_PREVIEW) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def popup_html(feature: Feature) -> str:
    """Build the popup shown when a feature's pin is clicked."""
    if isinstance(feature, Quake):
        when = feature.time.strftime("%Y-%m-%d %H:%M UTC") if feature.time else ""
        html = Markup("<strong>🌋 {}</strong><br/>{}<br/><small>{}</small>").format(
            feature.title, feature.place, when
        )
    elif isinstance(feature, BirdSighting):
        html = Markup("<strong>🐦 {}</strong><br/><small>{}</small>").format(
            feature.common_name, feature.subtitle
        )
    elif isinstance(feature, InsectObservation):
        html = Markup("<strong>🦋 {}</strong>").format(feature.common_name)
        if feature.scientific_name and feature.scientific_name != feature.common_name:
            html += Markup("<br/><em>{}</em>").format(feature.scientific_name)
        html += Markup("<br/><small>{}</small>").format(feature.subtitle)
    elif isinstance(feature, Park):
        html = Markup("<strong>🏞️ {}</strong><br/><em>{}</em>").format(
            feature.name, feature.subtitle
        )
        if feature.description:
            html += Markup("<br/><small>{}</small>").format(_preview(feature.description))
        if feature.url:
            html += Markup('<br/><a href="{}" target="_blank" rel="noopener">Visit park page</a>').format(
                feature.url
            )
    elif isinstance(feature, Fossil):
        html = Markup("<strong>🦴 {}</strong><br/>").format(feature.taxon)
        if feature.classification:
            html += Markup("<em>{}</em><br/>").format(feature.classification)
        html += Markup("<small>Age: {}</small>").format(feature.age)
    elif isinstance(feature, HeritageSite):
        html = Markup("<strong>🏺 {}</strong><br/>{}").format(feature.name, feature.description)
    else:
        html = Markup("<strong>{}</strong><br/>{}").format(feature.title, feature.subtitle)
    return str(html)
