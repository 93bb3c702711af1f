"""Curated archaeological and historic sites.

Last-resort heritage source when neither Wikipedia nor OpenStreetMap has
anything near the query point.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CuratedSite:
    name: str
    lat: float
    lng: float
    description: str


CURATED_SITES: list[CuratedSite] = [
    # Southwest USA
    CuratedSite("Chaco Canyon", 36.0607, -107.9609, "Major ancestral Puebloan cultural center (900-1150 CE)"),
    CuratedSite("Mesa Verde", 37.1853, -108.4618, "Cliff dwellings of ancestral Puebloans (600-1300 CE)"),
    CuratedSite("Canyon de Chelly", 36.1531, -109.3368, "Ancient Puebloan ruins and rock art"),
    CuratedSite("Bandelier", 35.778, -106.2708, "Ancestral Puebloan dwellings and petroglyphs"),
    # Midwest USA
    CuratedSite("Cahokia Mounds", 38.6551, -90.0634, "Mississippian culture ceremonial center (1050-1200 CE)"),
    CuratedSite("Spiro Mounds", 35.2431, -94.6199, "Mississippian culture archaeological site"),
    CuratedSite("Moundville", 32.9976, -87.6256, "Mississippian period mound complex"),
    # Southeast USA
    CuratedSite("Serpent Mound", 39.0203, -83.4309, "Ancient serpent-shaped earthwork (1000 BCE)"),
    CuratedSite("Poverty Point", 32.635, -91.4084, "Archaic period earthworks (1700-1100 BCE)"),
    # Northeast USA
    CuratedSite("Jamestown", 37.2107, -76.7758, "First permanent English settlement (1607)"),
    CuratedSite("Colonial Williamsburg", 37.2707, -76.7075, "Colonial American living history"),
    # West Coast
    CuratedSite("Cabrillo Monument", 32.6722, -117.242, "Spanish exploration site (1542)"),
    CuratedSite("Mission San Juan Capistrano", 33.5017, -117.6639, "Historic Spanish mission (1776)"),
    # Alaska
    CuratedSite("Sitka National Historical Park", 57.0461, -135.3126, "Tlingit fort and Russian colonial site"),
    # Hawaii
    CuratedSite("Pu'uhonua o Hōnaunau", 19.42, -155.9106, "Hawaiian place of refuge and temple"),
]
