"""Sample dataset of Mexican cities and approximate road distances (km).

Used for demonstrations and tests. Guadalajara has several neighbors
within 100 km so range queries around it return something useful.
"""

from __future__ import annotations

from typing import Any, Dict

from ..domain.models import EdgeRecord, GraphDataset

_CITIES = (
    "Guadalajara",
    "Zapopan",
    "Tlaquepaque",
    "Tonalá",
    "Chapala",
    "Tepatitlán",
    "Puerto Vallarta",
    "Aguascalientes",
    "León",
    "Morelia",
    "Querétaro",
    "Ciudad de México",
    "Monterrey",
)

_EDGES = (
    ("Guadalajara", "Zapopan", 12),
    ("Guadalajara", "Tlaquepaque", 10),
    ("Guadalajara", "Tonalá", 17),
    ("Guadalajara", "Chapala", 48),
    ("Guadalajara", "Tepatitlán", 78),
    ("Guadalajara", "Puerto Vallarta", 330),
    ("Guadalajara", "Aguascalientes", 220),
    ("Guadalajara", "León", 220),
    ("Guadalajara", "Morelia", 280),
    ("Zapopan", "Tlaquepaque", 15),
    ("Tlaquepaque", "Tonalá", 8),
    ("Tonalá", "Tepatitlán", 66),
    ("Tepatitlán", "León", 150),
    ("Aguascalientes", "León", 130),
    ("León", "Querétaro", 190),
    ("Morelia", "Ciudad de México", 300),
    ("Querétaro", "Ciudad de México", 215),
    ("Aguascalientes", "Monterrey", 570),
    ("Querétaro", "Monterrey", 690),
)

SAMPLE_DATA = GraphDataset(
    cities=_CITIES,
    edges=tuple(EdgeRecord(a, b, d) for a, b, d in _EDGES),
)


def sample_data() -> Dict[str, Any]:
    """Return SAMPLE_DATA in its plain ``{"cities", "edges"}`` form."""
    return SAMPLE_DATA.as_dict()
