# src/projcrs/spatial/__init__.py
from __future__ import annotations

from .geodesy import EARTH_RADIUS_M, distance, haversine_m, haversine_m_vec
from .proj import Proj4Transform, is_transform_like
from .projection import Projection
from .registry import DefinitionRegistry, default_registry, shared_registry, shorten_urn
from .scales import ScaleTable
from .transformation import DEFAULT_TRANSFORMATION, Transformation

__all__ = [
    "EARTH_RADIUS_M",
    "distance",
    "haversine_m",
    "haversine_m_vec",
    "Proj4Transform",
    "is_transform_like",
    "Projection",
    "DefinitionRegistry",
    "default_registry",
    "shared_registry",
    "shorten_urn",
    "ScaleTable",
    "DEFAULT_TRANSFORMATION",
    "Transformation",
]
