# src/projcrs/__init__.py
from __future__ import annotations

"""
projcrs

Coordinate reference systems over arbitrary PROJ definitions: projection
resolution, zoom <-> scale tables, and render-space transformation.
"""

from .config.schema import CRSOptions
from .crs import ProjCRS
from .errors import DefinitionNotFound
from .geometry import Bounds, LatLng, Point
from .spatial.projection import Projection
from .spatial.registry import DefinitionRegistry, default_registry, shared_registry
from .spatial.scales import ScaleTable
from .spatial.transformation import Transformation

__all__ = [
    "CRSOptions",
    "ProjCRS",
    "DefinitionNotFound",
    "Bounds",
    "LatLng",
    "Point",
    "Projection",
    "DefinitionRegistry",
    "default_registry",
    "shared_registry",
    "ScaleTable",
    "Transformation",
]
