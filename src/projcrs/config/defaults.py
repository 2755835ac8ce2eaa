# src/projcrs/config/defaults.py
from __future__ import annotations

from .schema import CRSOptions
from projcrs.spatial.transformation import DEFAULT_TRANSFORMATION


def default_options() -> CRSOptions:
    return CRSOptions(transformation=DEFAULT_TRANSFORMATION)
