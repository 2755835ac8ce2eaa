# src/projcrs/config/__init__.py
from __future__ import annotations

from .defaults import default_options
from .schema import CRSOptions

__all__ = ["CRSOptions", "default_options"]
