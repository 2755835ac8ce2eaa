# src/projcrs/config/loader.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from projcrs.crs import ProjCRS
from projcrs.spatial.registry import DefinitionRegistry, default_registry
from projcrs.utils.config import deep_get, deep_merge, load_yaml


def crs_from_dict(
    cfg: Dict[str, Any],
    *,
    registry: Optional[DefinitionRegistry] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> ProjCRS:
    """
    Build a ProjCRS from a config document:

        definitions:            # optional, registered first
          EPSG:2056: "+proj=somerc ..."
        crs:
          code: EPSG:2056
          definition: ...       # optional
          origin: [2420000, 1350000]
          resolutions: [4000, 2000, 1000]
          bounds: [[2420000, 1030000], [2900000, 1350000]]

    `overrides` is deep-merged into `cfg` before anything is read.
    Without `registry`, a fresh default registry is used so loading a file
    never touches the shared one.
    """
    if overrides:
        cfg = deep_merge(cfg, overrides)

    reg = registry if registry is not None else default_registry()
    for code, text in (deep_get(cfg, "definitions", {}) or {}).items():
        reg.define(str(code), str(text))

    section = dict(deep_get(cfg, "crs", {}) or {})
    code = section.pop("code", None)
    if not code:
        raise ValueError("config 'crs' section needs a 'code'")
    definition = section.pop("definition", None)
    return ProjCRS(str(code), definition, section, registry=reg)


def load_crs_config(
    path: Path,
    *,
    registry: Optional[DefinitionRegistry] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> ProjCRS:
    return crs_from_dict(load_yaml(Path(path)), registry=registry, overrides=overrides)
