# src/projcrs/spatial/proj.py
from __future__ import annotations

from functools import lru_cache
from typing import Any, Iterable, Optional, Tuple

import numpy as np
from pyproj import CRS, Transformer

GEOGRAPHIC_CRS = "EPSG:4326"


def is_transform_like(obj: Any) -> bool:
    """True for objects that already provide forward() and inverse()."""
    return callable(getattr(obj, "forward", None)) and callable(getattr(obj, "inverse", None))


@lru_cache(maxsize=64)
def _xfm_pair(definition: str) -> Tuple[Transformer, Transformer]:
    # always_xy=True => input/output order is (lon,lat) and (x,y)
    # pyproj raises CRSError for definitions it cannot parse
    target = CRS.from_user_input(definition)
    fwd = Transformer.from_crs(GEOGRAPHIC_CRS, target, always_xy=True)
    inv = Transformer.from_crs(target, GEOGRAPHIC_CRS, always_xy=True)
    return fwd, inv


class Proj4Transform:
    """
    Forward/inverse pair for one projection definition, backed by pyproj.

    forward(lng, lat) -> (x, y); inverse(x, y) -> (lng, lat).
    Points PROJ cannot map come back as inf.
    """

    def __init__(self, definition: str, srs_code: Optional[str] = None) -> None:
        self.definition = definition
        self.srs_code = srs_code
        self._fwd, self._inv = _xfm_pair(definition)

    def forward(self, lng: float, lat: float) -> Tuple[float, float]:
        x, y = self._fwd.transform(float(lng), float(lat))
        return float(x), float(y)

    def inverse(self, x: float, y: float) -> Tuple[float, float]:
        lng, lat = self._inv.transform(float(x), float(y))
        return float(lng), float(lat)

    def forward_many(self, lngs: Iterable[float], lats: Iterable[float]) -> Tuple[np.ndarray, np.ndarray]:
        xs, ys = self._fwd.transform(
            np.asarray(list(lngs), dtype="float64"),
            np.asarray(list(lats), dtype="float64"),
        )
        return np.asarray(xs, dtype="float64"), np.asarray(ys, dtype="float64")

    def inverse_many(self, xs: Iterable[float], ys: Iterable[float]) -> Tuple[np.ndarray, np.ndarray]:
        lngs, lats = self._inv.transform(
            np.asarray(list(xs), dtype="float64"),
            np.asarray(list(ys), dtype="float64"),
        )
        return np.asarray(lngs, dtype="float64"), np.asarray(lats, dtype="float64")

    def __repr__(self) -> str:
        return f"Proj4Transform({self.srs_code or self.definition!r})"
