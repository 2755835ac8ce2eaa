# src/projcrs/spatial/projection.py
from __future__ import annotations

import math
from typing import Any, Iterable, Optional, Tuple

import numpy as np

from projcrs.geometry import Bounds, LatLng, LatLngLike, Point, PointLike
from projcrs.spatial.proj import Proj4Transform, is_transform_like
from projcrs.spatial.registry import DefinitionRegistry, shared_registry


def _or_zero(v: Any) -> float:
    # inverse results with no earth location (inf/NaN/None) collapse to 0
    if v is None:
        return 0.0
    v = float(v)
    return v if math.isfinite(v) else 0.0


class Projection:
    """
    Adapter from a projection definition (or a ready transform object) to
    project/unproject on LatLng/Point.

    Projection(code, definition=None, bounds=None, registry=None)
      - definition given: registered under `code` first (last write wins)
      - otherwise `code` (or its URN-shortened key) must already be registered

    Projection(transform, bounds)
      - `transform` exposes forward(lng, lat) and inverse(x, y); the second
        argument is taken as bounds.
    """

    def __init__(
        self,
        source: Any,
        definition: Any = None,
        bounds: Any = None,
        *,
        registry: Optional[DefinitionRegistry] = None,
    ) -> None:
        if is_transform_like(source):
            self._proj = source
            raw_bounds = definition if definition is not None else bounds
            self.code: Optional[str] = getattr(source, "srs_code", None) or getattr(source, "code", None)
        else:
            self._proj = self._proj_from_code_def(str(source), definition, registry)
            raw_bounds = bounds
            self.code = str(source)

        self.bounds: Optional[Bounds] = Bounds.coerce(raw_bounds) if raw_bounds is not None else None

    @staticmethod
    def _proj_from_code_def(
        code: str,
        definition: Optional[str],
        registry: Optional[DefinitionRegistry],
    ) -> Proj4Transform:
        reg = registry if registry is not None else shared_registry()
        if definition:
            reg.define(code, definition)
        key, text = reg.resolve(code)
        return Proj4Transform(text, srs_code=key)

    @property
    def transform(self) -> Any:
        """The underlying forward/inverse object."""
        return self._proj

    def project(self, latlng: LatLngLike) -> Point:
        ll = LatLng.coerce(latlng)
        x, y = self._proj.forward(ll.lng, ll.lat)
        return Point(x, y)

    def unproject(self, point: PointLike, unbounded: bool = False) -> LatLng:
        p = Point.coerce(point)
        lng, lat = self._proj.inverse(p.x, p.y)
        return LatLng(_or_zero(lat), _or_zero(lng), unbounded)

    def project_many(self, lats: Iterable[float], lngs: Iterable[float]) -> Tuple[np.ndarray, np.ndarray]:
        lats = np.asarray(list(lats), dtype="float64")
        lngs = np.asarray(list(lngs), dtype="float64")
        fwd_many = getattr(self._proj, "forward_many", None)
        if fwd_many is not None:
            return fwd_many(lngs, lats)

        out = [self._proj.forward(lng, lat) for lat, lng in zip(lats, lngs)]
        xs = np.array([o[0] for o in out], dtype="float64")
        ys = np.array([o[1] for o in out], dtype="float64")
        return xs, ys

    def unproject_many(self, xs: Iterable[float], ys: Iterable[float]) -> Tuple[np.ndarray, np.ndarray]:
        """Returns (lats, lngs); non-finite values replaced by 0 as in unproject()."""
        xs = np.asarray(list(xs), dtype="float64")
        ys = np.asarray(list(ys), dtype="float64")
        inv_many = getattr(self._proj, "inverse_many", None)
        if inv_many is not None:
            lngs, lats = inv_many(xs, ys)
        else:
            out = [self._proj.inverse(x, y) for x, y in zip(xs, ys)]
            lngs = np.array([np.nan if o[0] is None else o[0] for o in out], dtype="float64")
            lats = np.array([np.nan if o[1] is None else o[1] for o in out], dtype="float64")

        lats = np.where(np.isfinite(lats), lats, 0.0)
        lngs = np.where(np.isfinite(lngs), lngs, 0.0)
        return lats, lngs

    def __repr__(self) -> str:
        return f"Projection(code={self.code!r}, bounds={self.bounds!r})"
