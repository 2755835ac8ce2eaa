# src/projcrs/crs.py
from __future__ import annotations

import logging
from dataclasses import fields, replace
from typing import Any, Iterable, Mapping, Optional, Union

import numpy as np

from projcrs.config.defaults import default_options
from projcrs.config.schema import CRSOptions
from projcrs.geometry import Bounds, LatLng, LatLngLike, Point, PointLike
from projcrs.spatial import geodesy
from projcrs.spatial.proj import is_transform_like
from projcrs.spatial.projection import Projection
from projcrs.spatial.registry import DefinitionRegistry
from projcrs.spatial.scales import ScaleTable
from projcrs.spatial.transformation import Transformation

log = logging.getLogger(__name__)

OptionsLike = Union[CRSOptions, Mapping[str, Any], None]


def _merge_options(options: CRSOptions) -> CRSOptions:
    base = default_options()
    overrides = {f.name: getattr(options, f.name) for f in fields(options) if getattr(options, f.name) is not None}
    return replace(base, **overrides)


def _scale_table(opts: CRSOptions) -> ScaleTable:
    if opts.scales is not None:
        return ScaleTable(opts.scales)
    if opts.resolutions is not None:
        return ScaleTable.from_resolutions(opts.resolutions)
    return ScaleTable()


class ProjCRS:
    """
    Coordinate reference system over an arbitrary projection.

    ProjCRS(code, definition=None, options=None, registry=None)
    ProjCRS(transform, options)   # transform exposes forward()/inverse()

    project/unproject go through the projection only; the affine
    `transformation` is applied by lat_lng_to_point/point_to_lat_lng.
    """

    EARTH_RADIUS_M = geodesy.EARTH_RADIUS_M

    def __init__(
        self,
        source: Any,
        definition: Any = None,
        options: OptionsLike = None,
        *,
        registry: Optional[DefinitionRegistry] = None,
    ) -> None:
        if is_transform_like(source):
            if options is None and definition is not None:
                options = definition
            opts = CRSOptions.coerce(options)
            self.projection = Projection(source, opts.bounds)
            self.code: Optional[str] = getattr(source, "srs_code", None) or getattr(source, "code", None)
        else:
            opts = CRSOptions.coerce(options)
            self.projection = Projection(source, definition, opts.bounds, registry=registry)
            self.code = str(source)

        self.options = _merge_options(opts)

        if self.options.origin is not None:
            self.transformation = Transformation.from_origin(self.options.origin)
        else:
            self.transformation = self.options.transformation

        self.scales = _scale_table(self.options)
        self.infinite = self.options.bounds is None

        log.debug(
            "ProjCRS %s: transformation=%s zooms=%d infinite=%s",
            self.code,
            self.transformation.as_tuple(),
            len(self.scales),
            self.infinite,
        )

    @property
    def bounds(self) -> Optional[Bounds]:
        return self.projection.bounds

    # -------------------------------------------------------------------------
    # projection
    # -------------------------------------------------------------------------

    def project(self, latlng: LatLngLike) -> Point:
        return self.projection.project(latlng)

    def unproject(self, point: PointLike, unbounded: bool = False) -> LatLng:
        return self.projection.unproject(point, unbounded)

    # -------------------------------------------------------------------------
    # zoom <-> scale
    # -------------------------------------------------------------------------

    def scale(self, zoom: float) -> float:
        return self.scales.scale(zoom)

    def zoom(self, scale: float) -> float:
        return self.scales.zoom(scale)

    def distance(self, a: LatLngLike, b: LatLngLike) -> float:
        """Great-circle distance in meters."""
        return geodesy.distance(a, b)

    def distance_many(
        self,
        lats1: Iterable[float],
        lngs1: Iterable[float],
        lats2: Iterable[float],
        lngs2: Iterable[float],
    ) -> np.ndarray:
        """Element-wise great-circle distances in meters (numpy broadcasting applies)."""
        return geodesy.haversine_m_vec(
            np.asarray(list(lats1), dtype="float64"),
            np.asarray(list(lngs1), dtype="float64"),
            np.asarray(list(lats2), dtype="float64"),
            np.asarray(list(lngs2), dtype="float64"),
        )

    # -------------------------------------------------------------------------
    # render space
    # -------------------------------------------------------------------------

    def lat_lng_to_point(self, latlng: LatLngLike, zoom: float) -> Point:
        return self.transformation.transform(self.project(latlng), self.scale(zoom))

    def point_to_lat_lng(self, point: PointLike, zoom: float, unbounded: bool = False) -> LatLng:
        projected = self.transformation.untransform(point, self.scale(zoom))
        return self.unproject(projected, unbounded)

    def projected_bounds(self, zoom: float) -> Optional[Bounds]:
        """Projection bounds in render units at `zoom`; None for an infinite CRS."""
        if self.infinite or self.bounds is None:
            return None
        s = self.scale(zoom)
        p0 = self.transformation.transform(self.bounds.min, s)
        p1 = self.transformation.transform(self.bounds.max, s)
        return Bounds.coerce((p0.as_tuple(), p1.as_tuple()))

    def __repr__(self) -> str:
        return f"ProjCRS(code={self.code!r}, zooms={len(self.scales)}, infinite={self.infinite})"
