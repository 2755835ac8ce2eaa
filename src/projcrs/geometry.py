# src/projcrs/geometry.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, Tuple, Union

PointLike = Union["Point", Sequence[float]]
LatLngLike = Union["LatLng", Sequence[float]]


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return self.x, self.y

    @classmethod
    def coerce(cls, p: PointLike) -> "Point":
        if isinstance(p, Point):
            return p
        x, y = p
        return cls(float(x), float(y))


@dataclass(frozen=True)
class LatLng:
    """
    Geographic coordinate in degrees.

    `unbounded` tags coordinates that may lie outside [-90, 90] / [-180, 180];
    what that permits is up to the consumer.
    """
    lat: float
    lng: float
    unbounded: bool = False

    def as_tuple(self) -> Tuple[float, float]:
        return self.lat, self.lng

    @classmethod
    def coerce(cls, ll: LatLngLike) -> "LatLng":
        if isinstance(ll, LatLng):
            return ll
        lat, lng = ll
        return cls(float(lat), float(lng))


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned box in projected units; `min`/`max` are opposite corners."""
    min: Point
    max: Point

    @classmethod
    def coerce(cls, b: Any) -> "Bounds":
        """
        Accepts a Bounds, a pair of corner points ((x0, y0), (x1, y1)),
        or a flat (min_x, min_y, max_x, max_y) sequence.
        """
        if isinstance(b, Bounds):
            return b
        vals = list(b)
        if len(vals) == 4:
            p0, p1 = Point(float(vals[0]), float(vals[1])), Point(float(vals[2]), float(vals[3]))
        elif len(vals) == 2:
            p0, p1 = Point.coerce(vals[0]), Point.coerce(vals[1])
        else:
            raise ValueError(f"bounds must be two corner points or four numbers, got {b!r}")
        return cls(
            Point(min(p0.x, p1.x), min(p0.y, p1.y)),
            Point(max(p0.x, p1.x), max(p0.y, p1.y)),
        )
