# src/projcrs/spatial/transformation.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, Tuple

from projcrs.geometry import Point, PointLike


@dataclass(frozen=True)
class Transformation:
    """
    Affine map from projected to render coordinates:

      render_x = scale * (a * x + b)
      render_y = scale * (c * y + d)
    """
    a: float = 1.0
    b: float = 0.0
    c: float = -1.0
    d: float = 0.0

    @classmethod
    def from_origin(cls, origin: Sequence[float]) -> "Transformation":
        """Maps `origin` (projected units) to render (0, 0), y flipped."""
        ox, oy = origin
        return cls(1.0, -float(ox), -1.0, float(oy))

    @classmethod
    def coerce(cls, t: Any) -> "Transformation":
        if isinstance(t, Transformation):
            return t
        vals = [float(v) for v in t]
        if len(vals) != 4:
            raise ValueError(f"transformation needs 4 coefficients (a, b, c, d), got {t!r}")
        return cls(*vals)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return self.a, self.b, self.c, self.d

    def transform(self, point: PointLike, scale: float = 1.0) -> Point:
        p = Point.coerce(point)
        return Point(scale * (self.a * p.x + self.b), scale * (self.c * p.y + self.d))

    def untransform(self, point: PointLike, scale: float = 1.0) -> Point:
        p = Point.coerce(point)
        return Point((p.x / scale - self.b) / self.a, (p.y / scale - self.d) / self.c)


DEFAULT_TRANSFORMATION = Transformation(1.0, 0.0, -1.0, 0.0)
