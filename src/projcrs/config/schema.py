# src/projcrs/config/schema.py
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from projcrs.geometry import Bounds
from projcrs.spatial.transformation import Transformation

TableOption = Union[Sequence[Optional[float]], Mapping[int, Optional[float]]]


@dataclass(frozen=True)
class CRSOptions:
    """
    CRS construction options.

    origin wins over transformation when both are set.
    scales wins over resolutions when both are set.
    """
    transformation: Optional[Transformation] = None
    origin: Optional[Tuple[float, float]] = None
    bounds: Optional[Bounds] = None
    scales: Optional[TableOption] = None
    resolutions: Optional[TableOption] = None

    @classmethod
    def from_dict(cls, d: Optional[Mapping[str, Any]]) -> "CRSOptions":
        """Coerce a plain mapping (e.g. parsed YAML); unknown keys are rejected."""
        d = dict(d or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise ValueError(f"unknown CRS option(s): {', '.join(unknown)}")

        origin = d.get("origin")
        if origin is not None:
            vals = list(origin)
            if len(vals) != 2:
                raise ValueError(f"origin must be (x, y), got {origin!r}")
            origin = (float(vals[0]), float(vals[1]))

        t = d.get("transformation")
        b = d.get("bounds")
        return cls(
            transformation=Transformation.coerce(t) if t is not None else None,
            origin=origin,
            bounds=Bounds.coerce(b) if b is not None else None,
            scales=_opt_list(d.get("scales")),
            resolutions=_opt_list(d.get("resolutions")),
        )

    @classmethod
    def coerce(cls, o: Any) -> "CRSOptions":
        if o is None:
            return cls()
        if isinstance(o, CRSOptions):
            return o
        if isinstance(o, Mapping):
            return cls.from_dict(o)
        raise ValueError(f"expected CRSOptions or a mapping, got {type(o).__name__}")


def _opt_list(v: Any) -> Optional[Union[Tuple[Optional[float], ...], Dict[int, Optional[float]]]]:
    if v is None:
        return None
    if isinstance(v, Mapping):
        return {int(k): (None if x is None else float(x)) for k, x in v.items()}
    return tuple(None if x is None else float(x) for x in v)
