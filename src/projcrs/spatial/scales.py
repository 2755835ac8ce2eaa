# src/projcrs/spatial/scales.py
from __future__ import annotations

import math
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

TableInput = Union[Mapping[int, float], Sequence[Optional[float]]]


def _truthy_number(v: Any) -> bool:
    # None, 0 and NaN are all "no value" for a resolution slot
    if v is None:
        return False
    v = float(v)
    return v != 0.0 and not math.isnan(v)


class ScaleTable:
    """
    Sparse zoom index -> scale (render units per projected unit).

    Missing indexes are holes. For zoom() to be meaningful the populated
    values should be non-decreasing in index; this is not checked.
    """

    def __init__(self, entries: Optional[TableInput] = None) -> None:
        self._t: Dict[int, float] = {}
        if entries is None:
            return
        items: Iterable[Tuple[int, Any]]
        if isinstance(entries, Mapping):
            items = entries.items()
        else:
            items = enumerate(entries)
        for i, v in items:
            if v is None:
                continue
            i = int(i)
            if i < 0:
                raise ValueError(f"zoom index must be >= 0, got {i}")
            self._t[i] = float(v)
        self._t = dict(sorted(self._t.items()))

    @classmethod
    def from_resolutions(cls, resolutions: TableInput) -> "ScaleTable":
        """
        scale[i] = 1 / resolutions[i] for every usable resolution.
        Zero, None and NaN slots leave holes.
        """
        if isinstance(resolutions, Mapping):
            pairs = list(resolutions.items())
        else:
            pairs = list(enumerate(resolutions))

        table: Dict[int, float] = {}
        for i, r in pairs:
            if _truthy_number(r):
                table[int(i)] = 1.0 / float(r)
        return cls(table)

    # -------------------------------------------------------------------------
    # mapping protocol
    # -------------------------------------------------------------------------

    def get(self, index: int, default: Optional[float] = None) -> Optional[float]:
        return self._t.get(index, default)

    def __getitem__(self, index: int) -> float:
        return self._t[index]

    def __contains__(self, index: object) -> bool:
        return index in self._t

    def __iter__(self) -> Iterator[int]:
        return iter(self._t)

    def __len__(self) -> int:
        return len(self._t)

    def items(self) -> Iterable[Tuple[int, float]]:
        return self._t.items()

    def as_dict(self) -> Dict[int, float]:
        return dict(self._t)

    def to_array(self) -> np.ndarray:
        """Dense float64 array over 0..max index, holes as NaN."""
        if not self._t:
            return np.zeros(0, dtype="float64")
        out = np.full(max(self._t) + 1, np.nan, dtype="float64")
        for i, v in self._t.items():
            out[i] = v
        return out

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ScaleTable):
            return self._t == other._t
        return NotImplemented

    def __repr__(self) -> str:
        return f"ScaleTable({self._t!r})"

    # -------------------------------------------------------------------------
    # zoom <-> scale
    # -------------------------------------------------------------------------

    def scale(self, zoom: float) -> float:
        """
        Exact table value at integer zoom, linear interpolation between
        floor(zoom) and floor(zoom) + 1 otherwise. Holes and non-finite zooms give NaN.
        """
        if not math.isfinite(zoom):
            return math.nan
        iz = math.floor(zoom)
        base = self._t.get(iz, math.nan)
        if zoom == iz:
            return base
        nxt = self._t.get(iz + 1, math.nan)
        return base + (nxt - base) * (zoom - iz)

    def closest_below(self, scale: float) -> Optional[Tuple[int, float]]:
        """
        (index, value) of the greatest value <= scale; the lowest index wins ties.
        None when every value is above `scale`.
        """
        low: Optional[Tuple[int, float]] = None
        for i, v in self._t.items():
            if v <= scale and (low is None or v > low[1]):
                low = (i, v)
        return low

    def zoom(self, scale: float) -> float:
        """
        Inverse of scale():
          - exact table value -> its index
          - below every entry -> -inf
          - past the last contiguous entry (next index is a hole) -> +inf
          - otherwise linear interpolation toward the next index
        """
        found = self.closest_below(scale)
        if found is None:
            return -math.inf
        down_zoom, down_scale = found
        if scale == down_scale:
            return float(down_zoom)

        next_scale = self._t.get(down_zoom + 1)
        if next_scale is None:
            return math.inf
        step = next_scale - down_scale
        if step == 0:
            # flat step: scale lies above it, so no finite zoom reaches it
            return math.inf
        return down_zoom + (scale - down_scale) / step
