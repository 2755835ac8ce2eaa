# src/projcrs/spatial/geodesy.py
from __future__ import annotations

import math
from typing import Union

import numpy as np

from projcrs.geometry import LatLng, LatLngLike

# Spherical Earth radius in meters, shared by every CRS
EARTH_RADIUS_M: float = 6371000.0


def haversine_m(lat1: float, lon1: float, lat2: float, lon2: float, *, radius: float = EARTH_RADIUS_M) -> float:
    """
    Great-circle distance in meters between two lat/lon points (degrees).

    Clamps the haversine 'a' term to [0,1]; non-finite input gives NaN.
    """
    vals = (lat1, lon1, lat2, lon2)
    if any(not math.isfinite(float(v)) for v in vals):
        return float("nan")

    p1 = math.radians(float(lat1))
    p2 = math.radians(float(lat2))
    sin_dphi = math.sin(math.radians(float(lat2) - float(lat1)) / 2.0)
    sin_dlmb = math.sin(math.radians(float(lon2) - float(lon1)) / 2.0)

    a = sin_dphi * sin_dphi + math.cos(p1) * math.cos(p2) * sin_dlmb * sin_dlmb
    a = min(max(a, 0.0), 1.0)

    return float(2.0 * radius * math.atan2(math.sqrt(a), math.sqrt(1.0 - a)))


def distance(a: LatLngLike, b: LatLngLike) -> float:
    """Spherical distance in meters between two LatLng-like values."""
    la = LatLng.coerce(a)
    lb = LatLng.coerce(b)
    return haversine_m(la.lat, la.lng, lb.lat, lb.lng)


def haversine_m_vec(
    lat1: Union[np.ndarray, float],
    lon1: Union[np.ndarray, float],
    lat2: Union[np.ndarray, float],
    lon2: Union[np.ndarray, float],
    *,
    radius: float = EARTH_RADIUS_M,
) -> np.ndarray:
    """
    Vectorized haversine distance (meters). Inputs are degrees; numpy
    broadcasting applies. Non-finite inputs propagate as NaN.
    """
    lat1 = np.asarray(lat1, dtype="float64")
    lon1 = np.asarray(lon1, dtype="float64")
    lat2 = np.asarray(lat2, dtype="float64")
    lon2 = np.asarray(lon2, dtype="float64")

    phi1 = np.deg2rad(lat1)
    phi2 = np.deg2rad(lat2)
    dphi = np.deg2rad(lat2 - lat1)
    dlmb = np.deg2rad(lon2 - lon1)

    a = np.sin(dphi / 2.0) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(dlmb / 2.0) ** 2
    a = np.clip(a, 0.0, 1.0)
    c = 2.0 * np.arctan2(np.sqrt(a), np.sqrt(1.0 - a))
    return (radius * c).astype("float64", copy=False)
