from __future__ import annotations

import math
from typing import Tuple

import pytest

from projcrs.config.schema import CRSOptions
from projcrs.crs import ProjCRS
from projcrs.errors import DefinitionNotFound
from projcrs.geometry import Bounds, LatLng, Point
from projcrs.spatial.registry import DefinitionRegistry, default_registry
from projcrs.spatial.transformation import DEFAULT_TRANSFORMATION, Transformation


class PlateCarree:
    """Identity lng/lat <-> x/y, enough to check the CRS arithmetic exactly."""

    srs_code = "TEST:PLATE"

    def forward(self, lng: float, lat: float) -> Tuple[float, float]:
        return lng, lat

    def inverse(self, x: float, y: float) -> Tuple[float, float]:
        return x, y


@pytest.fixture
def registry() -> DefinitionRegistry:
    return default_registry()


def test_resolution_scenario(registry: DefinitionRegistry) -> None:
    crs = ProjCRS("EPSG:3857", options={"resolutions": [2, 1, 0.5]}, registry=registry)
    assert crs.scales.as_dict() == {0: 0.5, 1: 1.0, 2: 2.0}
    assert crs.scale(1.5) == 1.5
    assert crs.zoom(1.5) == 1.5
    assert crs.zoom(3) == math.inf
    assert crs.zoom(0.2) == -math.inf
    assert crs.infinite is True
    assert crs.code == "EPSG:3857"


def test_scales_take_precedence_over_resolutions(registry: DefinitionRegistry) -> None:
    crs = ProjCRS("EPSG:3857", options=CRSOptions(scales=[1.0, 4.0], resolutions=[2.0]), registry=registry)
    assert crs.scales.as_dict() == {0: 1.0, 1: 4.0}
    assert crs.scale(0.25) == 1.75


def test_no_table_gives_empty_scales(registry: DefinitionRegistry) -> None:
    crs = ProjCRS("EPSG:4326", registry=registry)
    assert len(crs.scales) == 0
    assert crs.zoom(1.0) == -math.inf


def test_default_transformation(registry: DefinitionRegistry) -> None:
    crs = ProjCRS("EPSG:3857", registry=registry)
    assert crs.transformation == DEFAULT_TRANSFORMATION


def test_explicit_transformation(registry: DefinitionRegistry) -> None:
    crs = ProjCRS("EPSG:3857", options={"transformation": [2, 1, -2, 1]}, registry=registry)
    assert crs.transformation == Transformation(2.0, 1.0, -2.0, 1.0)


def test_origin_wins_over_transformation(registry: DefinitionRegistry) -> None:
    crs = ProjCRS(
        "EPSG:3857",
        options={"origin": [100, 200], "transformation": [2, 0, 2, 0]},
        registry=registry,
    )
    assert crs.transformation == Transformation(1.0, -100.0, -1.0, 200.0)


def test_bounds_make_crs_finite(registry: DefinitionRegistry) -> None:
    crs = ProjCRS("EPSG:3857", options={"bounds": [[-1000, -1000], [1000, 1000]]}, registry=registry)
    assert crs.infinite is False
    assert crs.bounds == Bounds(Point(-1000.0, -1000.0), Point(1000.0, 1000.0))
    assert crs.projection.bounds == crs.bounds


def test_project_unproject_delegate(registry: DefinitionRegistry) -> None:
    crs = ProjCRS("urn:ogc:def:crs:EPSG::3857", registry=registry)
    p = crs.project((48.2, 16.37))
    assert p == crs.projection.project((48.2, 16.37))
    ll = crs.unproject(p, unbounded=True)
    assert ll.lat == pytest.approx(48.2, abs=1e-7)
    assert ll.lng == pytest.approx(16.37, abs=1e-7)
    assert ll.unbounded is True


def test_unknown_code_fails_construction(registry: DefinitionRegistry) -> None:
    with pytest.raises(DefinitionNotFound):
        ProjCRS("EPSG:99999", options={"resolutions": [1]}, registry=registry)


def test_unknown_option_rejected(registry: DefinitionRegistry) -> None:
    with pytest.raises(ValueError):
        ProjCRS("EPSG:3857", options={"zoomz": [1]}, registry=registry)


def test_transform_object_with_options_positional() -> None:
    crs = ProjCRS(PlateCarree(), {"bounds": [[-180, -90], [180, 90]], "scales": [1, 2]})
    assert crs.code == "TEST:PLATE"
    assert crs.infinite is False
    assert crs.scale(1) == 2.0


def test_transform_object_with_options_keyword() -> None:
    crs = ProjCRS(PlateCarree(), options=CRSOptions(scales=[1.0]))
    assert crs.infinite is True
    assert crs.project((10.0, 20.0)) == Point(20.0, 10.0)


def test_lat_lng_to_point_round_trip() -> None:
    crs = ProjCRS(PlateCarree(), {"origin": [-180, 90], "resolutions": [1, 0.5]})
    p = crs.lat_lng_to_point((45.0, 0.0), 1)
    assert p == Point(360.0, 90.0)
    assert crs.point_to_lat_lng(p, 1) == LatLng(45.0, 0.0)


def test_lat_lng_to_point_fractional_zoom() -> None:
    crs = ProjCRS(PlateCarree(), {"origin": [0, 0], "scales": [1, 3]})
    p = crs.lat_lng_to_point((-10.0, 10.0), 0.5)
    assert p == Point(20.0, 20.0)


def test_projected_bounds() -> None:
    crs = ProjCRS(PlateCarree(), {"origin": [-180, 90], "scales": [1, 2], "bounds": [[-180, -90], [180, 90]]})
    assert crs.projected_bounds(0) == Bounds(Point(0.0, 0.0), Point(360.0, 180.0))
    assert crs.projected_bounds(1) == Bounds(Point(0.0, 0.0), Point(720.0, 360.0))


def test_projected_bounds_none_when_infinite() -> None:
    crs = ProjCRS(PlateCarree(), {"scales": [1]})
    assert crs.projected_bounds(0) is None


def test_distance_uses_spherical_earth(registry: DefinitionRegistry) -> None:
    crs = ProjCRS("EPSG:3857", registry=registry)
    one_degree = ProjCRS.EARTH_RADIUS_M * math.pi / 180.0
    assert crs.distance((0.0, 0.0), (0.0, 1.0)) == pytest.approx(one_degree, rel=1e-9)
    assert crs.distance(LatLng(10.0, 10.0), LatLng(10.0, 10.0)) == 0.0


def test_distance_is_shared_across_instances(registry: DefinitionRegistry) -> None:
    a = ProjCRS("EPSG:3857", registry=registry)
    b = ProjCRS("EPSG:4326", registry=registry)
    pts = ((51.5, -0.12), (40.7, -74.0))
    assert a.distance(*pts) == b.distance(*pts)
    assert a.distance(*pts) == pytest.approx(5_570_000.0, rel=0.01)


def test_scales_mapping_option_keeps_indexes() -> None:
    crs = ProjCRS(PlateCarree(), {"scales": {0: 0.5, 2: 2.0}})
    assert crs.scales.as_dict() == {0: 0.5, 2: 2.0}
    assert math.isnan(crs.scale(1))


def test_resolutions_mapping_option_keeps_indexes() -> None:
    crs = ProjCRS(PlateCarree(), {"resolutions": {0: 2.0, 1: 1.0, 3: 0.25}})
    assert crs.scales.as_dict() == {0: 0.5, 1: 1.0, 3: 4.0}
    assert crs.zoom(0.75) == 0.5


def test_scale_of_zoom_beyond_table_is_nan(registry: DefinitionRegistry) -> None:
    crs = ProjCRS("EPSG:3857", options={"resolutions": [2, 1, 0.5]}, registry=registry)
    assert math.isnan(crs.scale(crs.zoom(3)))
    assert math.isnan(crs.scale(crs.zoom(0.2)))


def test_distance_many_matches_scalar(registry: DefinitionRegistry) -> None:
    crs = ProjCRS("EPSG:3857", registry=registry)
    lats1, lngs1 = [0.0, 51.5, 10.0], [0.0, -0.12, 10.0]
    lats2, lngs2 = [0.0, 40.7, 10.0], [1.0, -74.0, 10.0]
    d = crs.distance_many(lats1, lngs1, lats2, lngs2)
    assert d.shape == (3,)
    for i in range(3):
        expected = crs.distance((lats1[i], lngs1[i]), (lats2[i], lngs2[i]))
        assert d[i] == pytest.approx(expected, abs=1e-6)
    assert d[2] == 0.0
