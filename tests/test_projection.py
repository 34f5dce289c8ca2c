"""Tests for longitude/latitude projection onto the tilted sphere."""

import math

import numpy as np
import pytest

from geoplanet.constants import OCEAN_RADIUS
from geoplanet.models import AxisConfig
from geoplanet.projection import project_point, project_points, rotate_z, to_radians


def test_known_position_without_tilt():
    x, y, z = project_point(10, 20)
    assert x == pytest.approx(0.9254, abs=1e-4)
    assert y == pytest.approx(0.3420, abs=1e-4)
    assert z == pytest.approx(-0.1632, abs=1e-4)


@pytest.mark.parametrize('tilt', [0.0, 23.44, -45.0, 90.0])
def test_positions_lie_on_unit_sphere(tilt):
    lons, lats = np.meshgrid(np.linspace(-180, 180, 13), np.linspace(-90, 90, 7))
    points = np.column_stack([lons.ravel(), lats.ravel()])
    positions = project_points(points, AxisConfig.from_degrees(tilt))
    np.testing.assert_allclose(np.linalg.norm(positions, axis=1), 1.0, atol=1e-12)


def test_zero_tilt_is_plain_spherical_mapping():
    lon, lat = 37.0, -12.5
    lon_rad, lat_rad = math.radians(-lon), math.radians(lat)
    expected = [
        math.cos(lat_rad) * math.cos(lon_rad),
        math.sin(lat_rad),
        math.cos(lat_rad) * math.sin(lon_rad),
    ]
    np.testing.assert_allclose(project_point(lon, lat, AxisConfig(0.0)), expected)


def test_pole_ignores_longitude():
    np.testing.assert_allclose(project_point(0, 90), [0.0, 1.0, 0.0], atol=1e-12)
    np.testing.assert_allclose(project_point(0, 90), project_point(135, 90), atol=1e-12)


def test_north_pole_lies_on_tilted_axis():
    axis = AxisConfig.from_degrees(23.44)
    pole = project_point(0, 90, axis)
    np.testing.assert_allclose(pole, [axis.axis_x, axis.axis_y, 0.0], atol=1e-12)


def test_radius_scales_positions():
    positions = project_points([(10, 20), (-70, 45)], AxisConfig(), OCEAN_RADIUS)
    np.testing.assert_allclose(np.linalg.norm(positions, axis=1), OCEAN_RADIUS)


def test_empty_input_gives_empty_array():
    assert project_points([], AxisConfig()).shape == (0, 3)


def test_to_radians_negates_longitude():
    np.testing.assert_allclose(to_radians([(90, 45)]), [[-math.pi / 2, math.pi / 4]])


def test_rotate_z_quarter_turn():
    x, y = rotate_z(math.pi / 2, 1.0, 0.0)
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(-1.0)
