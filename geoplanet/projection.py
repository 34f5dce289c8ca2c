"""Longitude/latitude to positions on the axis-tilted unit sphere."""

import numpy as np

from .constants import PLANET_RADIUS
from .models import AxisConfig


def to_radians(points) -> np.ndarray:
    """Convert ``(lon, lat)`` degrees to an (N, 2) array of ``[-lon, lat]`` radians.

    Longitude is negated so that increasing longitude sweeps eastward on
    the sphere as seen from the default camera.
    """
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    return np.column_stack([np.radians(-pts[:, 0]), np.radians(pts[:, 1])])


def rotate_z(alpha: float, x, y):
    """Rotate ``(x, y)`` by ``alpha`` radians around the z axis."""
    cos_a, sin_a = np.cos(alpha), np.sin(alpha)
    return x * cos_a + y * sin_a, -x * sin_a + y * cos_a


def project_radians(points_rad, axis: AxisConfig,
                    radius: float = PLANET_RADIUS) -> np.ndarray:
    """Map an (N, 2) array of ``[lon, lat]`` radians to (N, 3) sphere positions.

    Longitudes must already carry the sign flip applied by ``to_radians``.
    Nothing is clamped: out-of-range input yields the plain image of the
    formula, which is still a point on the sphere.
    """
    pts = np.asarray(points_rad, dtype=float).reshape(-1, 2)
    lon, lat = pts[:, 0], pts[:, 1]
    xz = np.cos(lat)
    x, y = rotate_z(axis.angle, xz * np.cos(lon), np.sin(lat))
    return np.column_stack([x, y, xz * np.sin(lon)]) * radius


def project_points(points, axis: AxisConfig,
                   radius: float = PLANET_RADIUS) -> np.ndarray:
    """Project ``(lon, lat)`` degree pairs to an (N, 3) array of positions."""
    return project_radians(to_radians(points), axis, radius)


def project_point(lon: float, lat: float, axis: AxisConfig | None = None,
                  radius: float = PLANET_RADIUS) -> np.ndarray:
    """Project a single ``(lon, lat)`` degree pair to a 3-vector."""
    return project_points([(lon, lat)], axis or AxisConfig(), radius)[0]
