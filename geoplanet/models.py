"""Data classes for axis tilt, distance modes and geometry kinds."""

import math
from dataclasses import dataclass
from enum import Enum

import numpy as np

from .constants import AXIS_LINE_LENGTH


@dataclass(frozen=True)
class AxisConfig:
    """Polar axis tilt, shared by every projection of a draw call.

    ``angle`` is in radians.  The axis itself lies in the x/y plane.
    """
    angle: float = 0.0

    @classmethod
    def from_degrees(cls, degrees: float) -> 'AxisConfig':
        return cls(angle=math.radians(degrees))

    @property
    def axis_x(self) -> float:
        return math.cos(math.pi / 2 - self.angle)

    @property
    def axis_y(self) -> float:
        return math.sin(math.pi / 2 - self.angle)

    def endpoints(self, length: float = AXIS_LINE_LENGTH) -> np.ndarray:
        """Return the two end points of the drawn axis line as a (2, 3) array."""
        tip = np.array([self.axis_x, self.axis_y, 0.0]) * length
        return np.stack([-tip, tip])


class DistanceMode(Enum):
    MIXED = 0
    MAX_PROJECTION = 1
    CHORD = 2
    EXACT_ARC = 3

    @classmethod
    def parse(cls, value) -> 'DistanceMode':
        """Accept a member, its integer code, or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        if isinstance(value, str):
            key = value.strip().lower().replace('-', '_')
            if key.isdigit():
                return cls(int(key))
            if key in _MODE_ALIASES:
                return _MODE_ALIASES[key]
        raise ValueError(f"Unknown distance mode: {value!r}")


_MODE_ALIASES = {
    'mixed': DistanceMode.MIXED,
    'max': DistanceMode.MAX_PROJECTION,
    'max_projection': DistanceMode.MAX_PROJECTION,
    'chord': DistanceMode.CHORD,
    'sqr': DistanceMode.CHORD,
    'arc': DistanceMode.EXACT_ARC,
    'exact_arc': DistanceMode.EXACT_ARC,
}


class GeometryKind(Enum):
    POINT = 'Point'
    MULTI_POINT = 'MultiPoint'
    LINE_STRING = 'LineString'
    MULTI_LINE_STRING = 'MultiLineString'
    POLYGON = 'Polygon'
    MULTI_POLYGON = 'MultiPolygon'
    GEOMETRY_COLLECTION = 'GeometryCollection'

    @classmethod
    def lookup(cls, tag) -> 'GeometryKind | None':
        """Return the kind for a GeoJSON ``type`` tag, or None if unknown."""
        try:
            return cls(tag)
        except ValueError:
            return None

    @property
    def is_point_like(self) -> bool:
        return self in (GeometryKind.POINT, GeometryKind.MULTI_POINT)
