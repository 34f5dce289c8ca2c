"""GeoJSON geometry dispatch into point batches and path groups."""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field

from shapely import wkt
from shapely.errors import ShapelyError
from shapely.geometry import mapping

from .models import GeometryKind

logger = logging.getLogger(__name__)


@dataclass
class PointBatch:
    """Points drawn as markers; ``points`` are ``(lon, lat)`` degrees."""
    kind: GeometryKind
    points: list = field(default_factory=list)


@dataclass
class PathGroup:
    """Lines or polygon rings drawn as polylines, one path each."""
    kind: GeometryKind
    paths: list = field(default_factory=list)


def _geo_point(coord):
    """Read the first two numbers of a position, or None if unreadable."""
    try:
        lon, lat = float(coord[0]), float(coord[1])
    except (TypeError, ValueError, IndexError, KeyError):
        return None
    if not (math.isfinite(lon) and math.isfinite(lat)):
        return None
    return lon, lat


def _geo_points(coords) -> list:
    points = []
    for coord in coords or ():
        point = _geo_point(coord)
        if point is None:
            logger.debug(f"Dropping unreadable position: {coord!r}")
            continue
        points.append(point)
    return points


def _geo_paths(lines) -> list:
    return [_geo_points(line) for line in lines or ()]


def as_mapping(geometry):
    """Return the GeoJSON mapping for a dict, a geometry object or a WKT string.

    Anything exposing ``__geo_interface__`` (shapely geometries included) is
    read through that interface.  Unreadable input gives None.
    """
    if isinstance(geometry, Mapping):
        return geometry
    if isinstance(geometry, str):
        try:
            geometry = wkt.loads(geometry)
        except ShapelyError as e:
            logger.debug(f"Skipping unreadable WKT: {e}")
            return None
    if not hasattr(geometry, "__geo_interface__"):
        return None
    return mapping(geometry)


def iter_primitives(geometry):
    """Yield ``PointBatch`` / ``PathGroup`` values for one geometry.

    Geometries without a type, without coordinates, or with an unknown
    type yield nothing.  Collections are walked recursively.
    """
    geometry = as_mapping(geometry)
    if geometry is None:
        return

    kind = GeometryKind.lookup(geometry.get('type'))
    if kind is None:
        logger.debug(f"Skipping geometry of unknown type {geometry.get('type')!r}")
        return

    if kind is GeometryKind.GEOMETRY_COLLECTION:
        members = geometry.get('geometries')
        if members is None:
            members = geometry.get('coordinates')
        for member in members or ():
            yield from iter_primitives(member)
        return

    coords = geometry.get('coordinates')
    if coords is None:
        logger.debug(f"Skipping {kind.value} without coordinates")
        return

    if kind is GeometryKind.POINT:
        yield PointBatch(kind, _geo_points([coords]))
    elif kind is GeometryKind.MULTI_POINT:
        yield PointBatch(kind, _geo_points(coords))
    elif kind is GeometryKind.LINE_STRING:
        yield PathGroup(kind, [_geo_points(coords)])
    elif kind in (GeometryKind.MULTI_LINE_STRING, GeometryKind.POLYGON):
        yield PathGroup(kind, _geo_paths(coords))
    elif kind is GeometryKind.MULTI_POLYGON:
        yield PathGroup(kind, [ring for polygon in coords or ()
                               for ring in _geo_paths(polygon)])
