"""PlanetBuilder: thin orchestrator that delegates to focused modules."""

import logging
from collections.abc import Mapping

from .config import PlanetOptions
from .distance import select_metric
from .geometry import PointBatch, as_mapping, iter_primitives
from .projection import project_points, project_radians, to_radians
from .scene import SceneRecorder
from .styles import resolve_styles
from .tessellation import tessellate

logger = logging.getLogger(__name__)


def _override_list(value) -> list:
    """Normalise a feature's style property to a list of override maps."""
    if value is None:
        return []
    if isinstance(value, Mapping):
        return [value]
    if isinstance(value, (list, tuple)):
        return list(value)
    logger.warning(f"Ignoring feature styles of type {type(value).__name__}")
    return []


class PlanetBuilder:
    def __init__(self, options: PlanetOptions | None = None, sink=None):
        """
        options: projection, tessellation and style configuration.
        sink: rendering collaborator; defaults to an in-memory SceneRecorder.
        """
        self.options = options or PlanetOptions()
        self.sink = sink if sink is not None else SceneRecorder()
        self.axis = self.options.axis
        self.d_max_rad = self.options.d_min_rad
        self.metric = select_metric(self.options.distance_mode, self.d_max_rad)

    def axis_line(self):
        """End points of the polar axis line, as a (2, 3) array."""
        return self.axis.endpoints()

    # ── Primitive drawing ───────────────────────────────────────────────

    def draw_points(self, points_deg, style: dict):
        """Project a batch of ``(lon, lat)`` points and hand them over as markers."""
        if not len(points_deg):
            return self
        positions = project_points(points_deg, self.axis, self.options.radius)
        self.sink.add_points(positions, style)
        return self

    def draw_paths(self, paths_deg, style: dict):
        """Tessellate and project each path, handing each over as a polyline."""
        for path in paths_deg:
            if not len(path):
                continue
            points_rad = tessellate(to_radians(path), self.d_max_rad, self.metric)
            positions = project_radians(points_rad, self.axis, self.options.radius)
            self.sink.add_polyline(positions, style)
        return self

    # ── GeoJSON drawing ─────────────────────────────────────────────────

    def draw_geometry(self, geometry, substitutions=None, overrides=None):
        """Draw one geometry once per resolved style of each of its parts."""
        defaults = self.options.default_styles
        for primitive in iter_primitives(geometry):
            styles = resolve_styles(primitive.kind, defaults, substitutions, overrides)
            for style in styles:
                if isinstance(primitive, PointBatch):
                    self.draw_points(primitive.points, style)
                else:
                    self.draw_paths(primitive.paths, style)
        return self

    def draw_feature(self, feature, substitutions=None):
        """Draw a feature with a ``geometry`` or a list of ``geometries``."""
        properties = feature.get('properties') or {}
        overrides = _override_list(properties.get(self.options.style_property))

        if feature.get('geometry') is not None:
            self.draw_geometry(feature['geometry'], substitutions, overrides)
        elif feature.get('geometries'):
            # One style per sub-geometry, matched by position
            for i, geometry in enumerate(feature['geometries']):
                own = overrides[i:i + 1]
                self.draw_geometry(geometry, substitutions, own)
        return self

    def draw_geojson(self, data, substitutions=None):
        """Draw a FeatureCollection, a single Feature or a bare geometry."""
        data = as_mapping(data)
        if data is None:
            logger.warning("Nothing to draw: input is not GeoJSON")
            return self

        if data.get('type') == 'FeatureCollection' or 'features' in data:
            features = data.get('features') or []
        elif data.get('type') == 'Feature' or ('geometries' in data and 'type' not in data):
            features = [data]
        else:
            return self.draw_geometry(data, substitutions)

        logger.info(f"Drawing {len(features)} features")
        for feature in features:
            if isinstance(feature, Mapping):
                self.draw_feature(feature, substitutions)
        return self
