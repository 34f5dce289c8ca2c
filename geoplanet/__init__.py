"""geoplanet package: GeoJSON features projected onto a tilted globe.

Import constants FIRST so environment variables from a ``.env`` file are
loaded before any configuration is read.
"""

from geoplanet import constants as _constants  # noqa: F401

from geoplanet.builder import PlanetBuilder
from geoplanet.config import PlanetOptions
from geoplanet.models import AxisConfig, DistanceMode, GeometryKind
from geoplanet.scene import SceneRecorder
from geoplanet.styles import DEFAULT_STYLES, DefaultStyles, resolve_styles
