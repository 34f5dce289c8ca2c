"""Default feature styles, sphere radii, thresholds and environment loading."""

import math
import logging

from dotenv import load_dotenv

# ── Sphere shells ───────────────────────────────────────────────────────
# The planet surface is the unit sphere; the ocean shell sits just inside it.
PLANET_RADIUS = 1.0
OCEAN_RADIUS = 0.995

# Half-length of the drawn polar axis line, in sphere radii.
AXIS_LINE_LENGTH = 1.2

# ── Distance function selection ─────────────────────────────────────────
# In mixed mode a sampling step above this angle switches to the exact
# great-circle formula; below it the cheap max-projection metric is used.
MIXED_DISTANCE_THRESHOLD = math.radians(2)

# ── Feature styles ──────────────────────────────────────────────────────
# Per-kind defaults.  Every resolved style carries at least these keys.
POINT_STYLE = {
    'radius': 0.01,       # marker sphere radius
    'widthSegs': 8,       # marker sphere segments around
    'heightSegs': 6,      # marker sphere segments top to bottom
    'color': 0x000000,
}

LINE_STYLE = {
    'linewidth': 1,
    'color': 0x000000,
}

DEFAULT_FEATURE_STYLES = {
    'Point': POINT_STYLE,
    'MultiPoint': POINT_STYLE,
    'LineString': LINE_STYLE,
    'MultiLineString': LINE_STYLE,
    'Polygon': LINE_STYLE,
    'MultiPolygon': LINE_STYLE,
}

# Line attributes that switch the rendered material to a dashed line.
DASH_ATTRIBUTES = ('scale', 'dashSize', 'gapSize')

# Feature property holding the per-feature list of style overrides.
STYLE_PROPERTY = 'styles'

# ── Environment ─────────────────────────────────────────────────────────
ENV_AXIS_ANGLE = 'GEOPLANET_AXIS_ANGLE'
ENV_D_MIN = 'GEOPLANET_D_MIN'
ENV_DISTANCE_MODE = 'GEOPLANET_DISTANCE_MODE'
ENV_STYLE_PROPERTY = 'GEOPLANET_STYLE_PROPERTY'

# Load environment variables
load_dotenv()

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)
