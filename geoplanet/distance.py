"""Angular distance approximations between two points on the sphere.

All functions take ``(phi, theta)`` pairs in radians, where ``phi`` is
longitude and ``theta`` is latitude, and return an angle in radians.
"""

import math
import logging

from .constants import MIXED_DISTANCE_THRESHOLD
from .models import DistanceMode

logger = logging.getLogger(__name__)


def max_projection(p1, p2) -> float:
    """Longest of the horizontal and vertical projections of the arc (fastest)."""
    (phi1, theta1), (phi2, theta2) = p1, p2
    r_y = math.cos((abs(theta1) + abs(theta2)) / 2)
    return max(r_y * abs(phi1 - phi2), abs(theta1 - theta2))


def chord(p1, p2) -> float:
    """Length of the arc straightened into a flat right triangle."""
    (phi1, theta1), (phi2, theta2) = p1, p2
    dy = abs(theta1 - theta2)
    r_y = math.cos((abs(theta1) + abs(theta2)) / 2)
    dx = r_y * abs(phi1 - phi2)
    return math.sqrt(dx * dx + dy * dy)


def exact_arc(p1, p2) -> float:
    """Great-circle distance from the spherical law of cosines (slowest)."""
    (phi1, theta1), (phi2, theta2) = p1, p2
    cos_d = (math.sin(theta1) * math.sin(theta2)
             + math.cos(theta1) * math.cos(theta2) * math.cos(phi1 - phi2))
    # Rounding can push near-identical or antipodal points just past +-1
    return math.acos(min(1.0, max(-1.0, cos_d)))


METRICS = {
    DistanceMode.MAX_PROJECTION: max_projection,
    DistanceMode.CHORD: chord,
    DistanceMode.EXACT_ARC: exact_arc,
}


def select_metric(mode=DistanceMode.MIXED, d_min_rad: float | None = None):
    """Pick the distance function for a draw call.

    Explicit modes always get their own metric.  Mixed mode uses the exact
    arc for sparse sampling (``d_min_rad`` above two degrees) and the
    max-projection metric otherwise, including when ``d_min_rad`` is unset.
    """
    mode = DistanceMode.parse(mode)
    if mode in METRICS:
        return METRICS[mode]
    if d_min_rad is not None and d_min_rad > MIXED_DISTANCE_THRESHOLD:
        logger.debug(f"Mixed distance mode: d_min={d_min_rad:.4f} rad, using exact arc")
        return exact_arc
    return max_projection
