"""Adaptive subdivision of long path segments."""

import math
import logging

import numpy as np

logger = logging.getLogger(__name__)


def tessellate(points_rad, d_max_rad: float | None, metric) -> np.ndarray:
    """Insert points so no two neighbours are more than ``d_max_rad`` apart.

    ``points_rad`` is an (N, 2) array of ``[lon, lat]`` radians and
    ``metric`` one of the functions in ``geoplanet.distance``.  A long
    segment is split into ``ceil(d / d_max_rad)`` equal steps in lon/lat
    space, which is a visual smoothing and not a true geodesic.  Original
    points are all kept in their original order.
    """
    pts = np.asarray(points_rad, dtype=float).reshape(-1, 2)
    if d_max_rad is None or len(pts) < 2:
        return pts.copy()
    if d_max_rad <= 0:
        raise ValueError(f"d_max_rad must be positive, got {d_max_rad}")

    pieces = []
    for p1, p2 in zip(pts[:-1], pts[1:]):
        d = metric(p1, p2)
        if d > d_max_rad:
            k = math.ceil(d / d_max_rad)
            fractions = np.arange(k) / k
            pieces.append(p1 + np.outer(fractions, p2 - p1))
        else:
            pieces.append(p1[np.newaxis, :])
    # The segment loop only emits start points; close with the last vertex
    pieces.append(pts[-1:])

    result = np.vstack(pieces)
    if len(result) > len(pts):
        logger.debug(f"Tessellated path: {len(pts)} -> {len(result)} points")
    return result
