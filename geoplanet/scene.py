"""Interface to the rendering collaborator, plus an in-memory recorder.

The renderer turns positions and resolved styles into pixels.  This
package only calls the two methods of ``SceneSink``; ``SceneRecorder``
keeps everything in memory for inspection, testing and the CLI.
"""

import logging
from typing import Protocol

import numpy as np

from .constants import DASH_ATTRIBUTES

logger = logging.getLogger(__name__)


class SceneSink(Protocol):
    def add_points(self, positions: np.ndarray, style: dict) -> None:
        """Draw one marker per row of the (N, 3) ``positions`` array."""

    def add_polyline(self, positions: np.ndarray, style: dict) -> None:
        """Draw one open polyline through the (N, 3) ``positions`` array."""


def parse_color(value) -> int:
    """Convert ``0x..``, ``#..`` or decimal colour notation to an int."""
    if isinstance(value, bool):
        raise ValueError(f"Invalid color: {value!r}")
    if isinstance(value, int):
        return value
    text = str(value).strip().lower()
    if text.startswith('#'):
        return int(text[1:], 16)
    return int(text, 0)


def _material_color(style: dict):
    try:
        return parse_color(style['color'])
    except ValueError as e:
        logger.warning(f"Ignoring unreadable color: {e}")
        return None


def marker_material(style: dict) -> dict:
    """Material parameters for point markers."""
    material = {'color': 0}
    if style.get('color') is not None:
        color = _material_color(style)
        if color is not None:
            material['color'] = color
    return material


def line_material(style: dict) -> dict:
    """Material parameters for polylines; dashed when any dash attribute is set."""
    material = {}
    if style.get('color') is not None:
        color = _material_color(style)
        if color is not None:
            material['color'] = color
    for key in ('linewidth',) + DASH_ATTRIBUTES:
        if style.get(key):
            material[key] = style[key]
    dashed = any(key in material for key in DASH_ATTRIBUTES)
    material['type'] = 'dashed' if dashed else 'basic'
    return material


class SceneRecorder:
    """Scene sink that records draw calls in order.

    Each call also records the material a renderer would build for it,
    in ``marker_materials`` and ``line_materials``.
    """

    def __init__(self):
        self.markers: list[tuple[np.ndarray, dict]] = []
        self.polylines: list[tuple[np.ndarray, dict]] = []
        self.marker_materials: list[dict] = []
        self.line_materials: list[dict] = []

    def add_points(self, positions, style):
        self.markers.append((np.asarray(positions, dtype=float), dict(style)))
        self.marker_materials.append(marker_material(style))

    def add_polyline(self, positions, style):
        self.polylines.append((np.asarray(positions, dtype=float), dict(style)))
        self.line_materials.append(line_material(style))

    def clear(self):
        self.markers.clear()
        self.polylines.clear()
        self.marker_materials.clear()
        self.line_materials.clear()

    def summary(self) -> dict:
        return {
            'marker_batches': len(self.markers),
            'markers': sum(len(p) for p, _ in self.markers),
            'polylines': len(self.polylines),
            'vertices': sum(len(p) for p, _ in self.polylines),
        }
