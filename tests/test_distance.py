"""Tests for the distance approximations and the metric selection policy."""

import math
import random

import pytest

from geoplanet.distance import chord, exact_arc, max_projection, select_metric
from geoplanet.models import DistanceMode

POINTS = [
    (0.0, 0.0),
    (1.2, 0.4),
    (-2.9, -1.1),
    (math.pi, math.pi / 2),
    (0.3, -math.pi / 2),
]


@pytest.mark.parametrize('p', POINTS)
def test_distance_to_self_is_zero(p):
    assert max_projection(p, p) == 0.0
    assert chord(p, p) == 0.0
    assert exact_arc(p, p) == pytest.approx(0.0, abs=1e-7)


def test_max_projection_pure_latitude_to_pole():
    assert max_projection((0, 0), (0, math.pi / 2)) == pytest.approx(math.pi / 2)


def test_chord_is_never_shorter_than_max_projection():
    rng = random.Random(7)
    for _ in range(200):
        p1 = (rng.uniform(-math.pi, math.pi), rng.uniform(-math.pi / 2, math.pi / 2))
        p2 = (rng.uniform(-math.pi, math.pi), rng.uniform(-math.pi / 2, math.pi / 2))
        assert chord(p1, p2) >= max_projection(p1, p2)


def test_exact_arc_stays_in_range():
    rng = random.Random(11)
    for _ in range(500):
        p1 = (rng.uniform(-math.pi, math.pi), rng.uniform(-math.pi / 2, math.pi / 2))
        p2 = (rng.uniform(-math.pi, math.pi), rng.uniform(-math.pi / 2, math.pi / 2))
        assert 0.0 <= exact_arc(p1, p2) <= math.pi


def test_exact_arc_known_values():
    assert exact_arc((0, 0), (math.pi / 2, 0)) == pytest.approx(math.pi / 2)
    assert exact_arc((0, 0), (math.pi, 0)) == pytest.approx(math.pi)
    assert exact_arc((0.7, math.pi / 2), (-2.0, math.pi / 2)) == pytest.approx(0.0, abs=1e-7)


def test_mixed_mode_prefers_exact_arc_for_sparse_sampling():
    assert select_metric(DistanceMode.MIXED, math.radians(5)) is exact_arc


def test_mixed_mode_prefers_speed_for_dense_sampling():
    assert select_metric(DistanceMode.MIXED, math.radians(1)) is max_projection
    assert select_metric(DistanceMode.MIXED, math.radians(2)) is max_projection


def test_mixed_mode_without_threshold_uses_max_projection():
    assert select_metric(DistanceMode.MIXED, None) is max_projection
    assert select_metric() is max_projection


@pytest.mark.parametrize('mode, expected', [
    (DistanceMode.MAX_PROJECTION, max_projection),
    (DistanceMode.CHORD, chord),
    (DistanceMode.EXACT_ARC, exact_arc),
    ('chord', chord),
    (3, exact_arc),
])
def test_explicit_modes_ignore_threshold(mode, expected):
    assert select_metric(mode, math.radians(10)) is expected
    assert select_metric(mode, None) is expected
