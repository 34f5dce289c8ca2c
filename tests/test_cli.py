"""Tests for the geoplanet command line."""

import json

import pytest
from click.testing import CliRunner

from geoplanet.cli import cli


@pytest.fixture
def runner(monkeypatch):
    for name in ('GEOPLANET_AXIS_ANGLE', 'GEOPLANET_D_MIN',
                 'GEOPLANET_DISTANCE_MODE', 'GEOPLANET_STYLE_PROPERTY'):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


@pytest.fixture
def geojson_file(tmp_path):
    data = {
        'type': 'FeatureCollection',
        'features': [
            {'type': 'Feature', 'properties': {},
             'geometry': {'type': 'Point', 'coordinates': [10, 20]}},
            {'type': 'Feature', 'properties': {},
             'geometry': {'type': 'LineString', 'coordinates': [[0, 0], [10, 0]]}},
        ],
    }
    path = tmp_path / 'features.geojson'
    path.write_text(json.dumps(data), encoding='utf-8')
    return path


def test_project(runner):
    result = runner.invoke(cli, ['project', '10', '20'])
    assert result.exit_code == 0
    x, y, z = (float(v) for v in result.output.split())
    assert (x, y, z) == pytest.approx((0.9254, 0.3420, -0.1632), abs=1e-4)


def test_distance(runner):
    result = runner.invoke(cli, ['distance', '0', '0', '90', '0'])
    assert result.exit_code == 0
    lines = dict(line.split() for line in result.output.strip().splitlines())
    assert float(lines['exact_arc']) == pytest.approx(90.0)
    assert float(lines['max_projection']) == pytest.approx(90.0)
    assert float(lines['chord']) == pytest.approx(90.0)


def test_summarize(runner, geojson_file):
    result = runner.invoke(cli, ['summarize', str(geojson_file)])
    assert result.exit_code == 0, result.output
    assert 'markers: 1' in result.output
    assert 'polylines: 1' in result.output
    assert 'vertices: 2' in result.output


def test_summarize_with_tessellation(runner, geojson_file):
    result = runner.invoke(cli, ['summarize', str(geojson_file), '--d-min', '3'])
    assert result.exit_code == 0, result.output
    assert 'distance mode: mixed' in result.output
    assert 'vertices: 5' in result.output


def test_summarize_with_substitutions(runner, geojson_file, tmp_path):
    styles = tmp_path / 'styles.json'
    styles.write_text(json.dumps([{'LineString': {'color': 1}}, {'LineString': {'color': 2}}]))
    result = runner.invoke(cli, ['summarize', str(geojson_file), '-s', str(styles)])
    assert result.exit_code == 0, result.output
    assert 'polylines: 2' in result.output
    assert 'marker batches: 2' in result.output


def test_summarize_rejects_bad_d_min(runner, geojson_file):
    result = runner.invoke(cli, ['summarize', str(geojson_file), '--d-min', '0'])
    assert result.exit_code == 2


def test_summarize_reports_invalid_json(runner, tmp_path):
    path = tmp_path / 'broken.geojson'
    path.write_text('{"type": ', encoding='utf-8')
    result = runner.invoke(cli, ['summarize', str(path)])
    assert result.exit_code == 1
