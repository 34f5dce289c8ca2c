"""Click CLI commands for geoplanet."""

import json
import logging
import math

import click

from .builder import PlanetBuilder
from .config import PlanetOptions
from .distance import METRICS
from .models import AxisConfig
from .projection import project_point, to_radians

logger = logging.getLogger(__name__)

MODE_CHOICES = ['mixed', 'max', 'chord', 'arc']


def _options(axis_angle, d_min, distance_mode) -> PlanetOptions:
    try:
        return PlanetOptions.from_env(axis_angle=axis_angle, d_min=d_min,
                                      distance_mode=distance_mode)
    except ValueError as e:
        raise click.BadParameter(str(e))


@click.group()
def cli():
    """geoplanet CLI for projecting GeoJSON data onto a tilted globe."""
    pass


@cli.command()
@click.argument('lon', type=float)
@click.argument('lat', type=float)
@click.option('--axis-angle', '-a', default=0.0, help='Polar axis tilt in degrees')
@click.option('--radius', '-r', default=1.0, help='Sphere radius')
def project(lon: float, lat: float, axis_angle: float, radius: float):
    """Print the sphere position of a longitude/latitude pair."""
    x, y, z = project_point(lon, lat, AxisConfig.from_degrees(axis_angle), radius)
    click.echo(f"{x:.6f} {y:.6f} {z:.6f}")


@cli.command()
@click.argument('lon1', type=float)
@click.argument('lat1', type=float)
@click.argument('lon2', type=float)
@click.argument('lat2', type=float)
def distance(lon1: float, lat1: float, lon2: float, lat2: float):
    """Print the distance between two points, in degrees, for every metric."""
    p1, p2 = to_radians([(lon1, lat1), (lon2, lat2)])
    for mode, metric in METRICS.items():
        click.echo(f"{mode.name.lower():<15} {math.degrees(metric(p1, p2)):.6f}")


@cli.command()
@click.argument('geojson_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--axis-angle', '-a', type=float, default=None, help='Polar axis tilt in degrees')
@click.option('--d-min', '-d', type=float, default=None,
              help='Maximum segment length in degrees; enables tessellation')
@click.option('--distance-mode', '-m', type=click.Choice(MODE_CHOICES), default=None,
              help='Distance function used for tessellation')
@click.option('--styles', '-s', 'styles_file', type=click.Path(exists=True, dir_okay=False),
              default=None, help='JSON file with a list of per-kind style substitutions')
def summarize(geojson_file: str, axis_angle, d_min, distance_mode, styles_file):
    """Project a GeoJSON file and report what would be drawn."""
    options = _options(axis_angle, d_min, distance_mode)
    try:
        with open(geojson_file, encoding='utf-8') as f:
            data = json.load(f)
        substitutions = None
        if styles_file:
            with open(styles_file, encoding='utf-8') as f:
                substitutions = json.load(f)
            if not isinstance(substitutions, list):
                substitutions = [substitutions]
    except json.JSONDecodeError as e:
        logger.error(f"Error reading JSON: {e}")
        raise click.ClickException(str(e))

    builder = PlanetBuilder(options)
    builder.draw_geojson(data, substitutions)

    summary = builder.sink.summary()
    click.echo(f"distance mode: {options.distance_mode.name.lower()}")
    click.echo(f"marker batches: {summary['marker_batches']}")
    click.echo(f"markers: {summary['markers']}")
    click.echo(f"polylines: {summary['polylines']}")
    click.echo(f"vertices: {summary['vertices']}")
