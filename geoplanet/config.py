"""Draw-call configuration and its environment overrides."""

import math
import os
from dataclasses import dataclass, field

from .constants import (
    PLANET_RADIUS, STYLE_PROPERTY,
    ENV_AXIS_ANGLE, ENV_D_MIN, ENV_DISTANCE_MODE, ENV_STYLE_PROPERTY,
)
from .models import AxisConfig, DistanceMode
from .styles import DEFAULT_STYLES, DefaultStyles


@dataclass(frozen=True)
class PlanetOptions:
    axis_angle: float = 0.0                 # degrees
    d_min: float | None = None              # degrees; enables tessellation
    distance_mode: DistanceMode = DistanceMode.MIXED
    default_styles: DefaultStyles = field(default_factory=lambda: DEFAULT_STYLES)
    style_property: str = STYLE_PROPERTY
    radius: float = PLANET_RADIUS

    def __post_init__(self):
        object.__setattr__(self, 'distance_mode', DistanceMode.parse(self.distance_mode))
        if self.d_min is not None:
            d_min = float(self.d_min)
            if not d_min > 0:
                raise ValueError(f"d_min must be a positive number of degrees, got {self.d_min}")
            object.__setattr__(self, 'd_min', d_min)
        if not isinstance(self.default_styles, DefaultStyles):
            object.__setattr__(self, 'default_styles', DefaultStyles(self.default_styles))

    @property
    def axis(self) -> AxisConfig:
        return AxisConfig.from_degrees(self.axis_angle)

    @property
    def d_min_rad(self) -> float | None:
        return None if self.d_min is None else math.radians(self.d_min)

    @classmethod
    def from_env(cls, **overrides) -> 'PlanetOptions':
        """Build options from GEOPLANET_* variables; keyword arguments win."""
        env = {}
        if os.environ.get(ENV_AXIS_ANGLE, '').strip():
            env['axis_angle'] = float(os.environ[ENV_AXIS_ANGLE])
        if os.environ.get(ENV_D_MIN, '').strip():
            env['d_min'] = float(os.environ[ENV_D_MIN])
        if os.environ.get(ENV_DISTANCE_MODE, '').strip():
            env['distance_mode'] = os.environ[ENV_DISTANCE_MODE]
        if os.environ.get(ENV_STYLE_PROPERTY, '').strip():
            env['style_property'] = os.environ[ENV_STYLE_PROPERTY].strip()
        env.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**env)
