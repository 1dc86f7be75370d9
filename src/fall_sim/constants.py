# MIT License (see LICENSE)
"""
Default values for the simulation engine and the falling body.

All quantities use SI units. Velocity and forces follow the downward-positive
convention: positive velocity means the body is moving toward the ground.
"""
from __future__ import annotations

from .util import env_float

# Fixed logical timestep of the integrator in seconds. Overridable through
# the FALL_SIM_DT environment variable.
DEFAULT_DT: float = env_float("FALL_SIM_DT", 0.001, positive=True)

# Upper bound on integrator steps drained by a single scheduler tick. Time
# beyond this bound is dropped rather than caught up.
DEFAULT_MAX_STEPS_PER_TICK: int = 250

# Standard gravity, https://physics.nist.gov/cgi-bin/cuu/Value?gn
STANDARD_GRAVITY: float = 9.81

# Density of dry air at sea level and 15 °C, kg/m³
SEA_LEVEL_AIR_DENSITY: float = 1.225

DEFAULT_MASS: float = 1.0
DEFAULT_FRICTION_COEFFICIENT: float = 0.1
DEFAULT_VOLUME: float = 0.001
DEFAULT_SIMULATION_HEIGHT: float = 100.0
DEFAULT_INITIAL_VELOCITY: float = 0.0

# Simulated-time ceiling for headless runs that never land (buoyancy
# stronger than weight, or an upward launch that never falls back).
BATCH_TIME_LIMIT: float = 3600.0
