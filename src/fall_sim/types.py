# MIT License (see LICENSE)
"""
Core type definitions for the vertical fall simulation.

Defines the fundamental data structures:
- FrictionModel: linear (kv) or quadratic (kv2) air-drag law.
- SimulationParams: the validated, immutable physical configuration.
- KinematicState: one instant of the body's motion with its forces and energies.
- SimulationState: the read-only snapshot published by the controller.

Sign convention: the axis points down. Positive velocity moves the body
toward the ground, `position` is the remaining height above it:
  dx/dt = -v          (height decreases while falling)
  dv/dt = F_net / m
"""
from __future__ import annotations
from collections.abc import Sequence
from dataclasses import dataclass, field, fields, replace as _replace
from enum import Enum
from typing import Any, Callable

from . import constants
from .errors import InvalidParameterError
from .util import is_finite_number


# =============================================================================
# Friction model
# =============================================================================

class FrictionModel(str, Enum):
    """
    Air-drag force law.

    The enum values are the short names used in parameter files:
      LINEAR    ("kv"):  F = -k·v
      QUADRATIC ("kv2"): F = -k·v·|v|
    """
    LINEAR = "kv"
    QUADRATIC = "kv2"

    @classmethod
    def parse(cls, value: "FrictionModel | str") -> "FrictionModel":
        """Accept an enum member, a wire value ("kv", "kv2") or a name ("linear")."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member
        raise InvalidParameterError("friction_model", value, "expected 'kv'/'linear' or 'kv2'/'quadratic'")


# =============================================================================
# Parameters
# =============================================================================

def _positive(x: float) -> bool:
    return x > 0


def _non_negative(x: float) -> bool:
    return x >= 0


def _any(x: float) -> bool:
    return True


# field name -> (predicate, description of the domain)
_NUMERIC_DOMAINS: dict[str, tuple[Callable[[float], bool], str]] = {
    "mass": (_positive, "must be > 0"),
    "friction_coefficient": (_non_negative, "must be >= 0"),
    "volume": (_non_negative, "must be >= 0"),
    "air_density": (_non_negative, "must be >= 0"),
    "simulation_height": (_positive, "must be > 0"),
    "gravity": (_positive, "must be > 0"),
    "initial_velocity": (_any, "must be finite"),
}


def validate_param(name: str, value: Any) -> Any:
    """
    Check a single parameter against its physical domain.

    Returns the normalized value (float, or FrictionModel for friction_model).

    Raises:
        TypeError: If `name` is not a SimulationParams field.
        InvalidParameterError: If the value is outside the field's domain.
    """
    if name == "friction_model":
        return FrictionModel.parse(value)
    if name not in _NUMERIC_DOMAINS:
        raise TypeError(f"Unknown simulation parameter: {name!r}")
    if not is_finite_number(value):
        raise InvalidParameterError(name, value, "must be a finite number")
    predicate, reason = _NUMERIC_DOMAINS[name]
    x = float(value)
    if not predicate(x):
        raise InvalidParameterError(name, value, reason)
    return x


@dataclass(frozen=True)
class SimulationParams:
    """
    Physical configuration of the falling body and its environment.

    Instances are immutable and always valid: construction checks every
    field and raises InvalidParameterError on the first violation.

    Attributes:
        mass: Body mass in kg (> 0).
        friction_coefficient: Drag coefficient k (>= 0). Units are N·s/m for
            the linear model and N·s²/m² for the quadratic one.
        volume: Body volume in m³ (>= 0), used for buoyancy.
        air_density: Density of the surrounding fluid in kg/m³ (>= 0).
        simulation_height: Release height above ground in m (> 0).
        friction_model: Linear (kv) or quadratic (kv2) drag law.
        gravity: Gravitational acceleration in m/s² (> 0).
        initial_velocity: Velocity at release in m/s, downward positive.
    """
    mass: float = constants.DEFAULT_MASS
    friction_coefficient: float = constants.DEFAULT_FRICTION_COEFFICIENT
    volume: float = constants.DEFAULT_VOLUME
    air_density: float = constants.SEA_LEVEL_AIR_DENSITY
    simulation_height: float = constants.DEFAULT_SIMULATION_HEIGHT
    friction_model: FrictionModel = FrictionModel.QUADRATIC
    gravity: float = constants.STANDARD_GRAVITY
    initial_velocity: float = constants.DEFAULT_INITIAL_VELOCITY

    def __post_init__(self) -> None:
        """Validate and normalize every field (ints become floats, strings become FrictionModel)."""
        for f in fields(self):
            object.__setattr__(self, f.name, validate_param(f.name, getattr(self, f.name)))

    def replace(self, **changes: Any) -> "SimulationParams":
        """Return a new validated instance with `changes` applied."""
        return _replace(self, **changes)

    def as_dict(self) -> dict[str, Any]:
        """Field name -> value mapping."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


PARAM_NAMES: tuple[str, ...] = tuple(f.name for f in fields(SimulationParams))


# =============================================================================
# Kinematic state
# =============================================================================

@dataclass(frozen=True)
class KinematicState:
    """
    The body's motion at one instant, with the forces acting on it.

    Build instances through `fall_sim.core.integrators.make_state`, which
    derives forces and energies from (time, position, velocity) so that the
    energy terms always satisfy KE = ½·m·v² and PE = m·g·h.

    Attributes:
        time: Simulated time in s.
        position: Height above ground in m (never negative).
        velocity: Velocity in m/s, downward positive.
        acceleration: Net acceleration in m/s², downward positive.
        net_force: Sum of all forces in N.
        gravity_force: Weight m·g in N (positive, downward).
        friction_force: Air drag in N (opposes velocity).
        archimedes_thrust: Buoyant force magnitude ρ·V·g in N (acts upward).
        kinetic_energy: ½·m·v² in J.
        potential_energy: m·g·h in J.
    """
    time: float
    position: float
    velocity: float
    acceleration: float
    net_force: float
    gravity_force: float
    friction_force: float
    archimedes_thrust: float
    kinetic_energy: float
    potential_energy: float

    @property
    def total_energy(self) -> float:
        """Mechanical energy KE + PE in J."""
        return self.kinetic_energy + self.potential_energy

    def as_dict(self) -> dict[str, float]:
        """All fields plus total_energy."""
        d = {f.name: getattr(self, f.name) for f in fields(self)}
        d["total_energy"] = self.total_energy
        return d


# A history point is a recorded KinematicState; being frozen it never changes
# after it is appended.
SimulationHistoryPoint = KinematicState


# =============================================================================
# Snapshot
# =============================================================================

class Phase(str, Enum):
    """Controller lifecycle phase."""
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class SimulationState:
    """
    Immutable snapshot of the whole simulation.

    Attributes:
        params: Parameters currently held by the controller. Once a step
            has run since the last change, they are the ones that produced
            `state`.
        phase: Lifecycle phase at the time of the snapshot.
        state: Current kinematic state.
        history: Recorded points in strictly increasing time order, as an
            immutable sequence (a tuple or a history.HistoryView).
    """
    params: SimulationParams
    phase: Phase
    state: KinematicState
    history: Sequence[SimulationHistoryPoint] = field(default_factory=tuple)

    @property
    def is_running(self) -> bool:
        return self.phase is Phase.RUNNING

    @property
    def is_terminated(self) -> bool:
        return self.phase is Phase.TERMINATED

    # Read-through access to the current kinematic fields
    @property
    def time(self) -> float:
        return self.state.time

    @property
    def position(self) -> float:
        return self.state.position

    @property
    def velocity(self) -> float:
        return self.state.velocity

    @property
    def acceleration(self) -> float:
        return self.state.acceleration

    @property
    def net_force(self) -> float:
        return self.state.net_force

    @property
    def gravity_force(self) -> float:
        return self.state.gravity_force

    @property
    def friction_force(self) -> float:
        return self.state.friction_force

    @property
    def archimedes_thrust(self) -> float:
        return self.state.archimedes_thrust

    @property
    def kinetic_energy(self) -> float:
        return self.state.kinetic_energy

    @property
    def potential_energy(self) -> float:
        return self.state.potential_energy

    @property
    def total_energy(self) -> float:
        return self.state.total_energy
