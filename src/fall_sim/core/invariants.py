# MIT License (see LICENSE)
"""
Energy formulas and closed-form reference values.

The integrator builds every KinematicState through these energy functions,
so KE + PE decomposition holds exactly for every recorded point. The
closed-form helpers give analytic targets to check the numerical solution
against.
"""
from __future__ import annotations
import math

from ..types import FrictionModel, SimulationParams
from .forces import archimedes_thrust, gravity_force


def kinetic_energy(mass: float, velocity: float) -> float:
    """KE = ½·m·v²."""
    return 0.5 * mass * velocity * velocity


def potential_energy(mass: float, gravity: float, height: float) -> float:
    """PE = m·g·h, measured from the ground."""
    return mass * gravity * height


def driving_force(params: SimulationParams) -> float:
    """Weight minus buoyancy, the velocity-independent part of the net force."""
    return gravity_force(params) - archimedes_thrust(params)


def terminal_velocity(params: SimulationParams) -> float | None:
    """
    Speed at which drag balances weight minus buoyancy.

      linear:    v_t = (m·g - ρ·V·g) / k
      quadratic: v_t = sqrt((m·g - ρ·V·g) / k)

    Returns None when there is no drag (k = 0), since the body then keeps
    accelerating. A negative result means buoyancy wins and the body rises.
    """
    k = params.friction_coefficient
    if k == 0:
        return None
    f = driving_force(params)
    if params.friction_model is FrictionModel.LINEAR:
        return f / k
    return math.copysign(math.sqrt(abs(f) / k), f)


def drag_free_impact(params: SimulationParams) -> tuple[float, float] | None:
    """
    Impact time and velocity for a fall without drag.

    With constant acceleration a = (m·g - ρ·V·g)/m and release velocity v0,
    the body covers height h when
      h = v0·t + ½·a·t²   and   v = sqrt(v0² + 2·a·h).

    Returns:
        (time, velocity) of impact, or None if the body never reaches the
        ground (it is pushed upward with no way back).
    """
    a = driving_force(params) / params.mass
    v0 = params.initial_velocity
    h = params.simulation_height
    disc = v0 * v0 + 2.0 * a * h
    if disc < 0 or (a < 0 and v0 <= 0):
        return None
    v = math.sqrt(disc)
    if a == 0:
        return (h / v0, v0) if v0 > 0 else None
    return (v - v0) / a, v
