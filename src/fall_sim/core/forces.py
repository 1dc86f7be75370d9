# MIT License (see LICENSE)
"""
Force model for a body falling vertically through a fluid.

Three forces act on the body (downward positive):
  Weight:            F_g = m·g                       (always positive)
  Archimedes thrust: F_a = ρ·V·g                     (always opposes gravity)
  Air drag:          F_f = -k·v      (linear, kv)
                     F_f = -k·v·|v|  (quadratic, kv2)

  F_net = F_g - F_a + F_f,   a = F_net / m

Every function here is pure. They are total over validated parameters:
SimulationParams guarantees m > 0, so the division in compute_forces is safe.
"""
from __future__ import annotations
from typing import NamedTuple

from ..types import FrictionModel, KinematicState, SimulationParams
from ..util import signed_square


class ForceBreakdown(NamedTuple):
    """The individual forces, their sum and the resulting acceleration."""
    gravity_force: float
    friction_force: float
    archimedes_thrust: float
    net_force: float
    acceleration: float


def gravity_force(params: SimulationParams) -> float:
    """Weight of the body, m·g."""
    return params.mass * params.gravity


def archimedes_thrust(params: SimulationParams) -> float:
    """Weight of the displaced fluid, ρ·V·g. Returned as a magnitude."""
    return params.air_density * params.volume * params.gravity


def friction_force(velocity: float, params: SimulationParams) -> float:
    """
    Air drag at the given velocity. Always opposes the motion.

    Args:
        velocity: Current velocity in m/s, downward positive.
        params: Supplies the coefficient k and the drag law.
    """
    k = params.friction_coefficient
    if params.friction_model is FrictionModel.LINEAR:
        return -k * velocity
    return -k * signed_square(velocity)


def forces_at(velocity: float, params: SimulationParams) -> ForceBreakdown:
    """Evaluate the force model at a bare velocity."""
    fg = gravity_force(params)
    fa = archimedes_thrust(params)
    ff = friction_force(velocity, params)
    net = fg - fa + ff
    return ForceBreakdown(
        gravity_force=fg,
        friction_force=ff,
        archimedes_thrust=fa,
        net_force=net,
        acceleration=net / params.mass,
    )


def compute_forces(state: KinematicState, params: SimulationParams) -> ForceBreakdown:
    """
    Forces and acceleration for a kinematic state.

    Only the velocity of `state` matters: gravity and buoyancy are uniform,
    and drag depends on velocity alone.
    """
    return forces_at(state.velocity, params)
