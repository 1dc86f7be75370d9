# MIT License (see LICENSE)
"""
Core physics of the fall: force model, integrators and energy invariants.

This subpackage provides:
    - Force model: weight, Archimedes thrust, linear/quadratic drag.
    - Integrators: semi-implicit Euler (default) and RK4, sharing a ground clamp.
    - Invariants: energy formulas and closed-form reference values.

Typical usage:
    from fall_sim.core import initial_state, semi_implicit_euler_step

    state = initial_state(params)
    state, terminal = semi_implicit_euler_step(state, params, dt=1e-3)
"""
from .forces import (
    ForceBreakdown,
    compute_forces,
    gravity_force,
    archimedes_thrust,
    friction_force,
)
from .integrators import (
    StepResult,
    make_state,
    initial_state,
    semi_implicit_euler_step,
    rk4_step,
    get_integrator,
)
from .invariants import kinetic_energy, potential_energy, terminal_velocity, drag_free_impact

__all__ = [
    # Forces
    "ForceBreakdown",
    "compute_forces",
    "gravity_force",
    "archimedes_thrust",
    "friction_force",
    # Integrators
    "StepResult",
    "make_state",
    "initial_state",
    "semi_implicit_euler_step",
    "rk4_step",
    "get_integrator",
    # Invariants
    "kinetic_energy",
    "potential_energy",
    "terminal_velocity",
    "drag_free_impact",
]
