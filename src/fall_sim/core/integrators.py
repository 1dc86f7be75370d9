# MIT License (see LICENSE)
"""
Fixed-step integrators for the one-dimensional fall.

State vector (x, v) with x the height above ground and v the downward
velocity:
    dx/dt = -v,        dv/dt = a(v) = F_net(v) / m

Available integrators:
- semi_implicit_euler_step: symplectic Euler, velocity first (default)
- rk4_step: classical 4th-order Runge-Kutta with drag re-evaluated per stage

Both share the ground policy: when the new height is <= 0 it is clamped to
exactly 0, the velocity keeps its last computed value (no impact
interpolation) and the step is reported as terminal.

Reference:
    Semi-implicit Euler: https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
    Runge-Kutta methods: https://en.wikipedia.org/wiki/Runge-Kutta_methods
"""
from __future__ import annotations
from typing import Callable, NamedTuple

from ..types import KinematicState, SimulationParams
from .forces import forces_at, compute_forces
from .invariants import kinetic_energy, potential_energy


class StepResult(NamedTuple):
    """Outcome of one integrator step."""
    state: KinematicState
    terminal: bool


Integrator = Callable[[KinematicState, SimulationParams, float], StepResult]


def make_state(time: float, position: float, velocity: float, params: SimulationParams) -> KinematicState:
    """
    Build a self-consistent KinematicState from (t, x, v).

    Forces are evaluated at `velocity`, energies come from the KE/PE formulas.
    This is the only place kinematic states are assembled.
    """
    f = forces_at(velocity, params)
    return KinematicState(
        time=time,
        position=position,
        velocity=velocity,
        acceleration=f.acceleration,
        net_force=f.net_force,
        gravity_force=f.gravity_force,
        friction_force=f.friction_force,
        archimedes_thrust=f.archimedes_thrust,
        kinetic_energy=kinetic_energy(params.mass, velocity),
        potential_energy=potential_energy(params.mass, params.gravity, position),
    )


def initial_state(params: SimulationParams) -> KinematicState:
    """State at release: t = 0, x = simulation_height, v = initial_velocity."""
    return make_state(0.0, params.simulation_height, params.initial_velocity, params)


def _finish(
    state: KinematicState,
    position: float,
    velocity: float,
    params: SimulationParams,
    dt: float,
) -> StepResult:
    """Apply the ground clamp and assemble the next state."""
    terminal = position <= 0.0
    if terminal:
        position = 0.0
    return StepResult(make_state(state.time + dt, position, velocity, params), terminal)


def semi_implicit_euler_step(state: KinematicState, params: SimulationParams, dt: float) -> StepResult:
    """
    Advance by dt with semi-implicit (symplectic) Euler.

        v' = v + a(v)·dt
        x' = x - v'·dt

    The position update uses the already updated velocity, which keeps the
    scheme stable for the stiff drag regimes the quadratic model produces.

    Args:
        state: Current state.
        params: Validated parameters.
        dt: Timestep in seconds.

    Returns:
        The next state and whether it touched the ground.
    """
    a = compute_forces(state, params).acceleration
    v = state.velocity + a * dt
    x = state.position - v * dt
    return _finish(state, x, v, params, dt)


def rk4_step(state: KinematicState, params: SimulationParams, dt: float) -> StepResult:
    """
    Advance by dt with classical 4th-order Runge-Kutta.

    Unlike a rigid-body RK4 that holds forces constant over the step, drag
    here depends on velocity, so acceleration is re-evaluated at each stage.
    """
    def accel(v: float) -> float:
        return forces_at(v, params).acceleration

    v0 = state.velocity

    k1v = accel(v0)
    k1x = -v0
    v_mid1 = v0 + 0.5 * dt * k1v
    k2v = accel(v_mid1)
    k2x = -v_mid1
    v_mid2 = v0 + 0.5 * dt * k2v
    k3v = accel(v_mid2)
    k3x = -v_mid2
    v_end = v0 + dt * k3v
    k4v = accel(v_end)
    k4x = -v_end

    v = v0 + (dt / 6.0) * (k1v + 2 * k2v + 2 * k3v + k4v)
    x = state.position + (dt / 6.0) * (k1x + 2 * k2x + 2 * k3x + k4x)
    return _finish(state, x, v, params, dt)


INTEGRATORS: dict[str, Integrator] = {
    "euler": semi_implicit_euler_step,
    "rk4": rk4_step,
}


def get_integrator(name: str) -> Integrator:
    """Look up an integrator by name ("euler" or "rk4")."""
    try:
        return INTEGRATORS[name]
    except KeyError:
        raise ValueError(f"Unknown integrator: {name}") from None
