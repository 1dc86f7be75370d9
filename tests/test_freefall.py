# MIT License (see LICENSE)
import math

import pytest

from fall_sim.controller import SimulationController
from fall_sim.core.invariants import drag_free_impact
from fall_sim.types import Phase, SimulationParams


def _vacuum_drop() -> SimulationParams:
    return SimulationParams(
        mass=1.0,
        friction_coefficient=0.0,
        air_density=0.0,
        gravity=9.8,
        simulation_height=100.0,
        initial_velocity=0.0,
    )


@pytest.mark.parametrize("integrator", ["euler", "rk4"])
def test_freefall_impact(integrator):
    """
    Analytic (no drag, no buoyancy):
      t = sqrt(2h/g) ≈ 4.5175 s
      v = sqrt(2gh)  ≈ 44.272 m/s
    The clamp lands on the first step past the ground, so the numerical
    impact time overshoots by at most one dt.
    """
    params = _vacuum_drop()
    dt = 1e-3
    sim = SimulationController(params, dt=dt, integrator=integrator)
    final = sim.run_until_terminated()

    t_exp = math.sqrt(2 * params.simulation_height / params.gravity)
    v_exp = math.sqrt(2 * params.gravity * params.simulation_height)
    print("freefall t", final.time, "exp", t_exp)
    print("freefall v", final.velocity, "exp", v_exp)

    assert final.phase is Phase.TERMINATED
    assert final.position == 0.0
    assert abs(final.time - 4.515) < 0.01
    assert abs(final.velocity - 44.25) < 0.05
    assert abs(final.time - t_exp) <= 2 * dt
    assert abs(final.velocity - v_exp) / v_exp <= 1e-3


def test_closed_form_matches_helper():
    t, v = drag_free_impact(_vacuum_drop())
    assert t == pytest.approx(math.sqrt(200 / 9.8))
    assert v == pytest.approx(math.sqrt(2 * 9.8 * 100))


def test_energy_nearly_conserved_without_drag():
    """Without dissipation total energy should stay at m·g·h within O(dt)."""
    params = _vacuum_drop()
    sim = SimulationController(params, dt=1e-3)
    final = sim.run_until_terminated()

    e0 = params.mass * params.gravity * params.simulation_height
    drift = max(abs(p.total_energy - e0) for p in final.history) / e0
    print("max relative energy drift", drift)
    assert drift < 1e-2


def test_energy_decomposition_every_point():
    sim = SimulationController(SimulationParams(friction_coefficient=0.3), dt=1e-3)
    final = sim.run_until_terminated()
    m, g = final.params.mass, final.params.gravity

    assert len(final.history) > 0
    for p in final.history:
        assert p.total_energy == p.kinetic_energy + p.potential_energy
        assert p.kinetic_energy == 0.5 * m * p.velocity * p.velocity
        assert p.potential_energy == m * g * p.position
