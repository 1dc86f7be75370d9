# examples/minimal_fall.py
import logging

from fall_sim import SimulationController, SimulationParams
from fall_sim.logging_config import setup_logging

setup_logging(logging.INFO)

params = SimulationParams(
    mass=1.0,
    friction_coefficient=0.0,
    air_density=0.0,
    simulation_height=100.0,
    gravity=9.8,
)
sim = SimulationController(params, dt=1e-3)
final = sim.run_until_terminated()

print("t:", final.time)
print("v:", final.velocity)
print("points:", len(final.history))
