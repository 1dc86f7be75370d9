# examples/drag_comparison.py
# Run the same drop with the linear and the quadratic drag law and overlay them.
from fall_sim import FrictionModel, SimulationController, SimulationParams
from fall_sim.core import terminal_velocity

params = SimulationParams(mass=2.0, friction_coefficient=0.5, simulation_height=300.0)
sim = SimulationController(params)

sim.set_params(friction_model=FrictionModel.LINEAR)
sim.reset()
sim.run_until_terminated()
baseline = sim.freeze_history()

sim.set_params(friction_model="kv2")
sim.reset()
final = sim.run_until_terminated()

print(f"linear:    landed t={baseline[-1].time:.3f} s  v={baseline[-1].velocity:.3f} m/s"
      f"  (v_t={terminal_velocity(params.replace(friction_model='kv')):.3f})")
print(f"quadratic: landed t={final.time:.3f} s  v={final.velocity:.3f} m/s"
      f"  (v_t={terminal_velocity(params.replace(friction_model='kv2')):.3f})")
