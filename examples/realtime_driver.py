# examples/realtime_driver.py
# Drive the controller from a wall-clock loop, the way a UI frame callback would.
import time

from fall_sim import SimulationController, SimulationParams
from fall_sim.renderer import DebugRenderer

sim = SimulationController(SimulationParams(simulation_height=20.0))
renderer = DebugRenderer(verbose=False)

sim.toggle()
last = time.perf_counter()
frame = 0
while not sim.snapshot().is_terminated:
    time.sleep(1 / 30)
    now = time.perf_counter()
    sim.tick(now - last)
    last = now
    frame += 1
    if frame % 15 == 0:
        renderer.render_snapshot(sim.snapshot())

renderer.render_snapshot(sim.snapshot())
