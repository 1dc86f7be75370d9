"""
Microbenchmark: cost per integrator step for each integrator and drag law.
Run:
  python benchmarks/bench_steps.py
"""
import time

from fall_sim import FrictionModel, SimulationController, SimulationParams
from fall_sim.profiler import Profiler


def run(integrator: str, model: FrictionModel, dt: float = 1e-4):
    prof = Profiler()
    params = SimulationParams(friction_model=model, simulation_height=1000.0)
    sim = SimulationController(params, dt=dt, integrator=integrator, profiler=prof)

    t0 = time.perf_counter()
    final = sim.run_until_terminated()
    t1 = time.perf_counter()

    steps = len(final.history)
    return steps, (t1 - t0) / steps, final, prof.stats.summary()


if __name__ == "__main__":
    for integrator in ["euler", "rk4"]:
        for model in FrictionModel:
            steps, per_step, final, summary = run(integrator, model)
            print(f"{integrator:5s} {model.name:9s} steps={steps:7d}  step={1e6*per_step:7.2f} us"
                  f"  landed t={final.time:.4f} v={final.velocity:.4f}")
            print(" ", "step", summary["step"])
        print()
