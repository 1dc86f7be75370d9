# MIT License (see LICENSE)
"""
fall_sim - Vertical fall of a body under gravity, air drag and buoyancy.

The package simulates a single body dropped from a height, integrating its
motion with a fixed timestep and recording every state for charting.

Main entry points:
    - SimulationController: start/pause/reset state machine with snapshots.
    - SimulationParams: Validated physical configuration.
    - FrictionModel: Linear (kv) or quadratic (kv2) drag law.
    - SimulationState: Immutable snapshot returned by the controller.

Submodules:
    - core: Force model, integrators, energy invariants.
    - history: Append-only time-ordered state log.
    - scheduler: Fixed-step accumulator loop.
    - io: JSON parameter files and history export.
    - renderer: Optional presentation adapters.

Example:
    from fall_sim import SimulationController, SimulationParams

    sim = SimulationController(SimulationParams(simulation_height=50.0))
    sim.toggle()
    sim.tick(1 / 60)
    print(sim.snapshot().position)
"""
from .controller import SimulationController
from .errors import FallSimError, InvalidParameterError, OrderingViolationError
from .history import HistoryLog
from .params import ParameterStore
from .scheduler import FixedStepScheduler
from .types import (
    FrictionModel,
    KinematicState,
    Phase,
    SimulationHistoryPoint,
    SimulationParams,
    SimulationState,
)

__all__ = [
    # Control
    "SimulationController",
    "FixedStepScheduler",
    "ParameterStore",
    "HistoryLog",
    # Data model
    "SimulationParams",
    "FrictionModel",
    "KinematicState",
    "SimulationHistoryPoint",
    "SimulationState",
    "Phase",
    # Errors
    "FallSimError",
    "InvalidParameterError",
    "OrderingViolationError",
]
