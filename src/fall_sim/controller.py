# MIT License (see LICENSE)
"""
Simulation controller: the state machine behind the command/query surface.

The controller owns everything mutable about a simulation run:
- the ParameterStore with the user's current parameters,
- the current KinematicState and the HistoryLog,
- the FixedStepScheduler driving the integrator.

Lifecycle:
    IDLE --toggle--> RUNNING --toggle--> PAUSED --toggle--> RUNNING ...
    RUNNING --(ground reached)--> TERMINATED
    any --reset--> IDLE

Parameter changes apply from the next step: set_params() replaces the stored
parameters and the integrator reads them on every step. Only the release
point (height and initial velocity) waits for reset(), since the body is
already in flight.

Structure:
    - User creates a SimulationController (optionally with params).
    - An external driver calls tick(elapsed) periodically.
    - Commands (toggle, reset, set_params) are called between ticks.
    - Readers call snapshot() and get an immutable SimulationState.
"""
from __future__ import annotations
import logging
import math
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import numpy as np

from . import constants
from .core.integrators import get_integrator, initial_state
from .history import HistoryLog
from .params import ParameterStore
from .profiler import Profiler
from .scheduler import FixedStepScheduler
from .types import KinematicState, Phase, SimulationHistoryPoint, SimulationParams, SimulationState

if TYPE_CHECKING:
    from .renderer.adapter import RendererAdapter

logger = logging.getLogger(__name__)


class SimulationController:
    """
    Single-body fall simulation with start/pause/reset control.

    Attributes:
        renderer: Optional RendererAdapter receiving every published snapshot.

    Args:
        params: Initial parameters (defaults to SimulationParams()).
        dt: Fixed integrator timestep in seconds.
        integrator: "euler" (semi-implicit, default) or "rk4".
        max_steps_per_tick: Cap on steps per tick() call, None for no cap.
        renderer: Optional presentation adapter.
        profiler: Optional Profiler timing each step.
    """

    def __init__(
        self,
        params: SimulationParams | None = None,
        dt: float = constants.DEFAULT_DT,
        integrator: str = "euler",
        max_steps_per_tick: int | None = constants.DEFAULT_MAX_STEPS_PER_TICK,
        renderer: "RendererAdapter | None" = None,
        profiler: Profiler | None = None,
    ) -> None:
        self._store = ParameterStore(params)
        self._integrate = get_integrator(integrator)
        self.integrator = integrator
        self._history = HistoryLog()
        self._scheduler = FixedStepScheduler(
            dt, self._advance, max_steps_per_tick=max_steps_per_tick, profiler=profiler
        )
        self.renderer = renderer

        self._state = initial_state(self._store.params)
        self._phase = Phase.IDLE
        self._snapshot: SimulationState | None = None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def is_running(self) -> bool:
        return self._phase is Phase.RUNNING

    @property
    def params(self) -> SimulationParams:
        """Current parameters, used by the next integrator step."""
        return self._store.params

    @property
    def state(self) -> KinematicState:
        return self._state

    @property
    def dt(self) -> float:
        return self._scheduler.dt

    def snapshot(self) -> SimulationState:
        """Current immutable aggregate of params, phase, state and history."""
        if self._snapshot is None:
            self._snapshot = SimulationState(
                params=self._store.params,
                phase=self._phase,
                state=self._state,
                history=self._history.points,
            )
        return self._snapshot

    def freeze_history(self) -> tuple[SimulationHistoryPoint, ...]:
        """
        Independent copy of the history, e.g. to overlay as a comparison baseline.

        The copy is never touched by later steps, resets or parameter changes.
        """
        return self._history.freeze()

    def history_arrays(self) -> dict[str, np.ndarray]:
        """History as float64 columns keyed by field name."""
        return self._history.as_arrays()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def set_params(self, partial: Mapping[str, Any] | None = None, **changes: Any) -> set[str]:
        """
        Validate and store new parameter values.

        Out-of-domain fields are rejected one by one and keep their previous
        value. Accepted values drive the integrator from the next step on.
        The current state is left as it is, so a new height or initial
        velocity only moves the release point at the next reset().

        Returns:
            Names of rejected fields (empty when everything applied).
        """
        rejected = self._store.update(partial, **changes)
        self._publish()
        return rejected

    def toggle(self) -> None:
        """Start, pause or resume. Has no effect once the body has landed."""
        if self._phase is Phase.TERMINATED:
            logger.debug("toggle() ignored: simulation has terminated")
            return
        if self._phase is Phase.RUNNING:
            self._scheduler.stop()
            self._phase = Phase.PAUSED
            logger.info("Simulation paused at t=%.3f s", self._state.time)
        else:
            self._scheduler.start()
            self._phase = Phase.RUNNING
            logger.info("Simulation running from t=%.3f s", self._state.time)
        self._publish()

    def reset(self) -> None:
        """Return to IDLE at the release point of the current parameters."""
        self._scheduler.stop()
        self._state = initial_state(self._store.params)
        self._history.clear()
        self._phase = Phase.IDLE
        logger.info("Simulation reset")
        self._publish()

    # ------------------------------------------------------------------
    # Driving
    # ------------------------------------------------------------------

    def tick(self, elapsed: float) -> int:
        """
        Forward wall-clock time from the external driver.

        Args:
            elapsed: Seconds since the previous tick.

        Returns:
            Number of integrator steps taken.
        """
        steps = self._scheduler.tick(elapsed)
        if steps:
            self._publish()
        return steps

    def run_until_terminated(self, max_time: float | None = None) -> SimulationState:
        """
        Integrate back-to-back until the body lands or `max_time` is reached.

        Starts the run if needed. If the time limit is hit first the
        simulation is left PAUSED.

        Args:
            max_time: Simulated time limit in seconds. Defaults to
                constants.BATCH_TIME_LIMIT, which bounds runs where buoyancy
                keeps the body from ever landing.

        Returns:
            The final snapshot.
        """
        if self._phase is Phase.TERMINATED:
            return self.snapshot()
        limit = constants.BATCH_TIME_LIMIT if max_time is None else max_time
        max_steps = max(0, math.ceil((limit - self._state.time) / self.dt - 1e-9))

        if self._phase is not Phase.RUNNING:
            self._scheduler.start()
            self._phase = Phase.RUNNING
        self._scheduler.run(max_steps)
        if self._phase is Phase.RUNNING:
            self._scheduler.stop()
            self._phase = Phase.PAUSED
            logger.info("Time limit %.3f s reached before landing", limit)
        self._publish()
        return self.snapshot()

    def _advance(self) -> bool:
        """One integrator step. Returns False once the ground is reached."""
        result = self._integrate(self._state, self._store.params, self.dt)
        self._state = result.state
        self._history.append(result.state)
        if result.terminal:
            self._phase = Phase.TERMINATED
            logger.info(
                "Body landed at t=%.3f s with v=%.3f m/s", self._state.time, self._state.velocity
            )
            return False
        return True

    def _publish(self) -> None:
        self._snapshot = None
        if self.renderer is not None:
            self.renderer.render_snapshot(self.snapshot())
