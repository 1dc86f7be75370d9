# MIT License (see LICENSE)
"""
Fixed-step scheduler decoupling simulated time from the display cadence.

An external driver (frame callback, timer, game loop) calls tick(elapsed)
with the wall-clock time since its last call. The scheduler accumulates that
time and drains it in whole `dt` increments, running one integrator step per
increment. Any remainder smaller than dt carries over to the next tick, so
the trajectory is identical whether the driver runs at 30 Hz or 144 Hz.

Structure:
    - step(): callback doing exactly one integrator step. Returning False
      means "nothing left to simulate" and stops the scheduler.
    - start()/stop(): gate whether ticks are consumed. Stopping discards the
      accumulator; a stop never interrupts a step in flight because steps
      are atomic calls.
"""
from __future__ import annotations
import logging
from typing import Callable

from .profiler import Profiler

logger = logging.getLogger(__name__)

# Relative slack when comparing the accumulator with dt, so that e.g. three
# ticks of dt/3 yield exactly one step despite float rounding.
_ACCUMULATOR_EPS = 1e-9


class FixedStepScheduler:
    """
    Accumulator-driven fixed-step loop.

    Attributes:
        dt: Logical timestep in seconds.
        max_steps_per_tick: Optional cap on steps drained by one tick. Time
            left over when the cap is hit is dropped, not caught up later.
        profiler: Optional Profiler; each step is timed under "step".
    """

    def __init__(
        self,
        dt: float,
        step: Callable[[], bool],
        max_steps_per_tick: int | None = None,
        profiler: Profiler | None = None,
    ) -> None:
        if not dt > 0:
            raise ValueError(f"dt must be > 0, got {dt!r}")
        if max_steps_per_tick is not None and max_steps_per_tick < 1:
            raise ValueError(f"max_steps_per_tick must be >= 1, got {max_steps_per_tick!r}")
        self.dt = float(dt)
        self.max_steps_per_tick = max_steps_per_tick
        self.profiler = profiler
        self._step = step
        self._running = False
        self._accumulator = 0.0
        self.steps_taken = 0

    @property
    def running(self) -> bool:
        return self._running

    @property
    def accumulator(self) -> float:
        """Wall-clock time received but not yet simulated, in seconds."""
        return self._accumulator

    def start(self) -> None:
        """Begin consuming ticks."""
        self._running = True

    def stop(self) -> None:
        """Stop consuming ticks and discard pending time."""
        self._running = False
        self._accumulator = 0.0

    def _run_step(self) -> bool:
        self.steps_taken += 1
        if self.profiler:
            with self.profiler.section("step"):
                return bool(self._step())
        return bool(self._step())

    def tick(self, elapsed: float) -> int:
        """
        Feed wall-clock time and run as many whole steps as it covers.

        Args:
            elapsed: Seconds since the previous tick (>= 0).

        Returns:
            Number of steps executed.
        """
        if elapsed < 0:
            raise ValueError(f"elapsed must be >= 0, got {elapsed!r}")
        if not self._running:
            return 0

        self._accumulator += elapsed
        slack = self.dt * _ACCUMULATOR_EPS
        steps = 0
        while self._running and self._accumulator + slack >= self.dt:
            if self.max_steps_per_tick is not None and steps >= self.max_steps_per_tick:
                logger.debug("Tick capped at %d steps, dropping %.6f s", steps, self._accumulator)
                self._accumulator = 0.0
                break
            self._accumulator = max(0.0, self._accumulator - self.dt)
            steps += 1
            if not self._run_step():
                self.stop()
        return steps

    def run(self, max_steps: int | None = None) -> int:
        """
        Step back-to-back, ignoring wall-clock time.

        Runs until a step returns False, the scheduler is stopped, or
        `max_steps` steps have been taken. Used for headless batch runs.

        Returns:
            Number of steps executed.
        """
        steps = 0
        while self._running and (max_steps is None or steps < max_steps):
            steps += 1
            if not self._run_step():
                self.stop()
        return steps
