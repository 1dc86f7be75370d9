# MIT License (see LICENSE)
"""
Presentation adapters consuming simulation snapshots.

Charts, canvases and data panels live outside the core. They plug in by
subclassing RendererAdapter; the controller hands them an immutable
SimulationState after every tick that advanced the body and after every
command. Adapters must treat what they receive as read-only.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TextIO
import sys

from ..types import SimulationState


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        renderer.begin_frame(snapshot.time)
        renderer.draw_state(snapshot)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_snapshot(snapshot)
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame.

        Args:
            time: Simulated time of the snapshot in seconds.
        """
        ...

    @abstractmethod
    def draw_state(self, snapshot: SimulationState) -> None:
        """Draw the body, its forces and whatever history the adapter charts."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_snapshot(self, snapshot: SimulationState) -> None:
        """Render one snapshot as a complete frame."""
        self.begin_frame(snapshot.time)
        self.draw_state(snapshot)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer for development and testing.

    Output:
        === Frame t=1.2340 [running] ===
        h=92.53 m  v=12.02 m/s  a=8.47 m/s²
        F: weight=9.81 drag=-1.44 thrust=0.01 net=8.36 N
        E: KE=72.24 PE=907.72 total=979.96 J
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include forces and energies.
        """
        self.output = output or sys.stdout
        self.verbose = verbose
        self._time = 0.0

    def begin_frame(self, time: float) -> None:
        self._time = time

    def draw_state(self, snapshot: SimulationState) -> None:
        s = snapshot.state
        self.output.write(f"=== Frame t={self._time:.4f} [{snapshot.phase.value}] ===\n")
        self.output.write(f"h={s.position:.2f} m  v={s.velocity:.2f} m/s  a={s.acceleration:.2f} m/s²\n")
        if self.verbose:
            self.output.write(
                f"F: weight={s.gravity_force:.2f} drag={s.friction_force:.2f} "
                f"thrust={s.archimedes_thrust:.2f} net={s.net_force:.2f} N\n"
            )
            self.output.write(
                f"E: KE={s.kinetic_energy:.2f} PE={s.potential_energy:.2f} total={s.total_energy:.2f} J\n"
            )

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for benchmarks without presentation overhead."""

    def begin_frame(self, time: float) -> None:
        pass

    def draw_state(self, snapshot: SimulationState) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records one dict per frame.

    Example:
        renderer = BufferedRenderer()
        controller = SimulationController(renderer=renderer)
        controller.toggle()
        for _ in range(60):
            controller.tick(1 / 60)

        for frame in renderer.frames:
            print(frame["time"], frame["phase"], frame["position"])
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {"time": time}

    def draw_state(self, snapshot: SimulationState) -> None:
        if self._current_frame is None:
            return
        self._current_frame.update(snapshot.state.as_dict())
        self._current_frame["phase"] = snapshot.phase.value
        self._current_frame["history_length"] = len(snapshot.history)

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        """Clear all buffered frames."""
        self.frames.clear()
