# MIT License (see LICENSE)
"""
Lightweight timing of simulation phases.

The scheduler records each integrator step under the "step" section when it
is given a Profiler, which lets benchmarks compare integrators and drag laws
without external tooling.

Example:
    profiler = Profiler()
    controller = SimulationController(profiler=profiler)
    controller.run_until_terminated()
    print(profiler.stats.summary()["step"])
"""
from __future__ import annotations
import time
from dataclasses import dataclass, field


@dataclass
class ProfileStats:
    """Timing samples (seconds) per named section."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def clear(self) -> None:
        self.samples.clear()

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-section statistics.

        Returns:
            Dict mapping section name to a dict with keys 'n', 'mean_ms',
            'max_ms' and 'total_ms'.
        """
        out = {}
        for name, times in self.samples.items():
            total = sum(times)
            out[name] = {
                "n": len(times),
                "mean_ms": 1e3 * total / len(times),
                "max_ms": 1e3 * max(times),
                "total_ms": 1e3 * total,
            }
        return out


class _Section:
    """Context manager adding its elapsed wall time to a ProfileStats."""

    def __init__(self, stats: ProfileStats, name: str) -> None:
        self._stats = stats
        self._name = name
        self._t0 = 0.0

    def __enter__(self) -> "_Section":
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._stats.add(self._name, time.perf_counter() - self._t0)


class Profiler:
    """Hands out timing sections that feed a shared ProfileStats."""

    def __init__(self) -> None:
        self.stats = ProfileStats()

    def section(self, name: str) -> _Section:
        """Time the enclosed block under `name`."""
        return _Section(self.stats, name)
