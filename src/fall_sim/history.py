# MIT License (see LICENSE)
"""
Append-only, time-ordered record of simulated states.

The log enforces strictly increasing timestamps. An out-of-order append is a
bug in the caller and raises OrderingViolationError rather than being
silently dropped.

Consumers get immutable views:
- `points` is a HistoryView, a fixed-length window onto the log. Building one
  is O(1), so publishing a snapshot every tick does not copy the history.
- `freeze()` returns an independent tuple, suitable as a comparison baseline
  while the live log keeps growing.

Invariant behind HistoryView: the backing list is only ever appended to, and
clear() swaps in a new list, so the first `n` entries of any list a view
holds never change.
"""
from __future__ import annotations
from collections.abc import Iterator, Sequence
from dataclasses import fields
from itertools import islice

import numpy as np

from .errors import OrderingViolationError
from .types import KinematicState, SimulationHistoryPoint

# Columns exported by as_arrays(), in chart order
COLUMNS: tuple[str, ...] = tuple(f.name for f in fields(KinematicState)) + ("total_energy",)


class HistoryView(Sequence):
    """
    Read-only view of the first `length` points of a history list.

    Compares equal to any tuple or view holding the same points.
    """
    __slots__ = ("_points", "_length")

    def __init__(self, points: list[SimulationHistoryPoint], length: int) -> None:
        self._points = points
        self._length = length

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._points[: self._length][index])
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("history index out of range")
        return self._points[index]

    def __iter__(self) -> Iterator[SimulationHistoryPoint]:
        return islice(self._points, self._length)

    def __eq__(self, other) -> bool:
        if not isinstance(other, (HistoryView, tuple)):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"HistoryView(len={self._length})"


class HistoryLog:
    """Ordered sequence of SimulationHistoryPoint with strictly increasing time."""

    def __init__(self) -> None:
        self._points: list[SimulationHistoryPoint] = []

    def append(self, point: SimulationHistoryPoint) -> None:
        """
        Record a point at the end of the log.

        Raises:
            OrderingViolationError: If point.time <= time of the last point.
        """
        if self._points and not point.time > self._points[-1].time:
            raise OrderingViolationError(
                f"History time must increase: got t={point.time!r} after t={self._points[-1].time!r}"
            )
        self._points.append(point)

    def clear(self) -> None:
        """Remove all points. Views taken earlier keep their contents."""
        self._points = []

    @property
    def last(self) -> SimulationHistoryPoint | None:
        """Most recent point, or None when empty."""
        return self._points[-1] if self._points else None

    @property
    def points(self) -> HistoryView:
        """Read-only view of the current contents."""
        return HistoryView(self._points, len(self._points))

    def freeze(self) -> tuple[SimulationHistoryPoint, ...]:
        """
        Structural copy of the log.

        Points are frozen dataclasses, so copying the sequence is enough: the
        result shares no mutable structure with the live log and is unaffected
        by later appends or clear().
        """
        return tuple(self._points)

    def as_arrays(self) -> dict[str, np.ndarray]:
        """
        Column-oriented copy of the log for plotting.

        Returns:
            Dict mapping each KinematicState field (plus "total_energy") to a
            float64 array of length len(self).
        """
        n = len(self._points)
        out = {name: np.empty(n, dtype=np.float64) for name in COLUMNS}
        for i, p in enumerate(self._points):
            for name in COLUMNS:
                out[name][i] = getattr(p, name)
        return out

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[SimulationHistoryPoint]:
        return iter(self.points)

    def __getitem__(self, index: int) -> SimulationHistoryPoint:
        return self._points[index]
