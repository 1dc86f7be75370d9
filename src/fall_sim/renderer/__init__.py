# MIT License (see LICENSE)
"""
Presentation adapters for simulation snapshots.

This subpackage provides:
    - RendererAdapter: Abstract base class defining the rendering interface.
    - DebugRenderer: Text output for debugging.
    - NullRenderer: No-op renderer for performance testing.
    - BufferedRenderer: Records frames for playback or export.

The simulation core has no rendering dependency; these adapters are optional.

Typical usage:
    from fall_sim.renderer import DebugRenderer

    controller = SimulationController(renderer=DebugRenderer())
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
]
