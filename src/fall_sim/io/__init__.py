# MIT License (see LICENSE)
"""
Input/Output utilities for the fall simulation.

This subpackage provides:
    - Parameter files: load and save SimulationParams as JSON.
    - History export: records with camelCase keys for chart front ends.

Typical usage:
    from fall_sim.io import load_params, history_to_json

    controller = SimulationController(params=load_params("drop.json"))
    controller.run_until_terminated()
    records = history_to_json(controller.freeze_history())
"""
from .json_io import (
    load_params,
    load_params_raw,
    save_params,
    params_to_json,
    params_from_json,
    point_to_json,
    history_to_json,
)

__all__ = [
    # Loading
    "load_params",
    "load_params_raw",
    # Saving
    "save_params",
    # Serialization
    "params_to_json",
    "params_from_json",
    "point_to_json",
    "history_to_json",
]
