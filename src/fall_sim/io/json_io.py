# MIT License (see LICENSE)
"""
JSON parameter files and history export.

Parameter files use the camelCase keys of the web front end, so the same
file drives both. History export produces one record per point for chart
collaborators. Neither format stores controller state: a loaded file only
configures a fresh run.

JSON Schema Overview:
---------------------
{
  "mass": float,                   # kg, > 0            (default 1.0)
  "frictionCoefficient": float,    # >= 0               (default 0.1)
  "volume": float,                 # m³, >= 0           (default 0.001)
  "airDensity": float,             # kg/m³, >= 0        (default 1.225)
  "simulationHeight": float,       # m, > 0             (default 100)
  "frictionModel": "kv" | "kv2",   # linear / quadratic (default "kv2")
  "gravity": float,                # m/s², > 0          (default 9.81)
  "initialVelocity": float         # m/s, down positive (default 0)
}

All keys are optional. Unknown keys raise ValueError so typos do not go
unnoticed.
"""
from __future__ import annotations
import json
from collections.abc import Iterable
from typing import Any

from ..types import KinematicState, SimulationParams

# Python field name <-> JSON key
_PARAM_KEYS: dict[str, str] = {
    "mass": "mass",
    "friction_coefficient": "frictionCoefficient",
    "volume": "volume",
    "air_density": "airDensity",
    "simulation_height": "simulationHeight",
    "friction_model": "frictionModel",
    "gravity": "gravity",
    "initial_velocity": "initialVelocity",
}
_PARAM_FIELDS: dict[str, str] = {v: k for k, v in _PARAM_KEYS.items()}

_POINT_KEYS: dict[str, str] = {
    "time": "time",
    "position": "position",
    "velocity": "velocity",
    "acceleration": "acceleration",
    "net_force": "netForce",
    "gravity_force": "gravityForce",
    "friction_force": "frictionForce",
    "archimedes_thrust": "archimedesThrust",
    "kinetic_energy": "kineticEnergy",
    "potential_energy": "potentialEnergy",
    "total_energy": "totalEnergy",
}


def params_to_json(params: SimulationParams) -> dict[str, Any]:
    """Serialize parameters to a JSON-compatible dict with camelCase keys."""
    out: dict[str, Any] = {}
    for name, value in params.as_dict().items():
        out[_PARAM_KEYS[name]] = value.value if name == "friction_model" else value
    return out


def params_from_json(data: dict[str, Any]) -> SimulationParams:
    """
    Build validated parameters from a parsed JSON object.

    Raises:
        ValueError: On unknown keys.
        InvalidParameterError: If a value is outside its physical domain.
    """
    unknown = sorted(set(data) - set(_PARAM_FIELDS))
    if unknown:
        raise ValueError(f"Unknown parameter keys: {', '.join(unknown)}")
    return SimulationParams(**{_PARAM_FIELDS[k]: v for k, v in data.items()})


def load_params_raw(path: str) -> dict[str, Any]:
    """Load the raw JSON object from a parameter file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object, got {type(data).__name__}")
    return data


def load_params(path: str) -> SimulationParams:
    """
    Load and validate parameters from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: On unknown keys or out-of-domain values.
    """
    return params_from_json(load_params_raw(path))


def save_params(params: SimulationParams, path: str, indent: int = 2) -> None:
    """Write parameters to a JSON file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(params_to_json(params), f, indent=indent)
        f.write("\n")


def point_to_json(point: KinematicState) -> dict[str, float]:
    """One history point as a camelCase record, total energy included."""
    return {key: float(getattr(point, name)) for name, key in _POINT_KEYS.items()}


def history_to_json(history: Iterable[KinematicState]) -> list[dict[str, float]]:
    """Export a history sequence as a list of records."""
    return [point_to_json(p) for p in history]
