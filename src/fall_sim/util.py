# MIT License (see LICENSE)
"""
Small numeric helpers shared by the force model and the configuration layer.
"""
from __future__ import annotations
import math
import os


def signed_square(v: float) -> float:
    """v·|v|: the square of v carrying the sign of v (quadratic drag law)."""
    return v * abs(v)


def is_finite_number(x) -> bool:
    """
    True for real, finite numbers.

    Booleans and strings are rejected even though float() accepts them, and
    integers too large for a float count as non-finite.
    """
    if isinstance(x, (bool, str, bytes)):
        return False
    try:
        return math.isfinite(float(x))
    except (TypeError, ValueError, OverflowError):
        return False


def env_float(name: str, default: float, positive: bool = False) -> float:
    """
    Read a float override from the environment.

    Returns `default` when the variable is unset or empty. A value that does
    not parse as a finite float, or is not > 0 when `positive` is set, raises
    ValueError naming the variable.
    """
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {raw!r}")
    if positive and not value > 0:
        raise ValueError(f"{name} must be > 0, got {raw!r}")
    return value
