# MIT License (see LICENSE)
"""
Exception types raised by the simulation core.

Two kinds of failure exist:
- InvalidParameterError: a proposed configuration value lies outside its
  physical domain. The parameter store catches it per field and keeps the
  previous value, so it never escapes a controller command.
- OrderingViolationError: a history point was appended out of time order.
  This is a programming error in the caller and is never caught by the core.
"""
from __future__ import annotations

from typing import Any


class FallSimError(Exception):
    """Base class for all errors raised by fall_sim."""


class InvalidParameterError(FallSimError, ValueError):
    """
    A simulation parameter is outside its physical domain.

    Attributes:
        field: Name of the offending SimulationParams field.
        value: The rejected value.
    """

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        super().__init__(f"{field}={value!r}: {reason}")


class OrderingViolationError(FallSimError, AssertionError):
    """A history point did not have a strictly increasing timestamp."""
