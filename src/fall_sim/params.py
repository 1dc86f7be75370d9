# MIT License (see LICENSE)
"""
Parameter store: holds the current SimulationParams and applies partial updates.

Updates are validated field by field. A field whose proposed value is out of
its physical domain is rejected and keeps its previous value; the other
fields of the same update still apply. The store therefore never holds an
invalid configuration and never raises for bad values.

Example:
    store = ParameterStore()
    rejected = store.update(mass=-1.0, gravity=1.62)
    assert rejected == {"mass"}
    assert store.params.gravity == 1.62
"""
from __future__ import annotations
import logging
from collections.abc import Mapping
from typing import Any

from .errors import InvalidParameterError
from .types import SimulationParams, validate_param

logger = logging.getLogger(__name__)


class ParameterStore:
    """
    Owner of the current, always-valid simulation parameters.

    The held SimulationParams is replaced as a whole on every update, so a
    reader that grabbed `params` earlier keeps a consistent value.
    """

    def __init__(self, params: SimulationParams | None = None) -> None:
        self._params = params if params is not None else SimulationParams()

    @property
    def params(self) -> SimulationParams:
        return self._params

    def update(self, partial: Mapping[str, Any] | None = None, **changes: Any) -> set[str]:
        """
        Merge a partial parameter set into the current parameters.

        Args:
            partial: Mapping of field name to proposed value.
            **changes: Same, as keyword arguments (merged over `partial`).

        Returns:
            Names of the fields that were rejected.

        Raises:
            TypeError: If a name is not a SimulationParams field.
        """
        proposed = dict(partial or {})
        proposed.update(changes)

        accepted: dict[str, Any] = {}
        rejected: set[str] = set()
        for name, value in proposed.items():
            try:
                accepted[name] = validate_param(name, value)
            except InvalidParameterError as e:
                logger.warning("Rejected parameter %s", e)
                rejected.add(name)

        if accepted:
            self._params = self._params.replace(**accepted)
        return rejected
