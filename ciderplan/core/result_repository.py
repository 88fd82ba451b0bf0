# ciderplan/core/result_repository.py
from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Dict, List, Protocol

from ciderplan.core.cost_models import SimulationResult

logger = logging.getLogger("ciderplan.repository")


class ResultNotFoundError(KeyError):
    """Raised when a simulation result id is not in the store."""


class ResultRepository(Protocol):
    """
    Narrow persistence interface for simulation results.

    The engine never talks to storage; the host application injects an
    implementation wherever results need saving.
    """

    def save(self, result: SimulationResult) -> str: ...

    def load(self, result_id: str) -> SimulationResult: ...

    def list(self) -> List[SimulationResult]: ...

    def delete(self, result_id: str) -> None: ...


class InMemoryResultRepository:
    """Process-local result store, used by the dashboard session and tests."""

    def __init__(self) -> None:
        self._results: Dict[str, SimulationResult] = {}

    def save(self, result: SimulationResult) -> str:
        """
        Store a copy of result and return its id.

        Results without an id get a fresh uuid4; saving a result that already
        has an id overwrites the stored copy.
        """
        result_id = result.id or str(uuid.uuid4())
        self._results[result_id] = replace(result, id=result_id)
        logger.info(
            "Saved simulation result %s (%d years)",
            result_id,
            result.years_projected,
        )
        return result_id

    def load(self, result_id: str) -> SimulationResult:
        try:
            return self._results[result_id]
        except KeyError:
            raise ResultNotFoundError(result_id) from None

    def list(self) -> List[SimulationResult]:
        """All stored results, newest simulation first."""
        return sorted(
            self._results.values(),
            key=lambda r: r.simulation_date,
            reverse=True,
        )

    def delete(self, result_id: str) -> None:
        if self._results.pop(result_id, None) is None:
            raise ResultNotFoundError(result_id)

    def __len__(self) -> int:
        return len(self._results)
