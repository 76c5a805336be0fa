from __future__ import annotations

import logging
import os
from typing import Any, Callable

import numpy as np

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

Solver = Callable[[np.ndarray], np.ndarray]


def _solve_identity(matrix: np.ndarray) -> np.ndarray:
    identity = np.eye(matrix.shape[0], dtype=np.result_type(matrix.dtype, np.float64))
    return np.linalg.solve(matrix, identity)


SOLVERS: dict[str, Solver] = {
    "inv": np.linalg.inv,
    "solve": _solve_identity,
}

DEFAULT_SOLVER = "inv"


class Runtime:
    def __init__(self, *, env_var: str = "CACHEMATRIX_SOLVER") -> None:
        self._env_var = env_var
        self._solver_cache: Solver | None = None
        self._solver_name: str | None = None

    def _resolve(self, name: str) -> Solver:
        key = name.strip().lower()
        try:
            return SOLVERS[key]
        except KeyError:
            raise InvalidArgumentError(
                f"unknown solver {name!r}; expected one of {sorted(SOLVERS)}"
            ) from None

    def solver(self) -> Solver:
        if self._solver_cache is not None:
            return self._solver_cache

        # Unset and blank both mean "use the default".
        name = (os.environ.get(self._env_var) or "").strip() or DEFAULT_SOLVER
        self._solver_cache = self._resolve(name)
        self._solver_name = name.lower()
        logger.debug("Using solver %r (from %s)", self._solver_name, self._env_var)
        return self._solver_cache

    def solver_name(self) -> str:
        self.solver()
        return self._solver_name or DEFAULT_SOLVER

    def set_solver(self, solver: str | Solver) -> None:
        if isinstance(solver, str):
            self._solver_cache = self._resolve(solver)
            self._solver_name = solver.strip().lower()
        elif callable(solver):
            self._solver_cache = solver
            self._solver_name = getattr(solver, "__name__", repr(solver))
        else:
            raise InvalidArgumentError("solver must be a solver name or a callable")
        logger.debug("Solver set to %r", self._solver_name)

    def reset_solver(self) -> None:
        self._solver_cache = None
        self._solver_name = None

    def invert(self, matrix: Any) -> np.ndarray:
        return self.solver()(matrix)


runtime = Runtime()
