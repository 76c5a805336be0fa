"""Matrix inversion with a cached result.

:class:`CacheMatrix` wraps a square matrix; :func:`cache_solve` inverts it on
first request and serves the stored inverse afterwards until the matrix is
replaced. :class:`PlainCacheMatrix` and :func:`cache_solve_plain` are the
same idea on a plain record with public fields.
"""
from __future__ import annotations

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "unknown"

import logging

from ._internal import runtime as _runtime_mod
from ._internal.errors import (
    CacheMatrixError,
    ComputationError,
    InvalidArgumentError,
)
from ._internal.linalg_cache import cache_solve, cache_solve_plain
from ._internal.logging_config import setup_logging
from ._internal.warnings import CacheMatrixArgumentWarning, CacheMatrixWarning
from .handle import CacheMatrix
from .record import PlainCacheMatrix, make_plain_cache_matrix

logging.getLogger(__name__).addHandler(logging.NullHandler())

_runtime = _runtime_mod.runtime


def set_solver(solver):
    """Select the inversion routine: ``"inv"``, ``"solve"`` or a callable.

    The default comes from the ``CACHEMATRIX_SOLVER`` environment variable,
    falling back to ``"inv"`` (``numpy.linalg.inv``).
    """
    _runtime.set_solver(solver)


def get_solver() -> str:
    """Name of the active inversion routine."""
    return _runtime.solver_name()


def reset_solver() -> None:
    """Drop any :func:`set_solver` override and re-read the environment."""
    _runtime.reset_solver()


__all__ = [
    "CacheMatrix",
    "CacheMatrixArgumentWarning",
    "CacheMatrixError",
    "CacheMatrixWarning",
    "ComputationError",
    "InvalidArgumentError",
    "PlainCacheMatrix",
    "cache_solve",
    "cache_solve_plain",
    "get_solver",
    "make_plain_cache_matrix",
    "reset_solver",
    "set_solver",
    "setup_logging",
]
