"""cachematrix error types.

``ComputationError`` is the linear-algebra error raised by NumPy itself; the
solve functions let it propagate untouched, so it is re-exported here rather
than wrapped.
"""
from __future__ import annotations

from numpy.linalg import LinAlgError as ComputationError


class CacheMatrixError(Exception):
    """Base class for errors raised by cachematrix itself."""


class InvalidArgumentError(CacheMatrixError, TypeError, ValueError):
    """Input is not a square numeric matrix, or not a cache-matrix object."""


__all__ = ["CacheMatrixError", "ComputationError", "InvalidArgumentError"]
