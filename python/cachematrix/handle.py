"""Encapsulated cache-matrix handle."""
from __future__ import annotations

import threading
from typing import Any

import numpy as np

from ._internal import formatting as _formatting
from ._internal.coercion import coerce_square_matrix, freeze


class CacheMatrix:
    """A square matrix paired with a lazily filled cache of its inverse.

    State lives in private attributes and is reached only through the
    accessors below. Replacing the matrix with :meth:`set_matrix` always
    clears the cached inverse, so a cached value is never stale.

    The stored matrix is a read-only copy of the input. Pass the handle to
    :func:`cachematrix.cache_solve` to get the inverse.

    Example::

        >>> x = CacheMatrix([[1, 3], [2, 4]])
        >>> cache_solve(x)          # logs "solving..." and "caching..."
        array([[-2. ,  1.5],
               [ 1. , -0.5]])
        >>> cache_solve(x)          # served from the cache
        array([[-2. ,  1.5],
               [ 1. , -0.5]])
    """

    def __init__(self, matrix: Any) -> None:
        self._matrix = coerce_square_matrix(matrix)
        self._inverse: np.ndarray | None = None
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        """Per-handle lock held by ``cache_solve`` around check-compute-store."""
        return self._lock

    @property
    def shape(self) -> tuple[int, int]:
        rows, cols = self._matrix.shape
        return (rows, cols)

    def get_matrix(self) -> np.ndarray:
        return self._matrix

    def set_matrix(self, matrix: Any) -> None:
        new_matrix = coerce_square_matrix(matrix)
        with self._lock:
            self._matrix = new_matrix
            self._inverse = None

    def get_inverse(self) -> np.ndarray | None:
        return self._inverse

    def set_inverse(self, inverse: Any) -> None:
        # Trusted: the value is not checked against the matrix.
        with self._lock:
            self._inverse = None if inverse is None else freeze(inverse)

    def has_inverse(self) -> bool:
        return self._inverse is not None

    def __str__(self) -> str:
        return _formatting.cache_matrix_str(self, self._matrix, self.has_inverse())

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} shape={self.shape} cached={self.has_inverse()}>"
