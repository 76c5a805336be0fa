"""Plain-record variant of the cache matrix.

The fields are public and there is no setter: assigning ``record.m`` directly
does not clear ``record.minv``. Use :class:`~cachematrix.CacheMatrix` when the
matrix may be replaced.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from ._internal import formatting as _formatting
from ._internal.coercion import coerce_square_matrix


@dataclass
class PlainCacheMatrix:
    m: np.ndarray
    minv: np.ndarray | None = None

    def __str__(self) -> str:
        return _formatting.cache_matrix_str(self, self.m, self.minv is not None)


def make_plain_cache_matrix(matrix: Any) -> PlainCacheMatrix:
    """Validate ``matrix`` and wrap it in a record with an empty cache."""
    return PlainCacheMatrix(m=coerce_square_matrix(matrix, copy=False))
