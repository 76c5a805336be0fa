from __future__ import annotations

from collections.abc import Sequence as _SequenceABC
from typing import Any

import numpy as np

from .errors import InvalidArgumentError

# bool matrices are rejected; numpy.linalg does not invert them.
_NUMERIC_KINDS = frozenset("iufc")


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def _as_array(candidate: Any) -> np.ndarray:
    if isinstance(candidate, np.ndarray):
        return candidate
    if not is_sequence_like(candidate) and not hasattr(candidate, "__array__"):
        raise InvalidArgumentError(
            "Matrix data must be provided as a square nested sequence or a NumPy array."
        )
    try:
        return np.asarray(candidate)
    except (TypeError, ValueError) as exc:
        # Ragged nested sequences fail here on current NumPy.
        raise InvalidArgumentError(f"Matrix data is not rectangular: {exc}") from exc


def coerce_square_matrix(candidate: Any, *, copy: bool = True) -> np.ndarray:
    """Validate ``candidate`` and return it as a square numeric ndarray.

    With ``copy=True`` the result is a private, read-only copy, so later
    writes to the caller's array cannot reach it.
    """
    array = _as_array(candidate)
    if array.ndim != 2:
        raise InvalidArgumentError(
            f"argument must be a square matrix (got {array.ndim}D input)"
        )
    if array.dtype.kind not in _NUMERIC_KINDS:
        raise InvalidArgumentError(
            f"argument must be a numeric matrix (got dtype {array.dtype})"
        )
    rows, cols = array.shape
    if rows != cols:
        raise InvalidArgumentError(
            f"argument must be a square matrix (got shape ({rows}, {cols}))"
        )
    if copy:
        array = np.array(array, copy=True)
        array.flags.writeable = False
    return array


def freeze(candidate: Any) -> np.ndarray:
    """Read-only copy of an already trusted matrix (no shape checks)."""
    array = np.array(candidate, copy=True)
    array.flags.writeable = False
    return array


def is_matrix(value: Any) -> bool:
    return isinstance(value, np.ndarray) and value.ndim == 2
