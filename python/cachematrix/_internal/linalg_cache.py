from __future__ import annotations

import contextlib
import logging
import warnings
from typing import Any

import numpy as np

from .coercion import is_matrix
from .errors import InvalidArgumentError
from .runtime import runtime
from .warnings import CacheMatrixArgumentWarning

logger = logging.getLogger(__name__)

_HANDLE_METHODS: tuple[str, ...] = ("get_matrix", "get_inverse", "set_inverse")


def _warn_extra_args(args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
    extra = len(args) + len(kwargs)
    if extra > 0:
        warnings.warn(
            f"{extra} extra arguments ignored.",
            CacheMatrixArgumentWarning,
            stacklevel=3,
        )


def _is_handle(x: Any) -> bool:
    return all(callable(getattr(x, name, None)) for name in _HANDLE_METHODS)


def cache_solve(x: Any, *args: Any, **kwargs: Any) -> np.ndarray:
    """Return the inverse of the matrix held by ``x``, computing it at most once.

    ``x`` is a :class:`~cachematrix.CacheMatrix` or anything exposing
    ``get_matrix``/``get_inverse``/``set_inverse``. Additional arguments are
    ignored with a :class:`CacheMatrixArgumentWarning`.

    A failed inversion (e.g. a singular matrix) raises
    :class:`~cachematrix.ComputationError` and leaves the cache empty.
    """
    if not _is_handle(x):
        raise InvalidArgumentError("argument must have been created by CacheMatrix()")
    _warn_extra_args(args, kwargs)

    lock = getattr(x, "lock", None)
    if hasattr(lock, "__enter__") and hasattr(lock, "__exit__"):
        guard = lock
    else:
        guard = contextlib.nullcontext()
    with guard:
        inv = x.get_inverse()
        if inv is not None:
            return inv

        logger.info("solving...")
        inv = runtime.invert(x.get_matrix())
        logger.info("caching...")
        x.set_inverse(inv)
        # Hand back what the handle stored so hits and misses return the same object.
        stored = x.get_inverse()
        return stored if stored is not None else inv


def cache_solve_plain(x: Any, *args: Any, **kwargs: Any) -> np.ndarray:
    """Same contract as :func:`cache_solve` for a :class:`~cachematrix.PlainCacheMatrix`.

    The record's fields are read and written directly. Nothing clears ``minv``
    when ``m`` is reassigned.
    """
    if not is_matrix(getattr(x, "m", None)):
        raise InvalidArgumentError(
            "argument must have been created by make_plain_cache_matrix()"
        )
    _warn_extra_args(args, kwargs)

    if getattr(x, "minv", None) is None:
        logger.info("solving & caching...")
        x.minv = runtime.invert(x.m)
    return x.minv
