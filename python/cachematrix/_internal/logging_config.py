from __future__ import annotations

import logging
import sys

_PACKAGE_LOGGER = "cachematrix"
_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _handler(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """Route cachematrix diagnostics to stdout and, optionally, ``log_file``.

    ``cache_solve`` reports "solving..." / "caching..." at INFO, so the
    default level shows them and ``logging.WARNING`` hides them. Calling this
    again replaces the handlers installed by the previous call.
    """
    logger = logging.getLogger(_PACKAGE_LOGGER)
    logger.setLevel(level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    formatter = logging.Formatter(_FORMAT, datefmt="%H:%M:%S")
    logger.addHandler(_handler(logging.StreamHandler(sys.stdout), level, formatter))
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        logger.addHandler(_handler(file_handler, level, formatter))

    logger.debug("logging configured (level=%s, file=%s)", logging.getLevelName(level), log_file)
    return logger
