"""Run the usage example: ``python -m cachematrix``."""
from __future__ import annotations

import logging

import cachematrix as cm


def main() -> int:
    cm.setup_logging(level=logging.INFO)
    log = logging.getLogger("cachematrix.demo")

    x = cm.CacheMatrix([[1, 3], [2, 4]])
    print(x)

    inv = cm.cache_solve(x)
    print(inv)
    inv2 = cm.cache_solve(x)
    log.info("second call served from cache: %s", inv2 is inv)

    record = cm.make_plain_cache_matrix([[-1, 1], [-2, 1]])
    print(cm.cache_solve_plain(record))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
