# SPDX-License-Identifier: Apache-2.0
import functools
import logging
import time


def logtime(logger: logging.Logger, msg: str | None = None, level: int = logging.DEBUG):
    """Log how long the decorated call took, including calls that raise."""

    def _inner(func):
        prefix = msg or f"{func.__module__}.{func.__qualname__}"

        @functools.wraps(func)
        def _wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                logger.log(
                    level, "%s took %.3f secs", prefix, time.perf_counter() - start
                )

        return _wrapper

    return _inner
