"""Execution-time logging decorator.

Usage:
    from projecthub.core.utils import log_execution_time

    class ProjectManager:
        @log_execution_time
        def create(self, project):
            ...
"""

import logging
import time
from functools import wraps
from typing import Any, Callable, TypeVar, cast

logger = logging.getLogger(__name__)

F = TypeVar('F', bound=Callable[..., Any])


def log_execution_time(f: F) -> F:
    """Log how long each call to ``f`` took, whether it returned or raised."""
    @wraps(f)
    def decorated(*args, **kwargs):
        start = time.perf_counter()
        try:
            return f(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.debug(f"{f.__qualname__} executed in {elapsed_ms:.2f} ms")

    return cast(F, decorated)
