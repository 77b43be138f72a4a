"""Wall-clock timing for pipeline stages."""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager

from feeddigest.config import get_settings

logger = logging.getLogger(__name__)


@contextmanager
def log_elapsed(label: str) -> Iterator[None]:
    """Log how long the wrapped block took, only in debug mode."""
    start = time.perf_counter()
    try:
        yield
    finally:
        if get_settings().debug:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.info("Elapsed time for %s was %dms", label, elapsed_ms)
