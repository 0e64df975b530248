"""
Per-thread random source.

Each thread lazily gets its own random.Random seeded from OS entropy, so
concurrent callers never share generator state and no locking is needed.

Usage:
    from packages.calculation import rng

    rng.seed(42)           # reproducible draws on this thread only
    value = rng.current().random()
"""

import logging
import random
import threading
from typing import Optional

__all__ = ["current", "seed"]

logger = logging.getLogger(__name__)

_local = threading.local()


def current() -> random.Random:
    """Return the calling thread's generator, creating it on first use."""
    generator = getattr(_local, "generator", None)
    if generator is None:
        generator = random.Random()
        _local.generator = generator
        logger.debug("Created random generator for thread %s", threading.current_thread().name)
    return generator


def seed(value: Optional[int] = None) -> None:
    """Reseed the calling thread's generator. None reseeds from OS entropy."""
    current().seed(value)
    logger.debug("Reseeded random generator for thread %s", threading.current_thread().name)
