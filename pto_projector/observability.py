"""
Lightweight execution tracing.

Every projection run produces one structured latency record so that a slow
or empty recomputation can be diagnosed from the logs alone.
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager

logger = logging.getLogger("pto_projector.trace")


@contextmanager
def trace_span(name: str, **metadata):
    """Log one "[TRACE] name duration_ms=... key=value" line when the block exits."""
    started = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000
        fields = " ".join(f"{key}={value}" for key, value in metadata.items())
        logger.info("[TRACE] %s duration_ms=%.2f %s", name, elapsed_ms, fields)
