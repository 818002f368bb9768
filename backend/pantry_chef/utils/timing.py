"""Timing spans for request handlers and LLM calls."""

import time
from contextlib import contextmanager

from pantry_chef.logging import get_logger

logger = get_logger(__name__)

_TIMING_PREFIX = "[TIMING]"


def _format_duration(ms: int) -> str:
    """Return human-readable duration: e.g. 12500 -> '12.5s', 750 -> '750ms'."""
    if ms >= 1000:
        return f"{ms / 1000:.1f}s"
    return f"{ms}ms"


class Span:
    def __init__(self, name: str):
        self.name = name
        self.elapsed_ms = 0


@contextmanager
def time_span(name: str, **extra: object):
    """Log elapsed time for the wrapped block, with extra key=value fields."""
    span = Span(name)
    start = time.perf_counter()
    try:
        yield span
    finally:
        span.elapsed_ms = int((time.perf_counter() - start) * 1000)
        fields = " ".join(f"{k}={v}" for k, v in extra.items())
        logger.info(
            "%s %s elapsed_ms=%s (%s) %s",
            _TIMING_PREFIX,
            name,
            span.elapsed_ms,
            _format_duration(span.elapsed_ms),
            fields,
        )
