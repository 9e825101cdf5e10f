"""
tcgsearch — Stage Timing

Wraps a block of work and logs how long it took once the block exits,
whether it returned normally or raised.

Usage:
    with timed("build_request"):
        ...
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Any, Iterator

import structlog

logger = structlog.get_logger(__name__)


@contextmanager
def timed(stage: str, **context: Any) -> Iterator[None]:
    """
    Log the wall-clock duration of the wrapped block as a ``stage_timing`` event.

    Args:
        stage: Name of the pipeline stage (e.g., "do_request").
        **context: Extra key/value pairs bound onto the timing event.
    """
    started = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "stage_timing",
            stage=stage,
            duration_ms=round(elapsed_ms, 3),
            **context,
        )
