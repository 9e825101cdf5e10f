"""
Tests for stage timing (tcgsearch/utils/timing.py).
"""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from tcgsearch.utils.timing import timed


def test_timed_logs_stage_duration() -> None:
    with capture_logs() as logs:
        with timed("build_request"):
            pass

    assert len(logs) == 1
    assert logs[0]["event"] == "stage_timing"
    assert logs[0]["stage"] == "build_request"
    assert logs[0]["log_level"] == "info"
    assert logs[0]["duration_ms"] >= 0


def test_timed_logs_even_when_block_raises() -> None:
    """The timing event is emitted before the exception propagates."""
    with capture_logs() as logs:
        with pytest.raises(RuntimeError):
            with timed("do_request"):
                raise RuntimeError("boom")

    assert [log["stage"] for log in logs] == ["do_request"]


def test_timed_binds_extra_context() -> None:
    with capture_logs() as logs:
        with timed("process_data", card_count=3):
            pass

    assert logs[0]["card_count"] == 3
