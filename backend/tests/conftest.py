"""Root conftest: shared fakes for the metrics source and the clock."""

import os
from datetime import datetime, timedelta, timezone

import pytest

from standin.core.metrics import ProcessMetricsSnapshot

# Human-readable logs in test output
os.environ.setdefault("LOG_FORMAT", "text")

MB = 1024 * 1024


class FakeMetrics:
    """MetricsProvider returning a fixed snapshot and counting samples."""

    def __init__(self, **overrides):
        values = {
            "uptime_seconds": 3725,
            "rss_bytes": 150 * MB,
            "heap_used_bytes": 40 * MB,
            "runtime_version": "CPython 3.12.1",
            "platform": "linux",
            "arch": "x86_64",
            "pid": 4242,
        }
        values.update(overrides)
        self.value = ProcessMetricsSnapshot(**values)
        self.calls = 0

    def snapshot(self) -> ProcessMetricsSnapshot:
        self.calls += 1
        return self.value


class StepClock:
    """Clock that advances one second per read."""

    def __init__(self, start: datetime | None = None):
        self.current = start or datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)
        self.reads = 0

    def now(self) -> datetime:
        moment = self.current
        self.current += timedelta(seconds=1)
        self.reads += 1
        return moment


@pytest.fixture
def fake_metrics() -> FakeMetrics:
    return FakeMetrics()


@pytest.fixture
def make_metrics():
    return FakeMetrics


@pytest.fixture
def step_clock() -> StepClock:
    return StepClock()
