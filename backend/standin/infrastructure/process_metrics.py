"""Process Metrics Source: psutil-backed MetricsProvider and the system clock.

Invariants:
    - Every snapshot() call re-reads the host process (no caching)
    - Uptime counts from process start (psutil create_time), never negative
    - psutil failures surface as MetricsSourceError, never as raw psutil errors

Design Decisions:
    - heap_used_bytes is psutil's ``data`` segment where the platform reports it,
      falling back to RSS (CPython exposes no separate managed-heap figure)
"""

import os
import platform
import sys
import time
from datetime import datetime, timezone

import psutil

from standin.core.errors import ErrorContext, MetricsSourceError
from standin.core.metrics import ProcessMetricsSnapshot


class PsutilMetricsProvider:
    """Samples the current process through psutil."""

    def __init__(self, pid: int | None = None):
        self._pid = pid if pid is not None else os.getpid()
        self._runtime_version = (
            f"{platform.python_implementation()} {platform.python_version()}"
        )

    def snapshot(self) -> ProcessMetricsSnapshot:
        try:
            process = psutil.Process(self._pid)
            memory = process.memory_info()
            started = process.create_time()
        except psutil.Error as exc:
            raise MetricsSourceError(
                str(exc), ErrorContext(debug_info={"pid": self._pid}),
            ) from exc
        return ProcessMetricsSnapshot(
            uptime_seconds=max(time.time() - started, 0.0),
            rss_bytes=int(memory.rss),
            heap_used_bytes=int(getattr(memory, "data", memory.rss)),
            runtime_version=self._runtime_version,
            platform=sys.platform,
            arch=platform.machine(),
            pid=self._pid,
        )


class SystemClock:
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
