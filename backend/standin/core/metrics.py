"""Process Metrics: snapshot type, boundary protocols and display arithmetic.

Invariants:
    - ProcessMetricsSnapshot is immutable and captured once per producer call
    - Core never samples the host process or the wall clock directly; both
      arrive through MetricsProvider / Clock implementations supplied by the shell
    - Formatting helpers are pure: same input, same string

Design Decisions:
    - Protocol over ABC: fakes in tests need no inheritance (ADR: ExMA boundary protocols)
    - 512 MiB ceiling and 15% CPU are placeholder constants, not measurements
"""

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Protocol

MEMORY_CEILING_MB = 512
CPU_PLACEHOLDER_PERCENT = 15

_BYTES_PER_MB = 1024 * 1024


@dataclass(frozen=True)
class ProcessMetricsSnapshot:
    """Point-in-time view of the serving process."""
    uptime_seconds: float
    rss_bytes: int
    heap_used_bytes: int
    runtime_version: str
    platform: str
    arch: str
    pid: int


class MetricsProvider(Protocol):
    """Contract for the process metrics source, implemented by the shell."""
    def snapshot(self) -> ProcessMetricsSnapshot: ...


class Clock(Protocol):
    """Contract for wall-clock time, implemented by the shell."""
    def now(self) -> datetime: ...


def format_uptime(seconds: float) -> str:
    """Render uptime as ``{H}h {M}m {S}s`` using truncating division."""
    hours = math.floor(seconds / 3600)
    minutes = math.floor((seconds % 3600) / 60)
    secs = math.floor(seconds % 60)
    return f"{hours}h {minutes}m {secs}s"


def bytes_to_mb(num_bytes: int) -> int:
    """Whole MiB, halves rounded up."""
    return math.floor(num_bytes / _BYTES_PER_MB + 0.5)


def memory_percent(memory_mb: int) -> float:
    """Share of the assumed memory ceiling, clamped at exactly 100."""
    return min((memory_mb / MEMORY_CEILING_MB) * 100, 100)


def format_percent(value: float) -> str:
    """Shortest exact decimal for a CSS width (``29.296875``, ``100``)."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def to_iso_instant(moment: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a ``Z`` suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")
