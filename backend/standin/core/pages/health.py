"""Health: liveness stub, always healthy.

Invariants:
    - status is always "healthy"; there is no failure path
    - timestamp comes from one clock read at invocation
"""

from standin.core.metrics import Clock, to_iso_instant
from standin.schemas.payloads import HealthStatus


def render_health(clock: Clock) -> str:
    return HealthStatus(timestamp=to_iso_instant(clock.now())).model_dump_json()
