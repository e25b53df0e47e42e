"""Pages Route: single catch-all endpoint feeding every request to the dispatcher.

Invariants:
    - Every path and every method is answered by this one route
    - Route logic stays thin: path in, dispatch_request, PageResponse out
    - Metrics provider and clock are injected (overridable via dependency_overrides)
    - Matching uses the raw path: percent-escapes are never decoded before routing

Design Decisions:
    - async handler with no awaits: each request runs to completion on the loop
"""

import logging
from functools import lru_cache

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from standin.config import get_settings
from standin.core.dispatch import dispatch_request
from standin.core.metrics import Clock, MetricsProvider
from standin.infrastructure.process_metrics import PsutilMetricsProvider, SystemClock

logger = logging.getLogger(__name__)
router = APIRouter(tags=["pages"])

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@lru_cache
def get_metrics_provider() -> MetricsProvider:
    return PsutilMetricsProvider()


def get_clock() -> Clock:
    return SystemClock()


def raw_request_path(request: Request) -> str:
    """Request path as sent on the wire, percent-escapes left intact."""
    raw = request.scope.get("raw_path")
    if raw is None:
        return request.url.path
    return raw.decode("latin-1")


@router.api_route("/{full_path:path}", methods=ALL_METHODS)
async def serve_page(
    request: Request,
    metrics: MetricsProvider = Depends(get_metrics_provider),
    clock: Clock = Depends(get_clock),
):
    """Dispatch any request to its page producer."""
    path = raw_request_path(request)
    page = dispatch_request(
        path, metrics, clock,
        service_name=get_settings().service_name,
    )
    logger.debug(
        "Served page",
        extra={
            "path": path,
            "method": request.method,
            "page": page.page.value,
            "status_code": page.status_code,
        },
    )
    return Response(
        content=page.body, status_code=page.status_code, headers=page.headers,
    )
