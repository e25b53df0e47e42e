"""Dispatch: one request path in, exactly one PageResponse out.

Invariants:
    - resolve_route picks the page; exactly one producer runs per request
    - Metrics are sampled only for pages that render them, once per request
    - Never raises for any path; status is always 200

Design Decisions:
    - Producers take injected MetricsProvider / Clock, so dispatch stays pure
      with fakes and the shell supplies the real host sources
"""

from typing import Callable

from standin.core.domain_types import ContentType, Page
from standin.core.metrics import Clock, MetricsProvider
from standin.core.pages.admin_dashboard import render_admin_dashboard
from standin.core.pages.api_info import render_api_info
from standin.core.pages.documentation import render_documentation
from standin.core.pages.health import render_health
from standin.core.pages.home import render_home
from standin.core.responses import SERVICE_NAME, PageResponse, build_headers
from standin.core.routing import resolve_route

Producer = Callable[[MetricsProvider, Clock], str]

PRODUCERS: dict[Page, tuple[ContentType, Producer]] = {
    Page.ADMIN_DASHBOARD: (
        ContentType.HTML,
        lambda metrics, clock: render_admin_dashboard(metrics.snapshot(), clock),
    ),
    Page.API_INFO: (ContentType.JSON, lambda metrics, clock: render_api_info()),
    Page.DOCUMENTATION: (
        ContentType.HTML, lambda metrics, clock: render_documentation(),
    ),
    Page.HEALTH: (ContentType.JSON, lambda metrics, clock: render_health(clock)),
    Page.HOME: (ContentType.HTML, lambda metrics, clock: render_home()),
}


def dispatch_request(
    path: str | None,
    metrics: MetricsProvider,
    clock: Clock,
    service_name: str = SERVICE_NAME,
) -> PageResponse:
    """Route a request path and render its page."""
    page = resolve_route(path)
    content_type, produce = PRODUCERS[page]
    return PageResponse(
        page=page,
        body=produce(metrics, clock),
        headers=build_headers(content_type, service_name),
    )
