"""Page Responses: the transport-neutral result of one dispatched request.

Invariants:
    - status_code is always 200
    - headers always carry Content-Type, Cache-Control: no-cache and X-Powered-By
    - A PageResponse is built fresh per request and never reused
"""

from dataclasses import dataclass, field

from standin.core.domain_types import ContentType, Page

SERVICE_NAME = "Strapi CMS on AWS ECS"
CACHE_CONTROL = "no-cache"


@dataclass(frozen=True)
class PageResponse:
    """Status, headers and body ready to be written by any transport."""
    page: Page
    body: str
    status_code: int = 200
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def content_type(self) -> str:
        return self.headers["Content-Type"]


def build_headers(
    content_type: ContentType, service_name: str = SERVICE_NAME,
) -> dict[str, str]:
    """Header set shared by every route."""
    return {
        "Content-Type": content_type.value,
        "Cache-Control": CACHE_CONTROL,
        "X-Powered-By": service_name,
    }
