"""Route Table: ordered (predicate, page) rules, first match wins.

Invariants:
    - ROUTE_TABLE is built once at import and never mutated
    - At most one non-default rule matches any path (mutually exclusive predicates)
    - resolve_route never raises; unmatched, empty or malformed paths resolve to HOME
    - Query strings and fragments are stripped before matching

Design Decisions:
    - Declarative table over if/elif chain: precedence is data, testable without HTTP
"""

from dataclasses import dataclass
from typing import Callable

from standin.core.domain_types import Page


@dataclass(frozen=True)
class RouteRule:
    """A named path predicate paired with the page it selects."""
    name: str
    matches: Callable[[str], bool]
    page: Page


def _exact(target: str) -> Callable[[str], bool]:
    return lambda path: path == target


def _api(path: str) -> bool:
    return path == "/api" or path.startswith("/api/")


ROUTE_TABLE: tuple[RouteRule, ...] = (
    RouteRule("admin", _exact("/admin"), Page.ADMIN_DASHBOARD),
    RouteRule("api", _api, Page.API_INFO),
    RouteRule("documentation", _exact("/documentation"), Page.DOCUMENTATION),
    RouteRule("health", _exact("/health"), Page.HEALTH),
)

DEFAULT_PAGE = Page.HOME


def strip_query(raw_path: str) -> str:
    """Drop ``?query`` and ``#fragment`` parts of a request target."""
    for sep in ("?", "#"):
        raw_path = raw_path.split(sep, 1)[0]
    return raw_path


def resolve_route(raw_path: str | None) -> Page:
    """Select the page for a request path. Pure, never fails."""
    path = strip_query(raw_path or "")
    for rule in ROUTE_TABLE:
        if rule.matches(path):
            return rule.page
    return DEFAULT_PAGE
