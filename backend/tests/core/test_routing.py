"""Route table tests: first-match precedence, query stripping, default fallback.

Tests cover:
    - Each exact rule and the /api prefix rule
    - Near-misses fall through to HOME (no partial prefix matches)
    - At most one non-default rule matches any path
    - Hostile inputs (empty, unicode, very long) never raise
"""

import pytest

from standin.core.domain_types import Page
from standin.core.routing import ROUTE_TABLE, resolve_route, strip_query


@pytest.mark.parametrize("path, page", [
    ("/admin", Page.ADMIN_DASHBOARD),
    ("/api", Page.API_INFO),
    ("/api/", Page.API_INFO),
    ("/api/users", Page.API_INFO),
    ("/api/anything/deeper", Page.API_INFO),
    ("/documentation", Page.DOCUMENTATION),
    ("/health", Page.HEALTH),
    ("/", Page.HOME),
    ("/foo", Page.HOME),
])
def test_resolves_known_paths(path, page):
    assert resolve_route(path) == page


@pytest.mark.parametrize("path", [
    "/admin/", "/administrator", "/apix", "/apiusers", "/health/",
    "/healthz", "/documentation/intro", "/ADMIN", "admin",
])
def test_near_misses_fall_through_to_home(path):
    assert resolve_route(path) == Page.HOME


def test_query_and_fragment_stripped_before_matching():
    assert resolve_route("/health?verbose=1") == Page.HEALTH
    assert resolve_route("/admin#logs") == Page.ADMIN_DASHBOARD
    assert resolve_route("/api?x=/admin") == Page.API_INFO
    assert strip_query("/a?b#c") == "/a"


@pytest.mark.parametrize("path", [
    "", None, "?", "#", "//", "/%zz", "/ümlaut/パス", "/" + "a" * 100_000,
])
def test_hostile_paths_resolve_to_home(path):
    assert resolve_route(path) == Page.HOME


@pytest.mark.parametrize("path", [
    "/admin", "/api", "/api/x", "/documentation", "/health", "/", "/other",
])
def test_rules_are_mutually_exclusive(path):
    matching = [rule for rule in ROUTE_TABLE if rule.matches(path)]
    assert len(matching) <= 1


def test_route_table_order_is_fixed():
    assert [rule.name for rule in ROUTE_TABLE] == [
        "admin", "api", "documentation", "health",
    ]
    assert isinstance(ROUTE_TABLE, tuple)
