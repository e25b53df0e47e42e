"""Dispatch tests: one producer per request, shared headers, lazy metrics sampling."""

import json

import pytest

from standin.core.dispatch import PRODUCERS, dispatch_request
from standin.core.domain_types import ContentType, Page

HTML = "text/html; charset=utf-8"


@pytest.mark.parametrize("path, page, content_type", [
    ("/admin", Page.ADMIN_DASHBOARD, HTML),
    ("/api", Page.API_INFO, "application/json"),
    ("/api/users", Page.API_INFO, "application/json"),
    ("/documentation", Page.DOCUMENTATION, HTML),
    ("/health", Page.HEALTH, "application/json"),
    ("/", Page.HOME, HTML),
    ("/foo?bar=1", Page.HOME, HTML),
])
def test_dispatch_selects_page_and_content_type(
    path, page, content_type, fake_metrics, step_clock,
):
    response = dispatch_request(path, fake_metrics, step_clock)
    assert response.page == page
    assert response.status_code == 200
    assert response.content_type == content_type


@pytest.mark.parametrize("path", ["/admin", "/api", "/documentation", "/health", "/x"])
def test_every_response_carries_shared_headers(path, fake_metrics, step_clock):
    headers = dispatch_request(path, fake_metrics, step_clock).headers
    assert headers["Cache-Control"] == "no-cache"
    assert headers["X-Powered-By"] == "Strapi CMS on AWS ECS"
    assert "Content-Type" in headers


def test_service_name_overrides_identifying_header(fake_metrics, step_clock):
    response = dispatch_request(
        "/", fake_metrics, step_clock, service_name="Test Service",
    )
    assert response.headers["X-Powered-By"] == "Test Service"


def test_metrics_sampled_once_and_only_for_admin(fake_metrics, step_clock):
    for path in ("/", "/api", "/documentation", "/health"):
        dispatch_request(path, fake_metrics, step_clock)
    assert fake_metrics.calls == 0

    dispatch_request("/admin", fake_metrics, step_clock)
    assert fake_metrics.calls == 1


def test_api_body_has_three_endpoints(fake_metrics, step_clock):
    body = json.loads(dispatch_request("/api/anything", fake_metrics, step_clock).body)
    assert body["message"] == "Strapi API"
    assert len(body["endpoints"]) == 3


def test_every_page_has_a_producer():
    assert set(PRODUCERS) == set(Page)
    assert {ct for ct, _ in PRODUCERS.values()} == set(ContentType)


def test_responses_are_not_shared(fake_metrics, step_clock):
    first = dispatch_request("/", fake_metrics, step_clock)
    second = dispatch_request("/", fake_metrics, step_clock)
    assert first is not second
    assert first.headers is not second.headers
    assert first.body == second.body
