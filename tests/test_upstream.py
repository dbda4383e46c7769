"""RevenueCat URL building and client tests."""

import asyncio

import httpx
import pytest

from rcframes.core.errors import DataError, UpstreamError
from rcframes.models.metrics import MetricScope
from rcframes.services.frames.upstream import (
    RevenueCatClient,
    build_upstream_url,
    resolve_path,
)


def test_default_overview_url(settings):
    url = build_upstream_url("overview_bundle", "proj1a2b", MetricScope.OVERVIEW, [], settings)
    assert url == "https://api.revenuecat.com/v2/projects/proj1a2b/metrics/overview"


def test_base_url_is_trimmed_and_slash_normalized(settings):
    """Test base path segments survive the join."""
    settings.revenuecat_base_url = "  https://rc.example.test/api/v2  "
    url = build_upstream_url("mrr", "p1", MetricScope.OVERVIEW, [], settings)
    assert url == "https://rc.example.test/api/v2/projects/p1/metrics/overview"


def test_override_path_is_used_verbatim(settings):
    settings.revenuecat_endpoint_path = "/custom/overview"
    url = build_upstream_url("mrr", "p1", MetricScope.OVERVIEW, [], settings)
    assert url == "https://api.revenuecat.com/v2/custom/overview"


def test_empty_override_falls_back_to_derived_path():
    assert resolve_path("/", "p1", MetricScope.OVERVIEW, "mrr") == "projects/p1/metrics/overview"
    assert resolve_path(None, "p1", MetricScope.CHART, "revenue") == "projects/p1/charts/revenue"


def test_project_id_is_escaped():
    assert resolve_path(None, "a/b c", MetricScope.OVERVIEW, "mrr") == (
        "projects/a%2Fb%20c/metrics/overview"
    )


def test_prefixed_parameters_are_forwarded(settings):
    """Test ``rc.`` parameters reach upstream without the prefix."""
    items = [
        ("metric", "mrr"),
        ("project", "p1"),
        ("rc.currency", "EUR"),
        ("rc.", "ignored"),
        ("label", "Money"),
    ]
    url = httpx.URL(build_upstream_url("mrr", "p1", MetricScope.OVERVIEW, items, settings))

    assert dict(url.params) == {"currency": "EUR"}


def test_chart_parameters_only_forwarded_for_chart_scope(settings):
    settings.default_granularity = "month"
    items = [("start", "2024-01-01"), ("app_id", "app123")]

    overview = httpx.URL(build_upstream_url("mrr", "p1", MetricScope.OVERVIEW, items, settings))
    chart = httpx.URL(build_upstream_url("mrr", "p1", MetricScope.CHART, items, settings))

    assert dict(overview.params) == {}
    assert chart.path == "/v2/projects/p1/charts/mrr"
    assert dict(chart.params) == {
        "granularity": "month",
        "start": "2024-01-01",
        "app_id": "app123",
    }


def test_request_chart_parameters_win_over_defaults(settings):
    settings.default_period = "P30D"
    settings.default_end = "2024-12-31"
    items = [("period", "P7D"), ("rc.end", "2024-06-30")]

    url = httpx.URL(build_upstream_url("revenue", "p1", MetricScope.CHART, items, settings))

    assert url.params["period"] == "P7D"
    assert url.params["end"] == "2024-12-31"


def _run(coro):
    return asyncio.run(coro)


def test_client_sends_bearer_token():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"metrics": []})

    client = RevenueCatClient(transport=httpx.MockTransport(handler))
    payload = _run(client.fetch_payload("https://rc.test/v2/projects/p1/metrics/overview", "sk_abc"))

    assert payload == {"metrics": []}
    assert seen[0].headers["Authorization"] == "Bearer sk_abc"
    assert seen[0].headers["Accept"] == "application/json"
    assert "sk_abc" not in str(seen[0].url)


def test_client_passes_through_upstream_status():
    client = RevenueCatClient(
        transport=httpx.MockTransport(lambda request: httpx.Response(404, json={}))
    )

    with pytest.raises(UpstreamError) as exc_info:
        _run(client.fetch_payload("https://rc.test/v2/x", "sk_abc"))

    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "RevenueCat responded with 404 Not Found"


def test_client_rejects_invalid_json():
    client = RevenueCatClient(
        transport=httpx.MockTransport(lambda request: httpx.Response(200, content=b"<html>"))
    )

    with pytest.raises(DataError) as exc_info:
        _run(client.fetch_payload("https://rc.test/v2/x", "sk_abc"))

    assert exc_info.value.status_code == 502


def test_client_wraps_transport_errors():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = RevenueCatClient(transport=httpx.MockTransport(handler))

    with pytest.raises(UpstreamError) as exc_info:
        _run(client.fetch_payload("https://rc.test/v2/x", "sk_abc"))

    assert exc_info.value.status_code == 502
    assert "sk_abc" not in exc_info.value.message
