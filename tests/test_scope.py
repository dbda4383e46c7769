"""Scope resolution tests."""

import pytest

from rcframes.models.metrics import MetricScope
from rcframes.services.frames.scope import resolve_scope


def test_overview_only_by_default(settings):
    """Test every scope resolves to overview while charts are disabled."""
    for raw in (None, "", "chart", "charts", "developer_metrics", "bogus"):
        assert resolve_scope(raw, settings) is MetricScope.OVERVIEW


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("overview", MetricScope.OVERVIEW),
        ("OVERVIEW", MetricScope.OVERVIEW),
        ("developer_metrics", MetricScope.OVERVIEW),
        ("chart", MetricScope.CHART),
        (" Charts ", MetricScope.CHART),
        ("timeseries", MetricScope.OVERVIEW),
        ("", MetricScope.OVERVIEW),
        (None, MetricScope.OVERVIEW),
    ],
)
def test_legacy_scopes(settings, raw, expected):
    """Test aliases map to canonical scopes and unknowns fall back."""
    settings.enable_chart_scope = True
    assert resolve_scope(raw, settings) is expected


def test_configured_default_scope(settings):
    settings.enable_chart_scope = True
    settings.default_scope = "charts"

    assert resolve_scope(None, settings) is MetricScope.CHART
    assert resolve_scope("overview", settings) is MetricScope.OVERVIEW
