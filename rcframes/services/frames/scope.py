"""Scope resolution."""

from rcframes.core.config import Settings
from rcframes.models.metrics import MetricScope

DEFAULT_SCOPE = MetricScope.OVERVIEW

SCOPE_ALIASES: dict[str, MetricScope] = {
    "overview": MetricScope.OVERVIEW,
    "developer_metrics": MetricScope.OVERVIEW,
    "chart": MetricScope.CHART,
    "charts": MetricScope.CHART,
}


def resolve_scope(raw: str | None, settings: Settings) -> MetricScope:
    """Map a requested scope to a canonical one. Never fails.

    Only the overview scope exists unless the legacy chart scope is enabled.
    """
    if not settings.enable_chart_scope:
        return DEFAULT_SCOPE

    candidate = raw or settings.default_scope
    if not candidate:
        return DEFAULT_SCOPE

    return SCOPE_ALIASES.get(candidate.strip().lower(), DEFAULT_SCOPE)
