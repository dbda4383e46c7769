"""Request pipeline: inbound query -> one RevenueCat call -> frames."""

import logging
import re

from pydantic import BaseModel, Field

from rcframes.core.config import Settings
from rcframes.core.errors import AuthError, DataError, ValidationError
from rcframes.models.frames import Frame
from rcframes.models.metrics import MetricScope
from rcframes.services.frames.extraction import extract_metric_value
from rcframes.services.frames.goals import parse_goal_params
from rcframes.services.frames.overview import build_overview_bundle_frames
from rcframes.services.frames.scope import resolve_scope
from rcframes.services.frames.single import (
    build_single_metric_frames,
    resolve_icon,
    resolve_overrides,
)
from rcframes.services.frames.upstream import RevenueCatClient, build_upstream_url

logger = logging.getLogger(__name__)

OVERVIEW_BUNDLE_METRIC = "overview_bundle"
NO_DATA_MESSAGE = "No numeric data found in RevenueCat response"

_BEARER = re.compile(r"Bearer\s+(.+)", re.IGNORECASE)


class FrameQuery(BaseModel):
    """Query parameters of one metrics request."""

    metric: str | None = None
    project: str | None = None
    scope: str | None = None
    label: str | None = None
    suffix: str | None = None
    icon: str | None = None
    precision: str | None = None
    mrr_goal: str | None = None
    subscribers_goal: str | None = None
    # Every raw (name, value) pair, for upstream forwarding
    items: list[tuple[str, str]] = Field(default_factory=list)

    @classmethod
    def from_query_items(cls, items: list[tuple[str, str]]) -> "FrameQuery":
        """Build from raw query pairs; a repeated name keeps its first value."""
        first_values: dict[str, str] = {}
        for key, value in items:
            first_values.setdefault(key, value)

        named = {
            name: first_values[name]
            for name in cls.model_fields
            if name != "items" and name in first_values
        }
        return cls(items=items, **named)


def extract_bearer_token(header_value: str | None) -> str | None:
    """Token from ``Authorization: Bearer <token>``, or None."""
    if not header_value:
        return None

    match = _BEARER.fullmatch(header_value)
    if not match:
        return None

    token = match.group(1).strip()
    return token or None


def is_overview_bundle(metric: str, scope: MetricScope) -> bool:
    return scope is MetricScope.OVERVIEW and metric == OVERVIEW_BUNDLE_METRIC


class FramePipeline:
    """Turns one inbound request into display frames."""

    def __init__(self, settings: Settings, client: RevenueCatClient) -> None:
        self.settings = settings
        self.client = client

    def resolve_metric(self, requested: str | None) -> str:
        if requested is not None:
            return requested
        if self.settings.default_metric is not None:
            return self.settings.default_metric
        return OVERVIEW_BUNDLE_METRIC

    async def build_frames(
        self, query: FrameQuery, authorization: str | None
    ) -> list[Frame]:
        """Run the full pipeline.

        Raises:
            AuthError: missing or malformed bearer token
            ValidationError: empty metric or missing project
            UpstreamError: RevenueCat failure
            DataError: no numeric data for the metric or bundle
        """
        token = extract_bearer_token(authorization)
        if not token:
            raise AuthError("Authorization header with Bearer token is required")

        metric = self.resolve_metric(query.metric)
        if not metric:
            raise ValidationError("Metric is required")

        if not query.project:
            raise ValidationError("Query parameter 'project' is required")

        scope = resolve_scope(query.scope, self.settings)
        url = build_upstream_url(metric, query.project, scope, query.items, self.settings)

        logger.info(f"Fetching {scope.value} metric '{metric}'", extra={"metric": metric})
        payload = await self.client.fetch_payload(url, token)

        goals = parse_goal_params(query.mrr_goal, query.subscribers_goal)

        if is_overview_bundle(metric, scope):
            frames = build_overview_bundle_frames(
                payload, resolve_icon(query.icon, self.settings), goals
            )
        else:
            metric_value = extract_metric_value(payload, scope, metric)
            if metric_value is None:
                raise DataError(NO_DATA_MESSAGE)

            overrides = resolve_overrides(
                metric,
                self.settings,
                label=query.label,
                suffix=query.suffix,
                icon=query.icon,
                precision=query.precision,
            )
            frames = build_single_metric_frames(metric_value, metric, overrides, goals)

        if not frames:
            raise DataError(NO_DATA_MESSAGE)

        return frames
