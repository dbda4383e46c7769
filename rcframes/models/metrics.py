"""Metric models used while assembling frames."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from rcframes.models.base import BaseSchema


class MetricScope(str, Enum):
    """Upstream resource family a request targets."""

    OVERVIEW = "overview"
    CHART = "chart"


class MetricValue(BaseSchema):
    """A number extracted from an upstream payload."""

    value: int | float
    label: str | None = None


class GoalParameters(BaseSchema):
    """Goal targets requested by the caller; ``None`` means no goal."""

    mrr_goal: int | None = None
    subscribers_goal: int | None = None


class OverviewMetricConfig(BaseModel):
    """Presentation preset for a well-known overview metric."""

    model_config = ConfigDict(frozen=True)

    id: str
    icon: str
    label: str | None = None
    precision: int | None = None


class FrameOverrides(BaseModel):
    """Caller or environment overrides for a single-metric frame."""

    label: str
    suffix: str = ""
    icon: str
    precision: int = 0
