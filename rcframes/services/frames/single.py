"""Frames for a single requested metric."""

from rcframes.core.config import Settings
from rcframes.models.frames import Frame, TextFrame
from rcframes.models.metrics import FrameOverrides, GoalParameters, MetricValue
from rcframes.services.frames.formatting import (
    format_number,
    parse_precision,
    prettify_metric_name,
)
from rcframes.services.frames.goals import build_single_metric_goal_frame

DEFAULT_ICON = "i2381"


def _first_set(*candidates: str | None) -> str | None:
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return None


def resolve_icon(icon: str | None, settings: Settings) -> str:
    """Requested icon, else the configured default, else ``i2381``."""
    return _first_set(icon, settings.default_icon, DEFAULT_ICON)


def resolve_overrides(
    metric: str,
    settings: Settings,
    label: str | None = None,
    suffix: str | None = None,
    icon: str | None = None,
    precision: str | None = None,
) -> FrameOverrides:
    """Merge request overrides with configured defaults.

    A query parameter that is present wins even when empty.
    """
    return FrameOverrides(
        label=_first_set(label, settings.default_label, prettify_metric_name(metric)),
        suffix=_first_set(suffix, settings.default_suffix, ""),
        icon=resolve_icon(icon, settings),
        precision=parse_precision(_first_set(precision, settings.default_precision)),
    )


def build_single_metric_frames(
    metric_value: MetricValue,
    metric: str,
    overrides: FrameOverrides,
    goals: GoalParameters,
) -> list[Frame]:
    """Value frame, the upstream label as a second frame, then any goal."""
    formatted = format_number(metric_value.value, overrides.precision)

    frames: list[Frame] = [
        TextFrame(
            text=f"{overrides.label}: {formatted}{overrides.suffix}",
            icon=overrides.icon,
        )
    ]

    if metric_value.label:
        frames.append(TextFrame(text=metric_value.label, icon=overrides.icon))

    goal_frame = build_single_metric_goal_frame(metric, metric_value.value, goals)
    if goal_frame is not None:
        frames.append(goal_frame)

    return frames
