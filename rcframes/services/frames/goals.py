"""Goal-progress frames."""

from typing import Any

from rcframes.models.frames import GoalData, GoalFrame
from rcframes.models.metrics import GoalParameters
from rcframes.services.frames.formatting import parse_non_negative_integer
from rcframes.services.frames.payload import GOAL_CURRENT_FIELDS, number_field

MRR_METRIC = "mrr"
SUBSCRIPTIONS_METRIC = "active_subscriptions"
SUBSCRIBER_METRICS = frozenset({SUBSCRIPTIONS_METRIC, "subscribers"})

MRR_GOAL_ICON = "30756"
SUBSCRIBERS_GOAL_ICON = "40354"


def parse_goal_params(
    mrr_goal: str | None, subscribers_goal: str | None
) -> GoalParameters:
    """Parse ``mrr_goal`` and ``subscribers_goal`` query values."""
    return GoalParameters(
        mrr_goal=parse_non_negative_integer(mrr_goal),
        subscribers_goal=parse_non_negative_integer(subscribers_goal),
    )


def build_goal_frame(current: int | float, goal: int, icon: str) -> GoalFrame:
    """Goal frame from zero to ``goal``; ``current`` may exceed it."""
    return GoalFrame(
        icon=icon,
        goal_data=GoalData(start=0, current=current, end=goal, unit=""),
    )


def build_single_metric_goal_frame(
    metric: str, current: int | float, goals: GoalParameters
) -> GoalFrame | None:
    """Goal frame for a single requested metric, if one was asked for."""
    if metric == MRR_METRIC and goals.mrr_goal is not None:
        return build_goal_frame(current, goals.mrr_goal, MRR_GOAL_ICON)

    if metric in SUBSCRIBER_METRICS and goals.subscribers_goal is not None:
        return build_goal_frame(current, goals.subscribers_goal, SUBSCRIBERS_GOAL_ICON)

    return None


def build_overview_goal_frames(
    goals: GoalParameters, metrics_by_id: dict[str, dict[str, Any]]
) -> list[GoalFrame]:
    """Goal frames for the overview bundle, MRR first."""
    targets = (
        (goals.mrr_goal, MRR_METRIC, MRR_GOAL_ICON),
        (goals.subscribers_goal, SUBSCRIPTIONS_METRIC, SUBSCRIBERS_GOAL_ICON),
    )

    frames: list[GoalFrame] = []
    for goal, metric, icon in targets:
        if goal is None:
            continue
        record = metrics_by_id.get(metric)
        current = number_field(record, GOAL_CURRENT_FIELDS) if record is not None else None
        if current is not None:
            frames.append(build_goal_frame(current, goal, icon))

    return frames
