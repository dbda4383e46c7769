"""Overview bundle: a curated multi-frame summary of the overview metrics.

Well-known metrics come first, in preset order with fixed icons. Any other
metric the project reports follows in upstream order, unless it is zero.
Goal frames close the list.
"""

import logging
from typing import Any

from rcframes.models.frames import Frame, TextFrame
from rcframes.models.metrics import GoalParameters, OverviewMetricConfig
from rcframes.services.frames.formatting import format_with_unit, prettify_metric_name
from rcframes.services.frames.goals import build_overview_goal_frames
from rcframes.services.frames.payload import metric_id, pick_number, record_list

logger = logging.getLogger(__name__)

OVERVIEW_METRIC_PRESETS: tuple[OverviewMetricConfig, ...] = (
    OverviewMetricConfig(id="active_users", icon="42832", label="Active Users"),
    OverviewMetricConfig(id="new_customers", icon="406", label="New Customers"),
    OverviewMetricConfig(id="revenue", icon="30756", label="Revenue"),
    OverviewMetricConfig(id="active_subscriptions", icon="40354", label="Subscribers"),
    OverviewMetricConfig(id="active_trials", icon="41036", label="Trials"),
    OverviewMetricConfig(id="mrr", icon="30756", label="MRR"),
)


def index_metrics(metrics: list[dict[str, Any]]) -> dict[str, dict[str, Any]]:
    """Index records by id; a later duplicate replaces an earlier one."""
    by_id: dict[str, dict[str, Any]] = {}
    for record in metrics:
        record_id = metric_id(record)
        if record_id:
            by_id[record_id] = record
    return by_id


def format_overview_metric(record: dict[str, Any], precision: int) -> str | None:
    """Formatted ``value`` with the record's unit, or None without a number."""
    value = pick_number(record.get("value"))
    if value is None:
        return None
    return format_with_unit(value, record.get("unit"), precision)


def build_overview_bundle_frames(
    payload: Any,
    fallback_icon: str,
    goals: GoalParameters,
) -> list[Frame]:
    """Assemble the bundle frames; empty when upstream sent no metrics."""
    metrics = record_list(payload, "metrics") or []
    if not metrics:
        return []

    by_id = index_metrics(metrics)
    frames: list[Frame] = []
    consumed: set[str] = set()

    for preset in OVERVIEW_METRIC_PRESETS:
        record = by_id.get(preset.id)
        if record is None:
            continue
        formatted = format_overview_metric(record, preset.precision or 0)
        if formatted is None:
            continue
        label = preset.label or prettify_metric_name(preset.id)
        frames.append(TextFrame(text=f"{label}: {formatted}", icon=preset.icon))
        consumed.add(preset.id)

    for record in metrics:
        record_id = metric_id(record)
        if not record_id or record_id in consumed:
            continue

        raw_value = pick_number(record.get("value"))
        if raw_value is None or raw_value == 0:
            continue

        formatted = format_overview_metric(record, 0)
        if formatted is None:
            continue

        name = record.get("name")
        label = name if isinstance(name, str) else prettify_metric_name(record_id)
        frames.append(TextFrame(text=f"{label}: {formatted}", icon=fallback_icon))

    logger.debug(f"Overview bundle: {len(frames)} metric frames from {len(metrics)} metrics")

    frames.extend(build_overview_goal_frames(goals, by_id))
    return frames
