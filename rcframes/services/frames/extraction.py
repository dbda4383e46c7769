"""Metric value extraction from RevenueCat payloads."""

from typing import Any

from rcframes.models.metrics import MetricScope, MetricValue
from rcframes.services.frames.payload import (
    OVERVIEW_LABEL_FIELDS,
    VALUE_FIELDS,
    as_record,
    label_field,
    number_field,
    record_list,
)


def extract_overview_value(
    metrics: list[dict[str, Any]], metric: str
) -> MetricValue | None:
    """Value of the first overview entry whose id is ``metric``.

    A matching entry without a numeric ``value`` ends the search.
    """
    for record in metrics:
        if record.get("id") != metric:
            continue

        value = number_field(record, ("value",))
        if value is None:
            return None
        return MetricValue(value=value, label=label_field(record, OVERVIEW_LABEL_FIELDS))

    return None


def extract_latest_data_value(data: list[dict[str, Any]]) -> MetricValue | None:
    """Most recent entry of a data series exposing a number."""
    for record in reversed(data):
        value = number_field(record, VALUE_FIELDS)
        if value is not None:
            return MetricValue(value=value, label=label_field(record, ("label",)))
    return None


def extract_metric_value(
    payload: Any, scope: MetricScope, metric: str
) -> MetricValue | None:
    """Locate the requested metric's number in ``payload``.

    Search order:
    1. overview scope with a ``metrics`` list: the entry with a matching id
    2. a top-level ``value``/``total``/``current``
    3. the ``data`` list, newest (last) entry first

    Returns None when nothing matches; callers treat that as a failure, not
    as zero.
    """
    record = as_record(payload)
    if record is None:
        return None

    metrics = record_list(record, "metrics")
    if scope is MetricScope.OVERVIEW and metrics is not None:
        return extract_overview_value(metrics, metric)

    direct = number_field(record, VALUE_FIELDS)
    if direct is not None:
        return MetricValue(value=direct)

    data = record_list(record, "data")
    if data:
        return extract_latest_data_value(data)

    return None
