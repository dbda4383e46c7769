"""Schema-tolerant accessors for RevenueCat JSON payloads.

Upstream responses are treated as untyped JSON. Nothing here assumes a
shape beyond what it checks: a wrong type is simply "not there".
"""

import math
import sys
from typing import Any

# Candidate fields in priority order
VALUE_FIELDS = ("value", "total", "current")
GOAL_CURRENT_FIELDS = ("current", "value", "total")
OVERVIEW_LABEL_FIELDS = ("description", "period", "name")


def is_finite_number(candidate: Any) -> bool:
    """True for JSON numbers that are finite; booleans are not numbers."""
    if isinstance(candidate, bool):
        return False
    if isinstance(candidate, int):
        # JSON integers too large for a double are not usable values
        return abs(candidate) <= sys.float_info.max
    return isinstance(candidate, float) and math.isfinite(candidate)


def pick_number(*candidates: Any) -> int | float | None:
    """Return the first finite number among ``candidates``."""
    for candidate in candidates:
        if is_finite_number(candidate):
            return candidate
    return None


def pick_label(*candidates: Any) -> str | None:
    """Return the first string with non-whitespace content."""
    for candidate in candidates:
        if isinstance(candidate, str) and candidate.strip():
            return candidate
    return None


def number_field(record: dict[str, Any], fields: tuple[str, ...]) -> int | float | None:
    """First finite number among ``fields`` of ``record``."""
    return pick_number(*(record.get(field) for field in fields))


def label_field(record: dict[str, Any], fields: tuple[str, ...]) -> str | None:
    """First non-blank string among ``fields`` of ``record``."""
    return pick_label(*(record.get(field) for field in fields))


def as_record(node: Any) -> dict[str, Any] | None:
    """Return ``node`` if it is a JSON object."""
    return node if isinstance(node, dict) else None


def record_list(payload: Any, key: str) -> list[dict[str, Any]] | None:
    """Return the object entries of ``payload[key]``.

    None when the payload is not an object or ``key`` is not a list;
    non-object entries of the list are dropped.
    """
    record = as_record(payload)
    if record is None:
        return None

    entries = record.get(key)
    if not isinstance(entries, list):
        return None
    return [entry for entry in entries if isinstance(entry, dict)]


def metric_id(record: dict[str, Any]) -> str | None:
    """The record's ``id`` when it is a non-empty string."""
    value = record.get("id")
    if isinstance(value, str) and value:
        return value
    return None
