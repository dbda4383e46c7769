"""Payload accessor tests."""

from rcframes.services.frames.payload import (
    VALUE_FIELDS,
    metric_id,
    number_field,
    pick_label,
    pick_number,
    record_list,
)


def test_pick_number_skips_non_finite_and_non_numbers():
    assert pick_number(None, True, "3", float("nan"), float("inf"), 7, 8) == 7
    assert pick_number(0.0) == 0.0
    assert pick_number() is None
    assert pick_number(False, "1") is None


def test_pick_label_skips_blank_strings():
    assert pick_label(None, "", "   ", 3, "Monthly", "Other") == "Monthly"
    assert pick_label(" padded ") == " padded "
    assert pick_label("", None) is None


def test_number_field_respects_priority():
    """Test ``value`` beats ``total`` beats ``current``."""
    assert number_field({"value": 1, "total": 2, "current": 3}, VALUE_FIELDS) == 1
    assert number_field({"value": None, "total": 2, "current": 3}, VALUE_FIELDS) == 2
    assert number_field({"value": "1", "current": 3}, VALUE_FIELDS) == 3
    assert number_field({}, VALUE_FIELDS) is None


def test_record_list_filters_non_objects():
    payload = {"metrics": [{"id": "mrr"}, None, 4, "x", {"id": "revenue"}]}

    assert record_list(payload, "metrics") == [{"id": "mrr"}, {"id": "revenue"}]
    assert record_list(payload, "data") is None
    assert record_list({"metrics": {"id": "mrr"}}, "metrics") is None
    assert record_list([{"id": "mrr"}], "metrics") is None


def test_metric_id_requires_non_empty_string():
    assert metric_id({"id": "mrr"}) == "mrr"
    assert metric_id({"id": ""}) is None
    assert metric_id({"id": 5}) is None
    assert metric_id({}) is None


def test_integers_beyond_double_range_are_not_numbers():
    huge = 10**500

    assert pick_number(huge, 3) == 3
    assert pick_number(-huge) is None
    assert pick_number(2**1000) == 2**1000
