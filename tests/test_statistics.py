"""Tests for service/statistics.py."""

import pendulum

from marktally.service.statistics import (
    aggregate_by_day,
    aggregate_by_month,
    aggregate_by_quarter,
    aggregate_by_unit,
    aggregate_by_week,
    aggregate_by_year,
    get_month_weeks_data,
    month_week_starts,
)

WORK = [{"name": "work"}]


def test_day_aggregation_counts_base_category(make_item):
    item = make_item(date="2024-01-01", category_key="work/done")
    data = aggregate_by_day([item], WORK, "2024-01-01")
    assert data["counts"]["work"] == 1
    assert len(data["items"]) == 1


def test_unknown_categories_and_other_days_are_ignored(make_item):
    items = [
        make_item(date="2024-01-01", category_key="play/done"),
        make_item(date="2024-01-02", category_key="work"),
        make_item(date=None, category_key="work"),
    ]
    data = aggregate_by_day(items, WORK, "2024-01-01")
    assert data == {"counts": {"work": 0}, "items": []}


def test_week_uses_iso_week(make_item):
    items = [
        make_item(date="2023-12-31", category_key="work"),
        make_item(date="2024-01-01", category_key="work"),
        make_item(date="2024-01-07", category_key="work"),
        make_item(date="2024-01-08", category_key="work"),
    ]
    data = aggregate_by_week(items, WORK, "2024-01-03")
    assert data["counts"]["work"] == 2
    assert [item["date"] for item in data["items"]] == ["2024-01-01", "2024-01-07"]


def test_use_period_only_counts_matching_period(make_item):
    items = [
        make_item(date="2024-02-10", category_key="work", period="月"),
        make_item(date="2024-02-11", category_key="work", period="周"),
        make_item(date="2024-02-12", category_key="work", period=None),
    ]
    assert aggregate_by_month(items, WORK, "2024-02-01")["counts"]["work"] == 3
    assert aggregate_by_month(items, WORK, "2024-02-01", use_period=True)["counts"]["work"] == 1


def test_quarter_and_year(make_item):
    items = [
        make_item(date="2024-04-01", category_key="work", period="季"),
        make_item(date="2024-06-30", category_key="work", period="year"),
        make_item(date="2024-07-01", category_key="work", period="year"),
    ]
    assert aggregate_by_quarter(items, WORK, "2024-05-05")["counts"]["work"] == 2
    assert aggregate_by_quarter(items, WORK, "2024-05-05", use_period=True)["counts"]["work"] == 1
    assert aggregate_by_year(items, WORK, "2024-12-31", use_period=True)["counts"]["work"] == 2


def test_aggregate_by_unit_dispatches(make_item):
    item = make_item(date="2024-03-15", category_key="work")
    for unit in ("day", "week", "month", "quarter", "year"):
        assert aggregate_by_unit([item], WORK, "2024-03-15", unit)["counts"]["work"] == 1


def test_invalid_anchor_gives_zeroed_counts(make_item):
    item = make_item(date="2024-03-15", category_key="work")
    assert aggregate_by_day([item], WORK, "not a date") == {"counts": {"work": 0}, "items": []}


def test_month_weeks_cover_the_month():
    starts = month_week_starts("2024-02-15")
    assert starts[0] == pendulum.date(2024, 1, 29)
    assert starts[-1] == pendulum.date(2024, 2, 26)
    assert len(starts) == 5


def test_month_weeks_data(make_item):
    items = [
        make_item(date="2024-01-30", category_key="work"),
        make_item(date="2024-02-14", category_key="work"),
        make_item(date="2024-02-15", category_key="work"),
    ]
    weeks = get_month_weeks_data(items, WORK, "2024-02-01")
    assert [week["counts"]["work"] for week in weeks] == [1, 0, 2, 0, 0]
    assert get_month_weeks_data(items, WORK, "bad") == []
