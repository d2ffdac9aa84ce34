from __future__ import annotations

from tempus import gregorian
from tempus.ranges import collect_dates, iter_dates, resolve_period
from tempus.types import CalendarDate

NOV_1 = gregorian.to_timestamp({"year": 2013, "month": 11, "day": 1})


def _render(d: CalendarDate, pattern: str) -> str:
    return f"{pattern}:{d.year:04d}-{d.month:02d}-{d.day:02d}"


def test_resolve_period_shapes() -> None:
    assert resolve_period(3600) == {"year": 0, "month": 0, "day": 0, "hours": 0, "minutes": 0, "seconds": 3600}
    assert resolve_period("month")["month"] == 1
    assert resolve_period("week")["day"] == 7
    assert resolve_period({"day": 1, "hours": 12})["hours"] == 12


def test_resolve_period_rejects() -> None:
    assert resolve_period(0) is None
    assert resolve_period("fortnight") is None
    assert resolve_period({"day": "x"}) is None
    assert resolve_period({}) is None
    assert resolve_period(True) is None
    assert resolve_period(1.5) is None
    assert resolve_period(-60) is None
    assert resolve_period({"day": -1, "hours": 0}) is None


def test_iter_dates_inclusive_with_derived_fields() -> None:
    end = NOV_1 + 9 * 86400
    out = list(iter_dates(NOV_1, end, resolve_period("day")))
    assert [d.day for d in out] == list(range(1, 11))
    assert out[0].day_of_week == 5  # Friday
    assert all(d.week == gregorian.week_number(d) for d in out)


def test_iter_dates_monday_weeks() -> None:
    out = list(iter_dates(NOV_1, NOV_1 + 6 * 86400, resolve_period("day"), week_starts_monday=True))
    assert [d.week for d in out] == [gregorian.week_number(d, True) for d in out]


def test_iter_dates_empty_and_stalled() -> None:
    assert list(iter_dates(NOV_1, NOV_1 - 1, resolve_period("day"))) == []
    # a month forward and 31 days back lands on Oct 31st
    out = list(iter_dates(NOV_1, NOV_1 + 86400, resolve_period({"month": 1, "day": -31})))
    assert len(out) == 1


def test_collect_flat_and_formatted() -> None:
    dates = [CalendarDate(2013, 11, 1), CalendarDate(2013, 11, 2)]
    assert collect_dates(iter(dates), _render) == dates
    assert collect_dates(iter(dates), _render, format="x") == ["x:2013-11-01", "x:2013-11-02"]


def test_collect_as_object_uses_default_key_format() -> None:
    dates = [CalendarDate(2013, 11, 1), CalendarDate(2013, 11, 2)]
    out = collect_dates(iter(dates), _render, as_object=True)
    assert list(out) == ["%F %H:%M:%S:2013-11-01", "%F %H:%M:%S:2013-11-02"]
    assert out["%F %H:%M:%S:2013-11-02"] is dates[1]


def test_collect_groups_consecutive_runs() -> None:
    dates = [
        CalendarDate(2013, 1, 30),
        CalendarDate(2013, 1, 31),
        CalendarDate(2013, 2, 1),
        CalendarDate(2014, 1, 1),
    ]
    assert collect_dates(iter(dates), _render, group_by="month") == [dates[:2], [dates[2]], [dates[3]]]
    # only neighbours are compared: Feb 1st and Jan 1st share a bucket
    assert collect_dates(iter(dates), _render, group_by="day") == [[dates[0]], [dates[1]], dates[2:]]


def test_collect_bad_group_by() -> None:
    assert collect_dates(iter([]), _render, group_by="mood") is None
    assert collect_dates(iter([]), _render, group_by="week") == []
