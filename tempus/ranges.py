"""Enumerate dates between two timestamps, optionally bucketed.

Each step adds the period to the previous date field by field and carries, so
a monthly walk from January 31st lands on March 3rd (or 2nd) and continues
from there.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping

from . import gregorian
from .types import FIELDS, CalendarDate, field_map

logger = logging.getLogger(__name__)

# Key format for as_object output when no format is given.
OBJECT_KEY_FORMAT = "%F %H:%M:%S"

GROUP_FIELDS = FIELDS + ("week", "day_of_week")

Renderer = Callable[[CalendarDate, str], str]


def resolve_period(period: object) -> dict[str, int] | None:
    """Turn a period into a full delta.

    int: seconds. str: one of the unit names (or "week"). Mapping: a
    multi-unit delta. None for anything else, or a delta with no positive
    field.
    """

    if isinstance(period, bool):
        return None
    if isinstance(period, int):
        fields: dict[str, int] | None = {"seconds": period}
    elif isinstance(period, str):
        if period == "week":
            fields = {"day": 7}
        elif period in FIELDS:
            fields = {period: 1}
        else:
            fields = None
    elif isinstance(period, Mapping):
        fields = field_map(period)
    else:
        fields = None

    if fields is None:
        logger.debug("unsupported period: %r", period)
        return None
    delta = {name: fields.get(name, 0) for name in FIELDS}
    if not any(v > 0 for v in delta.values()):
        logger.debug("period %r does not move forward", period)
        return None
    return delta


def iter_dates(
    ts_from: int,
    ts_to: int,
    delta: Mapping[str, int],
    *,
    week_starts_monday: bool = False,
) -> Iterator[CalendarDate]:
    """Yield dates from ts_from to ts_to inclusive, with week and day_of_week set.

    Stops early if a step does not advance (e.g. a negative period).
    """

    ts = ts_from
    while ts <= ts_to:
        current = gregorian.from_timestamp(
            ts, week=True, day_of_week=True, week_starts_monday=week_starts_monday
        )
        yield current

        nxt = gregorian.to_timestamp(gregorian.add_delta(current, delta))
        if nxt is None or nxt <= ts:
            logger.debug("period %r stalls at %s", dict(delta), ts)
            return
        ts = nxt


def collect_dates(
    dates: Iterator[CalendarDate],
    render: Renderer,
    *,
    format: str | None = None,
    as_object: bool = False,
    group_by: str | None = None,
) -> list | dict | None:
    """Collect dates into the requested shape.

    - flat list of dates (or rendered strings when `format` is given)
    - dict keyed by rendered string when `as_object`
    - list of buckets when `group_by` names a field; a new bucket starts each
      time that field changes between consecutive dates
    """

    if group_by is not None and group_by not in GROUP_FIELDS:
        logger.debug("cannot group by %r", group_by)
        return None

    def add(container: list | dict, d: CalendarDate) -> None:
        if as_object:
            container[render(d, format or OBJECT_KEY_FORMAT)] = d
        elif format is not None:
            container.append(render(d, format))
        else:
            container.append(d)

    if group_by is None:
        result: list | dict = {} if as_object else []
        for d in dates:
            add(result, d)
        return result

    buckets: list = []
    prev: int | None = None
    for d in dates:
        value = getattr(d, group_by)
        if not buckets or value != prev:
            buckets.append({} if as_object else [])
            prev = value
        add(buckets[-1], d)
    return buckets
