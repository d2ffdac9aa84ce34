"""Proleptic Gregorian calendar arithmetic on UTC epoch seconds.

Field values out of range are not rejected; they carry into the adjacent
unit the way positional numerals do (day 32 of December is January 1st of the
next year, hour -1 is 23:00 of the previous day).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .locales import month_number
from .types import FIELDS, CalendarDate, field_map, with_defaults

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR

DAYS_IN_WEEK = 7

# Month lengths of a common year, January first.
DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Days in a 400-year cycle, and from 0000-03-01 to the epoch.
_DAYS_IN_CYCLE = 146097
_EPOCH_SHIFT = 719468

# Tomohiko Sakamoto's month offsets.
_SAKAMOTO = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(
    month: int | str,
    year: int | None = None,
    names: Sequence[Sequence[str]] = (),
) -> int | None:
    """Return the length of a month, or None if the month is not recognized.

    `month` is 1-12 or a month name matched (case-insensitively) against each
    of the 12-name sequences in `names`. February gains a day when `year` is
    given and is a leap year.
    """

    if isinstance(month, str):
        m = _month_from_name(month, names)
    elif isinstance(month, int) and not isinstance(month, bool):
        m = month
    else:
        return None
    if m is None or not 1 <= m <= 12:
        return None

    n = DAYS_IN_MONTH[m - 1]
    if m == 2 and year is not None and is_leap_year(year):
        n += 1
    return n


def _month_from_name(name: str, names: Sequence[Sequence[str]]) -> int | None:
    for table in names:
        m = month_number(name, table)
        if m is not None:
            return m
    return None


def days_from_civil(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for a date with 1 <= month <= 12.

    `day` may be any integer; it is counted from the first of the month.
    """

    y = year - (1 if month <= 2 else 0)
    era = y // 400
    yoe = y - era * 400
    mp = (month + 9) % 12  # March is 0
    doy = (153 * mp + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * _DAYS_IN_CYCLE + doe - _EPOCH_SHIFT


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Inverse of days_from_civil: (year, month, day)."""

    z = days + _EPOCH_SHIFT
    era = z // _DAYS_IN_CYCLE
    doe = z - era * _DAYS_IN_CYCLE
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


def to_timestamp(value: CalendarDate | Mapping) -> int | None:
    """UTC seconds since the epoch for a (possibly partial) date.

    Missing fields default to 1970-01-01 00:00:00. Returns None when value is
    not date-like or holds a non-numeric field.
    """

    fields = field_map(value)
    if fields is None:
        return None
    f = with_defaults(fields)

    carry, month0 = divmod(f["month"] - 1, 12)
    days = days_from_civil(f["year"] + carry, month0 + 1, 1) + f["day"] - 1
    return (
        days * SECONDS_PER_DAY
        + f["hours"] * SECONDS_PER_HOUR
        + f["minutes"] * SECONDS_PER_MINUTE
        + f["seconds"]
    )


def from_timestamp(
    ts: int,
    *,
    week: bool = False,
    day_of_week: bool = False,
    week_starts_monday: bool = False,
) -> CalendarDate:
    days, rem = divmod(ts, SECONDS_PER_DAY)
    year, month, day = civil_from_days(days)
    hours, rem = divmod(rem, SECONDS_PER_HOUR)
    minutes, seconds = divmod(rem, SECONDS_PER_MINUTE)
    d = CalendarDate(year=year, month=month, day=day, hours=hours, minutes=minutes, seconds=seconds)

    if not (week or day_of_week):
        return d
    return CalendarDate(
        **d.fields(),
        day_of_week=_sakamoto(d) if day_of_week else None,
        week=week_number(d, week_starts_monday) if week else None,
    )


def normalize(value: CalendarDate | Mapping, **options: bool) -> CalendarDate | None:
    """Carry out-of-range fields into a valid date.

    Keyword options are passed to from_timestamp.
    """

    ts = to_timestamp(value)
    if ts is None:
        return None
    return from_timestamp(ts, **options)


def add_delta(value: CalendarDate | Mapping, delta: Mapping[str, int], sign: int = 1) -> CalendarDate | None:
    """Add (or, with sign=-1, subtract) a multi-unit delta field by field, then normalize."""

    fields = field_map(value)
    step = field_map(delta)
    if fields is None or step is None:
        return None
    base = with_defaults(fields)
    return normalize({name: base[name] + sign * step.get(name, 0) for name in FIELDS})


def _sakamoto(d: CalendarDate) -> int:
    year = d.year - (1 if d.month < 3 else 0)
    return (year + year // 4 - year // 100 + year // 400 + _SAKAMOTO[d.month - 1] + d.day) % 7


def day_of_week(value: CalendarDate | Mapping) -> int | None:
    """0=Sunday..6=Saturday."""

    d = normalize(value)
    if d is None:
        return None
    return _sakamoto(d)


def week_number(value: CalendarDate | Mapping, week_starts_monday: bool = False) -> int | None:
    """1-based week of the year.

    Weeks are counted in whole 7-day periods from the Sunday on or before
    January 1st; with Sunday-started weeks the count is shifted by a day.
    """

    d = normalize(value)
    if d is None:
        return None
    ts = to_timestamp(d)
    jan1 = CalendarDate(year=d.year)
    start = to_timestamp(jan1) - _sakamoto(jan1) * SECONDS_PER_DAY
    offset = 0 if week_starts_monday else 1
    return ((ts - start) // SECONDS_PER_DAY + offset) // DAYS_IN_WEEK + 1


def is_valid(value: CalendarDate | Mapping) -> bool:
    """True when the defaulted fields are already normalized."""

    fields = field_map(value)
    if fields is None:
        return False
    f = with_defaults(fields)
    d = normalize(f)
    return d is not None and d.fields() == f
