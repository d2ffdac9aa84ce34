"""The calendar engine.

Bad input never raises: every operation returns None (or False for the
predicates) when it cannot produce a value, so results can be chained and
checked once.
"""

from __future__ import annotations

import logging
import time as _time
from collections.abc import Callable, Iterator, Mapping
from dataclasses import replace

from . import formatting, gregorian, ranges, timers
from .config import TempusConfig
from .locales import LOCALES, LocaleTable
from .tokens import FunctionToken, Token, TokenRegistry, build_registry
from .types import FIELDS, CalendarDate, coerce_int, field_map, with_defaults

logger = logging.getLogger(__name__)

VERSION = "0.2.0"

# Divisors for between(); months and years use an average 29.4-day month.
_UNIT_SECONDS: dict[str, float] = {
    "year": gregorian.SECONDS_PER_DAY * 12 * 29.4,
    "month": gregorian.SECONDS_PER_DAY * 29.4,
    "week": gregorian.SECONDS_PER_DAY * gregorian.DAYS_IN_WEEK,
    "day": gregorian.SECONDS_PER_DAY,
    "hours": gregorian.SECONDS_PER_HOUR,
    "minutes": gregorian.SECONDS_PER_MINUTE,
    "seconds": 1,
}


class Tempus:
    """Calendar engine owning a token registry, a locale and a week start.

    Engines are independent of each other; registering a token on one does
    not affect another.
    """

    version = VERSION

    def __init__(self, config: TempusConfig | None = None, registry: TokenRegistry | None = None) -> None:
        self.config = config if config is not None else TempusConfig()
        self.registry = registry if registry is not None else build_registry()
        self._locale = self.config.locale
        self._week_starts_monday = self.config.week_starts_monday

    # -- settings -----------------------------------------------------------

    @property
    def locale(self) -> LocaleTable:
        return LOCALES[self._locale]

    def set_locale(self, locale_id: str | None = None) -> str | None:
        """Select a locale (the configured default when None); None if unknown."""
        loc = locale_id or self.config.locale
        if loc not in LOCALES:
            logger.debug("unknown locale %r, keeping %s", loc, self._locale)
            return None
        self._locale = loc
        return loc

    def get_locale(self) -> str:
        return self._locale

    def available_locales(self) -> list[str]:
        return list(LOCALES)

    def set_week_starts_monday(self, flag: bool) -> bool:
        self._week_starts_monday = bool(flag)
        return self._week_starts_monday

    def get_week_starts_monday(self) -> bool:
        return self._week_starts_monday

    # -- conversions --------------------------------------------------------

    def _as_date(self, value: object) -> CalendarDate | None:
        if isinstance(value, CalendarDate):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return gregorian.from_timestamp(value)
        if isinstance(value, Mapping):
            fields = field_map(value)
            return None if fields is None else CalendarDate(**with_defaults(fields))
        return None

    def _timestamp(self, value: object, pattern: str | None = None) -> int | None:
        if isinstance(value, str):
            fields = self.parse_fields(value, pattern)
            return None if fields is None else gregorian.to_timestamp(fields)
        d = self._as_date(value)
        return None if d is None else gregorian.to_timestamp(d)

    def time(self, value: object = None, pattern: str | None = None) -> int | None:
        """UTC seconds since the epoch.

        No value: the current time. A string is parsed with `pattern`, or an
        autodetected one. Ints are taken as timestamps already.
        """
        if value is None:
            return int(_time.time())
        return self._timestamp(value, pattern)

    def date(
        self,
        value: object,
        pattern: str | None = None,
        *,
        week: bool = False,
        day_of_week: bool = False,
    ) -> CalendarDate | None:
        """Build a CalendarDate from a timestamp, a field mapping or text.

        Mappings are defaulted but not carried; see normalize_date.
        """
        d = self.parse(value, pattern) if isinstance(value, str) else self._as_date(value)
        if d is None:
            return None
        if week or day_of_week:
            d = replace(
                d,
                week=gregorian.week_number(d, self._week_starts_monday) if week else None,
                day_of_week=gregorian.day_of_week(d) if day_of_week else None,
            )
        return d

    def now(self, pattern: str | None = None) -> CalendarDate | str | None:
        d = gregorian.from_timestamp(int(_time.time()), day_of_week=True)
        return d if pattern is None else self.format(d, pattern)

    def normalize_date(self, value: object) -> CalendarDate | None:
        d = self._as_date(value)
        return None if d is None else gregorian.normalize(d)

    # -- calendar facts -----------------------------------------------------

    def is_leap_year(self, year: object = None) -> bool | None:
        y = self.now().year if year is None else coerce_int(year)
        return None if y is None else gregorian.is_leap_year(y)

    def days_in_month(self, month: int | str, year: object = None) -> int | None:
        y = None
        if year is not None:
            y = coerce_int(year)
            if y is None:
                return None
        names = (self.locale.month_short, self.locale.month_long)
        return gregorian.days_in_month(month, y, names=names)

    def month_names(self, long: bool = False) -> list[str]:
        return self.locale.month_names(long)

    def day_names(self, long: bool = False) -> list[str]:
        return self.locale.day_names(long)

    def day_of_week(self, value: object) -> int | None:
        d = self._as_date(value)
        return None if d is None else gregorian.day_of_week(d)

    def week_number(self, value: object, week_starts_monday: bool | None = None) -> int | None:
        d = self._as_date(value)
        if d is None:
            return None
        if week_starts_monday is None:
            week_starts_monday = self._week_starts_monday
        return gregorian.week_number(d, week_starts_monday)

    # -- arithmetic ---------------------------------------------------------

    def _shift(self, value: object, amount: object, unit: str | None, sign: int) -> CalendarDate | None:
        d = self._as_date(value)
        if d is None:
            return None
        if isinstance(amount, Mapping):
            delta = field_map(amount)
        else:
            n = coerce_int(amount)
            if n is None:
                return None
            if unit == "week":
                delta = {"day": 7 * n}
            elif unit in FIELDS:
                delta = {unit: n}
            else:
                logger.debug("unknown unit %r", unit)
                return None
        if delta is None:
            return None
        return gregorian.add_delta(d, delta, sign)

    def inc_date(self, value: object, amount: object, unit: str | None = None) -> CalendarDate | None:
        """Add `amount` of `unit`, or a delta mapping, and normalize."""
        return self._shift(value, amount, unit, 1)

    def dec_date(self, value: object, amount: object, unit: str | None = None) -> CalendarDate | None:
        return self._shift(value, amount, unit, -1)

    def between(self, date_from: object, date_to: object, unit: str) -> int | None:
        """Whole units from date_from to date_to (negative when reversed)."""
        divisor = _UNIT_SECONDS.get(unit)
        if divisor is None:
            return None
        a = self._timestamp(date_from)
        b = self._timestamp(date_to)
        if a is None or b is None:
            return None
        return int((b - a) // divisor)

    # -- text ---------------------------------------------------------------

    def format(self, value: object, pattern: str) -> str | None:
        d = self._as_date(value)
        if d is None or not isinstance(pattern, str):
            return None
        return formatting.format_date(d, pattern, self.registry, self.locale)

    def detect_format(self, text: str) -> str | None:
        return formatting.detect_format(text, self.registry, self.locale, self.config.default_formats)

    def parse_fields(self, text: str, pattern: str | None = None) -> dict[str, int] | None:
        """Fields exactly as written in text; see parse for a normalized date."""
        return formatting.parse_fields(text, pattern, self.registry, self.locale, self.config.default_formats)

    def parse(self, text: str, pattern: str | None = None) -> CalendarDate | None:
        return formatting.parse_date(text, pattern, self.registry, self.locale, self.config.default_formats)

    def validate(self, value: object, pattern: str | None = None) -> bool:
        """True when value names a real date and time (no field needed carrying)."""
        if isinstance(value, str):
            fields = self.parse_fields(value, pattern)
            return fields is not None and gregorian.is_valid(fields)
        return gregorian.is_valid(value)

    def reformat(self, text: str, pattern_from: str | None, pattern_to: str) -> str | None:
        d = self.parse(text, pattern_from)
        return None if d is None else self.format(d, pattern_to)

    def register_format(
        self,
        sigil: str,
        render: Callable[[CalendarDate], object],
        parse: Callable[[str], Mapping | None],
        pattern: str,
    ) -> None:
        self.registry.register(FunctionToken(sigil, render, parse, pattern))

    def register_token(self, token: Token) -> None:
        self.registry.register(token)

    def unregister_format(self, sigil: str) -> bool:
        return self.registry.unregister(sigil)

    # -- ranges -------------------------------------------------------------

    def iter_dates(
        self,
        date_from: object,
        date_to: object,
        period: object = "day",
        *,
        format_from: str | None = None,
        format_to: str | None = None,
    ) -> Iterator[CalendarDate] | None:
        """Lazily walk from date_from to date_to inclusive; None on bad input."""
        ts_from = self._timestamp(date_from, format_from)
        ts_to = self._timestamp(date_to, format_to)
        delta = ranges.resolve_period(period)
        if ts_from is None or ts_to is None or delta is None:
            return None
        return ranges.iter_dates(ts_from, ts_to, delta, week_starts_monday=self._week_starts_monday)

    def generate_dates(
        self,
        date_from: object,
        date_to: object,
        period: object = "day",
        *,
        format_from: str | None = None,
        format_to: str | None = None,
        format: str | None = None,
        as_object: bool = False,
        group_by: str | None = None,
    ) -> list | dict | None:
        dates = self.iter_dates(date_from, date_to, period, format_from=format_from, format_to=format_to)
        if dates is None:
            return None
        return ranges.collect_dates(dates, self.format, format=format, as_object=as_object, group_by=group_by)

    # -- timers -------------------------------------------------------------

    def clock(self, callback: Callable[[CalendarDate], None], service: timers.TimerService | None = None):
        return timers.clock(self, callback, service)

    def alarm(
        self,
        target: object,
        callback: Callable[[object], None],
        service: timers.TimerService | None = None,
    ):
        return timers.alarm(self, target, callback, service)
