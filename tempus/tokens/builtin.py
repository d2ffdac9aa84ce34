"""Built-in format tokens.

Weekday tokens are display only: a weekday name or number does not determine
a date, so parsing them yields no fields.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from .. import gregorian
from ..locales import LocaleTable, month_number
from ..types import CalendarDate, coerce_int, field_map
from .base import Token

_WIDTHS = {"year": 4, "month": 2, "day": 2}


def _pad(value: int, width: int) -> str:
    return str(value).zfill(width)


@dataclass(frozen=True)
class NumberToken(Token):
    """A single zero-padded numeric field."""

    sigil: str
    field: str
    width: int
    pattern: str

    def render(self, date: CalendarDate, locale: LocaleTable) -> str:
        return _pad(getattr(date, self.field), self.width)

    def parse(self, text: str, locale: LocaleTable) -> dict[str, int]:
        v = coerce_int(text)
        return {} if v is None else {self.field: v}


@dataclass(frozen=True)
class WeekdayNumberToken(Token):
    sigil: str = "%w"
    pattern: str = r"\d{1}"

    def render(self, date: CalendarDate, locale: LocaleTable) -> str:
        return str(gregorian.day_of_week(date))

    def parse(self, text: str, locale: LocaleTable) -> dict[str, int]:
        return {}


@dataclass(frozen=True)
class WeekdayNameToken(Token):
    sigil: str
    long: bool
    pattern: str = r"\w+"

    def render(self, date: CalendarDate, locale: LocaleTable) -> str:
        names = locale.day_long if self.long else locale.day_short
        return names[gregorian.day_of_week(date)]

    def parse(self, text: str, locale: LocaleTable) -> dict[str, int]:
        return {}


@dataclass(frozen=True)
class MonthNameToken(Token):
    sigil: str
    long: bool
    pattern: str = r"\w+"

    def render(self, date: CalendarDate, locale: LocaleTable) -> str:
        names = locale.month_long if self.long else locale.month_short
        # un-normalized dates keep the name cycling
        return names[(date.month - 1) % 12]

    def parse(self, text: str, locale: LocaleTable) -> dict[str, int]:
        names = locale.month_long if self.long else locale.month_short
        m = month_number(text, names)
        return {} if m is None else {"month": m}


@dataclass(frozen=True)
class EpochToken(Token):
    sigil: str = "%s"
    pattern: str = r"\d{1,10}"

    def render(self, date: CalendarDate, locale: LocaleTable) -> str:
        return str(gregorian.to_timestamp(date))

    def parse(self, text: str, locale: LocaleTable) -> dict[str, int]:
        ts = coerce_int(text)
        if ts is None:
            return {}
        return gregorian.from_timestamp(ts).fields()


@dataclass(frozen=True)
class DateToken(Token):
    """A whole date written as zero-padded fields joined by one separator.

    render and parse are exact inverses for any in-range date.
    """

    sigil: str
    order: tuple[str, str, str]
    separator: str

    @property
    def pattern(self) -> str:
        return re.escape(self.separator).join(rf"\d{{{_WIDTHS[f]}}}" for f in self.order)

    def render(self, date: CalendarDate, locale: LocaleTable) -> str:
        return self.separator.join(_pad(getattr(date, f), _WIDTHS[f]) for f in self.order)

    def parse(self, text: str, locale: LocaleTable) -> dict[str, int]:
        parts = text.split(self.separator)
        if len(parts) != len(self.order):
            return {}
        out: dict[str, int] = {}
        for name, part in zip(self.order, parts):
            v = coerce_int(part)
            if v is None:
                return {}
            out[name] = v
        return out


@dataclass(frozen=True)
class FunctionToken(Token):
    """A token backed by caller-supplied callables.

    `render_fn(date) -> str` and `parse_fn(text) -> mapping of fields`.
    """

    sigil: str
    render_fn: Callable[[CalendarDate], object]
    parse_fn: Callable[[str], Mapping | None]
    pattern: str

    def render(self, date: CalendarDate, locale: LocaleTable) -> str:
        return str(self.render_fn(date))

    def parse(self, text: str, locale: LocaleTable) -> dict[str, int]:
        out = self.parse_fn(text)
        if out is None:
            return {}
        return field_map(out) or {}


def builtin_tokens() -> list[Token]:
    """The default token set, in formatting order."""

    return [
        NumberToken("%d", "day", 2, r"\d{2}"),
        NumberToken("%m", "month", 2, r"\d{2}"),
        NumberToken("%Y", "year", 4, r"\d{4}"),
        WeekdayNumberToken(),
        WeekdayNameToken("%a", long=False),
        WeekdayNameToken("%A", long=True),
        MonthNameToken("%b", long=False),
        MonthNameToken("%B", long=True),
        NumberToken("%H", "hours", 2, r"\d{2}"),
        NumberToken("%M", "minutes", 2, r"\d{2}"),
        NumberToken("%S", "seconds", 2, r"\d{2}"),
        EpochToken(),
        DateToken("%F", ("year", "month", "day"), "-"),
        DateToken("%D", ("month", "day", "year"), "/"),
    ]
