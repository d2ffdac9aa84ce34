from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal, Union

Unit = Literal["year", "month", "day", "hours", "minutes", "seconds"]

FIELDS: tuple[Unit, ...] = ("year", "month", "day", "hours", "minutes", "seconds")

# Derived, read-only fields a CalendarDate may carry.
DERIVED_FIELDS = ("day_of_week", "week")

DEFAULTS: dict[str, int] = {
    "year": 1970,
    "month": 1,
    "day": 1,
    "hours": 0,
    "minutes": 0,
    "seconds": 0,
}


@dataclass(frozen=True)
class CalendarDate:
    """A civil date and time of day, always UTC.

    Dates produced from a timestamp are in range. Dates built from a partial
    field map are only defaulted, so `day=32` survives until the date is
    normalized.
    """

    year: int = 1970
    month: int = 1
    day: int = 1
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    # 0=Sunday..6=Saturday
    day_of_week: int | None = None
    # 1-based week of the year
    week: int | None = None

    def fields(self) -> dict[str, int]:
        """Return the six base fields as a plain dict."""
        return {name: getattr(self, name) for name in FIELDS}

    def as_dict(self) -> dict[str, int]:
        out = self.fields()
        for name in DERIVED_FIELDS:
            value = getattr(self, name)
            if value is not None:
                out[name] = value
        return out


DateLike = Union[CalendarDate, Mapping]


def coerce_int(value: object) -> int | None:
    """Return value as an int, or None when it is not numeric."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return math.floor(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def field_map(value: object) -> dict[str, int] | None:
    """Extract the base fields present in a CalendarDate or mapping.

    Missing (or None) fields are left out. Returns None if value is not
    date-like or a present field is not numeric.
    """

    if isinstance(value, CalendarDate):
        return value.fields()
    if not isinstance(value, Mapping):
        return None

    out: dict[str, int] = {}
    for name in FIELDS:
        raw = value.get(name)
        if raw is None:
            continue
        v = coerce_int(raw)
        if v is None:
            return None
        out[name] = v
    return out


def with_defaults(fields: Mapping[str, int]) -> dict[str, int]:
    return {name: fields.get(name, DEFAULTS[name]) for name in FIELDS}


def merge_fields(acc: Mapping[str, int], partial: Mapping[str, int | None]) -> dict[str, int]:
    """Overlay partial on acc; a field set to None in partial keeps acc's value."""

    out = dict(acc)
    for name in FIELDS:
        v = partial.get(name)
        if v is not None:
            out[name] = v
    return out
