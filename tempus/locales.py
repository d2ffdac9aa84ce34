"""Month and weekday name tables, keyed by locale id.

Weekday tables start on Sunday to match day_of_week numbering.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

DEFAULT_LOCALE = "en_US"


@dataclass(frozen=True)
class LocaleTable:
    month_short: tuple[str, ...]
    month_long: tuple[str, ...]
    day_short: tuple[str, ...]
    day_long: tuple[str, ...]

    def month_names(self, long: bool = False) -> list[str]:
        return list(self.month_long if long else self.month_short)

    def day_names(self, long: bool = False) -> list[str]:
        return list(self.day_long if long else self.day_short)


LOCALES: dict[str, LocaleTable] = {
    "en_US": LocaleTable(
        month_short=("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
        month_long=(
            "January",
            "February",
            "March",
            "April",
            "May",
            "June",
            "July",
            "August",
            "September",
            "October",
            "November",
            "December",
        ),
        day_short=("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
        day_long=("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
    ),
    "ru_RU": LocaleTable(
        month_short=("Янв", "Фев", "Мар", "Апр", "Май", "Июн", "Июл", "Авг", "Сен", "Окт", "Ноя", "Дек"),
        month_long=(
            "Январь",
            "Февраль",
            "Март",
            "Апрель",
            "Май",
            "Июнь",
            "Июль",
            "Август",
            "Сентябрь",
            "Октябрь",
            "Ноябрь",
            "Декабрь",
        ),
        day_short=("Вс", "Пн", "Вт", "Ср", "Чт", "Пт", "Сб"),
        day_long=("Воскресенье", "Понедельник", "Вторник", "Среда", "Четверг", "Пятница", "Суббота"),
    ),
}


def month_number(name: str, names: Sequence[str]) -> int | None:
    """1-based month for a name, matched case-insensitively; None if unknown."""

    key = name.strip().casefold()
    for i, candidate in enumerate(names):
        if candidate.casefold() == key:
            return i + 1
    return None
