from __future__ import annotations

from abc import ABC, abstractmethod

from ..locales import LocaleTable
from ..types import CalendarDate


class Token(ABC):
    """A format token: a sigil, a regex fragment, and a render/parse pair.

    `pattern` is spliced into a larger regular expression and must match the
    rendered text only. It may not rely on anchors.
    """

    sigil: str
    pattern: str

    @abstractmethod
    def render(self, date: CalendarDate, locale: LocaleTable) -> str:
        raise NotImplementedError

    @abstractmethod
    def parse(self, text: str, locale: LocaleTable) -> dict[str, int]:
        """Return the fields recovered from matched text ({} when none can be)."""
        raise NotImplementedError
