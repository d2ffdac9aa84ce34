from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .formatting import DEFAULT_FORMATS
from .locales import DEFAULT_LOCALE, LOCALES


def _trueish(v: str | None, default: bool = False) -> bool:
    if v is None or not v.strip():
        return default
    return v.strip().lower() in {"1", "true", "yes", "on", "monday"}


@dataclass(frozen=True)
class TempusConfig:
    """Construction-time defaults for a Tempus engine."""

    locale: str = DEFAULT_LOCALE
    week_starts_monday: bool = False

    # Candidates for format autodetection, tried in order.
    default_formats: tuple[str, ...] = DEFAULT_FORMATS

    def __post_init__(self) -> None:
        if self.locale not in LOCALES:
            raise ValueError(f"Unknown locale: {self.locale} (available: {', '.join(LOCALES)})")

    @classmethod
    def from_env(cls, **overrides) -> "TempusConfig":
        """Read TEMPUS_LOCALE / TEMPUS_WEEK_STARTS_MONDAY (env vars or .env).

        Keyword overrides that are not None win over the environment.
        """
        load_dotenv()
        values = {
            "locale": os.environ.get("TEMPUS_LOCALE", "").strip() or DEFAULT_LOCALE,
            "week_starts_monday": _trueish(os.environ.get("TEMPUS_WEEK_STARTS_MONDAY")),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
