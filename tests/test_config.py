from __future__ import annotations

import pytest

from tempus import DEFAULT_FORMATS, TempusConfig
from tempus.config import _trueish


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("TEMPUS_LOCALE", raising=False)
    monkeypatch.delenv("TEMPUS_WEEK_STARTS_MONDAY", raising=False)


def test_defaults() -> None:
    cfg = TempusConfig()
    assert cfg.locale == "en_US"
    assert cfg.week_starts_monday is False
    assert cfg.default_formats == DEFAULT_FORMATS


def test_from_env_without_variables() -> None:
    assert TempusConfig.from_env() == TempusConfig()


def test_from_env_reads_variables(monkeypatch) -> None:
    monkeypatch.setenv("TEMPUS_LOCALE", " ru_RU ")
    monkeypatch.setenv("TEMPUS_WEEK_STARTS_MONDAY", "yes")
    cfg = TempusConfig.from_env()
    assert cfg.locale == "ru_RU"
    assert cfg.week_starts_monday is True


def test_overrides_win_unless_none(monkeypatch) -> None:
    monkeypatch.setenv("TEMPUS_LOCALE", "ru_RU")
    assert TempusConfig.from_env(locale="en_US").locale == "en_US"
    assert TempusConfig.from_env(locale=None).locale == "ru_RU"
    assert TempusConfig.from_env(week_starts_monday=True).week_starts_monday is True


def test_unknown_locale_raises(monkeypatch) -> None:
    with pytest.raises(ValueError, match="Unknown locale"):
        TempusConfig(locale="xx_XX")
    monkeypatch.setenv("TEMPUS_LOCALE", "xx_XX")
    with pytest.raises(ValueError):
        TempusConfig.from_env()


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, False),
        ("", False),
        ("1", True),
        ("TRUE", True),
        (" on ", True),
        ("monday", True),
        ("0", False),
        ("sunday", False),
    ],
)
def test_trueish(raw, expected) -> None:
    assert _trueish(raw) is expected
