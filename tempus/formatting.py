"""Render dates through token patterns and parse them back.

A pattern is literal text with token sigils in it ("%d.%m.%Y"). There is no
escape for a literal sigil.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from . import gregorian
from .locales import LocaleTable
from .tokens import Token, TokenRegistry
from .types import CalendarDate, merge_fields

logger = logging.getLogger(__name__)

# Tried in order by detect_format; earlier entries win on ambiguous input.
DEFAULT_FORMATS: tuple[str, ...] = (
    "%d.%m.%Y",
    "%m/%d/%Y",
    "%Y-%m-%d",
    "%d.%m.%Y %H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
    "%Y",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d %H",
)


def format_date(date: CalendarDate, pattern: str, registry: TokenRegistry, locale: LocaleTable) -> str:
    """Substitute the first occurrence of each registered sigil.

    Tokens are applied once each, in registry order, to the working string.
    Text rendered by an earlier token is visible to later tokens, so a
    rendered value containing a later sigil gets expanded again.
    """

    out = pattern
    for token in registry:
        if token.sigil in out:
            out = out.replace(token.sigil, token.render(date, locale), 1)
    return out


def compile_pattern(pattern: str, registry: TokenRegistry) -> tuple[re.Pattern[str], list[Token]] | None:
    """Translate a pattern to a regex and the tokens of its groups, in order.

    Sigils are matched longest first; every other character is literal.
    Returns None when a token fragment is not a valid regex.
    """

    sigils = sorted(registry.sigils(), key=len, reverse=True)
    parts: list[str] = []
    tokens: list[Token] = []

    i = 0
    while i < len(pattern):
        for sigil in sigils:
            if pattern.startswith(sigil, i):
                token = registry.get(sigil)
                parts.append(f"(?P<t{len(tokens)}>{token.pattern})")
                tokens.append(token)
                i += len(sigil)
                break
        else:
            parts.append(re.escape(pattern[i]))
            i += 1

    try:
        return re.compile("".join(parts)), tokens
    except re.error as e:
        logger.debug("pattern %r does not compile: %s", pattern, e)
        return None


def parse_fields(
    text: str,
    pattern: str | None,
    registry: TokenRegistry,
    locale: LocaleTable,
    formats: Sequence[str] = DEFAULT_FORMATS,
) -> dict[str, int] | None:
    """Match text against pattern and merge each token's fields left to right.

    Fields are returned as written (day 32 stays 32). Without a pattern the
    first of `formats` that matches is used. None when nothing matches.
    """

    if not isinstance(text, str):
        return None
    if pattern is None:
        pattern = detect_format(text, registry, locale, formats)
        if pattern is None:
            return None

    compiled = compile_pattern(pattern, registry)
    if compiled is None:
        return None
    rx, tokens = compiled

    m = rx.fullmatch(text)
    if not m:
        return None

    fields: dict[str, int] = {}
    for n, token in enumerate(tokens):
        fields = merge_fields(fields, token.parse(m.group(f"t{n}"), locale))
    return fields


def parse_date(
    text: str,
    pattern: str | None,
    registry: TokenRegistry,
    locale: LocaleTable,
    formats: Sequence[str] = DEFAULT_FORMATS,
) -> CalendarDate | None:
    fields = parse_fields(text, pattern, registry, locale, formats)
    if fields is None:
        return None
    return gregorian.normalize(fields)


def detect_format(
    text: str,
    registry: TokenRegistry,
    locale: LocaleTable,
    formats: Sequence[str] = DEFAULT_FORMATS,
) -> str | None:
    for candidate in formats:
        if parse_fields(text, candidate, registry, locale) is not None:
            return candidate
    logger.debug("no known format matches %r", text)
    return None
