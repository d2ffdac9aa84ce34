from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .base import Token
from .builtin import builtin_tokens

logger = logging.getLogger(__name__)


class TokenRegistry:
    """Tokens keyed by sigil, in registration order.

    Re-registering a sigil replaces the token in place. The fragments are not
    checked for overlap with each other.
    """

    def __init__(self, tokens: Iterable[Token] = ()) -> None:
        self._tokens: dict[str, Token] = {}
        for token in tokens:
            self.register(token)

    def register(self, token: Token) -> None:
        sigil = getattr(token, "sigil", "")
        if not sigil:
            raise ValueError(f"Token has no sigil: {token!r}")
        if sigil in self._tokens:
            logger.debug("replacing format token %s", sigil)
        self._tokens[sigil] = token

    def unregister(self, sigil: str) -> bool:
        removed = self._tokens.pop(sigil, None) is not None
        if removed:
            logger.debug("removed format token %s", sigil)
        return removed

    def get(self, sigil: str) -> Token | None:
        return self._tokens.get(sigil)

    def sigils(self) -> list[str]:
        return list(self._tokens)

    def copy(self) -> TokenRegistry:
        return TokenRegistry(self._tokens.values())

    def __contains__(self, sigil: object) -> bool:
        return sigil in self._tokens

    def __iter__(self) -> Iterator[Token]:
        # snapshot: a render callback may register tokens mid-iteration
        return iter(list(self._tokens.values()))

    def __len__(self) -> int:
        return len(self._tokens)


def build_registry(names: Iterable[str] | None = None) -> TokenRegistry:
    """Registry factory.

    With `names`, only those built-in sigils are registered (in built-in
    order); an unknown sigil is a configuration error.
    """

    tokens = builtin_tokens()
    if names is None:
        return TokenRegistry(tokens)

    wanted = set(names)
    unknown = wanted - {t.sigil for t in tokens}
    if unknown:
        raise ValueError(f"Unsupported format token(s): {', '.join(sorted(unknown))}")
    return TokenRegistry(t for t in tokens if t.sigil in wanted)
