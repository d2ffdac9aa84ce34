"""Format tokens: the sigils understood by format and parse patterns."""

from .base import Token
from .builtin import (
    DateToken,
    EpochToken,
    FunctionToken,
    MonthNameToken,
    NumberToken,
    WeekdayNameToken,
    WeekdayNumberToken,
    builtin_tokens,
)
from .registry import TokenRegistry, build_registry
