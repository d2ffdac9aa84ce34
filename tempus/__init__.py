"""tempus: UTC calendar arithmetic, token-based date formatting and parsing.

The module-level functions are bound to a default engine. Create a separate
`Tempus` when you need an independent token registry or locale:

    >>> import tempus
    >>> tempus.format({"year": 2013, "month": 11, "day": 5}, "%Y-%m-%d")
    '2013-11-05'
    >>> tempus.parse("2013-11-05", "%Y-%m-%d").day
    5
"""

from .config import TempusConfig
from .engine import VERSION, Tempus
from .formatting import DEFAULT_FORMATS
from .timers import ThreadTimerService, TimerService, set_interval, set_timeout
from .tokens import Token, TokenRegistry, build_registry
from .types import CalendarDate

__version__ = VERSION

default_engine = Tempus()

time = default_engine.time
date = default_engine.date
now = default_engine.now
is_leap_year = default_engine.is_leap_year
days_in_month = default_engine.days_in_month
month_names = default_engine.month_names
day_names = default_engine.day_names
day_of_week = default_engine.day_of_week
week_number = default_engine.week_number
inc_date = default_engine.inc_date
dec_date = default_engine.dec_date
normalize_date = default_engine.normalize_date
between = default_engine.between
format = default_engine.format
detect_format = default_engine.detect_format
parse = default_engine.parse
validate = default_engine.validate
reformat = default_engine.reformat
register_format = default_engine.register_format
unregister_format = default_engine.unregister_format
set_locale = default_engine.set_locale
get_locale = default_engine.get_locale
available_locales = default_engine.available_locales
set_week_starts_monday = default_engine.set_week_starts_monday
get_week_starts_monday = default_engine.get_week_starts_monday
iter_dates = default_engine.iter_dates
generate_dates = default_engine.generate_dates
clock = default_engine.clock
alarm = default_engine.alarm
