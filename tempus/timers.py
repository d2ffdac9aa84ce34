"""Polling helpers on top of a timer service.

The engine only supplies date values; scheduling and cancellation belong to
the TimerService. ThreadTimerService is the default; tests swap in a service
they can tick by hand.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .engine import Tempus
    from .types import CalendarDate

logger = logging.getLogger(__name__)

# Both helpers poll once a second.
TICK_S = 1.0


class TimerService(ABC):
    @abstractmethod
    def schedule_repeating(self, callback: Callable[[], None], interval_s: float) -> Any:
        raise NotImplementedError

    @abstractmethod
    def schedule_once(self, callback: Callable[[], None], delay_s: float) -> Any:
        raise NotImplementedError

    @abstractmethod
    def cancel(self, handle: Any) -> None:
        raise NotImplementedError


class _Repeating:
    def __init__(self, callback: Callable[[], None], interval_s: float) -> None:
        self._stop = threading.Event()
        self._callback = callback
        self._interval_s = interval_s
        self.thread = threading.Thread(target=self._run, daemon=True)

    def _run(self) -> None:
        while not self._stop.wait(self._interval_s):
            self._callback()

    def cancel(self) -> None:
        self._stop.set()


class ThreadTimerService(TimerService):
    """Runs callbacks on daemon threads."""

    def schedule_repeating(self, callback: Callable[[], None], interval_s: float) -> _Repeating:
        handle = _Repeating(callback, float(interval_s))
        handle.thread.start()
        return handle

    def schedule_once(self, callback: Callable[[], None], delay_s: float) -> threading.Timer:
        timer = threading.Timer(float(delay_s), callback)
        timer.daemon = True
        timer.start()
        return timer

    def cancel(self, handle: Any) -> None:
        handle.cancel()


def set_timeout(callback: Callable[[], None], delay_s: float, service: TimerService | None = None) -> Any:
    return (service or ThreadTimerService()).schedule_once(callback, delay_s)


def set_interval(callback: Callable[[], None], interval_s: float, service: TimerService | None = None) -> Any:
    return (service or ThreadTimerService()).schedule_repeating(callback, interval_s)


def clock(
    engine: Tempus,
    callback: Callable[[CalendarDate], None],
    service: TimerService | None = None,
) -> Any:
    """Report the current time now and then on every tick."""

    service = service or ThreadTimerService()
    callback(engine.now())
    return service.schedule_repeating(lambda: callback(engine.now()), TICK_S)


def alarm(
    engine: Tempus,
    target: object,
    callback: Callable[[object], None],
    service: TimerService | None = None,
) -> Any:
    """Call callback(target) on the tick where now equals target, then stop."""

    service = service or ThreadTimerService()
    state: dict[str, Any] = {"handle": None, "fired": False, "cancelled": False}

    def tick() -> None:
        if state["fired"]:
            return
        if engine.between(engine.now(), target, "seconds") != 0:
            return
        state["fired"] = True
        logger.debug("alarm reached %r", target)
        callback(target)
        # a service may tick before schedule_repeating has returned the handle
        if state["handle"] is not None:
            state["cancelled"] = True
            service.cancel(state["handle"])

    state["handle"] = service.schedule_repeating(tick, TICK_S)
    if state["fired"] and not state["cancelled"]:
        state["cancelled"] = True
        service.cancel(state["handle"])
    return state["handle"]
