"""Trailing-edge debounce with a single pending-timer slot."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Generic, Protocol, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TimerHandle(Protocol):
    def start(self) -> None:
        ...

    def cancel(self) -> None:
        ...


TimerFactory = Callable[[float, Callable[[], None]], TimerHandle]


def _thread_timer(interval: float, fire: Callable[[], None]) -> TimerHandle:
    timer = threading.Timer(interval, fire)
    timer.daemon = True
    return timer


class Debouncer(Generic[T]):
    """Deliver only the last scheduled value once ``interval`` seconds pass quietly.

    Scheduling cancels and replaces any unfired timer, so at most one
    notification is ever in flight. The callback runs outside the lock.
    """

    def __init__(
        self,
        interval: float,
        callback: Callable[[T], None],
        *,
        timer_factory: TimerFactory | None = None,
    ) -> None:
        if interval < 0:
            raise ValueError("Debounce interval cannot be negative.")
        self.interval = interval
        self._callback = callback
        self._timer_factory = timer_factory or _thread_timer
        self._lock = threading.Lock()
        self._timer: TimerHandle | None = None
        self._value: T | None = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def schedule(self, value: T) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            generation = self._generation
            self._value = value
            self._timer = self._timer_factory(self.interval, lambda: self._fire(generation))
            self._timer.start()

    def cancel(self) -> None:
        with self._lock:
            self._drop_locked()

    def flush(self) -> None:
        """Deliver the pending value now, if any."""
        with self._lock:
            if self._timer is None:
                return
            value = self._value
            self._drop_locked()
        self._callback(value)

    def _fire(self, generation: int) -> None:
        with self._lock:
            # A timer that lost a cancel race must not deliver a stale value.
            if generation != self._generation or self._timer is None:
                return
            value = self._value
            self._timer = None
            self._value = None
        logger.debug("Debounce interval elapsed; delivering latest value")
        self._callback(value)

    def _drop_locked(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
        self._generation += 1
        self._timer = None
        self._value = None


__all__ = ["Debouncer", "TimerFactory", "TimerHandle"]
