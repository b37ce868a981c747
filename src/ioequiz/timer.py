import asyncio
import logging
from typing import Any, Callable, Optional, Protocol

from .config import settings

logger = logging.getLogger(__name__)


class Handle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], Any]) -> Handle: ...


class AsyncioScheduler:
    """Schedules callbacks on the running event loop."""

    def call_later(self, delay: float, callback: Callable[[], Any]) -> Handle:
        return asyncio.get_running_loop().call_later(delay, callback)


def format_clock(seconds: int) -> str:
    m, s = divmod(max(0, seconds), 60)
    return f"{m}:{s:02d}"


class SessionTimer:
    """Countdown bound to a playing session.

    Ticks once per second while running and calls ``on_expire`` exactly
    once when it reaches zero. A stopped timer ignores late callbacks.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        on_expire: Callable[[], Any],
        duration: int = settings.QUIZ_DURATION_SECONDS,
    ):
        self.scheduler = scheduler
        self.on_expire = on_expire
        self.duration = duration
        self.time_left = duration
        self._handle: Optional[Handle] = None
        self._generation = 0

    @property
    def running(self) -> bool:
        return self._handle is not None

    def start(self):
        self.stop()
        self.time_left = self.duration
        self._arm()

    def stop(self):
        # Bumping the generation invalidates a callback already queued.
        self._generation += 1
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def tick(self):
        if not self.running:
            return
        self.time_left = max(0, self.time_left - 1)
        if self.time_left == 0:
            self.stop()
            logger.info("Timer expired")
            self.on_expire()
        else:
            self._arm()

    def _arm(self):
        generation = self._generation

        def fire():
            if generation == self._generation:
                self.tick()

        self._handle = self.scheduler.call_later(1, fire)
