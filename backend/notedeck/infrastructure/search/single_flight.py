"""
Run-once guard for expensive initialization shared between threads.

The first caller runs the build; every caller that arrives while it is in
flight waits on the same future and sees the same outcome. A failed build
leaves the guard cold so a later caller may try again.
"""

import threading
from collections.abc import Callable
from concurrent.futures import Future

import structlog

logger = structlog.get_logger(__name__)


class SingleFlight:
    def __init__(self, name: str) -> None:
        self.name = name
        self._lock = threading.Lock()
        self._in_flight: Future[None] | None = None
        self._done = False

    @property
    def is_done(self) -> bool:
        return self._done

    def run(self, build: Callable[[], None]) -> None:
        """
        Run ``build`` unless it already succeeded.

        Raises:
            Exception: Whatever the shared build raised, re-raised in every
                caller that waited on it
        """
        if self._done:
            return

        with self._lock:
            if self._done:
                return
            leader = self._in_flight is None
            if leader:
                self._in_flight = Future()
            future = self._in_flight

        if not leader:
            logger.debug("single_flight_waiting", name=self.name)
            future.result()
            return

        try:
            build()
        except BaseException as e:
            with self._lock:
                self._in_flight = None
            future.set_exception(e)
            logger.warning("single_flight_failed", name=self.name, error=str(e))
            raise

        with self._lock:
            self._done = True
            self._in_flight = None
        future.set_result(None)
        logger.info("single_flight_completed", name=self.name)

    def reset(self) -> None:
        """Forget a completed build so the next call runs it again."""
        with self._lock:
            self._done = False
