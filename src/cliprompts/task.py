"""Background unit of work with a completion signal."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Generic, TypeVar

from cliprompts.errors import TaskJoinFailed

T = TypeVar("T")

logger = logging.getLogger("cliprompts.task")


class BackgroundTask(Generic[T]):
    """Runs ``fn`` on a daemon worker thread.

    The completion event is set whether ``fn`` returns or raises, so callers
    can poll ``done()`` or block in ``wait()``. ``join()`` hands back the
    result, or raises TaskJoinFailed chained to the worker's exception.
    A timed-out worker cannot be interrupted; being a daemon it does not keep
    the process alive.
    """

    def __init__(self, fn: Callable[[], T], name: str = "cliprompts-task"):
        self._fn = fn
        self._finished = threading.Event()
        self._result: T | None = None
        self._error: BaseException | None = None
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)

    def _run(self) -> None:
        try:
            self._result = self._fn()
        except BaseException as e:  # re-raised by join() on the caller's thread
            self._error = e
        finally:
            self._finished.set()

    def start(self) -> BackgroundTask[T]:
        self._thread.start()
        return self

    def done(self) -> bool:
        return self._finished.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until finished or timeout. Returns done()."""
        return self._finished.wait(timeout)

    def join(self, timeout: float | None = None) -> T | None:
        self._thread.join(timeout)
        if self._thread.is_alive():
            raise TaskJoinFailed("task is still running")
        if self._error is not None:
            logger.debug("Task %s raised %r", self._thread.name, self._error)
            raise TaskJoinFailed(f"task failed: {self._error}") from self._error
        return self._result
