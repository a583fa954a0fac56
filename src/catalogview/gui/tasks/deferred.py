"""Deferred, fire-and-forget calls scheduled on the Qt event loop."""

from __future__ import annotations

import itertools
import logging
from concurrent.futures import Future
from typing import Any, Callable, Dict, Optional

from PySide6.QtCore import QObject, QTimer, Signal

from ...config import PERSIST_DEFER_MS

_LOGGER = logging.getLogger(__name__)


class DeferredCallQueue(QObject):
    """Run callables on a later event loop turn and report through futures.

    ``submit`` returns immediately, so whatever state the caller changed
    before submitting is visible to the UI before the call itself runs.
    Failures are captured on the returned :class:`~concurrent.futures.Future`
    and announced through :attr:`taskFailed`; nothing is re-raised into the
    event loop.
    """

    taskFinished = Signal(str)
    taskFailed = Signal(str, str)

    def __init__(self, delay_ms: int = PERSIST_DEFER_MS, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._delay_ms = max(0, int(delay_ms))
        self._pending: Dict[int, str] = {}
        self._ids = itertools.count(1)

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------
    def pending_count(self) -> int:
        """Return the number of submitted calls that have not run yet."""

        return len(self._pending)

    def is_idle(self) -> bool:
        return not self._pending

    # ------------------------------------------------------------------
    # Task submission
    # ------------------------------------------------------------------
    def submit(self, name: str, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Schedule ``fn(*args, **kwargs)`` and return a future for its result."""

        future: Future = Future()
        task_id = next(self._ids)
        self._pending[task_id] = name
        _LOGGER.debug("Deferred %s (#%d) by %d ms", name, task_id, self._delay_ms)
        QTimer.singleShot(self._delay_ms, lambda: self._run(task_id, name, future, fn, args, kwargs))
        return future

    def _run(
        self,
        task_id: int,
        name: str,
        future: Future,
        fn: Callable[..., Any],
        args: tuple,
        kwargs: dict,
    ) -> None:
        self._pending.pop(task_id, None)
        if not future.set_running_or_notify_cancel():
            return
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            _LOGGER.debug("Deferred %s failed: %s", name, exc)
            future.set_exception(exc)
            self.taskFailed.emit(name, str(exc))
            return
        future.set_result(result)
        self.taskFinished.emit(name)
