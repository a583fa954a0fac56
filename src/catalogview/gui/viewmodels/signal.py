"""Pure Python signals for the variant list, no Qt dependency.

``Signal`` fans a notification out to plain callables and
``ObservableProperty`` wraps a value that announces its changes, which is
how the rendering layer learns that the list or the selection moved.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

_logger = logging.getLogger(__name__)


class Signal:
    """Observer list invoked synchronously on ``emit``.

    A handler that raises is logged and skipped; the remaining handlers still
    run, matching how ``EventBus`` treats its subscribers.
    """

    def __init__(self) -> None:
        self._handlers: list[Callable] = []

    def connect(self, handler: Callable) -> None:
        if handler not in self._handlers:
            self._handlers.append(handler)

    def disconnect(self, handler: Callable) -> None:
        self._handlers.remove(handler)

    def disconnect_all(self) -> None:
        self._handlers.clear()

    def emit(self, *args: Any, **kwargs: Any) -> None:
        for handler in list(self._handlers):
            try:
                handler(*args, **kwargs)
            except Exception as exc:
                _logger.error("Signal handler %r failed: %s", handler, exc)

    @property
    def handler_count(self) -> int:
        return len(self._handlers)


class ObservableProperty:
    """Value holder emitting ``changed(new_value, old_value)`` on assignment.

    Assigning an equal value is a no-op.
    """

    def __init__(self, initial_value: Any = None) -> None:
        self._value = initial_value
        self.changed = Signal()

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, new_value: Any) -> None:
        if self._value != new_value:
            old_value = self._value
            self._value = new_value
            self.changed.emit(new_value, old_value)

    def set(self, new_value: Any, notify: bool = False) -> None:
        """Assign *new_value*; with *notify* emit even when it compares equal.

        Lists of records mutated in place compare equal to their previous
        value, yet observers still need to redraw them.
        """
        old_value = self._value
        self._value = new_value
        if notify or old_value != new_value:
            self.changed.emit(new_value, old_value)
