import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from catalogview.events.bus import EventBus
from catalogview.events.domain_events import DomainEvent


class ErrorSeverity(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


@dataclass(frozen=True)
class ErrorOccurredEvent(DomainEvent):
    error: Optional[Exception] = None
    severity: ErrorSeverity = ErrorSeverity.ERROR
    context: dict = field(default_factory=dict)


UiCallback = Callable[[str, ErrorSeverity], None]


class ErrorHandler:
    """Single sink for failures the variant list reports.

    Each failure is logged at the level named by its severity and announced
    as an :class:`ErrorOccurredEvent`.  Only ERROR and CRITICAL failures reach
    the optional UI callback; the variant list itself shows its alerts through
    its own presenter and never registers one.
    """

    _UI_SEVERITIES = (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL)

    def __init__(self, logger: logging.Logger, event_bus: EventBus) -> None:
        self._logger = logger
        self._events = event_bus
        self._ui_callback: Optional[UiCallback] = None

    def register_ui_callback(self, callback: Optional[UiCallback]) -> None:
        self._ui_callback = callback

    def handle(
        self,
        error: Exception,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: Optional[dict] = None,
    ) -> ErrorOccurredEvent:
        """Log, publish and (for severe failures) surface *error*.

        *context* carries identifiers such as ``product_id`` and is attached
        to both the log record and the published event.  Returns the event.
        """

        context = dict(context or {})
        log_method = getattr(self._logger, severity.value, self._logger.error)
        log_method("%s: %s", error.__class__.__name__, error, extra={"context": context})

        event = ErrorOccurredEvent(error=error, severity=severity, context=context)
        self._events.publish(event)

        if self._ui_callback is not None and severity in self._UI_SEVERITIES:
            self._ui_callback(str(error), severity)
        return event
