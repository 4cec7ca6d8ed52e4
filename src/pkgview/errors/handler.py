import logging
from dataclasses import dataclass, field
from enum import Enum

from pkgview.events.bus import Event, EventBus


class ErrorSeverity(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


@dataclass(kw_only=True)
class ErrorOccurredEvent(Event):
    error: Exception
    severity: ErrorSeverity
    context: dict = field(default_factory=dict)


class ErrorHandler:
    def __init__(self, logger: logging.Logger, event_bus: EventBus):
        self._logger = logger
        self._events = event_bus

    def handle(self, error: Exception, severity: ErrorSeverity = ErrorSeverity.ERROR, context: dict = None):
        # Log the error, with the traceback for anything worse than a warning
        log_method = getattr(self._logger, severity.value, self._logger.error)
        with_traceback = severity in (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL)
        log_method(
            f"{error.__class__.__name__}: {error}",
            extra=context or {},
            exc_info=error if with_traceback else None,
        )

        # Publish event
        self._events.publish(ErrorOccurredEvent(
            error=error,
            severity=severity,
            context=context or {}
        ))
