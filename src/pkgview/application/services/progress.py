"""Progress scope contract and a logging-only implementation."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import Optional

logger = logging.getLogger(__name__)


class CancellationToken:
    """Cooperative cancellation flag, safe to trip from any thread."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancellation_requested(self) -> bool:
        return self._event.is_set()


class ProgressService(ABC):
    """Bounded span of work with a status line and a completion fraction.

    ``report`` takes a fraction in ``0..1``.
    """

    @abstractmethod
    async def start_loading(self, title: str, cancellable: bool = False) -> None:
        ...

    @abstractmethod
    async def stop_loading(self) -> None:
        ...

    @abstractmethod
    def write_message(self, message: str) -> None:
        ...

    @abstractmethod
    def get_cancellation_token(self) -> CancellationToken:
        ...

    @abstractmethod
    def report(self, fraction: float) -> None:
        ...

    @abstractmethod
    async def show_message(self, title: str, message: str) -> None:
        ...


class LoggingProgressService(ProgressService):
    """Headless progress scope that mirrors everything to the log."""

    def __init__(self, logger_: Optional[logging.Logger] = None) -> None:
        self._logger = logger_ or logger
        self._token = CancellationToken()
        self._title: Optional[str] = None
        self.cancellable = False
        self.fraction = 0.0

    @property
    def is_loading(self) -> bool:
        return self._title is not None

    async def start_loading(self, title: str, cancellable: bool = False) -> None:
        self._title = title
        self.cancellable = cancellable
        self.fraction = 0.0
        self._token = CancellationToken()
        self._logger.info("%s started", title)

    async def stop_loading(self) -> None:
        if self._title is not None:
            self._logger.info("%s finished", self._title)
        self._title = None
        self.cancellable = False

    def write_message(self, message: str) -> None:
        self._logger.info(message)

    def get_cancellation_token(self) -> CancellationToken:
        return self._token

    def cancel(self) -> None:
        if self.cancellable:
            self._token.cancel()

    def report(self, fraction: float) -> None:
        self.fraction = max(0.0, min(float(fraction), 1.0))
        self._logger.debug("%s: %.0f%%", self._title or "progress", self.fraction * 100)

    async def show_message(self, title: str, message: str) -> None:
        self._logger.info("%s: %s", title, message)
