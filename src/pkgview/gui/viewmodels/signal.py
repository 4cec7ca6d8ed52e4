"""Change notification primitives for the view models.

``Signal`` is a plain callback list; ``ObservableProperty`` wraps one value
and announces replacements through its ``changed`` signal. Neither needs a
Qt event loop, so the package view models run under plain asyncio.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Optional

_logger = logging.getLogger(__name__)

Coerce = Callable[[Any], Any]


class Signal:
    """Ordered set of handlers called synchronously by :meth:`emit`.

    A failing handler is logged and the remaining handlers still run.
    """

    def __init__(self) -> None:
        self._handlers: list[Callable] = []
        self._lock = threading.Lock()

    def connect(self, handler: Callable) -> None:
        with self._lock:
            if handler not in self._handlers:
                self._handlers.append(handler)

    def disconnect(self, handler: Callable) -> bool:
        """Remove *handler*; returns False when it was not connected."""
        with self._lock:
            if handler not in self._handlers:
                return False
            self._handlers.remove(handler)
            return True

    def emit(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            handlers = list(self._handlers)
        for handler in handlers:
            try:
                handler(*args, **kwargs)
            except Exception:
                _logger.exception("Signal handler %r failed", handler)

    @property
    def handler_count(self) -> int:
        with self._lock:
            return len(self._handlers)


class ObservableProperty:
    """Single observable value.

    *coerce*, when given, normalises every assigned value first, so
    ``prop.value = "tile"`` and ``prop.value = ListViewMode.TILE`` are the
    same assignment. ``changed(new, old)`` fires only when the normalised
    value differs from the current one.
    """

    def __init__(self, initial_value: Any = None, coerce: Optional[Coerce] = None) -> None:
        self._coerce = coerce
        self._value = coerce(initial_value) if coerce is not None else initial_value
        self.changed = Signal()

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, new_value: Any) -> None:
        if self._coerce is not None:
            new_value = self._coerce(new_value)
        if self._value == new_value:
            return
        old_value = self._value
        self._value = new_value
        self.changed.emit(new_value, old_value)
