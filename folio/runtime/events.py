"""Listener registry for page-level signals (scroll, pointer move)."""

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

Listener = Callable[[Any], None]


@dataclass(frozen=True)
class PointerEvent:
    x: float
    y: float


@dataclass(frozen=True)
class ScrollEvent:
    scroll_y: float


class EventTarget:
    """Publish/subscribe helper keyed by event type.

    Adding the same listener twice for one type is a no-op, matching
    ``addEventListener``.
    """

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = defaultdict(list)

    def add_listener(self, event_type: str, listener: Listener) -> None:
        listeners = self._listeners[event_type]
        if listener not in listeners:
            listeners.append(listener)

    def remove_listener(self, event_type: str, listener: Listener) -> None:
        listeners = self._listeners.get(event_type)
        if listeners and listener in listeners:
            listeners.remove(listener)

    def listener_count(self, event_type: str) -> int:
        return len(self._listeners.get(event_type, ()))

    def dispatch(self, event_type: str, event: Any) -> int:
        # Copy so listeners may unsubscribe while handling.
        listeners = list(self._listeners.get(event_type, ()))
        for listener in listeners:
            listener(event)
        return len(listeners)
