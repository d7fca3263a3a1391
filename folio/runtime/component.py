"""Base component lifecycle: owned timers, listeners and observers."""

import abc
import logging
from collections.abc import Callable
from typing import Any

from folio.runtime.loop import EventLoop, TimerHandle
from folio.runtime.window import Box, Observation, Window

logger = logging.getLogger(__name__)


class Component(abc.ABC):
    """Base class for interactive page behaviours.

    A component owns every timer, listener and observation it creates
    through ``set_timeout``, ``listen`` and ``observe``. ``unmount`` releases
    all of them, so nothing can fire against a torn-down component.
    """

    def __init__(self) -> None:
        self.loop: EventLoop | None = None
        self.window: Window | None = None
        self._timers: list[TimerHandle] = []
        self._listeners: list[tuple[str, Callable[[Any], None]]] = []
        self._observations: list[Observation] = []

    @property
    def mounted(self) -> bool:
        return self.loop is not None

    def mount(self, loop: EventLoop, window: Window) -> None:
        if self.mounted:
            raise RuntimeError(f"{type(self).__name__} is already mounted")
        self.loop = loop
        self.window = window
        logger.debug("Mounting %s", type(self).__name__)
        self.on_mount()

    def unmount(self) -> None:
        if not self.mounted:
            return
        self.on_unmount()
        for handle in self._timers:
            handle.cancel()
        for event_type, listener in self._listeners:
            self.window.remove_listener(event_type, listener)
        for obs in self._observations:
            self.window.unobserve(obs)
        self._timers.clear()
        self._listeners.clear()
        self._observations.clear()
        logger.debug("Unmounted %s", type(self).__name__)
        self.loop = None
        self.window = None

    @abc.abstractmethod
    def on_mount(self) -> None:
        """Register listeners and start timers."""
        ...

    def on_unmount(self) -> None:
        """Hook for subclass cleanup before owned resources are released."""

    # --- Owned resources ---

    def set_timeout(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        if not self.mounted:
            raise RuntimeError(f"{type(self).__name__} is not mounted")
        self._timers = [h for h in self._timers if h.active]
        handle = self.loop.call_later(delay_ms, callback)
        self._timers.append(handle)
        return handle

    def listen(self, event_type: str, listener: Callable[[Any], None]) -> None:
        if not self.mounted:
            raise RuntimeError(f"{type(self).__name__} is not mounted")
        self.window.add_listener(event_type, listener)
        self._listeners.append((event_type, listener))

    def observe(self, box: Box, callback: Callable[[bool], None], amount: float = 0.0) -> Observation:
        if not self.mounted:
            raise RuntimeError(f"{type(self).__name__} is not mounted")
        # An immediate entry may already have unobserved it.
        obs = self.window.observe(box, callback, amount)
        if obs.active:
            self._observations.append(obs)
        return obs

    def stop_observing(self, obs: Observation) -> None:
        if self.window is not None:
            self.window.unobserve(obs)
        if obs in self._observations:
            self._observations.remove(obs)

    def active_timers(self) -> int:
        return sum(1 for h in self._timers if h.active)
