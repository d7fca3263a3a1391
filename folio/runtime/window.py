"""A minimal browser window: viewport geometry, scrolling, pointer and intersection signals."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from folio.runtime.events import EventTarget, PointerEvent, ScrollEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Box:
    """Vertical extent of an element in document coordinates."""
    top: float
    height: float

    @property
    def bottom(self) -> float:
        return self.top + self.height


class Observation:
    """One observed element. ``intersecting`` is the last reported state."""

    def __init__(self, box: Box, callback: Callable[[bool], None], amount: float) -> None:
        self.box = box
        self.callback = callback
        self.amount = amount
        self.intersecting = False
        self.active = True


class Window(EventTarget):
    def __init__(
        self,
        inner_width: float = 1280,
        inner_height: float = 800,
        document_height: float = 800,
    ) -> None:
        super().__init__()
        self.inner_width = inner_width
        self.inner_height = inner_height
        self.document_height = document_height
        self.scroll_y: float = 0.0
        self._observations: list[Observation] = []

    @property
    def max_scroll(self) -> float:
        return max(0.0, self.document_height - self.inner_height)

    def scroll_to(self, y: float) -> None:
        self.scroll_y = min(max(0.0, y), self.max_scroll)
        self.dispatch("scroll", ScrollEvent(self.scroll_y))
        self._check_intersections()

    def move_pointer(self, x: float, y: float) -> None:
        self.dispatch("mousemove", PointerEvent(x, y))

    def resize(self, inner_width: float, inner_height: float, document_height: float | None = None) -> None:
        self.inner_width = inner_width
        self.inner_height = inner_height
        if document_height is not None:
            self.document_height = document_height
        self.scroll_y = min(self.scroll_y, self.max_scroll)
        self._check_intersections()

    # --- Intersection observation ---

    def observe(self, box: Box, callback: Callable[[bool], None], amount: float = 0.0) -> Observation:
        """Watch ``box`` against the viewport; ``callback`` gets each entry/exit.

        The current state is evaluated immediately, so an element that is
        already on screen reports an entry straight away.
        """
        obs = Observation(box, callback, amount)
        self._observations.append(obs)
        self._evaluate(obs)
        return obs

    def unobserve(self, obs: Observation) -> None:
        obs.active = False
        if obs in self._observations:
            self._observations.remove(obs)

    def observer_count(self) -> int:
        return len(self._observations)

    def visible_ratio(self, box: Box) -> float:
        if box.height <= 0:
            return 0.0
        top = max(box.top, self.scroll_y)
        bottom = min(box.bottom, self.scroll_y + self.inner_height)
        return max(0.0, bottom - top) / box.height

    def _check_intersections(self) -> None:
        for obs in list(self._observations):
            if obs.active:
                self._evaluate(obs)

    def _evaluate(self, obs: Observation) -> None:
        ratio = self.visible_ratio(obs.box)
        now = ratio > 0 and ratio >= obs.amount
        if now != obs.intersecting:
            obs.intersecting = now
            obs.callback(now)
