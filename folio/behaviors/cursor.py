"""Custom cursor — a dot pinned to the pointer and an outline that glides after it."""

import logging
from dataclasses import dataclass
from enum import Enum

from folio.config import CursorConfig
from folio.runtime.component import Component
from folio.runtime.events import PointerEvent
from folio.runtime.loop import TimerHandle

logger = logging.getLogger(__name__)


class FollowPhase(str, Enum):
    IDLE = "idle"
    ANIMATING = "animating"


@dataclass
class Marker:
    """An overlay element positioned in viewport pixels."""
    x: float = 0.0
    y: float = 0.0


@dataclass
class PointerState:
    x: float = 0.0
    y: float = 0.0


class OutlineFollower:
    """``{idle, animating_to(target)}`` with linear interpolation and fill-forwards.

    A new target starts a fresh animation from wherever the outline is at
    that moment; once the duration elapses the outline rests on the target.
    """

    def __init__(self, duration_ms: float) -> None:
        self.duration_ms = duration_ms
        self.phase = FollowPhase.IDLE
        self.origin: tuple[float, float] = (0.0, 0.0)
        self.target: tuple[float, float] = (0.0, 0.0)
        self.started_at: float = 0.0

    def retarget(self, x: float, y: float, now_ms: float) -> None:
        self.origin = self.position_at(now_ms)
        self.target = (x, y)
        self.started_at = now_ms
        self.phase = FollowPhase.ANIMATING

    def progress(self, now_ms: float) -> float:
        if self.phase is FollowPhase.IDLE or self.duration_ms <= 0:
            return 1.0
        return min(1.0, max(0.0, (now_ms - self.started_at) / self.duration_ms))

    def position_at(self, now_ms: float) -> tuple[float, float]:
        t = self.progress(now_ms)
        if t >= 1.0:
            self.phase = FollowPhase.IDLE
            return self.target
        ox, oy = self.origin
        tx, ty = self.target
        return (ox + (tx - ox) * t, oy + (ty - oy) * t)


class CursorTracker(Component):
    def __init__(
        self,
        config: CursorConfig | None = None,
        dot: Marker | None = None,
        outline: Marker | None = None,
    ) -> None:
        super().__init__()
        self.config = config or CursorConfig()
        self.dot = dot
        self.outline = outline
        self.pointer = PointerState()
        self.follower = OutlineFollower(self.config.outline_duration_ms)
        self._settle: TimerHandle | None = None

    def attach(self, dot: Marker, outline: Marker) -> None:
        self.dot = dot
        self.outline = outline

    def on_mount(self) -> None:
        self.follower = OutlineFollower(self.config.outline_duration_ms)
        self.listen("mousemove", self._on_pointer_move)

    def on_unmount(self) -> None:
        self._settle = None

    def _on_pointer_move(self, event: PointerEvent) -> None:
        self.pointer.x, self.pointer.y = event.x, event.y
        if self.dot is None or self.outline is None:
            return
        self.dot.x, self.dot.y = event.x, event.y
        self.follower.retarget(event.x, event.y, self.loop.now_ms)
        if self._settle is not None:
            self._settle.cancel()
        self._settle = self.set_timeout(self.config.outline_duration_ms, self._on_settle)

    def _on_settle(self) -> None:
        self._settle = None
        self.sync()

    def sync(self) -> tuple[float, float] | None:
        """Write the outline's current animated position to its marker."""
        if self.outline is None or not self.mounted:
            return None
        x, y = self.follower.position_at(self.loop.now_ms)
        self.outline.x, self.outline.y = x, y
        return (x, y)
