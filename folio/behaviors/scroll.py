"""Scroll progress bar — page scroll fraction smoothed by a damped spring."""

import logging
from dataclasses import dataclass

from folio.config import ScrollConfig
from folio.runtime.component import Component
from folio.runtime.events import ScrollEvent
from folio.runtime.loop import TimerHandle

logger = logging.getLogger(__name__)

_SUBSTEP_MS = 1.0


def scroll_fraction(scroll_y: float, document_height: float, viewport_height: float) -> float:
    """Fraction of the page scrolled, clamped to [0, 1]. A page that cannot scroll is at 0."""
    max_offset = document_height - viewport_height
    if max_offset <= 0:
        return 0.0
    return min(1.0, max(0.0, scroll_y / max_offset))


class Spring:
    """Damped mass-spring follower.

    With the default stiffness 100 and damping 30 the system is overdamped
    (ratio 1.5), so the value approaches its target without oscillating.
    Integrated with semi-implicit Euler in 1 ms substeps.
    """

    def __init__(
        self,
        stiffness: float = 100.0,
        damping: float = 30.0,
        mass: float = 1.0,
        rest_delta: float = 0.001,
        rest_speed: float = 0.01,
        value: float = 0.0,
    ) -> None:
        if mass <= 0:
            raise ValueError("spring mass must be positive")
        self.stiffness = stiffness
        self.damping = damping
        self.mass = mass
        self.rest_delta = rest_delta
        self.rest_speed = rest_speed
        self.value = value
        self.target = value
        self.velocity = 0.0

    @classmethod
    def from_config(cls, config: ScrollConfig, value: float = 0.0) -> "Spring":
        return cls(
            stiffness=config.stiffness,
            damping=config.damping,
            mass=config.mass,
            rest_delta=config.rest_delta,
            rest_speed=config.rest_speed,
            value=value,
        )

    @property
    def damping_ratio(self) -> float:
        return self.damping / (2 * (self.stiffness * self.mass) ** 0.5)

    @property
    def at_rest(self) -> bool:
        return abs(self.target - self.value) <= self.rest_delta and abs(self.velocity) <= self.rest_speed

    def set_target(self, target: float) -> None:
        self.target = target

    def jump(self, value: float) -> None:
        self.value = self.target = value
        self.velocity = 0.0

    def step(self, dt_ms: float) -> float:
        remaining = dt_ms
        while remaining > 0:
            h = min(_SUBSTEP_MS, remaining) / 1000.0
            force = -self.stiffness * (self.value - self.target) - self.damping * self.velocity
            self.velocity += force / self.mass * h
            self.value += self.velocity * h
            remaining -= _SUBSTEP_MS
        if self.at_rest:
            self.value = self.target
            self.velocity = 0.0
        return self.value


@dataclass
class ScrollState:
    raw_fraction: float = 0.0
    smoothed_fraction: float = 0.0


class ScrollProgress(Component):
    """Keeps ``scale_x`` of the progress bar in step with the page scroll."""

    def __init__(self, config: ScrollConfig | None = None) -> None:
        super().__init__()
        self.config = config or ScrollConfig()
        self.spring = Spring.from_config(self.config)
        self.state = ScrollState()
        self._frame: TimerHandle | None = None

    @property
    def scale_x(self) -> float:
        return self.state.smoothed_fraction

    def on_mount(self) -> None:
        raw = self._measure()
        self.spring.jump(raw)
        self.state = ScrollState(raw_fraction=raw, smoothed_fraction=raw)
        self.listen("scroll", self._on_scroll)

    def on_unmount(self) -> None:
        self._frame = None

    def _measure(self) -> float:
        w = self.window
        return scroll_fraction(w.scroll_y, w.document_height, w.inner_height)

    def _on_scroll(self, event: ScrollEvent) -> None:
        self.state.raw_fraction = self._measure()
        self.spring.set_target(self.state.raw_fraction)
        if self._frame is not None:
            return
        if self.spring.at_rest:
            # Within rest tolerance already: settle without animating.
            self.spring.jump(self.state.raw_fraction)
            self.state.smoothed_fraction = self.state.raw_fraction
        else:
            self._frame = self.set_timeout(self.config.frame_ms, self._on_frame)

    def _on_frame(self) -> None:
        self.state.smoothed_fraction = self.spring.step(self.config.frame_ms)
        if self.spring.at_rest:
            self._frame = None
        else:
            self._frame = self.set_timeout(self.config.frame_ms, self._on_frame)
