"""Reveal on scroll — one-shot entrance transitions with staggered delays.

Each ``RevealOnScroll`` owns its ``revealed`` flag. The first viewport entry
flips it and stops observing; later exits and re-entries change nothing.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace

from folio.config import RevealConfig
from folio.runtime.component import Component
from folio.runtime.window import Box, Observation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Pose:
    opacity: float = 1.0
    x: float = 0.0
    y: float = 0.0
    scale: float = 1.0


VISIBLE = Pose()


@dataclass(frozen=True)
class RevealSpec:
    name: str
    hidden: Pose
    duration_s: float
    delay_s: float = 0.0
    visible: Pose = VISIBLE

    def with_delay(self, delay_s: float) -> "RevealSpec":
        return replace(self, delay_s=delay_s)


def stagger_delays(count: int, step_s: float) -> list[float]:
    """``index * step`` for each of ``count`` listed elements."""
    return [round(i * step_s, 6) for i in range(count)]


# --- Presets ---


def fade_up(offset: float, duration_s: float, delay_s: float = 0.0) -> RevealSpec:
    return RevealSpec("fade-up", Pose(opacity=0.0, y=offset), duration_s, delay_s)


def slide_right(offset: float, duration_s: float, delay_s: float = 0.0) -> RevealSpec:
    return RevealSpec("slide-right", Pose(opacity=0.0, x=-offset), duration_s, delay_s)


def zoom_in(scale: float, duration_s: float, delay_s: float = 0.0) -> RevealSpec:
    return RevealSpec("zoom-in", Pose(opacity=0.0, scale=scale), duration_s, delay_s)


def section_reveal(config: RevealConfig) -> RevealSpec:
    return fade_up(config.hidden_offset_px, config.section_duration_s)


def timeline_reveals(count: int, config: RevealConfig) -> list[RevealSpec]:
    base = fade_up(config.card_offset_px, config.timeline_duration_s)
    return [base.with_delay(d) for d in stagger_delays(count, config.timeline_step_s)]


def service_reveals(count: int, config: RevealConfig) -> list[RevealSpec]:
    base = fade_up(config.card_offset_px, config.section_duration_s)
    return [base.with_delay(d) for d in stagger_delays(count, config.service_step_s)]


def portfolio_reveals(count: int, config: RevealConfig) -> list[RevealSpec]:
    base = zoom_in(config.portfolio_hidden_scale, config.section_duration_s)
    return [base.with_delay(d) for d in stagger_delays(count, config.portfolio_step_s)]


def skill_reveals(count: int, config: RevealConfig) -> list[RevealSpec]:
    base = slide_right(config.skill_offset_px, config.skill_duration_s)
    return [base.with_delay(d) for d in stagger_delays(count, config.skill_step_s)]


class RevealOnScroll(Component):
    def __init__(
        self,
        box: Box,
        spec: RevealSpec,
        amount: float = 0.0,
        on_reveal: Callable[["RevealOnScroll"], None] | None = None,
    ) -> None:
        super().__init__()
        self.box = box
        self.spec = spec
        self.amount = amount
        self.on_reveal = on_reveal
        self.revealed = False
        self.reveal_count = 0
        self._obs: Observation | None = None

    @property
    def pose(self) -> Pose:
        return self.spec.visible if self.revealed else self.spec.hidden

    def on_mount(self) -> None:
        self.revealed = False
        self.reveal_count = 0
        obs = self.observe(self.box, self._on_intersect, self.amount)
        if self.revealed:
            # Already on screen at mount.
            self.stop_observing(obs)
        else:
            self._obs = obs

    def on_unmount(self) -> None:
        self._obs = None

    def _on_intersect(self, entering: bool) -> None:
        if not entering or self.revealed:
            return
        self.revealed = True
        self.reveal_count += 1
        logger.debug("Revealed %s element at %.0fpx (delay %.2fs)", self.spec.name, self.box.top, self.spec.delay_s)
        if self._obs is not None:
            self.stop_observing(self._obs)
            self._obs = None
        if self.on_reveal is not None:
            self.on_reveal(self)


def reveal_group(
    boxes: Sequence[Box],
    specs: Sequence[RevealSpec],
    on_reveal: Callable[[RevealOnScroll], None] | None = None,
) -> list[RevealOnScroll]:
    """One reveal component per listed element, paired with its staggered spec."""
    if len(boxes) != len(specs):
        raise ValueError(f"{len(boxes)} elements but {len(specs)} reveal specs")
    return [RevealOnScroll(box, spec, on_reveal=on_reveal) for box, spec in zip(boxes, specs)]
