"""Typewriter text — types a phrase, holds, deletes it, moves to the next one.

``Typewriter`` is the pure state machine: ``plan`` says what the next tick
does and how long to wait for it, ``apply`` performs it. ``TypewriterText``
drives it from the event loop together with the blinking caret.
"""

import logging
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from folio.config import TypewriterConfig
from folio.runtime.component import Component
from folio.runtime.loop import EventLoop, TimerHandle
from folio.runtime.window import Window

logger = logging.getLogger(__name__)

CARET = "|"


class Direction(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


class StepKind(str, Enum):
    TYPE = "type"
    DELETE = "delete"
    HOLD = "hold"  # flip to deleting after the pause
    NEXT = "next"  # move to the next phrase, no delay


@dataclass(frozen=True)
class Step:
    kind: StepKind
    delay_ms: int


@dataclass
class TypewriterState:
    index: int = 0
    chars_shown: int = 0
    direction: Direction = Direction.FORWARD
    caret_visible: bool = True


class Typewriter:
    def __init__(
        self,
        texts: Sequence[str],
        config: TypewriterConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if not texts:
            raise ValueError("typewriter needs at least one phrase")
        self.texts = tuple(texts)
        self.config = config or TypewriterConfig()
        self._rng = rng or random.Random()
        self.state = TypewriterState()

    @property
    def current_text(self) -> str:
        return self.texts[self.state.index]

    def base_delay(self) -> int:
        """Delay before jitter for the next character tick."""
        s = self.state
        if s.direction is Direction.BACKWARD:
            return self.config.backward_delay_ms
        if s.chars_shown == len(self.current_text):
            return self.config.hold_ms
        return self.config.forward_delay_ms

    def tick_delay(self, base: int) -> int:
        """Base delay, stretched by a uniform draw from ``[0, jitter_ms)`` when that is longer."""
        return max(base, int(self._rng.random() * self.config.jitter_ms))

    def plan(self) -> Step:
        s = self.state
        length = len(self.current_text)
        if s.direction is Direction.FORWARD and s.chars_shown == length + 1:
            return Step(StepKind.HOLD, self.config.hold_ms)
        if s.direction is Direction.BACKWARD and s.chars_shown == 0:
            return Step(StepKind.NEXT, 0)
        kind = StepKind.DELETE if s.direction is Direction.BACKWARD else StepKind.TYPE
        return Step(kind, self.tick_delay(self.base_delay()))

    def apply(self, step: Step) -> None:
        s = self.state
        if step.kind is StepKind.HOLD:
            s.direction = Direction.BACKWARD
        elif step.kind is StepKind.NEXT:
            s.direction = Direction.FORWARD
            s.index = (s.index + 1) % len(self.texts)
        elif step.kind is StepKind.TYPE:
            s.chars_shown += 1
        else:
            s.chars_shown -= 1

    def step(self) -> Step:
        step = self.plan()
        self.apply(step)
        return step

    def toggle_caret(self) -> None:
        self.state.caret_visible = not self.state.caret_visible

    def reset(self) -> None:
        self.state = TypewriterState()

    def render(self) -> str:
        s = self.state
        return self.current_text[:s.chars_shown] + (CARET if s.caret_visible else " ")


class TypewriterText(Component):
    """Runs a ``Typewriter`` on the loop and reports every rendered frame."""

    def __init__(
        self,
        texts: Sequence[str],
        config: TypewriterConfig | None = None,
        rng: random.Random | None = None,
        on_render: Callable[[str], None] | None = None,
    ) -> None:
        super().__init__()
        self.config = config or TypewriterConfig()
        self._rng = rng or random.Random()
        self.typewriter = Typewriter(texts, self.config, self._rng)
        self.on_render = on_render
        self._tick: TimerHandle | None = None
        self._blink: TimerHandle | None = None

    @property
    def text(self) -> str:
        return self.typewriter.render()

    def on_mount(self) -> None:
        self.typewriter.reset()
        self._emit()
        self._schedule_tick()
        self._blink = self.set_timeout(self.config.blink_ms, self._on_blink)

    def on_unmount(self) -> None:
        self._tick = None
        self._blink = None

    def set_texts(self, texts: Sequence[str]) -> None:
        """Swap the phrase list and restart from the first phrase."""
        self.typewriter = Typewriter(texts, self.config, self._rng)
        if self.mounted:
            if self._tick is not None:
                self._tick.cancel()
            self._emit()
            self._schedule_tick()

    def _schedule_tick(self) -> None:
        step = self.typewriter.plan()
        # Phrase changes are immediate, the rest waits on a timer.
        if step.kind is StepKind.NEXT:
            self.typewriter.apply(step)
            step = self.typewriter.plan()
        self._tick = self.set_timeout(step.delay_ms, lambda: self._on_tick(step))

    def _on_tick(self, step: Step) -> None:
        self.typewriter.apply(step)
        if step.kind is StepKind.HOLD:
            logger.debug("Typewriter deleting '%s'", self.typewriter.current_text)
        self._emit()
        self._schedule_tick()

    def _on_blink(self) -> None:
        self.typewriter.toggle_caret()
        self._emit()
        self._blink = self.set_timeout(self.config.blink_ms, self._on_blink)

    def _emit(self) -> None:
        if self.on_render is not None:
            self.on_render(self.typewriter.render())


def simulate(
    texts: Sequence[str],
    duration_ms: float,
    config: TypewriterConfig | None = None,
    seed: int | None = None,
) -> list[tuple[float, str]]:
    """Run ``TypewriterText`` on a fresh virtual loop; return (time, frame) pairs."""
    loop = EventLoop()
    frames: list[tuple[float, str]] = []
    component = TypewriterText(
        texts, config, rng=random.Random(seed),
        on_render=lambda text: frames.append((loop.now_ms, text)),
    )
    component.mount(loop, Window())
    try:
        loop.advance(duration_ms)
    finally:
        component.unmount()
    return frames
