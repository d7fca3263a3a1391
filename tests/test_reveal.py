"""Tests for one-shot reveal transitions and staggered delays."""

import pytest

from folio.behaviors.reveal import (
    RevealOnScroll,
    fade_up,
    reveal_group,
    service_reveals,
    stagger_delays,
)
from folio.config import RevealConfig
from folio.runtime.window import Box


class TestStagger:
    def test_delays_are_index_times_step(self):
        assert stagger_delays(3, 0.2) == [0.0, 0.2, 0.4]
        assert stagger_delays(4, 0.1) == [0.0, 0.1, 0.2, 0.3]
        assert stagger_delays(0, 0.2) == []

    def test_service_reveals_use_configured_step(self):
        specs = service_reveals(3, RevealConfig(service_step_s=0.25))
        assert [s.delay_s for s in specs] == [0.0, 0.25, 0.5]
        assert all(s.hidden.opacity == 0.0 and s.hidden.y == 50 for s in specs)


class TestRevealOnScroll:
    def test_reveals_once(self, loop, window):
        revealed = []
        comp = RevealOnScroll(Box(top=1200, height=200), fade_up(60, 0.6), on_reveal=revealed.append)
        comp.mount(loop, window)
        assert comp.revealed is False
        assert comp.pose.opacity == 0.0

        window.scroll_to(600)  # enter
        window.scroll_to(0)  # exit
        window.scroll_to(600)  # enter again

        assert comp.revealed is True
        assert comp.reveal_count == 1
        assert revealed == [comp]
        assert comp.pose.opacity == 1.0 and comp.pose.y == 0.0

    def test_stops_observing_after_reveal(self, loop, window):
        comp = RevealOnScroll(Box(top=1200, height=200), fade_up(60, 0.6))
        comp.mount(loop, window)
        assert window.observer_count() == 1
        window.scroll_to(600)
        assert window.observer_count() == 0

    def test_visible_at_mount(self, loop, window):
        comp = RevealOnScroll(Box(top=100, height=200), fade_up(60, 0.6))
        comp.mount(loop, window)
        assert comp.revealed is True
        assert window.observer_count() == 0

    def test_amount_threshold(self, loop, window):
        comp = RevealOnScroll(Box(top=900, height=200), fade_up(60, 0.6), amount=0.5)
        comp.mount(loop, window)
        window.scroll_to(150)  # 50px of 200 visible
        assert comp.revealed is False
        window.scroll_to(250)  # 150px visible
        assert comp.revealed is True

    def test_remount_resets(self, loop, window):
        comp = RevealOnScroll(Box(top=1200, height=200), fade_up(60, 0.6))
        comp.mount(loop, window)
        window.scroll_to(600)
        comp.unmount()
        window.scroll_to(0)
        comp.mount(loop, window)
        assert comp.revealed is False
        window.scroll_to(600)
        assert comp.reveal_count == 1

    def test_unmount_before_entry(self, loop, window):
        comp = RevealOnScroll(Box(top=1200, height=200), fade_up(60, 0.6))
        comp.mount(loop, window)
        comp.unmount()
        assert window.observer_count() == 0
        window.scroll_to(600)
        assert comp.revealed is False


class TestRevealGroup:
    def test_pairs_boxes_with_specs(self, loop, window):
        specs = service_reveals(3, RevealConfig())
        boxes = [Box(top=1000 + i * 300, height=250) for i in range(3)]
        group = reveal_group(boxes, specs)
        for comp in group:
            comp.mount(loop, window)
        window.scroll_to(1000)
        assert [c.revealed for c in group] == [True, True, True]
        assert [c.spec.delay_s for c in group] == [0.0, 0.2, 0.4]

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            reveal_group([Box(0, 10)], [])
