"""Tests for the virtual-clock loop, event targets and the window model."""

import pytest

from folio.runtime.component import Component
from folio.runtime.events import EventTarget
from folio.runtime.loop import EventLoop
from folio.runtime.window import Box, Window


class TestEventLoop:
    def test_fires_in_due_order(self):
        loop = EventLoop()
        fired = []
        loop.call_later(300, lambda: fired.append("c"))
        loop.call_later(100, lambda: fired.append("a"))
        loop.call_later(100, lambda: fired.append("b"))
        assert loop.advance(250) == 2
        assert fired == ["a", "b"]
        assert loop.now_ms == 250
        loop.advance(50)
        assert fired == ["a", "b", "c"]

    def test_cancelled_timer_never_fires(self):
        loop = EventLoop()
        fired = []
        handle = loop.call_later(100, lambda: fired.append(1))
        handle.cancel()
        loop.advance(1000)
        assert fired == []
        assert loop.pending() == 0

    def test_callbacks_can_reschedule_within_window(self):
        loop = EventLoop()
        ticks = []

        def tick():
            ticks.append(loop.now_ms)
            loop.call_later(100, tick)

        loop.call_later(100, tick)
        loop.advance(350)
        assert ticks == [100, 200, 300]

    def test_run_next_jumps_clock(self):
        loop = EventLoop()
        loop.call_later(750, lambda: None)
        assert loop.run_next() is True
        assert loop.now_ms == 750
        assert loop.run_next() is False

    def test_rejects_negative_time(self):
        loop = EventLoop()
        with pytest.raises(ValueError):
            loop.call_later(-1, lambda: None)
        with pytest.raises(ValueError):
            loop.advance(-5)


class TestEventTarget:
    def test_duplicate_listener_ignored(self):
        target = EventTarget()
        seen = []
        target.add_listener("scroll", seen.append)
        target.add_listener("scroll", seen.append)
        assert target.listener_count("scroll") == 1
        assert target.dispatch("scroll", 1) == 1
        assert seen == [1]

    def test_remove_unknown_listener_is_safe(self):
        target = EventTarget()
        target.remove_listener("scroll", print)
        assert target.listener_count("scroll") == 0


class TestWindow:
    def test_scroll_is_clamped(self):
        window = Window(inner_height=800, document_height=1800)
        window.scroll_to(5000)
        assert window.scroll_y == 1000
        window.scroll_to(-20)
        assert window.scroll_y == 0

    def test_visible_ratio(self):
        window = Window(inner_height=800, document_height=3000)
        assert window.visible_ratio(Box(700, 200)) == pytest.approx(0.5)
        assert window.visible_ratio(Box(900, 200)) == 0.0
        assert window.visible_ratio(Box(0, 0)) == 0.0

    def test_resize_reevaluates(self):
        window = Window(inner_height=400, document_height=3000)
        changes = []
        window.observe(Box(600, 100), changes.append)
        window.resize(1280, 800)
        assert changes == [True]


class _Probe(Component):
    def on_mount(self) -> None:
        self.listen("scroll", lambda e: None)
        self.set_timeout(100, lambda: None)


class TestComponentLifecycle:
    def test_unmount_releases_everything(self):
        loop, window = EventLoop(), Window()
        probe = _Probe()
        probe.mount(loop, window)
        assert window.listener_count("scroll") == 1
        assert loop.pending() == 1
        probe.unmount()
        assert window.listener_count("scroll") == 0
        assert loop.pending() == 0
        assert probe.mounted is False

    def test_double_unmount_is_noop(self):
        probe = _Probe()
        probe.mount(EventLoop(), Window())
        probe.unmount()
        probe.unmount()

    def test_timers_require_mount(self):
        with pytest.raises(RuntimeError):
            _Probe().set_timeout(10, lambda: None)
