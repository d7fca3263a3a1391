"""Tests for the custom cursor dot and its gliding outline."""

import pytest

from folio.behaviors.cursor import CursorTracker, FollowPhase, Marker, OutlineFollower
from folio.config import CursorConfig


@pytest.fixture()
def tracker(loop, window):
    comp = CursorTracker(CursorConfig(), dot=Marker(), outline=Marker())
    comp.mount(loop, window)
    yield comp
    comp.unmount()


class TestOutlineFollower:
    def test_linear_interpolation(self):
        f = OutlineFollower(500)
        f.retarget(100, 200, now_ms=0)
        assert f.phase is FollowPhase.ANIMATING
        assert f.position_at(250) == (50, 100)

    def test_rests_on_target(self):
        f = OutlineFollower(500)
        f.retarget(100, 200, now_ms=0)
        assert f.position_at(500) == (100, 200)
        assert f.phase is FollowPhase.IDLE
        assert f.position_at(5000) == (100, 200)

    def test_retarget_starts_from_current_position(self):
        f = OutlineFollower(500)
        f.retarget(100, 0, now_ms=0)
        f.retarget(0, 0, now_ms=250)
        assert f.origin == (50, 0)
        assert f.position_at(500) == (25, 0)


class TestCursorTracker:
    def test_dot_follows_exactly(self, tracker, window):
        window.move_pointer(120, 340)
        assert (tracker.dot.x, tracker.dot.y) == (120, 340)
        assert (tracker.pointer.x, tracker.pointer.y) == (120, 340)

    def test_outline_settles_after_duration(self, tracker, loop, window):
        window.move_pointer(100, 200)
        loop.advance(250)
        assert tracker.sync() == (50, 100)
        loop.advance(250)
        assert (tracker.outline.x, tracker.outline.y) == (100, 200)
        assert tracker.follower.phase is FollowPhase.IDLE
        assert tracker.active_timers() == 0

    def test_each_move_replaces_pending_settle(self, tracker, loop, window):
        window.move_pointer(10, 10)
        loop.advance(100)
        window.move_pointer(20, 20)
        assert tracker.active_timers() == 1

    def test_no_op_without_markers(self, loop, window):
        comp = CursorTracker()
        comp.mount(loop, window)
        window.move_pointer(5, 5)
        assert (comp.pointer.x, comp.pointer.y) == (5, 5)
        assert comp.active_timers() == 0
        assert comp.sync() is None
        comp.unmount()

    def test_attach_after_mount(self, loop, window):
        comp = CursorTracker()
        comp.mount(loop, window)
        dot, outline = Marker(), Marker()
        comp.attach(dot, outline)
        window.move_pointer(7, 9)
        assert (dot.x, dot.y) == (7, 9)
        comp.unmount()

    def test_unmount_removes_listener(self, tracker, loop, window):
        window.move_pointer(10, 10)
        tracker.unmount()
        assert window.listener_count("mousemove") == 0
        assert loop.pending() == 0
        window.move_pointer(99, 99)
        assert (tracker.dot.x, tracker.dot.y) == (10, 10)
