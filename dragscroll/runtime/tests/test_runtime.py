import json

import pytest

from dragscroll.core.config import DEFAULT_CONFIG, FAST_CONFIG, ScrollStyle
from dragscroll.core.types import EventType, InputEvent
from dragscroll.interpreter.gesture import perform_drag_scroll
from dragscroll.runtime.memory_view import MemoryViewport
from dragscroll.runtime.profile import config_from_profile, load_profile, save_profile
from dragscroll.runtime.queue_host import QueueHost
from dragscroll.runtime.scheduler import CooperativeScheduler


class FakeClock:
    def __init__(self, t=0.0):
        self.t = t

    def __call__(self):
        return self.t


def test_scheduler_runs_due_in_order():
    clock = FakeClock()
    sched = CooperativeScheduler(clock)
    ran = []
    sched.schedule(10, lambda: ran.append("b"))
    sched.schedule(5, lambda: ran.append("a"))

    assert sched.run_due() == 0
    assert sched.next_timeout() == pytest.approx(0.005)

    clock.t = 0.006
    assert sched.run_due() == 1
    clock.t = 0.010
    assert sched.run_due() == 1
    assert ran == ["a", "b"]
    assert sched.next_timeout() is None


def test_scheduler_cancel():
    clock = FakeClock()
    sched = CooperativeScheduler(clock)
    t = sched.schedule(10, lambda: pytest.fail("cancelled timer ran"))
    sched.cancel(t)
    assert sched.pending() == 0
    clock.t = 1.0
    assert sched.run_due() == 0


def test_queue_host_runs_timers_before_returning_event():
    clock = FakeClock()
    host = QueueHost(MemoryViewport.numbered(10), CooperativeScheduler(clock))
    ran = []
    host.schedule(10, lambda: ran.append(clock.t))
    clock.t = 0.5
    host.push(InputEvent(EventType.POINTER_MOVE, y=42))

    ev = host.read_event()
    assert ev.y == 42
    assert host.pointer_y() == 42
    assert ran == [0.5]


def test_queue_host_gesture_leaves_no_timer():
    clock = FakeClock()
    view = MemoryViewport.numbered(200)
    host = QueueHost(view, CooperativeScheduler(clock))
    host.push(InputEvent(EventType.POINTER_MOVE, y=200))
    host.push(InputEvent(EventType.OTHER))

    assert perform_drag_scroll(host, InputEvent(EventType.POINTER_MOVE, y=100)) is True
    # a single 34px step: line 1 + 14px, snapped to the nearer line 2
    assert view.line_offset == 2
    assert host.scheduler.pending() == 0
    assert host.redraws == 2


def test_render_marks_cursor_and_offset():
    v = MemoryViewport.numbered(50, visible_lines=3, line_offset=10, pixel_offset=4, cursor_line=11)
    rows = v.render()
    assert len(rows) == 3
    assert rows[0].endswith("line 10  (+4px)")
    assert rows[1].startswith(">")


def test_profile_missing(tmp_path):
    assert load_profile(tmp_path / "none.json") is None
    assert config_from_profile(None) is DEFAULT_CONFIG


def test_profile_preset_and_overrides(tmp_path):
    p = tmp_path / "profile.json"
    p.write_text(json.dumps({"preset": "Fast", "smooth": False, "style": "line"}))
    c = config_from_profile(load_profile(p))
    assert c.smooth is False
    assert c.style is ScrollStyle.LINE
    assert c.motion_scale == FAST_CONFIG.motion_scale


def test_profile_saved_config_loads_back(tmp_path):
    p = save_profile(FAST_CONFIG, tmp_path / "sub" / "profile.json")
    assert config_from_profile(load_profile(p)) == FAST_CONFIG


def test_profile_rejects_unknown(tmp_path):
    p = tmp_path / "profile.json"
    p.write_text(json.dumps({"speed": 3}))
    with pytest.raises(ValueError):
        config_from_profile(load_profile(p))
