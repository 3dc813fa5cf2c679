from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import partial
from typing import Callable, Optional

from dragscroll.core.config import DEFAULT_CONFIG, DragScrollConfig, ScrollStyle
from dragscroll.core.control import GestureSwitch
from dragscroll.core.curve import velocity_curve
from dragscroll.core.types import (
    EventType, GestureState, Host, InputEvent,
    TimerHandle, Viewport, ViewState,
)
from dragscroll.scroll.clamp import compute_bound, constrain_cursor, enforce
from dragscroll.scroll.lines import scroll_by_lines
from dragscroll.scroll.pixels import scroll_by_pixels, snap_to_line

logger = logging.getLogger(__name__)


def _trunc_div(a: int, b: int) -> int:
    # integer division rounding toward zero (Python's // floors)
    q = abs(a) // b
    return q if a >= 0 else -q


class Ticker:
    """
    Owns at most one pending host timer.

    Starting a tick always cancels the pending one first, and leaving the
    `with` block cancels whatever is left, so a gesture can never leave a
    callback scheduled behind it.
    """

    def __init__(self, host: Host, interval_ms: int) -> None:
        self.host = host
        self.interval_ms = interval_ms
        self._handle: TimerHandle = None

    @property
    def active(self) -> bool:
        return self._handle is not None

    def start(self, callback: Callable[[], None]) -> None:
        self.stop()
        self._handle = self.host.schedule(self.interval_ms, partial(self._fire, callback))

    def stop(self) -> None:
        if self._handle is not None:
            handle, self._handle = self._handle, None
            self.host.cancel(handle)

    def _fire(self, callback: Callable[[], None]) -> None:
        self._handle = None
        callback()

    def __enter__(self) -> "Ticker":
        return self

    def __exit__(self, *exc) -> None:
        self.stop()


@dataclass
class GestureSession:
    view: Viewport
    initial: ViewState
    reference_y: int
    ticker: Ticker

    delta: int = 0
    previous_delta: int = 0
    pixel_accum: int = 0             # non-smooth carry, pixels
    has_scrolled: bool = False       # cleared by cancel
    has_scrolled_real: bool = False  # sticky for the whole gesture
    clamp_bound: Optional[int] = None
    state: GestureState = field(default=GestureState.DRAGGING)


class GestureController:
    """
    Press-drag-scroll-release state machine.

    One blocking `read_event` loop drives the gesture; the host runs due
    timer callbacks from inside `read_event`, on the same thread, so a tick
    and an input event never interleave.
    """

    def __init__(self, host: Host, config: DragScrollConfig = DEFAULT_CONFIG,
                 switch: Optional[GestureSwitch] = None) -> None:
        self.host = host
        self.config = config
        self.switch = switch
        self.session: Optional[GestureSession] = None

    # ---------------------- entry point ----------------------

    def perform(self, event: InputEvent) -> bool:
        """Run one gesture. True iff the pointer actually dragged the view."""
        if self.switch is None:
            return self._run(event)
        with self.switch.claim() as granted:
            if not granted:
                logger.debug("gesture refused: enabled=%s", self.switch.is_enabled())
                return False
            return self._run(event)

    def _run(self, event: InputEvent) -> bool:
        cfg = self.config
        view = self.host.viewport_at(event) if cfg.follow_pointer else self.host.active_viewport()
        s = GestureSession(
            view=view,
            initial=ViewState.capture(view),
            reference_y=self._pointer_y(event),
            ticker=Ticker(self.host, cfg.tick_ms),
        )
        if cfg.clamp:
            s.clamp_bound = compute_bound(view, view.visible_lines)
        self.session = s
        logger.debug("gesture start: line=%d px=%d y=%d bound=%s",
                     view.line_offset, view.pixel_offset, s.reference_y, s.clamp_bound)

        with s.ticker:
            while True:
                ev = self.host.read_event()
                if ev.type == EventType.POINTER_MOVE:
                    self._on_motion(s, ev)
                elif ev.type == EventType.CANCEL:
                    self._on_cancel(s, ev)
                elif ev.type == EventType.PAUSE:
                    self._on_pause(s, ev)
                else:
                    break
            self._finish(s)

        return s.has_scrolled_real

    # ---------------------- input handlers ----------------------

    def _pointer_y(self, ev: InputEvent) -> int:
        return ev.y if ev.y is not None else self.host.pointer_y()

    def _on_motion(self, s: GestureSession, ev: InputEvent) -> None:
        s.delta = self._pointer_y(ev) - s.reference_y

        if s.delta == 0:
            # back on the anchor: nothing to animate
            s.ticker.stop()
        else:
            corrected = False
            if s.previous_delta == 0:
                if self.config.smooth:
                    corrected = constrain_cursor(s.view, self.config.scroll_margin)
                s.has_scrolled = True
                if not s.has_scrolled_real:
                    s.has_scrolled_real = True
                    self.host.on_gesture_begin()
            s.ticker.stop()
            self.step(s, force_redraw=corrected)
            s.ticker.start(partial(self._tick, s))

        s.previous_delta = s.delta

    def _on_cancel(self, s: GestureSession, ev: InputEvent) -> None:
        logger.debug("gesture cancel: restoring line=%d", s.initial.line_offset)
        s.has_scrolled = False
        self._reanchor(s, ev)
        s.initial.apply(s.view)
        self.host.redraw()

    def _on_pause(self, s: GestureSession, ev: InputEvent) -> None:
        logger.debug("gesture pause at line=%d", s.view.line_offset)
        self._reanchor(s, ev)
        self.host.redraw()

    def _reanchor(self, s: GestureSession, ev: InputEvent) -> None:
        s.ticker.stop()
        if self.config.smooth:
            snap_to_line(s.view)
        s.pixel_accum = 0
        s.reference_y = self._pointer_y(ev)
        s.delta = 0
        s.previous_delta = 0

    # ---------------------- timer ----------------------

    def _tick(self, s: GestureSession) -> None:
        self.step(s)
        s.ticker.start(partial(self._tick, s))

    def step(self, s: GestureSession, force_redraw: bool = False) -> bool:
        """
        Apply one scroll step for the session's current delta.
        Returns True only if the view moved. Redraws once if it moved, or
        if `force_redraw` (the cursor changed on its own).
        """
        view = s.view
        before = (view.line_offset, view.pixel_offset)

        if self.config.style == ScrollStyle.LINE:
            forward = self._step_lines(s)
        else:
            forward = self._step_pixels(s)

        if forward and s.clamp_bound is not None:
            enforce(view, s.clamp_bound)

        moved = (view.line_offset, view.pixel_offset) != before
        if moved:
            s.has_scrolled = True
        if moved or force_redraw:
            self.host.redraw()
        return moved

    def _step_lines(self, s: GestureSession) -> bool:
        # raw drag, no curve: one line per line_height of drag per tick
        self._scroll_whole_lines(s, s.delta)
        return s.delta > 0

    def _step_pixels(self, s: GestureSession) -> bool:
        cfg = self.config
        view = s.view
        h = view.line_height
        step_px = velocity_curve(s.delta, h, cfg.motion_scale, cfg.motion_accelerate)

        if cfg.smooth:
            scroll_by_pixels(view, h, step_px, also_move_cursor=True)
            if view.cursor_line >= view.line_count - 1:
                # no fractional scroll past the last line
                view.pixel_offset = 0
        else:
            self._scroll_whole_lines(s, step_px)
        return step_px > 0

    def _scroll_whole_lines(self, s: GestureSession, step_px: int) -> None:
        h = s.view.line_height
        s.pixel_accum += step_px
        lines = _trunc_div(s.pixel_accum, h)
        if lines:
            s.pixel_accum -= lines * h
            scroll_by_lines(s.view, lines, also_move_cursor=True)

    # ---------------------- termination ----------------------

    def _finish(self, s: GestureSession) -> None:
        view = s.view
        s.ticker.stop()
        # compared before snapping: a click on a half-scrolled line stays put
        unmoved = (view.line_offset, view.pixel_offset) == (s.initial.line_offset, s.initial.pixel_offset)
        if self.config.smooth and not unmoved:
            snap_to_line(view)

        if unmoved or view.line_offset == s.initial.line_offset:
            s.initial.apply(view)
            s.has_scrolled = False
        elif s.has_scrolled and s.initial.cursor_column is not None:
            view.cursor_column = s.initial.cursor_column

        s.state = GestureState.COMMITTED if s.has_scrolled else GestureState.CANCELLED
        logger.debug("gesture end: %s line=%d real=%s", s.state.value, view.line_offset, s.has_scrolled_real)

        if s.has_scrolled_real:
            self.host.on_gesture_end()
            self.host.on_viewport_scrolled(view)
            self.host.redraw()


def perform_drag_scroll(host: Host, event: InputEvent, config: DragScrollConfig = DEFAULT_CONFIG,
                        switch: Optional[GestureSwitch] = None) -> bool:
    return GestureController(host, config, switch).perform(event)


def drag_scroll_or(host: Host, event: InputEvent, fallback: Callable[[InputEvent], None],
                   config: DragScrollConfig = DEFAULT_CONFIG,
                   switch: Optional[GestureSwitch] = None) -> bool:
    """Drag-scroll, or run `fallback(event)` (e.g. a plain click) if nothing was dragged."""
    scrolled = perform_drag_scroll(host, event, config, switch)
    if not scrolled:
        fallback(event)
    return scrolled
