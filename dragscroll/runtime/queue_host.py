from __future__ import annotations

import logging
import queue
from typing import Callable, Optional

from dragscroll.core.types import EventType, InputEvent, Viewport
from dragscroll.runtime.scheduler import CooperativeScheduler, Timer

logger = logging.getLogger(__name__)


class QueueHost:
    """
    Host for one viewport, fed by a thread-safe event queue.

    Producers (pynput listeners, a scripted source) only `push`; the
    gesture loop's thread is the only one that touches the viewport and
    the only one that runs timer callbacks.
    """

    def __init__(
        self,
        view: Viewport,
        scheduler: Optional[CooperativeScheduler] = None,
        on_redraw: Optional[Callable[[Viewport], None]] = None,
        on_begin: Optional[Callable[[], None]] = None,
        on_end: Optional[Callable[[], None]] = None,
        on_scrolled: Optional[Callable[[Viewport], None]] = None,
    ) -> None:
        self.view = view
        self.scheduler = scheduler or CooperativeScheduler()
        self.events: "queue.Queue[InputEvent]" = queue.Queue()
        self._on_redraw = on_redraw
        self._on_begin = on_begin
        self._on_end = on_end
        self._on_scrolled = on_scrolled
        self._pointer_y = 0
        self.redraws = 0

    def push(self, ev: InputEvent) -> None:
        self.events.put(ev)

    def set_pointer_y(self, y: int) -> None:
        self._pointer_y = y

    # ---------------------- Host protocol ----------------------

    def pointer_y(self) -> int:
        return self._pointer_y

    def read_event(self) -> InputEvent:
        while True:
            self.scheduler.run_due()
            timeout = self.scheduler.next_timeout()
            try:
                ev = self.events.get(timeout=timeout)
            except queue.Empty:
                continue
            if ev.type == EventType.POINTER_MOVE and ev.y is not None:
                self._pointer_y = ev.y
            return ev

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> Timer:
        return self.scheduler.schedule(delay_ms, callback)

    def cancel(self, handle: Timer) -> None:
        self.scheduler.cancel(handle)

    def redraw(self) -> None:
        self.redraws += 1
        if self._on_redraw is not None:
            self._on_redraw(self.view)

    def on_gesture_begin(self) -> None:
        logger.debug("drag scroll begin")
        if self._on_begin is not None:
            self._on_begin()

    def on_gesture_end(self) -> None:
        logger.debug("drag scroll end")
        if self._on_end is not None:
            self._on_end()

    def on_viewport_scrolled(self, view: Viewport) -> None:
        if self._on_scrolled is not None:
            self._on_scrolled(view)

    def viewport_at(self, event: InputEvent) -> Viewport:
        return self.view

    def active_viewport(self) -> Viewport:
        return self.view
