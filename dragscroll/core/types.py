"""
dragscroll — CORE CONTRACTS

Everything the gesture engine needs from its host is described here:
the input events it reads, the viewport it mutates and the host
capabilities (timers, redraw, lifecycle hooks) it calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Protocol


# ============================================================
# Gesture lifecycle
# ============================================================

class GestureState(str, Enum):
    IDLE = "IDLE"
    DRAGGING = "DRAGGING"
    CANCELLED = "CANCELLED"   # ended with the original view restored
    COMMITTED = "COMMITTED"   # ended with the scroll kept


# ============================================================
# Host → Controller (input)
# ============================================================

class EventType(str, Enum):
    POINTER_MOVE = "POINTER_MOVE"
    CANCEL = "CANCEL"     # restore the pre-gesture view, keep dragging
    PAUSE = "PAUSE"       # re-anchor the drag, keep the scroll
    OTHER = "OTHER"       # anything else ends the gesture


@dataclass(frozen=True)
class InputEvent:
    """
    A single input event delivered by the host.

    `y` is the vertical pointer coordinate in pixels (POINTER_MOVE only,
    optional: the controller falls back to `Host.pointer_y()`).
    `key` is free-form host data for diagnostics.
    """
    type: EventType
    y: Optional[int] = None
    key: Optional[str] = None


# ============================================================
# Viewport (mutated by the scroll primitives)
# ============================================================

class Viewport(Protocol):
    """
    A scrollable window onto line-based content.

    Invariant outside a single scroll call: 0 <= pixel_offset < line_height.
    Line indices are zero based; valid lines are 0 .. line_count - 1.
    """
    line_offset: int
    pixel_offset: int
    cursor_line: int
    cursor_column: Optional[int]

    @property
    def line_count(self) -> int: ...

    @property
    def line_height(self) -> int: ...

    @property
    def visible_lines(self) -> int: ...


@dataclass(frozen=True)
class ViewState:
    """Snapshot of everything a cancel has to put back."""
    line_offset: int
    pixel_offset: int
    cursor_line: int
    cursor_column: Optional[int]

    @classmethod
    def capture(cls, view: Viewport) -> "ViewState":
        return cls(
            line_offset=view.line_offset,
            pixel_offset=view.pixel_offset,
            cursor_line=view.cursor_line,
            cursor_column=view.cursor_column,
        )

    def apply(self, view: Viewport) -> None:
        view.line_offset = self.line_offset
        view.pixel_offset = self.pixel_offset
        view.cursor_line = self.cursor_line
        view.cursor_column = self.cursor_column


# ============================================================
# Host capabilities (called by the controller)
# ============================================================

TimerHandle = Any


class Host(Protocol):
    def pointer_y(self) -> int: ...

    def read_event(self) -> InputEvent:
        """Block until the next input event; due timers run while waiting."""
        ...

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle: ...

    def cancel(self, handle: TimerHandle) -> None: ...

    def redraw(self) -> None: ...

    def on_gesture_begin(self) -> None: ...

    def on_gesture_end(self) -> None: ...

    def on_viewport_scrolled(self, view: Viewport) -> None: ...

    def viewport_at(self, event: InputEvent) -> Viewport: ...

    def active_viewport(self) -> Viewport: ...


def clamp(x: int, lo: int, hi: int) -> int:
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x
