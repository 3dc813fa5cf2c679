from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field
from threading import Lock
from typing import Iterator


@dataclass
class GestureSwitch:
    """
    Gate in front of every drag-scroll gesture.

    Two things are decided here:
      - drag scrolling is on or off (hotkey-toggled; off means every press
        falls straight through to the host's fallback click)
      - at most one gesture owns the viewports at a time; a press that
        arrives while another gesture is still running is refused

    Toggling off while a gesture runs does not abort it. The running
    gesture finishes normally and the next press is refused.
    """
    enabled: bool = True
    _active: bool = field(default=False, repr=False)
    _lock: Lock = field(default_factory=Lock, repr=False, compare=False)

    def is_enabled(self) -> bool:
        with self._lock:
            return self.enabled

    def set_enabled(self, value: bool) -> None:
        with self._lock:
            self.enabled = value

    def toggle(self) -> bool:
        with self._lock:
            self.enabled = not self.enabled
            return self.enabled

    @property
    def active(self) -> bool:
        with self._lock:
            return self._active

    def try_claim(self) -> bool:
        with self._lock:
            if not self.enabled or self._active:
                return False
            self._active = True
            return True

    def release(self) -> None:
        with self._lock:
            self._active = False

    @contextmanager
    def claim(self) -> Iterator[bool]:
        """Yields whether the gesture may run; releases the claim on exit."""
        granted = self.try_claim()
        try:
            yield granted
        finally:
            if granted:
                self.release()
