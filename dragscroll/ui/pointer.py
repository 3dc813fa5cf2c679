from __future__ import annotations

import queue
import threading

from pynput import keyboard, mouse

from dragscroll.core.control import GestureSwitch
from dragscroll.core.types import EventType, InputEvent
from dragscroll.runtime.queue_host import QueueHost


class PointerBridge:
    """
    Global pointer/keyboard listeners (X11) feeding a QueueHost.

    - Middle press:      start a gesture (queued on `starts`)
    - Middle release:    end the gesture
    - Esc:               cancel (restore the view, keep dragging)
    - Space:             pause (re-anchor the drag)
    - Ctrl+Alt+Space:    toggle drag scrolling ON/OFF
    Any other key while dragging ends the gesture.
    """

    def __init__(self, host: QueueHost, switch: GestureSwitch, button=mouse.Button.middle) -> None:
        self.host = host
        self.switch = switch
        self.button = button
        self.starts: "queue.Queue[InputEvent]" = queue.Queue()
        self.dragging = threading.Event()
        self._pressed = set()

    CTRL_KEYS = {keyboard.Key.ctrl, keyboard.Key.ctrl_l, keyboard.Key.ctrl_r}
    ALT_KEYS = {keyboard.Key.alt, keyboard.Key.alt_l, keyboard.Key.alt_r}

    # ---------------------- mouse ----------------------

    def on_move(self, x, y):
        if self.dragging.is_set():
            self.host.push(InputEvent(EventType.POINTER_MOVE, y=int(y)))

    def on_click(self, x, y, button, pressed):
        if button != self.button:
            return
        if pressed and not self.dragging.is_set():
            # a refused gesture returns at once, so no events may follow it
            if self.switch.is_enabled() and not self.switch.active:
                self.dragging.set()
            self.host.set_pointer_y(int(y))
            self.starts.put(InputEvent(EventType.POINTER_MOVE, y=int(y), key=str(button)))
        elif not pressed and self.dragging.is_set():
            self.dragging.clear()
            self.host.push(InputEvent(EventType.OTHER, key="release"))

    # ---------------------- keyboard ----------------------

    def _chord(self) -> bool:
        return any(k in self._pressed for k in self.CTRL_KEYS) and any(k in self._pressed for k in self.ALT_KEYS)

    def on_press(self, k):
        self._pressed.add(k)

        if self._chord():
            if k == keyboard.Key.space:
                enabled = self.switch.toggle()
                print(f"[dragscroll] {'ON' if enabled else 'OFF'} (Ctrl+Alt+Space)")
            return

        if not self.dragging.is_set() or k in self.CTRL_KEYS or k in self.ALT_KEYS:
            return
        if k == keyboard.Key.esc:
            self.host.push(InputEvent(EventType.CANCEL, key="esc"))
        elif k == keyboard.Key.space:
            self.host.push(InputEvent(EventType.PAUSE, key="space"))
        else:
            self.dragging.clear()
            self.host.push(InputEvent(EventType.OTHER, key=str(k)))

    def on_release(self, k):
        self._pressed.discard(k)

    def start(self):
        """Start both listeners in their own threads; returns them for joining/stopping."""
        ml = mouse.Listener(on_move=self.on_move, on_click=self.on_click)
        kl = keyboard.Listener(on_press=self.on_press, on_release=self.on_release)
        ml.start()
        kl.start()
        return ml, kl
