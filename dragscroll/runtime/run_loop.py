from __future__ import annotations

import argparse
import logging
import threading
import time
from dataclasses import dataclass, field
from typing import List, Tuple

from dragscroll.core.config import PRESETS, PresetName, ScrollStyle
from dragscroll.core.types import EventType, InputEvent
from dragscroll.interpreter.gesture import perform_drag_scroll
from dragscroll.runtime.memory_view import MemoryViewport
from dragscroll.runtime.queue_host import QueueHost


@dataclass
class FakeSource:
    """
    Deterministic fake pointer to validate runtime wiring.
    Drags down, holds still, pauses, drags up, then releases.
    """
    start_y: int = 300
    steps: List[Tuple[int, InputEvent]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.steps:
            return
        y = self.start_y
        # ramp down 120px over ~0.3s
        for i in range(1, 13):
            self.steps.append((25, InputEvent(EventType.POINTER_MOVE, y=y + i * 10)))
        # hold still: the timer keeps scrolling
        self.steps.append((400, InputEvent(EventType.PAUSE, key="space")))
        for i in range(1, 7):
            self.steps.append((25, InputEvent(EventType.POINTER_MOVE, y=y + 120 - i * 10)))
        self.steps.append((300, InputEvent(EventType.OTHER, key="release")))

    def feed(self, host: QueueHost) -> threading.Thread:
        def run():
            for delay_ms, ev in self.steps:
                time.sleep(delay_ms / 1000.0)
                host.push(ev)

        t = threading.Thread(target=run, daemon=True)
        t.start()
        return t


def run(preset: PresetName = PresetName.DEFAULT, style: ScrollStyle | None = None) -> bool:
    config = PRESETS[preset]
    if style is not None:
        config = config.with_overrides({"style": style})

    view = MemoryViewport.numbered(500, visible_lines=8)

    def show(v: MemoryViewport) -> None:
        print(f"[dragscroll] line={v.line_offset:4d} px={v.pixel_offset:2d} cursor={v.cursor_line}")

    host = QueueHost(view, on_redraw=show)
    src = FakeSource()
    host.set_pointer_y(src.start_y)

    print("[dragscroll] Scripted drag (FAKE SOURCE).")
    feeder = src.feed(host)
    scrolled = perform_drag_scroll(host, InputEvent(EventType.POINTER_MOVE, y=src.start_y), config)
    feeder.join()

    print(f"[dragscroll] scrolled={scrolled} redraws={host.redraws}")
    for row in view.render():
        print(row)
    return scrolled


def main() -> None:
    parser = argparse.ArgumentParser(description="dragscroll scripted demo")
    parser.add_argument("--preset", choices=[p.value for p in PresetName], default=PresetName.DEFAULT.value)
    parser.add_argument("--style", choices=[s.value for s in ScrollStyle], default=None)
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    run(PresetName(args.preset), ScrollStyle(args.style) if args.style else None)


if __name__ == "__main__":
    main()
