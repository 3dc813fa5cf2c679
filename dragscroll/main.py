from __future__ import annotations

import argparse
import logging
from pathlib import Path

from dragscroll.core.control import GestureSwitch
from dragscroll.core.types import InputEvent
from dragscroll.interpreter.gesture import drag_scroll_or
from dragscroll.runtime.memory_view import MemoryViewport
from dragscroll.runtime.profile import config_from_profile, load_profile
from dragscroll.runtime.queue_host import QueueHost
from dragscroll.ui.pointer import PointerBridge


def _open_view(path: str | None) -> MemoryViewport:
    if path:
        return MemoryViewport(lines=Path(path).read_text().splitlines(), visible_lines=20)
    return MemoryViewport.numbered(1000, visible_lines=20)


def main():
    parser = argparse.ArgumentParser(description="dragscroll live demo (middle-drag to scroll)")
    parser.add_argument("file", nargs="?", help="text file to scroll (default: generated lines)")
    parser.add_argument("--profile", type=Path, default=None, help="JSON profile (default ~/.config/dragscroll/profile.json)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    config = config_from_profile(load_profile(args.profile))
    view = _open_view(args.file)
    switch = GestureSwitch()

    def show(v: MemoryViewport) -> None:
        print("\x1b[2J\x1b[H" + "\n".join(v.render()), flush=True)

    def click(ev: InputEvent) -> None:
        print(f"[dragscroll] click (no drag) at y={ev.y}")

    host = QueueHost(view, on_redraw=show)
    bridge = PointerBridge(host, switch)
    listeners = bridge.start()

    print("[dragscroll] Live demo. Ctrl+C to exit.")
    print("  - Middle-drag scrolls, Esc cancels, Space re-anchors")
    print("  - Ctrl+Alt+Space toggles ON/OFF")
    show(view)

    try:
        while True:
            start = bridge.starts.get()
            drag_scroll_or(host, start, click, config, switch=switch)
            bridge.dragging.clear()
    except KeyboardInterrupt:
        print("\n[dragscroll] exiting")
    finally:
        for listener in listeners:
            listener.stop()


if __name__ == "__main__":
    main()
