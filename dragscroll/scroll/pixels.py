from __future__ import annotations

from dragscroll.core.types import Viewport
from dragscroll.scroll.lines import scroll_by_lines


def scroll_by_pixels(view: Viewport, line_height: int, delta_px: int, also_move_cursor: bool = False) -> int:
    """
    Scroll `view` by a signed pixel amount, carrying whole lines into
    `scroll_by_lines` and keeping the rest in `pixel_offset`.

    `pixel_offset` is the distance below the boundary of `line_offset`.
    Adding `delta_px` and floor-dividing by the line height gives the number
    of boundaries crossed in either direction: going up from offset 5 by 8
    pixels lands 3 pixels above the boundary, i.e. one line up at offset
    line_height - 3. The same formula therefore serves both signs and the
    remainder always lands in [0, line_height).

    When the line scroll stops at a content edge the sub-line offset is
    pinned to the line boundary (0) so no partial line past the content
    is shown. Returns the line remainder reported by `scroll_by_lines`.
    """
    if delta_px == 0:
        return 0

    lines, pixel_offset = divmod(view.pixel_offset + delta_px, line_height)

    remainder = 0
    if lines != 0:
        remainder = scroll_by_lines(view, lines, also_move_cursor)
        if remainder != 0:
            pixel_offset = 0

    view.pixel_offset = pixel_offset
    return remainder


def snap_to_line(view: Viewport) -> bool:
    """
    Drop the sub-line offset, rounding to the nearest line boundary.
    Returns True if the view changed.
    """
    if view.pixel_offset == 0:
        return False
    if view.pixel_offset * 2 >= view.line_height:
        scroll_by_lines(view, 1, also_move_cursor=False)
        # keep the cursor on screen
        if view.cursor_line < view.line_offset:
            view.cursor_line = view.line_offset
    view.pixel_offset = 0
    return True
