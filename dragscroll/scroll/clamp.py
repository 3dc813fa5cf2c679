from __future__ import annotations

from typing import Optional

from dragscroll.core.types import Viewport
from dragscroll.scroll.lines import scroll_by_lines


def compute_bound(view: Viewport, visible_lines: int) -> Optional[int]:
    """
    Furthest view start (`line_offset`) a forward drag may reach.

    That is the start which puts the last content line on the bottom row.
    The cursor moves in lockstep with the view, so wherever it sits (or is
    pushed by the scroll margins) it does not change this bound.

    If the last line is already visible the current start is the bound, so
    no further downward scroll happens. Returns None for empty content.
    """
    if view.line_count <= 0:
        return None
    if view.line_offset + visible_lines >= view.line_count:
        return view.line_offset
    return view.line_count - visible_lines


def enforce(view: Viewport, bound: int) -> bool:
    """
    Pull a forward scroll back so the view starts exactly on `bound`,
    taking the cursor back with it. A sub-line offset at the bound is
    dropped too. Returns True if the view was corrected.
    """
    overshoot = view.line_offset - bound
    if overshoot < 0 or (overshoot == 0 and view.pixel_offset == 0):
        return False
    view.pixel_offset = 0
    if overshoot:
        scroll_by_lines(view, -overshoot, also_move_cursor=True)
    return True


def constrain_cursor(view: Viewport, margin: int) -> bool:
    """
    Move a cursor that sits inside the top scroll margin (or on a partially
    scrolled-out first line) down to the first row it may occupy.
    Returns True if the cursor moved.
    """
    top = view.line_offset + margin
    if view.pixel_offset > 0:
        top += 1
    top = min(top, max(view.line_count - 1, 0))
    if view.cursor_line >= top:
        return False
    view.cursor_line = top
    return True
