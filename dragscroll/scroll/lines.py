from __future__ import annotations

from dragscroll.core.types import Viewport, clamp


def _last_line(view: Viewport) -> int:
    return max(view.line_count - 1, 0)


def forward_cursor(view: Viewport, lines: int) -> int:
    """
    Move the cursor `lines` lines to the start of the target line.
    Returns the signed shortfall at a content edge.
    """
    target = view.cursor_line + lines
    moved_to = clamp(target, 0, _last_line(view))
    if moved_to != view.cursor_line and view.cursor_column is not None:
        view.cursor_column = 0
    view.cursor_line = moved_to
    return target - moved_to


def forward_view(view: Viewport, lines: int) -> int:
    """Move the first visible line, return the signed shortfall at a content edge."""
    target = view.line_offset + lines
    view.line_offset = clamp(target, 0, _last_line(view))
    return target - view.line_offset


def scroll_by_lines(view: Viewport, lines: int, also_move_cursor: bool = False) -> int:
    """
    Scroll `view` by a signed number of lines.

    With `also_move_cursor` the cursor moves first and the view only follows
    as far as the cursor got, so the cursor keeps its row on screen. If the
    view itself then stops short, the cursor is pulled back by the same amount.

    Returns the lines that could not be scrolled (same sign as `lines`),
    i.e. `lines` minus how far `line_offset` actually moved.
    """
    if lines == 0:
        return 0

    view_lines = lines
    if also_move_cursor:
        view_lines -= forward_cursor(view, lines)

    remainder = forward_view(view, view_lines) if view_lines else 0

    if also_move_cursor and remainder:
        forward_cursor(view, -remainder)

    return lines - (view_lines - remainder)
