from dragscroll.runtime.memory_view import MemoryViewport
from dragscroll.scroll.lines import scroll_by_lines


def view(count=20, line=0, cursor=0, column=0):
    return MemoryViewport.numbered(count, line_offset=line, cursor_line=cursor, cursor_column=column)


def test_zero_lines_is_noop():
    v = view(line=3, cursor=5, column=2)
    assert scroll_by_lines(v, 0, also_move_cursor=True) == 0
    assert (v.line_offset, v.cursor_line, v.cursor_column) == (3, 5, 2)


def test_forward_within_content():
    v = view(line=5, cursor=10, column=4)
    assert scroll_by_lines(v, 3, also_move_cursor=True) == 0
    assert v.line_offset == 8
    assert v.cursor_line == 13
    # cursor lands on the line start
    assert v.cursor_column == 0


def test_view_only_leaves_cursor():
    v = view(line=5, cursor=10, column=4)
    assert scroll_by_lines(v, 3) == 0
    assert v.line_offset == 8
    assert (v.cursor_line, v.cursor_column) == (10, 4)


def test_boundary_remainder_view_only():
    # 2 lines left to scroll, 5 requested
    v = view(line=17)
    assert scroll_by_lines(v, 5) == 3
    assert v.line_offset == 19


def test_three_lines_left_with_cursor():
    v = view(line=16, cursor=16)
    assert scroll_by_lines(v, 5, also_move_cursor=True) == 2
    assert v.line_offset == 19
    assert v.cursor_line == 19


def test_cursor_hits_end_first():
    v = view(line=10, cursor=18)
    # cursor can only move 1, so the view follows by 1
    assert scroll_by_lines(v, 4, also_move_cursor=True) == 3
    assert v.line_offset == 11
    assert v.cursor_line == 19


def test_backward_at_start_resyncs_cursor():
    v = view(line=1, cursor=4)
    assert scroll_by_lines(v, -3, also_move_cursor=True) == -2
    assert v.line_offset == 0
    # cursor moved back by the same single line as the view
    assert v.cursor_line == 3


def test_backward_view_only():
    v = view(line=2)
    assert scroll_by_lines(v, -5) == -3
    assert v.line_offset == 0
