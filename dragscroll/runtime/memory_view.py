from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class MemoryViewport:
    """
    Viewport over an in-memory list of text lines.
    Keep it boring. The gesture controller is the brain.
    """
    lines: List[str] = field(default_factory=list)
    line_height: int = 20
    visible_lines: int = 10

    line_offset: int = 0
    pixel_offset: int = 0
    cursor_line: int = 0
    cursor_column: Optional[int] = 0

    @classmethod
    def numbered(cls, count: int, **kw) -> "MemoryViewport":
        return cls(lines=[f"line {i}" for i in range(count)], **kw)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def render(self, width: int = 60) -> List[str]:
        """Visible rows, cursor row marked with '>'; a scrolled first row shows its offset."""
        rows = []
        end = min(self.line_offset + self.visible_lines, self.line_count)
        for i in range(self.line_offset, end):
            mark = ">" if i == self.cursor_line else " "
            text = self.lines[i][:width]
            if i == self.line_offset and self.pixel_offset:
                text = f"{text}  (+{self.pixel_offset}px)"
            rows.append(f"{mark}{i:5d} {text}")
        return rows
