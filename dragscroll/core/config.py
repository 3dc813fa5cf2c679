"""
dragscroll — Defaults (Presets)

A config value is handed to the gesture controller once per gesture and is
never mutated while the gesture runs.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Mapping


class ScrollStyle(str, Enum):
    LINE = "line"
    LINE_BY_PIXEL = "line-by-pixel"


class PresetName(str, Enum):
    DEFAULT = "Default"
    PRECISION = "Precision"
    FAST = "Fast"


@dataclass(frozen=True)
class DragScrollConfig:
    style: ScrollStyle = ScrollStyle.LINE_BY_PIXEL
    tick_ms: int = 10                 # timer cadence between pointer samples
    motion_scale: float = 0.25        # lines scrolled per line of drag (before accel)
    motion_accelerate: float = 0.3    # 0.0 = linear
    smooth: bool = True               # sub-line (pixel) scrolling
    clamp: bool = False               # never scroll past the end of content
    follow_pointer: bool = True       # scroll the viewport under the pointer
    scroll_margin: int = 0            # lines kept between cursor and window edge

    def __post_init__(self) -> None:
        if not isinstance(self.style, ScrollStyle):
            # frozen: bypass __setattr__ to coerce "line" -> ScrollStyle.LINE
            object.__setattr__(self, "style", ScrollStyle(self.style))
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.motion_scale < 0.0 or self.motion_accelerate < 0.0:
            raise ValueError("motion_scale and motion_accelerate must not be negative")
        if self.scroll_margin < 0:
            raise ValueError(f"scroll_margin must not be negative, got {self.scroll_margin}")

    def with_overrides(self, overrides: Mapping[str, Any]) -> "DragScrollConfig":
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"unknown config keys: {', '.join(unknown)}")
        return replace(self, **dict(overrides))


DEFAULT_CONFIG = DragScrollConfig()

PRECISION_CONFIG = DragScrollConfig(
    motion_scale=0.15,
    motion_accelerate=0.15,
    scroll_margin=2,
)

FAST_CONFIG = DragScrollConfig(
    tick_ms=8,
    motion_scale=0.4,
    motion_accelerate=0.5,
    clamp=True,
)

PRESETS = {
    PresetName.DEFAULT: DEFAULT_CONFIG,
    PresetName.PRECISION: PRECISION_CONFIG,
    PresetName.FAST: FAST_CONFIG,
}
