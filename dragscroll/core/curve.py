from __future__ import annotations

import math

# Largest magnitude the curve may report; keeps int() conversion finite.
CURVE_CEILING = float(2 ** 31 - 1)


def velocity_curve(delta: int, line_height: int, scale: float, accel: float) -> int:
    """
    Map a pointer displacement (pixels) to a scroll step (pixels).

    The displacement is measured in lines, scaled, then raised to a power that
    grows with the displacement itself: small drags stay near linear, long
    drags accelerate. The sign of `delta` is applied after the power so
    fractional exponents never see a negative base.
    """
    if line_height <= 0:
        raise ValueError(f"line_height must be positive, got {line_height}")
    if delta == 0:
        return 0

    f = abs(delta) / line_height
    mag = f * scale
    try:
        out = (mag ** (1.0 + f * accel)) * line_height
    except OverflowError:
        out = CURVE_CEILING
    if not math.isfinite(out) or out > CURVE_CEILING:
        out = CURVE_CEILING

    step = int(out)
    return step if delta > 0 else -step
