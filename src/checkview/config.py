"""
Configuration & Constants
=========================
This module serves as the central registry for the timings, default styling
and shape constants of the check mark animation.

Why is this file needed?
------------------------
1. Single source of truth: the animation timings are coupled (the scale
   pulse is scheduled relative to the stroke duration), so they live together.
2. The model layer and the Qt view read the same numbers without importing
   each other.

Exports:
    CHECK_ANIM_DURATION_MS (int): Duration of the check and ring strokes.
    SCALE_ANIM_DELAY_MS (int): Delay before the scale pulse starts.
    SCALE_ANIM_DURATION_MS (int): Duration of the scale pulse.
"""

# Timings (milliseconds)
CHECK_ANIM_DURATION_MS: int = 300
SCALE_ANIM_DELAY_MS: int = 280
SCALE_ANIM_DURATION_MS: int = 250
FRAME_INTERVAL_MS: int = 16  # ~60 fps frame pump in the Qt view

# Scale pulse keyframes: 1.0 -> SCALE_MIN -> 1.0
SCALE_MIN: float = 0.80

# Easing of the check and ring strokes (cubic bezier control points)
CHECK_EASING_CONTROL_POINTS: tuple[float, float, float, float] = (0.755, 0.05, 0.855, 0.06)
# Easing picked for the check and ring strokes: "bezier", "accelerate" or "linear"
DEFAULT_CHECK_EASING: str = "bezier"
# Material "fast out, slow in" curve used by the scale pulse
FAST_OUT_SLOW_IN_CONTROL_POINTS: tuple[float, float, float, float] = (0.4, 0.0, 0.2, 1.0)

# Default styling
DEFAULT_STROKE_WIDTH: float = 8.0
DEFAULT_STROKE_COLOR: str = "#1AAB00"  # greenish

# Check mark anchors as (x, y) fractions of the drawing rect, from its top-left
CHECK_START_FRACTION: tuple[float, float] = (0.25, 0.50)
CHECK_PIVOT_FRACTION: tuple[float, float] = (0.426, 0.66)
CHECK_END_FRACTION: tuple[float, float] = (0.75, 0.30)

# The ring stops one degree short of a full turn, leaving a visible gap
RING_MAX_SWEEP_DEGREES: float = 359.0
