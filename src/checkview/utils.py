import math


def clamp_fraction(fraction: float) -> float:
    """Clamp an animation fraction into [0, 1]. NaN is rejected."""
    if math.isnan(fraction):
        raise ValueError("Fraction must be a number, got NaN.")
    return min(1.0, max(0.0, float(fraction)))
