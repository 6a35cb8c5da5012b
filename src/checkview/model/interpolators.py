from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable

import numpy as np
import matplotlib.pyplot as plt

from checkview import config

if TYPE_CHECKING:
    import numpy.typing as npt

# ==========================================
# ABSTRACT CLASS FOR INTERPOLATORS
# ==========================================
class Interpolator(ABC):
    """
    Abstract base class for easing curves.

    An interpolator maps a linear time fraction in [0, 1] to an eased
    fraction, with 0 -> 0 and 1 -> 1.
    """
    NAME: str = "Interpolator"

    def get_interpolation(
        self,
        fraction: float | npt.NDArray[np.float64],
    ) -> float | npt.NDArray[np.float64]:
        """
        Get the eased fraction for a linear time fraction.

        Args:
            fraction: Linear fraction(s); values outside [0, 1] are clamped.

        Returns:
            Eased fraction(s), a float for scalar input.
        """
        result = self._evaluate(np.clip(fraction, 0.0, 1.0))
        if np.ndim(result) == 0:
            return float(result)
        return result

    @abstractmethod
    def _evaluate(
        self,
        fraction: float | npt.NDArray[np.float64],
    ) -> float | npt.NDArray[np.float64]:
        pass

    def plot(self) -> None:
        """
        Plot the easing curve.
        """
        fractions = np.linspace(0.0, 1.0, 500)
        values = self.get_interpolation(fractions)

        plt.rcParams["figure.constrained_layout.use"] = True
        plt.figure(figsize=(5, 5))

        plt.plot(fractions, values, 'g', lw=2)
        plt.plot([0.0, 1.0], [0.0, 1.0], color='gray', lw=0.5, linestyle='--')

        plt.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
        plt.minorticks_on()
        plt.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

        plt.title(f"{self.NAME} Easing Curve")
        plt.xlabel("Time fraction")
        plt.ylabel("Eased fraction")

        plt.xlim(0.0, 1.0)
        plt.show()

# ==========================================
# CURVES
# ==========================================

class LinearInterpolator(Interpolator):
    NAME = "Linear"

    def _evaluate(self, fraction):
        return fraction


class AccelerateInterpolator(Interpolator):
    """
    Starts slow and speeds up: f ** (2 * factor).

    Selected by the "accelerate" check easing.
    """
    NAME = "Accelerate"

    def __init__(self, factor: float = 1.0) -> None:
        if factor <= 0.0:
            raise ValueError(f"Factor must be positive, got {factor}.")
        self.factor = factor

    def _evaluate(self, fraction):
        return np.power(fraction, 2.0 * self.factor)


class PathInterpolator(Interpolator):
    """
    Cubic bezier easing from (0, 0) to (1, 1) with control points
    (x1, y1) and (x2, y2).

    The curve is sampled once into a lookup table of (x, y) pairs; an input
    fraction is treated as x and the matching y is linearly interpolated.
    """
    NAME = "Cubic Bezier"
    N_SAMPLES: int = 1001

    def __init__(self, x1: float, y1: float, x2: float, y2: float) -> None:
        if not (0.0 <= x1 <= 1.0 and 0.0 <= x2 <= 1.0):
            raise ValueError(f"Control point x values must lie in [0, 1], got {x1} and {x2}.")
        self.control_points = (x1, y1, x2, y2)

        t = np.linspace(0.0, 1.0, self.N_SAMPLES)
        self._xs = self._bezier(t, x1, x2)
        self._ys = self._bezier(t, y1, y2)

    @staticmethod
    def _bezier(t: npt.NDArray[np.float64], c1: float, c2: float) -> npt.NDArray[np.float64]:
        # one coordinate of a cubic bezier with end points fixed at 0 and 1
        u = 1.0 - t
        return 3.0 * u * u * t * c1 + 3.0 * u * t * t * c2 + t ** 3

    def _evaluate(self, fraction):
        return np.interp(fraction, self._xs, self._ys)


class FastOutSlowInInterpolator(PathInterpolator):
    """Material design standard curve."""
    NAME = "Fast Out Slow In"

    def __init__(self) -> None:
        super().__init__(*config.FAST_OUT_SLOW_IN_CONTROL_POINTS)


CHECK_EASINGS: dict[str, Callable[[], Interpolator]] = {
    "bezier": lambda: PathInterpolator(*config.CHECK_EASING_CONTROL_POINTS),
    "accelerate": AccelerateInterpolator,
    "linear": LinearInterpolator,
}


def create_check_interpolator(easing: str = config.DEFAULT_CHECK_EASING) -> Interpolator:
    """
    Easing shared by the check and ring strokes.

    Args:
        easing: One of `CHECK_EASINGS`. "accelerate" is the plain curve for
            hosts that should not pay for the bezier lookup table; "linear"
            is meant for debugging the stroke geometry.

    Raises:
        ValueError: If the easing name is unknown.
    """
    try:
        factory = CHECK_EASINGS[easing]
    except KeyError:
        raise ValueError(
            f"Unknown check easing {easing!r}, expected one of {sorted(CHECK_EASINGS)}."
        ) from None
    return factory()
