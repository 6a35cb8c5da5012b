"""
Animation Timelines
===================
A timeline is one timed value stream: a duration, an optional start delay,
an easing curve and a list of keyframe values. It holds no clock of its own;
every query takes the current time, so several timelines can be evaluated
against one shared "now" and tested with a fake clock.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

import numpy as np

from checkview.model.interpolators import Interpolator


@dataclass
class Timeline:
    duration_ms: float
    interpolator: Interpolator
    delay_ms: float = 0.0
    values: Sequence[float] = (0.0, 1.0)
    start_time_ms: Optional[float] = field(default=None, init=False)

    def __post_init__(self) -> None:
        if self.duration_ms < 0.0:
            raise ValueError(f"Duration must be non-negative, got {self.duration_ms}.")
        if self.delay_ms < 0.0:
            raise ValueError(f"Delay must be non-negative, got {self.delay_ms}.")
        if len(self.values) < 2:
            raise ValueError("A timeline needs at least two keyframe values.")
        self.values = tuple(float(v) for v in self.values)

    # ------------------------------------------------------------------
    # Control
    # ------------------------------------------------------------------

    def start(self, now_ms: float) -> None:
        """(Re)start the timeline at `now_ms`. A running timeline is replaced, not queued."""
        self.start_time_ms = now_ms

    @property
    def is_started(self) -> bool:
        return self.start_time_ms is not None

    @property
    def end_time_ms(self) -> Optional[float]:
        if self.start_time_ms is None:
            return None
        return self.start_time_ms + self.delay_ms + self.duration_ms

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def linear_fraction(self, now_ms: float) -> float:
        """Elapsed fraction of the duration, ignoring easing. 0 before start and during the delay."""
        if self.start_time_ms is None:
            return 0.0
        elapsed = now_ms - self.start_time_ms - self.delay_ms
        if elapsed <= 0.0:
            return 0.0
        if self.duration_ms == 0.0 or elapsed >= self.duration_ms:
            return 1.0
        return elapsed / self.duration_ms

    def fraction(self, now_ms: float) -> float:
        """Eased fraction."""
        return self.interpolator.get_interpolation(self.linear_fraction(now_ms))

    def value(self, now_ms: float) -> float:
        """Keyframe value at the eased fraction; keyframes are evenly spaced over [0, 1]."""
        keyframes = np.linspace(0.0, 1.0, len(self.values))
        return float(np.interp(self.fraction(now_ms), keyframes, self.values))

    def is_finished(self, now_ms: float) -> bool:
        return self.end_time_ms is not None and now_ms >= self.end_time_ms
