"""
Progress Driver
===============
Turns the clock into drawable geometry, one frame at a time.

Why is this file needed?
------------------------
1. Timing: It owns the three timelines (check stroke, ring stroke, scale
   pulse) and evaluates them against one shared "now", so the pulse delay
   relative to the strokes stays explicit.
2. State: It holds the checked/unchecked state and the geometry of the
   current layout, rebuilt by the host on every resize.
3. Decoupling: It has no Qt dependency; the host widget only forwards
   resize events and clock ticks and paints the returned `Frame`.

Classes:
    ProgressDriver: The per-frame orchestrator.
"""
from __future__ import annotations

import logging
from typing import Optional

from checkview import config
from checkview.model.check_path import CheckGeometry, CheckPathBuilder
from checkview.model.geometry_primitives import Rect
from checkview.model.interpolators import FastOutSlowInInterpolator, Interpolator, create_check_interpolator
from checkview.model.ring_path import RingGeometry, RingPathBuilder
from checkview.model.state import CheckState, Frame
from checkview.model.timeline import Timeline

logger = logging.getLogger(__name__)


class ProgressDriver:
    def __init__(self, check_interpolator: Optional[Interpolator] = None) -> None:
        # check and ring share one interpolator so they finish in lockstep
        interpolator = check_interpolator or create_check_interpolator()

        self.check_timeline = Timeline(
            duration_ms=config.CHECK_ANIM_DURATION_MS,
            interpolator=interpolator,
        )
        self.ring_timeline = Timeline(
            duration_ms=config.CHECK_ANIM_DURATION_MS,
            interpolator=interpolator,
        )
        self.scale_timeline = Timeline(
            duration_ms=config.SCALE_ANIM_DURATION_MS,
            interpolator=FastOutSlowInInterpolator(),
            delay_ms=config.SCALE_ANIM_DELAY_MS,
            values=(1.0, config.SCALE_MIN, 1.0),
        )

        self._state = CheckState.UNCHECKED
        self._check_geometry: Optional[CheckGeometry] = None
        self._ring_geometry: Optional[RingGeometry] = None
        self._layout_generation = 0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def state(self) -> CheckState:
        return self._state

    @property
    def is_checked(self) -> bool:
        return self._state.is_checked

    @property
    def check_geometry(self) -> Optional[CheckGeometry]:
        return self._check_geometry

    @property
    def ring_geometry(self) -> Optional[RingGeometry]:
        return self._ring_geometry

    @property
    def layout_generation(self) -> int:
        """Incremented on every geometry rebuild."""
        return self._layout_generation

    @property
    def timelines(self) -> tuple[Timeline, Timeline, Timeline]:
        return self.check_timeline, self.ring_timeline, self.scale_timeline

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def on_size_changed(self, rect: Rect, stroke_width: float) -> None:
        """
        Rebuild the check and ring geometry for a new drawing rect.

        Args:
            rect: Drawing area (padding already removed), in drawing units.
            stroke_width: Stroke width; the ring is inset by half of it.

        Raises:
            ValueError: If the stroke width is negative.
        """
        ring_geometry = RingPathBuilder.build(rect, stroke_width)
        self._check_geometry = CheckPathBuilder.build(rect)
        self._ring_geometry = ring_geometry
        self._layout_generation += 1

        if not rect.is_square():
            logger.warning(
                "Non-square drawing area %.1f x %.1f, the check mark will look distorted. "
                "Make sure the width, height and padding resolve to a square.",
                rect.width, rect.height,
            )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Geometry rebuilt for %s (generation %d, check length %.2f, ring length %.2f)",
                rect, self._layout_generation,
                self._check_geometry.total_length, ring_geometry.circumference,
            )

    def check(self, now_ms: float) -> None:
        """Start the checking animation. An animation in flight is restarted from zero."""
        self._set_state(CheckState.ANIMATING)
        for timeline in self.timelines:
            timeline.start(now_ms)

    def uncheck(self) -> None:
        """Reset to the unchecked state immediately. Running timelines are left alone."""
        self._set_state(CheckState.UNCHECKED)

    def is_animating(self, now_ms: float) -> bool:
        return self._state is CheckState.ANIMATING and not self._all_finished(now_ms)

    def tick(self, now_ms: float) -> Optional[Frame]:
        """
        Compute the frame at `now_ms`.

        The check path, the ring arc and the scale are evaluated in that order.

        Returns:
            The frame to draw, or None while unchecked or before the first layout.
        """
        if not self.is_checked:
            return None
        if self._check_geometry is None or self._ring_geometry is None:
            return None

        check_path = CheckPathBuilder.partial_path(self._check_geometry, self.check_timeline.fraction(now_ms))
        ring_arc = RingPathBuilder.partial_path(self._ring_geometry, self.ring_timeline.fraction(now_ms))
        scale = self.scale_timeline.value(now_ms)

        if self._state is CheckState.ANIMATING and self._all_finished(now_ms):
            self._set_state(CheckState.CHECKED)

        return Frame(
            check_path=check_path,
            ring_arc=ring_arc,
            scale=scale,
            state=self._state,
            layout_generation=self._layout_generation,
        )

    # ------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------

    def _all_finished(self, now_ms: float) -> bool:
        return all(timeline.is_finished(now_ms) for timeline in self.timelines)

    def _set_state(self, state: CheckState) -> None:
        if state is not self._state:
            logger.debug("State %s -> %s", self._state.value, state.value)
        self._state = state
