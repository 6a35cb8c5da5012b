from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import QElapsedTimer, QEvent, QPointF, QRectF, QSize, Qt, QTimer, Signal
from PySide6.QtGui import QColor, QPainter, QPainterPath, QPen
from PySide6.QtWidgets import QWidget

from checkview import config
from checkview.controller.progress_driver import ProgressDriver
from checkview.model.check_path import PartialPath
from checkview.model.geometry_primitives import Rect
from checkview.model.interpolators import create_check_interpolator
from checkview.model.ring_path import ArcDescriptor
from checkview.model.state import Frame

logger = logging.getLogger(__name__)


class CheckView(QWidget):
    """
    Animating check mark inside a ring.

    The drawing area is the contents rect (contents margins act as padding)
    and should resolve to a square. `check()` animates the stroke in and
    pulses the scale; `uncheck()` clears the view without animating.
    `easing` names the stroke curve (see `create_check_interpolator`).
    """
    checked_changed = Signal(bool)

    def __init__(
        self,
        parent: QWidget | None = None,
        *,
        stroke_width: float = config.DEFAULT_STROKE_WIDTH,
        stroke_color: str | QColor = config.DEFAULT_STROKE_COLOR,
        easing: str = config.DEFAULT_CHECK_EASING,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        super().__init__(parent)

        if stroke_width < 0.0:
            raise ValueError(f"Stroke width must be non-negative, got {stroke_width}.")
        self._stroke_width = float(stroke_width)
        self._stroke_color = QColor(stroke_color)

        self._driver = ProgressDriver(create_check_interpolator(easing))
        self._frame: Optional[Frame] = None

        # milliseconds since construction unless a clock is injected
        self._elapsed = QElapsedTimer()
        self._elapsed.start()
        self._clock = clock or (lambda: float(self._elapsed.elapsed()))

        # frame pump, only runs while animating
        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(config.FRAME_INTERVAL_MS)
        self._frame_timer.timeout.connect(self._on_frame)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def driver(self) -> ProgressDriver:
        return self._driver

    @property
    def current_frame(self) -> Optional[Frame]:
        """The frame painted by the next paint event, None when nothing is drawn."""
        return self._frame

    def stroke_width(self) -> float:
        return self._stroke_width

    def set_stroke_width(self, width: float) -> None:
        if width < 0.0:
            raise ValueError(f"Stroke width must be non-negative, got {width}.")
        self._stroke_width = float(width)
        logger.debug("Stroke width set to %.1f", self._stroke_width)
        self._relayout()
        self.update()

    def stroke_color(self) -> QColor:
        return QColor(self._stroke_color)

    def set_stroke_color(self, color: str | QColor) -> None:
        self._stroke_color = QColor(color)
        self.update()

    def is_checked(self) -> bool:
        return self._driver.is_checked

    def check(self) -> None:
        """Animate into the checked state. Restarts an animation in flight."""
        was_checked = self._driver.is_checked
        self._driver.check(self._clock())
        self._on_frame()
        self._frame_timer.start()
        if not was_checked:
            self.checked_changed.emit(True)

    def uncheck(self) -> None:
        """Reset to an unchecked state. This will not animate."""
        was_checked = self._driver.is_checked
        self._driver.uncheck()
        self._frame_timer.stop()
        self._frame = None
        self.update()
        if was_checked:
            self.checked_changed.emit(False)

    def sizeHint(self) -> QSize:
        return QSize(48, 48)

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def event(self, event) -> bool:
        # padding changed, the drawing rect moved
        if event.type() == QEvent.Type.ContentsRectChange:
            self._relayout()
        return super().event(event)

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._relayout()

    def paintEvent(self, event) -> None:
        frame = self._frame
        if frame is None or not frame.state.is_checked:
            return

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        # uniform scale pulse about the widget centre
        cx, cy = self.width() / 2, self.height() / 2
        painter.translate(cx, cy)
        painter.scale(frame.scale, frame.scale)
        painter.translate(-cx, -cy)

        pen = QPen(
            self._stroke_color,
            self._stroke_width,
            Qt.PenStyle.SolidLine,
            Qt.PenCapStyle.RoundCap,
            Qt.PenJoinStyle.RoundJoin,
        )
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)

        check_path = self._check_painter_path(frame.check_path)
        if check_path is not None:
            painter.drawPath(check_path)
        ring_path = self._ring_painter_path(frame.ring_arc)
        if ring_path is not None:
            painter.drawPath(ring_path)

        painter.end()

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _drawing_rect(self) -> Rect:
        r = self.contentsRect()
        return Rect(
            left=float(r.x()),
            top=float(r.y()),
            right=float(r.x() + r.width()),
            bottom=float(r.y() + r.height()),
        )

    def _relayout(self) -> None:
        self._driver.on_size_changed(self._drawing_rect(), self._stroke_width)
        if self._driver.is_checked:
            self._frame = self._driver.tick(self._clock())

    def _on_frame(self) -> None:
        now = self._clock()
        self._frame = self._driver.tick(now)
        self.update()
        if not self._driver.is_animating(now):
            self._frame_timer.stop()

    @staticmethod
    def _check_painter_path(partial: PartialPath) -> QPainterPath | None:
        # a single point has no length, nothing to stroke
        if len(partial) < 2:
            return None
        first, *rest = partial.points
        path = QPainterPath(QPointF(first.x, first.y))
        for p in rest:
            path.lineTo(p.x, p.y)
        return path

    @staticmethod
    def _ring_painter_path(arc: ArcDescriptor) -> QPainterPath | None:
        if arc.is_empty():
            return None
        rect = QRectF(arc.rect.left, arc.rect.top, arc.rect.width, arc.rect.height)
        path = QPainterPath(QPointF(arc.start.x, arc.start.y))
        # Qt angles grow counter-clockwise, the arc sweeps clockwise on screen
        path.arcTo(rect, -arc.start_angle, -arc.sweep_angle)
        return path
