from __future__ import annotations

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication, QSettings
from PySide6.QtGui import QColor

import logging
import sys
import os

from checkview import config
from checkview.model.interpolators import CHECK_EASINGS

ORG_ID = "checkview"
APP_ID = "checkview"

VISIBLE_APP_NAME = "Check View"

logger = logging.getLogger(__name__)


def create_app() -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication(sys.argv)

    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    return app


def load_stroke_style(settings: QSettings | None = None) -> tuple[float, str]:
    """
    Read the stroke width and color from the user settings.

    Invalid values fall back to the defaults in `checkview.config`.
    """
    if settings is None:
        settings = QSettings()

    width = settings.value("checkview/stroke_width", config.DEFAULT_STROKE_WIDTH, type=float)
    if width < 0.0:
        logger.warning("Ignoring negative stroke width %s from settings.", width)
        width = config.DEFAULT_STROKE_WIDTH

    color = settings.value("checkview/stroke_color", config.DEFAULT_STROKE_COLOR, type=str)
    if not QColor(color).isValid():
        logger.warning("Ignoring invalid stroke color %r from settings.", color)
        color = config.DEFAULT_STROKE_COLOR

    return width, color


def load_check_easing(settings: QSettings | None = None) -> str:
    """Read the stroke easing name from the user settings, falling back to the default."""
    if settings is None:
        settings = QSettings()

    easing = settings.value("checkview/easing", config.DEFAULT_CHECK_EASING, type=str)
    if easing not in CHECK_EASINGS:
        logger.warning("Ignoring unknown easing %r from settings.", easing)
        easing = config.DEFAULT_CHECK_EASING
    return easing
