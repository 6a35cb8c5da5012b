from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QMainWindow, QPushButton, QVBoxLayout, QWidget

from checkview.app.ui.check_view import CheckView
from checkview.config import DEFAULT_CHECK_EASING, DEFAULT_STROKE_COLOR, DEFAULT_STROKE_WIDTH


class MainWindow(QMainWindow):
    """Demo window: a check view with buttons to check and uncheck it."""
    def __init__(
        self,
        stroke_width: float = DEFAULT_STROKE_WIDTH,
        stroke_color: str = DEFAULT_STROKE_COLOR,
        easing: str = DEFAULT_CHECK_EASING,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Check View")

        central = QWidget(self)
        v = QVBoxLayout(central)

        self.check_view = CheckView(
            central, stroke_width=stroke_width, stroke_color=stroke_color, easing=easing
        )
        self.check_view.setFixedSize(160, 160)
        self.check_view.setContentsMargins(16, 16, 16, 16)
        v.addWidget(self.check_view, 1, Qt.AlignmentFlag.AlignCenter)

        buttons = QHBoxLayout()
        self.btn_check = QPushButton("Check", central)
        self.btn_uncheck = QPushButton("Uncheck", central)
        buttons.addWidget(self.btn_check)
        buttons.addWidget(self.btn_uncheck)
        v.addLayout(buttons)

        self.btn_check.clicked.connect(self.check_view.check)
        self.btn_uncheck.clicked.connect(self.check_view.uncheck)

        self.setCentralWidget(central)
