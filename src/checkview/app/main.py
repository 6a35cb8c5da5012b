"""
Run with: python -m checkview.app.main
"""
from __future__ import annotations

import sys

from checkview.app.application import create_app, load_check_easing, load_stroke_style
from checkview.app.ui.main_window import MainWindow
from checkview.logging_config import setup_logging


def main() -> int:
    """Main entry point for the demo application."""
    # CHECKVIEW_LOG_LEVEL=DEBUG follows geometry rebuilds and state changes
    setup_logging()

    app = create_app()
    stroke_width, stroke_color = load_stroke_style()
    win = MainWindow(
        stroke_width=stroke_width,
        stroke_color=stroke_color,
        easing=load_check_easing(),
    )
    win.show()
    return app.exec()

if __name__ == "__main__":
    sys.exit(main())
