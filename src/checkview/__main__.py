"""Command-line interface: python -m checkview opens the demo window."""
import sys

from checkview.app.main import main

if __name__ == "__main__":
    sys.exit(main())
