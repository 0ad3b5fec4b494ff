"""Application entry point."""

from __future__ import annotations

import sys

from mindboard.ui.bootstrap import run_application


def main() -> None:
    """Launch the MindBoard application."""
    sys.exit(run_application())


if __name__ == "__main__":
    main()
