"""Entry point for the masked input demo window."""

from __future__ import annotations

import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication

from numask.logging_utils import setup_logging
from numask.mask_config import MaskConfigError
from numask.mask_settings import load_mask_config
from numask_qt.demo_window import MaskDemoWindow

logger = logging.getLogger(__name__)


def _parse_cli_arguments(argv: list[str]) -> tuple[argparse.Namespace, list[str]]:
    """Extract arguments intended for this module and leave the rest for Qt.

    Parameters
    ----------
    argv:
        Raw command-line arguments.

    Returns
    -------
    tuple[argparse.Namespace, list[str]]
        Parsed options and the remaining arguments that should be passed to
        :class:`QApplication`.
    """

    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("--value", type=float, default=1234.5)
    parser.add_argument("--console", action="store_true")

    parsed, remaining = parser.parse_known_args(argv[1:])

    # Ensure Qt receives only the arguments that are relevant to it.
    qt_arguments = [argv[0], *remaining]
    return parsed, qt_arguments


def main() -> int:
    options, qt_arguments = _parse_cli_arguments(sys.argv)

    log_path = setup_logging(console=options.console)
    logger.info("Starting demo, log file: %s", log_path)

    try:
        config = load_mask_config()
    except MaskConfigError as exc:
        logger.error("Invalid mask settings, using built-in examples only: %s", exc)
        config = None

    app = QApplication(qt_arguments)
    window = MaskDemoWindow(config, initial_value=options.value)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
