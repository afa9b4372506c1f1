"""Allow running PomoTimer as a module: python -m pomotimer."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .app import PomoTimerApp


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("pomotimer")


def main() -> None:
    logger = setup_logging()

    app = QApplication(sys.argv)
    app.setApplicationName("PomoTimer")
    app.setOrganizationName("PomoTimer")

    window = PomoTimerApp()
    window.show()
    logger.info("PomoTimer ready")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
