import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

import click

# per-user directory, outside the interpreter prefix
DEFAULT_LOG_DIR = Path(click.get_app_dir("vec2")) / "logs"


def configure_logging(log_dir: Path = DEFAULT_LOG_DIR) -> None:
    log_dir.mkdir(parents=True, exist_ok=True)

    file_formatter = logging.Formatter(
        "%(asctime)s.%(msecs)03d - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s",
        datefmt="%H:%M:%S",
    )

    # everything, kept short
    debug_handler = TimedRotatingFileHandler(
        log_dir / "debug.log", when="S", interval=300, backupCount=1, encoding="utf-8"
    )
    debug_handler.setLevel(logging.DEBUG)
    debug_handler.setFormatter(file_formatter)

    info_handler = TimedRotatingFileHandler(log_dir / "info.log", when="H", interval=2, backupCount=7, encoding="utf-8")
    info_handler.setLevel(logging.INFO)
    info_handler.setFormatter(file_formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers = []
    root_logger.addHandler(info_handler)
    root_logger.addHandler(debug_handler)

    # Make sure uncaught exceptions are logged
    sys.excepthook = lambda exctype, value, traceback: root_logger.error(
        "Uncaught exception:", exc_info=(exctype, value, traceback)
    )
