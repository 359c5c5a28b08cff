"""Logging utilities for pinpane.

Modules use the standard pattern:

    import logging
    logger = logging.getLogger(__name__)

The CLI calls ``setup_logging`` once. The Textual demo then switches to
``setup_file_logging``, which writes to a rotating file so log output
does not draw over the TUI.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler

from pinpane.config.constants import LOG_FILE_NAME

# Max log file size: 5MB, keep 2 backups
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 2

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_CLI_HANDLER = "pinpane-cli"


def setup_logging(verbose: bool = False) -> None:
    """Send pinpane logs to stderr; DEBUG when verbose, WARNING otherwise."""
    logger = logging.getLogger("pinpane")
    level = logging.DEBUG if verbose else logging.WARNING

    # Replace the handler from a previous call; sys.stderr may have changed
    for old in [h for h in logger.handlers if h.get_name() == _CLI_HANDLER]:
        logger.removeHandler(old)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_CLI_HANDLER)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger that writes to ~/.config/pinpane/pinpane.log."""
    from pinpane.config.settings import get_config_dir

    logger = logging.getLogger(name)

    # Only add the file handler once; a console handler does not count
    if not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        log_dir = get_config_dir()
        log_dir.mkdir(parents=True, exist_ok=True)

        handler = RotatingFileHandler(
            log_dir / LOG_FILE_NAME, maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT
        )
        handler.setLevel(logging.INFO)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))

        logger.addHandler(handler)
        if logger.level == logging.NOTSET or logger.level > logging.INFO:
            logger.setLevel(logging.INFO)

    return logger


def setup_file_logging() -> logging.Logger:
    """Log to the rotating file only, for while a TUI owns the terminal.

    Drops the stderr handler installed by ``setup_logging``.
    """
    logger = logging.getLogger("pinpane")
    for old in [h for h in logger.handlers if h.get_name() == _CLI_HANDLER]:
        logger.removeHandler(old)
    return get_logger("pinpane")
