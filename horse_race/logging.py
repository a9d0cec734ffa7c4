import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
LOG_DIR_ENV_VAR = "HORSE_RACE_LOG_DIR"
PACKAGE_LOGGER = "horse_race"
LOG_FILENAME = "race.log"
MAX_LOG_BYTES = 1024 * 1024  # 1 MiB
BACKUP_COUNT = 3


def _log_path() -> Path:
    log_dir = os.getenv(LOG_DIR_ENV_VAR)
    path = Path(log_dir).expanduser() if log_dir else Path.home() / ".horse_race" / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path / LOG_FILENAME


def _configure_package_logger() -> None:
    """
    Attach the race log file to the package logger, once.

    Module loggers propagate into it. Nothing is written to a stream: the
    terminal belongs to the race renderer.
    """
    root = logging.getLogger(PACKAGE_LOGGER)
    level_name = os.getenv(LOG_LEVEL_ENV_VAR, "INFO").upper()
    root.setLevel(getattr(logging, level_name, logging.INFO))
    if root.handlers:
        return

    handler = RotatingFileHandler(_log_path(), maxBytes=MAX_LOG_BYTES, backupCount=BACKUP_COUNT)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    root.addHandler(handler)
    root.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a module logger that writes to the shared race log file."""
    _configure_package_logger()
    return logging.getLogger(name)
