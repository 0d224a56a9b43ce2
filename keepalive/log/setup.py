import logging
import sys
from pathlib import Path
from typing import Optional

from keepalive.local.config import effective_settings as config

LOG_FORMAT = '%(asctime)s - %(levelname)-8s - [%(name)s] - %(message)s'


def resolve_level(name: str, default: int = logging.INFO) -> int:
    """Maps a level name such as 'DEBUG' to its logging constant."""
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else default


def setup_logging(console_level: Optional[int] = None, log_file: Optional[str] = None) -> None:
    """
    Configures the root logger for the supervisor.
    This sets up a console handler and optionally a file handler,
    clearing any previously configured handlers to prevent duplication.

    The managed child writes straight to the inherited stdout, so its output
    is interleaved with these records without any framing.

    :param console_level: The logging level for the console output. Defaults to LOG_LEVEL.
    :param log_file: Path of an additional log file. Defaults to LOG_FILE_PATH; empty disables it.
    """
    if console_level is None:
        console_level = resolve_level(config.LOG_LEVEL)
    if log_file is None:
        log_file = config.LOG_FILE_PATH

    root_logger = logging.getLogger()
    # Set root level to lowest to capture all messages for handler filtering
    root_logger.setLevel(logging.DEBUG)

    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    # --- Console Handler ---
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    # --- File Handler (conditional) ---
    if log_file:
        try:
            path = Path(log_file)
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(path, encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.error(f"Failed to initialize file logging handler for '{log_file}': {e}")
