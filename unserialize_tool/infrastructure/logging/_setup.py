# unserialize_tool/infrastructure/logging/_setup.py

"""Root logger setup for applications embedding the decoder

The decoder itself only emits records through module loggers. These helpers
attach a console handler and an optional debug-level file handler to the root
logger, replacing whatever handlers were installed before.
"""

# Standard library imports
from datetime import datetime
from logging import DEBUG
from logging import FileHandler
from logging import Formatter
from logging import Handler
from logging import INFO
from logging import StreamHandler
from logging import getLevelNamesMapping
from logging import getLogger
from os import makedirs
from os.path import join

# Local imports
from unserialize_tool.infrastructure.config import LoggingConfig

logger = getLogger(__name__)

LOG_DIR = "logs"
CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
# File records also name the module that emitted them
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_default_log_path(log_dir: str = LOG_DIR) -> str:
    """Timestamped log file path inside ``log_dir``, which is created if missing"""
    makedirs(log_dir, exist_ok=True)
    return join(log_dir, f"unserialize_{datetime.now():%Y%m%d_%H%M%S}.log")


def resolve_level(name: str) -> int:
    """Numeric level for a level name, INFO for names logging does not know"""
    return getLevelNamesMapping().get(name.upper(), INFO)


def _handler(handler: Handler, level: int, fmt: str) -> Handler:
    handler.setLevel(level)
    handler.setFormatter(Formatter(fmt))
    return handler


def set_up_logging(
    log_file: str | None = None,
    log_level: str = "INFO",
    silent: bool = False,
    disable_file_logging: bool = True,
) -> str | None:
    """Install console and file handlers on the root logger

    Args:
        log_file: File to write, a timestamped file under ``logs/`` if None
        log_level: Root and console level name (DEBUG, INFO, WARNING, ERROR)
        silent: Skip the console handler
        disable_file_logging: Skip the file handler

    Returns:
        The log file path when a file handler was installed, otherwise None
    """
    level = resolve_level(log_level)

    root_logger = getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
        existing.close()
    root_logger.setLevel(level)

    if not silent:
        root_logger.addHandler(_handler(StreamHandler(), level, CONSOLE_FORMAT))

    if disable_file_logging:
        return None

    log_file = log_file or get_default_log_path()
    # The file always receives debug records, whatever the console shows
    root_logger.addHandler(_handler(FileHandler(log_file), DEBUG, FILE_FORMAT))
    logger.info(f"Writing decoder log to {log_file}")
    return log_file


def set_up_logging_from_config(config: LoggingConfig, silent: bool = False) -> str | None:
    """Configure logging from the ``logging`` section of the app config

    File logging is enabled only when the config names a log file.
    """
    return set_up_logging(
        log_file=config.log_file,
        log_level="DEBUG" if config.debug else "INFO",
        silent=silent,
        disable_file_logging=config.log_file is None,
    )
