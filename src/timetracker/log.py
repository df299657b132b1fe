"""Logging setup built on top of :mod:`loguru`."""

from pathlib import Path
from typing import Optional, Union

from loguru import logger

from .core.config import get_config


def setup_logging(level: Optional[str] = None,
                  log_file: Optional[Union[str, Path]] = None) -> None:
    """
    Enable timetracker's log output.

    The package's records are disabled on import; this turns them on and
    replaces loguru's sinks with a stdout sink and an optional file sink.

    Args:
        level: Minimum level; defaults to the configured log_level
        log_file: Optional file path for a rotating log sink
    """
    level = level or get_config().log_level
    logger.enable("timetracker")
    logger.remove()
    logger.add(lambda msg: print(msg, end=""), level=level)
    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(path, level=level, rotation="10 MB", retention="7 days")


def disable_logging() -> None:
    """Silence timetracker's records again."""
    logger.disable("timetracker")
