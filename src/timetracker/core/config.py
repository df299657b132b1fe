"""
Package-wide defaults.

Explicit arguments always take precedence over these values; the config
only fills in what callers leave out.
"""

import os
from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class TrackerConfig:
    """Defaults consulted by the tracker, callback helpers and logging."""

    default_unit: str = "ms"
    default_format: str = "%s %s"
    callback_unit: str = "s"
    echo: bool = False
    log_level: str = field(
        default_factory=lambda: os.environ.get("TIMETRACKER_LOG_LEVEL", "WARNING")
    )


_config = TrackerConfig()


def get_config() -> TrackerConfig:
    """Return the active configuration."""
    return _config


def configure(**changes) -> TrackerConfig:
    """
    Replace selected fields of the active configuration.

    Example:
        configure(default_unit="us", echo=True)

    Raises:
        TypeError: If a field name is unknown
    """
    global _config
    _config = replace(_config, **changes)
    return _config


def reset_config() -> TrackerConfig:
    """Restore the defaults."""
    global _config
    _config = TrackerConfig()
    return _config
