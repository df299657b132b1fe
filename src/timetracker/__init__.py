"""
timetracker - named timers with pause/resume, laps and pluggable units.

Provides:
  - TimeTracker          : start/stop/pause/resume/lap/reset named timers
  - Result               : a duration convertible between units
  - Unit                 : registry of built-in and custom time units
  - run() / watch()      : time a callback and return its output
  - watch_call()         : same, with plain call arguments
  - @timed               : record every call of a function as a timer
  - timed_block()        : record a code block as a timer
  - summary()            : print a report of the default tracker
  - configure()          : change package-wide defaults
  - setup_logging()      : enable loguru output

Durations are measured with time.perf_counter and pivot through seconds.
"""

from typing import Optional

from loguru import logger

from .core.config import TrackerConfig, configure, get_config, reset_config
from .core.errors import (
    CallbackExecutionError,
    DivisionByZero,
    InvalidUnitName,
    NoActivePausedTimerToResume,
    NoActiveTimerToStop,
    TimerAlreadyPaused,
    TimerNotStarted,
    TimerStateError,
    TimeTrackerError,
    UnknownUnit,
    UnmatchedPauseWithoutResume,
    UnsupportedLogic,
    UnsupportedOperator,
)
from .core.result import Result
from .core.tracker import TimerEvent, TimerRecord, TimerStatus, TimeTracker, default_tracker
from .core.units import Unit, UnitDefinition

from .interfaces.callback import run, watch, watch_call
from .interfaces.decorators import timed, timed_block

from .output.formatter import print_summary
from .log import setup_logging, disable_logging

logger.disable("timetracker")


def summary(unit: Optional[str] = None) -> None:
    """Print a formatted report of the default tracker."""
    print_summary(default_tracker, unit)


def reset() -> None:
    """Forget every timer of the default tracker."""
    default_tracker.reset()


tracker = default_tracker

__all__ = [
    "TimeTracker",
    "TimerStatus",
    "TimerRecord",
    "TimerEvent",
    "Result",
    "Unit",
    "UnitDefinition",
    "run",
    "watch",
    "watch_call",
    "timed",
    "timed_block",
    "summary",
    "reset",
    "tracker",
    "TrackerConfig",
    "configure",
    "get_config",
    "reset_config",
    "setup_logging",
    "disable_logging",
    "TimeTrackerError",
    "TimerStateError",
    "TimerNotStarted",
    "NoActiveTimerToStop",
    "TimerAlreadyPaused",
    "NoActivePausedTimerToResume",
    "UnmatchedPauseWithoutResume",
    "InvalidUnitName",
    "UnsupportedLogic",
    "UnsupportedOperator",
    "DivisionByZero",
    "UnknownUnit",
    "CallbackExecutionError",
]
