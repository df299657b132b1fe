"""
Exception hierarchy for timer bookkeeping and unit conversion.

Every error derives from TimeTrackerError and from the closest builtin,
so callers can catch either the package error or the generic one.
"""

from typing import Iterable, Optional


class TimeTrackerError(Exception):
    """Base class for all timetracker errors."""


# ---------------------------------------------------------------------------
# Timer state machine
# ---------------------------------------------------------------------------

class TimerStateError(TimeTrackerError, RuntimeError):
    """An operation was requested that the timer's current state forbids."""

    def __init__(self, message: str, timer_id: Optional[str] = None):
        super().__init__(message)
        self.timer_id = timer_id


class TimerNotStarted(TimerStateError):
    def __init__(self, timer_id: Optional[str] = None):
        if timer_id is None:
            message = "No timer has been started."
        else:
            message = f"The timer with ID '{timer_id}' has not been started."
        super().__init__(message, timer_id)


class NoActiveTimerToStop(TimerStateError):
    def __init__(self, timer_id: Optional[str] = None):
        super().__init__("No active timer to stop.", timer_id)


class TimerAlreadyPaused(TimerStateError):
    def __init__(self, timer_id: str):
        super().__init__(
            f"The timer with ID '{timer_id}' is already paused and not yet resumed",
            timer_id,
        )


class NoActivePausedTimerToResume(TimerStateError):
    def __init__(self, timer_id: str):
        super().__init__(
            f"The timer with ID '{timer_id}' has no active pause to resume",
            timer_id,
        )


class UnmatchedPauseWithoutResume(TimeTrackerError, RuntimeError):
    def __init__(self, timer_id: str):
        super().__init__(f"Unmatched pause without resume for timer with ID '{timer_id}'")
        self.timer_id = timer_id


# ---------------------------------------------------------------------------
# Units
# ---------------------------------------------------------------------------

class InvalidUnitName(TimeTrackerError, ValueError):
    def __init__(self, unit: str):
        if not unit:
            message = "The unit name cannot be empty."
        else:
            message = f"The unit name '{unit}' is invalid or already exists."
        super().__init__(message)
        self.unit = unit


class UnsupportedLogic(TimeTrackerError, ValueError):
    """A conversion rule uses logic the unit engine cannot apply."""


class UnsupportedOperator(UnsupportedLogic):
    def __init__(self, operator: str):
        super().__init__(
            f"The operator '{operator}' is unsupported. "
            "Supported operators are '+', '-', '*', '/'."
        )
        self.operator = operator


class DivisionByZero(TimeTrackerError, ZeroDivisionError):
    def __init__(self):
        super().__init__("Division by zero in unit conversion.")


class UnknownUnit(TimeTrackerError, ValueError):
    def __init__(self, unit: str, supported: Iterable[str]):
        self.unit = unit
        self.supported = list(supported)
        choices = ", ".join(f"'{name}'" for name in self.supported)
        super().__init__(f"Unsupported unit: {unit}. Use {choices} instead.")


# ---------------------------------------------------------------------------
# Callback timing
# ---------------------------------------------------------------------------

class CallbackExecutionError(TimeTrackerError, RuntimeError):
    """
    Raised when a timed callback fails.

    The message carries the elapsed time; the original exception is
    available as __cause__.
    """
