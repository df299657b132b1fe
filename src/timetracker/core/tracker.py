"""
Named-timer state machine.

Each timer ID owns one TimerRecord holding its start and end timestamps
and its pause, resume and lap events. Net elapsed time is end - start
minus every paused interval.
"""

import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from loguru import logger

from .config import get_config
from .errors import (
    NoActivePausedTimerToResume,
    NoActiveTimerToStop,
    TimerAlreadyPaused,
    TimerNotStarted,
    UnmatchedPauseWithoutResume,
)
from .result import Result
from .units import BASE_UNIT, Number, Unit, UnitDefinition


class TimerStatus(str, Enum):
    NOT_STARTED = "not started"
    IN_PROGRESS = "in progress"
    COMPLETED = "completed"


@dataclass(frozen=True)
class TimerEvent:
    """A timestamped pause, resume or lap."""

    time: float
    description: str = ""

    def as_dict(self) -> dict:
        return {"time": self.time, "description": self.description}


@dataclass
class TimerRecord:
    """Everything recorded for a single timer ID."""

    start: float
    end: Optional[float] = None
    pauses: list[TimerEvent] = field(default_factory=list)
    resumes: list[TimerEvent] = field(default_factory=list)
    laps: list[TimerEvent] = field(default_factory=list)

    @property
    def is_paused(self) -> bool:
        """Return True while a pause is waiting for its resume."""
        return len(self.pauses) > len(self.resumes)

    @property
    def status(self) -> TimerStatus:
        if self.end is None:
            return TimerStatus.IN_PROGRESS
        return TimerStatus.COMPLETED

    def paused_total(self) -> float:
        return sum(r.time - p.time for p, r in zip(self.pauses, self.resumes))


class TimeTracker:
    """
    Track any number of named timers.

    Operations on one tracker are serialized by a re-entrant lock, so a
    tracker may be shared between threads.

    Example:
        tracker = TimeTracker()
        tracker.start("load")
        tracker.pause("load", "waiting for user")
        tracker.resume("load")
        tracker.stop("load")
        tracker.calculate("load").convert("ms").get()
    """

    def __init__(self, unit: Optional[Unit] = None, clock: Callable[[], float] = time.perf_counter):
        """
        Args:
            unit: Unit registry shared by every Result this tracker builds
            clock: Monotonic clock returning seconds
        """
        self._unit = unit or Unit()
        self._clock = clock
        self._records: dict[str, TimerRecord] = {}
        self._lock = threading.RLock()

    # -- lifecycle ----------------------------------------------------------

    def start(self, timer_id: str) -> None:
        """
        Start (or restart) a timer.

        Restarting discards everything previously recorded for the ID and
        makes it the most recently started timer.
        """
        with self._lock:
            self._records.pop(timer_id, None)
            self._records[timer_id] = TimerRecord(start=self._clock())
        logger.debug("Timer {!r} started", timer_id)

    def stop(self, timer_id: Optional[str] = None) -> None:
        """
        Stop a timer; without an ID, stop the most recently started one.

        Raises:
            TimerNotStarted: If nothing was started or the ID has no start
            NoActiveTimerToStop: If the timer was already stopped
        """
        with self._lock:
            if timer_id is None:
                if not self._records:
                    raise TimerNotStarted()
                timer_id = next(reversed(self._records))

            record = self._require(timer_id)
            if record.end is not None:
                raise NoActiveTimerToStop(timer_id)
            record.end = self._clock()
        logger.debug("Timer {!r} stopped", timer_id)

    def lap(self, timer_id: str, description: str = "") -> TimerEvent:
        """Record a checkpoint; laps never affect the calculated duration."""
        with self._lock:
            record = self._require(timer_id)
            event = TimerEvent(self._clock(), description)
            record.laps.append(event)
        logger.debug("Timer {!r} lap #{} {!r}", timer_id, len(record.laps), description)
        return event

    def pause(self, timer_id: str, description: str = "") -> TimerEvent:
        """
        Open a paused interval.

        Raises:
            TimerNotStarted: If the timer has no start record
            TimerAlreadyPaused: If the previous pause was never resumed
        """
        with self._lock:
            record = self._require(timer_id)
            if record.is_paused:
                raise TimerAlreadyPaused(timer_id)
            event = TimerEvent(self._clock(), description)
            record.pauses.append(event)
        logger.debug("Timer {!r} paused", timer_id)
        return event

    def resume(self, timer_id: str, description: str = "") -> TimerEvent:
        """
        Close the open paused interval.

        Raises:
            TimerNotStarted: If the timer has no start record
            NoActivePausedTimerToResume: If there is no open pause
        """
        with self._lock:
            record = self._require(timer_id)
            if not record.is_paused:
                raise NoActivePausedTimerToResume(timer_id)
            event = TimerEvent(self._clock(), description)
            record.resumes.append(event)
        logger.debug("Timer {!r} resumed", timer_id)
        return event

    def reset(self, timer_id: Optional[str] = None) -> None:
        """Forget one timer entirely, or every timer when no ID is given."""
        with self._lock:
            if timer_id is None:
                self._records.clear()
            else:
                self._records.pop(timer_id, None)
        logger.debug("Reset {}", "all timers" if timer_id is None else repr(timer_id))

    # -- calculation --------------------------------------------------------

    def calculate(self, timer_id: str) -> Optional[Result]:
        """
        Return the net elapsed time in seconds, or None if not completed.

        Raises:
            UnmatchedPauseWithoutResume: If a pause was never resumed
        """
        with self._lock:
            record = self._records.get(timer_id)
            if record is None or record.end is None:
                return None
            if len(record.pauses) != len(record.resumes):
                raise UnmatchedPauseWithoutResume(timer_id)
            elapsed = (record.end - record.start) - record.paused_total()
        return Result(self._unit, elapsed, BASE_UNIT)

    def durations(self, unit: Optional[str] = None, fmt: Optional[str] = None,
                  *, formatted: bool = False) -> dict:
        """
        Return the duration of every completed timer, keyed by ID.

        Args:
            unit: Target unit; defaults to the configured default_unit ("ms")
            fmt: printf-style pattern; defaults to default_format ("%s %s")
            formatted: Return the formatted strings instead of the numbers

        The pattern only matters with formatted=True; otherwise the
        converted number is what ends up in the mapping.
        """
        config = get_config()
        unit = config.default_unit if unit is None else unit
        fmt = config.default_format if fmt is None else fmt

        with self._lock:
            completed = [tid for tid, rec in self._records.items() if rec.end is not None]

        result = {}
        for timer_id in completed:
            converted = self.calculate(timer_id).convert(unit)
            if formatted and fmt:
                converted = converted.format(fmt)
            result[timer_id] = converted.get()
        return result

    # -- queries ------------------------------------------------------------

    def status(self, timer_id: str) -> TimerStatus:
        record = self._records.get(timer_id)
        if record is None:
            return TimerStatus.NOT_STARTED
        return record.status

    def exists(self, timer_id: str) -> bool:
        """Return True only when the timer has both a start and an end."""
        record = self._records.get(timer_id)
        return record is not None and record.end is not None

    def is_started(self, timer_id: str) -> bool:
        return timer_id in self._records

    def is_stopped(self, timer_id: str) -> bool:
        record = self._records.get(timer_id)
        return record is not None and record.end is not None

    def get_active_timers(self) -> list[str]:
        """Return started-but-not-stopped IDs in start order."""
        with self._lock:
            return [tid for tid, rec in self._records.items() if rec.end is None]

    def laps(self, timer_id: str) -> list[TimerEvent]:
        record = self._records.get(timer_id)
        return list(record.laps) if record else []

    def inspect(self, timer_id: str) -> dict:
        """Return a snapshot of everything recorded for a timer."""
        with self._lock:
            record = self._records.get(timer_id)
            if record is None:
                return {
                    "start": None,
                    "end": None,
                    "paused": [],
                    "resumed": [],
                    "status": TimerStatus.NOT_STARTED,
                    "laps": [],
                }
            return {
                "start": record.start,
                "end": record.end,
                "paused": [e.as_dict() for e in record.pauses],
                "resumed": [e.as_dict() for e in record.resumes],
                "status": record.status,
                "laps": [e.as_dict() for e in record.laps],
            }

    def timer_ids(self) -> list[str]:
        """Return every known timer ID in start order."""
        with self._lock:
            return list(self._records)

    # -- units --------------------------------------------------------------

    def add_unit_definition(self, name: str, operator: str, value: Number) -> UnitDefinition:
        """Register a custom unit on this tracker's registry. See Unit.add()."""
        return self._unit.add(name, operator, value)

    def get_unit(self) -> Unit:
        return self._unit

    # -- internals ----------------------------------------------------------

    def _require(self, timer_id: str) -> TimerRecord:
        record = self._records.get(timer_id)
        if record is None:
            raise TimerNotStarted(timer_id)
        return record


# Module-level default tracker used by the convenience interfaces.
default_tracker = TimeTracker()
