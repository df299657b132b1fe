"""
Named-timer decorator and context manager.

Usage:
    @timed                          # timer named after the function
    def load(): ...

    @timed("etl.load")              # custom timer name
    def load(): ...

    with timed_block("db query") as tracker:
        tracker.lap("db query", "connected")
        rows = db.query(...)
"""

import inspect
import functools
from contextlib import contextmanager
from typing import Callable, Optional

from ..core.config import get_config
from ..core.tracker import TimerStatus, TimeTracker, default_tracker
from ..output.formatter import print_timer


def _finish(tracker: TimeTracker, name: str) -> None:
    """Stop the timer unless the timed code already did, then echo it."""
    if tracker.status(name) is TimerStatus.IN_PROGRESS:
        tracker.stop(name)
    if get_config().echo:
        print_timer(tracker, name)


def _make_wrapper(fn: Callable, name: str, tracker: TimeTracker) -> Callable:
    """Wrap a callable so each invocation restarts and stops its timer."""

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        tracker.start(name)
        try:
            return fn(*args, **kwargs)
        finally:
            _finish(tracker, name)

    return wrapper


def _make_async_wrapper(fn: Callable, name: str, tracker: TimeTracker) -> Callable:
    """Wrap an async callable the same way."""

    @functools.wraps(fn)
    async def wrapper(*args, **kwargs):
        tracker.start(name)
        try:
            return await fn(*args, **kwargs)
        finally:
            _finish(tracker, name)

    return wrapper


def _build_decorator(label: Optional[str], tracker: TimeTracker) -> Callable:
    def decorator(fn: Callable) -> Callable:
        name = label or fn.__qualname__
        if inspect.iscoroutinefunction(fn):
            return _make_async_wrapper(fn, name, tracker)
        return _make_wrapper(fn, name, tracker)

    return decorator


def timed(arg=None, *, name: Optional[str] = None, tracker: Optional[TimeTracker] = None):
    """
    Decorator that records every call of a function as a named timer.

    Supported usage patterns:
        @timed
        @timed("custom name")
        @timed(name="custom name")
        @timed(tracker=my_tracker)

    Each call restarts the timer, so the tracker holds the latest call.
    Overlapping calls (recursion, or several threads) share one timer
    name: an inner call restarts the record and stops it, leaving the
    outer call with nothing to stop. Give such functions a tracker per
    caller or time them with run() instead.

    Args:
        arg: Either the decorated function (bare @timed) or a string label
        name: Keyword-only custom label
        tracker: Tracker to record into; defaults to default_tracker
    """
    active_tracker = tracker or default_tracker

    if callable(arg):
        return _build_decorator(name, active_tracker)(arg)

    if isinstance(arg, str):
        return _build_decorator(arg, active_tracker)

    return _build_decorator(name, active_tracker)


@contextmanager
def timed_block(name: str, tracker: Optional[TimeTracker] = None):
    """
    Context manager that records a code block as a named timer.

    Yields the tracker so the block can lap, pause or resume its timer.
    """
    active_tracker = tracker or default_tracker
    active_tracker.start(name)
    try:
        yield active_tracker
    finally:
        _finish(active_tracker, name)
