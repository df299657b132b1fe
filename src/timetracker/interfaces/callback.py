"""
Time a single callable and package the measurement.

Usage:
    outcome = run(parse, {"raw": payload}, unit="ms")
    outcome["time"]     # elapsed time in ms
    outcome["output"]   # whatever parse() returned

    outcome = watch_call(parse, payload, unit="us")
"""

import uuid
from collections.abc import Mapping
from typing import Any, Callable, Optional

from loguru import logger

from ..core.config import get_config
from ..core.errors import CallbackExecutionError
from ..core.tracker import TimeTracker
from ..core.units import Unit

_ERROR_PATTERN = "Error occurred while executing callback, ended after %s%s"


def _split_params(params) -> tuple[tuple, dict]:
    """Turn a parameter bag into positional and keyword arguments."""
    if params is None:
        return (), {}
    if isinstance(params, Mapping):
        return (), dict(params)
    if isinstance(params, (list, tuple)):
        return tuple(params), {}
    raise TypeError(
        f"params must be a mapping, a list or a tuple, got {type(params).__name__}"
    )


def _stop_once(tracker: TimeTracker, timer_id: str) -> None:
    if not tracker.is_stopped(timer_id):
        tracker.stop(timer_id)


def _time_call(fn: Callable, args: tuple, kwargs: dict,
               unit: Optional[str], registry: Optional[Unit]) -> dict[str, Any]:
    unit = get_config().callback_unit if unit is None else unit
    tracker = TimeTracker(unit=registry)
    timer_id = uuid.uuid4().hex

    tracker.start(timer_id)
    try:
        output = fn(*args, **kwargs)
    except Exception as exc:
        _stop_once(tracker, timer_id)
        elapsed = tracker.calculate(timer_id).format(_ERROR_PATTERN).get()
        logger.warning("Timed callback {!r} failed: {}", getattr(fn, "__qualname__", fn), exc)
        raise CallbackExecutionError(f"{elapsed}\n{exc}") from exc
    finally:
        _stop_once(tracker, timer_id)

    result = tracker.calculate(timer_id)
    return {
        "result": result,
        "time": result.convert(unit).get(),
        "unit": unit,
        "output": output,
    }


def run(callback: Callable, params=None, unit: Optional[str] = None,
        registry: Optional[Unit] = None) -> dict[str, Any]:
    """
    Execute a callback and measure how long it took.

    Args:
        callback: The callable to time
        params: Mapping of keyword arguments or list/tuple of positional ones
        unit: Unit for the "time" entry; defaults to callback_unit ("s")
        registry: Unit registry to use, e.g. one holding custom units

    Returns:
        {"result": Result in seconds, "time": number in unit,
         "unit": unit, "output": callback's return value}

    Raises:
        CallbackExecutionError: If the callback raises; the original
            exception is chained as __cause__
    """
    args, kwargs = _split_params(params)
    return _time_call(callback, args, kwargs, unit, registry)


watch = run


def watch_call(fn: Callable, *args, unit: Optional[str] = None,
               registry: Optional[Unit] = None, **kwargs) -> dict[str, Any]:
    """
    Same as run(), but with the call's arguments passed straight through.

    Example:
        watch_call(sorted, items, key=len, unit="ms")["output"]
    """
    return _time_call(fn, args, kwargs, unit, registry)
