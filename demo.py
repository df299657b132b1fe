"""
timetracker demo script.

Run this directly to see all interfaces in action:
    python demo.py
"""

import asyncio
import time

import timetracker
from timetracker import (
    CallbackExecutionError,
    TimeTracker,
    configure,
    run,
    timed,
    timed_block,
    watch_call,
)


# --- 1. Manual timers --------------------------------------------------------

def manual_timers():
    tracker = TimeTracker()
    tracker.add_unit_definition("frames", "*", 60)

    tracker.start("download")
    time.sleep(0.02)
    tracker.lap("download", "headers received")
    tracker.pause("download", "rate limited")
    time.sleep(0.05)
    tracker.resume("download")
    time.sleep(0.01)
    tracker.stop()

    result = tracker.calculate("download")
    print("download:", result.convert("ms").format("%.2f %s").get())
    print("download:", result.convert("frames").format().get())
    print("inspect :", tracker.inspect("download"))
    print("durations:", tracker.durations(formatted=True))


# --- 2. Callback timing ------------------------------------------------------

def callback_timing():
    outcome = run(lambda n: sum(range(n)), {"n": 1_000_000}, unit="ms")
    print(f"sum took {outcome['time']:.3f} {outcome['unit']} -> {outcome['output']}")

    outcome = watch_call(sorted, [5, 3, 9, 1], reverse=True, unit="us")
    print(f"sorted took {outcome['time']:.1f} {outcome['unit']} -> {outcome['output']}")

    try:
        run(lambda: 1 / 0)
    except CallbackExecutionError as exc:
        print("wrapped failure:", exc, "| cause:", repr(exc.__cause__))


# --- 3. Decorator and block --------------------------------------------------

@timed("sum of range")
def heavy_sum(limit):
    """Sum a large range."""
    return sum(range(limit))


@timed("async fetch simulation")
async def fake_fetch(url):
    """Simulate an async HTTP request."""
    await asyncio.sleep(0.005)
    return f"response from {url}"


if __name__ == "__main__":
    configure(echo=True)
    timetracker.setup_logging("INFO")

    manual_timers()
    callback_timing()

    heavy_sum(500_000)
    asyncio.run(fake_fetch("https://example.com"))
    with timed_block("parse json") as tracker:
        time.sleep(0.003)
        tracker.lap("parse json", "tokenized")

    timetracker.summary()
