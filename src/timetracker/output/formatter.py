"""
Console renderer for tracker contents.

All formatting decisions are centralized here.
Color output uses ANSI codes via colorama for Windows compatibility.
Console width is detected dynamically from the terminal.
"""

import shutil
from datetime import datetime
from typing import Optional

import colorama

from ..core.config import get_config
from ..core.errors import UnmatchedPauseWithoutResume
from ..core.result import Result
from ..core.tracker import TimerStatus, TimeTracker

colorama.init(autoreset=True)


class _Color:
    RESET   = colorama.Style.RESET_ALL
    DIM     = colorama.Style.DIM
    BOLD    = colorama.Style.BRIGHT
    CYAN    = colorama.Fore.CYAN
    GREEN   = colorama.Fore.GREEN
    YELLOW  = colorama.Fore.YELLOW
    RED     = colorama.Fore.RED
    WHITE   = colorama.Fore.WHITE
    MAGENTA = colorama.Fore.MAGENTA


def _console_width() -> int:
    """Return current terminal width, with a sensible fallback."""
    return shutil.get_terminal_size(fallback=(80, 24)).columns


def _separator(char: str = "-") -> str:
    return char * _console_width()


_THRESHOLD_FAST_S   = 0.001     # under 1 ms   -> green
_THRESHOLD_MEDIUM_S = 0.010     # under 10 ms  -> yellow
                                # 10 ms and above -> red


def _color_for_seconds(seconds: float) -> str:
    """Return the appropriate color code based on how slow the measurement is."""
    if seconds < _THRESHOLD_FAST_S:
        return _Color.GREEN
    if seconds < _THRESHOLD_MEDIUM_S:
        return _Color.YELLOW
    return _Color.RED


def _status_text(status: TimerStatus) -> str:
    if status is TimerStatus.COMPLETED:
        return f"{_Color.GREEN}{status.value}{_Color.RESET}"
    if status is TimerStatus.IN_PROGRESS:
        return f"{_Color.YELLOW}{status.value}{_Color.RESET}"
    return f"{_Color.DIM}{status.value}{_Color.RESET}"


def format_timer_line(tracker: TimeTracker, timer_id: str, unit: Optional[str] = None) -> str:
    """Render one timer as a compact colored line."""
    unit = get_config().default_unit if unit is None else unit
    snapshot = tracker.inspect(timer_id)
    name_str = f"{_Color.CYAN}{timer_id:<40}{_Color.RESET}"

    duration_str = f"{'-':>14}"
    if snapshot["status"] is TimerStatus.COMPLETED:
        try:
            result = tracker.calculate(timer_id)
        except UnmatchedPauseWithoutResume:
            duration_str = f"{_Color.RED}{'unmatched pause':>14}{_Color.RESET}"
        else:
            converted = result.convert(unit).get()
            duration_str = f"{_color_for_seconds(result.get())}{converted:>14.3f} {unit}{_Color.RESET}"

    extras = []
    if snapshot["paused"]:
        extras.append(f"pauses={len(snapshot['paused'])}")
    if snapshot["laps"]:
        extras.append(f"laps={len(snapshot['laps'])}")
    extras_str = f"  {_Color.DIM}[{', '.join(extras)}]{_Color.RESET}" if extras else ""

    return f"  {name_str} {duration_str}  {_status_text(snapshot['status'])}{extras_str}"


def _calculable(tracker: TimeTracker, timer_id: str) -> Optional[Result]:
    """Return the net duration, or None if the timer cannot be calculated."""
    try:
        return tracker.calculate(timer_id)
    except UnmatchedPauseWithoutResume:
        return None


def print_timer(tracker: TimeTracker, timer_id: str, unit: Optional[str] = None) -> None:
    """Print a single timer to stdout immediately."""
    print(format_timer_line(tracker, timer_id, unit))


def print_summary(tracker: TimeTracker, unit: Optional[str] = None) -> None:
    """Print a report of every timer the tracker knows about."""
    unit = get_config().default_unit if unit is None else unit
    timer_ids = tracker.timer_ids()
    thick = _separator("=")

    if not timer_ids:
        print(f"  {_Color.DIM}[timetracker] No timers recorded.{_Color.RESET}")
        return

    print(f"{_Color.MAGENTA}{thick}{_Color.RESET}")
    print(f"  {_Color.BOLD}{_Color.WHITE}timetracker{_Color.RESET} | Timer Summary")
    print(f"  {_Color.DIM}{datetime.now().strftime('%Y-%m-%d %H:%M:%S')}{_Color.RESET}")
    print(f"{_Color.MAGENTA}{thick}{_Color.RESET}")

    durations = []
    for timer_id in timer_ids:
        print(format_timer_line(tracker, timer_id, unit))
        result = _calculable(tracker, timer_id)
        if result is not None:
            durations.append(result.convert(unit).get())

    print(f"{_Color.DIM}{_separator('-')}{_Color.RESET}")
    print(f"  Completed timers : {_Color.WHITE}{len(durations)}/{len(timer_ids)}{_Color.RESET}")
    print(f"  Total tracked    : {_Color.WHITE}{sum(durations):.3f} {unit}{_Color.RESET}")
    print(f"{_Color.MAGENTA}{thick}{_Color.RESET}")
