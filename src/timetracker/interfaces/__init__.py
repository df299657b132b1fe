"""All user-facing timing interfaces."""
from .callback import run, watch, watch_call
from .decorators import timed, timed_block
