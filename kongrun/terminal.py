"""Console helpers: cursor control, keyboard polling, silent mode and random numbers."""

from __future__ import annotations

import atexit
import os
import random
import select
import sys
import time
from dataclasses import dataclass, field

try:
    import msvcrt
except ImportError:
    msvcrt = None

try:
    import termios
    import tty
except ImportError:
    termios = None
    tty = None


@dataclass
class _TerminalState:
    silent: bool = False
    rng: random.Random = field(default_factory=random.Random)
    saved_attrs: list | None = None


_state = _TerminalState()


def set_silent_mode():
    """Switch the whole program into silent mode (no drawing)."""
    _state.silent = True


def is_silent():
    """Return True when drawing is suppressed."""
    return _state.silent


def write(text):
    """Write text to the console and flush it."""
    sys.stdout.write(text)
    sys.stdout.flush()


def gotoxy(x, y):
    """Move the console cursor to column x, row y (both zero based)."""
    write(f"\x1b[{y + 1};{x + 1}H")


def show_cursor(visible):
    """Show or hide the console cursor."""
    write("\x1b[?25h" if visible else "\x1b[?25l")


def clear_screen():
    """Clear the console and home the cursor."""
    write("\x1b[2J\x1b[H")


def _interactive():
    try:
        return sys.stdin.isatty()
    except (AttributeError, ValueError, OSError):
        return False


def _restore_terminal():
    if termios is not None and _state.saved_attrs is not None:
        try:
            termios.tcsetattr(sys.stdin.fileno(), termios.TCSADRAIN, _state.saved_attrs)
        except (termios.error, ValueError, OSError):
            pass
        _state.saved_attrs = None


def _enter_cbreak():
    if termios is None or _state.saved_attrs is not None:
        return
    fd = sys.stdin.fileno()
    _state.saved_attrs = termios.tcgetattr(fd)
    tty.setcbreak(fd)
    atexit.register(_restore_terminal)


def key_pressed():
    """Return True if a key is waiting to be read, without blocking."""
    if not _interactive():
        return False
    if msvcrt is not None:
        return bool(msvcrt.kbhit())
    _enter_cbreak()
    ready, _, _ = select.select([sys.stdin.fileno()], [], [], 0)
    return bool(ready)


def read_key():
    """Read a single key, blocking until one is available."""
    if not _interactive():
        return sys.stdin.read(1)
    if msvcrt is not None:
        return msvcrt.getwch()
    _enter_cbreak()
    return os.read(sys.stdin.fileno(), 1).decode("latin-1")


def clear_input_buffer():
    """Discard every key still waiting in the input buffer."""
    while key_pressed():
        read_key()


def sleep_ms(milliseconds):
    """Pause for the given number of milliseconds."""
    time.sleep(milliseconds / 1000)


def seed_random(seed):
    """Seed the game's random number generator."""
    _state.rng.seed(seed)


def random_number(start, end):
    """Return a random integer between start and end, both included."""
    if end < start:
        raise ValueError(f"empty range {start}..{end}")
    return _state.rng.randint(start, end)