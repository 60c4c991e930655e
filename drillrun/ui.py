"""Terminal output helpers: styled messages, a spinner and a progress bar."""

from __future__ import annotations

import itertools
import os
import sys
import threading

_COLORS = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
}

_SPINNER_FRAMES = "⠁⠂⠄⡀⢀⠠⠐⠈"
_TICK_SECONDS = 0.1
_BAR_WIDTH = 60


def _colors_enabled() -> bool:
    force = os.environ.get("CLICOLOR_FORCE")
    if force is not None and force != "0":
        return True
    if os.environ.get("CLICOLOR") == "0":
        return False
    return sys.stdout.isatty()


def style(text, color=None, bold=False) -> str:
    """Wrap ``text`` in ANSI codes for ``color`` and boldness when colours are on."""
    text = str(text)
    codes = []
    if bold:
        codes.append("1")
    if color is not None:
        try:
            codes.append(str(_COLORS[color]))
        except KeyError:
            raise ValueError(f"unknown colour: {color!r}") from None
    if not codes or not _colors_enabled():
        return text
    return f"\x1b[{';'.join(codes)}m{text}\x1b[0m"


def _no_emoji() -> bool:
    return "NO_EMOJI" in os.environ


def warn(message) -> None:
    """Print a red warning line."""
    symbol = "!" if _no_emoji() else "⚠️ "
    print(f"{style(symbol, 'red')} {style(message, 'red')}")


def success(message) -> None:
    """Print a green success line."""
    symbol = "✓" if _no_emoji() else "✅"
    print(f"{style(symbol, 'green')} {style(message, 'green')}")


class Spinner:
    """A spinner that ticks on stderr while work is in progress."""

    def __init__(self, message):
        self.message = str(message)
        self.finished = False
        self._stop = threading.Event()
        self._lock = threading.Lock()
        self._thread = None
        if sys.stderr.isatty():
            self._thread = threading.Thread(target=self._tick, daemon=True)
            self._thread.start()

    def _tick(self) -> None:
        for frame in itertools.cycle(_SPINNER_FRAMES):
            if self._stop.is_set():
                return
            with self._lock:
                sys.stderr.write(f"\r\x1b[2K{frame} {self.message}")
                sys.stderr.flush()
            self._stop.wait(_TICK_SECONDS)

    def set_message(self, message) -> None:
        with self._lock:
            self.message = str(message)

    def finish_and_clear(self) -> None:
        if self.finished:
            return
        self.finished = True
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            sys.stderr.write("\r\x1b[2K")
            sys.stderr.flush()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.finish_and_clear()
        return False


class ProgressBar:
    """A fixed-width progress bar with a position, a length and a message."""

    def __init__(self, total):
        self.total = int(total)
        self.position = 0
        self.message = ""

    def set_position(self, position) -> None:
        self.position = int(position)
        self._draw()

    def inc(self, delta=1) -> None:
        self.position += int(delta)
        self._draw()

    def set_message(self, message) -> None:
        self.message = str(message)
        self._draw()

    def render(self) -> str:
        """Return the bar as a line of plain text."""
        fraction = 1.0 if self.total <= 0 else min(max(self.position / self.total, 0.0), 1.0)
        filled = int(fraction * _BAR_WIDTH)
        if filled >= _BAR_WIDTH:
            bar = "#" * _BAR_WIDTH
        else:
            bar = "#" * filled + ">" + "-" * (_BAR_WIDTH - filled - 1)
        return f"Progress: [{bar}] {self.position}/{self.total} {self.message}".rstrip()

    def _draw(self) -> None:
        if sys.stderr.isatty():
            sys.stderr.write("\r\x1b[2K" + self.render() + "\n")
            sys.stderr.flush()