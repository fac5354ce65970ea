"""Terminal helpers: colours, screen clearing and single-key input."""

from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, TextIO

try:
    import termios
except ImportError:  # not available on every platform
    termios = None  # type: ignore[assignment]

ESC = "\033"

_ARROW_KEYS = {"A": "w", "B": "s", "C": "d", "D": "a"}


@dataclass(frozen=True)
class RGB:
    """A 24-bit colour."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel {channel} out of range 0-255")

    @classmethod
    def gray(cls, level: int) -> RGB:
        """Return a gray with all three channels set to level."""
        return cls(level, level, level)


def color(rgb: RGB) -> str:
    """Return the escape sequence that sets the foreground colour."""
    return f"{ESC}[38;2;{rgb.r};{rgb.g};{rgb.b}m"


def reset_color() -> str:
    """Return the escape sequence that resets all attributes."""
    return f"{ESC}[0m"


def clear_screen(out: TextIO) -> None:
    """Clear the screen and move the cursor home."""
    out.write(f"{ESC}[2J{ESC}[H")
    out.flush()


def translate_key(chars: str) -> str:
    """Map raw key input to a menu key.

    Arrow escape sequences become w/s/d/a and a newline becomes a space;
    any other key is returned as is.
    """
    if not chars:
        raise ValueError("no key given")
    first = chars[0]
    if first == ESC:
        arrow = _ARROW_KEYS.get(chars[2:3])
        if arrow is not None:
            return arrow
    return " " if first == "\n" else first


def _tty_fd(stream: TextIO) -> int | None:
    if termios is None:
        return None
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None
    return fd if os.isatty(fd) else None


@contextmanager
def raw_mode(stream: TextIO) -> Iterator[TextIO]:
    """Turn off line buffering and echo on a terminal for the duration."""
    fd = _tty_fd(stream)
    if fd is None:
        yield stream
        return
    old = termios.tcgetattr(fd)
    new = termios.tcgetattr(fd)
    new[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, new)
    try:
        yield stream
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old)


def get_char(stream: TextIO) -> str:
    """Read one key press and translate it; raise EOFError at end of input."""
    with raw_mode(stream):
        first = stream.read(1)
        if not first:
            raise EOFError("end of input")
        if first == ESC:
            return translate_key(first + stream.read(2))
    return translate_key(first)


def wait_for_key(stream: TextIO, out: TextIO) -> str:
    """Prompt for and read a single key press."""
    out.write("\nPress any key to continue...")
    out.flush()
    return get_char(stream)