from __future__ import annotations
import sys
from typing import Callable, Iterator

CTRL_C = "\x03"
CTRL_D = "\x04"


def _read_key_windows() -> str:
    import msvcrt
    ch = msvcrt.getwch()
    if ch in ("\x00", "\xe0"):  # arrow/function key prefix: swallow the scan code
        msvcrt.getwch()
        return ""
    return ch


def _read_key_posix() -> str:
    import termios
    import tty
    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        return sys.stdin.read(1) or CTRL_D  # EOF
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def get_reader() -> Callable[[], str]:
    """Single-key reader for the current console (no Enter needed)."""
    if sys.platform.startswith("win"):
        return _read_key_windows
    return _read_key_posix


def iter_keys(read_key: Callable[[], str] | None = None) -> Iterator[str]:
    """Yield keys until Ctrl+C / Ctrl+D; empty reads (ignored keys) are dropped."""
    read_key = read_key or get_reader()
    while True:
        ch = read_key()
        if ch == CTRL_C:
            raise KeyboardInterrupt
        if ch == CTRL_D:
            return
        if not ch:
            continue
        yield ch
