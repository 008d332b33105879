"""Real terminal driver for the pickers.

Draws through a rich Console, reads keys with readchar, and owns the
cbreak-mode lifecycle needed for non-blocking key polling.
"""

import logging
import os
import re
import select
import sys
import termios
import tty
from typing import TextIO

import readchar
from rich.console import Console
from rich.control import Control

from clipick.api import InputClosedError
from clipick.models import Direction, SpecialKey

logger = logging.getLogger("clipick.terminal")

KEY_POLL_TIMEOUT = 0.05  # seconds select() waits before reporting no key
CURSOR_REPLY_TIMEOUT = 0.2
CURSOR_REPLY_PATTERN = re.compile(r"\x1b\[(\d+);(\d+)R")

DIRECTION_KEYS: dict[str, Direction] = {
    readchar.key.UP: Direction.UP,
    readchar.key.DOWN: Direction.DOWN,
}

SPECIAL_KEYS: dict[str, SpecialKey] = {
    readchar.key.ENTER: SpecialKey.ENTER,
    "\r": SpecialKey.ENTER,
    "\n": SpecialKey.ENTER,
    " ": SpecialKey.SPACE,
    "q": SpecialKey.QUIT,
    "Q": SpecialKey.QUIT,
}


class TerminalInput:
    """PickerInput backed by the process's terminal.

    On a tty, keys come from readchar in cbreak mode. When stdin is a pipe,
    keys are read straight from it, one character or escape sequence at a
    time, and running out of input raises InputClosedError.
    """

    def __init__(self, console: Console | None = None, stdin: TextIO | None = None):
        self.console = console or Console(highlight=False)
        self._stdin = stdin or sys.stdin
        self._saved_tty_state: list | None = None
        self._pending_key: str | None = None

    # --- geometry ---

    def read_screen_size(self) -> tuple[int, int]:
        size = self.console.size
        return size.height, size.width

    def read_cursor_position(self) -> tuple[int, int]:
        if not self._is_tty():
            return 1, 1

        self._enter_cbreak()
        self.console.file.write("\x1b[6n")
        self.console.file.flush()

        fd = self._stdin.fileno()
        reply = ""
        while not reply.endswith("R"):
            ready, _, _ = select.select([fd], [], [], CURSOR_REPLY_TIMEOUT)
            if not ready:
                break
            reply += os.read(fd, 1).decode(errors="replace")

        match = CURSOR_REPLY_PATTERN.search(reply)
        if not match:
            logger.warning("Unreadable cursor position reply %r, assuming (1, 1)", reply)
            return 1, 1
        return int(match.group(1)), int(match.group(2))

    # --- keys ---

    def key_pressed(self) -> bool:
        if self._pending_key is not None:
            return True
        if not self._is_tty():
            # Piped input can't be polled; the next read blocks on the pipe.
            return True

        self._enter_cbreak()
        ready, _, _ = select.select([self._stdin], [], [], KEY_POLL_TIMEOUT)
        return bool(ready)

    def read_special_key(self) -> SpecialKey | None:
        key = self._read_key()
        special = SPECIAL_KEYS.get(key)
        if special is None:
            # Leave it for read_direction_key.
            self._pending_key = key
        return special

    def read_direction_key(self) -> Direction | None:
        return DIRECTION_KEYS.get(self._read_key())

    def clear_input_buffer(self) -> None:
        if self._is_tty():
            termios.tcflush(self._stdin.fileno(), termios.TCIFLUSH)

    # --- drawing ---

    def write(self, text: str) -> None:
        self.console.print(text, end="", soft_wrap=True, highlight=False)

    def move_to(self, row: int, col: int) -> None:
        self.console.control(Control.move_to(max(col - 1, 0), max(row - 1, 0)))

    def move_right(self) -> None:
        self.console.control(Control.move(1, 0))

    def move_to_home(self) -> None:
        self.console.control(Control.home())

    def clear_screen(self) -> None:
        self.console.control(Control.clear())

    # --- session lifecycle ---

    def enter_alternate_screen(self) -> None:
        self.console.set_alt_screen(True)

    def exit_alternate_screen(self) -> None:
        self.console.set_alt_screen(False)

    def cursor_off(self) -> None:
        self.console.show_cursor(False)

    def cursor_on(self) -> None:
        self.console.show_cursor(True)

    def restore_normal_input(self) -> None:
        self.cursor_on()
        self._pending_key = None
        if self._saved_tty_state is not None:
            termios.tcsetattr(self._stdin.fileno(), termios.TCSADRAIN, self._saved_tty_state)
            self._saved_tty_state = None

    # --- internals ---

    def _is_tty(self) -> bool:
        return self._stdin.isatty()

    def _enter_cbreak(self) -> None:
        if self._saved_tty_state is not None:
            return
        fd = self._stdin.fileno()
        self._saved_tty_state = termios.tcgetattr(fd)
        tty.setcbreak(fd, termios.TCSANOW)

    def _read_key(self) -> str:
        if self._pending_key is not None:
            key, self._pending_key = self._pending_key, None
            return key
        if self._is_tty():
            return readchar.readkey()
        return self._read_piped_key()

    def _read_piped_key(self) -> str:
        """Read one key from non-tty stdin, keeping arrow escape sequences whole."""
        key = self._stdin.read(1)
        if not key:
            raise InputClosedError()
        if key == "\x1b":
            key += self._stdin.read(1)
            if key[-1] in "[O":
                key += self._stdin.read(1)
        return key
