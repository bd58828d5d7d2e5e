"""Console output/input service.

Construct one ``Console`` at start-up and hand it to whatever needs the
terminal. Streams are injectable so the same object works against
``io.StringIO`` in tests.
"""

from __future__ import annotations

import shutil
import sys
from typing import Callable, TextIO, TypeVar

from pocketkit.settings_schema import ConsoleSettings

from .size import Size

R = TypeVar("R")

ESC = "\x1b["
RESET_SEQUENCE = f"{ESC}0m"
CLEAR_SEQUENCE = f"{ESC}2J{ESC}H"

# Windows attribute bits are (blue, green, red); ANSI indices are (red, green, blue).
_ATTRIBUTE_TO_ANSI = (0, 4, 2, 6, 1, 5, 3, 7)
_INTENSITY = 0x08


def color_sequence(code: int) -> str:
    """Translate a Windows console attribute code into an ANSI SGR sequence.

    The low nibble is the foreground and the high nibble the background; bit 3
    of each nibble selects the bright variant.
    """
    if not 0 <= code <= 0xFF:
        raise ValueError(f"Color code must be in 0..255 (got {code})")
    foreground = code & 0x0F
    background = (code >> 4) & 0x0F
    fg = (90 if foreground & _INTENSITY else 30) + _ATTRIBUTE_TO_ANSI[foreground & 0x07]
    bg = (100 if background & _INTENSITY else 40) + _ATTRIBUTE_TO_ANSI[background & 0x07]
    return f"{ESC}{fg};{bg}m"


class Console:
    def __init__(
        self,
        stdout: TextIO | None = None,
        stdin: TextIO | None = None,
        settings: ConsoleSettings | None = None,
    ) -> None:
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stdin = stdin if stdin is not None else sys.stdin
        self.settings = settings or ConsoleSettings()

    def print(self, *values: object) -> None:
        """Write each value back to back, without separators or a newline."""
        for value in values:
            self.stdout.write(str(value))
        self.stdout.flush()

    def read_line(self) -> str:
        """Return the next line without its newline, or "" at end of input."""
        line = self.stdin.readline()
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        return line

    def input(self, cast: Callable[[str], R] = str, prompt: str = "") -> R:
        if prompt:
            self.print(prompt)
        line = self.stdin.readline()
        if not line:
            raise EOFError("No input available")
        text = line.strip()
        try:
            return cast(text)
        except (TypeError, ValueError) as exc:
            name = getattr(cast, "__name__", repr(cast))
            raise ValueError(f"Cannot read {text!r} as {name}") from exc

    def set_color(self, code: int) -> None:
        sequence = color_sequence(code)
        if self.settings.use_color:
            self.print(sequence)

    def reset_color(self) -> None:
        if self.settings.use_color:
            self.print(RESET_SEQUENCE)

    def clear(self) -> None:
        self.print(CLEAR_SEQUENCE)

    def size(self) -> Size:
        """Visible terminal size in character cells.

        Measured on the process terminal (``COLUMNS``/``LINES`` or
        ``sys.__stdout__``), not on the injected ``stdout`` stream, so a console
        writing to a redirected stream still reports the real terminal.
        """
        fallback = (self.settings.fallback_columns, self.settings.fallback_lines)
        columns, lines = shutil.get_terminal_size(fallback=fallback)
        return Size(columns, lines)
