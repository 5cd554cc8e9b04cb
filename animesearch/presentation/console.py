"""Terminal surface for the search controller."""

from __future__ import annotations

import sys
from typing import TextIO

from animesearch.presentation.controller import StatusKind

# ANSI colours per status; the terminal stands in for the label colours.
STATUS_COLOURS: dict[StatusKind, str] = {
    StatusKind.IDLE: "\033[90m",
    StatusKind.SEARCHING: "\033[34m",
    StatusKind.SUCCESS: "\033[32m",
    StatusKind.EMPTY: "\033[33m",
    StatusKind.ERROR: "\033[31m",
}
RESET = "\033[0m"


class ConsoleView:
    """Writes status and output to a text stream.

    Colours are only emitted when ``colour`` is true; tests and pipes get plain
    ``[status] text`` lines.
    """

    def __init__(self, stream: TextIO | None = None, *, colour: bool | None = None) -> None:
        self._stream = stream or sys.stdout
        if colour is None:
            colour = bool(getattr(self._stream, "isatty", lambda: False)())
        self._colour = colour
        self.trigger_enabled = True
        self.status: tuple[StatusKind, str] | None = None
        self.output = ""

    def set_trigger_enabled(self, enabled: bool) -> None:
        self.trigger_enabled = enabled

    def set_status(self, kind: StatusKind, text: str) -> None:
        self.status = (kind, text)
        label = f"[{kind.value}] {text}"
        if self._colour:
            label = f"{STATUS_COLOURS[kind]}{label}{RESET}"
        self._write(label)

    def set_output(self, text: str) -> None:
        self.output = text
        self._write(text.rstrip("\n"))

    def show_input_error(self, message: str) -> None:
        self._write(f"No Input: {message}")

    def _write(self, text: str) -> None:
        self._stream.write(f"{text}\n")
        self._stream.flush()


__all__ = ["ConsoleView", "STATUS_COLOURS"]
