"""CLI console helpers with optional Rich support.

Output is a formatting layer over a text stream: every message carries
a :class:`Severity` and is written to an injected sink (``sys.stdout``
by default), so tests can capture it with :class:`io.StringIO`.

This module intentionally avoids module-level imports of Rich so that
bootstrap paths (``help``, ``--version``) remain functional even when
Rich is not installed.  The emitted text is identical with and without
Rich; only colour differs.
"""

from __future__ import annotations

import enum
import sys
from typing import Any, TextIO

from copilot_prompts_kit.exceptions import PromptsKitError


class Severity(enum.Enum):
    """Message kinds, each with a text marker and a Rich style."""

    LOG = ("", None)
    HEADING = ("", "bold")
    SECTION = ("", "cyan")
    SUCCESS = ("✅ ", "green")
    WARN = ("⚠️  ", "yellow")
    ERROR = ("❌ ", "red")
    INFO = ("ℹ️  ", "blue")

    @property
    def marker(self) -> str:
        return self.value[0]

    @property
    def style(self) -> str | None:
        return self.value[1]


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``PromptsKitError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise PromptsKitError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(file: TextIO) -> Any:
    """Create a Rich console instance targeting *file*."""
    console_class = _load_rich_console_class()
    return console_class(file=file, highlight=False, emoji=False)


def format_message(message: str, severity: Severity) -> str:
    return f"{severity.marker}{message}"


def _write(text: str, severity: Severity, sink: TextIO, rich_console: Any | None) -> None:
    if rich_console is None:
        print(text, file=sink)
        return
    rich_console.print(text, style=severity.style, markup=False, soft_wrap=True)


def _try_rich_console(sink: TextIO) -> Any | None:
    try:
        return get_rich_console(sink)
    except PromptsKitError:
        return None


def emit(message: str, severity: Severity = Severity.LOG, *, sink: TextIO) -> None:
    """Write one line to *sink*, styled with Rich when available."""
    _write(format_message(message, severity), severity, sink, _try_rich_console(sink))


class Reporter:
    """Bind :func:`emit` to a sink.

    When no sink is given, ``sys.stdout`` is looked up on every call so
    that stream redirection after construction is honoured.  The Rich
    console is built once per sink and reused until the sink changes.
    """

    def __init__(self, file: TextIO | None = None) -> None:
        self._file: TextIO | None = file
        self._bound_sink: TextIO | None = None
        self._rich_console: Any | None = None

    @property
    def file(self) -> TextIO:
        return self._file if self._file is not None else sys.stdout

    def _console_for(self, sink: TextIO) -> Any | None:
        if sink is not self._bound_sink:
            self._rich_console = _try_rich_console(sink)
            self._bound_sink = sink
        return self._rich_console

    def emit(self, message: str = "", severity: Severity = Severity.LOG) -> None:
        sink = self.file
        _write(format_message(message, severity), severity, sink, self._console_for(sink))

    def success(self, message: str) -> None:
        self.emit(message, Severity.SUCCESS)

    def warn(self, message: str) -> None:
        self.emit(message, Severity.WARN)

    def error(self, message: str) -> None:
        self.emit(message, Severity.ERROR)

    def info(self, message: str) -> None:
        self.emit(message, Severity.INFO)


console = Reporter()
