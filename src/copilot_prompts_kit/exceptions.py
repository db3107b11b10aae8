"""Custom exception hierarchy for copilot-prompts-kit.

All exceptions that cross layer boundaries must inherit from
:class:`PromptsKitError`.  Raw ``OSError`` instances raised while
touching the target project must NEVER propagate beyond the
infrastructure layer; they are caught there and re-raised as
:class:`TargetWriteError`.

Hierarchy
---------
PromptsKitError
├── UsageError
├── MissingResourceError
└── TargetWriteError
"""

from __future__ import annotations

from pathlib import Path


class PromptsKitError(Exception):
    """Base exception for all copilot-prompts-kit errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    and choose the exit code without parsing message text.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class UsageError(PromptsKitError):
    """Raised when the first argument is not a known command."""

    def __init__(self, command: str, *, hint: str | None = None) -> None:
        super().__init__(f"Unknown command: {command}", hint=hint)
        self.command: str = command


# --- Bundled templates -----------------------------------------------------

class MissingResourceError(PromptsKitError):
    """Raised when a bundled templates directory cannot be found."""

    def __init__(self, path: Path, *, hint: str | None = None) -> None:
        super().__init__("Templates directory not found", hint=hint)
        self.path: Path = path


# --- Target project --------------------------------------------------------

class TargetWriteError(PromptsKitError):
    """Raised when creating a directory or writing a file in the target fails."""

    def __init__(self, path: Path, reason: str, *, hint: str | None = None) -> None:
        super().__init__(f"Could not write {path}: {reason}", hint=hint)
        self.path: Path = path
