"""Process exit codes returned by ``copilot-prompts``.

Every exit path in :mod:`copilot_prompts_kit.cli.app` returns one of
these values; tests assert against the names, not the integers.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Command finished, including installs that copied nothing and ``list``
runs that could not find the bundled templates."""

GENERAL_ERROR: int = 1
"""Unknown command, or a :class:`PromptsKitError` such as a failed write."""

UNEXPECTED_ERROR: int = 2
"""An exception outside the known hierarchy escaped the command."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
