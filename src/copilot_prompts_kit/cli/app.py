"""CLI application entry point and command routing for copilot-prompts.

This module is the **sole error boundary** for the entire application.
It catches :class:`~copilot_prompts_kit.exceptions.PromptsKitError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No install logic lives here — all work is delegated to the core
  service through the ``install`` and ``listing`` renderers.
* Flags are independent booleans; unknown flags and extra positionals
  are ignored rather than rejected.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

from copilot_prompts_kit.cli import exit_codes
from copilot_prompts_kit.cli.console import Reporter, Severity, console
from copilot_prompts_kit.cli.help_text import show_help
from copilot_prompts_kit.core.models import InstallOptions
from copilot_prompts_kit.exceptions import PromptsKitError, UsageError
from copilot_prompts_kit.utils.constants import PROG_NAME
from copilot_prompts_kit.version import __version__

HELP_COMMANDS: frozenset[str] = frozenset({"help", "--help", "-h"})
FORCE_FLAGS: frozenset[str] = frozenset({"--force", "-f"})
VERSION_FLAGS: frozenset[str] = frozenset({"--version", "-V"})


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedArgs:
    """Command name plus the flag set, built once per invocation."""

    command: str
    options: InstallOptions


def _build_parser() -> argparse.ArgumentParser:
    """Construct the parser behind ``--version``.

    Install flags are matched by exact token membership in
    :func:`parse_args`, so this parser only carries the version action.
    """
    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        description="Install GitHub Copilot prompts, instructions and skills.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> ParsedArgs:
    """Turn *argv* (without the program name) into a :class:`ParsedArgs`.

    The command is the first token, whatever it looks like; help aliases
    collapse to ``help``.  Flags count only as exact tokens anywhere in
    the list, so ``--force=yes``, ``-fx`` and anything unknown are
    ignored.  ``--version`` is honoured only in first position, where it
    prints the version and exits.
    """
    tokens = list(sys.argv[1:] if argv is None else argv)
    if tokens and tokens[0] in VERSION_FLAGS:
        _build_parser().parse_args(tokens[:1])

    present = set(tokens)
    options = InstallOptions(
        force=not FORCE_FLAGS.isdisjoint(present),
        prompts_only="--prompts-only" in present,
        partials_only="--partials-only" in present,
        instructions_only="--instructions-only" in present,
        skills_only="--skills-only" in present,
        dry_run="--dry-run" in present,
    )
    command = tokens[0] if tokens else "help"
    if command in HELP_COMMANDS:
        command = "help"
    return ParsedArgs(command=command, options=options)


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _dispatch(parsed: ParsedArgs, reporter: Reporter) -> int:
    """Run exactly one command, raising :class:`UsageError` for unknown ones."""
    command = parsed.command

    if command in HELP_COMMANDS:
        show_help(reporter)
        return exit_codes.SUCCESS

    if command == "install":
        from copilot_prompts_kit.cli.install import run_install

        return run_install(parsed.options, reporter=reporter)

    if command == "update":
        from copilot_prompts_kit.cli.install import run_install

        return run_install(parsed.options.with_force(), reporter=reporter)

    if command == "list":
        from copilot_prompts_kit.cli.listing import run_list

        return run_list(reporter=reporter)

    raise UsageError(command)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, *, reporter: Reporter | None = None) -> int:
    """Run the copilot-prompts CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    reporter:
        Output sink.  Defaults to the shared stdout console.

    Returns
    -------
    int
        OS process exit code.
    """
    out = reporter if reporter is not None else console
    parsed = parse_args(argv)

    try:
        return _dispatch(parsed, out)
    except UsageError as exc:
        out.error(str(exc))
        show_help(out)
        return exit_codes.GENERAL_ERROR


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except PromptsKitError as exc:
        console.error(str(exc))
        if exc.hint:
            console.emit(f"Hint: {exc.hint}", Severity.WARN)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.emit()
        console.warn("Aborted by user.")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.error(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
