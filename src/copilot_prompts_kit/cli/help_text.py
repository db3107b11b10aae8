"""Static usage text for ``copilot-prompts help``."""

from __future__ import annotations

from copilot_prompts_kit.cli.console import Reporter, Severity
from copilot_prompts_kit.utils.constants import PROG_NAME, TARGET_DIRNAME, WORKFLOW_PROMPTS

COMMANDS: tuple[tuple[str, str], ...] = (
    ("install", f"Install prompts to {TARGET_DIRNAME}/prompts/"),
    ("list", "List available prompts"),
    ("update", "Update existing prompts (alias for install --force)"),
    ("help", "Show this help message"),
)

OPTIONS: tuple[tuple[str, str], ...] = (
    ("--force, -f", "Overwrite existing files"),
    ("--prompts-only", "Only install prompts (no instructions or skills)"),
    ("--partials-only", "Only install partials"),
    ("--instructions-only", "Only install instructions"),
    ("--skills-only", "Only install skills"),
    ("--dry-run", "Show what would be installed"),
    ("--version, -V", "Show the version and exit"),
)

EXAMPLES: tuple[str, ...] = (
    f"{PROG_NAME} install",
    f"{PROG_NAME} install --force",
    f"{PROG_NAME} install --prompts-only",
    f"{PROG_NAME} install --dry-run",
    f"{PROG_NAME} list",
)


def _rows(rows: tuple[tuple[str, str], ...]) -> list[str]:
    width = max(len(name) for name, _ in rows) + 2
    return [f"  {name:<{width}}{text}" for name, text in rows]


def show_help(reporter: Reporter) -> None:
    """Render the usage text to *reporter*."""
    reporter.emit()
    reporter.emit("📦 Copilot Prompts Kit", Severity.HEADING)
    reporter.emit()
    reporter.emit(f"Usage: {PROG_NAME} <command> [options]")
    reporter.emit()

    reporter.emit("Commands:", Severity.SECTION)
    for line in _rows(COMMANDS):
        reporter.emit(line)
    reporter.emit()

    reporter.emit("Options:", Severity.SECTION)
    for line in _rows(OPTIONS):
        reporter.emit(line)
    reporter.emit()

    reporter.emit("Workflow:", Severity.SECTION)
    reporter.emit("  " + " → ".join(WORKFLOW_PROMPTS))
    reporter.emit()

    reporter.emit("Examples:", Severity.SECTION)
    for example in EXAMPLES:
        reporter.emit(f"  {example}")
    reporter.emit()
