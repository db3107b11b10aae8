"""``copilot-prompts install`` / ``update`` — render install progress.

This module lives in the CLI layer: it wires the filesystem adapters
into :class:`~copilot_prompts_kit.core.install_service.InstallService`
and turns plans and results into console messages.  No install logic
resides here.
"""

from __future__ import annotations

from pathlib import Path

from copilot_prompts_kit.cli import exit_codes
from copilot_prompts_kit.cli.console import Reporter, Severity
from copilot_prompts_kit.core.install_service import InstallService
from copilot_prompts_kit.core.models import (
    ActionKind,
    CategoryPlan,
    InstallOptions,
    InstallResult,
)
from copilot_prompts_kit.infra.filesystem import LocalTargetProject, LocalTemplateSource
from copilot_prompts_kit.utils.constants import CONFIG_FILENAME, NEXT_STEPS


def build_service(
    project_root: Path | None = None,
    templates_root: Path | None = None,
) -> InstallService:
    """Create a service for *project_root* (default: the current directory)."""
    return InstallService(
        LocalTemplateSource(templates_root),
        LocalTargetProject(project_root if project_root is not None else Path.cwd()),
    )


def _render_plan(reporter: Reporter, plan: CategoryPlan, *, dry_run: bool) -> None:
    # Partials already covered by prompts and absent categories plan nothing.
    if not plan:
        return
    reporter.info(f"Installing {plan.category.plural}...")
    for action in plan.actions:
        if action.kind is ActionKind.SKIP:
            reporter.warn(f"Skipping existing file: {action.destination}")
        elif dry_run and action.kind is ActionKind.COPY:
            reporter.info(f"Would copy: {action.destination}")


def _render_summary(reporter: Reporter, result: InstallResult) -> None:
    reporter.emit()
    if result.dry_run:
        reporter.info(
            f"Dry run complete. {result.reported_count} files would be installed."
        )
    elif result.files_copied > 0:
        reporter.success(
            f"Installation complete! {result.files_copied} files installed."
        )
        reporter.emit()
        reporter.info("Next steps:")
        for number, step in enumerate(NEXT_STEPS, start=1):
            reporter.emit(f"  {number}. {step}")
    else:
        reporter.warn("No new files installed. Use --force to overwrite existing files.")
    reporter.emit()


def run_install(
    options: InstallOptions,
    *,
    reporter: Reporter,
    service: InstallService | None = None,
) -> int:
    """Execute an install and render its progress.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS`.  Write failures propagate as
        :class:`~copilot_prompts_kit.exceptions.TargetWriteError` to the
        CLI error boundary.
    """
    if service is None:
        service = build_service()

    reporter.emit()
    reporter.emit("📦 Copilot Prompts Kit Installer", Severity.HEADING)
    reporter.emit()
    if options.dry_run:
        reporter.info("Dry run mode - no files will be copied")
        reporter.emit()

    def on_installed(plan: CategoryPlan, copied: int) -> None:
        if copied > 0:
            reporter.success(f"Installed {copied} {plan.category.label} files")

    result = service.install(
        options,
        on_planned=lambda plan: _render_plan(reporter, plan, dry_run=options.dry_run),
        on_installed=on_installed,
    )

    if result.config_created:
        reporter.success(f"Created {CONFIG_FILENAME} config file")

    _render_summary(reporter, result)
    return exit_codes.SUCCESS
