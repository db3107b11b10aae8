"""``copilot-prompts list`` — show the bundled prompts and partials."""

from __future__ import annotations

from copilot_prompts_kit.cli import exit_codes
from copilot_prompts_kit.cli.console import Reporter, Severity
from copilot_prompts_kit.core.catalog import build_catalog
from copilot_prompts_kit.core.models import Category
from copilot_prompts_kit.core.protocols import TemplateSource
from copilot_prompts_kit.exceptions import MissingResourceError
from copilot_prompts_kit.infra.filesystem import LocalTemplateSource


def run_list(*, reporter: Reporter, templates: TemplateSource | None = None) -> int:
    """Print workflow prompts, utility prompts and partials.

    A missing prompts directory is reported as an error message; the
    command still exits with :data:`exit_codes.SUCCESS`.
    """
    if templates is None:
        templates = LocalTemplateSource()

    reporter.emit()
    reporter.emit("📋 Available Prompts", Severity.HEADING)
    reporter.emit()

    try:
        prompt_files = templates.list_names(Category.PROMPTS.source_root)
    except MissingResourceError as exc:
        reporter.error(str(exc))
        return exit_codes.SUCCESS

    partials_root = Category.PARTIALS.source_root
    partial_files = (
        templates.list_names(partials_root) if templates.has_dir(partials_root) else []
    )
    catalog = build_catalog(prompt_files, partial_files)

    reporter.emit("Workflow Prompts:", Severity.SECTION)
    for ordinal, name in catalog.workflow:
        reporter.emit(f"  {ordinal}. {name}")
    reporter.emit()

    reporter.emit("Utility Prompts:", Severity.SECTION)
    for name in catalog.utility:
        reporter.emit(f"  • {name}")
    reporter.emit()

    reporter.emit("Partials:", Severity.SECTION)
    for name in catalog.partials:
        reporter.emit(f"  • {name}")
    reporter.emit()
    return exit_codes.SUCCESS
