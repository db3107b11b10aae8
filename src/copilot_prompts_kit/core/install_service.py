"""Core install service — orchestrates planning and execution.

The service delegates every filesystem interaction to a
:class:`~copilot_prompts_kit.core.protocols.TemplateSource` and a
:class:`~copilot_prompts_kit.core.protocols.TargetProject` injected at
construction time.  It is responsible for:

* Selecting categories and building one plan per category.
* Executing plans (skipped entirely in a dry run).
* Creating the default configuration file when it is absent.

Guarantees
----------
* No ``print()``; progress is surfaced through optional callbacks.
* Nothing is ever deleted; existing files are only overwritten when
  ``force`` is set, and the configuration file never is.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import PurePosixPath

from copilot_prompts_kit.core.models import (
    ActionKind,
    CategoryPlan,
    InstallOptions,
    InstallResult,
)
from copilot_prompts_kit.core.planner import (
    categories_to_install,
    claimed_by,
    destination_for,
    plan_category,
)
from copilot_prompts_kit.core.protocols import TargetProject, TemplateSource
from copilot_prompts_kit.utils.constants import (
    CONFIG_FILENAME,
    CONFIG_INDENT,
    DEFAULT_CONFIG,
)

PlanCallback = Callable[[CategoryPlan], None]
InstalledCallback = Callable[[CategoryPlan, int], None]


def render_default_config() -> str:
    """Serialise :data:`DEFAULT_CONFIG` the way it is written to disk."""
    return json.dumps(DEFAULT_CONFIG, indent=CONFIG_INDENT)


class InstallService:
    """Stateless service that drives the install pipeline.

    Parameters
    ----------
    templates:
        Any object satisfying the :class:`TemplateSource` protocol.
    target:
        Any object satisfying the :class:`TargetProject` protocol.
    """

    def __init__(self, templates: TemplateSource, target: TargetProject) -> None:
        self._templates: TemplateSource = templates
        self._target: TargetProject = target

    # ------------------------------------------------------------------
    # Planning
    # ------------------------------------------------------------------

    def plan(self, options: InstallOptions) -> tuple[CategoryPlan, ...]:
        """Plan every selected category without touching the target.

        Categories are planned in install order; files already decided
        by an earlier category (partials inside prompts) are not
        planned twice.
        """
        categories = categories_to_install(options)
        sources = {
            category: self._templates.iter_files(category.source_root)
            for category in categories
        }
        candidates = [
            destination_for(category, source)
            for category, files in sources.items()
            for source in files
        ]
        snapshot = self._target.snapshot(candidates)

        plans: list[CategoryPlan] = []
        claimed: set[PurePosixPath] = set()
        for category in categories:
            plan = plan_category(
                category,
                sources[category],
                snapshot,
                options,
                claimed=claimed,
            )
            claimed |= claimed_by(plan)
            plans.append(plan)
        return tuple(plans)

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def execute(self, plan: CategoryPlan) -> int:
        """Apply *plan* to the target and return the number of files copied.

        A failure part-way through leaves earlier copies in place.
        """
        copied = 0
        for action in plan.actions:
            if action.kind is ActionKind.MKDIR:
                self._target.make_dirs(action.destination)
            elif action.kind is ActionKind.COPY and action.source is not None:
                self._target.copy_file(
                    self._templates.resolve(action.source),
                    action.destination,
                )
                copied += 1
        return copied

    def ensure_config(self, *, dry_run: bool) -> bool:
        """Write the default configuration file if absent.

        Returns ``True`` only when the file was created by this call.
        """
        config_path = PurePosixPath(CONFIG_FILENAME)
        if dry_run or self._target.exists(config_path):
            return False
        self._target.write_text(config_path, render_default_config())
        return True

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def install(
        self,
        options: InstallOptions,
        *,
        on_planned: PlanCallback | None = None,
        on_installed: InstalledCallback | None = None,
    ) -> InstallResult:
        """Install the selected categories into the target project.

        Parameters
        ----------
        options:
            Parsed flag set.  ``dry_run`` plans without executing.
        on_planned:
            Invoked with each category plan before it is executed.
        on_installed:
            Invoked with each plan and its copy count after execution.
            Not called in a dry run.
        """
        copied = planned = skipped = 0
        for plan in self.plan(options):
            if on_planned is not None:
                on_planned(plan)
            planned += len(plan.copies)
            skipped += len(plan.skips)
            if options.dry_run:
                continue
            category_copied = self.execute(plan)
            copied += category_copied
            if on_installed is not None:
                on_installed(plan, category_copied)

        config_created = self.ensure_config(dry_run=options.dry_run)
        return InstallResult(
            files_copied=copied,
            files_planned=planned,
            files_skipped=skipped,
            config_created=config_created,
            dry_run=options.dry_run,
        )
