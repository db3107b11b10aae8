"""Pure category gating and install planning.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.  A dry run is simply a plan that
is never executed, so both modes share this single code path.

Pipeline order (driven by the install service):

1. **Gate** — flags → categories to install.
2. **Plan** — per category, mirror source files onto the destination
   root and decide COPY / SKIP, inserting MKDIR steps for missing
   parent directories.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import PurePosixPath

from copilot_prompts_kit.core.models import (
    ActionKind,
    Category,
    CategoryPlan,
    DestinationSnapshot,
    InstallOptions,
    PlannedAction,
)

_CURRENT_DIR = PurePosixPath(".")


# ---------------------------------------------------------------------------
# 1. Gate
# ---------------------------------------------------------------------------

def categories_to_install(options: InstallOptions) -> tuple[Category, ...]:
    """Return the categories selected by *options*, in install order.

    When any ``*_only`` flag is set the result is exactly the union of
    the flagged categories; otherwise every category is installed.
    Conflicting ``*_only`` flags are not an error.
    """
    flagged = {
        Category.PROMPTS: options.prompts_only,
        Category.PARTIALS: options.partials_only,
        Category.INSTRUCTIONS: options.instructions_only,
        Category.SKILLS: options.skills_only,
    }
    if not any(flagged.values()):
        return tuple(Category)
    return tuple(category for category in Category if flagged[category])


# ---------------------------------------------------------------------------
# 2. Plan
# ---------------------------------------------------------------------------

def destination_for(category: Category, source: PurePosixPath) -> PurePosixPath:
    """Mirror *source* (relative to the templates root) under the category destination."""
    return category.destination_root / source.relative_to(category.source_root)


def _missing_parents(
    destination: PurePosixPath,
    existing_dirs: frozenset[PurePosixPath],
    planned_dirs: set[PurePosixPath],
) -> list[PurePosixPath]:
    """Return ancestors of *destination* that must be created, outermost first."""
    missing = [
        parent
        for parent in destination.parents
        if parent != _CURRENT_DIR
        and parent not in existing_dirs
        and parent not in planned_dirs
    ]
    missing.reverse()
    return missing


def plan_category(
    category: Category,
    source_files: Sequence[PurePosixPath],
    snapshot: DestinationSnapshot,
    options: InstallOptions,
    *,
    claimed: Iterable[PurePosixPath] = (),
) -> CategoryPlan:
    """Build the ordered action list for *category*.

    Parameters
    ----------
    source_files:
        Files below ``category.source_root``, relative to the templates
        directory.  An empty sequence (missing category) yields an empty
        plan.
    snapshot:
        What already exists under the target project.
    claimed:
        Destination files and directories already planned by earlier
        categories.  Claimed files are not planned again; claimed
        directories are treated as existing.
    """
    claimed_paths = set(claimed)
    planned_dirs: set[PurePosixPath] = set(claimed_paths)
    actions: list[PlannedAction] = []

    for source in sorted(source_files):
        destination = destination_for(category, source)
        if destination in claimed_paths:
            continue

        if destination in snapshot.files and not options.force:
            actions.append(
                PlannedAction(ActionKind.SKIP, destination=destination, source=source)
            )
            continue

        for parent in _missing_parents(destination, snapshot.dirs, planned_dirs):
            planned_dirs.add(parent)
            actions.append(PlannedAction(ActionKind.MKDIR, destination=parent))
        actions.append(
            PlannedAction(ActionKind.COPY, destination=destination, source=source)
        )

    return CategoryPlan(category=category, actions=tuple(actions))


def claimed_by(plan: CategoryPlan) -> set[PurePosixPath]:
    """Return every destination path *plan* touches or decides about."""
    return {action.destination for action in plan.actions}
