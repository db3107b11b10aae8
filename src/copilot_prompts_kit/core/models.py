"""Domain models for copilot-prompts-kit.

All models are **frozen** dataclasses or enums: immutable value
objects with no behaviour beyond data access and trivial derived
views.  They carry zero I/O.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from pathlib import PurePosixPath

from copilot_prompts_kit.utils.constants import PARTIALS_DIRNAME, TARGET_DIRNAME


# ---------------------------------------------------------------------------
# Install options
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InstallOptions:
    """Flag set parsed once per invocation."""

    force: bool = False
    """Overwrite destination files that already exist."""

    prompts_only: bool = False
    partials_only: bool = False
    instructions_only: bool = False
    skills_only: bool = False

    dry_run: bool = False
    """Plan and report without touching the filesystem."""

    def with_force(self) -> InstallOptions:
        """Return a copy with ``force`` enabled (used by ``update``)."""
        return replace(self, force=True)


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------

class Category(enum.Enum):
    """Independently installable template groups.

    Each member's value is its source root relative to the bundled
    templates directory.  Declaration order is install order.
    """

    PROMPTS = "prompts"
    PARTIALS = f"prompts/{PARTIALS_DIRNAME}"
    INSTRUCTIONS = "instructions"
    SKILLS = "skills"

    @property
    def source_root(self) -> PurePosixPath:
        return PurePosixPath(self.value)

    @property
    def destination_root(self) -> PurePosixPath:
        """Destination relative to the target project root."""
        return PurePosixPath(TARGET_DIRNAME) / self.value

    @property
    def label(self) -> str:
        """Singular noun used in progress messages (``prompt``, ``skill``...)."""
        return {
            Category.PROMPTS: "prompt",
            Category.PARTIALS: "partial",
            Category.INSTRUCTIONS: "instruction",
            Category.SKILLS: "skill",
        }[self]

    @property
    def plural(self) -> str:
        return self.name.lower()


# ---------------------------------------------------------------------------
# Plans
# ---------------------------------------------------------------------------

class ActionKind(enum.Enum):
    COPY = "copy"
    SKIP = "skip"
    MKDIR = "mkdir"


@dataclass(frozen=True, slots=True)
class PlannedAction:
    """One step of an install plan.

    Paths are POSIX-style: ``source`` is relative to the templates
    directory, ``destination`` relative to the target project root.
    """

    kind: ActionKind
    destination: PurePosixPath
    source: PurePosixPath | None = None
    """``None`` for :attr:`ActionKind.MKDIR`."""


@dataclass(frozen=True, slots=True)
class CategoryPlan:
    """Ordered actions computed for a single category."""

    category: Category
    actions: tuple[PlannedAction, ...]

    def _of(self, kind: ActionKind) -> tuple[PlannedAction, ...]:
        return tuple(action for action in self.actions if action.kind is kind)

    @property
    def copies(self) -> tuple[PlannedAction, ...]:
        return self._of(ActionKind.COPY)

    @property
    def skips(self) -> tuple[PlannedAction, ...]:
        return self._of(ActionKind.SKIP)

    @property
    def mkdirs(self) -> tuple[PlannedAction, ...]:
        return self._of(ActionKind.MKDIR)

    def __len__(self) -> int:
        return len(self.actions)

    def __bool__(self) -> bool:
        return len(self.actions) > 0


@dataclass(frozen=True, slots=True)
class DestinationSnapshot:
    """Existing files and directories under the target, as relative paths."""

    files: frozenset[PurePosixPath] = frozenset()
    dirs: frozenset[PurePosixPath] = frozenset()


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InstallResult:
    """Outcome of one ``install`` / ``update`` invocation."""

    files_copied: int
    """Files actually written.  Always ``0`` in a dry run."""

    files_planned: int
    """Files that were (or, in a dry run, would have been) copied."""

    files_skipped: int
    """Existing destination files left untouched."""

    config_created: bool
    dry_run: bool

    @property
    def reported_count(self) -> int:
        """The count shown in the summary line."""
        return self.files_planned if self.dry_run else self.files_copied


@dataclass(frozen=True, slots=True)
class PromptCatalog:
    """Bundled prompt and partial identifiers grouped for display."""

    workflow: tuple[tuple[int, str], ...]
    """``(ordinal, name)`` pairs in canonical workflow order, 1-based."""

    utility: tuple[str, ...]
    partials: tuple[str, ...]
