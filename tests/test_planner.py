"""Tests for category gating and install planning (core/planner.py).

Every test is a pure function call — no I/O, no mocking.  Coverage:

* Category selection for every ``*_only`` flag and their unions
* MKDIR / COPY / SKIP decisions against a destination snapshot
* ``force`` turning skips into copies
* Claimed destinations (partials inside prompts) planned once
* Edge cases (missing category, nested skill directories)
"""

from __future__ import annotations

from pathlib import PurePosixPath

import pytest

from copilot_prompts_kit.core.models import (
    ActionKind,
    Category,
    DestinationSnapshot,
    InstallOptions,
)
from copilot_prompts_kit.core.planner import (
    categories_to_install,
    claimed_by,
    destination_for,
    plan_category,
)

P = PurePosixPath

PROMPT_SOURCES = [
    P("prompts/create-plan.prompt.md"),
    P("prompts/_partials/validations.md"),
]


def _kinds(plan) -> list[tuple[ActionKind, str]]:
    return [(action.kind, str(action.destination)) for action in plan.actions]


# ---------------------------------------------------------------------------
# categories_to_install
# ---------------------------------------------------------------------------

class TestCategoriesToInstall:
    def test_no_only_flags_selects_everything_in_order(self) -> None:
        assert categories_to_install(InstallOptions()) == (
            Category.PROMPTS,
            Category.PARTIALS,
            Category.INSTRUCTIONS,
            Category.SKILLS,
        )

    def test_force_and_dry_run_do_not_narrow(self) -> None:
        options = InstallOptions(force=True, dry_run=True)
        assert categories_to_install(options) == tuple(Category)

    @pytest.mark.parametrize(
        ("options", "expected"),
        [
            (InstallOptions(prompts_only=True), (Category.PROMPTS,)),
            (InstallOptions(partials_only=True), (Category.PARTIALS,)),
            (InstallOptions(instructions_only=True), (Category.INSTRUCTIONS,)),
            (InstallOptions(skills_only=True), (Category.SKILLS,)),
        ],
    )
    def test_single_only_flag(
        self, options: InstallOptions, expected: tuple[Category, ...]
    ) -> None:
        assert categories_to_install(options) == expected

    def test_conflicting_only_flags_union(self) -> None:
        options = InstallOptions(skills_only=True, prompts_only=True)
        assert categories_to_install(options) == (Category.PROMPTS, Category.SKILLS)


# ---------------------------------------------------------------------------
# destination_for
# ---------------------------------------------------------------------------

class TestDestinationFor:
    def test_mirrors_relative_path(self) -> None:
        assert destination_for(
            Category.SKILLS, P("skills/testing-patterns/SKILL.md")
        ) == P(".github/skills/testing-patterns/SKILL.md")

    def test_partials_land_inside_prompts(self) -> None:
        assert destination_for(
            Category.PARTIALS, P("prompts/_partials/validations.md")
        ) == P(".github/prompts/_partials/validations.md")


# ---------------------------------------------------------------------------
# plan_category
# ---------------------------------------------------------------------------

class TestPlanCategory:
    def test_empty_target_creates_parents_outermost_first(self) -> None:
        plan = plan_category(
            Category.PROMPTS, PROMPT_SOURCES, DestinationSnapshot(), InstallOptions()
        )
        assert _kinds(plan) == [
            (ActionKind.MKDIR, ".github"),
            (ActionKind.MKDIR, ".github/prompts"),
            (ActionKind.MKDIR, ".github/prompts/_partials"),
            (ActionKind.COPY, ".github/prompts/_partials/validations.md"),
            (ActionKind.COPY, ".github/prompts/create-plan.prompt.md"),
        ]

    def test_existing_file_is_skipped_without_force(self) -> None:
        snapshot = DestinationSnapshot(
            files=frozenset({P(".github/prompts/create-plan.prompt.md")}),
            dirs=frozenset({P(".github"), P(".github/prompts")}),
        )
        plan = plan_category(Category.PROMPTS, PROMPT_SOURCES, snapshot, InstallOptions())
        assert _kinds(plan) == [
            (ActionKind.MKDIR, ".github/prompts/_partials"),
            (ActionKind.COPY, ".github/prompts/_partials/validations.md"),
            (ActionKind.SKIP, ".github/prompts/create-plan.prompt.md"),
        ]
        assert len(plan.copies) == 1
        assert len(plan.skips) == 1

    def test_force_copies_over_existing_file(self) -> None:
        snapshot = DestinationSnapshot(
            files=frozenset({P(".github/prompts/create-plan.prompt.md")}),
            dirs=frozenset({P(".github"), P(".github/prompts")}),
        )
        plan = plan_category(
            Category.PROMPTS, PROMPT_SOURCES, snapshot, InstallOptions(force=True)
        )
        assert not plan.skips
        assert [str(a.destination) for a in plan.copies] == [
            ".github/prompts/_partials/validations.md",
            ".github/prompts/create-plan.prompt.md",
        ]

    def test_skip_emits_no_mkdir(self) -> None:
        snapshot = DestinationSnapshot(
            files=frozenset({P(".github/instructions/tests.instructions.md")}),
        )
        plan = plan_category(
            Category.INSTRUCTIONS,
            [P("instructions/tests.instructions.md")],
            snapshot,
            InstallOptions(),
        )
        assert _kinds(plan) == [
            (ActionKind.SKIP, ".github/instructions/tests.instructions.md"),
        ]

    def test_copy_records_source(self) -> None:
        plan = plan_category(
            Category.INSTRUCTIONS,
            [P("instructions/tests.instructions.md")],
            DestinationSnapshot(dirs=frozenset({P(".github")})),
            InstallOptions(),
        )
        (copy,) = plan.copies
        assert copy.source == P("instructions/tests.instructions.md")
        assert [str(a.destination) for a in plan.mkdirs] == [".github/instructions"]

    def test_missing_category_yields_empty_plan(self) -> None:
        plan = plan_category(Category.SKILLS, [], DestinationSnapshot(), InstallOptions())
        assert not plan
        assert len(plan) == 0

    def test_each_directory_is_created_once(self) -> None:
        sources = [
            P("skills/a/SKILL.md"),
            P("skills/a/notes.md"),
            P("skills/b/SKILL.md"),
        ]
        plan = plan_category(
            Category.SKILLS, sources, DestinationSnapshot(), InstallOptions()
        )
        mkdirs = [str(a.destination) for a in plan.mkdirs]
        assert mkdirs == [
            ".github",
            ".github/skills",
            ".github/skills/a",
            ".github/skills/b",
        ]

    def test_claimed_destinations_are_not_planned_again(self) -> None:
        prompts = plan_category(
            Category.PROMPTS, PROMPT_SOURCES, DestinationSnapshot(), InstallOptions()
        )
        partials = plan_category(
            Category.PARTIALS,
            [P("prompts/_partials/validations.md")],
            DestinationSnapshot(),
            InstallOptions(),
            claimed=claimed_by(prompts),
        )
        assert not partials

    def test_claimed_directories_count_as_existing(self) -> None:
        plan = plan_category(
            Category.INSTRUCTIONS,
            [P("instructions/tests.instructions.md")],
            DestinationSnapshot(),
            InstallOptions(),
            claimed={P(".github")},
        )
        assert [str(a.destination) for a in plan.mkdirs] == [".github/instructions"]
