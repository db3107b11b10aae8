"""Tests for prompt catalog grouping (core/catalog.py)."""

from __future__ import annotations

from copilot_prompts_kit.core.catalog import (
    build_catalog,
    partial_identifiers,
    prompt_identifiers,
)
from copilot_prompts_kit.utils.constants import WORKFLOW_PROMPTS


def _prompt_files(*names: str) -> list[str]:
    return [f"{name}.prompt.md" for name in names]


class TestPromptIdentifiers:
    def test_strips_suffix(self) -> None:
        assert prompt_identifiers(["create-pr.prompt.md"]) == ["create-pr"]

    def test_ignores_other_files(self) -> None:
        assert prompt_identifiers(["notes.md", "README.md", "x.prompt.txt"]) == []


class TestPartialIdentifiers:
    def test_excludes_readme_and_non_markdown(self) -> None:
        names = ["README.md", "validations.md", "pr-template.md", "logo.png"]
        assert partial_identifiers(names) == ["pr-template", "validations"]


class TestBuildCatalog:
    def test_workflow_in_canonical_order_regardless_of_input_order(self) -> None:
        files = _prompt_files(*reversed(WORKFLOW_PROMPTS))
        catalog = build_catalog(files)
        assert [name for _, name in catalog.workflow] == list(WORKFLOW_PROMPTS)
        assert [ordinal for ordinal, _ in catalog.workflow] == [1, 2, 3, 4, 5, 6]

    def test_missing_workflow_step_keeps_canonical_ordinal(self) -> None:
        catalog = build_catalog(_prompt_files("finalize-pr", "analyze-ticket"))
        assert catalog.workflow == ((1, "analyze-ticket"), (6, "finalize-pr"))

    def test_everything_else_is_utility(self) -> None:
        catalog = build_catalog(
            _prompt_files("review-code", "work-ticket", "add-tests", "my-own")
        )
        assert catalog.utility == ("add-tests", "my-own", "review-code")
        assert catalog.workflow == ((3, "work-ticket"),)

    def test_partials_are_carried_through(self) -> None:
        catalog = build_catalog([], ["README.md", "git-operations.md"])
        assert catalog.partials == ("git-operations",)
        assert catalog.workflow == ()
        assert catalog.utility == ()
