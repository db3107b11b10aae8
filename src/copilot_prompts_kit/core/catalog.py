"""Pure grouping of bundled prompt files for the ``list`` command."""

from __future__ import annotations

from collections.abc import Iterable

from copilot_prompts_kit.core.models import PromptCatalog
from copilot_prompts_kit.utils.constants import (
    MARKDOWN_SUFFIX,
    PARTIALS_README,
    PROMPT_SUFFIX,
    WORKFLOW_PROMPTS,
)


def prompt_identifiers(file_names: Iterable[str]) -> list[str]:
    """Strip :data:`PROMPT_SUFFIX` from matching names, dropping the rest."""
    return [
        name[: -len(PROMPT_SUFFIX)]
        for name in file_names
        if name.endswith(PROMPT_SUFFIX)
    ]


def partial_identifiers(file_names: Iterable[str]) -> list[str]:
    """Return markdown partial names without extension, README excluded."""
    return sorted(
        name[: -len(MARKDOWN_SUFFIX)]
        for name in file_names
        if name.endswith(MARKDOWN_SUFFIX) and name != PARTIALS_README
    )


def build_catalog(
    prompt_files: Iterable[str],
    partial_files: Iterable[str] = (),
) -> PromptCatalog:
    """Partition prompt files into workflow and utility groups.

    Workflow prompts keep their canonical position as ordinal (so a
    missing step leaves a gap in the numbering) regardless of the
    order the filesystem reported them in.
    """
    prompts = set(prompt_identifiers(prompt_files))
    workflow = tuple(
        (position, name)
        for position, name in enumerate(WORKFLOW_PROMPTS, start=1)
        if name in prompts
    )
    utility = tuple(sorted(prompts.difference(WORKFLOW_PROMPTS)))
    return PromptCatalog(
        workflow=workflow,
        utility=utility,
        partials=tuple(partial_identifiers(partial_files)),
    )
