"""Shared pytest fixtures and configuration for the copilot-prompts-kit suite.

Guidelines
----------
* Every test that touches disk works below ``tmp_path``.
* Console output is captured through an injected :class:`io.StringIO`.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from copilot_prompts_kit.cli.console import Reporter
from copilot_prompts_kit.core.install_service import InstallService
from copilot_prompts_kit.infra.filesystem import LocalTargetProject, LocalTemplateSource

TEMPLATE_FILES: tuple[str, ...] = (
    "prompts/analyze-ticket.prompt.md",
    "prompts/create-plan.prompt.md",
    "prompts/review-code.prompt.md",
    "prompts/_partials/README.md",
    "prompts/_partials/git-operations.md",
    "instructions/tests.instructions.md",
    "skills/testing-patterns/SKILL.md",
)
"""A small templates tree covering every category."""


def template_content(relative: str) -> str:
    return f"# bundled {relative}\n"


def make_templates(root: Path, files: tuple[str, ...] = TEMPLATE_FILES) -> Path:
    for relative in files:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(template_content(relative), encoding="utf-8")
    return root


def files_under(root: Path) -> list[str]:
    """Relative POSIX paths of every file below *root*, sorted."""
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())


@pytest.fixture
def templates_root(tmp_path: Path) -> Path:
    return make_templates(tmp_path / "templates")


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def service(templates_root: Path, project_root: Path) -> InstallService:
    return InstallService(
        LocalTemplateSource(templates_root),
        LocalTargetProject(project_root),
    )


@pytest.fixture
def sink() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def reporter(sink: io.StringIO) -> Reporter:
    return Reporter(sink)
