"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so that the planner and install service can be
exercised against in-memory fakes.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path, PurePosixPath
from typing import Protocol

from copilot_prompts_kit.core.models import DestinationSnapshot


class TemplateSource(Protocol):
    """Read-only access to the bundled templates tree."""

    def iter_files(self, root: PurePosixPath) -> list[PurePosixPath]:
        """Return every file below *root*, relative to the templates directory.

        A missing *root* yields an empty list; callers treat an absent
        category as contributing nothing.
        """
        ...  # pragma: no cover

    def list_names(self, root: PurePosixPath) -> list[str]:
        """Return the names of the regular files directly inside *root*.

        Raises
        ------
        MissingResourceError
            When *root* does not exist.
        """
        ...  # pragma: no cover

    def has_dir(self, root: PurePosixPath) -> bool:
        ...  # pragma: no cover

    def resolve(self, path: PurePosixPath) -> Path:
        """Map a relative template path to a concrete filesystem path."""
        ...  # pragma: no cover


class TargetProject(Protocol):
    """Mutable access to the consumer project the templates go into.

    Implementations must map every ``OSError`` to
    :class:`~copilot_prompts_kit.exceptions.TargetWriteError`.  None of
    the methods may delete anything.
    """

    def snapshot(self, candidates: Iterable[PurePosixPath]) -> DestinationSnapshot:
        """Report which *candidates* (and their ancestors) already exist."""
        ...  # pragma: no cover

    def exists(self, path: PurePosixPath) -> bool:
        ...  # pragma: no cover

    def make_dirs(self, path: PurePosixPath) -> None:
        ...  # pragma: no cover

    def copy_file(self, source: Path, destination: PurePosixPath) -> None:
        """Copy *source* byte-for-byte over *destination*."""
        ...  # pragma: no cover

    def write_text(self, path: PurePosixPath, text: str) -> None:
        ...  # pragma: no cover
