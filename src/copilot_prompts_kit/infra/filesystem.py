"""Infrastructure: local filesystem adapters.

This module is the **only** place that reads the bundled templates or
writes into the consumer project.

Rules
-----
* Every ``OSError`` raised while writing is re-raised as
  :class:`~copilot_prompts_kit.exceptions.TargetWriteError`.
* Nothing is ever deleted.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import shutil
from collections.abc import Iterable
from pathlib import Path, PurePosixPath

from copilot_prompts_kit.core.models import DestinationSnapshot
from copilot_prompts_kit.exceptions import MissingResourceError, TargetWriteError

BUNDLED_TEMPLATES_DIR: Path = Path(__file__).resolve().parent.parent / "templates"
"""Templates shipped as package data alongside the source tree."""

_WRITE_HINT = "Check permissions and free disk space, then re-run the command."


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


# ---------------------------------------------------------------------------
# Bundled templates
# ---------------------------------------------------------------------------

class LocalTemplateSource:
    """Concrete :class:`TemplateSource` backed by a directory on disk.

    This class satisfies the
    :class:`~copilot_prompts_kit.core.protocols.TemplateSource` protocol
    structurally — no explicit inheritance required.
    """

    def __init__(self, root: Path | None = None) -> None:
        self._root: Path = root if root is not None else BUNDLED_TEMPLATES_DIR

    @property
    def root(self) -> Path:
        return self._root

    def resolve(self, path: PurePosixPath) -> Path:
        return self._root.joinpath(*path.parts)

    def has_dir(self, root: PurePosixPath) -> bool:
        return self.resolve(root).is_dir()

    def iter_files(self, root: PurePosixPath) -> list[PurePosixPath]:
        base = self.resolve(root)
        if not base.is_dir():
            return []
        return sorted(
            PurePosixPath(path.relative_to(self._root).as_posix())
            for path in base.rglob("*")
            if path.is_file()
        )

    def list_names(self, root: PurePosixPath) -> list[str]:
        base = self.resolve(root)
        if not base.is_dir():
            raise MissingResourceError(
                base,
                hint="The package installation looks incomplete; try reinstalling it.",
            )
        return [entry.name for entry in base.iterdir() if entry.is_file()]


# ---------------------------------------------------------------------------
# Target project
# ---------------------------------------------------------------------------

class LocalTargetProject:
    """Concrete :class:`TargetProject` rooted at a project directory."""

    def __init__(self, root: Path) -> None:
        self._root: Path = root

    @property
    def root(self) -> Path:
        return self._root

    def _abs(self, path: PurePosixPath) -> Path:
        return self._root.joinpath(*path.parts)

    def snapshot(self, candidates: Iterable[PurePosixPath]) -> DestinationSnapshot:
        files: set[PurePosixPath] = set()
        dirs: set[PurePosixPath] = set()
        seen_parents: set[PurePosixPath] = set()
        for candidate in candidates:
            if self._abs(candidate).exists():
                files.add(candidate)
            for parent in candidate.parents:
                if parent in seen_parents:
                    continue
                seen_parents.add(parent)
                if self._abs(parent).is_dir():
                    dirs.add(parent)
        return DestinationSnapshot(files=frozenset(files), dirs=frozenset(dirs))

    def exists(self, path: PurePosixPath) -> bool:
        return self._abs(path).exists()

    def make_dirs(self, path: PurePosixPath) -> None:
        target = self._abs(path)
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise TargetWriteError(target, _reason(exc), hint=_WRITE_HINT) from exc

    def copy_file(self, source: Path, destination: PurePosixPath) -> None:
        target = self._abs(destination)
        try:
            shutil.copyfile(source, target)
        except OSError as exc:
            raise TargetWriteError(target, _reason(exc), hint=_WRITE_HINT) from exc

    def write_text(self, path: PurePosixPath, text: str) -> None:
        target = self._abs(path)
        try:
            target.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise TargetWriteError(target, _reason(exc), hint=_WRITE_HINT) from exc
