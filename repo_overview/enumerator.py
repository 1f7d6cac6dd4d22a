"""Repository root resolution and file enumeration."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator, List, Sequence, Tuple

from .git import GitClient, VersionControlUnavailable
from .logging import get_logger
from .models import FileRecord

COLLAPSED_DIRS = frozenset(
    {
        "node_modules",
        "target",
        ".git",
        ".idea",
        ".vscode",
        "dist",
        "build",
        ".next",
        ".venv",
        "__pycache__",
        ".gradle",
        ".cache",
    }
)

_LOGGER = get_logger("enumerator")


class FileLister(ABC):
    """Strategy producing the files of a repository rooted at ``root``."""

    @abstractmethod
    def list_files(self, root: Path) -> List[FileRecord]:
        """Return file records; raise VersionControlUnavailable when unsupported."""


class GitFileLister(FileLister):
    """Lists the files git tracks, dropping entries missing from disk."""

    def __init__(self, client: GitClient | None = None) -> None:
        self._client = client or GitClient()

    def list_files(self, root: Path) -> List[FileRecord]:
        records: List[FileRecord] = []
        for rel_path in self._client.ls_files(root):
            absolute = (root / rel_path).absolute()
            if not absolute.is_file():
                continue
            records.append(FileRecord(path=Path(rel_path).as_posix(), absolute=absolute))
        return records


class WalkFileLister(FileLister):
    """Walks the filesystem, skipping collapsed directories such as node_modules."""

    def __init__(self, collapsed: frozenset[str] = COLLAPSED_DIRS) -> None:
        self._collapsed = collapsed

    def list_files(self, root: Path) -> List[FileRecord]:
        return [
            FileRecord(path=path.relative_to(root).as_posix(), absolute=path)
            for path in self._iter_files(root)
        ]

    def _iter_files(self, root: Path) -> Iterator[Path]:
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = [name for name in dirnames if name not in self._collapsed]
            current_dir = Path(dirpath)
            for filename in filenames:
                if filename in self._collapsed:
                    continue
                path = current_dir / filename
                if path.is_file():
                    yield path


class FileEnumerator:
    """Resolves the repository root and lists its files, preferring git."""

    def __init__(
        self,
        client: GitClient | None = None,
        listers: Sequence[FileLister] | None = None,
    ) -> None:
        self._client = client or GitClient()
        if listers is None:
            listers = (GitFileLister(self._client), WalkFileLister())
        self._listers = tuple(listers)

    def resolve_root(self, start: str | Path) -> Path:
        """Return the git top-level for ``start``, or ``start`` made absolute."""
        start_path = Path(start).expanduser().absolute()
        try:
            return self._client.toplevel(start_path)
        except VersionControlUnavailable as exc:
            _LOGGER.debug("git root unavailable for %s (%s); using directory itself", start_path, exc)
            return start_path

    def list_files(self, root: Path) -> List[FileRecord]:
        """Return the files under ``root`` sorted by relative path."""
        for lister in self._listers:
            try:
                records = lister.list_files(root)
            except VersionControlUnavailable as exc:
                _LOGGER.debug("%s unavailable (%s); trying next lister", type(lister).__name__, exc)
                continue
            _LOGGER.debug("%s listed %d files", type(lister).__name__, len(records))
            return sorted(records, key=lambda record: record.path)
        raise VersionControlUnavailable(f"No file lister could enumerate {root}")

    def enumerate(self, start: str | Path) -> Tuple[Path, List[FileRecord]]:
        root = self.resolve_root(start)
        return root, self.list_files(root)


__all__ = [
    "COLLAPSED_DIRS",
    "FileEnumerator",
    "FileLister",
    "GitFileLister",
    "WalkFileLister",
]
