"""Helper utilities for constructing temporary repositories in tests."""

from __future__ import annotations

import subprocess
import textwrap
from pathlib import Path
from typing import Any, Mapping

from repo_overview.enumerator import FileEnumerator
from repo_overview.git import GitClient
from repo_overview.models import OverviewResult
from repo_overview.summarizer import Summarizer


def no_git_runner(args, cwd, **kwargs):  # type: ignore[no-untyped-def]
    """Git runner that behaves like a directory outside any repository."""
    raise subprocess.CalledProcessError(128, list(args), output="fatal: not a git repository")


class RepoBuilder:
    """Utility for writing files into a throwaway repository and summarising it."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "repo"
        self.root.mkdir()
        self.summarizer = Summarizer(FileEnumerator(GitClient(runner=no_git_runner)))

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the repository."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def summarize(self, **options: Any) -> OverviewResult:
        """Return a fresh overview of the repository contents (walk mode)."""
        return self.summarizer.summarize({"dir": str(self.root), **options})

    def path(self) -> Path:
        """Return the repository root path."""
        return self.root


__all__ = ["RepoBuilder", "no_git_runner"]
