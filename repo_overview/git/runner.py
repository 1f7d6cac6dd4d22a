"""Thin wrapper around the git executable."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Iterable


class VersionControlUnavailable(RuntimeError):
    """Raised when git cannot answer a query for the given directory."""


class GitClient:
    """Runs read-only git queries, merging stderr into stdout."""

    def __init__(self, runner: Callable[..., str] | None = None) -> None:
        self._runner = runner or self._default_runner

    def toplevel(self, cwd: Path) -> Path:
        """Return the top-level directory of the work tree containing ``cwd``."""
        output = self._run(["git", "rev-parse", "--show-toplevel"], cwd=cwd).strip()
        if not output:
            raise VersionControlUnavailable(f"git reported no work tree for {cwd}")
        return Path(output)

    def ls_files(self, cwd: Path) -> list[str]:
        """Return tracked paths relative to ``cwd``."""
        # NUL separated; names are never C-quoted.
        output = self._run(["git", "ls-files", "-z"], cwd=cwd)
        return [entry for entry in output.split("\0") if entry]

    def _run(self, args: Iterable[str], *, cwd: Path) -> str:
        try:
            return self._runner(args, cwd=cwd)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise VersionControlUnavailable(str(exc)) from exc

    @staticmethod
    def _default_runner(args: Iterable[str], *, cwd: Path) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            check=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
        )
        # Undecodable filename bytes survive as surrogates.
        return completed.stdout.decode("utf-8", errors="surrogateescape")


__all__ = ["GitClient", "VersionControlUnavailable"]
