"""Selection of structurally significant files."""

from __future__ import annotations

from typing import Iterable, List

from .models import MAX_KEYFILES

KEY_FILE_NAMES = frozenset(
    {
        "README.md",
        "README",
        "LICENSE",
        "LICENSE.md",
        "deps.edn",
        "bb.edn",
        "project.clj",
        "pom.xml",
        "build.gradle",
        "settings.gradle",
        "gradlew",
        "package.json",
        "pnpm-lock.yaml",
        "yarn.lock",
        "Cargo.toml",
        "Dockerfile",
        "docker-compose.yml",
        "docker-compose.yaml",
        ".github/workflows",
        ".gitlab-ci.yml",
        ".circleci",
        "Makefile",
        "justfile",
    }
)

KEY_FILE_PREFIXES = (".github/workflows",)


def is_key_file(rel_path: str) -> bool:
    return rel_path in KEY_FILE_NAMES or rel_path.startswith(KEY_FILE_PREFIXES)


def select_key_files(paths: Iterable[str], limit: int = MAX_KEYFILES) -> List[str]:
    """Return matching root-relative paths, sorted and capped at ``limit``."""
    return sorted(path for path in paths if is_key_file(path))[:limit]


__all__ = ["KEY_FILE_NAMES", "KEY_FILE_PREFIXES", "is_key_file", "select_key_files"]
