"""Extension-based language classification."""

from __future__ import annotations

from collections import Counter
from pathlib import PurePosixPath
from types import MappingProxyType
from typing import Iterable, List, Tuple

OTHER = "Other"

LANGUAGE_BY_SUFFIX = MappingProxyType(
    {
        ".clj": "Clojure",
        ".cljc": "Clojure",
        ".bb": "Clojure",
        ".cljs": "ClojureScript",
        ".edn": "EDN",
        ".java": "Java",
        ".kt": "Kotlin",
        ".rs": "Rust",
        ".toml": "TOML",
        ".js": "JavaScript",
        ".jsx": "JavaScript",
        ".ts": "TypeScript",
        ".tsx": "TypeScript",
        ".py": "Python",
        ".go": "Go",
        ".rb": "Ruby",
        ".swift": "Swift",
        ".yaml": "YAML",
        ".yml": "YAML",
        ".json": "JSON",
        ".md": "Markdown",
        ".txt": "Text",
    }
)


def extension(path: str) -> str:
    """Return the lowercased suffix of the final segment, or '' when there is none.

    A leading dot does not start an extension, so ``.gitignore`` has none.
    """
    name = PurePosixPath(path).name
    index = name.rfind(".")
    if index <= 0:
        return ""
    return name[index:].lower()


def detect_language(path: str) -> str:
    return LANGUAGE_BY_SUFFIX.get(extension(path), OTHER)


def language_stats(paths: Iterable[str]) -> List[Tuple[str, int]]:
    """Count files per language, most frequent first.

    Languages with equal counts keep the order in which they were first seen.
    """
    counts = Counter(detect_language(path) for path in paths)
    return counts.most_common()


__all__ = ["LANGUAGE_BY_SUFFIX", "OTHER", "detect_language", "extension", "language_stats"]
