"""Core data models shared across repo_overview components."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

MAX_TREE_DEPTH = 3
MAX_NODES = 400
MAX_KEYFILES = 20


@dataclass(frozen=True)
class FileRecord:
    """A regular file inside the repository, addressed relative to the root."""

    path: str
    absolute: Path

    @property
    def segments(self) -> Tuple[str, ...]:
        return tuple(self.path.split("/"))


@dataclass(frozen=True)
class OverviewResult:
    """Structural summary of one repository scan."""

    name: str
    root: str
    file_count: int
    languages: Tuple[Tuple[str, int], ...]
    readme_headline: Optional[str]
    tree: str
    keyfiles: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "root": self.root,
            "file_count": self.file_count,
            "languages": [[language, count] for language, count in self.languages],
            "readme_headline": self.readme_headline,
            "tree": self.tree,
            "keyfiles": list(self.keyfiles),
        }


_OPTION_KEYS = ("dir", "max_depth", "max_nodes", "out")


@dataclass(frozen=True)
class OverviewOptions:
    """Per-call options accepted by the summarizer."""

    dir: str = "."
    max_depth: Optional[int] = None
    max_nodes: Optional[int] = None
    out: Optional[str] = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None) -> "OverviewOptions":
        """Build options from a loose mapping, ignoring keys that are not recognized."""
        if not values:
            return cls()
        picked: Dict[str, Any] = {}
        for raw_key, value in values.items():
            key = str(raw_key).replace("-", "_")
            if key in _OPTION_KEYS and value is not None:
                picked[key] = value
        if "dir" in picked:
            picked["dir"] = str(picked["dir"])
        if "out" in picked:
            picked["out"] = str(picked["out"])
        for key in ("max_depth", "max_nodes"):
            if key in picked:
                picked[key] = int(picked[key])
        return cls(**picked)


__all__ = [
    "FileRecord",
    "MAX_KEYFILES",
    "MAX_NODES",
    "MAX_TREE_DEPTH",
    "OverviewOptions",
    "OverviewResult",
]
