"""Bounded directory tree rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Set

from .models import MAX_NODES, MAX_TREE_DEPTH

FILE_MARKER = "├─ "
DIR_MARKER = "└─ "
INDENT = "  "


@dataclass(frozen=True)
class TreeListing:
    """Accepted tree lines plus the number of candidates cut off by the node cap."""

    lines: List[str] = field(default_factory=list)
    remaining: int = 0

    @property
    def overflow_line(self) -> str | None:
        if not self.remaining:
            return None
        return f"(+{self.remaining} more files not shown)"


def _depth(candidate: str) -> int:
    return candidate.count("/")


def expand_prefixes(paths: Iterable[str]) -> List[str]:
    """Return every ancestor prefix of every path, deduplicated and sorted."""
    candidates: Set[str] = set()
    for path in paths:
        parts = path.split("/")
        for index in range(1, len(parts) + 1):
            candidates.add("/".join(parts[:index]))
    return sorted(candidates)


def limit_tree(
    paths: Iterable[str],
    max_depth: int = MAX_TREE_DEPTH,
    max_nodes: int = MAX_NODES,
) -> TreeListing:
    """Select tree lines, skipping deep candidates and stopping at the node cap."""
    candidates = expand_prefixes(paths)
    accepted: List[str] = []
    used = 0
    for position, candidate in enumerate(candidates):
        if used >= max_nodes:
            return TreeListing(lines=accepted, remaining=len(candidates) - position)
        if _depth(candidate) > max_depth:
            continue
        accepted.append(candidate)
        used += 1
    return TreeListing(lines=accepted)


def render_line(candidate: str) -> str:
    # A dot in the name picks the file marker; it is not a last-sibling indicator.
    parts = candidate.split("/")
    name = parts[-1]
    marker = FILE_MARKER if "." in name else DIR_MARKER
    return f"{INDENT * (len(parts) - 1)}{marker}{name}"


def render_tree(listing: TreeListing) -> str:
    rendered = [render_line(line) for line in listing.lines]
    overflow = listing.overflow_line
    if overflow is not None:
        rendered.append(overflow)
    return "\n".join(rendered)


def build_tree(
    paths: Iterable[str],
    max_depth: int = MAX_TREE_DEPTH,
    max_nodes: int = MAX_NODES,
) -> str:
    return render_tree(limit_tree(paths, max_depth=max_depth, max_nodes=max_nodes))


__all__ = [
    "TreeListing",
    "build_tree",
    "expand_prefixes",
    "limit_tree",
    "render_line",
    "render_tree",
]
