"""README discovery and headline extraction."""

from __future__ import annotations

import codecs
import re
from pathlib import Path
from typing import Optional

from .logging import get_logger

README_CANDIDATES = ("README.md", "Readme.md", "readme.md", "README")
READ_LIMIT = 4096

_HEADING = re.compile(r"^#+")
_LOGGER = get_logger("readme")


def find_readme(root: Path) -> Optional[Path]:
    for name in README_CANDIDATES:
        candidate = root / name
        if candidate.exists():
            return candidate
    return None


def read_head(path: Path, limit: int = READ_LIMIT) -> str:
    """Return up to ``limit`` bytes of ``path`` as text, or '' when unreadable."""
    try:
        with path.open("rb") as handle:
            data = handle.read(limit)
    except OSError as exc:
        _LOGGER.debug("Could not read %s: %s", path, exc)
        return ""
    # Invalid bytes become U+FFFD; a character cut off by the read limit is dropped.
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    return decoder.decode(data, final=len(data) < limit)


def extract_headline(text: str) -> str:
    """Return the first markdown heading, else the first line of ``text``."""
    lines = text.splitlines()
    for line in lines:
        stripped = line.strip()
        if _HEADING.match(stripped):
            return stripped
    return lines[0] if lines else ""


def readme_headline(root: Path) -> Optional[str]:
    readme = find_readme(root)
    if readme is None:
        return None
    return extract_headline(read_head(readme))


__all__ = [
    "READ_LIMIT",
    "README_CANDIDATES",
    "extract_headline",
    "find_readme",
    "read_head",
    "readme_headline",
]
