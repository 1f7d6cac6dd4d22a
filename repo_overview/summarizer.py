"""Assembly of repository overviews from the individual scanners."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, TextIO, Union

from .config import ConfigError, OverviewConfig, load_config
from .enumerator import FileEnumerator
from .keyfiles import select_key_files
from .languages import language_stats
from .logging import get_logger
from .models import MAX_NODES, MAX_TREE_DEPTH, OverviewOptions, OverviewResult
from .readme import readme_headline
from .report import render_markdown
from .tree import build_tree

OptionsLike = Union[OverviewOptions, Mapping[str, Any], None]


def _coerce_options(options: OptionsLike) -> OverviewOptions:
    if isinstance(options, OverviewOptions):
        return options
    return OverviewOptions.from_mapping(options)


class Summarizer:
    """Builds an OverviewResult for a directory and renders it as a report."""

    def __init__(self, enumerator: FileEnumerator | None = None) -> None:
        self.enumerator = enumerator or FileEnumerator()
        self.logger = get_logger("summarizer")

    def summarize(self, options: OptionsLike = None) -> OverviewResult:
        """Scan the repository containing ``options.dir`` and summarise it."""
        opts = _coerce_options(options)
        root, files = self.enumerator.enumerate(opts.dir)
        self.logger.debug("Resolved repository root %s with %d files", root, len(files))

        config = self._load_config(root)
        max_depth = _first_set(opts.max_depth, config.max_depth, MAX_TREE_DEPTH)
        max_nodes = _first_set(opts.max_nodes, config.max_nodes, MAX_NODES)

        rel_paths = [record.path for record in files]
        return OverviewResult(
            name=root.name,
            root=str(root),
            file_count=len(files),
            languages=tuple(language_stats(rel_paths)),
            readme_headline=readme_headline(root),
            tree=build_tree(rel_paths, max_depth=max_depth, max_nodes=max_nodes),
            keyfiles=tuple(select_key_files(rel_paths)),
        )

    def render(self, options: OptionsLike = None) -> str:
        return render_markdown(self.summarize(options))

    def write_report(
        self, options: OptionsLike = None, stream: Optional[TextIO] = None
    ) -> Dict[str, str]:
        """Write the markdown report to ``options.out`` or ``stream`` (stdout)."""
        opts = _coerce_options(options)
        markdown = self.render(opts)
        if opts.out:
            self.write_markdown(markdown, opts.out)
        else:
            print(markdown, file=stream or sys.stdout)
        return {"status": "ok"}

    def write_markdown(self, markdown: str, out: str | Path) -> Path:
        """Write rendered markdown to ``out``; OSError propagates."""
        out_path = Path(out)
        out_path.write_text(markdown, encoding="utf-8")
        self.logger.info("Wrote overview to %s", out_path)
        return out_path

    def load_config(self, start: str | Path = ".") -> OverviewConfig:
        """Return the configuration of the repository containing ``start``."""
        return self._load_config(self.enumerator.resolve_root(start))

    def _load_config(self, root: Path) -> OverviewConfig:
        try:
            return load_config(root)
        except ConfigError as exc:
            self.logger.warning("Ignoring invalid configuration: %s", exc)
            return OverviewConfig(root=root)


def _first_set(*values: Optional[int]) -> int:
    for value in values:
        if value is not None:
            return value
    raise ValueError("No value provided")


def overview(options: OptionsLike = None) -> OverviewResult:
    """Return the structured overview for ``options`` using a default Summarizer."""
    return Summarizer().summarize(options)


def print_overview(options: OptionsLike = None) -> Dict[str, str]:
    """Print or write the markdown overview using a default Summarizer."""
    return Summarizer().write_report(options)


__all__ = ["Summarizer", "overview", "print_overview"]
