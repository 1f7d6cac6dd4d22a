"""CLI entrypoint for repo-overview."""

from __future__ import annotations

import argparse
import sys

from .logging import configure_logging
from .models import OverviewOptions
from .summarizer import Summarizer


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repo-overview",
        description="Print a bounded structural overview of a repository as markdown.",
    )
    parser.add_argument(
        "--dir",
        default=".",
        help="Directory inside the repository to summarise (defaults to current directory).",
    )
    parser.add_argument(
        "--out",
        default=None,
        help="Write the report to this file instead of stdout.",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Deepest tree level to render (default 3).",
    )
    parser.add_argument(
        "--max-nodes",
        type=int,
        default=None,
        help="Maximum number of tree lines before truncating (default 400).",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for repo-overview."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    summarizer = Summarizer()
    configure_logging(verbose=summarizer.load_config(args.dir).verbose)

    options = OverviewOptions(
        dir=args.dir,
        max_depth=args.max_depth,
        max_nodes=args.max_nodes,
        out=args.out,
    )
    try:
        summarizer.write_report(options)
    except OSError as exc:
        parser.exit(1, f"repo-overview failed: {exc}\n")


if __name__ == "__main__":
    main(sys.argv[1:])
