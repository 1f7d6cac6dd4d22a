"""Bounded structural overviews of source repositories."""

from .models import MAX_KEYFILES, MAX_NODES, MAX_TREE_DEPTH, OverviewOptions, OverviewResult
from .summarizer import Summarizer, overview, print_overview

__all__ = [
    "MAX_KEYFILES",
    "MAX_NODES",
    "MAX_TREE_DEPTH",
    "OverviewOptions",
    "OverviewResult",
    "Summarizer",
    "overview",
    "print_overview",
]
