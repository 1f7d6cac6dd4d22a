"""Markdown rendering of repository overviews."""

from __future__ import annotations

from typing import List

from .models import OverviewResult

TOP_LANGUAGES = 5

NOTES_FOR_LLMS = (
    "- Tree is truncated for token efficiency (depth & node caps).",
    "- Prefer README+build files to infer run/build/test.",
    "- For Polylith: look for `components/`, `bases/`, `projects/`, `development/`.",
)


def format_languages(result: OverviewResult, limit: int = TOP_LANGUAGES) -> str:
    return ", ".join(f"{language} ({count})" for language, count in result.languages[:limit])


def render_markdown(result: OverviewResult) -> str:
    """Return the overview report as markdown text ending in a newline."""
    lines: List[str] = [f"# {result.name} — Repository Overview"]
    if result.readme_headline is not None:
        lines.extend(["", f"_Readme:_ {result.readme_headline}"])

    lines.extend(
        [
            "",
            "## Quick Stats",
            f"- Files tracked (approx): {result.file_count}",
            f"- Top languages: {format_languages(result)}",
            "",
            "## Key Files & Directories",
        ]
    )
    lines.extend(f"- {path}" for path in result.keyfiles)
    lines.extend(
        [
            "",
            "## Structure (max depth capped)",
            "```text",
            result.tree,
            "```",
            "",
            "## Notes for LLMs",
        ]
    )
    lines.extend(NOTES_FOR_LLMS)
    return "\n".join(lines) + "\n"


__all__ = ["render_markdown", "format_languages"]
