"""CLI behaviour tests."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

import pytest

from repo_overview.cli import _build_parser, main
from repo_overview.git import GitClient
from repo_overview.logging import get_logger
from tests._fixtures.repo_builder import RepoBuilder


def test_cli_defaults() -> None:
    args = _build_parser().parse_args([])
    assert args.dir == "."
    assert args.out is None
    assert args.max_depth is None
    assert args.max_nodes is None


def test_cli_accepts_all_flags() -> None:
    args = _build_parser().parse_args(
        ["--dir", "repo", "--out", "OVERVIEW.md", "--max-depth", "2", "--max-nodes", "50"]
    )
    assert args.dir == "repo"
    assert args.out == "OVERVIEW.md"
    assert args.max_depth == 2
    assert args.max_nodes == 50


def test_cli_rejects_unknown_flags() -> None:
    with pytest.raises(SystemExit) as excinfo:
        _build_parser().parse_args(["--verbose"])
    assert excinfo.value.code == 2


def test_main_prints_report_to_stdout(repo_builder: RepoBuilder, no_git, capsys) -> None:
    repo_builder.write({"README.md": "# Hello\n", "src/main.py": "print('hi')\n"})

    main(["--dir", str(repo_builder.path())])

    captured = capsys.readouterr()
    assert captured.out.startswith("# repo — Repository Overview\n\n_Readme:_ # Hello\n")
    assert "- Files tracked (approx): 2\n" in captured.out
    assert "- Top languages: Markdown (1), Python (1)\n" in captured.out


def test_main_writes_report_file(repo_builder: RepoBuilder, no_git, tmp_path: Path) -> None:
    repo_builder.write({"a/b/c/d/e.txt": "x"})
    out = tmp_path / "OVERVIEW.md"

    main(["--dir", str(repo_builder.path()), "--out", str(out), "--max-depth", "1"])

    text = out.read_text(encoding="utf-8")
    assert "└─ a\n  └─ b\n```" in text


def test_main_exits_when_output_unwritable(repo_builder: RepoBuilder, no_git, tmp_path: Path, capsys) -> None:
    out = tmp_path / "missing" / "OVERVIEW.md"

    with pytest.raises(SystemExit) as excinfo:
        main(["--dir", str(repo_builder.path()), "--out", str(out)])

    assert excinfo.value.code == 1
    assert "repo-overview failed" in capsys.readouterr().err


def _snapshot(root: Path) -> set[str]:
    return {str(path.relative_to(root)) for path in root.rglob("*")}


@pytest.mark.parametrize("target", ["ABSOLUTE", "../outside/pwned.log"])
def test_repository_config_cannot_redirect_log_output(
    repo_builder: RepoBuilder, no_git, tmp_path: Path, target: str
) -> None:
    outside = tmp_path / "outside" / "pwned.log"
    log_target = str(outside) if target == "ABSOLUTE" else target
    repo_builder.write(
        {
            ".repo-overview.yml": f"logging:\n  verbose: true\n  file: {log_target}\n",
            "src/app.py": "print('hi')\n",
        }
    )
    before = _snapshot(tmp_path)
    out = tmp_path / "OVERVIEW.md"

    main(["--dir", str(repo_builder.path()), "--out", str(out)])

    assert out.exists()
    assert not outside.exists()
    assert _snapshot(tmp_path) == before | {"OVERVIEW.md"}


def test_config_read_from_resolved_root(repo_builder: RepoBuilder, monkeypatch, capsys) -> None:
    root = repo_builder.path()
    repo_builder.write(
        {
            ".repo-overview.yml": "tree:\n  max_depth: 0\nlogging:\n  verbose: true\n",
            "sub/deep/module.py": "pass\n",
        }
    )

    def runner(args, *, cwd):  # type: ignore[no-untyped-def]
        args = list(args)
        if "ls-files" in args:
            raise subprocess.CalledProcessError(1, args)
        return f"{root}\n"

    monkeypatch.setattr(GitClient, "_default_runner", staticmethod(runner))

    main(["--dir", str(root / "sub")])

    out = capsys.readouterr().out
    assert "└─ sub\n```" in out
    assert "deep" not in out
    assert get_logger().level == logging.DEBUG
