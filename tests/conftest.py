from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from repo_overview.git import GitClient
from repo_overview.logging import get_logger
from tests._fixtures.repo_builder import RepoBuilder, no_git_runner


@pytest.fixture
def repo_builder(tmp_path: Path) -> RepoBuilder:
    """Provide a reusable repo builder rooted at the pytest tmp_path."""
    return RepoBuilder(tmp_path)


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    yield
    logger = get_logger()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def no_git(monkeypatch) -> None:
    """Make every default GitClient behave as if git were unavailable."""
    monkeypatch.setattr(GitClient, "_default_runner", staticmethod(no_git_runner))
