"""Git integration helpers."""

from .runner import GitClient, VersionControlUnavailable

__all__ = ["GitClient", "VersionControlUnavailable"]
