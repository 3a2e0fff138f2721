"""Repository scanner: lists the repositories inside an organization folder."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path


def has_git_metadata(path: Path) -> bool:
    """Return True if path contains a .git directory."""
    return (path / '.git').is_dir()


class RepositoryScanner:
    """Responsible for enumerating candidate repository folders"""

    def __init__(self, exclude_paths: list[Path] = None):
        """Create a scanner that never yields the given paths (compared resolved)."""
        self.exclude_paths = {p.resolve() for p in exclude_paths or []}

    def find_subdirectories(self, root: Path) -> Iterator[Path]:
        """Yield immediate subdirectories of root, sorted by name, minus excluded ones."""
        if not root.is_dir():
            return
        for child in sorted(root.iterdir(), key=lambda p: p.name):
            if not child.is_dir():
                continue
            if self._should_exclude(child):
                continue
            yield child

    def _should_exclude(self, path: Path) -> bool:
        """Return True if path resolves to an excluded directory."""
        return path.resolve() in self.exclude_paths
