"""Path resolution: anchor repository, organization and base folders."""

from __future__ import annotations

from pathlib import Path

from pygit_fleet.models import ResolvedPaths
from pygit_fleet.scanner import has_git_metadata


def find_repo_root(start: Path) -> Path | None:
    """Walk upward from start to the nearest directory holding a .git directory."""
    current = start.resolve()
    for candidate in (current, *current.parents):
        if has_git_metadata(candidate):
            return candidate
    return None


def resolve_paths(start: Path, org: str | None = None) -> ResolvedPaths:
    """Derive the repository root, organization root and base root from start.

    When no enclosing repository exists, start itself acts as the root. Near the
    filesystem root, Path.parent returns the path itself, so missing ancestors
    collapse onto the nearest existing one.
    """
    start = start.resolve()
    repo_root = find_repo_root(start)
    anchor_found = repo_root is not None
    if repo_root is None:
        repo_root = start

    org_root = repo_root.parent
    base_root = org_root.parent

    return ResolvedPaths(
        start_dir=start,
        repo_root=repo_root,
        anchor_found=anchor_found,
        org_root=org_root,
        base_root=base_root,
        org=org or repo_root.name,
    )
