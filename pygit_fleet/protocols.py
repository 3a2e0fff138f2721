"""Protocols for dependency injection."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from pygit_fleet.models import OperationResult


class GitRepository(Protocol):
    """Protocol for the git operations the reconciliation engine needs.

    Read accessors return None when the underlying command fails; mutators
    report failure through OperationResult instead of raising.
    """

    def read_default_branch(self, remote: str = 'origin') -> str | None: ...
    def set_default_branch_auto(self, remote: str = 'origin') -> OperationResult: ...
    def fetch(self, remote: str = 'origin') -> OperationResult: ...
    def commit_id(self, ref: str) -> str | None: ...
    def is_dirty(self) -> bool | None: ...
    def stash_count(self) -> int | None: ...
    def checkout(self, branch: str) -> OperationResult: ...
    def hard_reset(self, ref: str) -> OperationResult: ...
    def clean_untracked(self) -> OperationResult: ...
    def clear_stashes(self) -> OperationResult: ...
    def close(self) -> None: ...

    @property
    def path(self) -> Path: ...

    @property
    def current_branch(self) -> str | None: ...


class ForgeClient(Protocol):
    """Protocol for the hosted forge (repository listing and cloning)"""

    def ensure_available(self) -> None: ...
    def list_repositories(self, org: str, limit: int = 1000) -> list[str]: ...
    def clone(self, org: str, name: str, dest: Path) -> OperationResult: ...


class OutputHandler(Protocol):
    """Protocol for handling output"""

    def info(self, message: str, indent: int = 0) -> None: ...
    def success(self, message: str, indent: int = 0) -> None: ...
    def warning(self, message: str, indent: int = 0) -> None: ...
    def error(self, message: str, indent: int = 0) -> None: ...
    def section(self, title: str) -> None: ...
    def debug(self, message: str) -> None: ...
    def repo(self, tag: str, name: str, detail: str = '', level: str = 'warning') -> None: ...
    def tally(self, label: str, count: int, hint: str | None = None, width: int = 12) -> None: ...
