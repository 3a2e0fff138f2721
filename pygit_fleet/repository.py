"""Concrete GitPython-based repository implementation."""

from __future__ import annotations

import logging
from pathlib import Path

from git import GitCommandError, Repo

from pygit_fleet.models import OperationResult, OperationType


class GitPythonRepository:
    """Concrete implementation using GitPython"""

    def __init__(self, repo_path: Path):
        """Open a git repository at the given path."""
        self._path = repo_path
        self._repo = Repo(repo_path)
        self._logger = logging.getLogger(__name__)

    def close(self) -> None:
        """Release underlying git resources."""
        self._repo.close()

    @property
    def path(self) -> Path:
        """Absolute path to the repository root."""
        return self._path

    @property
    def current_branch(self) -> str | None:
        """Name of the checked-out branch, or None if HEAD is detached or unreadable."""
        try:
            if self._repo.head.is_detached:
                return None
            return self._repo.active_branch.name
        except (TypeError, ValueError, GitCommandError):
            return None

    def read_default_branch(self, remote: str = 'origin') -> str | None:
        """Read the recorded remote HEAD pointer (refs/remotes/<remote>/HEAD)."""
        prefix = f'refs/remotes/{remote}/'
        try:
            target = self._repo.git.symbolic_ref(f'{prefix}HEAD').strip()
        except GitCommandError:
            return None
        if not target.startswith(prefix):
            return None
        return target[len(prefix):] or None

    def set_default_branch_auto(self, remote: str = 'origin') -> OperationResult:
        """Ask git to query the remote and record its default branch."""
        try:
            self._repo.git.remote('set-head', remote, '--auto')
            return OperationResult(True, OperationType.SET_HEAD, f"Detected {remote}/HEAD")
        except GitCommandError as e:
            self._logger.debug("set-head --auto failed in %s: %s", self._path, e)
            return OperationResult(False, OperationType.SET_HEAD, "Default branch detection failed", e)

    def fetch(self, remote: str = 'origin') -> OperationResult:
        """Fetch from a remote, updating remote-tracking refs only."""
        try:
            self._repo.git.fetch(remote)
            return OperationResult(True, OperationType.FETCH, f"Fetched from {remote}")
        except GitCommandError as e:
            return OperationResult(False, OperationType.FETCH, "Fetch failed", e)

    def commit_id(self, ref: str) -> str | None:
        """Resolve a ref to a commit hash, or None if it does not exist."""
        try:
            return self._repo.git.rev_parse('--verify', '--quiet', f'{ref}^{{commit}}').strip() or None
        except GitCommandError:
            return None

    def is_dirty(self) -> bool | None:
        """Return True if tracked files have staged or unstaged changes. Untracked files are ignored."""
        try:
            return bool(self._repo.git.status('--porcelain', '--untracked-files=no').strip())
        except GitCommandError as e:
            self._logger.debug("status failed in %s: %s", self._path, e)
            return None

    def stash_count(self) -> int | None:
        """Number of stash entries, or None if the stash list cannot be read."""
        try:
            output = self._repo.git.stash('list')
        except GitCommandError as e:
            self._logger.debug("stash list failed in %s: %s", self._path, e)
            return None
        return len([line for line in output.splitlines() if line.strip()])

    def checkout(self, branch: str) -> OperationResult:
        """Check out a branch, discarding conflicting local modifications."""
        try:
            self._repo.git.checkout('--force', branch, '--')
            return OperationResult(True, OperationType.CHECKOUT, f"Checked out {branch}")
        except GitCommandError as e:
            return OperationResult(False, OperationType.CHECKOUT, "Checkout failed", e)

    def hard_reset(self, ref: str) -> OperationResult:
        """Reset the current branch, index and working tree to ref."""
        try:
            self._repo.git.reset('--hard', ref)
            return OperationResult(True, OperationType.RESET, f"Reset to {ref}")
        except GitCommandError as e:
            return OperationResult(False, OperationType.RESET, "Hard reset failed", e)

    def clean_untracked(self) -> OperationResult:
        """Remove untracked files and directories."""
        try:
            self._repo.git.clean('-fd')
            return OperationResult(True, OperationType.CLEAN, "Removed untracked files")
        except GitCommandError as e:
            return OperationResult(False, OperationType.CLEAN, "Clean failed", e)

    def clear_stashes(self) -> OperationResult:
        """Drop all stash entries."""
        try:
            self._repo.git.stash('clear')
            return OperationResult(True, OperationType.STASH_CLEAR, "Cleared stashes")
        except GitCommandError as e:
            return OperationResult(False, OperationType.STASH_CLEAR, "Stash clear failed", e)
