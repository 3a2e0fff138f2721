"""Repository state classification against the remote default branch."""

from __future__ import annotations

import logging

from pygit_fleet.models import RepositoryStatus
from pygit_fleet.protocols import GitRepository


class RepositoryClassifier:
    """Computes a RepositoryStatus for a local repository"""

    def __init__(self, remote_name: str = 'origin'):
        self.remote_name = remote_name
        self._logger = logging.getLogger(__name__)

    def classify(self, repo: GitRepository, default_branch: str) -> RepositoryStatus:
        """Fetch, then read each facet independently.

        A failed fetch leaves the remote-tracking ref at its last known position;
        the comparison still runs against it.
        """
        fetch_result = repo.fetch(self.remote_name)
        if not fetch_result.success:
            self._logger.warning("Fetch failed in %s: %s", repo.path, fetch_result.error or fetch_result.message)

        dirty = repo.is_dirty()
        return RepositoryStatus(
            default_branch=default_branch,
            current_branch=repo.current_branch,
            local_commit=repo.commit_id('HEAD'),
            remote_commit=repo.commit_id(f'refs/remotes/{self.remote_name}/{default_branch}'),
            working_tree_clean=dirty is False,
            stash_count=repo.stash_count(),
        )
