"""Default branch detection."""

from __future__ import annotations

import logging

from pygit_fleet.protocols import GitRepository


class DefaultBranchDetector:
    """Finds the remote's default branch for a local repository.

    Older or hand-initialized clones may lack refs/remotes/<remote>/HEAD, so a
    missing pointer triggers one `remote set-head --auto` followed by a second
    read. A third read would see the same state, so there is none.
    """

    def __init__(self, remote_name: str = 'origin'):
        self.remote_name = remote_name
        self._logger = logging.getLogger(__name__)

    def detect(self, repo: GitRepository) -> str | None:
        """Return the default branch name, or None if it cannot be determined."""
        branch = repo.read_default_branch(self.remote_name)
        if branch:
            return branch

        self._logger.debug("%s/HEAD not recorded in %s, asking remote", self.remote_name, repo.path)
        result = repo.set_default_branch_auto(self.remote_name)
        if not result.success:
            self._logger.debug("Auto-detection failed in %s: %s", repo.path, result.message)

        return repo.read_default_branch(self.remote_name) or None
