"""Forge client backed by the GitHub CLI (gh)."""

from __future__ import annotations

import json
import logging
import shutil
import subprocess
from pathlib import Path

from pygit_fleet.models import OperationResult, OperationType

DEFAULT_LIMIT = 1000


class ForgeError(RuntimeError):
    """The forge client is missing, unauthenticated, or a listing failed."""


class GhCliForge:
    """Lists and clones repositories through the gh executable"""

    def __init__(self, executable: str = 'gh'):
        """Create a client that invokes the given gh executable."""
        self.executable = executable
        self._logger = logging.getLogger(__name__)

    def _run(self, *args: str) -> subprocess.CompletedProcess:
        """Run gh with the given arguments, capturing text output."""
        cmd = [self.executable, *args]
        self._logger.debug("Running %s", ' '.join(cmd))
        return subprocess.run(cmd, capture_output=True, text=True, check=True)

    def ensure_available(self) -> None:
        """Raise ForgeError unless gh is installed and runs."""
        if shutil.which(self.executable) is None:
            raise ForgeError(
                f"{self.executable} CLI not found. Install it from https://cli.github.com/ "
                f"and run '{self.executable} auth login'."
            )
        try:
            self._run('--version')
        except (OSError, subprocess.CalledProcessError) as e:
            raise ForgeError(f"{self.executable} CLI is not usable: {e}") from e

    def list_repositories(self, org: str, limit: int = DEFAULT_LIMIT) -> list[str]:
        """Return the names of every repository owned by org, in forge order."""
        try:
            proc = self._run('repo', 'list', org, '--limit', str(limit), '--json', 'name')
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or '').strip() or f"exit status {e.returncode}"
            raise ForgeError(f"Failed to list repositories for {org}: {detail}") from e
        except OSError as e:
            raise ForgeError(f"Failed to run {self.executable}: {e}") from e

        try:
            entries = json.loads(proc.stdout or '[]')
        except json.JSONDecodeError as e:
            raise ForgeError(f"Unexpected output from {self.executable} repo list: {e}") from e
        return [entry['name'] for entry in entries if entry.get('name')]

    def clone(self, org: str, name: str, dest: Path) -> OperationResult:
        """Clone org/name into dest."""
        try:
            self._run('repo', 'clone', f'{org}/{name}', str(dest))
            return OperationResult(True, OperationType.CLONE, f"Cloned {org}/{name}")
        except subprocess.CalledProcessError as e:
            message = (e.stderr or '').strip() or "Clone failed"
            return OperationResult(False, OperationType.CLONE, message, e)
        except OSError as e:
            return OperationResult(False, OperationType.CLONE, "Clone failed", e)
