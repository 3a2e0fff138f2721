"""FleetOrchestrator: the reconciliation engine."""

from __future__ import annotations

import logging
from pathlib import Path

from git import InvalidGitRepositoryError, NoSuchPathError
from tqdm import tqdm

from pygit_fleet.forge import GhCliForge
from pygit_fleet.models import (
    Category,
    FleetConfig,
    RepoResult,
    RepositoryRef,
    ResolvedPaths,
    RunMode,
    RunOutcome,
)
from pygit_fleet.paths import resolve_paths
from pygit_fleet.protocols import ForgeClient, OutputHandler
from pygit_fleet.repository import GitPythonRepository
from pygit_fleet.scanner import RepositoryScanner
from pygit_fleet.strategies import (
    CloneStrategy,
    FetchReportStrategy,
    RepoFactory,
    RepositoryStrategy,
    UpdateResetStrategy,
)


class FleetOrchestrator:
    """Main orchestrator - resolves paths, picks a mode, and processes every repository"""

    def __init__(
        self,
        config: FleetConfig,
        output: OutputHandler,
        forge: ForgeClient = None,
        repo_factory: RepoFactory = GitPythonRepository,
    ):
        """Create an orchestrator. The forge defaults to the gh CLI."""
        self.config = config
        self.output = output
        self.forge = forge or GhCliForge()
        self.repo_factory = repo_factory
        self._logger = logging.getLogger(__name__)

    def run(self, start_dir: Path) -> RunOutcome:
        """Reconcile the organization folder derived from start_dir. ForgeError propagates."""
        paths = resolve_paths(start_dir, self.config.org)
        if not paths.anchor_found:
            self._logger.debug("No enclosing git repository for %s, using it as root", start_dir)

        paths.target_root.mkdir(parents=True, exist_ok=True)

        if self.config.dry_run:
            self.output.info("DRY RUN: no changes will be made")
        self.output.info(f"Target folder: {paths.target_root}")

        if self.config.mode is RunMode.FETCH:
            self.output.info(f"Checking repo status for org/user: {paths.org}")
            refs = self._local_refs(paths)
            strategy = FetchReportStrategy(self.output, self.config, self.repo_factory)
        elif self.config.mode is RunMode.UPDATE:
            self.output.info(f"Updating existing repos for org/user: {paths.org}")
            refs = self._local_refs(paths)
            strategy = UpdateResetStrategy(self.output, self.config, self.repo_factory)
        else:
            self.output.info(f"Cloning missing repos from org/user: {paths.org}")
            refs = self._remote_refs(paths)
            if not refs:
                self.output.info(f"No repositories found for org: {paths.org}")
            strategy = CloneStrategy(self.output, self.config, self.forge, paths.org)

        return self._process_all(refs, strategy)

    def _remote_refs(self, paths: ResolvedPaths) -> list[RepositoryRef]:
        """Expected local locations of every remote repository, in forge order."""
        self.forge.ensure_available()
        names = self.forge.list_repositories(paths.org, self.config.limit)
        return [RepositoryRef(name, paths.target_root / name) for name in names]

    def _local_refs(self, paths: ResolvedPaths) -> list[RepositoryRef]:
        """Immediate subfolders of the organization folder, minus the hosting repository."""
        scanner = RepositoryScanner([paths.repo_root])
        return [RepositoryRef(p.name, p) for p in scanner.find_subdirectories(paths.target_root)]

    def _process_all(self, refs: list[RepositoryRef], strategy: RepositoryStrategy) -> RunOutcome:
        """Process repositories one at a time with a progress bar."""
        outcome = RunOutcome(self.config.mode, self.config.dry_run)
        disable = self.config.dry_run or self.config.json_output or not refs

        with tqdm(total=len(refs), desc="Processing", unit="repo", disable=disable) as pbar:
            for ref in refs:
                pbar.set_postfix_str(ref.name, refresh=True)
                outcome.add(self._process_single(ref, strategy))
                pbar.update(1)

        return outcome

    def _process_single(self, ref: RepositoryRef, strategy: RepositoryStrategy) -> RepoResult:
        """Run the strategy on one repository, turning errors into a FAILED result."""
        try:
            return strategy.process(ref)
        except (InvalidGitRepositoryError, NoSuchPathError):
            self.output.error(f"Not a valid git repository: {ref.path}")
            return RepoResult(ref, Category.FAILED, details="Invalid git repository")
        except Exception as e:
            self._logger.debug("Unexpected error in %s", ref.path, exc_info=True)
            self.output.error(f"Unexpected error in {ref.path}: {e}")
            return RepoResult(ref, Category.FAILED, details=f"Unexpected error: {e}")
