"""Mode strategies: what each reconciliation mode does to one repository."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path

from pygit_fleet.classifier import RepositoryClassifier
from pygit_fleet.detector import DefaultBranchDetector
from pygit_fleet.models import (
    Category,
    FleetConfig,
    OperationResult,
    RepoResult,
    RepositoryRef,
)
from pygit_fleet.protocols import ForgeClient, GitRepository, OutputHandler
from pygit_fleet.reporter import describe_drift
from pygit_fleet.scanner import has_git_metadata

RepoFactory = Callable[[Path], GitRepository]


class RepositoryStrategy(ABC):
    """Abstract strategy for processing a single repository."""

    def __init__(self, output: OutputHandler, config: FleetConfig):
        """Initialize with an output handler and run configuration."""
        self.output = output
        self.config = config

    @abstractmethod
    def process(self, ref: RepositoryRef) -> RepoResult:
        """Process the repository and return its categorized outcome."""
        pass


class CloneStrategy(RepositoryStrategy):
    """Clones a remote repository unless something already occupies its path."""

    def __init__(self, output: OutputHandler, config: FleetConfig, forge: ForgeClient, org: str):
        super().__init__(output, config)
        self.forge = forge
        self.org = org

    def process(self, ref: RepositoryRef) -> RepoResult:
        """Skip existing clones, warn on name collisions, clone the rest."""
        if has_git_metadata(ref.path):
            return RepoResult(ref, Category.SKIPPED, details="already cloned")

        if ref.path.exists():
            self.output.repo("WARN", ref.name, f"{ref.path} exists but is not a git repository")
            return RepoResult(ref, Category.WARNED, details="path exists without .git")

        if self.config.dry_run:
            self.output.info(f"[DRY RUN] Would clone {self.org}/{ref.name} -> {ref.path}", indent=1)
            return RepoResult(ref, Category.CLONED)

        self.output.info(f"Cloning {self.org}/{ref.name}...", indent=1)
        result = self.forge.clone(self.org, ref.name, ref.path)
        if result.success:
            self.output.success(f"✓ Cloned {ref.name}", indent=1)
            return RepoResult(ref, Category.CLONED)

        self.output.error(f"✗ Clone failed: {result.message}", indent=1)
        return RepoResult(ref, Category.FAILED, details=f"Clone failed: {result.message}")


class LocalRepositoryStrategy(RepositoryStrategy):
    """Shared flow for modes that walk existing local repositories.

    Non-repositories are skipped, repositories without a detectable default
    branch are warned, everything else is handed to `handle`.
    """

    def __init__(
        self,
        output: OutputHandler,
        config: FleetConfig,
        repo_factory: RepoFactory,
    ):
        super().__init__(output, config)
        self.repo_factory = repo_factory
        self.detector = DefaultBranchDetector(config.remote_name)
        self.classifier = RepositoryClassifier(config.remote_name)

    def process(self, ref: RepositoryRef) -> RepoResult:
        """Open the repository, detect its default branch, and delegate."""
        if not has_git_metadata(ref.path):
            self.output.debug(f"Skipping {ref.name}: not a git repository")
            return RepoResult(ref, Category.SKIPPED, details="not a git repository")

        repo = self.repo_factory(ref.path)
        try:
            default_branch = self.detector.detect(repo)
            if default_branch is None:
                self.output.repo("WARN", ref.name, "cannot detect default branch, skipping")
                return RepoResult(ref, Category.WARNED, details="cannot detect default branch")
            return self.handle(repo, ref, default_branch)
        finally:
            repo.close()

    @abstractmethod
    def handle(self, repo: GitRepository, ref: RepositoryRef, default_branch: str) -> RepoResult:
        """Act on a repository whose default branch is known."""
        pass


class FetchReportStrategy(LocalRepositoryStrategy):
    """Read-only: reports whether a repository drifted from its remote default branch."""

    def handle(self, repo: GitRepository, ref: RepositoryRef, default_branch: str) -> RepoResult:
        status = self.classifier.classify(repo, default_branch)
        if status.is_stale:
            self.output.repo("STALE", ref.name, describe_drift(status))
            return RepoResult(ref, Category.STALE, status.drift_reasons, status)
        return RepoResult(ref, Category.UPTODATE, status=status)


class UpdateResetStrategy(LocalRepositoryStrategy):
    """Destructive: forces a drifted repository back to its remote default branch."""

    def handle(self, repo: GitRepository, ref: RepositoryRef, default_branch: str) -> RepoResult:
        status = self.classifier.classify(repo, default_branch)
        if not status.is_stale:
            return RepoResult(ref, Category.UPTODATE, status=status)

        # Full ref name, so a local branch called "origin/main" cannot shadow it
        target = f'refs/remotes/{self.config.remote_name}/{default_branch}'
        shown = f'{self.config.remote_name}/{default_branch}'
        if self.config.dry_run:
            self.output.info(f"[DRY RUN] Would reset {ref.name} to {shown}", indent=1)
            return RepoResult(ref, Category.UPDATED, status.drift_reasons, status)

        self.output.info(f"Resetting {ref.name} to {shown} ...", indent=1)
        steps: list[Callable[[], OperationResult]] = [
            lambda: repo.checkout(default_branch),
            lambda: repo.hard_reset(target),
            repo.clean_untracked,
            repo.clear_stashes,
        ]
        for step in steps:
            result = step()
            if not result.success:
                detail = f"{result.message}: {result.error}" if result.error else result.message
                self.output.error(f"✗ {ref.name}: {detail}", indent=1)
                return RepoResult(ref, Category.FAILED, status.drift_reasons, status, detail)

        self.output.success(f"✓ Reset {ref.name}", indent=1)
        return RepoResult(ref, Category.UPDATED, status.drift_reasons, status)
