"""Domain models: enums, dataclasses, and configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any


class RunMode(Enum):
    """Reconciliation modes"""
    CLONE = auto()
    FETCH = auto()
    UPDATE = auto()


class Category(Enum):
    """Per-repository outcome categories"""
    CLONED = auto()
    STALE = auto()
    UPTODATE = auto()
    UPDATED = auto()
    SKIPPED = auto()
    WARNED = auto()
    FAILED = auto()


MODE_CATEGORIES: dict[RunMode, tuple[Category, ...]] = {
    RunMode.CLONE: (Category.CLONED, Category.SKIPPED, Category.WARNED, Category.FAILED),
    RunMode.FETCH: (Category.STALE, Category.UPTODATE, Category.SKIPPED, Category.WARNED,
                    Category.FAILED),
    RunMode.UPDATE: (Category.UPDATED, Category.UPTODATE, Category.SKIPPED, Category.WARNED,
                     Category.FAILED),
}


class DriftReason(Enum):
    """Ways a local repository can diverge from its remote default branch"""
    WRONG_BRANCH = auto()
    BEHIND_REMOTE = auto()
    DIRTY_TREE = auto()
    HAS_STASHES = auto()


class OperationType(Enum):
    """Types of git and forge operations"""
    FETCH = auto()
    SET_HEAD = auto()
    CHECKOUT = auto()
    RESET = auto()
    CLEAN = auto()
    STASH_CLEAR = auto()
    CLONE = auto()


@dataclass(frozen=True)
class OperationResult:
    """Result of a single git or forge operation"""
    success: bool
    operation: OperationType
    message: str
    error: Exception | None = None


@dataclass(frozen=True)
class RepositoryRef:
    """A repository identified by name and local path"""
    name: str
    path: Path


@dataclass(frozen=True)
class RepositoryStatus:
    """Snapshot of a local repository relative to its remote default branch.

    A facet that could not be read is stored as None and counts as drift.
    """
    default_branch: str
    current_branch: str | None = None
    local_commit: str | None = None
    remote_commit: str | None = None
    working_tree_clean: bool = False
    stash_count: int | None = None

    @property
    def on_default_branch(self) -> bool:
        return self.current_branch is not None and self.current_branch == self.default_branch

    @property
    def in_sync_with_remote(self) -> bool:
        return self.local_commit is not None and self.local_commit == self.remote_commit

    @property
    def drift_reasons(self) -> tuple[DriftReason, ...]:
        """Drifted facets, in a fixed order."""
        reasons = []
        if not self.on_default_branch:
            reasons.append(DriftReason.WRONG_BRANCH)
        if not self.in_sync_with_remote:
            reasons.append(DriftReason.BEHIND_REMOTE)
        if not self.working_tree_clean:
            reasons.append(DriftReason.DIRTY_TREE)
        if self.stash_count is None or self.stash_count > 0:
            reasons.append(DriftReason.HAS_STASHES)
        return tuple(reasons)

    @property
    def is_stale(self) -> bool:
        return bool(self.drift_reasons)


@dataclass(frozen=True)
class RepoResult:
    """Outcome of processing one repository"""
    ref: RepositoryRef
    category: Category
    reasons: tuple[DriftReason, ...] = ()
    status: RepositoryStatus | None = None
    details: str = ''

    @property
    def name(self) -> str:
        return self.ref.name


@dataclass
class RunOutcome:
    """Mutable result accumulator for one invocation"""
    mode: RunMode
    dry_run: bool = False
    results: list[RepoResult] = field(default_factory=list)

    @property
    def categories(self) -> tuple[Category, ...]:
        """Categories that can occur in this run's mode."""
        return MODE_CATEGORIES[self.mode]

    @property
    def total(self) -> int:
        return len(self.results)

    def add(self, result: RepoResult) -> None:
        """Record the outcome for one repository."""
        if result.category not in self.categories:
            raise ValueError(f"{result.category.name} is not a {self.mode.name} outcome")
        self.results.append(result)

    def get_by_category(self, category: Category) -> list[RepoResult]:
        """Filter results by category, preserving processing order."""
        return [r for r in self.results if r.category == category]

    def names(self, category: Category) -> list[str]:
        """Repository names in a category, preserving processing order."""
        return [r.name for r in self.get_by_category(category)]

    def has_failures(self) -> bool:
        """Return True if any repository ended in the FAILED category."""
        return any(r.category == Category.FAILED for r in self.results)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict for JSON output."""
        return {
            'mode': self.mode.name.lower(),
            'dry_run': self.dry_run,
            'total': self.total,
            'categories': {
                c.name.lower(): self.names(c) for c in self.categories
            },
            'repositories': [
                {
                    'name': r.name,
                    'path': str(r.ref.path),
                    'category': r.category.name.lower(),
                    'reasons': [reason.name.lower() for reason in r.reasons],
                    'details': r.details,
                }
                for r in self.results
            ],
            'has_failures': self.has_failures(),
        }


@dataclass(frozen=True)
class ResolvedPaths:
    """Directories derived from the anchor repository"""
    start_dir: Path
    repo_root: Path
    anchor_found: bool
    org_root: Path
    base_root: Path
    org: str

    @property
    def target_root(self) -> Path:
        """Folder holding the target organization's repositories."""
        return self.base_root / self.org


@dataclass(frozen=True)
class FleetConfig:
    """Configuration for a reconciliation run"""
    org: str | None = None
    mode: RunMode = RunMode.CLONE
    dry_run: bool = False
    remote_name: str = 'origin'
    limit: int = 1000
    verbose: bool = False
    json_output: bool = False

