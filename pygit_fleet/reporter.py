"""SummaryReporter: renders run outcomes as text."""

from __future__ import annotations

from pygit_fleet.models import Category, DriftReason, RepositoryStatus, RunMode, RunOutcome
from pygit_fleet.output import SECTION_WIDTH
from pygit_fleet.protocols import OutputHandler

CATEGORY_LABELS = {
    Category.CLONED: "Cloned",
    Category.STALE: "Stale",
    Category.UPTODATE: "Up to date",
    Category.UPDATED: "Updated",
    Category.SKIPPED: "Skipped",
    Category.WARNED: "Warned",
    Category.FAILED: "Failed",
}

MODE_HINTS = {
    (RunMode.CLONE, Category.WARNED): "path exists without .git",
    (RunMode.FETCH, Category.SKIPPED): "not a git repo",
    (RunMode.FETCH, Category.WARNED): "no default branch",
    (RunMode.UPDATE, Category.SKIPPED): "not a git repo",
    (RunMode.UPDATE, Category.WARNED): "no default branch",
}


def describe_reason(reason: DriftReason, status: RepositoryStatus) -> str:
    """Render one drift reason as text."""
    if reason is DriftReason.WRONG_BRANCH:
        current = status.current_branch or 'HEAD'
        return f"on branch '{current}' (not '{status.default_branch}')"
    if reason is DriftReason.BEHIND_REMOTE:
        return "behind remote"
    if reason is DriftReason.DIRTY_TREE:
        return "dirty working tree"
    if status.stash_count is None:
        return "unreadable stash list"
    return f"{status.stash_count} stash(es)"


def describe_drift(status: RepositoryStatus) -> str:
    """Render every drifted facet of a status, comma separated."""
    return ', '.join(describe_reason(r, status) for r in status.drift_reasons)


class SummaryReporter:
    """Generates and displays summary reports"""

    def __init__(self, output: OutputHandler):
        """Create a reporter that writes to the given output handler."""
        self.output = output

    def print_summary(self, outcome: RunOutcome):
        """Print per-category counts, name lists, and stale or failed details."""
        self.output.section("Summary:")

        for category in outcome.categories:
            count = len(outcome.get_by_category(category))
            if category is Category.FAILED and not count:
                continue
            self.output.tally(CATEGORY_LABELS[category], count, MODE_HINTS.get((outcome.mode, category)))

        self.output.info("")
        for category in outcome.categories:
            names = outcome.names(category)
            if names:
                self.output.info(f"{CATEGORY_LABELS[category]} list: {' '.join(names)}", indent=1)

        self._print_stale_details(outcome)
        self._print_failures(outcome)

        if outcome.dry_run:
            self.output.info("")
            self.output.info("This was a DRY RUN - no changes were made")
        self.output.info("=" * SECTION_WIDTH)

    def _print_stale_details(self, outcome: RunOutcome):
        """List the drift reasons of each stale repository."""
        stale = [r for r in outcome.get_by_category(Category.STALE) if r.status is not None]
        if not stale:
            return
        self.output.info("")
        self.output.warning("Stale repositories:")
        for result in stale:
            self.output.repo("STALE", result.name, describe_drift(result.status))

    def _print_failures(self, outcome: RunOutcome):
        """List repositories that could not be processed."""
        failed = outcome.get_by_category(Category.FAILED)
        if not failed:
            return
        self.output.info("")
        self.output.error("Failed repositories:")
        for result in failed:
            self.output.repo("FAILED", str(result.ref.path), result.details, level='error')
