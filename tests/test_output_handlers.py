"""Tests for output handler implementations and the summary reporter."""

from pathlib import Path

from pygit_fleet import (
    Category,
    ConsoleOutputHandler,
    NullOutputHandler,
    RepoResult,
    RepositoryRef,
    RepositoryStatus,
    RunMode,
    RunOutcome,
    SummaryReporter,
    describe_drift,
)


class TestNullOutputHandler:
    """NullOutputHandler should accept all calls silently."""

    def test_all_methods(self, capsys):
        handler = NullOutputHandler()
        handler.info("test", indent=2)
        handler.success("test")
        handler.warning("test")
        handler.error("test")
        handler.section("title")
        handler.debug("test")
        handler.repo("STALE", "api", "dirty working tree")
        handler.tally("Cloned", 2)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""


class TestConsoleOutputHandler:
    def test_info_prints(self, capsys):
        handler = ConsoleOutputHandler()
        handler.info("hello")
        captured = capsys.readouterr()
        assert "hello" in captured.out

    def test_info_with_indent(self, capsys):
        handler = ConsoleOutputHandler()
        handler.info("hello", indent=2)
        captured = capsys.readouterr()
        assert captured.out.startswith("    ")  # 2 * "  "

    def test_error_goes_to_stderr(self, capsys):
        handler = ConsoleOutputHandler()
        handler.error("broken")
        captured = capsys.readouterr()
        assert "broken" in captured.err
        assert "broken" not in captured.out

    def test_section_prints(self, capsys):
        handler = ConsoleOutputHandler()
        handler.section("My Section")
        captured = capsys.readouterr()
        assert "My Section" in captured.out
        assert "---" in captured.out

    def test_debug_verbose(self, capsys):
        handler = ConsoleOutputHandler(verbose=True)
        handler.debug("debugging")
        captured = capsys.readouterr()
        assert "debugging" in captured.out

    def test_debug_non_verbose(self, capsys):
        handler = ConsoleOutputHandler(verbose=False)
        handler.debug("debugging")
        captured = capsys.readouterr()
        assert captured.out == ""

    def test_repo_line(self, capsys):
        handler = ConsoleOutputHandler()
        handler.repo("WARN", "web", "path exists without .git")
        out = capsys.readouterr().out
        assert out.startswith("  ")
        assert "WARN: web - path exists without .git" in out

    def test_repo_line_without_detail(self, capsys):
        handler = ConsoleOutputHandler()
        handler.repo("STALE", "api")
        out = capsys.readouterr().out
        assert "STALE: api" in out
        assert " - " not in out

    def test_repo_error_level_goes_to_stderr(self, capsys):
        handler = ConsoleOutputHandler()
        handler.repo("FAILED", "api", "Fetch failed", level="error")
        captured = capsys.readouterr()
        assert "FAILED: api - Fetch failed" in captured.err
        assert captured.out == ""

    def test_tally_aligns_counts(self, capsys):
        handler = ConsoleOutputHandler()
        handler.tally("Cloned", 2)
        handler.tally("Up to date", 10)
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].strip() == "Cloned:     2"
        assert lines[1].strip() == "Up to date: 10"
        assert lines[0].index("2") == lines[1].index("10")

    def test_tally_hint(self, capsys):
        handler = ConsoleOutputHandler()
        handler.tally("Skipped", 1, "not a git repo")
        assert "Skipped:    1 (not a git repo)" in capsys.readouterr().out


class TestDescribeDrift:
    def test_each_reason(self):
        status = RepositoryStatus(
            default_branch="main",
            current_branch="feature",
            local_commit="a",
            remote_commit="b",
            working_tree_clean=False,
            stash_count=3,
        )
        assert describe_drift(status) == (
            "on branch 'feature' (not 'main'), behind remote, dirty working tree, 3 stash(es)"
        )

    def test_detached_head(self):
        status = RepositoryStatus(default_branch="main", current_branch=None,
                                  local_commit="a", remote_commit="a",
                                  working_tree_clean=True, stash_count=0)
        assert describe_drift(status) == "on branch 'HEAD' (not 'main')"

    def test_up_to_date_is_empty(self):
        status = RepositoryStatus(default_branch="main", current_branch="main",
                                  local_commit="a", remote_commit="a",
                                  working_tree_clean=True, stash_count=0)
        assert describe_drift(status) == ""


class TestSummaryReporter:
    def _ref(self, name):
        return RepositoryRef(name, Path("/tmp/acme") / name)

    def test_clone_summary(self, capsys):
        outcome = RunOutcome(RunMode.CLONE)
        outcome.add(RepoResult(self._ref("api"), Category.SKIPPED))
        outcome.add(RepoResult(self._ref("web"), Category.CLONED))
        outcome.add(RepoResult(self._ref("cli"), Category.CLONED))

        SummaryReporter(ConsoleOutputHandler()).print_summary(outcome)
        out = capsys.readouterr().out
        assert "Summary:" in out
        assert "Cloned list: web cli" in out
        assert "Skipped list: api" in out
        assert "Failed" not in out
        assert "DRY RUN" not in out

    def test_fetch_summary_lists_reasons(self, capsys):
        status = RepositoryStatus(default_branch="main", current_branch="main",
                                  local_commit="a", remote_commit="a",
                                  working_tree_clean=False, stash_count=0)
        outcome = RunOutcome(RunMode.FETCH, dry_run=True)
        outcome.add(RepoResult(self._ref("api"), Category.STALE, status.drift_reasons, status))

        SummaryReporter(ConsoleOutputHandler()).print_summary(outcome)
        out = capsys.readouterr().out
        assert "Stale list: api" in out
        assert "STALE: api - dirty working tree" in out
        assert "DRY RUN" in out

    def test_failures_reported(self, capsys):
        outcome = RunOutcome(RunMode.UPDATE)
        outcome.add(RepoResult(self._ref("api"), Category.FAILED, details="Hard reset failed"))

        SummaryReporter(ConsoleOutputHandler()).print_summary(outcome)
        captured = capsys.readouterr()
        assert f"FAILED: {Path('/tmp/acme/api')} - Hard reset failed" in captured.err
        assert "Failed repositories" in captured.err
        assert "Hard reset failed" not in captured.out
        assert "Failed:" in captured.out
