"""
pygit-fleet: GitHub Organization Repository Sync Tool

Keeps a local folder of repositories in line with a GitHub organization or
user: clones missing repositories, reports drifted ones, or force-resets them
to their remote default branch.
"""

from colorama import init as colorama_init

colorama_init(autoreset=True)

__version__ = "0.1.0"

# Re-export public API so `from pygit_fleet import X` keeps working.
from pygit_fleet.classifier import RepositoryClassifier  # noqa: E402
from pygit_fleet.cli import main  # noqa: E402
from pygit_fleet.config import create_argument_parser, load_config_file  # noqa: E402
from pygit_fleet.detector import DefaultBranchDetector  # noqa: E402
from pygit_fleet.forge import ForgeError, GhCliForge  # noqa: E402
from pygit_fleet.models import (  # noqa: E402
    Category,
    DriftReason,
    FleetConfig,
    OperationResult,
    OperationType,
    RepoResult,
    RepositoryRef,
    RepositoryStatus,
    ResolvedPaths,
    RunMode,
    RunOutcome,
)
from pygit_fleet.orchestrator import FleetOrchestrator  # noqa: E402
from pygit_fleet.output import (  # noqa: E402
    SECTION_WIDTH,
    ConsoleOutputHandler,
    NullOutputHandler,
)
from pygit_fleet.paths import find_repo_root, resolve_paths  # noqa: E402
from pygit_fleet.protocols import ForgeClient, GitRepository, OutputHandler  # noqa: E402
from pygit_fleet.reporter import SummaryReporter, describe_drift  # noqa: E402
from pygit_fleet.repository import GitPythonRepository  # noqa: E402
from pygit_fleet.scanner import RepositoryScanner, has_git_metadata  # noqa: E402
from pygit_fleet.strategies import (  # noqa: E402
    CloneStrategy,
    FetchReportStrategy,
    LocalRepositoryStrategy,
    RepositoryStrategy,
    UpdateResetStrategy,
)

__all__ = [
    "__version__",
    # Models
    "Category",
    "DriftReason",
    "FleetConfig",
    "OperationResult",
    "OperationType",
    "RepoResult",
    "RepositoryRef",
    "RepositoryStatus",
    "ResolvedPaths",
    "RunMode",
    "RunOutcome",
    # Protocols
    "ForgeClient",
    "GitRepository",
    "OutputHandler",
    # Implementations
    "GhCliForge",
    "ForgeError",
    "GitPythonRepository",
    "ConsoleOutputHandler",
    "NullOutputHandler",
    "SECTION_WIDTH",
    # Strategies
    "RepositoryStrategy",
    "CloneStrategy",
    "LocalRepositoryStrategy",
    "FetchReportStrategy",
    "UpdateResetStrategy",
    # Services
    "DefaultBranchDetector",
    "RepositoryClassifier",
    "RepositoryScanner",
    "FleetOrchestrator",
    "SummaryReporter",
    "describe_drift",
    "find_repo_root",
    "has_git_metadata",
    "resolve_paths",
    # Config / CLI
    "create_argument_parser",
    "load_config_file",
    "main",
]
