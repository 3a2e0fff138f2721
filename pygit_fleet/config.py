"""Configuration: argument parser and config file loader."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore[no-redef]

CONFIG_FILENAME = '.fleetrc.toml'


def create_argument_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser with all pygit-fleet flags."""
    # Lazy import to avoid circular dependency with __init__.py
    from pygit_fleet import __version__

    parser = argparse.ArgumentParser(
        prog='pygit-fleet',
        description="Keep a local folder of repositories in line with a GitHub org or user",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Folder layout: BASE/<org-of-this-repo>/<this-repo>; repositories of --org live in BASE/<org>.

Examples:
  %(prog)s --org acme                   # Clone repositories missing locally
  %(prog)s --org acme --dry-run         # Preview what would be cloned
  %(prog)s --org acme --fetch           # Report repositories that drifted (read-only)
  %(prog)s --org acme --update          # Hard-reset drifted repositories to the remote
        """
    )

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-o', '--org', default=None,
                       help="Organization or user (default: name of the enclosing repository's folder)")
    parser.add_argument('-d', '-n', '--dry-run', dest='dry_run', action='store_true',
                       help='Only print what would be done')

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument('-f', '--fetch', action='store_true',
                      help='Fetch and report stale repositories (read-only)')
    mode.add_argument('-u', '--update', action='store_true',
                      help='Hard-reset every existing repository to its remote default branch')

    parser.add_argument('--root', default='.',
                       help='Directory to resolve the enclosing repository from (default: current)')
    parser.add_argument('--remote', default='origin',
                       help='Remote name to compare against (default: origin)')
    parser.add_argument('--limit', type=int, default=1000,
                       help='Maximum number of repositories to list in clone mode (default: 1000)')
    parser.add_argument('-v', '--verbose', action='store_true',
                       help='Verbose output')
    parser.add_argument('--json', dest='json_output', action='store_true',
                       help='Output results as JSON (suppresses normal output)')
    parser.add_argument('--config', type=str, default=None,
                       help=f'Path to config file (default: {CONFIG_FILENAME} in root dir or home)')

    return parser


# .fleetrc.toml key -> (argparse dest, accepted type)
FILE_SETTINGS: dict[str, tuple[str, type]] = {
    'org': ('org', str),
    'dry_run': ('dry_run', bool),
    'remote_name': ('remote', str),
    'limit': ('limit', int),
    'verbose': ('verbose', bool),
    'json_output': ('json_output', bool),
}


def find_config_file(search_dir: Path, config_path: str | None = None) -> Path | None:
    """Explicit --config path, else .fleetrc.toml in search_dir, else in the home directory."""
    if config_path:
        path = Path(config_path)
        if path.is_file():
            return path
        print(f"Warning: Config file '{config_path}' not found. Ignoring.")
        return None
    for path in (search_dir / CONFIG_FILENAME, Path.home() / CONFIG_FILENAME):
        if path.is_file():
            return path
    return None


def map_file_settings(raw: dict[str, Any], source: Path | str = CONFIG_FILENAME) -> dict[str, Any]:
    """Translate file keys into parser defaults, dropping unknown keys and wrong types."""
    defaults: dict[str, Any] = {}
    for key, value in raw.items():
        if key not in FILE_SETTINGS:
            print(f"Warning: Unknown setting '{key}' in {source}. Ignoring.")
            continue
        dest, expected = FILE_SETTINGS[key]
        # bool is an int subclass; a limit of `true` is still wrong
        valid = isinstance(value, expected) and (expected is bool or not isinstance(value, bool))
        if valid and expected is str and not value.strip():
            valid = False
        if valid and key == 'limit' and value < 1:
            valid = False
        if not valid:
            print(f"Warning: Invalid value for '{key}' in {source}: {value!r}. Ignoring.")
            continue
        defaults[dest] = value
    return defaults


def load_config_file(search_dir: Path, config_path: str | None = None) -> dict[str, Any]:
    """Read the fleet config file and return its settings keyed by argparse dest.

    Returns an empty dict when there is no file or it does not parse.
    """
    path = find_config_file(search_dir, config_path)
    if path is None:
        return {}
    try:
        with open(path, 'rb') as f:
            raw = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        print(f"Warning: Failed to parse {path}: {e}")
        return {}
    return map_file_settings(raw, path)
