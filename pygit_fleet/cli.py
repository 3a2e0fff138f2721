"""CLI entry point: main() function."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

from colorama import Fore, Style

from pygit_fleet.config import create_argument_parser, load_config_file
from pygit_fleet.forge import ForgeError, GhCliForge
from pygit_fleet.models import FleetConfig, RunMode
from pygit_fleet.orchestrator import FleetOrchestrator
from pygit_fleet.output import ConsoleOutputHandler, NullOutputHandler
from pygit_fleet.reporter import SummaryReporter


def main(argv: list[str] | None = None):
    """Main entry point"""
    argv = sys.argv[1:] if argv is None else argv
    parser = create_argument_parser()

    # First pass only locates the config file; its values become parser
    # defaults so anything typed on the command line overrides them.
    early, _ = parser.parse_known_args(argv)
    start_dir = Path(early.root).resolve()
    if not start_dir.is_dir():
        parser.error(f"invalid directory '{start_dir}'")

    parser.set_defaults(**load_config_file(start_dir, early.config))
    args = parser.parse_args(argv)

    if args.org is not None and not args.org.strip():
        parser.error("missing value for --org")

    if args.fetch:
        mode = RunMode.FETCH
    elif args.update:
        mode = RunMode.UPDATE
    else:
        mode = RunMode.CLONE

    config = FleetConfig(
        org=args.org,
        mode=mode,
        dry_run=args.dry_run,
        remote_name=args.remote,
        limit=args.limit,
        verbose=args.verbose,
        json_output=args.json_output,
    )

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    output = NullOutputHandler() if config.json_output else ConsoleOutputHandler(verbose=config.verbose)

    orchestrator = FleetOrchestrator(config, output, forge=GhCliForge())

    try:
        outcome = orchestrator.run(start_dir)

        if config.json_output:
            print(json.dumps(outcome.to_dict(), indent=2))
        else:
            SummaryReporter(output).print_summary(outcome)

        sys.exit(1 if outcome.has_failures() else 0)

    except ForgeError as e:
        if config.json_output:
            print(json.dumps({'error': str(e)}, indent=2))
        else:
            print(f"{Fore.RED}Error: {e}{Style.RESET_ALL}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        if not config.json_output:
            output.warning("\n\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        if config.json_output:
            print(json.dumps({'error': str(e)}, indent=2))
        else:
            output.error(f"\nUnexpected error: {e}")
            if config.verbose:
                import traceback
                traceback.print_exc()
        sys.exit(1)
