"""Output handlers: colored console lines for per-repository progress and summaries."""

from __future__ import annotations

import sys

from colorama import Fore, Style
from tqdm import tqdm

SECTION_WIDTH = 50

LEVEL_COLORS = {
    'info': '',
    'success': Fore.GREEN,
    'warning': Fore.YELLOW,
    'error': Fore.RED,
    'debug': Fore.CYAN,
}


class ConsoleOutputHandler:
    """Console output with colors. Errors go to stderr, everything else to stdout.

    Lines are written through tqdm so they do not tear the progress bar.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def _emit(self, text: str, level: str = 'info', indent: int = 0) -> None:
        color = LEVEL_COLORS[level]
        if color:
            text = f"{color}{text}{Style.RESET_ALL}"
        tqdm.write("  " * indent + text, file=sys.stderr if level == 'error' else None)

    def info(self, message: str, indent: int = 0) -> None:
        self._emit(message, 'info', indent)

    def success(self, message: str, indent: int = 0) -> None:
        self._emit(message, 'success', indent)

    def warning(self, message: str, indent: int = 0) -> None:
        self._emit(message, 'warning', indent)

    def error(self, message: str, indent: int = 0) -> None:
        self._emit(message, 'error', indent)

    def debug(self, message: str) -> None:
        if self.verbose:
            self._emit(f"[DEBUG] {message}", 'debug')

    def section(self, title: str) -> None:
        """Print a blank line, a title, and a divider."""
        self._emit("")
        self._emit(title)
        self._emit("-" * SECTION_WIDTH)

    def repo(self, tag: str, name: str, detail: str = '', level: str = 'warning') -> None:
        """Print one tagged repository line, e.g. 'STALE: api - dirty working tree'."""
        self._emit(f"{tag}: {name}" + (f" - {detail}" if detail else ''), level, indent=1)

    def tally(self, label: str, count: int, hint: str | None = None, width: int = 12) -> None:
        """Print an aligned summary count, e.g. 'Skipped:    2 (not a git repo)'."""
        line = f"{label + ':':<{width}}{count}"
        if hint:
            line += f" ({hint})"
        self._emit(line, indent=1)


class NullOutputHandler(ConsoleOutputHandler):
    """Silent handler for testing and JSON mode."""

    def _emit(self, text: str, level: str = 'info', indent: int = 0) -> None:
        pass
