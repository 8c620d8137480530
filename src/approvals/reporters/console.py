"""
Console reporter.

Prints a unified diff of the two text files, for terminals and CI logs.
"""

import difflib
import sys
from pathlib import Path
from typing import TextIO

from .base import Reporter


def _read_lines(path: Path) -> list[str]:
    if not path.exists():
        return []
    return path.read_text(encoding="utf-8", errors="replace").splitlines()


class ConsoleDiffReporter(Reporter):
    """Writes a unified diff (approved → received) to a stream."""

    def __init__(self, stream: TextIO | None = None, max_lines: int = 200):
        """
        Args:
            stream: Output stream (None = sys.stderr at report time)
            max_lines: Maximum number of diff lines to print
        """
        self.stream = stream
        self.max_lines = max_lines

    def report(self, received_path: Path, approved_path: Path) -> None:
        stream = self.stream or sys.stderr
        diff = list(difflib.unified_diff(
            _read_lines(approved_path),
            _read_lines(received_path),
            fromfile=str(approved_path),
            tofile=str(received_path),
            lineterm="",
        ))

        lines = diff[:self.max_lines]
        if len(diff) > self.max_lines:
            lines.append(f"... and {len(diff) - self.max_lines} more diff lines")
        if not lines:
            lines = ["(files differ only in bytes not visible as text lines)"]
        print("\n".join(lines), file=stream)
