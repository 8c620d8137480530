"""
External diff tool reporters.

Tools are launched fire-and-forget: the engine never waits for the tool to
close and never interprets its exit status.
"""

import logging
import os
import shutil
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path

from approvals.utils.ci import is_ci_environment

from .base import FirstWorkingReporter, Reporter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiffTool:
    """
    Launch recipe for an external diff tool.

    ``arguments`` may reference ``{received}`` and ``{approved}``.
    """
    name: str
    program: str
    arguments: tuple[str, ...] = ("{received}", "{approved}")
    gui: bool = True

    def build_command(
        self,
        executable: str,
        received_path: Path,
        approved_path: Path,
    ) -> list[str]:
        return [executable] + [
            arg.format(received=received_path, approved=approved_path)
            for arg in self.arguments
        ]


KNOWN_DIFF_TOOLS: tuple[DiffTool, ...] = (
    DiffTool("Beyond Compare", "bcompare"),
    DiffTool("Visual Studio Code", "code", ("--diff", "{received}", "{approved}")),
    DiffTool("Meld", "meld"),
    DiffTool("KDiff3", "kdiff3", ("{received}", "{approved}", "-m")),
    DiffTool("P4Merge", "p4merge"),
    DiffTool("DiffMerge", "diffmerge", ("--nosplash", "{received}", "{approved}")),
    DiffTool("TkDiff", "tkdiff"),
    DiffTool("FileMerge", "opendiff"),
)


def _has_display() -> bool:
    if not sys.platform.startswith("linux"):
        return True
    return bool(os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY"))


class GenericDiffReporter(Reporter):
    """Launches one external diff tool with the received and approved paths."""

    def __init__(self, tool: DiffTool, create_missing_approved: bool = True):
        """
        Args:
            tool: Tool to launch
            create_missing_approved: Create an empty approved file before
                launching, so the tool has two files to open
        """
        self.tool = tool
        self.create_missing_approved = create_missing_approved

    def _executable(self) -> str | None:
        return shutil.which(self.tool.program)

    def is_working_in_this_environment(self) -> bool:
        if is_ci_environment():
            return False
        if self.tool.gui and not _has_display():
            return False
        return self._executable() is not None

    def report(self, received_path: Path, approved_path: Path) -> None:
        executable = self._executable()
        if executable is None:
            logger.warning(f"{self.tool.name} not found on PATH; skipping launch")
            return

        command = self.tool.build_command(executable, received_path, approved_path)
        try:
            if self.create_missing_approved and not approved_path.exists():
                approved_path.parent.mkdir(parents=True, exist_ok=True)
                approved_path.touch()
            subprocess.Popen(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
            logger.info(f"Launched {self.tool.name}: {' '.join(command)}")
        except OSError as e:
            logger.warning(f"Failed to launch {self.tool.name}: {e}")

    def __repr__(self) -> str:
        return f"GenericDiffReporter({self.tool.name!r})"


class DiffReporter(FirstWorkingReporter):
    """First installed diff tool from the known-tools table."""

    def __init__(self, tools: tuple[DiffTool, ...] = KNOWN_DIFF_TOOLS):
        super().__init__(*(GenericDiffReporter(tool) for tool in tools))

    def __repr__(self) -> str:
        return "DiffReporter()"
