"""
Reporters: what happens on mismatch.

Chains use a first-match policy: at most one reporter fires per mismatch.
"""

from .auto_approve import AutoApproveReporter
from .base import FirstWorkingReporter, QuietReporter, Reporter
from .console import ConsoleDiffReporter
from .diff_tools import KNOWN_DIFF_TOOLS, DiffReporter, DiffTool, GenericDiffReporter
from .registry import REPORTER_FACTORIES, reporter_from_name

__all__ = [
    "Reporter",
    "QuietReporter",
    "FirstWorkingReporter",
    "DiffTool",
    "GenericDiffReporter",
    "DiffReporter",
    "KNOWN_DIFF_TOOLS",
    "ConsoleDiffReporter",
    "AutoApproveReporter",
    "REPORTER_FACTORIES",
    "reporter_from_name",
]
