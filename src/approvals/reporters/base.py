"""
Reporter interface and chain composition.

A reporter is invoked on mismatch. Each reporter decides whether it can run
in the current environment; a chain fires only the first one that can.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)


class Reporter(ABC):
    """Mismatch-handling capability."""

    @abstractmethod
    def report(self, received_path: Path, approved_path: Path) -> None:
        """Surface the mismatch between the two files."""

    def is_working_in_this_environment(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class QuietReporter(Reporter):
    """Does nothing; the failure message alone reports the mismatch."""

    def report(self, received_path: Path, approved_path: Path) -> None:
        pass


class FirstWorkingReporter(Reporter):
    """
    Ordered chain with first-match policy.

    Only the first reporter whose ``is_working_in_this_environment()`` is
    True gets ``report`` called; reporters after it are never consulted.
    """

    def __init__(self, *reporters: Reporter):
        self.reporters = tuple(reporters)

    def is_working_in_this_environment(self) -> bool:
        return any(r.is_working_in_this_environment() for r in self.reporters)

    def report(self, received_path: Path, approved_path: Path) -> None:
        for reporter in self.reporters:
            if reporter.is_working_in_this_environment():
                logger.debug(f"Reporting mismatch with {reporter!r}")
                reporter.report(received_path, approved_path)
                return
        logger.debug("No reporter available in this environment")

    def __repr__(self) -> str:
        inner = ", ".join(repr(r) for r in self.reporters)
        return f"FirstWorkingReporter({inner})"
