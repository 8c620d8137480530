"""Named reporter lookup for environment variables and command-line options."""

from collections.abc import Callable

from approvals.domain.errors import ApprovalConfigurationError, ErrorCodes

from .auto_approve import AutoApproveReporter
from .base import QuietReporter, Reporter
from .console import ConsoleDiffReporter
from .diff_tools import DiffReporter

REPORTER_FACTORIES: dict[str, Callable[[], Reporter]] = {
    "diff": DiffReporter,
    "console": ConsoleDiffReporter,
    "quiet": QuietReporter,
    "auto-approve": AutoApproveReporter,
}


def reporter_from_name(name: str) -> Reporter:
    """
    Create a reporter by name.

    Raises:
        ApprovalConfigurationError: Unknown name
    """
    factory = REPORTER_FACTORIES.get(name.strip().lower())
    if factory is None:
        raise ApprovalConfigurationError(
            ErrorCodes.UNKNOWN_REPORTER,
            name=name,
            available=sorted(REPORTER_FACTORIES),
        )
    return factory()
