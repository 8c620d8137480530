"""
Approval testing (snapshot testing) engine.

Compares output computed by a test ("received") with a human-accepted
baseline ("approved") and reports mismatches through pluggable reporters.

Philosophy:
- The engine only decides whether two named files match; diffing is the
  reporter's job
- Scrub non-deterministic text (timestamps, GUIDs) before comparing
- Defaults are overridden in scopes, never mutated permanently
"""

from .approvals import (
    get_default_namer,
    get_default_reporter,
    use_approvals_subdirectory,
    use_as_default_namer,
    use_as_default_reporter,
    use_as_front_loaded_reporter,
    verify,
    verify_all,
    verify_binary,
    verify_exception_message,
    verify_existing_file,
    verify_with_converter,
)
from .core import FileApprover, Options
from .domain import (
    ApprovalConfigurationError,
    ApprovalError,
    ApprovalMismatchError,
    ApprovalMissingError,
    ArtifactReadError,
    ArtifactWriteError,
)
from .namers import ApprovalNamer, ApprovalTestNamer, ExistingFileNamer
from .reporters import (
    AutoApproveReporter,
    ConsoleDiffReporter,
    DiffReporter,
    FirstWorkingReporter,
    QuietReporter,
    Reporter,
)

__all__ = [
    # Facade
    "verify",
    "verify_with_converter",
    "verify_binary",
    "verify_all",
    "verify_exception_message",
    "verify_existing_file",
    "get_default_namer",
    "get_default_reporter",
    "use_approvals_subdirectory",
    "use_as_default_reporter",
    "use_as_front_loaded_reporter",
    "use_as_default_namer",
    # Engine
    "FileApprover",
    "Options",
    # Namers
    "ApprovalNamer",
    "ApprovalTestNamer",
    "ExistingFileNamer",
    # Reporters
    "Reporter",
    "QuietReporter",
    "FirstWorkingReporter",
    "DiffReporter",
    "ConsoleDiffReporter",
    "AutoApproveReporter",
    # Errors
    "ApprovalError",
    "ApprovalMismatchError",
    "ApprovalMissingError",
    "ArtifactWriteError",
    "ArtifactReadError",
    "ApprovalConfigurationError",
]
