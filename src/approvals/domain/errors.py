"""
Error definitions for the approval engine.

Failure taxonomy:
- content mismatch → ApprovalMismatchError (an AssertionError, so test
  runners report it as an ordinary failed assertion)
- I/O failure → ArtifactWriteError / ArtifactReadError, never conflated
  with a mismatch
- configuration error → ApprovalConfigurationError, fails fast
- reporter unavailability is not an error
"""

from pathlib import Path
from typing import Any


class ApprovalError(Exception):
    """
    Base error carrying a code and structured context.

    Usage:
        raise ApprovalConfigurationError(ErrorCodes.NO_TEST_CONTEXT, hint="...")
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    def to_dict(self) -> dict[str, Any]:
        """For logs and JSON serialization."""
        return {
            "code": self.code,
            **{k: str(v) if isinstance(v, Path) else v for k, v in self.context.items()},
        }


class ApprovalMismatchError(ApprovalError, AssertionError):
    """Received content differs from the approved baseline."""

    def __init__(
        self,
        received_path: Path,
        approved_path: Path,
        difference: str = "",
        code: str | None = None,
    ) -> None:
        self.received_path = received_path
        self.approved_path = approved_path
        self.difference = difference
        super().__init__(
            code or ErrorCodes.CONTENT_MISMATCH,
            received=received_path,
            approved=approved_path,
        )

    def _format_message(self) -> str:
        lines = [
            "Failed Approval: Received does not match approved",
            f"  Received: {self.received_path}",
            f"  Approved: {self.approved_path}",
            f"  Extension: {self.received_path.suffix or '(none)'}",
        ]
        if self.difference:
            lines.append(f"  {self.difference}")
        return "\n".join(lines)


class ApprovalMissingError(ApprovalMismatchError):
    """No approved baseline exists yet (first run)."""

    def __init__(self, received_path: Path, approved_path: Path) -> None:
        super().__init__(
            received_path,
            approved_path,
            difference="Approved file does not exist; review the received file and approve it.",
            code=ErrorCodes.APPROVED_MISSING,
        )

    def _format_message(self) -> str:
        return super()._format_message().replace(
            "Received does not match approved",
            "Approved file is missing",
            1,
        )


class ArtifactIOError(ApprovalError):
    """The engine could not persist or load an artifact."""


class ArtifactWriteError(ArtifactIOError):
    """The received artifact could not be written."""


class ArtifactReadError(ArtifactIOError):
    """An approved or received artifact could not be read."""


class ApprovalConfigurationError(ApprovalError):
    """Namer, reporter or config file cannot be resolved."""


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """Error code constants."""

    # === Comparison ===
    CONTENT_MISMATCH = "CONTENT_MISMATCH"
    APPROVED_MISSING = "APPROVED_MISSING"

    # === I/O ===
    RECEIVED_WRITE_FAILED = "RECEIVED_WRITE_FAILED"
    APPROVED_READ_FAILED = "APPROVED_READ_FAILED"
    RECEIVED_READ_FAILED = "RECEIVED_READ_FAILED"

    # === Configuration ===
    NO_TEST_CONTEXT = "NO_TEST_CONTEXT"
    CONFIG_INVALID = "CONFIG_INVALID"
    UNKNOWN_REPORTER = "UNKNOWN_REPORTER"
