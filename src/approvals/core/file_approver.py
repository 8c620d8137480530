"""
FileApprover: the verification engine.

Pipeline:
1. Ask the namer for the approved and received paths
2. Write the received artifact (always, so reporters have a file to diff)
3. Read the approved baseline (absent = first run, always fails)
4. Scrub both sides in memory only
5. Compare bytes exactly; intelligent diffing is the reporter's job
6. Match → remove the received file (best-effort)
7. Mismatch → run the reporter chain (failures logged), raise ApprovalMismatchError
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from approvals.domain.errors import (
    ApprovalMismatchError,
    ApprovalMissingError,
    ArtifactReadError,
    ArtifactWriteError,
    ErrorCodes,
)
from approvals.namers.base import ApprovalNamer
from approvals.reporters.base import Reporter
from approvals.scrubbers import Scrubber
from approvals.writers.base import ApprovalWriter

logger = logging.getLogger(__name__)

# Max characters of a line/byte excerpt shown in failure messages
EXCERPT_LIMIT = 80


@dataclass
class ComparisonResult:
    """Result of comparing received against approved."""
    match: bool
    approved_exists: bool = True
    difference: str = ""

    def __str__(self) -> str:
        if self.match:
            return "OK"
        if not self.approved_exists:
            return "Approved file does not exist"
        return self.difference


def _excerpt(value: str | bytes) -> str:
    text = repr(value)
    if len(text) > EXCERPT_LIMIT:
        return text[:EXCERPT_LIMIT - 3] + "..."
    return text


def _scrub_bytes(data: bytes, scrubber: Scrubber) -> bytes:
    text = data.decode("utf-8", errors="surrogateescape")
    return scrubber(text).encode("utf-8", errors="surrogateescape")


def describe_first_difference(approved: bytes, received: bytes) -> str:
    """
    Short description of the first difference (not a full diff).

    Text (valid UTF-8 on both sides) is described by line, anything else by
    byte offset.
    """
    try:
        approved_text = approved.decode("utf-8")
        received_text = received.decode("utf-8")
    except UnicodeDecodeError:
        return _describe_binary_difference(approved, received)

    approved_lines = approved_text.splitlines()
    received_lines = received_text.splitlines()

    for i, (expected, actual) in enumerate(zip(approved_lines, received_lines)):
        if expected != actual:
            return (
                f"First difference at line {i + 1}: "
                f"approved {_excerpt(expected)}, received {_excerpt(actual)}"
            )

    if len(received_lines) > len(approved_lines):
        extra = len(received_lines) - len(approved_lines)
        return (
            f"Received has {extra} extra line(s) starting at line "
            f"{len(approved_lines) + 1}: {_excerpt(received_lines[len(approved_lines)])}"
        )
    if len(approved_lines) > len(received_lines):
        missing = len(approved_lines) - len(received_lines)
        return (
            f"Received is missing {missing} line(s) starting at line "
            f"{len(received_lines) + 1}: {_excerpt(approved_lines[len(received_lines)])}"
        )
    return "Files differ only in line endings or trailing newline"


def _describe_binary_difference(approved: bytes, received: bytes) -> str:
    for offset, (expected, actual) in enumerate(zip(approved, received)):
        if expected != actual:
            return (
                f"First difference at byte {offset}: "
                f"approved 0x{expected:02x}, received 0x{actual:02x}"
            )
    return f"Sizes differ: approved {len(approved)} bytes, received {len(received)} bytes"


def _read_bytes(path: Path, code: str) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise ArtifactReadError(code, path=path, error=str(e)) from e


def compare_files(
    received_path: Path,
    approved_path: Path,
    scrubber: Scrubber | None = None,
) -> ComparisonResult:
    """
    Compare two files byte for byte, after optional in-memory scrubbing.

    Raises:
        ArtifactReadError: A file exists but cannot be read
    """
    received = _read_bytes(received_path, ErrorCodes.RECEIVED_READ_FAILED)
    if not approved_path.exists():
        return ComparisonResult(match=False, approved_exists=False)
    approved = _read_bytes(approved_path, ErrorCodes.APPROVED_READ_FAILED)

    if scrubber is not None:
        received = _scrub_bytes(received, scrubber)
        approved = _scrub_bytes(approved, scrubber)

    if received == approved:
        return ComparisonResult(match=True)
    return ComparisonResult(
        match=False,
        difference=describe_first_difference(approved, received),
    )


class FileApprover:
    """
    Orchestrates namer, writer, comparison and reporter.

    Usage:
        FileApprover.verify(namer, StringWriter("hello"), QuietReporter())
    """

    @staticmethod
    def verify(
        namer: ApprovalNamer,
        writer: ApprovalWriter,
        reporter: Reporter,
        scrubber: Scrubber | None = None,
    ) -> None:
        """
        Verify the writer's artifact against the approved baseline.

        Args:
            namer: Produces the approved/received paths
            writer: Persists the received artifact
            reporter: Invoked on mismatch (chains honour availability)
            scrubber: Applied in memory to both sides before comparing

        Raises:
            ApprovalMissingError: No approved file yet
            ApprovalMismatchError: Content differs
            ArtifactWriteError: Received file could not be written
            ArtifactReadError: A file could not be read
        """
        extension = writer.file_extension
        approved_path = namer.get_approved_file(extension)
        received_path = namer.get_received_file(extension)
        logger.debug(f"Verifying {received_path} against {approved_path}")

        try:
            writer.write(received_path)
        except OSError as e:
            raise ArtifactWriteError(
                ErrorCodes.RECEIVED_WRITE_FAILED, path=received_path, error=str(e)
            ) from e

        result = compare_files(received_path, approved_path, scrubber)
        if result.match:
            FileApprover._cleanup(writer, received_path)
            return

        try:
            reporter.report(received_path, approved_path)
        except Exception as e:
            logger.warning(f"Reporter {reporter!r} failed: {e}")

        if not result.approved_exists:
            raise ApprovalMissingError(received_path, approved_path)
        raise ApprovalMismatchError(received_path, approved_path, result.difference)

    @staticmethod
    def _cleanup(writer: ApprovalWriter, received_path: Path) -> None:
        # Best-effort: a stray received file is harmless and rewritten next run
        try:
            writer.cleanup_received(received_path)
        except OSError as e:
            logger.warning(f"Failed to remove received file {received_path}: {e}")
