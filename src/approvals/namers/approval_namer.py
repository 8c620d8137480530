"""
Context-detecting namer.

    {test_dir}/{subdirectory}/{module}.{Class}.{test}[.{params}][.{qualifiers}].approved{ext}

Subdirectory precedence:
1. explicit ``subdirectory`` argument
2. scoped default (use_approvals_subdirectory)
3. ``subdirectory`` in approvals.yaml next to the test file
4. none (files sit beside the test file)
"""

from pathlib import Path

from approvals.core.config import load_config
from approvals.core.defaults import get_default_subdirectory
from approvals.domain.constants import APPROVED_INFIX, RECEIVED_INFIX
from approvals.domain.schemas import ApprovalIdentity, sanitize_name_part
from approvals.writers.base import normalize_extension

from .base import ApprovalNamer
from .identity import current_identity


class ApprovalTestNamer(ApprovalNamer):
    """
    Names files after the running test.

    Usage:
        namer = ApprovalTestNamer()                       # current pytest test
        namer = ApprovalTestNamer().with_qualifiers("en")  # data-driven variant
    """

    def __init__(
        self,
        identity: ApprovalIdentity | None = None,
        subdirectory: str | None = None,
        qualifiers: tuple[str, ...] = (),
    ):
        """
        Args:
            identity: Test identity (None = detect the running test)
            subdirectory: Subdirectory for both files (None = defaults)
            qualifiers: Extra name parts, to keep data-driven cases apart

        Raises:
            ApprovalConfigurationError: identity is None and no test is running
        """
        self.identity = identity if identity is not None else current_identity()
        self.subdirectory = subdirectory
        self.qualifiers = tuple(qualifiers)

    def with_qualifiers(self, *qualifiers: str) -> "ApprovalTestNamer":
        return ApprovalTestNamer(
            self.identity,
            self.subdirectory,
            self.qualifiers + tuple(qualifiers),
        )

    def get_approval_name(self) -> str:
        parts = [self.identity.approval_name]
        parts.extend(sanitize_name_part(q) for q in self.qualifiers)
        return ".".join(parts)

    def get_directory(self) -> Path:
        subdirectory = self.subdirectory
        if subdirectory is None:
            subdirectory = (
                get_default_subdirectory()
                or load_config(self.identity.directory).subdirectory
            )
        if subdirectory:
            return self.identity.directory / subdirectory
        return self.identity.directory

    def _file(self, infix: str, extension: str) -> Path:
        name = f"{self.get_approval_name()}{infix}{normalize_extension(extension)}"
        return self.get_directory() / name

    def get_approved_file(self, extension: str) -> Path:
        return self._file(APPROVED_INFIX, extension)

    def get_received_file(self, extension: str) -> Path:
        return self._file(RECEIVED_INFIX, extension)

    def __repr__(self) -> str:
        return f"ApprovalTestNamer({self.get_approval_name()!r})"
