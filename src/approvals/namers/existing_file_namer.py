"""Namer for verifying a file that already exists."""

from pathlib import Path

from .base import ApprovalNamer


class ExistingFileNamer(ApprovalNamer):
    """The existing file is the received file; the approved path comes from ``base``."""

    def __init__(self, path: Path | str, base: ApprovalNamer):
        self.path = Path(path)
        self.base = base

    def get_approval_name(self) -> str:
        return self.base.get_approval_name()

    def get_approved_file(self, extension: str) -> Path:
        return self.base.get_approved_file(extension)

    def get_received_file(self, extension: str) -> Path:
        return self.path
