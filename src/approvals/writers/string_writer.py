"""Text and binary writers."""

from pathlib import Path

from approvals.domain.constants import DEFAULT_FILE_EXTENSION

from .base import ApprovalWriter, normalize_extension


class StringWriter(ApprovalWriter):
    """
    Writes text as UTF-8, byte for byte.

    Newlines are not translated, so "A\\nB\\n" is stored as exactly those
    bytes on every platform.
    """

    def __init__(self, contents: str, extension: str = DEFAULT_FILE_EXTENSION):
        self.contents = contents
        self._extension = normalize_extension(extension)

    @property
    def file_extension(self) -> str:
        return self._extension

    def write(self, received_path: Path) -> None:
        received_path.parent.mkdir(parents=True, exist_ok=True)
        with open(received_path, "w", encoding="utf-8", newline="") as f:
            f.write(self.contents)


class BinaryWriter(ApprovalWriter):
    """Writes raw bytes (images, archives, ...)."""

    def __init__(self, data: bytes, extension: str):
        self.data = data
        self._extension = normalize_extension(extension)

    @property
    def file_extension(self) -> str:
        return self._extension

    def write(self, received_path: Path) -> None:
        received_path.parent.mkdir(parents=True, exist_ok=True)
        received_path.write_bytes(self.data)
