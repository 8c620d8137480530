"""Writer for artifacts that already exist on disk."""

import shutil
from pathlib import Path

from .base import ApprovalWriter


class ExistingFile(ApprovalWriter):
    """
    Uses a file produced by the code under test as the received artifact.

    When the namer points the received path at the file itself (see
    ExistingFileNamer) nothing is written, and the file is never deleted
    after a pass: it belongs to the caller.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    @property
    def file_extension(self) -> str:
        return self.path.suffix

    def _is_source(self, received_path: Path) -> bool:
        return received_path.resolve() == self.path.resolve()

    def write(self, received_path: Path) -> None:
        if self._is_source(received_path):
            return
        received_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(self.path, received_path)

    def cleanup_received(self, received_path: Path) -> None:
        if self._is_source(received_path):
            return
        super().cleanup_received(received_path)
