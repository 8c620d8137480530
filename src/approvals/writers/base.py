"""Writer interface: persists the received artifact."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)


def normalize_extension(extension: str) -> str:
    """``"json"`` → ``".json"``; empty stays empty."""
    if extension and not extension.startswith("."):
        return f".{extension}"
    return extension


class ApprovalWriter(ABC):
    """Persists an in-memory artifact to the received path."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Extension (with leading dot) used for both approved and received files."""

    @abstractmethod
    def write(self, received_path: Path) -> None:
        """
        Write the artifact to ``received_path``.

        Raises:
            OSError: On I/O failure (the engine wraps it)
        """

    def cleanup_received(self, received_path: Path) -> None:
        """Remove the received file after a successful verification."""
        received_path.unlink(missing_ok=True)
        logger.info(f"Removed received file {received_path}")
