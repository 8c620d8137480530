"""Namer interface: derives the approved/received file pair."""

from abc import ABC, abstractmethod
from pathlib import Path

from approvals.domain.schemas import ApprovalPaths


class ApprovalNamer(ABC):
    """
    Produces the approved path, the received path and the identity string.

    The engine depends on nothing else, so namers can be swapped freely.
    """

    @abstractmethod
    def get_approval_name(self) -> str:
        """Identity string embedded in both file names."""

    @abstractmethod
    def get_approved_file(self, extension: str) -> Path:
        """Path of the approved baseline."""

    @abstractmethod
    def get_received_file(self, extension: str) -> Path:
        """Path of the received artifact."""

    def get_paths(self, extension: str) -> ApprovalPaths:
        return ApprovalPaths(
            approved=self.get_approved_file(extension),
            received=self.get_received_file(extension),
        )
