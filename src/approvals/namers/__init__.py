"""Namers: derive approved/received paths from a test identity."""

from .approval_namer import ApprovalTestNamer
from .base import ApprovalNamer
from .existing_file_namer import ExistingFileNamer
from .identity import current_identity, identity_from_node_id

__all__ = [
    "ApprovalNamer",
    "ApprovalTestNamer",
    "ExistingFileNamer",
    "current_identity",
    "identity_from_node_id",
]
