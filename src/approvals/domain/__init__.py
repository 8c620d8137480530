"""Domain layer: errors, constants and schemas."""

from .errors import (
    ApprovalConfigurationError,
    ApprovalError,
    ApprovalMismatchError,
    ApprovalMissingError,
    ArtifactIOError,
    ArtifactReadError,
    ArtifactWriteError,
    ErrorCodes,
)
from .schemas import ApprovalIdentity, ApprovalPaths

__all__ = [
    "ApprovalError",
    "ApprovalMismatchError",
    "ApprovalMissingError",
    "ArtifactIOError",
    "ArtifactReadError",
    "ArtifactWriteError",
    "ApprovalConfigurationError",
    "ErrorCodes",
    "ApprovalIdentity",
    "ApprovalPaths",
]
