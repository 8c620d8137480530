"""Writers: persist received artifacts."""

from .base import ApprovalWriter, normalize_extension
from .existing_file import ExistingFile
from .string_writer import BinaryWriter, StringWriter

__all__ = [
    "ApprovalWriter",
    "StringWriter",
    "BinaryWriter",
    "ExistingFile",
    "normalize_extension",
]
