"""
Value types passed between namers, writers and the engine.
"""

import hashlib
import re
from dataclasses import dataclass
from pathlib import Path

from .constants import APPROVAL_NAME_SAFE_PATTERN, NAME_HASH_LENGTH

_UNSAFE_CHARS = re.compile(APPROVAL_NAME_SAFE_PATTERN)


def sanitize_name_part(part: str) -> str:
    """
    Make a name fragment safe to embed in a file name.

    Unsafe characters become "_". When anything was replaced, a short hash of
    the original is appended so "a b" and "a_b" stay distinct:

        "a b" -> "a_b-<8 hex digits of sha256("a b")>"
    """
    safe = _UNSAFE_CHARS.sub("_", part)
    if safe == part:
        return part
    digest = hashlib.sha256(part.encode("utf-8")).hexdigest()[:NAME_HASH_LENGTH]
    return f"{safe}-{digest}"


@dataclass(frozen=True)
class ApprovalPaths:
    """Approved/received file pair produced by a namer."""
    approved: Path
    received: Path


@dataclass(frozen=True)
class ApprovalIdentity:
    """
    Identity of the running test.

    approval_name:
        test_module.TestClass.test_name[.param-id][.qualifier...]
    """
    source_file: Path
    test_name: str
    class_name: str | None = None
    parameters: str | None = None

    @property
    def directory(self) -> Path:
        return self.source_file.parent

    @property
    def approval_name(self) -> str:
        parts = [self.source_file.stem]
        if self.class_name:
            parts.append(self.class_name)
        parts.append(self.test_name)
        if self.parameters:
            parts.append(self.parameters)
        return ".".join(sanitize_name_part(p) for p in parts)
