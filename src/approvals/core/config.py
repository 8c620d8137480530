"""
Per-directory configuration: approvals.yaml

Example (next to the test file):

    subdirectory: approved_files

Missing file → defaults. Malformed file → ApprovalConfigurationError.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from approvals.domain.constants import CONFIG_FILENAME
from approvals.domain.errors import ApprovalConfigurationError, ErrorCodes


@dataclass(frozen=True)
class ApprovalsConfig:
    """Settings read from approvals.yaml."""
    subdirectory: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ApprovalsConfig":
        return cls(subdirectory=str(data.get("subdirectory") or ""))


@lru_cache(maxsize=None)
def load_config(directory: Path) -> ApprovalsConfig:
    """
    Load approvals.yaml from ``directory`` (cached per directory).

    Args:
        directory: Directory of the test file

    Returns:
        ApprovalsConfig (defaults if the file does not exist)

    Raises:
        ApprovalConfigurationError: Invalid YAML or non-mapping content
    """
    config_path = directory / CONFIG_FILENAME
    if not config_path.exists():
        return ApprovalsConfig()

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ApprovalConfigurationError(
            ErrorCodes.CONFIG_INVALID, path=config_path, error=str(e)
        ) from e

    if data is None:
        return ApprovalsConfig()
    if not isinstance(data, dict):
        raise ApprovalConfigurationError(
            ErrorCodes.CONFIG_INVALID,
            path=config_path,
            error=f"expected a mapping, got {type(data).__name__}",
        )
    return ApprovalsConfig.from_dict(data)
