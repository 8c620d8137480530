"""
test_config.py - approvals.yaml loading
"""

from pathlib import Path

import pytest
import yaml

from approvals.core.config import ApprovalsConfig, load_config
from approvals.domain.errors import ApprovalConfigurationError, ErrorCodes


@pytest.fixture(autouse=True)
def clear_config_cache():
    load_config.cache_clear()
    yield
    load_config.cache_clear()


def write_config(directory: Path, data) -> Path:
    config_path = directory / "approvals.yaml"
    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(data, f)
    return config_path


class TestLoadConfig:
    """Defaults, values, caching and errors."""

    def test_missing_file_gives_defaults(self, tmp_path: Path):
        assert load_config(tmp_path) == ApprovalsConfig()

    def test_subdirectory(self, tmp_path: Path):
        write_config(tmp_path, {"subdirectory": "approved_files"})
        assert load_config(tmp_path).subdirectory == "approved_files"

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        (tmp_path / "approvals.yaml").write_text("", encoding="utf-8")
        assert load_config(tmp_path) == ApprovalsConfig()

    def test_cached_per_directory(self, tmp_path: Path):
        write_config(tmp_path, {"subdirectory": "first"})
        load_config(tmp_path)
        write_config(tmp_path, {"subdirectory": "second"})

        assert load_config(tmp_path).subdirectory == "first"

    def test_invalid_yaml(self, tmp_path: Path):
        (tmp_path / "approvals.yaml").write_text("subdirectory: [unclosed", encoding="utf-8")

        with pytest.raises(ApprovalConfigurationError) as exc_info:
            load_config(tmp_path)

        assert exc_info.value.code == ErrorCodes.CONFIG_INVALID

    def test_non_mapping(self, tmp_path: Path):
        write_config(tmp_path, ["a", "b"])

        with pytest.raises(ApprovalConfigurationError) as exc_info:
            load_config(tmp_path)

        assert "expected a mapping" in str(exc_info.value)
