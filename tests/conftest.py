"""
Pytest fixtures for the approvals tests.

- CI indicators and $APPROVALS_REPORTER are cleared so tests behave the
  same locally and in CI
- the default reporter is quiet, so no test ever launches a diff tool
"""

from collections.abc import Generator
from pathlib import Path

import pytest

from approvals.core.defaults import DefaultReporterDisposer
from approvals.domain.constants import CI_INDICATORS, REPORTER_ENV_VAR
from approvals.domain.schemas import ApprovalIdentity
from approvals.namers.approval_namer import ApprovalTestNamer
from approvals.reporters.base import QuietReporter, Reporter


class RecordingReporter(Reporter):
    """Reporter that records calls instead of launching anything."""

    def __init__(self, available: bool = True, name: str = "recording"):
        self.available = available
        self.name = name
        self.calls: list[tuple[Path, Path]] = []

    def is_working_in_this_environment(self) -> bool:
        return self.available

    def report(self, received_path: Path, approved_path: Path) -> None:
        self.calls.append((received_path, approved_path))

    def __repr__(self) -> str:
        return f"RecordingReporter({self.name!r})"


# =============================================================================
# Environment Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def no_ci_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove CI indicators and reporter override from the environment."""
    for indicator in CI_INDICATORS:
        monkeypatch.delenv(indicator, raising=False)
    monkeypatch.delenv(REPORTER_ENV_VAR, raising=False)


@pytest.fixture(autouse=True)
def quiet_default_reporter() -> Generator[None, None, None]:
    """Never launch real diff tools from the test suite."""
    with DefaultReporterDisposer(QuietReporter()):
        yield


# =============================================================================
# Namer / Reporter Fixtures
# =============================================================================

@pytest.fixture
def identity(tmp_path: Path) -> ApprovalIdentity:
    """Identity of a fake test living in tmp_path."""
    return ApprovalIdentity(
        source_file=tmp_path / "test_sample.py",
        test_name="test_case",
        class_name="TestSample",
    )


@pytest.fixture
def namer(identity: ApprovalIdentity) -> ApprovalTestNamer:
    """Namer writing next to the fake test file."""
    return ApprovalTestNamer(identity)


@pytest.fixture
def recording_reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def make_reporter() -> type[RecordingReporter]:
    """Factory: make_reporter(available=False, name="r2")."""
    return RecordingReporter
