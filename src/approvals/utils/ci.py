"""
CI environment detection.

Approving baselines and launching GUI diff tools only make sense on a
developer machine; both are blocked when a CI indicator is present.
"""

import os

from approvals.domain.constants import CI_INDICATORS


class CIEnvironmentError(RuntimeError):
    """Raised when a local-only operation is run in a CI environment."""
    pass


def detect_ci_indicator() -> str | None:
    """
    Return the first CI environment variable that is set, if any.

    Detects common CI environment variables:
    - CI (generic, used by GitHub Actions, GitLab CI, etc.)
    - GITHUB_ACTIONS, GITLAB_CI, JENKINS_URL, CIRCLECI, TRAVIS, BUILDKITE
    - TF_BUILD (Azure Pipelines), CODEBUILD_BUILD_ID (AWS CodeBuild)
    """
    for indicator in CI_INDICATORS:
        if os.getenv(indicator):
            return indicator
    return None


def is_ci_environment() -> bool:
    return detect_ci_indicator() is not None


def check_not_ci(operation: str) -> None:
    """
    Block a local-only operation in CI.

    Raises:
        CIEnvironmentError: If CI environment detected
    """
    indicator = detect_ci_indicator()
    if indicator is None:
        return
    raise CIEnvironmentError(
        f"ERROR: {operation} cannot run in CI environment.\n"
        f"Detected CI indicator: {indicator}={os.getenv(indicator)}\n\n"
        f"Approved files must be updated locally and reviewed manually.\n"
        f"This prevents accidental baseline updates that mask real failures."
    )
