"""
Domain Constants: file naming policy and defaults shared across the engine.
"""

# =============================================================================
# File Naming Policy
# =============================================================================
# {directory}/{approval_name}.approved{extension}
# {directory}/{approval_name}.received{extension}

APPROVED_INFIX = ".approved"
RECEIVED_INFIX = ".received"
DEFAULT_FILE_EXTENSION = ".txt"

# use_approvals_subdirectory() default
DEFAULT_APPROVALS_SUBDIRECTORY = "approval_tests"

# Characters allowed in approval names; everything else becomes "_"
APPROVAL_NAME_SAFE_PATTERN = r"[^A-Za-z0-9._-]"

# Hex digits of the sha256 suffix added to sanitized name parts
NAME_HASH_LENGTH = 8

# =============================================================================
# Configuration
# =============================================================================

CONFIG_FILENAME = "approvals.yaml"
REPORTER_ENV_VAR = "APPROVALS_REPORTER"

# =============================================================================
# Facade Texts
# =============================================================================

NO_EXCEPTION_MESSAGE = "*** no exception thrown ***"
VERIFY_ALL_HEADER_SEPARATOR = "\n\n\n"

# =============================================================================
# CI Detection
# =============================================================================

CI_INDICATORS = (
    "CI",
    "GITHUB_ACTIONS",
    "GITLAB_CI",
    "JENKINS_URL",
    "CIRCLECI",
    "TRAVIS",
    "BUILDKITE",
    "TF_BUILD",  # Azure Pipelines
    "CODEBUILD_BUILD_ID",  # AWS CodeBuild
)
