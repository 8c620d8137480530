"""
Ambient test identity.

The pytest plugin publishes the running test for the duration of its run.
Without the plugin, the PYTEST_CURRENT_TEST environment variable (set by
pytest itself) is parsed instead. Outside any test, resolution fails fast.
"""

import os
import re
from contextvars import ContextVar, Token
from pathlib import Path

from approvals.domain.errors import ApprovalConfigurationError, ErrorCodes
from approvals.domain.schemas import ApprovalIdentity

PYTEST_CURRENT_TEST_ENV = "PYTEST_CURRENT_TEST"

# "tests/test_x.py::TestA::test_b[p1] (call)"
_PHASE_SUFFIX = re.compile(r" \((?:setup|call|teardown)\)$")
_PARAMETRIZED = re.compile(r"^(?P<name>[^\[]+)\[(?P<params>.*)\]$")

_current_identity: ContextVar[ApprovalIdentity | None] = ContextVar(
    "approvals_current_test", default=None
)


def set_current_identity(identity: ApprovalIdentity) -> Token[ApprovalIdentity | None]:
    return _current_identity.set(identity)


def reset_current_identity(token: Token[ApprovalIdentity | None]) -> None:
    _current_identity.reset(token)


def split_parameters(name: str) -> tuple[str, str | None]:
    """``"test_x[a-1]"`` → ``("test_x", "a-1")``."""
    match = _PARAMETRIZED.match(name)
    if match is None:
        return name, None
    return match.group("name"), match.group("params")


def identity_from_node_id(node_id: str, root: Path) -> ApprovalIdentity:
    """
    Build an identity from a pytest node id.

    Args:
        node_id: e.g. "tests/test_x.py::TestA::test_b[p1] (call)"
        root: Directory the node id path is relative to

    Returns:
        ApprovalIdentity
    """
    node_id = _PHASE_SUFFIX.sub("", node_id)
    file_part, *names = node_id.split("::")
    if not names:
        raise ApprovalConfigurationError(
            ErrorCodes.NO_TEST_CONTEXT, node_id=node_id, hint="node id has no test name"
        )

    test_name, parameters = split_parameters(names[-1])
    class_name = ".".join(names[:-1]) or None
    return ApprovalIdentity(
        source_file=root / file_part,
        test_name=test_name,
        class_name=class_name,
        parameters=parameters,
    )


def find_node_root(file_part: str, start: Path) -> Path:
    """
    Directory a node id path is relative to.

    pytest writes node ids relative to its rootdir, which may be an ancestor
    of the working directory. The nearest ancestor of ``start`` (itself
    included) containing ``file_part`` wins; ``start`` if none does.
    """
    for candidate in (start, *start.parents):
        if (candidate / file_part).is_file():
            return candidate
    return start


def current_identity() -> ApprovalIdentity:
    """
    Identity of the running test.

    Raises:
        ApprovalConfigurationError: Not running inside a test
    """
    identity = _current_identity.get()
    if identity is not None:
        return identity

    node_id = os.environ.get(PYTEST_CURRENT_TEST_ENV)
    if node_id:
        file_part = _PHASE_SUFFIX.sub("", node_id).split("::", 1)[0]
        return identity_from_node_id(node_id, find_node_root(file_part, Path.cwd()))

    raise ApprovalConfigurationError(
        ErrorCodes.NO_TEST_CONTEXT,
        hint="no running test detected; pass an explicit namer via Options.with_namer()",
    )
