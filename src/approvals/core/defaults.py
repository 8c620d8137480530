"""
Process defaults and scoped overrides (disposers).

Defaults (namer creator, reporter, front-loaded reporters, subdirectory) are
stacks of overrides held in context variables, on top of a base value created
on first use. They can only be changed through Disposers:

    with use_as_default_reporter(QuietReporter()):
        verify(...)

A Disposer installs its value on construction and restores the previous
value on ``dispose()`` / scope exit, including exit by exception.

Constraint: an override is visible to everything sharing the context (the
pytest session thread). Concurrent tests in one context must not install
conflicting overrides. Threads start with an empty context and see the base
values.
"""

import logging
import os
from collections.abc import Callable
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from approvals.domain.constants import REPORTER_ENV_VAR
from approvals.reporters.base import Reporter
from approvals.reporters.diff_tools import DiffReporter
from approvals.reporters.registry import reporter_from_name

if TYPE_CHECKING:
    from approvals.namers.base import ApprovalNamer

logger = logging.getLogger(__name__)

T = TypeVar("T")

NamerCreator = Callable[[], "ApprovalNamer"]


class ScopedDefault(Generic[T]):
    """Stack of scoped overrides over a lazily created base value."""

    def __init__(self, name: str, initial: Callable[[], T]):
        self.name = name
        self._initial = initial
        self._base: T | None = None
        self._base_created = False
        self._stack: ContextVar[tuple[tuple[object, T], ...]] = ContextVar(
            f"approvals_{name}", default=()
        )

    def get(self) -> T:
        stack = self._stack.get()
        if stack:
            return stack[-1][1]
        return self.base()

    def base(self) -> T:
        """Base value under all overrides, created on first use."""
        if not self._base_created:
            self._base = self._initial()
            self._base_created = True
        return self._base  # type: ignore[return-value]

    def top(self) -> tuple[bool, T | None]:
        """(True, value) for the newest override, (False, None) with no overrides."""
        stack = self._stack.get()
        if stack:
            return True, stack[-1][1]
        return False, None

    def overrides(self) -> tuple[T, ...]:
        """Installed overrides, oldest first."""
        return tuple(value for _, value in self._stack.get())

    def push(self, value: T) -> object:
        handle = object()
        self._stack.set(self._stack.get() + ((handle, value),))
        return handle

    def pop(self, handle: object) -> None:
        stack = self._stack.get()
        if stack and stack[-1][0] is handle:
            self._stack.set(stack[:-1])
            return

        remaining = tuple(entry for entry in stack if entry[0] is not handle)
        if len(remaining) == len(stack):
            logger.warning(f"{self.name}: override is not installed in this context")
            return
        logger.warning(f"{self.name}: override disposed out of order")
        self._stack.set(remaining)


def reporter_from_environment() -> Reporter:
    """Process-start default: $APPROVALS_REPORTER if set, else DiffReporter."""
    name = os.getenv(REPORTER_ENV_VAR)
    if name:
        return reporter_from_name(name)
    return DiffReporter()


def _initial_namer_creator() -> NamerCreator:
    from approvals.namers.approval_namer import ApprovalTestNamer

    return ApprovalTestNamer


_default_reporter: ScopedDefault[Reporter] = ScopedDefault(
    "default_reporter", reporter_from_environment
)
_front_loaded_reporters: ScopedDefault[Reporter | None] = ScopedDefault(
    "front_loaded_reporter", lambda: None
)
_default_namer_creator: ScopedDefault[NamerCreator] = ScopedDefault(
    "default_namer", _initial_namer_creator
)
_default_subdirectory: ScopedDefault[str] = ScopedDefault(
    "default_subdirectory", lambda: ""
)


def get_default_reporter() -> Reporter:
    return _default_reporter.get()


def get_front_loaded_reporters() -> tuple[Reporter, ...]:
    return tuple(r for r in _front_loaded_reporters.overrides() if r is not None)


def get_default_namer() -> "ApprovalNamer":
    """Create a namer with the current default creator."""
    return _default_namer_creator.get()()


def get_default_subdirectory() -> str:
    return _default_subdirectory.get()


# =============================================================================
# Disposers
# =============================================================================


class Disposer(Generic[T]):
    """
    Scope guard for one override.

    ``previous`` is the value that was active before installation and is
    active again after disposal. Installing an override never creates the
    base value.
    """

    def __init__(self, registry: ScopedDefault[T], value: T):
        self._registry = registry
        self._has_previous_override, self._previous_override = registry.top()
        self.value = value
        self._handle = registry.push(value)
        self._disposed = False

    @property
    def previous(self) -> T:
        if self._has_previous_override:
            return self._previous_override  # type: ignore[return-value]
        return self._registry.base()

    def dispose(self) -> None:
        if self._disposed:
            return
        self._registry.pop(self._handle)
        self._disposed = True

    def __enter__(self) -> "Disposer[T]":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.dispose()


class DefaultReporterDisposer(Disposer[Reporter]):
    def __init__(self, reporter: Reporter):
        super().__init__(_default_reporter, reporter)


class FrontLoadedReporterDisposer(Disposer[Reporter | None]):
    """Front-loaded reporters run before the default chain, in registration order."""

    def __init__(self, reporter: Reporter):
        super().__init__(_front_loaded_reporters, reporter)


class DefaultNamerDisposer(Disposer[NamerCreator]):
    def __init__(self, namer_creator: NamerCreator):
        super().__init__(_default_namer_creator, namer_creator)


class SubdirectoryDisposer(Disposer[str]):
    def __init__(self, subdirectory: str):
        super().__init__(_default_subdirectory, subdirectory)
