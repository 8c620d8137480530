"""
Options: immutable per-call configuration.

Every ``with_*`` / ``for_file`` call returns a new Options, so an Options
value can be shared between tests without one test's customisation leaking
into another.

Usage:
    options = Options().with_scrubber(create_guid_scrubber()).for_file(".json")
"""

from dataclasses import dataclass, replace

from approvals.domain.constants import DEFAULT_FILE_EXTENSION
from approvals.namers.base import ApprovalNamer
from approvals.reporters.base import FirstWorkingReporter, Reporter
from approvals.scrubbers import Scrubber, combine_scrubbers
from approvals.writers.base import normalize_extension

from .defaults import get_default_namer, get_default_reporter, get_front_loaded_reporters


@dataclass(frozen=True)
class Options:
    """Scrubber, reporter, namer override and file extension for one verification."""
    scrubber: Scrubber | None = None
    reporter: Reporter | None = None
    namer: ApprovalNamer | None = None
    file_extension: str = DEFAULT_FILE_EXTENSION

    def with_scrubber(self, scrubber: Scrubber) -> "Options":
        return replace(self, scrubber=scrubber)

    def with_scrubbers(self, *scrubbers: Scrubber) -> "Options":
        """Replace the scrubber with the sequential composition of ``scrubbers``."""
        return replace(self, scrubber=combine_scrubbers(*scrubbers))

    def with_reporter(self, reporter: Reporter) -> "Options":
        return replace(self, reporter=reporter)

    def with_namer(self, namer: ApprovalNamer) -> "Options":
        return replace(self, namer=namer)

    def for_file(self, extension: str) -> "Options":
        """Set the file extension (``"json"`` and ``".json"`` are equivalent)."""
        return replace(self, file_extension=normalize_extension(extension))

    def scrub(self, text: str) -> str:
        if self.scrubber is None:
            return text
        return self.scrubber(text)

    def get_reporter(self) -> Reporter:
        """
        Effective reporter chain, built at verification time.

        Front-loaded reporters (oldest first), then this Options' reporter
        or the current default reporter. First-match policy.
        """
        reporter = self.reporter or get_default_reporter()
        return FirstWorkingReporter(*get_front_loaded_reporters(), reporter)

    def get_namer(self) -> ApprovalNamer:
        if self.namer is not None:
            return self.namer
        return get_default_namer()
