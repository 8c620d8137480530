"""
Scrubbers: pure text normalizers applied before comparison.

Scrubbers are first-class functions; compose them with
``combine_scrubbers`` / ``scrub_all`` and pass the result to
``Options.with_scrubber``.
"""

from .scrubbers import (
    DATE_PATTERN,
    GUID_PATTERN,
    NO_SCRUBBER,
    TIMESTAMP_PATTERN,
    Scrubber,
    ScrubberWarning,
    combine_scrubbers,
    create_date_scrubber,
    create_guid_scrubber,
    create_line_scrubber,
    create_regex_scrubber,
    create_timestamp_scrubber,
    normalize_line_endings,
    scrub_all,
)

__all__ = [
    "Scrubber",
    "ScrubberWarning",
    "NO_SCRUBBER",
    "TIMESTAMP_PATTERN",
    "GUID_PATTERN",
    "DATE_PATTERN",
    "combine_scrubbers",
    "scrub_all",
    "create_regex_scrubber",
    "create_guid_scrubber",
    "create_timestamp_scrubber",
    "create_date_scrubber",
    "create_line_scrubber",
    "normalize_line_endings",
]
