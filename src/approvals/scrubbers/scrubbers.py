"""
Scrubbers for approval comparisons.

A scrubber is a plain ``str -> str`` function that replaces
non-deterministic substrings with stable placeholders:
- Timestamps → <TIME>
- GUIDs → guid_1, guid_2, ... (same GUID, same number)
- Dates → <DATE>

Every built-in scrubber is idempotent: its placeholders never match its
own pattern, so ``scrub(scrub(x)) == scrub(x)``.

Regex scrubbers count replacements and can warn on over-scrubbing.
"""

import logging
import re
import warnings
from collections.abc import Callable

logger = logging.getLogger(__name__)

Scrubber = Callable[[str], str]
Replacement = str | Callable[[int], str]

# ISO 8601 timestamp pattern
TIMESTAMP_PATTERN = re.compile(
    r'\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:Z|[+-]\d{2}:?\d{2})?'
)

# GUID / UUID pattern
GUID_PATTERN = re.compile(
    r'[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}'
)

# Date patterns (YYYY-MM-DD, YYYY/MM/DD)
DATE_PATTERN = re.compile(
    r'\d{4}[-/]\d{2}[-/]\d{2}'
)


class ScrubberWarning(UserWarning):
    """Warning for suspicious scrubbing (too many replacements)."""
    pass


def _identity(text: str) -> str:
    return text


NO_SCRUBBER: Scrubber = _identity


def combine_scrubbers(*scrubbers: Scrubber) -> Scrubber:
    """
    Compose scrubbers by sequential application, left to right.

    Args:
        *scrubbers: Scrubbers to apply in order

    Returns:
        A single scrubber
    """
    if not scrubbers:
        return NO_SCRUBBER
    if len(scrubbers) == 1:
        return scrubbers[0]

    def scrub(text: str) -> str:
        for scrubber in scrubbers:
            text = scrubber(text)
        return text

    return scrub


scrub_all = combine_scrubbers


def create_regex_scrubber(
    pattern: str | re.Pattern[str],
    replacement: Replacement,
    max_replacements: int | None = None,
) -> Scrubber:
    """
    Build a scrubber that substitutes every match of ``pattern``.

    Args:
        pattern: Regex (string or compiled)
        replacement: Replacement template, or a function receiving the
            1-based index of each distinct matched value (numeric-sequence
            scrubbing: the same value always maps to the same index)
        max_replacements: Emit ScrubberWarning above this many replacements
            (None = never warn)

    Returns:
        Scrubber function
    """
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern

    def scrub(text: str) -> str:
        if callable(replacement):
            seen: dict[str, int] = {}

            def substitute(match: re.Match[str]) -> str:
                value = match.group(0)
                if value not in seen:
                    seen[value] = len(seen) + 1
                return replacement(seen[value])

            result, count = regex.subn(substitute, text)
        else:
            result, count = regex.subn(replacement, text)

        if count:
            logger.debug(f"Scrubbed {count} match(es) of {regex.pattern!r}")
        if max_replacements is not None and count > max_replacements:
            warnings.warn(
                f"Replacements of {regex.pattern!r} ({count}) exceed threshold "
                f"({max_replacements}). Scrubber may be masking real content.",
                ScrubberWarning,
                stacklevel=2,
            )
        return result

    return scrub


def create_guid_scrubber(max_replacements: int | None = None) -> Scrubber:
    """Replace GUIDs with guid_1, guid_2, ... in order of first appearance."""
    return create_regex_scrubber(
        GUID_PATTERN,
        lambda n: f"guid_{n}",
        max_replacements=max_replacements,
    )


def create_timestamp_scrubber(
    placeholder: str = "<TIME>",
    max_replacements: int | None = None,
) -> Scrubber:
    """Replace ISO 8601 timestamps with a fixed placeholder."""
    return create_regex_scrubber(
        TIMESTAMP_PATTERN,
        lambda _: placeholder,
        max_replacements=max_replacements,
    )


def create_date_scrubber(
    pattern: str | re.Pattern[str] = DATE_PATTERN,
    placeholder: str = "<DATE>",
) -> Scrubber:
    """Replace dates matching ``pattern`` with a fixed placeholder."""
    return create_regex_scrubber(pattern, lambda _: placeholder)


def create_line_scrubber(substring: str) -> Scrubber:
    """Drop every line that contains ``substring``."""

    def scrub(text: str) -> str:
        return "".join(
            line for line in text.splitlines(keepends=True)
            if substring not in line
        )

    return scrub


def normalize_line_endings(text: str) -> str:
    """Convert CRLF and CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")
