"""
Approvals facade: the functions tests call.

    from approvals import verify, Options

    def test_report():
        verify(render_report(), Options().for_file(".md"))

First run fails and leaves ``*.received.*`` next to the test. Review it and
rename it to ``*.approved.*`` (or run ``approvals-approve``); later runs pass
while the output stays the same.
"""

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from approvals.core.defaults import (
    DefaultNamerDisposer,
    DefaultReporterDisposer,
    FrontLoadedReporterDisposer,
    NamerCreator,
    SubdirectoryDisposer,
    get_default_namer,
    get_default_reporter,
)
from approvals.core.file_approver import FileApprover
from approvals.core.options import Options
from approvals.domain.constants import (
    DEFAULT_APPROVALS_SUBDIRECTORY,
    NO_EXCEPTION_MESSAGE,
    VERIFY_ALL_HEADER_SEPARATOR,
)
from approvals.namers.existing_file_namer import ExistingFileNamer
from approvals.reporters.base import Reporter
from approvals.writers.base import ApprovalWriter
from approvals.writers.existing_file import ExistingFile
from approvals.writers.string_writer import BinaryWriter, StringWriter

__all__ = [
    "verify",
    "verify_with_converter",
    "verify_binary",
    "verify_all",
    "verify_exception_message",
    "verify_existing_file",
    "get_default_namer",
    "get_default_reporter",
    "use_approvals_subdirectory",
    "use_as_default_reporter",
    "use_as_front_loaded_reporter",
    "use_as_default_namer",
]

# =============================================================================
# Verifying single objects
# =============================================================================


def verify(data: Any, options: Options | None = None) -> None:
    """
    Verify text, a writer, or any object (via ``str()``).

    Strings are scrubbed before being written, so the received file shows
    exactly what is compared. Writers are written as-is and scrubbed in
    memory by the engine.

    Raises:
        ApprovalMismatchError: Received differs from approved
    """
    options = options or Options()

    if isinstance(data, ApprovalWriter):
        FileApprover.verify(
            options.get_namer(),
            data,
            options.get_reporter(),
            scrubber=options.scrubber,
        )
        return

    text = data if isinstance(data, str) else str(data)
    writer = StringWriter(options.scrub(text), options.file_extension)
    FileApprover.verify(
        options.get_namer(),
        writer,
        options.get_reporter(),
        scrubber=options.scrubber,
    )


def verify_with_converter(
    data: Any,
    converter: Callable[[Any], str],
    options: Options | None = None,
) -> None:
    """Verify ``converter(data)``."""
    verify(converter(data), options)


def verify_binary(
    data: bytes,
    extension: str,
    options: Options | None = None,
) -> None:
    """Verify raw bytes. Scrubbers do not apply to binary content."""
    options = options or Options()
    FileApprover.verify(
        options.get_namer(),
        BinaryWriter(data, extension),
        options.get_reporter(),
    )


def verify_exception_message(
    function_that_raises: Callable[[], Any],
    options: Options | None = None,
) -> None:
    """
    Verify the message of the exception raised by ``function_that_raises``.

    The exception is converted to text and verified like any other output;
    if nothing is raised, a fixed marker text is verified instead.
    """
    message = NO_EXCEPTION_MESSAGE
    try:
        function_that_raises()
    except Exception as e:
        message = str(e)
    verify(message, options)


# =============================================================================
# Verifying collections
# =============================================================================


def verify_all(
    items: Iterable[Any],
    header: str = "",
    formatter: Callable[[Any], str] | None = None,
    options: Options | None = None,
) -> None:
    """
    Verify every item of a collection in one approved file.

    Layout: optional header followed by two blank lines, then one formatted
    item per line. The default formatter is ``"[index] = item"``.
    """
    parts: list[str] = []
    if header:
        parts.append(header + VERIFY_ALL_HEADER_SEPARATOR)

    for index, item in enumerate(items):
        text = formatter(item) if formatter is not None else f"[{index}] = {item}"
        parts.append(text + "\n")

    verify("".join(parts), options)


def verify_existing_file(path: Path | str, options: Options | None = None) -> None:
    """
    Verify a file produced by the code under test.

    The file itself serves as the received file and is never deleted.
    """
    options = options or Options()
    writer = ExistingFile(path)
    namer = ExistingFileNamer(writer.path, options.get_namer())
    FileApprover.verify(namer, writer, options.get_reporter(), scrubber=options.scrubber)


# =============================================================================
# Customising defaults (each returns a Disposer)
# =============================================================================


def use_approvals_subdirectory(
    subdirectory: str = DEFAULT_APPROVALS_SUBDIRECTORY,
) -> SubdirectoryDisposer:
    return SubdirectoryDisposer(subdirectory)


def use_as_default_reporter(reporter: Reporter) -> DefaultReporterDisposer:
    return DefaultReporterDisposer(reporter)


def use_as_front_loaded_reporter(reporter: Reporter) -> FrontLoadedReporterDisposer:
    return FrontLoadedReporterDisposer(reporter)


def use_as_default_namer(namer_creator: NamerCreator) -> DefaultNamerDisposer:
    return DefaultNamerDisposer(namer_creator)
