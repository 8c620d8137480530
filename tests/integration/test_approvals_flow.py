"""
test_approvals_flow.py - facade integration tests

Full flow through the public functions:
first run fails → received reviewed and approved → later runs pass.
"""

from pathlib import Path

import pytest

from approvals import (
    ApprovalMismatchError,
    ApprovalMissingError,
    Options,
    QuietReporter,
    get_default_namer,
    use_approvals_subdirectory,
    use_as_default_namer,
    use_as_default_reporter,
    use_as_front_loaded_reporter,
    verify,
    verify_all,
    verify_binary,
    verify_exception_message,
    verify_existing_file,
    verify_with_converter,
)
from approvals.namers.approval_namer import ApprovalTestNamer
from approvals.scrubbers import create_guid_scrubber
from approvals.testing.approve_received import approve

GUID = "550e8400-e29b-41d4-a716-446655440000"


def approve_pending(namer: ApprovalTestNamer, extension: str = ".txt") -> None:
    approve(namer.get_received_file(extension))


@pytest.fixture
def options(namer: ApprovalTestNamer) -> Options:
    return Options().with_namer(namer).with_reporter(QuietReporter())


# =============================================================================
# Lifecycle
# =============================================================================

class TestLifecycle:
    """First run, approval, re-run."""

    def test_first_run_then_approved(self, namer: ApprovalTestNamer, options: Options):
        with pytest.raises(ApprovalMissingError):
            verify("report v1\n", options)

        approve_pending(namer)
        verify("report v1\n", options)

        assert not namer.get_received_file(".txt").exists()

    def test_regression_detected(self, namer: ApprovalTestNamer, options: Options):
        namer.get_approved_file(".txt").write_bytes(b"report v1\n")

        with pytest.raises(ApprovalMismatchError) as exc_info:
            verify("report v2\n", options)

        assert "First difference at line 1" in str(exc_info.value)
        assert namer.get_received_file(".txt").exists()

    def test_reporter_sees_first_run(self, namer: ApprovalTestNamer, recording_reporter):
        with pytest.raises(ApprovalMissingError):
            verify("x", Options().with_namer(namer).with_reporter(recording_reporter))

        assert recording_reporter.calls == [
            (namer.get_received_file(".txt"), namer.get_approved_file(".txt"))
        ]


# =============================================================================
# verify variants
# =============================================================================

class TestVerifyVariants:

    def test_object_uses_str(self, namer: ApprovalTestNamer, options: Options):
        namer.get_approved_file(".txt").write_bytes(b"(1, 2)")
        verify((1, 2), options)

    def test_converter(self, namer: ApprovalTestNamer, options: Options):
        namer.get_approved_file(".txt").write_bytes(b"1|2|3")
        verify_with_converter([1, 2, 3], lambda items: "|".join(map(str, items)), options)

    def test_file_extension(self, namer: ApprovalTestNamer, options: Options):
        namer.get_approved_file(".json").write_bytes(b'{"a": 1}')
        verify('{"a": 1}', options.for_file("json"))

    def test_scrubbed_received_file(self, namer: ApprovalTestNamer, options: Options):
        """String verification writes the scrubbed text."""
        with pytest.raises(ApprovalMissingError):
            verify(f"id {GUID}", options.with_scrubber(create_guid_scrubber()))

        assert namer.get_received_file(".txt").read_text(encoding="utf-8") == "id guid_1"

    def test_binary(self, namer: ApprovalTestNamer, options: Options):
        namer.get_approved_file(".png").write_bytes(b"\x89PNG")
        verify_binary(b"\x89PNG", "png", options)


class TestVerifyExceptionMessage:

    def test_message_verified(self, namer: ApprovalTestNamer, options: Options):
        namer.get_approved_file(".txt").write_bytes(b"bad input: 42")

        def raises():
            raise ValueError("bad input: 42")

        verify_exception_message(raises, options)

    def test_no_exception_marker(self, namer: ApprovalTestNamer, options: Options):
        with pytest.raises(ApprovalMissingError):
            verify_exception_message(lambda: None, options)

        received = namer.get_received_file(".txt")
        assert received.read_text(encoding="utf-8") == "*** no exception thrown ***"


class TestVerifyAll:

    def test_header_and_default_formatter(self, namer: ApprovalTestNamer, options: Options):
        with pytest.raises(ApprovalMissingError):
            verify_all(["a", "b"], header="Letters", options=options)

        received = namer.get_received_file(".txt")
        assert received.read_bytes() == b"Letters\n\n\n[0] = a\n[1] = b\n"

    def test_custom_formatter_without_header(self, namer: ApprovalTestNamer, options: Options):
        namer.get_approved_file(".txt").write_bytes(b"A\nB\n")
        verify_all(["a", "b"], formatter=str.upper, options=options)

    def test_empty_collection(self, namer: ApprovalTestNamer, options: Options):
        namer.get_approved_file(".txt").write_bytes(b"")
        verify_all([], options=options)


class TestVerifyExistingFile:

    def test_existing_file_is_received_and_kept(
        self, namer: ApprovalTestNamer, options: Options, tmp_path: Path
    ):
        produced = tmp_path / "out" / "report.csv"
        produced.parent.mkdir()
        produced.write_bytes(b"a,b\n1,2\n")
        namer.get_approved_file(".csv").write_bytes(b"a,b\n1,2\n")

        verify_existing_file(produced, options)

        assert produced.exists()

    def test_mismatch_points_at_existing_file(
        self, namer: ApprovalTestNamer, options: Options, tmp_path: Path
    ):
        produced = tmp_path / "report.csv"
        produced.write_bytes(b"new")
        namer.get_approved_file(".csv").write_bytes(b"old")

        with pytest.raises(ApprovalMismatchError) as exc_info:
            verify_existing_file(produced, options)

        assert exc_info.value.received_path == produced


# =============================================================================
# Defaults
# =============================================================================

class TestDefaults:

    def test_default_namer_names_after_running_test(self):
        namer = get_default_namer()

        assert namer.get_approval_name() == (
            "test_approvals_flow.TestDefaults.test_default_namer_names_after_running_test"
        )
        assert namer.get_approved_file(".txt").parent == Path(__file__).parent

    def test_use_as_default_namer(self, namer: ApprovalTestNamer):
        namer.get_approved_file(".txt").write_bytes(b"via default namer")

        with use_as_default_namer(lambda: namer):
            verify("via default namer")

    def test_use_as_default_reporter(self, namer: ApprovalTestNamer, recording_reporter):
        with use_as_default_reporter(recording_reporter):
            with pytest.raises(ApprovalMissingError):
                verify("x", Options().with_namer(namer))

        assert len(recording_reporter.calls) == 1

    def test_front_loaded_reporter_preempts_explicit(
        self, namer: ApprovalTestNamer, make_reporter
    ):
        front = make_reporter(name="front")
        explicit = make_reporter(name="explicit")

        with use_as_front_loaded_reporter(front):
            with pytest.raises(ApprovalMissingError):
                verify("x", Options().with_namer(namer).with_reporter(explicit))

        assert len(front.calls) == 1
        assert explicit.calls == []

    def test_use_approvals_subdirectory(self, identity, tmp_path: Path):
        with use_approvals_subdirectory():
            namer = ApprovalTestNamer(identity)
            with pytest.raises(ApprovalMissingError):
                verify("x", Options().with_namer(namer))
            received = namer.get_received_file(".txt")

        assert received.parent == tmp_path / "approval_tests"
        assert received.exists()
