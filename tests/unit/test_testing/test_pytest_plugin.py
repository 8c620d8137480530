"""
test_pytest_plugin.py - pytest plugin hooks

Hooks are called directly with stand-in items and configs so the plugin
under test is never registered twice.
"""

from pathlib import Path
from types import SimpleNamespace

import pytest

from approvals.core import defaults
from approvals.core.defaults import (
    ScopedDefault,
    get_default_reporter,
    reporter_from_environment,
)
from approvals.domain.schemas import ApprovalIdentity
from approvals.namers.identity import current_identity
from approvals.reporters.base import QuietReporter
from approvals.reporters.console import ConsoleDiffReporter
from approvals.testing import pytest_plugin
from approvals.testing.pytest_plugin import identity_from_item


class SampleSuite:
    pass


def make_item(tmp_path: Path, **overrides) -> SimpleNamespace:
    fields = {
        "path": tmp_path / "test_mod.py",
        "name": "test_fn",
        "originalname": "test_fn",
        "callspec": None,
        "cls": None,
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


class FakeConfig:
    """Just enough of pytest.Config for the configure hooks."""

    def __init__(self, reporter_name: str | None):
        self.reporter_name = reporter_name
        self.stash = pytest.Stash()

    def getoption(self, name, default=None):
        assert name == "approvals_reporter"
        return self.reporter_name


class TestIdentityFromItem:

    def test_module_function(self, tmp_path: Path):
        identity = identity_from_item(make_item(tmp_path))

        assert identity == ApprovalIdentity(
            source_file=tmp_path / "test_mod.py",
            test_name="test_fn",
        )

    def test_method_with_parameters(self, tmp_path: Path):
        item = make_item(
            tmp_path,
            name="test_fn[en-1]",
            callspec=SimpleNamespace(id="en-1"),
            cls=SampleSuite,
        )

        identity = identity_from_item(item)

        assert identity.class_name == "SampleSuite"
        assert identity.parameters == "en-1"
        assert identity.approval_name == "test_mod.SampleSuite.test_fn.en-1"

    def test_item_without_originalname(self, tmp_path: Path):
        item = make_item(tmp_path, name="check[x]")
        del item.originalname

        identity = identity_from_item(item)

        assert identity.test_name == "check"
        assert identity.parameters == "x"

    def test_real_item(self, request):
        identity = identity_from_item(request.node)

        assert identity.source_file == Path(__file__)
        assert identity.class_name == "TestIdentityFromItem"
        assert identity.test_name == "test_real_item"


class TestRuntestProtocol:
    """The hookwrapper publishes the identity only while the test runs."""

    def test_identity_published_and_restored(self, tmp_path: Path):
        outer = current_identity()
        wrapper = pytest_plugin.pytest_runtest_protocol(make_item(tmp_path), None)

        next(wrapper)
        assert current_identity().source_file == tmp_path / "test_mod.py"

        with pytest.raises(StopIteration):
            next(wrapper)
        assert current_identity() == outer

    def test_restored_when_test_raises(self, tmp_path: Path):
        outer = current_identity()
        wrapper = pytest_plugin.pytest_runtest_protocol(make_item(tmp_path), None)

        next(wrapper)
        with pytest.raises(RuntimeError):
            wrapper.throw(RuntimeError("boom"))

        assert current_identity() == outer


class TestReporterOption:

    def test_installs_and_removes_default_reporter(self):
        original = get_default_reporter()
        config = FakeConfig("console")

        pytest_plugin.pytest_configure(config)
        assert isinstance(get_default_reporter(), ConsoleDiffReporter)

        pytest_plugin.pytest_unconfigure(config)
        assert get_default_reporter() is original

    def test_no_option_changes_nothing(self):
        original = get_default_reporter()
        config = FakeConfig(None)

        pytest_plugin.pytest_configure(config)
        pytest_plugin.pytest_unconfigure(config)

        assert get_default_reporter() is original

    def test_unknown_reporter_is_usage_error(self):
        with pytest.raises(pytest.UsageError, match="UNKNOWN_REPORTER"):
            pytest_plugin.pytest_configure(FakeConfig("nope"))

    def test_option_wins_over_broken_environment_default(self, monkeypatch):
        monkeypatch.setenv("APPROVALS_REPORTER", "nosuch")
        monkeypatch.setattr(
            defaults,
            "_default_reporter",
            ScopedDefault("default_reporter", reporter_from_environment),
        )
        config = FakeConfig("quiet")

        pytest_plugin.pytest_configure(config)
        try:
            assert isinstance(get_default_reporter(), QuietReporter)
        finally:
            pytest_plugin.pytest_unconfigure(config)
