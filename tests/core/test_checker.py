# topmark:header:start
#
#   project      : API Surface
#   file         : test_checker.py
#   file_relpath : tests/core/test_checker.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""`SurfaceChecker`: bound recorder and raising ``assert_*`` helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from apisurface.core.checker import SurfaceChecker
from apisurface.errors import SurfaceMismatchError
from apisurface.recorder.model import OutcomeLog

if TYPE_CHECKING:
    from types import ModuleType


def test_checker_records_to_its_own_log(foo_module: ModuleType) -> None:
    """Each checker owns a fresh log unless given one."""
    first, second = SurfaceChecker(), SurfaceChecker()
    assert first.public_ok("sample.foo", "foo", "bar")
    assert isinstance(first.recorder, OutcomeLog)
    assert isinstance(second.recorder, OutcomeLog)
    assert len(first.recorder) == 1
    assert len(second.recorder) == 0


def test_assert_public_ok_passes_silently(foo_module: ModuleType) -> None:
    """A matching surface returns None and still records the outcome."""
    log = OutcomeLog()
    SurfaceChecker(recorder=log).assert_public_ok("sample.foo", "foo", "bar")
    assert [o.passed for o in log] == [True]


def test_assert_public_ok_raises_with_diagnostics(foo_module: ModuleType) -> None:
    """A mismatch raises an AssertionError carrying label and diagnostics."""
    log = OutcomeLog()
    checker = SurfaceChecker(recorder=log)
    with pytest.raises(AssertionError) as excinfo:
        checker.assert_public_ok("sample.foo", "foo")
    error = excinfo.value
    assert isinstance(error, SurfaceMismatchError)
    assert error.label == "public API for sample.foo"
    assert error.diagnostics == ("extra: bar",)
    assert str(error) == "Failed: public API for sample.foo\n  extra: bar"
    assert log.last is not None
    assert log.last.diagnostics == ("extra: bar",)


def test_assert_import_ok_raises_on_extra_optional(baz_module: ModuleType) -> None:
    """The import check raises with the optional-phase diagnostic."""
    checker = SurfaceChecker()
    with pytest.raises(SurfaceMismatchError, match="extra optionally exportable: baz"):
        checker.assert_import_ok("sample.baz", export=["foo", "bar"])
    checker.assert_import_ok("sample.baz", export=["foo", "bar"], export_ok=["baz"])


def test_assert_helpers_report_only_the_current_check(foo_module: ModuleType) -> None:
    """Earlier failures in the shared log do not leak into the raised error."""
    checker = SurfaceChecker()
    assert not checker.public_ok("sample.foo")
    with pytest.raises(SurfaceMismatchError) as excinfo:
        checker.assert_public_ok("sample.foo", "foo", "bar", "baz")
    assert excinfo.value.diagnostics == ("missing: baz",)


def test_assert_on_unloaded_module() -> None:
    """The not-loaded diagnostic is carried by the error."""
    with pytest.raises(SurfaceMismatchError) as excinfo:
        SurfaceChecker().assert_import_ok("sample.nowhere")
    assert excinfo.value.diagnostics == ("Module 'sample.nowhere' not loaded",)
