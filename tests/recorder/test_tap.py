# topmark:header:start
#
#   project      : API Surface
#   file         : test_tap.py
#   file_relpath : tests/recorder/test_tap.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TAP output."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from apisurface.core.checks import import_ok, public_ok
from apisurface.recorder.tap import TapRecorder

if TYPE_CHECKING:
    from types import ModuleType


def test_tap_lines_are_numbered() -> None:
    """Each outcome gets the next number; the plan closes the stream."""
    out = io.StringIO()
    tap = TapRecorder(out=out)
    tap.record(True, "one")
    tap.record(False, "two")
    tap.diagnostic("missing: a\nextra: b")
    tap.plan()
    assert out.getvalue() == (
        "ok 1 - one\nnot ok 2 - two\n# missing: a\n# extra: b\n1..2\n"
    )
    assert (tap.count, tap.failed) == (2, 1)


def test_tap_diagnostics_to_separate_stream() -> None:
    """Diagnostics can go to their own stream."""
    out, err = io.StringIO(), io.StringIO()
    tap = TapRecorder(out=out, err=err)
    tap.record(False, "check")
    tap.diagnostic("")
    assert out.getvalue() == "not ok 1 - check\n"
    assert err.getvalue() == "#\n"


def test_checks_write_tap(foo_module: ModuleType, baz_module: ModuleType) -> None:
    """The checks drive a TAP recorder like any other."""
    out = io.StringIO()
    tap = TapRecorder(out=out)
    public_ok("sample.foo", "foo", recorder=tap)
    import_ok("sample.baz", export=["foo", "bar"], export_ok="baz", recorder=tap)
    assert out.getvalue().splitlines() == [
        "not ok 1 - public API for sample.foo",
        "# extra: bar",
        "ok 2 - importing from sample.baz",
    ]
