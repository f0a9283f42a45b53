# topmark:header:start
#
#   project      : API Surface
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the API Surface test suite.

Sets up TRACE logging for test runs and provides `module_factory`, which
builds throwaway modules from source text and registers them in `sys.modules`
for the duration of one test. Checks only inspect modules that are already
loaded, so every test creates the modules it inspects this way.
"""

from __future__ import annotations

import logging as logging_
import sys
import textwrap
from types import ModuleType
from typing import TYPE_CHECKING, Any, Callable, TypeVar, cast

import pytest

from apisurface.config import logging

if TYPE_CHECKING:
    from collections.abc import Iterator

    from apisurface.recorder.model import OutcomeLog

pytest_plugins = ["pytester"]

F = TypeVar("F", bound=Callable[..., object])

ModuleFactory = Callable[..., ModuleType]


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.fixture`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.fixture`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return cast("Callable[[F], F]", pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_apisurface_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure the runtime log level is not forced via env during tests.

    CLI invocations reconfigure the root logger; its level and handlers are
    restored after every test.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove ``APISURFACE_LOG_LEVEL``.

    Yields:
        None: Control to the test.
    """
    monkeypatch.delenv("APISURFACE_LOG_LEVEL", raising=False)
    root = logging_.getLogger()
    level: int = root.level
    own = [h for h in root.handlers if isinstance(h.formatter, logging.ChalkFormatter)]
    yield
    root.setLevel(level)
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, logging.ChalkFormatter) and handler not in own:
            root.removeHandler(handler)
    for handler in own:
        if handler not in root.handlers:
            root.addHandler(handler)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level for all tests so probe details show up on failure."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_module(name: str, source: str = "") -> ModuleType:
    """Build a module named ``name`` by executing ``source`` in its namespace.

    The module is not registered anywhere; see `module_factory` for that.

    Args:
        name (str): Dotted module name.
        source (str): Python source, dedented before execution.

    Returns:
        ModuleType: The populated module.
    """
    module = ModuleType(name)
    exec(compile(textwrap.dedent(source), f"<{name}>", "exec"), vars(module))
    return module


@fixture
def module_factory(monkeypatch: pytest.MonkeyPatch) -> ModuleFactory:
    """Return a factory creating modules registered in `sys.modules` for one test.

    Args:
        monkeypatch (pytest.MonkeyPatch): Restores `sys.modules` after the test.

    Returns:
        ModuleFactory: ``factory(name, source="") -> ModuleType``.
    """

    def _factory(name: str, source: str = "") -> ModuleType:
        module: ModuleType = make_module(name, source)
        monkeypatch.setitem(sys.modules, name, module)
        return module

    return _factory


FOO_SOURCE = """
    def foo():
        return "foo"

    def bar():
        return "bar"

    def _helper():
        return "helper"
"""

BAZ_SOURCE = """
    __all__ = ["foo", "bar"]

    def foo():
        return "foo"

    def bar():
        return "bar"

    def baz():
        return "baz"
"""


@fixture
def foo_module(module_factory: ModuleFactory) -> ModuleType:
    """A module with public ``foo`` and ``bar`` and a private ``_helper``."""
    return module_factory("sample.foo", FOO_SOURCE)


@fixture
def baz_module(module_factory: ModuleFactory) -> ModuleType:
    """A module exporting ``foo`` and ``bar`` by default, with ``baz`` importable by name."""
    return module_factory("sample.baz", BAZ_SOURCE)


@fixture
def outcome_log() -> OutcomeLog:
    """A fresh in-memory recorder."""
    from apisurface.recorder.model import OutcomeLog

    return OutcomeLog()
