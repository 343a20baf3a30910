# topmark:header:start
#
#   project      : AraReport
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Shared pytest setup for the AraReport suite.

Provides type-preserving wrappers around pytest decorators, TRACE logging for
the whole session, and an autouse fixture that clears ``FORCE_COLOR``,
``NO_COLOR`` and ``ARAREPORT_LOG_LEVEL`` so ``ColorChoice.AUTO`` renders plain
text unless a test opts in.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from arareport.config.logging import TRACE_LEVEL, setup_logging
from arareport.constants import FORCE_COLOR_ENV, LOG_LEVEL_ENV, NO_COLOR_ENV
from arareport.source import Source, SourceMap

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Return ``mark`` as a decorator whose result keeps the decorated function's type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_hypothesis_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis_slow)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed `pytest.mark.parametrize`."""
    return as_typed_mark(pytest.mark.parametrize(*args, **kwargs))


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log everything down to TRACE while tests run."""
    setup_logging(level=TRACE_LEVEL)


@fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (LOG_LEVEL_ENV, FORCE_COLOR_ENV, NO_COLOR_ENV):
        monkeypatch.delenv(name, raising=False)


@fixture()
def a_src_map() -> SourceMap:
    """Source map holding ``a.src`` with content ``"x = 1\\ny = 2\\n"``."""
    return SourceMap([Source("a.src", "x = 1\ny = 2\n")])
