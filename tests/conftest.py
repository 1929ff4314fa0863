# topmark:header:start
#
#   project      : PillarMode
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the PillarMode test suite.

Sets TRACE logging for test runs and provides typed wrappers around pytest
marks plus a few shared fixtures.

Notes:
    Tests that need a registry of their own should build one with
    ``RuleRegistry()`` rather than mutate the cached
    ``get_rule_registry()`` instance shared by the whole process.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from pillarmode.config import logging
from pillarmode.rules.instances import build_rule_registry

if TYPE_CHECKING:
    from pathlib import Path

    from pillarmode.rules.registry import RuleRegistry

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_dev_validation: DecoratorType[Any] = as_typed_mark(pytest.mark.dev_validation)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_pillarmode_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to drop ``PILLARMODE_LOG_LEVEL``.
    """
    monkeypatch.delenv("PILLARMODE_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set TRACE logging for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test from an empty project directory.

    Keeps configuration discovery (``pyproject.toml``, ``pillarmode.toml``)
    from picking up files of the repository running the tests.

    Returns:
        Path: The temporary working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    return cwd


@pytest.fixture
def builtin_registry() -> RuleRegistry:
    """A fresh registry populated with the built-in rules only (no plugins)."""
    return build_rule_registry(include_plugins=False)
