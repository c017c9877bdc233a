# topmark:header:start
#
#   project      : Glimpse
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Glimpse test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Tests must never touch the developer's real configuration profile. The autouse
    `isolate_environment` fixture points the per-user config directory at a
    temporary location for every test.

    Build profiles for resolver tests with `make_profile` (runtime defaults plus
    overrides) and option surfaces with `make_options`.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from glimpse.config import logging
from glimpse.config.profile import ConfigProfile

if TYPE_CHECKING:
    from pathlib import Path

    from glimpse.config.types import OptionSurface

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
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
mark_config: DecoratorType[Any] = as_typed_mark(pytest.mark.config)
mark_resolver: DecoratorType[Any] = as_typed_mark(pytest.mark.resolver)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def isolate_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate every test from the developer's shell environment.

    - ``GLIMPSE_LOG_LEVEL`` is removed so an exported value cannot force DEBUG/TRACE
      noise into CLI output.
    - ``XDG_CONFIG_HOME`` and ``HOME`` point into ``tmp_path`` so the profile
      location returned by `glimpse.config.get_config_path` is private to the test.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture used to manipulate environment variables.

    Returns:
        Path: The isolated configuration home directory.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV, raising=False)

    config_home: Path = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    return config_home


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure pytest settings and customize logging for the test suite.

    This function sets the logging level to TRACE for all tests,
    ensuring detailed output is captured during test execution.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_profile(**overrides: Any) -> ConfigProfile:
    """Return a `ConfigProfile` built from the runtime defaults and overrides.

    Args:
        **overrides (Any): Field overrides applied with `dataclasses.replace`.
            ``default_excludes`` may be given as a list; it is stored as a tuple.

    Returns:
        ConfigProfile: An immutable profile for use in tests.
    """
    if "default_excludes" in overrides:
        overrides["default_excludes"] = tuple(overrides["default_excludes"])
    return dataclasses.replace(ConfigProfile.from_defaults(), **overrides)


def make_options(**values: Any) -> OptionSurface:
    """Return an `OptionSurface` holding only the given keys.

    Unlisted keys are absent, which the resolver treats as "not supplied".
    """
    return cast("OptionSurface", dict(values))
