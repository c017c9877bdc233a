# topmark:header:start
#
#   project      : Glimpse
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running Glimpse in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so **relative** positional paths and exclude
entries are checked against the temporary test directory.

Both runners inject a ``consumer`` into Click's context object: the resolved
settings are appended to the returned list instead of being dumped as TOML.
Pass ``capture=False`` to exercise the TOML dump.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from glimpse.cli.exit_codes import ExitCode
from glimpse.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path

    from glimpse.config.resolver import ResolvedSettings


def _make_obj(captured: list[ResolvedSettings], capture: bool, **extra: Any) -> dict[str, Any]:
    obj: dict[str, Any] = dict(extra)
    if capture:
        obj["consumer"] = captured.append
    return obj


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    capture: bool = True,
    **obj: Any,
) -> tuple[Result, list[ResolvedSettings]]:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD for the
            command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. `["-e", "build"]`.
        capture (bool): If True, collect the resolved settings instead of dumping them.
        **obj (Any): Extra entries injected into Click's context object.

    Returns:
        tuple[Result, list[ResolvedSettings]]: The `click.testing.Result` and the
            settings handed to the consumer (empty if none were produced).

    Example:
        ```python
        result, settings = run_cli_in(tmp_path, ["-e", "build"])
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    captured: list[ResolvedSettings] = []
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        result: Result = runner.invoke(
            cli,
            argv,
            obj=_make_obj(captured, capture, **obj),  # inject test overrides into ctx.obj
        )
    finally:
        os.chdir(cwd)
    return result, captured


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    capture: bool = True,
    **obj: Any,
) -> tuple[Result, list[ResolvedSettings]]:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does **not** depend on relative paths (e.g.,
    ``--help`` / ``--version``) or when all provided paths are absolute.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--help"]``.
        capture (bool): If True, collect the resolved settings instead of dumping them.
        **obj (Any): Extra entries injected into Click's context object.

    Returns:
        tuple[Result, list[ResolvedSettings]]: The result and the captured settings.
    """
    runner = CliRunner()
    captured: list[ResolvedSettings] = []
    result: Result = runner.invoke(cli, argv, obj=_make_obj(captured, capture, **obj))
    return result, captured


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_FILE_NOT_FOUND(result: Result) -> None:
    """Assert that the command exited with FILE_NOT_FOUND (code 66)."""
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
