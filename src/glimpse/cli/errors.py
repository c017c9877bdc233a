# topmark:header:start
#
#   project      : Glimpse
#   file         : errors.py
#   file_relpath : src/glimpse/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Glimpse CLI.

Usage:
    Raise these exceptions in the command or in parameter types to signal errors
    with standardized messages and exit codes.

Two families exist:
    - `GlimpseError` (a `click.ClickException`) for errors raised by the command
      body, such as an unreadable configuration profile.
    - `click.BadParameter` subclasses for errors raised while converting a single
      option or argument; Click prefixes their message with the parameter name.

Styling:
    `GlimpseError` prefers the project console if one is present in the Click
    context (see `show()`); otherwise Click's default styling is used.
"""

from __future__ import annotations

from typing import IO, Any

import click

from glimpse.cli.exit_codes import ExitCode


class GlimpseError(click.ClickException):
    """Base class for all Glimpse CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text.

        Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class GlimpseUsageError(GlimpseError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class GlimpseConfigError(GlimpseError):
    """Error for an unreadable or malformed configuration profile."""

    exit_code = ExitCode.CONFIG_ERROR


class InvalidPathError(click.BadParameter):
    """A positional path does not exist on the filesystem."""

    exit_code = ExitCode.FILE_NOT_FOUND


class InvalidEnumValueError(click.BadParameter):
    """An enum-valued option received a value outside its vocabulary."""

    exit_code = ExitCode.USAGE_ERROR


class InvalidPatternError(click.BadParameter):
    """A comma-delimited list option contains an empty or malformed piece."""

    exit_code = ExitCode.USAGE_ERROR
