# topmark:header:start
#
#   project      : Glimpse
#   file         : console.py
#   file_relpath : src/glimpse/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

`ClickConsole` separates CLI output from internal logging. Use it for messages
intended for end users (the resolved settings dump, profile diagnostics) and keep
`logging` for developer diagnostics.
"""

from __future__ import annotations

from typing import TextIO

import click


class ClickConsole:
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool | None): True forces ANSI color codes, False disables them,
            None lets Click decide per stream (color only on a terminal).
        out (TextIO | None): Stream for standard output. None lets Click pick the
            current ``stdout`` at write time.
        err (TextIO | None): Stream for error output. None lets Click pick the
            current ``stderr`` at write time.
    """

    enable_color: bool | None
    out: TextIO | None
    err: TextIO | None

    def __init__(
        self,
        *,
        enable_color: bool | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out
        self.err = err

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        click.secho(
            text, nl=nl, file=self.err, err=True, color=self.enable_color, fg="yellow"
        )

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(
            text, nl=nl, file=self.err, err=True, color=self.enable_color, fg="bright_red"
        )
