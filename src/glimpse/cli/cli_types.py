# topmark:header:start
#
#   project      : Glimpse
#   file         : cli_types.py
#   file_relpath : src/glimpse/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared CLI parameter types and argument helpers for Glimpse.

This module is the central container for the custom Click parameter types that
turn raw command-line strings into typed values, and for `build_option_surface`,
which assembles the parsed values into an `OptionSurface`.

Parameter types:
    - `EnumChoiceParam`: exact conversion of an Enum value to its member.
    - `ExistingPathParam`: a path that must exist (positional ``PATHS``).
    - `IncludeListParam`: comma-delimited include patterns.
    - `ExcludeListParam`: comma-delimited exclude entries, each classified as a
      literal path or a pattern.

Every conversion failure raises a `click.BadParameter` subclass from
`glimpse.cli.errors` so the process exits with a specific code.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import (
    TYPE_CHECKING,
    Any,
    Generic,
    Iterable,
    Protocol,
    TypeVar,
    cast,
)

import click
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from glimpse.cli.errors import InvalidEnumValueError, InvalidPathError, InvalidPatternError
from glimpse.config.logging import get_logger
from glimpse.config.types import PatternExclude, classify_exclude

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

    from glimpse.config.types import ExcludeEntry, OptionSurface, OutputFormat, TokenizerKind

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

# Type variable bounded to Enum for generic EnumParam
E = TypeVar("E", bound=Enum)

logger = get_logger(__name__)


# --- Custom Click parameter types for the Glimpse CLI ---


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        # Members are string-valued (e.g., OutputFormat)
        self.choices = [cast("str", getattr(e, "value", str(e))) for e in self.enum_cls]

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Converts a string to a member of the Enum."""
        if value is None:
            return None
        if isinstance(value, self.enum_cls):
            return value

        # Exact lookup by the enum's string value
        lookup: dict[str, E] = {
            cast("str", getattr(choice, "value", str(choice))): choice
            for choice in cast("Iterable[E]", self.enum_cls)
        }

        key = str(value)
        if key in lookup:
            return lookup[key]

        raise InvalidEnumValueError(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param=param,
            ctx=ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list["ClickCompletionItem"]:
        """Tab completion for Click.

        Bash: `eval "$(_GLIMPSE_COMPLETE=bash_source glimpse)"`
        Zsh: `eval "$(_GLIMPSE_COMPLETE=zsh_source glimpse)"`
        """
        # Runtime import to avoid import-time dependency for non-completion paths
        from click.shell_completion import (
            CompletionItem as RuntimeCompletionItem,
        )

        prefix = incomplete or ""
        return [
            RuntimeCompletionItem(choice)
            for choice in self.choices
            if choice.startswith(prefix)
        ]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumParam({self.enum_cls.__name__})"


class ExistingPathParam(ParamTypeBase):
    """A filesystem path that must exist when the command line is parsed.

    The path is kept exactly as typed (not resolved) so downstream output shows
    the user's spelling.
    """

    name = "path"

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> Path:
        """Validate that ``value`` exists and return it as a `Path`."""
        path = value if isinstance(value, Path) else Path(value)
        # os.path.exists reports False for names the OS rejects (e.g. too long).
        if not os.path.exists(path):
            raise InvalidPathError(f"Path '{value}' does not exist", param=param, ctx=ctx)
        return path


def validate_pattern(
    piece: str,
    param: click.Parameter | None = None,
    ctx: click.Context | None = None,
) -> str:
    """Check that ``piece`` compiles as a gitwildmatch pattern.

    Args:
        piece (str): A single pattern, already split from its comma-delimited value.
        param (click.Parameter | None): The parameter being converted, for error context.
        ctx (click.Context | None): The current Click context, for error context.

    Returns:
        str: The unchanged pattern.

    Raises:
        InvalidPatternError: If the pattern is rejected by the compiler.
    """
    try:
        GitWildMatchPattern(piece)
    except ValueError as e:
        raise InvalidPatternError(f"Invalid pattern '{piece}': {e}", param=param, ctx=ctx) from e
    return piece


class CommaListParam(ParamTypeBase):
    """Base type for comma-delimited list options.

    Each occurrence of the option is split on ``,`` and every piece is checked with
    `convert_piece`. A single malformed piece fails the whole occurrence. Repeated
    occurrences (``multiple=True``) arrive as one list per occurrence and are
    flattened in order by `build_option_surface`.
    """

    name = "list"

    def convert_piece(
        self,
        piece: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> Any:
        """Convert a single non-empty piece. Subclasses override this."""
        return piece

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> list[Any]:
        """Split ``value`` on commas and convert every piece."""
        if isinstance(value, list):
            return cast("list[Any]", value)

        out: list[Any] = []
        for piece in str(value).split(","):
            if not piece:
                raise InvalidPatternError(
                    f"Empty entry in '{value}'",
                    param=param,
                    ctx=ctx,
                )
            out.append(self.convert_piece(piece, param, ctx))
        return out


class IncludeListParam(CommaListParam):
    """Comma-delimited include patterns."""

    name = "patterns"

    def convert_piece(
        self,
        piece: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> str:
        """Validate one include pattern."""
        return validate_pattern(piece, param, ctx)


class ExcludeListParam(CommaListParam):
    """Comma-delimited exclude entries.

    Each piece is classified once with `classify_exclude`; only pieces that do not
    name an existing path are compiled as patterns.
    """

    name = "excludes"

    def convert_piece(
        self,
        piece: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> ExcludeEntry:
        """Classify one exclude piece, validating it when it is a pattern."""
        entry: ExcludeEntry = classify_exclude(piece)
        if isinstance(entry, PatternExclude):
            validate_pattern(entry.pattern, param, ctx)
        return entry


def _flatten(groups: Iterable[list[Any]] | None) -> list[Any] | None:
    """Flatten per-occurrence lists; return None when the option was not given."""
    if not groups:
        return None
    return [item for group in groups for item in group]


def build_option_surface(
    *,
    paths: Iterable[Path] | None = None,
    max_size: int | None = None,
    max_depth: int | None = None,
    output_format: OutputFormat | None = None,
    include_patterns: Iterable[list[str]] | None = None,
    exclude_entries: Iterable[list[ExcludeEntry]] | None = None,
    tokenizer_kind: TokenizerKind | None = None,
    tokenizer_model: str | None = None,
    tokenizer_file: Path | None = None,
    show_hidden: bool = False,
    ignore_vcs_ignore: bool = False,
    disable_token_counting: bool = False,
    interactive: bool = False,
    print_to_stdout: bool = False,
    show_config_path_only: bool = False,
    output_file: Path | None = None,
    pdf_output_path: Path | None = None,
    thread_count: int | None = None,
) -> OptionSurface:
    """Build an OptionSurface dictionary from the values Click parsed.

    Args:
        paths (Iterable[Path] | None): Validated positional paths.
        max_size (int | None): ``--max-size`` value.
        max_depth (int | None): ``--max-depth`` value.
        output_format (OutputFormat | None): ``--output`` value.
        include_patterns (Iterable[list[str]] | None): ``--include`` values, one list
            per occurrence.
        exclude_entries (Iterable[list[ExcludeEntry]] | None): ``--exclude`` values,
            one list per occurrence.
        tokenizer_kind (TokenizerKind | None): ``--tokenizer`` value.
        tokenizer_model (str | None): ``--model`` value.
        tokenizer_file (Path | None): ``--tokenizer-file`` value.
        show_hidden (bool): ``--hidden`` flag.
        ignore_vcs_ignore (bool): ``--no-ignore`` flag.
        disable_token_counting (bool): ``--no-tokens`` flag.
        interactive (bool): ``--interactive`` flag.
        print_to_stdout (bool): ``--print`` flag.
        show_config_path_only (bool): ``--config-path`` flag.
        output_file (Path | None): ``--file`` value.
        pdf_output_path (Path | None): ``--pdf`` value.
        thread_count (int | None): ``--threads`` value.

    Returns:
        OptionSurface: The typed, partially populated invocation.
    """
    return {
        "paths": list(paths) if paths is not None else [],
        "max_size": max_size,
        "max_depth": max_depth,
        "output_format": output_format,
        "include_patterns": _flatten(include_patterns),
        "exclude_entries": _flatten(exclude_entries),
        "tokenizer_kind": tokenizer_kind,
        "tokenizer_model": tokenizer_model,
        "tokenizer_file": tokenizer_file,
        "show_hidden": show_hidden,
        "ignore_vcs_ignore": ignore_vcs_ignore,
        "disable_token_counting": disable_token_counting,
        "interactive": interactive,
        "print_to_stdout": print_to_stdout,
        "show_config_path_only": show_config_path_only,
        "output_file": output_file,
        "pdf_output_path": pdf_output_path,
        "thread_count": thread_count,
    }
