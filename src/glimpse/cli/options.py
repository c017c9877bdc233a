# topmark:header:start
#
#   project      : Glimpse
#   file         : options.py
#   file_relpath : src/glimpse/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable CLI option groups for the Click-based Glimpse command.

Each ``common_*_options`` decorator attaches a related set of options so the
command definition in `glimpse.cli.main` stays thin. Underscored spellings of
multi-word options (``--max_size``) are trapped and answered with a hint.
"""

from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click
from click.core import ParameterSource

from glimpse.cli.cli_types import (
    EnumChoiceParam,
    ExcludeListParam,
    ExistingPathParam,
    IncludeListParam,
)
from glimpse.cli.errors import GlimpseUsageError
from glimpse.config.logging import get_logger
from glimpse.config.types import OutputFormat, TokenizerKind
from glimpse.constants import DEFAULT_PATH

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)

#: Click context settings shared by Glimpse commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def trap_underscored_option(ctx: click.Context, param: click.Option, _value: object) -> None:
    """Raise a helpful error for underscored long options (e.g., --max_size).

    Runs during option parsing (is_eager=True) so we can show a friendly hint
    instead of the generic "No such option" error.
    """
    # Only trigger if the user actually typed the option
    name: str | None = param.name
    src: ParameterSource | None = ctx.get_parameter_source(name) if name else None
    if src is not ParameterSource.COMMANDLINE:
        return

    bad = param.opts[0] if param.opts else "--?"
    suggestion = bad.replace("_", "-")
    logger.debug("Trapped underscored option %s", bad)
    raise GlimpseUsageError(f"Unknown option: {bad}. Did you mean {suggestion}?")


def underscored_trap_option(
    *names: str,
    is_flag: bool = False,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Register hidden underscored spellings that raise a helpful error.

    This wraps :func:`click.option` with common settings for underscored
    long-option traps, so callers don't repeat the same boilerplate.

    The hidden option gets a **unique destination name** so Click's parameter
    source tracking does not overlap with the real option's destination. Without
    this, the trap would fire when the hyphenated option was used.

    Args:
        *names: One or more underscored long option names to trap,
            e.g. "--max_size".
        is_flag: Trap a flag (``--no_tokens``) rather than an option that takes a
            value, so the trap fires without a following argument.

    Returns:
        A decorator compatible with Click's option stacking.
    """
    if not names:
        raise ValueError("underscored_trap_option requires at least one option name")

    first = names[0]
    # Create a unique, non-conflicting Python destination name for the hidden option
    dest = f"_trap_{first.lstrip('-').replace('-', '_')}"

    if is_flag:
        return click.option(
            *names,
            dest,
            hidden=True,
            expose_value=False,
            is_eager=True,
            is_flag=True,
            callback=trap_underscored_option,
        )
    return click.option(
        *names,
        dest,
        hidden=True,
        expose_value=False,
        is_eager=True,
        multiple=True,
        callback=trap_underscored_option,
    )


def paths_argument(f: Callable[P, R]) -> Callable[P, R]:
    """Add the positional ``PATHS`` argument (defaults to the current directory).

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    return click.argument(
        "paths",
        nargs=-1,
        type=ExistingPathParam(),
        default=(DEFAULT_PATH,),
    )(f)


def common_traversal_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply traversal bounds and visibility options.

    Adds ``--max-size``, ``--max-depth``, ``--hidden``, ``--no-ignore`` and ``--threads``.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--max-size",
        "-m",
        "max_size",
        type=click.IntRange(min=0),
        default=None,
        help="Maximum file size in bytes.",
    )(f)
    f = underscored_trap_option("--max_size")(f)
    f = click.option(
        "--max-depth",
        "max_depth",
        type=click.IntRange(min=0),
        default=None,
        help="Maximum directory depth to traverse.",
    )(f)
    f = underscored_trap_option("--max_depth")(f)
    f = click.option(
        "--hidden",
        "-H",
        "show_hidden",
        is_flag=True,
        help="Include hidden files and directories.",
    )(f)
    f = click.option(
        "--no-ignore",
        "ignore_vcs_ignore",
        is_flag=True,
        help="Don't respect .gitignore files.",
    )(f)
    f = underscored_trap_option("--no_ignore", is_flag=True)(f)
    f = click.option(
        "--threads",
        "-t",
        "thread_count",
        type=click.IntRange(min=1),
        default=None,
        help="Number of threads for parallel processing.",
    )(f)
    return f


def common_filtering_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply include and exclude options.

    Both accept comma-delimited values and may be repeated; values accumulate in
    the order given. Exclude entries that name an existing path are kept as
    literal paths, everything else is a pattern.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--include",
        "-i",
        "include_patterns",
        type=IncludeListParam(),
        multiple=True,
        help="Additional patterns to include (comma-separated, e.g. '*.rs,*.go').",
    )(f)
    f = click.option(
        "--exclude",
        "-e",
        "exclude_entries",
        type=ExcludeListParam(),
        multiple=True,
        help="Patterns or paths to exclude (comma-separated).",
    )(f)
    return f


def common_tokenizer_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply token counting options.

    Adds ``--no-tokens``, ``--tokenizer``, ``--model`` and ``--tokenizer-file``.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--no-tokens",
        "disable_token_counting",
        is_flag=True,
        help="Disable token counting.",
    )(f)
    f = underscored_trap_option("--no_tokens", is_flag=True)(f)
    f = click.option(
        "--tokenizer",
        "tokenizer_kind",
        type=EnumChoiceParam(TokenizerKind),
        default=None,
        help="Tokenizer to use for counting tokens.",
    )(f)
    f = click.option(
        "--model",
        "tokenizer_model",
        type=str,
        default=None,
        help="Model name for the HuggingFace tokenizer.",
    )(f)
    f = click.option(
        "--tokenizer-file",
        "tokenizer_file",
        type=click.Path(path_type=Path),
        default=None,
        help="Path to a local tokenizer file.",
    )(f)
    f = underscored_trap_option("--tokenizer_file")(f)
    return f


def common_output_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply output selection options.

    Adds ``--output``, ``--file``, ``--print``, ``--interactive`` and ``--pdf``.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--output",
        "-o",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help="Output format: tree, files or both.",
    )(f)
    f = click.option(
        "--file",
        "-f",
        "output_file",
        type=click.Path(path_type=Path),
        default=None,
        help="Write the output to this file.",
    )(f)
    f = click.option(
        "--print",
        "-p",
        "print_to_stdout",
        is_flag=True,
        help="Print the output to STDOUT.",
    )(f)
    f = click.option(
        "--interactive",
        "interactive",
        is_flag=True,
        help="Select files interactively.",
    )(f)
    f = click.option(
        "--pdf",
        "pdf_output_path",
        type=click.Path(path_type=Path),
        default=None,
        help="Save the output as a PDF to this path.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply configuration profile options.

    Adds ``--config-path``.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--config-path",
        "show_config_path_only",
        is_flag=True,
        help="Print the location of the configuration file and exit.",
    )(f)
    f = underscored_trap_option("--config_path", is_flag=True)(f)
    return f
