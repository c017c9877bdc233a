# topmark:header:start
#
#   project      : Glimpse
#   file         : main.py
#   file_relpath : src/glimpse/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``glimpse`` command.

Flow of one invocation:
    1. Click parses and validates the command line (paths must exist, enum values
       and list pieces are checked); failures exit before anything else happens.
    2. ``--config-path`` short-circuits: the profile location is printed and the
       command returns.
    3. The configuration profile is loaded (and created on first use).
    4. `resolve_settings` merges the option surface with the profile.
    5. The resolved settings are handed to ``ctx.obj["consumer"]`` when an embedder
       provides one, or dumped to stdout as TOML otherwise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

import click

from glimpse.cli.cli_types import build_option_surface
from glimpse.cli.console import ClickConsole
from glimpse.cli.errors import GlimpseConfigError
from glimpse.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_filtering_options,
    common_output_options,
    common_tokenizer_options,
    common_traversal_options,
    paths_argument,
)
from glimpse.config.io import ProfileLoadError, to_toml
from glimpse.config.logging import get_logger, resolve_env_log_level, setup_logging
from glimpse.config.profile import get_config_path, load_profile
from glimpse.config.resolver import resolve_settings

if TYPE_CHECKING:
    from pathlib import Path

    from glimpse.config.profile import ConfigProfile
    from glimpse.config.resolver import ResolvedSettings
    from glimpse.config.types import ExcludeEntry, OptionSurface, OutputFormat, TokenizerKind

logger = get_logger(__name__)

#: Signature of the callable that receives the resolved settings.
SettingsConsumer = Callable[["ResolvedSettings"], Any]


def init_common_state(ctx: click.Context) -> ClickConsole:
    """Initialize logging and the program-output console on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` is created if missing.

    Returns:
        ClickConsole: The console stored under ``ctx.obj["console"]``.
    """
    ctx.obj = ctx.obj or {}

    # Configure internal logging via env:
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    console: ClickConsole | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=ctx.color)
        ctx.obj["console"] = console
    return console


def emit_profile_diagnostics(console: ClickConsole, profile: ConfigProfile) -> None:
    """Echo the warnings recorded while loading the profile to stderr."""
    if not profile.diagnostics:
        return
    source: str = str(profile.source) if profile.source else "runtime defaults"
    console.warn(f"Config file {source}:")
    for diag in profile.diagnostics:
        text: str = str(diag)
        console.warn(f"  {diag.level.color(text) if console.enable_color is True else text}")


@click.command(
    name="glimpse",
    context_settings=CONTEXT_SETTINGS,
    help=(
        "Summarize source trees for language models: directory tree, "
        "file contents and token counts."
    ),
)
@paths_argument
@common_config_options
@common_traversal_options
@common_filtering_options
@common_output_options
@common_tokenizer_options
@click.version_option(package_name="glimpse", prog_name="glimpse")
@click.pass_context
def cli(
    ctx: click.Context,
    *,
    paths: tuple[Path, ...],
    show_config_path_only: bool,
    max_size: int | None,
    max_depth: int | None,
    show_hidden: bool,
    ignore_vcs_ignore: bool,
    thread_count: int | None,
    include_patterns: tuple[list[str], ...],
    exclude_entries: tuple[list[ExcludeEntry], ...],
    output_format: OutputFormat | None,
    output_file: Path | None,
    print_to_stdout: bool,
    interactive: bool,
    pdf_output_path: Path | None,
    disable_token_counting: bool,
    tokenizer_kind: TokenizerKind | None,
    tokenizer_model: str | None,
    tokenizer_file: Path | None,
) -> None:
    """Entry point for the Glimpse CLI."""
    console: ClickConsole = init_common_state(ctx)

    if show_config_path_only:
        console.print(str(get_config_path()))
        return

    options: OptionSurface = build_option_surface(
        paths=paths,
        max_size=max_size,
        max_depth=max_depth,
        output_format=output_format,
        include_patterns=include_patterns,
        exclude_entries=exclude_entries,
        tokenizer_kind=tokenizer_kind,
        tokenizer_model=tokenizer_model,
        tokenizer_file=tokenizer_file,
        show_hidden=show_hidden,
        ignore_vcs_ignore=ignore_vcs_ignore,
        disable_token_counting=disable_token_counting,
        interactive=interactive,
        print_to_stdout=print_to_stdout,
        show_config_path_only=show_config_path_only,
        output_file=output_file,
        pdf_output_path=pdf_output_path,
        thread_count=thread_count,
    )
    logger.trace("Option surface: %s", options)

    config_file: Path | None = ctx.obj.get("config_file")
    try:
        profile: ConfigProfile = load_profile(config_file)
    except ProfileLoadError as e:
        raise GlimpseConfigError(str(e)) from e
    emit_profile_diagnostics(console, profile)

    settings: ResolvedSettings = resolve_settings(options, profile)

    consumer: SettingsConsumer | None = ctx.obj.get("consumer")
    if consumer is not None:
        logger.debug("Handing resolved settings to %r", consumer)
        consumer(settings)
        return

    console.print(to_toml(settings.to_toml_dict()), nl=False)


if __name__ == "__main__":
    cli()
