# topmark:header:start
#
#   project      : Glimpse
#   file         : resolver.py
#   file_relpath : src/glimpse/config/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve command-line options against the configuration profile.

`resolve_settings` combines an `OptionSurface` with a `ConfigProfile` into one
immutable `ResolvedSettings` record. It is a single pass over in-memory values:
no I/O, no retries, and it cannot fail on well-typed input.

Precedence, per field class:
    - **Scalar overrides** (``max_size``, ``max_depth``, ``output_format``): the
      option value when present, else the profile default.
    - **Additive list** (``exclude_entries``): option entries first, then the
      profile's ``default_excludes``; never deduplicated or reordered.
    - **Conditionally derived** (``tokenizer_kind``): only when token counting is
      enabled. An explicit kind wins; otherwise the profile's tokenizer name is
      mapped with `tokenizer_kind_from_name` (silent Tiktoken fallback).
    - **Dependent default** (``tokenizer_model``): the profile's model only for a
      HuggingFace kind with neither an explicit model nor a tokenizer file.
    - **Pass-through**: everything else is copied unchanged.

The profile is never mutated; it is an explicit argument, not ambient state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from glimpse.config.logging import get_logger
from glimpse.config.types import TokenizerKind, tokenizer_kind_from_name

if TYPE_CHECKING:
    from pathlib import Path

    from glimpse.config.io import TomlTable
    from glimpse.config.profile import ConfigProfile
    from glimpse.config.types import ExcludeEntry, OptionSurface, OutputFormat

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedSettings:
    """The single authoritative settings record handed to downstream collaborators.

    Consumers:
        - the filesystem scanner reads ``paths``, the size/depth bounds, the
          include/exclude entries and the hidden/ignore flags;
        - the tokenizer factory reads ``tokenizer_kind``, ``tokenizer_model`` and
          ``tokenizer_file``;
        - the renderer reads ``output_format``, ``output_file``,
          ``pdf_output_path``, ``print_to_stdout`` and ``interactive``.

    Attributes:
        paths (tuple[Path, ...]): Filesystem locations to analyze.
        max_size (int): Maximum file size in bytes.
        max_depth (int): Maximum directory depth.
        output_format (OutputFormat): Tree, files or both.
        include_patterns (tuple[str, ...] | None): Additional include patterns, if any.
        exclude_entries (tuple[ExcludeEntry, ...]): Option excludes followed by profile excludes.
        tokenizer_kind (TokenizerKind | None): None iff token counting is disabled.
        tokenizer_model (str | None): HuggingFace model name, if any.
        tokenizer_file (Path | None): Local tokenizer file, if any.
        show_hidden (bool): Include hidden entries.
        ignore_vcs_ignore (bool): Do not honor ``.gitignore`` files.
        disable_token_counting (bool): Skip token counting.
        interactive (bool): Interactive selection mode.
        print_to_stdout (bool): Print output to STDOUT.
        show_config_path_only (bool): Always False for a resolved record.
        output_file (Path | None): Destination for the rendered output.
        pdf_output_path (Path | None): Destination for PDF output.
        thread_count (int | None): Advisory worker count.
    """

    paths: tuple[Path, ...]

    # Scalar overrides
    max_size: int
    max_depth: int
    output_format: OutputFormat

    # Filters
    include_patterns: tuple[str, ...] | None
    exclude_entries: tuple[ExcludeEntry, ...]

    # Tokenizer selection
    tokenizer_kind: TokenizerKind | None
    tokenizer_model: str | None
    tokenizer_file: Path | None

    # Flags
    show_hidden: bool
    ignore_vcs_ignore: bool
    disable_token_counting: bool
    interactive: bool
    print_to_stdout: bool
    show_config_path_only: bool

    # Destinations
    output_file: Path | None
    pdf_output_path: Path | None

    thread_count: int | None

    def to_toml_dict(self) -> TomlTable:
        """Convert the settings into a TOML-serializable dict.

        Unset optional values are left as ``None`` and dropped by the TOML renderer.
        Each exclude entry carries its kind so the classification survives the dump.
        """
        return {
            "paths": [str(p) for p in self.paths],
            "threads": self.thread_count,
            "limits": {
                "max_size": self.max_size,
                "max_depth": self.max_depth,
            },
            "filters": {
                "hidden": self.show_hidden,
                "no_ignore": self.ignore_vcs_ignore,
                "include": list(self.include_patterns) if self.include_patterns else None,
                "exclude": [
                    {"kind": entry.kind, "value": entry.raw} for entry in self.exclude_entries
                ],
            },
            "tokenizer": {
                "enabled": not self.disable_token_counting,
                "kind": self.tokenizer_kind.value if self.tokenizer_kind else None,
                "model": self.tokenizer_model,
                "file": str(self.tokenizer_file) if self.tokenizer_file else None,
            },
            "output": {
                "format": self.output_format.value,
                "file": str(self.output_file) if self.output_file else None,
                "pdf": str(self.pdf_output_path) if self.pdf_output_path else None,
                "print": self.print_to_stdout,
                "interactive": self.interactive,
            },
        }


def _resolve_tokenizer(
    options: OptionSurface,
    profile: ConfigProfile,
) -> tuple[TokenizerKind | None, str | None]:
    """Return the resolved ``(tokenizer_kind, tokenizer_model)`` pair."""
    if options.get("disable_token_counting", False):
        if options.get("tokenizer_kind") or options.get("tokenizer_model"):
            logger.debug("Token counting disabled; ignoring tokenizer options")
        return None, None

    kind: TokenizerKind | None = options.get("tokenizer_kind")
    if kind is None:
        kind = tokenizer_kind_from_name(profile.default_tokenizer)
        logger.debug(
            "Derived tokenizer kind %s from configured name %r",
            kind.value,
            profile.default_tokenizer,
        )

    model: str | None = options.get("tokenizer_model")
    tokenizer_file: Path | None = options.get("tokenizer_file")
    if tokenizer_file is not None:
        # A local tokenizer file and a model name are exclusive inputs.
        if model is not None:
            logger.warning(
                "Ignoring --model %r: --tokenizer-file %s takes precedence",
                model,
                tokenizer_file,
            )
        return kind, None

    if kind is TokenizerKind.HUGGINGFACE and model is None:
        model = profile.default_tokenizer_model
        logger.debug("Defaulted HuggingFace model to %r", model)

    return kind, model


def resolve_settings(options: OptionSurface, profile: ConfigProfile) -> ResolvedSettings:
    """Produce the resolved settings for one invocation.

    Args:
        options (OptionSurface): The parsed, partially populated invocation options.
            Absent keys and ``None`` values both mean "not supplied".
        profile (ConfigProfile): The configuration profile; read, never mutated.

    Returns:
        ResolvedSettings: The fully resolved settings.
    """
    logger.trace("Resolving options %s against profile %s", options, profile.source)

    max_size: int | None = options.get("max_size")
    max_depth: int | None = options.get("max_depth")
    output_format: OutputFormat | None = options.get("output_format")

    cli_excludes: list[ExcludeEntry] | None = options.get("exclude_entries")
    exclude_entries: tuple[ExcludeEntry, ...] = (
        tuple(cli_excludes or ()) + profile.default_excludes
    )

    tokenizer_kind, tokenizer_model = _resolve_tokenizer(options, profile)

    include_patterns: list[str] | None = options.get("include_patterns")

    settings = ResolvedSettings(
        paths=tuple(options.get("paths") or ()),
        max_size=max_size if max_size is not None else profile.max_size,
        max_depth=max_depth if max_depth is not None else profile.max_depth,
        output_format=(
            output_format if output_format is not None else profile.default_output_format
        ),
        include_patterns=tuple(include_patterns) if include_patterns is not None else None,
        exclude_entries=exclude_entries,
        tokenizer_kind=tokenizer_kind,
        tokenizer_model=tokenizer_model,
        tokenizer_file=options.get("tokenizer_file"),
        show_hidden=bool(options.get("show_hidden", False)),
        ignore_vcs_ignore=bool(options.get("ignore_vcs_ignore", False)),
        disable_token_counting=bool(options.get("disable_token_counting", False)),
        interactive=bool(options.get("interactive", False)),
        print_to_stdout=bool(options.get("print_to_stdout", False)),
        show_config_path_only=bool(options.get("show_config_path_only", False)),
        output_file=options.get("output_file"),
        pdf_output_path=options.get("pdf_output_path"),
        thread_count=options.get("thread_count"),
    )
    logger.debug("Resolved settings: %s", settings)
    return settings
