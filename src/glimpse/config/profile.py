# topmark:header:start
#
#   project      : Glimpse
#   file         : profile.py
#   file_relpath : src/glimpse/config/profile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Persisted configuration profile: location, loading and defaults.

This module defines:
    - `ConfigProfile`: an immutable, fully populated record of default settings.
    - `get_config_path`: the per-user location of ``config.toml``.
    - `load_profile`: read the profile, writing the runtime defaults on first use.

Scope:
    - *In scope*: locating the file, TOML I/O (via `glimpse.config.io`), shape
      validation with diagnostics, and first-run creation.
    - *Out of scope*: merging with command-line options. The resolver receives a
      `ConfigProfile` explicitly; there is no process-wide profile singleton.

Validation policy:
    A wrong-typed or unknown value never aborts loading. The key falls back to its
    runtime default and a warning diagnostic is recorded on the profile. A file that
    cannot be read or parsed raises `ProfileLoadError`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

import click

from glimpse.config.io import (
    get_int_value_checked,
    get_string_list_value_checked,
    get_string_value_checked,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
)
from glimpse.config.io.loaders import (
    DEFAULT_EXCLUDES,
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_SIZE,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_TOKENIZER,
    DEFAULT_TOKENIZER_MODEL,
)
from glimpse.config.keys import Toml
from glimpse.config.logging import get_logger
from glimpse.config.types import OutputFormat, classify_exclude
from glimpse.constants import APP_NAME, CONFIG_FILE_NAME
from glimpse.core.diagnostics import Diagnostic, DiagnosticLog

if TYPE_CHECKING:
    from glimpse.config.io import TomlTable
    from glimpse.config.types import ExcludeEntry

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ConfigProfile:
    """Immutable configuration profile.

    Every field is populated; the resolver trusts them as well-typed.

    Attributes:
        max_size (int): Default maximum file size in bytes.
        max_depth (int): Default maximum directory depth.
        default_output_format (OutputFormat): Output format used when none is given.
        default_excludes (tuple[ExcludeEntry, ...]): Exclude entries appended to the
            command-line ones.
        default_tokenizer (str): Configured tokenizer name (free-form; see
            `glimpse.config.types.tokenizer_kind_from_name`).
        default_tokenizer_model (str): Model used for the HuggingFace tokenizer when none
            is given.
        source (Path | None): The file the profile was read from, or None for defaults.
        diagnostics (tuple[Diagnostic, ...]): Warnings recorded while loading.
    """

    max_size: int
    max_depth: int
    default_output_format: OutputFormat
    default_excludes: tuple[ExcludeEntry, ...]
    default_tokenizer: str
    default_tokenizer_model: str

    source: Path | None = None
    diagnostics: tuple[Diagnostic, ...] = field(default=())

    @classmethod
    def from_defaults(cls) -> ConfigProfile:
        """Return a profile built from the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, source: Path | None = None) -> ConfigProfile:
        """Create a profile from a parsed TOML dict.

        Missing keys take their runtime default. Exclude strings are classified with
        `classify_exclude`, the same construction path used for command-line excludes.

        Args:
            data (TomlTable): The parsed TOML data.
            source (Path | None): The file the data was read from, if any.

        Returns:
            ConfigProfile: The resulting profile.
        """
        diagnostics = DiagnosticLog()
        where: str = Toml.WHERE_ROOT

        known: set[str] = {
            Toml.KEY_MAX_SIZE,
            Toml.KEY_MAX_DEPTH,
            Toml.KEY_DEFAULT_OUTPUT_FORMAT,
            Toml.KEY_DEFAULT_EXCLUDES,
            Toml.KEY_DEFAULT_TOKENIZER,
            Toml.KEY_DEFAULT_TOKENIZER_MODEL,
        }
        for key in data:
            if key not in known:
                logger.warning("Unknown key in %s: %s", where, key)
                diagnostics.add_warning(f"Unknown key in {where}: {key}")

        max_size: int = get_int_value_checked(
            data,
            Toml.KEY_MAX_SIZE,
            where=where,
            diagnostics=diagnostics,
            logger=logger,
            default=DEFAULT_MAX_SIZE,
        )
        max_depth: int = get_int_value_checked(
            data,
            Toml.KEY_MAX_DEPTH,
            where=where,
            diagnostics=diagnostics,
            logger=logger,
            default=DEFAULT_MAX_DEPTH,
        )

        raw_format: str = get_string_value_checked(
            data,
            Toml.KEY_DEFAULT_OUTPUT_FORMAT,
            where=where,
            diagnostics=diagnostics,
            logger=logger,
            default=DEFAULT_OUTPUT_FORMAT,
        )
        output_format: OutputFormat | None = OutputFormat.from_name(raw_format)
        if output_format is None:
            allowed: str = ", ".join(f.value for f in OutputFormat)
            msg = (
                f"Invalid value for {where}.{Toml.KEY_DEFAULT_OUTPUT_FORMAT}: {raw_format!r} "
                f"(allowed: {allowed}); using default ({DEFAULT_OUTPUT_FORMAT!r})"
            )
            logger.warning("%s", msg)
            diagnostics.add_warning(msg)
            output_format = OutputFormat(DEFAULT_OUTPUT_FORMAT)

        raw_excludes: list[str] = get_string_list_value_checked(
            data,
            Toml.KEY_DEFAULT_EXCLUDES,
            where=where,
            diagnostics=diagnostics,
            logger=logger,
            default=list(DEFAULT_EXCLUDES),
        )

        tokenizer: str = get_string_value_checked(
            data,
            Toml.KEY_DEFAULT_TOKENIZER,
            where=where,
            diagnostics=diagnostics,
            logger=logger,
            default=DEFAULT_TOKENIZER,
        )
        tokenizer_model: str = get_string_value_checked(
            data,
            Toml.KEY_DEFAULT_TOKENIZER_MODEL,
            where=where,
            diagnostics=diagnostics,
            logger=logger,
            default=DEFAULT_TOKENIZER_MODEL,
        )

        return cls(
            max_size=max_size,
            max_depth=max_depth,
            default_output_format=output_format,
            default_excludes=tuple(classify_exclude(raw) for raw in raw_excludes),
            default_tokenizer=tokenizer,
            default_tokenizer_model=tokenizer_model,
            source=source,
            diagnostics=diagnostics.freeze(),
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> ConfigProfile:
        """Load a profile from a single TOML file.

        Raises:
            ProfileLoadError: If the file cannot be read or parsed.
        """
        logger.debug("Creating ConfigProfile from TOML file: %s", path)
        profile: ConfigProfile = cls.from_toml_dict(load_toml_dict(path), source=path)
        logger.trace("Loaded ConfigProfile: %s", profile)
        return profile

    def to_toml_dict(self) -> TomlTable:
        """Convert this profile into a TOML-serializable dict (provenance omitted)."""
        return {
            Toml.KEY_MAX_SIZE: self.max_size,
            Toml.KEY_MAX_DEPTH: self.max_depth,
            Toml.KEY_DEFAULT_OUTPUT_FORMAT: self.default_output_format.value,
            Toml.KEY_DEFAULT_EXCLUDES: [entry.raw for entry in self.default_excludes],
            Toml.KEY_DEFAULT_TOKENIZER: self.default_tokenizer,
            Toml.KEY_DEFAULT_TOKENIZER_MODEL: self.default_tokenizer_model,
        }


def get_config_path() -> Path:
    """Return the location of the per-user profile file.

    Uses Click's platform-aware application directory, which honors
    ``$XDG_CONFIG_HOME`` on POSIX systems (``~/.config/glimpse/config.toml``).
    """
    return Path(click.get_app_dir(APP_NAME)) / CONFIG_FILE_NAME


def write_default_profile(path: Path) -> None:
    """Write the runtime defaults to ``path``, creating parent directories.

    Raises:
        OSError: If the directory or file cannot be written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_toml(load_defaults_dict()), encoding="utf-8")
    logger.info("Wrote default config file: %s", path)


def load_profile(path: Path | None = None, *, create: bool = True) -> ConfigProfile:
    """Load the configuration profile.

    If the file does not exist and ``create`` is set, the runtime defaults are written
    to it first. A failed write is logged and the defaults are used in memory.

    Args:
        path (Path | None): Profile file to read; defaults to `get_config_path`.
        create (bool): Whether to write the defaults when the file is missing.

    Returns:
        ConfigProfile: The loaded (or default) profile.

    Raises:
        ProfileLoadError: If an existing file cannot be read or parsed.
    """
    cfg_path: Path = path if path is not None else get_config_path()

    if not cfg_path.exists():
        if not create:
            logger.info("No config file at %s; using runtime defaults", cfg_path)
            return ConfigProfile.from_defaults()
        try:
            write_default_profile(cfg_path)
        except OSError as e:
            logger.warning("Cannot write default config file %s: %s", cfg_path, e)
            return ConfigProfile.from_defaults()

    logger.info("Loading config: %s", cfg_path)
    return ConfigProfile.from_toml_file(cfg_path)
