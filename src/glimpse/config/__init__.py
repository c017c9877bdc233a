# topmark:header:start
#
#   project      : Glimpse
#   file         : __init__.py
#   file_relpath : src/glimpse/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for Glimpse.

Two inputs feed every invocation:

- the **configuration profile** (``config.toml`` in the per-user config
  directory), loaded by `load_profile` into an immutable `ConfigProfile`;
- the **option surface** parsed from the command line (`OptionSurface`).

`resolve_settings` merges them into a `ResolvedSettings` record, the only
object downstream components read.
"""

from __future__ import annotations

from glimpse.config.profile import ConfigProfile, get_config_path, load_profile
from glimpse.config.resolver import ResolvedSettings, resolve_settings
from glimpse.config.types import (
    ExcludeEntry,
    FileExclude,
    OptionSurface,
    OutputFormat,
    PatternExclude,
    TokenizerKind,
    classify_exclude,
    tokenizer_kind_from_name,
)

__all__: list[str] = [
    "ConfigProfile",
    "ExcludeEntry",
    "FileExclude",
    "OptionSurface",
    "OutputFormat",
    "PatternExclude",
    "ResolvedSettings",
    "TokenizerKind",
    "classify_exclude",
    "get_config_path",
    "load_profile",
    "resolve_settings",
    "tokenizer_kind_from_name",
]
