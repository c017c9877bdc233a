# topmark:header:start
#
#   project      : Glimpse
#   file         : keys.py
#   file_relpath : src/glimpse/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for the Glimpse configuration profile.

Keys defined here are the external configuration API of ``config.toml``.
Renaming or removing a key is a breaking change. CLI option names are declared
with their Click options in `glimpse.cli.options`.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """Top-level keys of the configuration profile.

    The ordering mirrors the generated default profile so defaults, parsing and
    docs stay aligned.
    """

    KEY_MAX_SIZE: Final[str] = "max_size"
    KEY_MAX_DEPTH: Final[str] = "max_depth"
    KEY_DEFAULT_OUTPUT_FORMAT: Final[str] = "default_output_format"
    KEY_DEFAULT_EXCLUDES: Final[str] = "default_excludes"
    KEY_DEFAULT_TOKENIZER: Final[str] = "default_tokenizer"
    KEY_DEFAULT_TOKENIZER_MODEL: Final[str] = "default_tokenizer_model"

    #: Location prefix used in diagnostics (the profile has no sections).
    WHERE_ROOT: Final[str] = "[config]"
