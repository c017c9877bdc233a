# topmark:header:start
#
#   project      : Glimpse
#   file         : loaders.py
#   file_relpath : src/glimpse/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
Runtime defaults live in code (`load_defaults_dict`) so Glimpse works even
before a profile file has been written.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from glimpse.config.keys import Toml
from glimpse.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from .types import TomlTable

logger = get_logger(__name__)

#: Runtime default for ``max_size`` (10 MiB).
DEFAULT_MAX_SIZE: int = 10 * 1024 * 1024
DEFAULT_MAX_DEPTH: int = 20
DEFAULT_OUTPUT_FORMAT: str = "both"
DEFAULT_EXCLUDES: tuple[str, ...] = (
    "**/.git/**",
    "**/target/**",
    "**/node_modules/**",
)
DEFAULT_TOKENIZER: str = "tiktoken"
DEFAULT_TOKENIZER_MODEL: str = "gpt2"


class ProfileLoadError(Exception):
    """Raised when a profile file exists but cannot be read or parsed.

    Attributes:
        path (Path): The offending profile file.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot load config file {path}: {reason}")
        self.path = path


def load_defaults_dict() -> TomlTable:
    """Return the **runtime defaults** as a Python dict.

    This function performs **no I/O**. The returned value is a new dict so
    callers can mutate it safely.
    """
    return {
        Toml.KEY_MAX_SIZE: DEFAULT_MAX_SIZE,
        Toml.KEY_MAX_DEPTH: DEFAULT_MAX_DEPTH,
        Toml.KEY_DEFAULT_OUTPUT_FORMAT: DEFAULT_OUTPUT_FORMAT,
        Toml.KEY_DEFAULT_EXCLUDES: list(DEFAULT_EXCLUDES),
        Toml.KEY_DEFAULT_TOKENIZER: DEFAULT_TOKENIZER,
        Toml.KEY_DEFAULT_TOKENIZER_MODEL: DEFAULT_TOKENIZER_MODEL,
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to the profile document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ProfileLoadError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error reading TOML from %s: %s", path, e)
        raise ProfileLoadError(path, str(e)) from e
    except UnicodeDecodeError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ProfileLoadError(path, "file is not valid UTF-8") from e

    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        logger.error("Error parsing TOML from %s: %s", path, e)
        raise ProfileLoadError(path, str(e)) from e

    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
