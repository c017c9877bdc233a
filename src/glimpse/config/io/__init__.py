# topmark:header:start
#
#   project      : Glimpse
#   file         : __init__.py
#   file_relpath : src/glimpse/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for the Glimpse configuration profile.

Glimpse uses `tomlkit` for parsing and rendering. Helpers here do not mutate
configuration objects; the profile model consumes the plain dicts they return.

Typical flow:
    1. Start from the runtime defaults (``load_defaults_dict``).
    2. Load the on-disk profile (``load_toml_dict``).
    3. Read values with the checked getters.
    4. Serialize back to TOML when needed (``to_toml``).
"""

from __future__ import annotations

from .getters import (
    get_int_value_checked,
    get_string_list_value_checked,
    get_string_value_checked,
    is_any_list,
)
from .loaders import ProfileLoadError, load_defaults_dict, load_toml_dict
from .render import to_toml
from .types import TomlTable

__all__: list[str] = [
    "ProfileLoadError",
    "TomlTable",
    "get_int_value_checked",
    "get_string_list_value_checked",
    "get_string_value_checked",
    "is_any_list",
    "load_defaults_dict",
    "load_toml_dict",
    "to_toml",
]
