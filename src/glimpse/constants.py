# topmark:header:start
#
#   project      : Glimpse
#   file         : constants.py
#   file_relpath : src/glimpse/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Glimpse Constants."""

from __future__ import annotations

#: Distribution name; also the application directory name for the profile.
APP_NAME: str = "glimpse"

#: File name of the per-user configuration profile.
CONFIG_FILE_NAME: str = "config.toml"

#: Default positional path when none is given.
DEFAULT_PATH: str = "."
