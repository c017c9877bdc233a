# topmark:header:start
#
#   project      : Glimpse
#   file         : __init__.py
#   file_relpath : src/glimpse/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for Glimpse.

The ``glimpse`` command parses the invocation into an `OptionSurface`, loads the
configuration profile, resolves both into `ResolvedSettings` and hands the
result to a consumer.
"""

from __future__ import annotations
