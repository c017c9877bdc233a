# topmark:header:start
#
#   project      : Glimpse
#   file         : __init__.py
#   file_relpath : src/glimpse/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across Glimpse.

Included modules:

- ``diagnostics``
  Diagnostic levels, messages and an accumulator used to collect warnings
  while the configuration profile is loaded.

Keep this package free of CLI dependencies and side effects.
"""

from __future__ import annotations
