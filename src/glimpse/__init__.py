# topmark:header:start
#
#   project      : Glimpse
#   file         : __init__.py
#   file_relpath : src/glimpse/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Glimpse package.

Glimpse summarizes source trees for language models: it walks directories, renders
a tree and file contents, and counts tokens. This package holds the invocation
layer that turns command-line options and the per-user profile into one resolved
settings record.
"""

from __future__ import annotations
