# topmark:header:start
#
#   project      : Glimpse
#   file         : __main__.py
#   file_relpath : src/glimpse/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Glimpse via ``python -m glimpse``.

Delegates to :func:`glimpse.cli.main.cli`, the same entry point as the
``glimpse`` console script.

Examples:
    Show where the profile lives::

        python -m glimpse --config-path
"""

from __future__ import annotations

from glimpse.cli.main import cli

if __name__ == "__main__":
    cli()
