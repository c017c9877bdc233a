# topmark:header:start
#
#   project      : Glimpse
#   file         : diagnostics.py
#   file_relpath : src/glimpse/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics collected while loading the configuration profile.

Loading a profile never aborts on a wrong-typed value: the offending key falls
back to its runtime default and a warning diagnostic is recorded here so the
CLI can surface it to the user.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import cast

from yachalk import chalk

from glimpse.config.logging import get_logger

logger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics, ordered ERROR > WARNING > INFO."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level."""
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level and message."""

    level: DiagnosticLevel
    message: str

    def __str__(self) -> str:
        return f"{self.level.value}: {self.message}"


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics for a single load operation."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %r", diagnostic.level.value, diagnostic.message)

    def add_warning(self, message: str) -> None:
        """Add a ``warning`` diagnostic."""
        self._add(Diagnostic(DiagnosticLevel.WARNING, message))

    def freeze(self) -> tuple[Diagnostic, ...]:
        """Return an immutable snapshot of the collected diagnostics."""
        return tuple(self.items)
