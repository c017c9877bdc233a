# topmark:header:start
#
#   project      : Glimpse
#   file         : getters.py
#   file_relpath : src/glimpse/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Checked value getters for the configuration profile table.

Each getter validates the expected shape of one key. A missing key yields the
caller's default silently; a present but wrong-typed value also yields the
default, and records a warning both in the log and in a `DiagnosticLog` so the
user learns about the mistake without the load failing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, TypeGuard

if TYPE_CHECKING:
    from glimpse.config.logging import GlimpseLogger
    from glimpse.core.diagnostics import DiagnosticLog

    from .types import TomlTable


def is_any_list(obj: object) -> TypeGuard[list[Any]]:
    """Type guard for a generic list value (item types are not checked)."""
    return isinstance(obj, list)


def _record(
    diagnostics: DiagnosticLog,
    logger: GlimpseLogger,
    message: str,
) -> None:
    logger.warning("%s", message)
    diagnostics.add_warning(message)


def get_int_value_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: GlimpseLogger,
    default: int,
    minimum: int = 0,
) -> int:
    """Return a non-negative int value, recording a warning when the value is unusable.

    Notes:
        - Missing key -> ``default``
        - ``bool`` is rejected (since ``bool`` is a subclass of ``int``).
        - Values below ``minimum`` are rejected.
    """
    value: Any | None = table.get(key)
    if value is None:
        return default

    loc: Final[str] = f"{where}.{key}"
    if isinstance(value, bool) or not isinstance(value, int):
        _record(
            diagnostics,
            logger,
            f"Expected int in {loc}, got {type(value).__name__}: {value!r}; "
            f"using default ({default})",
        )
        return default
    if value < minimum:
        _record(
            diagnostics,
            logger,
            f"Expected int >= {minimum} in {loc}, got {value}; using default ({default})",
        )
        return default
    return value


def get_string_value_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: GlimpseLogger,
    default: str,
) -> str:
    """Return a string value, recording a warning when the type is not `str`.

    Ints, floats and bools are **not** coerced. If the key is missing,
    ``default`` is returned.
    """
    value: Any | None = table.get(key)
    if value is None:
        return default
    if isinstance(value, str):
        return value

    loc: Final[str] = f"{where}.{key}"
    _record(
        diagnostics,
        logger,
        f"Expected string in {loc}, got {type(value).__name__}: {value!r}; "
        f"using default ({default!r})",
    )
    return default


def get_string_list_value_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: GlimpseLogger,
    default: list[str],
) -> list[str]:
    """Extract a list of strings, recording warnings for unusable values.

    Behavior:
        - Missing key -> a copy of ``default``.
        - Not a list -> warning, a copy of ``default``.
        - Non-string items are dropped, each with a warning.
        - An explicitly empty list stays empty.

    Args:
        table (TomlTable): TOML table to query.
        key (str): Key to extract.
        where (str): TOML location prefix used in messages.
        diagnostics (DiagnosticLog): DiagnosticLog to record warnings.
        logger (GlimpseLogger): Logger for emitting warnings.
        default (list[str]): Value used when the key is missing or not a list.

    Returns:
        list[str]: Filtered list containing only string entries.
    """
    value: Any | None = table.get(key)
    if value is None:
        return list(default)

    loc: Final[str] = f"{where}.{key}"
    if not is_any_list(value):
        _record(
            diagnostics,
            logger,
            f"Expected list in {loc}, got {type(value).__name__}: {value!r}; using default",
        )
        return list(default)

    out: list[str] = []
    for v in value:
        if isinstance(v, str):
            out.append(v)
        else:
            _record(diagnostics, logger, f"Ignoring non-string entry in {loc}: {v!r}")
    return out
