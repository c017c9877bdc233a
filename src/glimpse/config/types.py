# topmark:header:start
#
#   project      : Glimpse
#   file         : types.py
#   file_relpath : src/glimpse/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight config types shared by the CLI, the profile loader and the resolver.

This module hosts stable, import-friendly definitions that other config modules
can depend on without risk of circular imports.

Exports:
    - `OutputFormat`, `TokenizerKind`: closed vocabularies for enum-valued settings.
    - `FileExclude`, `PatternExclude`, `ExcludeEntry`: the classified exclusion rule.
    - `classify_exclude`: the only way to construct an `ExcludeEntry` from a raw string.
    - `tokenizer_kind_from_name`: silent-fallback mapping from a configured tokenizer name.
    - `OptionSurface`: the typed, partially populated view of the invocation.

Design notes:
    - Keep side effects out of this module. The only I/O is the existence probe
      performed by `classify_exclude`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import ClassVar, Literal, TypedDict, Union

from glimpse.config.logging import get_logger

logger = get_logger(__name__)


class OutputFormat(Enum):
    """What the renderer emits: the directory tree, file contents, or both."""

    TREE = "tree"
    FILES = "files"
    BOTH = "both"

    @classmethod
    def from_name(cls, key_name: str | None) -> OutputFormat | None:
        """Find the member matching ``key_name`` case-insensitively.

        Older profiles spelled the values with a capital letter (``"Both"``),
        so lookups ignore case.

        Args:
            key_name (str | None): The configured value, e.g. ``"files"`` or ``"Tree"``.

        Returns:
            OutputFormat | None: The matching member, or None if absent or unmatched.
        """
        if key_name is None:
            return None
        return cls.__members__.get(key_name.strip().upper())


class TokenizerKind(Enum):
    """Tokenizer backends understood by the tokenizer factory."""

    TIKTOKEN = "tiktoken"
    HUGGINGFACE = "huggingface"


def tokenizer_kind_from_name(name: str) -> TokenizerKind:
    """Map a configured tokenizer name to a `TokenizerKind`.

    Only the exact literal ``"huggingface"`` selects `TokenizerKind.HUGGINGFACE`.
    Every other value, including empty, misspelled or differently cased names,
    selects `TokenizerKind.TIKTOKEN` without raising.

    Args:
        name (str): The ``default_tokenizer`` value from the configuration profile.

    Returns:
        TokenizerKind: The derived tokenizer kind.
    """
    match name:
        case "huggingface":
            return TokenizerKind.HUGGINGFACE
        case "tiktoken":
            return TokenizerKind.TIKTOKEN
        case _:
            logger.debug("Unrecognized tokenizer name %r; falling back to tiktoken", name)
            return TokenizerKind.TIKTOKEN


# ------------------ Exclude entries ------------------


@dataclass(frozen=True, slots=True)
class FileExclude:
    """Exclude rule naming a literal filesystem entry.

    Attributes:
        path (Path): The path exactly as supplied (not resolved).
        spelling (str): The string as typed, kept for display (a trailing slash
            survives here but not in ``path``). Ignored when comparing entries.
    """

    path: Path
    spelling: str = field(default="", compare=False)

    kind: ClassVar[Literal["file"]] = "file"

    @property
    def raw(self) -> str:
        """Return the string form used for display and TOML export."""
        return self.spelling or str(self.path)


@dataclass(frozen=True, slots=True)
class PatternExclude:
    """Exclude rule holding a glob-style pattern.

    Attributes:
        pattern (str): The pattern exactly as supplied.
    """

    pattern: str

    kind: ClassVar[Literal["pattern"]] = "pattern"

    @property
    def raw(self) -> str:
        """Return the string form used for display and TOML export."""
        return self.pattern


ExcludeEntry = Union[FileExclude, PatternExclude]


def classify_exclude(value: str) -> ExcludeEntry:
    """Classify a raw exclude string as a literal path or a glob pattern.

    The filesystem is probed once: if ``value`` names an existing entry it becomes a
    `FileExclude`, otherwise a `PatternExclude`. Existence is checked first, so a
    directory literally named ``*.rs`` is a `FileExclude`. The classification is
    final; a pattern that later matches an existing path is never reclassified.

    Args:
        value (str): The raw exclude string (relative paths resolve against the CWD).

    Returns:
        ExcludeEntry: The classified entry.
    """
    # os.path.exists reports False for names the OS rejects (e.g. too long).
    if os.path.exists(value):
        logger.trace("Exclude %r names an existing path", value)
        return FileExclude(path=Path(value), spelling=value)
    logger.trace("Exclude %r treated as a pattern", value)
    return PatternExclude(pattern=value)


# ------------------ Option surface ------------------


class OptionSurface(TypedDict, total=False):
    """Typed, partially populated representation of the invocation.

    Absent keys and ``None`` values both mean "not supplied". Booleans are plain
    flags without a tri-state: ``False`` is indistinguishable from "not passed".

    Attributes:
        paths (list[Path]): Filesystem locations to analyze (validated to exist).
        max_size (int | None): Maximum file size in bytes.
        max_depth (int | None): Maximum directory depth.
        output_format (OutputFormat | None): Tree, files or both.
        include_patterns (list[str] | None): Additional include patterns.
        exclude_entries (list[ExcludeEntry] | None): Classified exclude entries.
        tokenizer_kind (TokenizerKind | None): Explicit tokenizer backend.
        tokenizer_model (str | None): Explicit HuggingFace model name.
        tokenizer_file (Path | None): Local tokenizer file.
        show_hidden (bool): Include hidden files and directories.
        ignore_vcs_ignore (bool): Do not honor ``.gitignore`` files.
        disable_token_counting (bool): Skip token counting altogether.
        interactive (bool): Interactive selection mode.
        print_to_stdout (bool): Print output to STDOUT.
        show_config_path_only (bool): Report the profile location and exit.
        output_file (Path | None): Destination file for the rendered output.
        pdf_output_path (Path | None): Destination for PDF output.
        thread_count (int | None): Advisory worker count for downstream pools.
    """

    paths: list[Path]
    max_size: int | None
    max_depth: int | None
    output_format: OutputFormat | None
    include_patterns: list[str] | None
    exclude_entries: list[ExcludeEntry] | None
    tokenizer_kind: TokenizerKind | None
    tokenizer_model: str | None
    tokenizer_file: Path | None
    show_hidden: bool
    ignore_vcs_ignore: bool
    disable_token_counting: bool
    interactive: bool
    print_to_stdout: bool
    show_config_path_only: bool
    output_file: Path | None
    pdf_output_path: Path | None
    thread_count: int | None
