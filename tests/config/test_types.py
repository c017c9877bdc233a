# topmark:header:start
#
#   project      : Glimpse
#   file         : test_types.py
#   file_relpath : tests/config/test_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the closed vocabularies and exclude classification in `glimpse.config.types`."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from glimpse.config.types import (
    FileExclude,
    OutputFormat,
    PatternExclude,
    TokenizerKind,
    classify_exclude,
    tokenizer_kind_from_name,
)
from tests.conftest import mark_config, parametrize

if TYPE_CHECKING:
    from glimpse.config.types import ExcludeEntry


@mark_config
def test_classify_existing_file_is_file_exclude(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """An exclude naming an existing file becomes a `FileExclude` with the path as typed."""
    (tmp_path / "notes.txt").write_text("x\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    entry: ExcludeEntry = classify_exclude("notes.txt")

    assert entry == FileExclude(path=Path("notes.txt"))
    assert entry.kind == "file"
    assert entry.raw == "notes.txt"


@mark_config
def test_classify_existing_directory_is_file_exclude(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Directories count as existing entries too."""
    (tmp_path / "build").mkdir()
    monkeypatch.chdir(tmp_path)

    assert isinstance(classify_exclude("build/"), FileExclude)


@mark_config
def test_classify_keeps_spelling_of_literal_path(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """The typed string survives for display while equality uses the path."""
    (tmp_path / "build").mkdir()
    monkeypatch.chdir(tmp_path)

    entry: ExcludeEntry = classify_exclude("build/")

    assert entry == FileExclude(path=Path("build"))
    assert entry.raw == "build/"


@mark_config
def test_classify_overlong_name_is_pattern_exclude(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A string the OS cannot resolve as a file name is a pattern, not an error."""
    monkeypatch.chdir(tmp_path)
    token: str = "a" * 300

    assert classify_exclude(token) == PatternExclude(pattern=token)


@mark_config
def test_classify_missing_is_pattern_exclude(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A string naming nothing on disk is kept verbatim as a pattern."""
    monkeypatch.chdir(tmp_path)

    entry: ExcludeEntry = classify_exclude("*.lock")

    assert entry == PatternExclude(pattern="*.lock")
    assert entry.kind == "pattern"
    assert entry.raw == "*.lock"


@mark_config
def test_classify_existence_wins_over_glob_syntax(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A directory literally named ``*.rs`` is a literal path, not a pattern."""
    (tmp_path / "*.rs").mkdir()
    monkeypatch.chdir(tmp_path)

    assert classify_exclude("*.rs") == FileExclude(path=Path("*.rs"))


@mark_config
def test_classification_is_not_revisited(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """A pattern entry stays a pattern even if a matching path appears later."""
    monkeypatch.chdir(tmp_path)
    entry: ExcludeEntry = classify_exclude("later")

    (tmp_path / "later").mkdir()

    assert isinstance(entry, PatternExclude)


@mark_config
@parametrize(
    "name, expected",
    [
        ("huggingface", TokenizerKind.HUGGINGFACE),
        ("tiktoken", TokenizerKind.TIKTOKEN),
        ("", TokenizerKind.TIKTOKEN),
        ("HuggingFace", TokenizerKind.TIKTOKEN),
        ("hugging-face", TokenizerKind.TIKTOKEN),
        ("sentencepiece", TokenizerKind.TIKTOKEN),
    ],
)
def test_tokenizer_kind_from_name(name: str, expected: TokenizerKind) -> None:
    """Only the exact literal ``huggingface`` selects HuggingFace; anything else falls back."""
    assert tokenizer_kind_from_name(name) is expected


@mark_config
@parametrize(
    "value, expected",
    [
        ("tree", OutputFormat.TREE),
        ("Files", OutputFormat.FILES),
        ("BOTH", OutputFormat.BOTH),
        (" both ", OutputFormat.BOTH),
        ("json", None),
        (None, None),
    ],
)
def test_output_format_from_name(value: str | None, expected: OutputFormat | None) -> None:
    """Output format lookup ignores case and surrounding blanks."""
    assert OutputFormat.from_name(value) is expected
