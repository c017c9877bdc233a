# topmark:header:start
#
#   project      : Glimpse
#   file         : test_config_handoff.py
#   file_relpath : tests/cli/test_config_handoff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI interaction with the configuration profile and the settings hand-off.

Covers ``--config-path``, profile creation on first run, profile errors and
diagnostics, and the TOML dump printed when no consumer is injected.
"""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Any

import tomlkit

from glimpse.config.profile import get_config_path
from glimpse.config.types import OutputFormat, PatternExclude
from tests.cli.conftest import assert_CONFIG_ERROR, assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_cli


def _write_profile(content: str) -> Path:
    """Helper: write the per-user profile (inside the isolated config home)."""
    path: Path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
    return path


@mark_cli
def test_config_path_prints_location_only() -> None:
    """``--config-path`` prints the profile path and neither loads nor creates it."""
    result, captured = run_cli(["--config-path"])

    assert_SUCCESS(result)
    assert result.stdout == f"{get_config_path()}\n"
    assert not get_config_path().exists()
    assert captured == []


@mark_cli
def test_config_path_ignores_broken_profile() -> None:
    """The profile is never parsed for ``--config-path``, so a broken file does not matter."""
    _write_profile("not = = toml\n")

    result, _ = run_cli(["--config-path"])

    assert_SUCCESS(result)


@mark_cli
def test_first_run_creates_profile(tmp_path: Path) -> None:
    """A normal run writes the default profile when none exists."""
    result, _ = run_cli_in(tmp_path, [])

    assert_SUCCESS(result)
    assert get_config_path().is_file()
    text: str = get_config_path().read_text(encoding="utf-8")
    assert "max_size = 10485760" in text
    assert 'default_output_format = "both"' in text


@mark_cli
def test_profile_values_feed_resolution(tmp_path: Path) -> None:
    """Profile values fill in everything the command line leaves out."""
    _write_profile(
        """
        max_size = 100000
        default_output_format = "Files"
        default_excludes = ["*.lock"]
        """
    )
    (tmp_path / "src").mkdir()

    result, captured = run_cli_in(tmp_path, ["./src"])

    assert_SUCCESS(result)
    assert captured[0].paths == (Path("./src"),)
    assert captured[0].max_size == 100000
    assert captured[0].output_format is OutputFormat.FILES
    assert captured[0].exclude_entries == (PatternExclude("*.lock"),)


@mark_cli
def test_command_line_overrides_profile(tmp_path: Path) -> None:
    """Explicit options replace profile scalars."""
    _write_profile("max_size = 100000\nmax_depth = 3\n")

    result, captured = run_cli_in(tmp_path, ["--max-size", "5"])

    assert_SUCCESS(result)
    assert captured[0].max_size == 5
    assert captured[0].max_depth == 3


@mark_cli
def test_profile_tokenizer_name_selects_huggingface(tmp_path: Path) -> None:
    """The profile's tokenizer name and model are used when no tokenizer option is given."""
    _write_profile('default_tokenizer = "huggingface"\ndefault_tokenizer_model = "bert"\n')

    result, captured = run_cli_in(tmp_path, [])

    assert_SUCCESS(result)
    assert captured[0].tokenizer_model == "bert"


@mark_cli
def test_invalid_profile_exits_config_error(tmp_path: Path) -> None:
    """A profile that is not valid TOML fails with CONFIG_ERROR and names the file."""
    path: Path = _write_profile("max_size = = 3\n")

    result, captured = run_cli_in(tmp_path, [])

    assert_CONFIG_ERROR(result)
    assert "Cannot load config file" in result.stderr
    assert str(path) in result.stderr
    assert captured == []


@mark_cli
def test_profile_diagnostics_are_reported(tmp_path: Path) -> None:
    """Wrong-typed profile values are reported on stderr and do not stop the run."""
    _write_profile('max_size = "big"\n')

    result, captured = run_cli_in(tmp_path, [])

    assert_SUCCESS(result)
    assert "max_size" in result.stderr
    assert captured[0].max_size == 10485760


@mark_cli
def test_injected_config_file_is_used(tmp_path: Path) -> None:
    """Embedders may point the command at a specific profile file via ``ctx.obj``."""
    custom: Path = tmp_path / "custom.toml"
    custom.write_text("max_depth = 7\n", encoding="utf-8")

    result, captured = run_cli_in(tmp_path, [], config_file=custom)

    assert_SUCCESS(result)
    assert captured[0].max_depth == 7
    assert not get_config_path().exists()


@mark_cli
def test_consumer_receives_settings_instead_of_dump(tmp_path: Path) -> None:
    """With a consumer injected, nothing is written to stdout."""
    result, captured = run_cli_in(tmp_path, [])

    assert_SUCCESS(result)
    assert len(captured) == 1
    assert result.stdout == ""


@mark_cli
def test_settings_dumped_as_toml_without_consumer(tmp_path: Path) -> None:
    """Without a consumer the resolved settings are printed as a TOML document."""
    (tmp_path / "build").mkdir()

    result, _ = run_cli_in(
        tmp_path,
        ["-e", "build,*.tmp", "--tokenizer", "huggingface", "-t", "2"],
        capture=False,
    )

    assert_SUCCESS(result)
    data: dict[str, Any] = tomlkit.parse(result.stdout).unwrap()
    assert data["paths"] == ["."]
    assert data["threads"] == 2
    assert data["limits"]["max_size"] == 10485760
    assert data["filters"]["exclude"][:2] == [
        {"kind": "file", "value": "build"},
        {"kind": "pattern", "value": "*.tmp"},
    ]
    assert data["tokenizer"] == {"enabled": True, "kind": "huggingface", "model": "gpt2"}
    assert data["output"]["format"] == "both"
    assert "file" not in data["output"]
