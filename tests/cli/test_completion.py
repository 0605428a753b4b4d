# topmark:header:start
#
#   project      : YarsFormat
#   file         : test_completion.py
#   file_relpath : tests/cli/test_completion.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shell completion tests for the yars-format Click CLI.

Scripts are generated through ``--generate-completions``; the PowerShell and
Elvish callbacks are driven programmatically through their `ShellComplete`
classes, so no interactive shell is needed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_cli, parametrize
from yars_format.cli.completion import (
    SHELLS,
    ElvishComplete,
    PowerShellComplete,
    generate_completion_script,
)
from yars_format.cli.main import cli
from yars_format.constants import COMPLETE_VAR, PROG_NAME

if TYPE_CHECKING:
    from pathlib import Path

    from click.shell_completion import ShellComplete

SCRIPT_MARKERS: dict[str, str] = {
    "bash": "_yars_format_completion",
    "zsh": "#compdef yars-format",
    "fish": "complete --no-files --command yars-format",
    "powershell": "Register-ArgumentCompleter",
    "elvish": "edit:completion:arg-completer[yars-format]",
}


@mark_cli
@parametrize("shell", SHELLS)
def test_generate_completions_prints_script(shell: str) -> None:
    result = run_cli(["--generate-completions", shell])

    assert_SUCCESS(result)
    assert SCRIPT_MARKERS[shell] in result.output
    assert COMPLETE_VAR in result.output


@mark_cli
def test_generate_completions_rejects_unknown_shell() -> None:
    result = run_cli(["--generate-completions", "tcsh"])

    assert result.exit_code == 2
    assert "Invalid value" in result.output


@mark_cli
def test_generate_completions_ignores_files(tmp_path: Path) -> None:
    """Files given with ``--generate-completions`` are neither read nor written."""
    path: Path = tmp_path / "a.yaml"
    path.write_text("b: 2\na: 1\n", encoding="utf-8")

    result = run_cli_in(tmp_path, ["--generate-completions", "bash", "a.yaml"])

    assert_SUCCESS(result)
    assert "_yars_format_completion" in result.output
    assert "Formatted" not in result.output
    assert path.read_text(encoding="utf-8") == "b: 2\na: 1\n"


def test_generate_completion_script_unknown_shell() -> None:
    with pytest.raises(ValueError, match="Unsupported shell: tcsh"):
        generate_completion_script(cli, "tcsh")


@parametrize("comp_cls", [PowerShellComplete, ElvishComplete])
@parametrize(
    ("line", "expected"),
    [
        ("yars-format --ch", ([], "--ch")),
        ("yars-format --check ", (["--check"], "")),
        ("yars-format", ([], "yars-format")),
        ("", ([], "")),
    ],
)
def test_completion_args_from_command_line(
    monkeypatch: pytest.MonkeyPatch,
    comp_cls: type[ShellComplete],
    line: str,
    expected: tuple[list[str], str],
) -> None:
    monkeypatch.setenv("COMP_WORDS", line)
    comp: ShellComplete = comp_cls(cli, {}, PROG_NAME, COMPLETE_VAR)
    assert comp.get_completion_args() == expected


@parametrize("comp_cls", [PowerShellComplete, ElvishComplete])
def test_option_completion_lists_matching_flags(
    monkeypatch: pytest.MonkeyPatch, comp_cls: type[ShellComplete]
) -> None:
    monkeypatch.setenv("COMP_WORDS", "yars-format --gen")
    comp: ShellComplete = comp_cls(cli, {}, PROG_NAME, COMPLETE_VAR)
    assert comp.complete().splitlines() == ["--generate-completions"]


def test_shell_choice_completion(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COMP_WORDS", "yars-format --generate-completions ")
    comp = PowerShellComplete(cli, {}, PROG_NAME, COMPLETE_VAR)
    assert comp.complete().splitlines() == list(SHELLS)
