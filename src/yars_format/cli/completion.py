# topmark:header:start
#
#   project      : YarsFormat
#   file         : completion.py
#   file_relpath : src/yars_format/cli/completion.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shell completion script generation.

Bash, Zsh and Fish scripts come from Click's completion engine. PowerShell and
Elvish are registered here as extra `ShellComplete` classes, so their scripts
call back into the program through the same ``_YARS_FORMAT_COMPLETE``
environment variable protocol, e.g.::

    _YARS_FORMAT_COMPLETE=powershell_source yars-format
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Final

from click.shell_completion import (
    CompletionItem,
    ShellComplete,
    add_completion_class,
    get_completion_class,
    split_arg_string,
)

from yars_format.config.logging import get_logger
from yars_format.constants import COMPLETE_VAR, PROG_NAME

if TYPE_CHECKING:
    import click

    from yars_format.config.logging import YarsLogger

logger: YarsLogger = get_logger(__name__)

#: Shells accepted by ``--generate-completions``.
SHELLS: Final[tuple[str, ...]] = ("bash", "zsh", "fish", "powershell", "elvish")

_POWERSHELL_SOURCE: Final[str] = """\
Register-ArgumentCompleter -Native -CommandName '%(prog_name)s' -ScriptBlock {
    param($wordToComplete, $commandAst, $cursorPosition)
    $line = $commandAst.ToString()
    $length = [Math]::Min($cursorPosition - $commandAst.Extent.StartOffset, $line.Length)
    $env:COMP_WORDS = $line.Substring(0, $length)
    $env:%(complete_var)s = 'powershell_complete'
    & '%(prog_name)s' | ForEach-Object {
        [System.Management.Automation.CompletionResult]::new($_, $_, 'ParameterValue', $_)
    }
    Remove-Item Env:\\%(complete_var)s
    Remove-Item Env:\\COMP_WORDS
}
"""

_ELVISH_SOURCE: Final[str] = """\
use str

set edit:completion:arg-completer[%(prog_name)s] = {|@words|
    set-env COMP_WORDS (str:join ' ' $words)
    set-env %(complete_var)s elvish_complete
    %(prog_name)s | from-lines | each {|item| edit:complex-candidate $item }
    unset-env %(complete_var)s
    unset-env COMP_WORDS
}
"""


class _CommandLineComplete(ShellComplete):
    """Completion driven by the raw command line up to the cursor.

    The script exports the text in ``COMP_WORDS``; a trailing space means the
    word being completed is empty.
    """

    def get_completion_args(self) -> tuple[list[str], str]:
        line: str = os.environ.get("COMP_WORDS", "")
        words: list[str] = split_arg_string(line)
        if not line or line[-1].isspace():
            return words[1:], ""
        return words[1:-1], words[-1] if words else ""

    def format_completion(self, item: CompletionItem) -> str:
        return item.value


class PowerShellComplete(_CommandLineComplete):
    """Shell completion for PowerShell (``Register-ArgumentCompleter``)."""

    name = "powershell"
    source_template = _POWERSHELL_SOURCE


class ElvishComplete(_CommandLineComplete):
    """Shell completion for Elvish (``edit:completion:arg-completer``)."""

    name = "elvish"
    source_template = _ELVISH_SOURCE


add_completion_class(PowerShellComplete)
add_completion_class(ElvishComplete)


def generate_completion_script(command: click.Command, shell: str) -> str:
    """Return the completion script for ``shell``.

    Args:
        command (click.Command): The root command to complete.
        shell (str): One of `SHELLS`.

    Returns:
        str: The script source, ready to be evaluated by the shell.

    Raises:
        ValueError: If ``shell`` is not supported.
    """
    comp_cls: type[ShellComplete] | None = get_completion_class(shell)
    if comp_cls is None:
        raise ValueError(f"Unsupported shell: {shell}")
    logger.debug("Generating %s completion script", shell)
    comp: ShellComplete = comp_cls(command, {}, PROG_NAME, COMPLETE_VAR)
    return comp.source()
