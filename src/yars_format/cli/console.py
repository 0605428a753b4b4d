# topmark:header:start
#
#   project      : YarsFormat
#   file         : console.py
#   file_relpath : src/yars_format/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console for user-facing program output.

`ClickConsole` keeps the per-file lines, the run summary and the error lines
of the ``yars-format`` command apart from internal logging: those go through
the console, diagnostics go through `logging`.
"""

from __future__ import annotations

from typing import TextIO

import click


class ClickConsole:
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool | None): Force ANSI colors on (True) or off (False).
            ``None`` lets Click decide per stream (colors only on a terminal).
        out (TextIO | None): Stream for status lines (``None``: Click's stdout).
        err (TextIO | None): Stream for error lines (``None``: Click's stderr).
    """

    enable_color: bool | None
    out: TextIO | None
    err: TextIO | None

    def __init__(
        self,
        *,
        enable_color: bool | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out
        self.err = err

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a status line (or a completion script) to stdout."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write a per-file error line or the error count to stderr."""
        click.secho(
            text, nl=nl, file=self.err, err=True, color=self.enable_color, fg="bright_red"
        )
