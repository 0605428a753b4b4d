# topmark:header:start
#
#   project      : YarsFormat
#   file         : main.py
#   file_relpath : src/yars_format/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``yars-format`` command.

Formats YAML files in place, or reports what would change with ``--check``.
Program output goes through `ClickConsole`; internal diagnostics go through
logging, whose level is taken from ``YARS_FORMAT_LOG_LEVEL``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from yars_format.api import run_batch
from yars_format.api.types import FileOutcome, Outcome
from yars_format.cli.completion import SHELLS, generate_completion_script
from yars_format.cli.console import ClickConsole
from yars_format.cli.exit_codes import ExitCode
from yars_format.config import Config, MutableConfig
from yars_format.config.logging import get_logger, resolve_env_log_level, setup_logging
from yars_format.constants import PROG_NAME, YARS_FORMAT_VERSION
from yars_format.core.errors import IoError

if TYPE_CHECKING:
    from yars_format.config.logging import YarsLogger

logger: YarsLogger = get_logger(__name__)


def describe_outcome(outcome: FileOutcome) -> str:
    """Return the verbose status line for a successfully processed file."""
    match outcome.outcome:
        case Outcome.WOULD_CHANGE:
            detail = f" ({outcome.lines_changed} differing line(s))"
        case Outcome.CHANGED:
            detail = f" ({outcome.lines_changed} line(s) changed)"
        case _:
            detail = ""
    return f"{outcome.path} - {outcome.outcome.styled()}{detail}"


def describe_error(outcome: FileOutcome) -> str:
    """Return the error line for a failed file."""
    err = outcome.error
    if isinstance(err, IoError):
        detail = f"Failed to {err.operation} file: {err.cause}"
    else:
        detail = str(err)
    return f"Error: {outcome.path}: {detail}"


def summarize(outcomes: list[FileOutcome], config: Config) -> str:
    """Return the one-line run summary."""
    ok: int = sum(1 for o in outcomes if o.ok)
    changed: int = sum(1 for o in outcomes if o.changed)
    if config.check_only:
        return f"Checked {ok} file(s); {changed} would change."
    return f"Formatted {ok} file(s); {changed} updated, {ok - changed} unchanged."


def resolve_exit_code(outcomes: list[FileOutcome], config: Config) -> ExitCode:
    """Map a run to its exit code; errors win over pending changes."""
    if any(not o.ok for o in outcomes):
        return ExitCode.FAILURE
    if config.check_only and any(o.changed for o in outcomes):
        return ExitCode.WOULD_CHANGE
    return ExitCode.SUCCESS


@click.command(
    name=PROG_NAME,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Format YAML files using the yars formatter.",
)
@click.option(
    "--check",
    "check",
    is_flag=True,
    help="Run in check mode (report changes without writing).",
)
@click.option(
    "-v",
    "--verbose",
    "verbose",
    is_flag=True,
    help="Verbose output (list each processed file).",
)
@click.option(
    "--generate-completions",
    "shell",
    type=click.Choice(SHELLS),
    default=None,
    help="Generate shell completion script for the given shell.",
)
@click.version_option(YARS_FORMAT_VERSION, "--version", prog_name=PROG_NAME)
@click.argument(
    "files",
    metavar="FILE...",
    nargs=-1,
    type=click.Path(path_type=Path),
)
@click.pass_context
def cli(
    ctx: click.Context,
    check: bool,
    verbose: bool,
    shell: str | None,
    files: tuple[Path, ...],
) -> None:
    """Entry point for the yars-format CLI."""
    setup_logging(level=resolve_env_log_level())
    console = ClickConsole()

    if shell is not None:
        if files:
            logger.warning("Generating %s completions; ignoring %d file(s)", shell, len(files))
        console.print(generate_completion_script(ctx.command, shell), nl=False)
        return

    if not files:
        raise click.UsageError("Missing argument 'FILE...'.", ctx=ctx)

    builder: MutableConfig = MutableConfig.from_defaults()
    builder.check_only = check
    builder.verbose = verbose
    config: Config = builder.freeze()

    outcomes: list[FileOutcome] = run_batch(files, config)
    for outcome in outcomes:
        if not outcome.ok:
            console.error(describe_error(outcome))
        elif config.verbose:
            console.print(describe_outcome(outcome))

    console.print(summarize(outcomes, config))

    errors: int = sum(1 for o in outcomes if not o.ok)
    if errors:
        console.error(f"Encountered {errors} error(s).")

    ctx.exit(resolve_exit_code(outcomes, config))


if __name__ == "__main__":
    cli()
