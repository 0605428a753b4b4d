# topmark:header:start
#
#   project      : YarsFormat
#   file         : types.py
#   file_relpath : src/yars_format/api/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stable public types for the yars-format API.

This module defines the enums and result shapes that appear in the public
function signatures and return values of [`yars_format.api`][yars_format.api].
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

from yachalk import chalk

from yars_format.rendering.colored_enum import ColoredStrEnum

if TYPE_CHECKING:
    from pathlib import Path

    from yars_format.core.errors import YamlFormatError


class Outcome(ColoredStrEnum):
    """Per-file outcome bucket.

    Values double as the CLI status labels:
      - ``UNCHANGED``: The file is already in canonical form.
      - ``WOULD_CHANGE``: Check mode detected that formatting would change the file.
      - ``CHANGED``: The file was rewritten.
      - ``ERROR``: The file could not be read, parsed or written.
    """

    UNCHANGED = ("already formatted", chalk.green)
    WOULD_CHANGE = ("would reformat", chalk.yellow)
    CHANGED = ("reformatted", chalk.cyan)
    ERROR = ("error", chalk.red_bright)


@dataclass(frozen=True)
class FileOutcome:
    """Result for a single file.

    Attributes:
        path (Path): The path as given by the caller.
        outcome (Outcome): High-level outcome bucket.
        lines_changed (int): Number of differing line positions (0 unless changed).
        error (YamlFormatError | None): The failure for ``Outcome.ERROR``, else ``None``.
    """

    path: Path
    outcome: Outcome
    lines_changed: int = 0
    error: YamlFormatError | None = None

    @property
    def changed(self) -> bool:
        """Whether the file was (or would be) changed."""
        return self.outcome in (Outcome.WOULD_CHANGE, Outcome.CHANGED)

    @property
    def ok(self) -> bool:
        """Whether the file was processed without error."""
        return self.outcome is not Outcome.ERROR


class BatchResult(NamedTuple):
    """Aggregate result of `format_yaml_files`.

    Attributes:
        changed_count (int): Files that changed (or would change in check mode).
        error_count (int): Files that failed.
        messages (list[str]): One message per failure, in path order.
    """

    changed_count: int
    error_count: int
    messages: list[str]


__all__: list[str] = ["BatchResult", "FileOutcome", "Outcome"]
