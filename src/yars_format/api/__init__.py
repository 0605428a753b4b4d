# topmark:header:start
#
#   project      : YarsFormat
#   file         : __init__.py
#   file_relpath : src/yars_format/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public yars-format API (stable surface).

This module exposes a small, typed API for formatting YAML programmatically
without going through the CLI.

Entry points
------------
- `format_yaml_string`: format YAML text.
- `format_yaml_dict`: format an in-memory mapping.
- `format_yaml_file`: format one file in place (or only check it).
- `format_yaml_files`: format a batch of files, collecting failures.

`process_file` and `run_batch` return per-file `FileOutcome` records
instead; the CLI is built on them.

Error contract
--------------
The text and structure entry points, and `format_yaml_file`, raise
[`YamlFormatError`][yars_format.core.errors.YamlFormatError] subclasses. The
batch helpers never raise for a per-file failure: each failure is recorded and
processing continues with the next path.

Files are read and written as UTF-8 without newline translation, so a file
is rewritten only when its exact content differs from the canonical form.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from yars_format.config import Config
from yars_format.config.logging import get_logger
from yars_format.constants import DICT_EMIT_WIDTH, STRING_EMIT_WIDTH, YARS_FORMAT_VERSION
from yars_format.core.document import Map, Seq, from_python, kind_of
from yars_format.core.errors import IoError, RootTypeError, YamlFormatError
from yars_format.pipeline.emitter import EmitterOptions
from yars_format.pipeline.runner import format_document, format_text
from yars_format.utils.diff import count_changed_lines

from .types import BatchResult, FileOutcome, Outcome

if TYPE_CHECKING:
    from collections.abc import Iterable

    from yars_format.config.logging import YarsLogger
    from yars_format.core.document import Document

logger: YarsLogger = get_logger(__name__)


__all__: list[str] = [
    "BatchResult",
    "FileOutcome",
    "Outcome",
    "format_yaml_dict",
    "format_yaml_file",
    "format_yaml_files",
    "format_yaml_string",
    "process_file",
    "run_batch",
    "version",
]


def format_yaml_string(text: str) -> str:
    """Format YAML text into its canonical form.

    Args:
        text (str): YAML text, optionally starting with a ``---`` marker.

    Returns:
        str: The canonical text; ``text`` itself when the document is null
        (empty, ``null`` or ``~``).

    Raises:
        ParseError: If the text is not valid YAML.
        RootTypeError: If the root is a sequence.
        UnsupportedValueError: If the text holds values outside the document model.
    """
    return format_text(text, EmitterOptions(width=STRING_EMIT_WIDTH))


def format_yaml_dict(data: Any) -> str:
    """Format an in-memory mapping as canonical YAML.

    Args:
        data (Any): A mapping of scalars, lists and nested mappings.

    Returns:
        str: The canonical text.

    Raises:
        RootTypeError: If ``data`` is not a mapping.
        UnsupportedValueError: If ``data`` holds a value outside the document model.
    """
    doc: Document = from_python(data)
    match doc:
        case Map():
            return format_document(doc, EmitterOptions(width=DICT_EMIT_WIDTH))
        case Seq():
            raise RootTypeError.top_level_list()
        case _:
            raise RootTypeError(f"Expected dict, got {kind_of(doc)}")


def _read_text(path: Path) -> str:
    if not path.exists():
        raise IoError.not_found(path)
    try:
        with open(path, encoding="utf-8", newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise IoError.read_failed(path, exc) from exc


def _write_text(path: Path, text: str) -> None:
    try:
        with open(path, "w", encoding="utf-8", newline="") as fh:
            fh.write(text)
    except OSError as exc:
        raise IoError.write_failed(path, exc) from exc


def _format_path(path: Path, config: Config) -> FileOutcome:
    original: str = _read_text(path)
    formatted: str = format_text(original, EmitterOptions(width=config.width))
    if formatted == original:
        return FileOutcome(path=path, outcome=Outcome.UNCHANGED)

    if not config.check_only:
        _write_text(path, formatted)
    return FileOutcome(
        path=path,
        outcome=Outcome.WOULD_CHANGE if config.check_only else Outcome.CHANGED,
        lines_changed=count_changed_lines(original, formatted),
    )


def format_yaml_file(path: Path | str, check_only: bool = False) -> bool:
    """Format a file in place.

    Args:
        path (Path | str): The YAML file.
        check_only (bool): If True, never write; only report.

    Returns:
        bool: True if the file changed (or would change in check mode).

    Raises:
        IoError: If the file is missing, unreadable or unwritable.
        YamlFormatError: If the content cannot be formatted.
    """
    config: Config = Config.from_defaults().with_overrides(check_only=check_only)
    return _format_path(Path(path), config).changed


def process_file(path: Path | str, config: Config | None = None) -> FileOutcome:
    """Format one file and report the outcome without raising.

    Args:
        path (Path | str): The YAML file.
        config (Config | None): Run configuration; defaults apply when None.

    Returns:
        FileOutcome: The outcome; failures carry the error in ``error``.
    """
    cfg: Config = config or Config.from_defaults()
    p = Path(path)
    try:
        result: FileOutcome = _format_path(p, cfg)
    except YamlFormatError as exc:
        logger.warning("%s: %s", p, exc)
        return FileOutcome(path=p, outcome=Outcome.ERROR, error=exc)
    logger.debug("%s: %s (%d line(s))", p, result.outcome.value, result.lines_changed)
    return result


def run_batch(paths: Iterable[Path | str], config: Config | None = None) -> list[FileOutcome]:
    """Process files sequentially, in the given order.

    A failure on one path never stops the remaining paths from being processed.

    Args:
        paths (Iterable[Path | str]): The YAML files.
        config (Config | None): Run configuration; defaults apply when None.

    Returns:
        list[FileOutcome]: One outcome per path, in input order.
    """
    cfg: Config = config or Config.from_defaults()
    return [process_file(path, cfg) for path in paths]


def format_yaml_files(paths: Iterable[Path | str], check_only: bool = False) -> BatchResult:
    """Format several files, aggregating changes and failures.

    Args:
        paths (Iterable[Path | str]): The YAML files.
        check_only (bool): If True, never write; only report.

    Returns:
        BatchResult: ``(changed_count, error_count, messages)``, with one message
        per failed file in path order.
    """
    config: Config = Config.from_defaults().with_overrides(check_only=check_only)
    outcomes: list[FileOutcome] = run_batch(paths, config)
    messages: list[str] = [str(o.error) for o in outcomes if o.error is not None]
    return BatchResult(
        changed_count=sum(1 for o in outcomes if o.changed),
        error_count=len(messages),
        messages=messages,
    )


def version() -> str:
    """Return the current yars-format version string."""
    return YARS_FORMAT_VERSION
