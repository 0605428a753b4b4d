# topmark:header:start
#
#   project      : YarsFormat
#   file         : errors.py
#   file_relpath : src/yars_format/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the formatting pipeline and the file helpers.

Usage:
    The pure pipeline raises these exceptions. The per-file and batch API
    helpers catch `YamlFormatError` and turn it into an outcome so that one
    bad file never aborts a run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from yars_format.constants import TOP_LEVEL_LIST_MESSAGE

if TYPE_CHECKING:
    from pathlib import Path


class YamlFormatError(Exception):
    """Base class for all formatter errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class RootTypeError(YamlFormatError):
    """The document root has a shape the formatter does not support."""

    @classmethod
    def top_level_list(cls) -> RootTypeError:
        """Return the error raised for a top-level sequence."""
        return cls(TOP_LEVEL_LIST_MESSAGE)


class ParseError(YamlFormatError):
    """The input text is not valid YAML.

    The underlying parser message is preserved in `detail`.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(f"Error formatting YAML: {detail}")
        self.detail = detail


class UnsupportedValueError(YamlFormatError):
    """A value falls outside null/bool/number/string/sequence/mapping."""


def _describe(exc: BaseException) -> str:
    # OSError.strerror omits the errno prefix and the repeated file name.
    return getattr(exc, "strerror", None) or str(exc)


class IoError(YamlFormatError):
    """A file could not be found, read or written.

    Attributes:
        path (Path): The file the operation was attempted on.
        cause (str): Human-readable description of the underlying failure.
        operation (str): ``"read"`` or ``"write"``.
    """

    def __init__(
        self,
        path: Path,
        cause: str,
        *,
        operation: str = "read",
        message: str | None = None,
    ) -> None:
        super().__init__(message or f"Failed to {operation} {path}: {cause}")
        self.path = path
        self.cause = cause
        self.operation = operation

    @classmethod
    def not_found(cls, path: Path) -> IoError:
        """Return the error for a missing file."""
        return cls(path, "No such file or directory", message=f"File not found: {path}")

    @classmethod
    def read_failed(cls, path: Path, exc: BaseException) -> IoError:
        """Return the error for a failed read."""
        return cls(path, _describe(exc), operation="read")

    @classmethod
    def write_failed(cls, path: Path, exc: BaseException) -> IoError:
        """Return the error for a failed write."""
        return cls(path, _describe(exc), operation="write")


__all__: list[str] = [
    "IoError",
    "ParseError",
    "RootTypeError",
    "UnsupportedValueError",
    "YamlFormatError",
]
