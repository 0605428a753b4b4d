# topmark:header:start
#
#   project      : YarsFormat
#   file         : diff.py
#   file_relpath : src/yars_format/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line-level change measurement between an original and a formatted text."""

from __future__ import annotations

from itertools import zip_longest

from yars_format.config.logging import get_logger

logger = get_logger(__name__)


def split_lines(text: str) -> list[str]:
    """Split ``text`` into lines without their terminators.

    Only ``\\n`` separates lines; a ``\\r`` right before it belongs to the line
    ending. A final line feed does not open an extra empty line.
    """
    if not text:
        return []
    lines: list[str] = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def count_changed_lines(original: str, formatted: str) -> int:
    """Count line positions whose content differs between two texts.

    Lines are compared position by position; when one text is longer, each
    surplus line counts as changed.

    Args:
        original: The text before formatting.
        formatted: The text after formatting.

    Returns:
        The number of differing line positions.
    """
    count: int = sum(
        1
        for old, new in zip_longest(split_lines(original), split_lines(formatted), fillvalue="")
        if old != new
    )
    logger.trace("count_changed_lines: %d", count)
    return count
