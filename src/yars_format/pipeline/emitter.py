# topmark:header:start
#
#   project      : YarsFormat
#   file         : emitter.py
#   file_relpath : src/yars_format/pipeline/emitter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Emitter stage: canonical YAML text from a normalized document tree.

Layout rules:
  * Mapping entries are indented 2 spaces per nesting level.
  * Sequence items put the ``-`` 2 spaces in from the enclosing indentation;
    item content starts 4 spaces in. A mapping item starts on the hyphen line
    and its remaining entries align with the first one.
  * Empty mappings and sequences are written as ``{}`` and ``[]``.
  * Strings follow `yars_format.pipeline.classifier.classify`: literal
    blocks as ``|-`` with the body 2 spaces deeper than the line that
    introduces it, plain tokens as-is, anything else double-quoted.
  * No document markers are written and the text ends with one line feed.

Scalars are never wrapped. `EmitterOptions.width` is accepted for parity with
the callers' width settings but no layout decision depends on it.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Final

from yars_format.config.logging import YarsLogger, get_logger
from yars_format.constants import MAP_INDENT, SEQ_DASH_OFFSET, SEQ_INDENT, STRING_EMIT_WIDTH
from yars_format.core.document import (
    Bool,
    Document,
    Map,
    Null,
    Number,
    Scalar,
    Seq,
    Str,
    format_number,
)
from yars_format.core.errors import UnsupportedValueError
from yars_format.pipeline.classifier import StringClass, classify, is_plain_token

logger: YarsLogger = get_logger(__name__)

# Characters JSON leaves raw but a YAML reader rejects or folds. NEL (U+0085)
# is deliberately absent: it stays raw and reads back as a space.
_EXTRA_ESCAPES_RE: Final[re.Pattern[str]] = re.compile(
    "[\x7f\x80-\x84\x86-\x9f\u2028\u2029\ufeff\ufffe\uffff\ud800-\udfff]"
)

# Offset of sequence item content relative to the hyphen.
_ITEM_OFFSET: Final[int] = SEQ_INDENT - SEQ_DASH_OFFSET


@dataclass(frozen=True)
class EmitterOptions:
    """Options for a single emission.

    Attributes:
        width (int): Preferred line width. Informational only.
    """

    width: int = STRING_EMIT_WIDTH


def quote(text: str) -> str:
    """Return ``text`` as a double-quoted YAML scalar.

    The escaping is JSON string escaping, extended with ``\\uXXXX`` escapes for
    the characters YAML readers refuse to take raw.
    """
    encoded: str = json.dumps(text, ensure_ascii=False)
    return _EXTRA_ESCAPES_RE.sub(lambda m: f"\\u{ord(m.group()):04x}", encoded)


def render_key(key: Scalar) -> str:
    """Render a mapping key: plain when legal, quoted otherwise."""
    match key:
        case Str(value=s):
            return s if is_plain_token(s) else quote(s)
        case Null() | Bool() | Number():
            return render_scalar(key)
    raise UnsupportedValueError(f"Unsupported mapping key: {key!r}")


def render_scalar(node: Scalar) -> str:
    """Render a scalar on a single line (strings never become blocks here)."""
    match node:
        case Null():
            return "null"
        case Bool(value=b):
            return "true" if b else "false"
        case Number(value=n):
            return format_number(n)
        case Str(value=s):
            return s if classify(s) is StringClass.INLINE_PLAIN else quote(s)
    raise UnsupportedValueError(f"Not a scalar node: {node!r}")


class _Writer:
    """Accumulates output lines for one emission."""

    def __init__(self) -> None:
        self.parts: list[str] = []

    def write(self, text: str) -> None:
        self.parts.append(text)

    def indent(self, column: int) -> None:
        self.parts.append(" " * column)

    def literal_body(self, text: str, column: int) -> None:
        pad: str = " " * column
        self.parts.append("\n".join(pad + line for line in text.split("\n")))

    def mapping(self, node: Map, column: int, *, first_inline: bool = False) -> None:
        for idx, (key, value) in enumerate(node.entries):
            if idx:
                self.write("\n")
            if idx or not first_inline:
                self.indent(column)
            self.write(render_key(key))
            self.write(":")
            self.after_colon(value, column)

    def sequence(self, node: Seq, column: int) -> None:
        for idx, item in enumerate(node.items):
            if idx:
                self.write("\n")
            self.indent(column)
            self.write("-")
            self.item(item, column)

    def after_colon(self, value: Document, column: int) -> None:
        """Write a mapping value for a key at ``column``."""
        match value:
            case Map(entries=entries) if entries:
                self.write("\n")
                self.mapping(value, column + MAP_INDENT)
            case Seq(items=items) if items:
                self.write("\n")
                self.sequence(value, column + SEQ_DASH_OFFSET)
            case _:
                self.inline_or_block(value, column + MAP_INDENT)

    def item(self, value: Document, column: int) -> None:
        """Write a sequence item whose hyphen sits at ``column``."""
        match value:
            case Map(entries=entries) if entries:
                self.write(" ")
                self.mapping(value, column + _ITEM_OFFSET, first_inline=True)
            case Seq(items=items) if items:
                self.write("\n")
                self.sequence(value, column + _ITEM_OFFSET)
            case _:
                self.inline_or_block(value, column + _ITEM_OFFSET)

    def inline_or_block(self, value: Document, body_column: int) -> None:
        """Write a scalar or empty collection after ``:`` or ``-``."""
        match value:
            case Map():
                self.write(" {}")
            case Seq():
                self.write(" []")
            case Str(value=s) if classify(s) is StringClass.LITERAL_BLOCK:
                self.write(" |-\n")
                self.literal_body(s, body_column)
            case Null() | Bool() | Number() | Str():
                self.write(" ")
                self.write(render_scalar(value))
            case _:
                raise UnsupportedValueError(f"Not a document node: {value!r}")

    def root(self, node: Document) -> None:
        match node:
            case Map(entries=entries) if entries:
                self.mapping(node, 0)
            case Seq(items=items) if items:
                self.sequence(node, 0)
            case _:
                self.inline_or_block(node, MAP_INDENT)
                # Drop the separator space written after the absent key.
                self.parts[0] = self.parts[0].lstrip(" ")

    def text(self) -> str:
        out: str = "".join(self.parts)
        return out if out.endswith("\n") else out + "\n"


def emit(node: Document, options: EmitterOptions | None = None) -> str:
    """Render a normalized document tree as canonical YAML text.

    Args:
        node (Document): The tree to render; mappings should already be normalized.
        options (EmitterOptions | None): Emission options; defaults apply when None.

    Returns:
        str: The YAML text, terminated by a single line feed.
    """
    opts: EmitterOptions = options or EmitterOptions()
    logger.debug("Emitting %s root (width=%d)", type(node).__name__, opts.width)
    writer = _Writer()
    writer.root(node)
    return writer.text()
