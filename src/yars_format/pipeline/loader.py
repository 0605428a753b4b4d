# topmark:header:start
#
#   project      : YarsFormat
#   file         : loader.py
#   file_relpath : src/yars_format/pipeline/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Loader/validator stage: YAML text to document tree.

Responsibilities:
- strip one leading ``---`` document-start marker;
- parse the remaining text with PyYAML (safe loader, no timestamps);
- convert the parsed data into a `Document`, keeping every mapping entry
  whose key YAML tells apart (`1`, `1.0`, `true`);
- reject unsupported root shapes (top-level sequences).

A null document is not an error: `load_document` returns ``None`` so the caller
can hand back the original text untouched.
"""

from __future__ import annotations

import copy
import re
from typing import TYPE_CHECKING, Final

import yaml
from yaml.constructor import ConstructorError

from yars_format.config.logging import YarsLogger, get_logger
from yars_format.core.document import Document, MappingPairs, Null, Seq, from_python
from yars_format.core.errors import ParseError, RootTypeError

if TYPE_CHECKING:
    from collections.abc import Iterator

logger: YarsLogger = get_logger(__name__)

_TIMESTAMP_TAG: Final[str] = "tag:yaml.org,2002:timestamp"
_STR_TAG: Final[str] = "tag:yaml.org,2002:str"

# Blank lines, then a column-0 marker followed by whitespace or end of text.
_LEADING_MARKER_RE: Final[re.Pattern[str]] = re.compile(
    r"\A(?:[ \t]*\r?\n)*---(?=[ \t\r\n]|\Z)(?:\r?\n)?"
)


class FormatterLoader(yaml.SafeLoader):
    """Safe loader restricted to the types the document model supports.

    Timestamps are not resolved implicitly, so values such as ``2024-01-31``
    stay strings instead of becoming `datetime.date` objects.
    """


# yaml_implicit_resolvers is a class-level dict shared with SafeLoader; copy it
# before editing so the global loader is left alone.
FormatterLoader.yaml_implicit_resolvers = copy.deepcopy(yaml.SafeLoader.yaml_implicit_resolvers)
for _first, _resolvers in list(FormatterLoader.yaml_implicit_resolvers.items()):
    FormatterLoader.yaml_implicit_resolvers[_first] = [
        r for r in _resolvers if r[0] != _TIMESTAMP_TAG
    ]


class DocumentLoader(FormatterLoader):
    """`FormatterLoader` that builds mappings as `MappingPairs`.

    A ``dict`` would merge keys that YAML keeps apart but Python hashes alike
    (``1``, ``1.0``, ``true``). Keys that are equal in value and type are true
    duplicates: the first position is kept and the last value wins.
    """

    def construct_mapping_pairs(self, node: yaml.MappingNode) -> Iterator[MappingPairs]:
        """Construct a mapping node into ordered pairs (generator constructor)."""
        pairs = MappingPairs()
        yield pairs
        self.flatten_mapping(node)
        positions: dict[tuple[type, object], int] = {}
        for key_node, value_node in node.value:
            key = self.construct_object(key_node, deep=False)
            identity = (type(key), key)
            try:
                index = positions.get(identity)
            except TypeError as exc:
                raise ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    "found unhashable key",
                    key_node.start_mark,
                ) from exc
            value = self.construct_object(value_node, deep=False)
            if index is None:
                positions[identity] = len(pairs)
                pairs.append((key, value))
            else:
                logger.trace("Duplicate key %r: keeping the last value", key)
                pairs[index] = (pairs[index][0], value)


DocumentLoader.add_constructor("tag:yaml.org,2002:map", DocumentLoader.construct_mapping_pairs)


def implicit_tag(text: str) -> str:
    """Return the tag `FormatterLoader` would assign to ``text`` as a plain scalar.

    Args:
        text (str): Candidate plain scalar text.

    Returns:
        str: The resolved tag, e.g. ``tag:yaml.org,2002:int``; the string tag when
        no implicit resolver matches.
    """
    table = FormatterLoader.yaml_implicit_resolvers
    candidates = list(table.get(text[:1], [])) + list(table.get(None, []))  # type: ignore[call-overload]
    for tag, regexp in candidates:
        if regexp.match(text):
            return tag
    return _STR_TAG


def strip_document_marker(text: str) -> str:
    """Remove a single leading ``---`` document-start marker, if present.

    Args:
        text (str): Raw YAML text.

    Returns:
        str: ``text`` without the marker and its line break.
    """
    return _LEADING_MARKER_RE.sub("", text, count=1)


def parse_yaml(text: str) -> object:
    """Parse YAML text into plain Python data, mappings as `MappingPairs`.

    Raises:
        ParseError: If PyYAML rejects the text (including multi-document streams).
    """
    try:
        return yaml.load(text, Loader=DocumentLoader)  # noqa: S506 (safe loader subclass)
    except yaml.YAMLError as exc:
        raise ParseError(str(exc)) from exc


def load_document(text: str) -> Document | None:
    """Parse and validate YAML text.

    Args:
        text (str): UTF-8 YAML text, optionally starting with ``---``.

    Returns:
        Document | None: The parsed tree, or ``None`` when the document is null
        (empty, ``null`` or ``~``).

    Raises:
        ParseError: If the text is not valid YAML.
        RootTypeError: If the root is a sequence.
        UnsupportedValueError: If an explicit tag produced a value outside the
            document model (``!!binary``, ``!!set``).
    """
    body: str = strip_document_marker(text)
    data: object = parse_yaml(body)
    doc: Document = from_python(data)

    match doc:
        case Null():
            logger.debug("Null document: input is returned unchanged")
            return None
        case Seq():
            raise RootTypeError.top_level_list()
        case _:
            logger.trace("Loaded %s root", type(doc).__name__)
            return doc
