# topmark:header:start
#
#   project      : YarsFormat
#   file         : document.py
#   file_relpath : src/yars_format/core/document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-memory document tree used by every pipeline stage.

A document is a closed union of six frozen node types:

* `Null`, `Bool`, `Number`, `Str` (scalars)
* `Seq` (ordered items)
* `Map` (ordered ``(key, value)`` entries, keys restricted to scalars)

Nodes are immutable and compare structurally, so pipeline stages build new
trees instead of mutating their input. Plain Python data converts to and from
this model with `from_python` and `to_python`.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from yars_format.core.errors import UnsupportedValueError


@dataclass(frozen=True, slots=True)
class Null:
    """The YAML null value."""


@dataclass(frozen=True, slots=True)
class Bool:
    """A boolean scalar."""

    value: bool


@dataclass(frozen=True, slots=True)
class Number:
    """An integer or floating point scalar."""

    value: int | float


@dataclass(frozen=True, slots=True)
class Str:
    """A string scalar."""

    value: str


@dataclass(frozen=True, slots=True)
class Seq:
    """A sequence; item order is significant."""

    items: tuple[Document, ...] = ()


@dataclass(frozen=True, slots=True)
class Map:
    """A mapping stored as ordered ``(key, value)`` entries."""

    entries: tuple[tuple[Scalar, Document], ...] = ()

    def get(self, key: str) -> Document | None:
        """Return the value stored under the string key ``key`` (or None)."""
        for k, v in self.entries:
            if isinstance(k, Str) and k.value == key:
                return v
        return None

    def keys(self) -> list[Scalar]:
        """Return the keys in entry order."""
        return [k for k, _ in self.entries]


Scalar = Union[Null, Bool, Number, Str]
Document = Union[Null, Bool, Number, Str, Seq, Map]


class MappingPairs(list[tuple[Any, Any]]):
    """Mapping entries as an ordered list of ``(key, value)`` pairs.

    Stands in for a ``dict`` where YAML-distinct keys would collide as Python
    dict keys (``1``, ``1.0`` and ``True`` all hash alike).
    """


def format_number(value: int | float) -> str:
    """Return the canonical YAML spelling of a number.

    Floats follow the YAML float syntax: ``.nan``, ``.inf``/``-.inf``, and a
    fraction is always present (``1e+20`` is written ``1.0e+20``) so the text
    resolves back to a float.
    """
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return ".nan"
    if math.isinf(value):
        return ".inf" if value > 0 else "-.inf"
    text = repr(value).lower()
    if "." not in text and "e" in text:
        text = text.replace("e", ".0e", 1)
    return text


def key_text(key: Scalar) -> str:
    """Return the string form of a mapping key used for ordering.

    Args:
        key (Scalar): A scalar node used as a mapping key.

    Returns:
        str: ``null``, ``true``/``false``, the canonical number text, or the
        string itself.
    """
    match key:
        case Null():
            return "null"
        case Bool(value=b):
            return "true" if b else "false"
        case Number(value=n):
            return format_number(n)
        case Str(value=s):
            return s
    raise UnsupportedValueError(f"Unsupported mapping key: {key!r}")


def kind_of(node: Document) -> str:
    """Return a short human-readable name for the node kind."""
    match node:
        case Null():
            return "null"
        case Bool():
            return "bool"
        case Number():
            return "number"
        case Str():
            return "string"
        case Seq():
            return "list"
        case Map():
            return "dict"
    raise UnsupportedValueError(f"Not a document node: {node!r}")


def _scalar_from_python(obj: object) -> Scalar:
    if obj is None:
        return Null()
    # bool before int: bool is an int subclass
    if isinstance(obj, bool):
        return Bool(obj)
    if isinstance(obj, (int, float)):
        return Number(obj)
    if isinstance(obj, str):
        return Str(obj)
    raise UnsupportedValueError(f"Unsupported mapping key of type {type(obj).__name__}: {obj!r}")


def from_python(obj: object) -> Document:
    """Convert plain Python data into a document tree.

    Args:
        obj (object): ``None``, ``bool``, ``int``, ``float``, ``str``, a list or
            tuple, or a mapping whose keys are scalars; nested arbitrarily.
            A `MappingPairs` list converts to a mapping, pair by pair.

    Returns:
        Document: The equivalent document tree, preserving order.

    Raises:
        UnsupportedValueError: If a value (or key) has an unsupported type.
    """
    if isinstance(obj, MappingPairs):
        return Map(tuple((_scalar_from_python(k), from_python(v)) for k, v in obj))
    if isinstance(obj, Mapping):
        return Map(tuple((_scalar_from_python(k), from_python(v)) for k, v in obj.items()))
    if isinstance(obj, (list, tuple)):
        return Seq(tuple(from_python(item) for item in obj))
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return _scalar_from_python(obj)
    raise UnsupportedValueError(f"Unsupported value of type {type(obj).__name__}: {obj!r}")


def to_python(node: Document) -> Any:
    """Convert a document tree back into plain Python data.

    Mappings become dicts and sequences become lists.
    """
    match node:
        case Null():
            return None
        case Bool(value=b):
            return b
        case Number(value=n):
            return n
        case Str(value=s):
            return s
        case Seq(items=items):
            return [to_python(item) for item in items]
        case Map(entries=entries):
            return {to_python(k): to_python(v) for k, v in entries}
    raise UnsupportedValueError(f"Not a document node: {node!r}")


__all__: list[str] = [
    "Bool",
    "Document",
    "Map",
    "MappingPairs",
    "Null",
    "Number",
    "Scalar",
    "Seq",
    "Str",
    "format_number",
    "from_python",
    "key_text",
    "kind_of",
    "to_python",
]
