# topmark:header:start
#
#   project      : YarsFormat
#   file         : normalizer.py
#   file_relpath : src/yars_format/pipeline/normalizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Normalizer stage: deterministic mapping order.

Every mapping in the tree is rebuilt with its entries ordered by the string
form of their keys (`yars_format.core.document.key_text`), compared by code
point. The sort is stable, so entries whose keys share a string form (e.g. the
integer ``1`` and the string ``"1"``) keep their input order. Sequences keep
their item order; only their contents are normalized. The input tree is never
modified.
"""

from __future__ import annotations

from yars_format.config.logging import YarsLogger, get_logger
from yars_format.core.document import (
    Bool,
    Document,
    Map,
    Null,
    Number,
    Seq,
    Str,
    key_text,
)

logger: YarsLogger = get_logger(__name__)


def normalize(node: Document) -> Document:
    """Return a copy of ``node`` with every mapping sorted by key text.

    Args:
        node (Document): The tree to normalize.

    Returns:
        Document: A new tree; scalars are shared since they are immutable.
    """
    match node:
        case Map(entries=entries):
            normalized = [(k, normalize(v)) for k, v in entries]
            normalized.sort(key=lambda entry: key_text(entry[0]))
            logger.trace("Sorted mapping with %d entries", len(normalized))
            return Map(tuple(normalized))
        case Seq(items=items):
            return Seq(tuple(normalize(item) for item in items))
        case Null() | Bool() | Number() | Str():
            return node
    raise TypeError(f"Not a document node: {node!r}")


def is_normalized(node: Document) -> bool:
    """Return True if every mapping in ``node`` is already in key-text order."""
    match node:
        case Map(entries=entries):
            texts = [key_text(k) for k, _ in entries]
            if any(a > b for a, b in zip(texts, texts[1:])):
                return False
            return all(is_normalized(v) for _, v in entries)
        case Seq(items=items):
            return all(is_normalized(item) for item in items)
        case _:
            return True
