# topmark:header:start
#
#   project      : YarsFormat
#   file         : runner.py
#   file_relpath : src/yars_format/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the YarsFormat formatting pipeline on text or on a document tree.

The runner composes the stages in a fixed order:

    text -> load_document -> normalize -> emit -> text

A null document short-circuits the run and the input text is handed back
unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from yars_format.config.logging import get_logger
from yars_format.pipeline.emitter import EmitterOptions, emit
from yars_format.pipeline.loader import load_document
from yars_format.pipeline.normalizer import normalize

if TYPE_CHECKING:
    from yars_format.config.logging import YarsLogger
    from yars_format.core.document import Document

logger: YarsLogger = get_logger(__name__)


def format_document(doc: Document, options: EmitterOptions | None = None) -> str:
    """Normalize and emit an already loaded document tree.

    Args:
        doc (Document): The tree to format.
        options (EmitterOptions | None): Emission options; defaults apply when None.

    Returns:
        str: Canonical YAML text.
    """
    normalized: Document = normalize(doc)
    return emit(normalized, options)


def format_text(text: str, options: EmitterOptions | None = None) -> str:
    """Execute the pipeline on YAML text.

    Args:
        text (str): Input YAML text.
        options (EmitterOptions | None): Emission options; defaults apply when None.

    Returns:
        str: Canonical YAML text, or ``text`` itself when the document is null.

    Raises:
        ParseError: If the text is not valid YAML.
        RootTypeError: If the root is a sequence.
        UnsupportedValueError: If the text holds values outside the document model.
    """
    logger.trace("format_text: %d character(s) of input", len(text))
    doc: Document | None = load_document(text)
    if doc is None:
        return text
    return format_document(doc, options)
