# topmark:header:start
#
#   project      : YarsFormat
#   file         : classifier.py
#   file_relpath : src/yars_format/pipeline/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""String classification: which textual encoding a scalar string gets.

`classify` is a single ordered decision:

1. `StringClass.LITERAL_BLOCK` for multi-line text that a ``|-`` block can
   carry verbatim;
2. `StringClass.INLINE_PLAIN` for short identifier-like tokens that read back
   as the same string when unquoted;
3. `StringClass.INLINE_QUOTED` for everything else.

Mapping keys use `is_plain_token` directly: plain when legal, quoted otherwise.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Final

from yars_format.config.logging import YarsLogger, get_logger
from yars_format.pipeline.loader import implicit_tag

logger: YarsLogger = get_logger(__name__)

_STR_TAG: Final[str] = "tag:yaml.org,2002:str"

_PLAIN_TOKEN_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9._/-]+")

#: Tokens that would read back as null or booleans when left unquoted.
RESERVED_WORDS: Final[frozenset[str]] = frozenset(
    {"true", "false", "null", "yes", "no", "on", "off", "~"}
)


class StringClass(str, Enum):
    """Textual encoding chosen for a scalar string."""

    LITERAL_BLOCK = "literal_block"
    INLINE_PLAIN = "inline_plain"
    INLINE_QUOTED = "inline_quoted"


def is_disallowed_control(ch: str) -> bool:
    """Return True for control characters a literal block must not contain.

    That is C0 controls other than tab, line feed and carriage return, DEL, and
    the C1 block (U+0080..U+009F).
    """
    code: int = ord(ch)
    if code < 0x20:
        return ch not in "\t\n\r"
    return code == 0x7F or 0x80 <= code <= 0x9F


def looks_like_number(text: str) -> bool:
    """Return True if ``text`` reads as an integer or float literal.

    Accepts leading ``-`` signs, digits, at most one ``.`` before any exponent,
    and one ``e``/``E`` exponent that may carry its own sign.
    """
    trimmed: str = text.lstrip("-")
    if not trimmed:
        return False
    if trimmed.isascii() and trimmed.isdigit():
        return True

    has_decimal = False
    has_exp = False
    has_digits = False
    for idx, ch in enumerate(trimmed):
        if "0" <= ch <= "9":
            has_digits = True
        elif ch == "." and not has_decimal and not has_exp:
            has_decimal = True
        elif ch in "eE" and not has_exp and has_digits:
            has_exp = True
            has_digits = False
        elif ch in "+-" and has_exp and idx > 0 and trimmed[idx - 1] in "eE":
            continue
        else:
            return False
    return has_digits


def is_plain_token(text: str) -> bool:
    """Return True if ``text`` can be written unquoted and read back unchanged.

    Args:
        text (str): A string scalar or mapping key.

    Returns:
        bool: True for non-empty ``[A-Za-z0-9._/-]+`` tokens that are not reserved
        words, numbers, indicator-led (``-``, ``...``), or otherwise resolved by
        the loader to a non-string value (``True``, ``0x1F``, ``.inf``).
    """
    if "\n" in text or not _PLAIN_TOKEN_RE.fullmatch(text):
        return False
    if text in RESERVED_WORDS or looks_like_number(text):
        return False
    if text.startswith(("-", "...")):
        return False
    return implicit_tag(text) == _STR_TAG


def breaks_block_layout(ch: str) -> bool:
    """Return True for characters a block scalar cannot carry verbatim.

    A YAML reader treats CR, U+2028 and U+2029 as line breaks of their own, so
    they would shift the block indentation; U+FFFE, U+FFFF and lone surrogates
    are not printable at all.
    """
    code: int = ord(ch)
    return ch in "\r\u2028\u2029\ufffe\uffff" or 0xD800 <= code <= 0xDFFF


def _fits_literal_block(text: str) -> bool:
    if "\n" not in text:
        return False
    # Unicode whitespace (NBSP, U+3000, ...). str.isspace also matches
    # U+001C..U+001F, which is_disallowed_control rejects anyway.
    if text[0].isspace() or text[-1].isspace():
        return False
    return not any(is_disallowed_control(ch) or breaks_block_layout(ch) for ch in text)


def classify(text: str) -> StringClass:
    """Decide how a scalar string is rendered.

    Args:
        text (str): The string value.

    Returns:
        StringClass: The chosen encoding.
    """
    if _fits_literal_block(text):
        result = StringClass.LITERAL_BLOCK
    elif is_plain_token(text):
        result = StringClass.INLINE_PLAIN
    else:
        result = StringClass.INLINE_QUOTED
    logger.trace("classify(%r) -> %s", text[:40], result.value)
    return result
