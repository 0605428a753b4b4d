# topmark:header:start
#
#   project      : YarsFormat
#   file         : test_runner.py
#   file_relpath : tests/pipeline/test_runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end tests of the pure pipeline (text in, text out)."""

from __future__ import annotations

import pytest

from tests.conftest import parametrize
from yars_format.core.document import from_python
from yars_format.core.errors import ParseError, RootTypeError
from yars_format.pipeline.runner import format_document, format_text

pytestmark: pytest.MarkDecorator = pytest.mark.pipeline


@parametrize("text", ["", "~", "null\n", "---\n", "--- ~\n", "# only a comment\n"])
def test_null_documents_are_returned_unchanged(text: str) -> None:
    assert format_text(text) == text


def test_keys_sorted_and_marker_dropped() -> None:
    assert format_text("---\nzebra: 1\napple:\n  zed: 2\n  beta: 1\nmiddle: 3\n") == (
        "apple:\n  beta: 1\n  zed: 2\nmiddle: 3\nzebra: 1\n"
    )


def test_original_quoting_is_not_preserved() -> None:
    assert format_text("a: 'plain'\nb: \"x y\"\nc: 'it''s'\n") == (
        'a: plain\nb: "x y"\nc: "it\'s"\n'
    )


def test_multiline_string_becomes_literal_block() -> None:
    text = 'description: "This is a long description\\nthat spans\\nmultiple lines"'
    assert format_text(text) == (
        "description: |-\n  This is a long description\n  that spans\n  multiple lines\n"
    )


def test_leading_whitespace_keeps_string_quoted() -> None:
    text = 'description: " leading space\\nvalue "'
    assert format_text(text) == 'description: " leading space\\nvalue "\n'


def test_flow_collections_become_block_layout() -> None:
    assert format_text("meta: {order: [z, a, m], n: {}}\n") == (
        "meta:\n  n: {}\n  order:\n    - z\n    - a\n    - m\n"
    )


def test_nested_list_permitted() -> None:
    assert format_text("a:\n  - 1\n  - 2\n") == "a:\n  - 1\n  - 2\n"


def test_root_list_rejected() -> None:
    with pytest.raises(RootTypeError):
        format_text("- a\n- b\n")


def test_parse_error_propagates() -> None:
    with pytest.raises(ParseError):
        format_text("foo: [bar")


def test_root_scalar_is_formatted() -> None:
    assert format_text("'hello'\n") == "hello\n"
    assert format_text("\"two\\nlines\"") == "|-\n  two\n  lines\n"


def test_format_document_normalizes() -> None:
    assert format_document(from_python({"b": 1, "a": 2})) == "a: 2\nb: 1\n"


def test_crlf_input_is_rewritten_with_lf() -> None:
    assert format_text("b: 1\r\na: 2\r\n") == "a: 2\nb: 1\n"


def test_keys_that_collide_as_python_values_are_all_kept() -> None:
    assert format_text("true: b\n1.0: c\n1: a\n") == "1: a\n1.0: c\ntrue: b\n"
    assert format_text("1: a\n1.0: c\n") == "1: a\n1.0: c\n"
