# topmark:header:start
#
#   project      : C4DSL
#   file         : test_escaping.py
#   file_relpath : tests/dsl/test_escaping.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for string-literal escaping and identifier formatting.

Property tests check the grammar guarantees for arbitrary input; the
parametrized cases pin down exact outputs.
"""

from __future__ import annotations

from hypothesis import given

from c4dsl.dsl.escaping import (
    escape_string_literal,
    format_identifier,
    format_reference,
    format_view_key,
)
from tests.conftest import parametrize
from tests.strategies_c4dsl import free_text, tricky_text


def _unescape(value: str) -> str:
    """Decode a DSL string literal body; asserts there is no dangling escape."""
    out: list[str] = []
    chars = iter(value)
    for ch in chars:
        if ch == "\\":
            nxt = next(chars, None)
            assert nxt in ('"', "\\"), f"invalid escape in {value!r}"
            out.append(nxt)
        else:
            assert ch != '"', f"unescaped quote in {value!r}"
            out.append(ch)
    return "".join(out)


@parametrize(
    ("raw", "expected"),
    [
        ("plain", "plain"),
        ('say "hi"', 'say \\"hi\\"'),
        ("C:\\path", "C:\\\\path"),
        ('\\"', '\\\\\\"'),
        ("", ""),
    ],
)
def test_escape_string_literal_examples(raw: str, expected: str) -> None:
    assert escape_string_literal(raw) == expected


@given(tricky_text)
def test_escape_string_literal_round_trips(raw: str) -> None:
    """No lone quote or backslash survives, and decoding gives the input back."""
    assert _unescape(escape_string_literal(raw)) == raw


@parametrize(
    ("raw", "expected"),
    [
        ("my-system", "my_system"),
        ("web app", "web_app"),
        ("1st", "_1st"),
        ("_private", "_private"),
        ("", "element"),
        ("ok", "ok"),
        ("é", "_é"),
    ],
)
def test_format_identifier_examples(raw: str, expected: str) -> None:
    assert format_identifier(raw) == expected


@given(free_text)
def test_format_identifier_is_always_valid(raw: str) -> None:
    ident = format_identifier(raw)
    assert ident
    first = ident[0]
    assert (first.isascii() and first.isalpha()) or first == "_"
    assert all(ch.isalnum() or ch == "_" for ch in ident)


def test_format_reference_formats_each_segment() -> None:
    assert format_reference("c.c1") == "c.c1"
    assert format_reference(" my system.web ") == "my_system.web"
    assert format_reference("1a.b-c") == "_1a.b_c"


def test_format_view_key_replaces_spaces_then_escapes() -> None:
    assert format_view_key("System Context") == "System_Context"
    assert format_view_key('A "b"') == 'A_\\"b\\"'
