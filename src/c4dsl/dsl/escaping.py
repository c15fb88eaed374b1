# topmark:header:start
#
#   project      : C4DSL
#   file         : escaping.py
#   file_relpath : src/c4dsl/dsl/escaping.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sanitizers for the DSL's string-literal and identifier grammar.

All functions are total: every input maps to valid output.
"""

from __future__ import annotations

from c4dsl.constants import EMPTY_IDENTIFIER_PLACEHOLDER


def escape_string_literal(value: str) -> str:
    r"""Escape ``value`` for use between double quotes.

    Backslashes are doubled first, then quotes are escaped, so the ``\``
    inserted before a quote is never doubled again.
    """
    return value.replace("\\", "\\\\").replace('"', '\\"')


def format_identifier(value: str) -> str:
    """Turn arbitrary text into a bare DSL identifier.

    Every character that is not alphanumeric or ``_`` becomes ``_``. If the
    result does not start with an ASCII letter or ``_`` it is prefixed with
    ``_``. Empty input yields a fixed placeholder.

    Examples:
        >>> format_identifier("my-system")
        'my_system'
        >>> format_identifier("1st")
        '_1st'
    """
    if not value:
        return EMPTY_IDENTIFIER_PLACEHOLDER
    normalized = "".join(ch if ch.isalnum() or ch == "_" else "_" for ch in value)
    first = normalized[0]
    if (first.isascii() and first.isalpha()) or first == "_":
        return normalized
    return f"_{normalized}"


def format_reference(value: str) -> str:
    """Format a dotted hierarchical reference segment by segment.

    ``"c.c1"`` stays ``"c.c1"`` while ``"my system.web"`` becomes
    ``"my_system.web"``. Surrounding whitespace is ignored.
    """
    return ".".join(format_identifier(segment) for segment in value.strip().split("."))


def format_view_key(title: str) -> str:
    """Return a view title as used in a view declaration: spaces become ``_``, then escaped."""
    return escape_string_literal(title.replace(" ", "_"))
