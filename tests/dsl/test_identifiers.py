# topmark:header:start
#
#   project      : C4DSL
#   file         : test_identifiers.py
#   file_relpath : tests/dsl/test_identifiers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for short identifier generation and per-scope uniqueness."""

from __future__ import annotations

import re

from hypothesis import given
from hypothesis import strategies as st

from c4dsl.dsl.identifiers import IdentifierScope, generate, generate_unique
from tests.conftest import parametrize
from tests.strategies_c4dsl import element_names


@parametrize(
    ("name", "expected"),
    [
        ("User", "u"),
        ("Web App", "wa"),
        ("Internet Banking System", "ibs"),
        ("  spaced   out  ", "so"),
        ("API", "a"),
        ("", ""),
        ("   ", ""),
    ],
)
def test_generate_uses_lowercased_initials(name: str, expected: str) -> None:
    assert generate(name) == expected


def test_generate_unique_appends_suffixes_in_order() -> None:
    used: set[str] = set()
    assert [generate_unique("User", used) for _ in range(3)] == ["u", "u1", "u2"]
    assert used == {"u", "u1", "u2"}


def test_generate_unique_skips_taken_suffixes() -> None:
    used: set[str] = {"u", "u1"}
    assert generate_unique("Unit", used) == "u2"


def test_scopes_are_independent() -> None:
    """Each scope hands out its own sequence."""
    first = IdentifierScope("a")
    second = IdentifierScope("b")
    assert first.allocate("Web App") == "wa"
    assert second.allocate("Web App") == "wa"
    assert first.allocate("Worker Agent") == "wa1"
    assert "wa1" in first
    assert "wa1" not in second
    assert len(first) == 2


@given(st.lists(element_names, max_size=20))
def test_scope_never_repeats_an_identifier(names: list[str]) -> None:
    scope = IdentifierScope()
    allocated = [scope.allocate(name) for name in names]
    assert len(set(allocated)) == len(allocated)
    assert len(scope) == len(allocated)
    assert all(re.fullmatch(r"[A-Za-z_]\w*", identifier) for identifier in allocated)


def test_generate_unique_compares_formatted_identifiers() -> None:
    """Initials that differ only before formatting still get distinct identifiers."""
    used: set[str] = set()
    assert generate_unique("(Legacy) API", used) == "_a"
    assert generate_unique("_internal API", used) == "_a1"
    assert used == {"_a", "_a1"}


@parametrize(
    ("name", "expected"),
    [("1st Line", "_1l"), ("my-app", "m"), ("-x -y", "__"), ("", "element")],
)
def test_generate_unique_returns_valid_identifiers(name: str, expected: str) -> None:
    assert generate_unique(name, set()) == expected
