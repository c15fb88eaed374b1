# topmark:header:start
#
#   project      : C4DSL
#   file         : test_io.py
#   file_relpath : tests/config/test_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML I/O helpers in c4dsl.config.io.

The getters never raise on wrong shapes: they coerce what they can and return
``None`` (or an empty container) otherwise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
import tomlkit
from tomlkit.exceptions import ParseError

from c4dsl.config.io import (
    get_bool_value_or_none,
    get_int_value_or_none,
    get_list_value,
    get_section,
    get_string_value_or_none,
    get_table_value,
    load_toml_dict,
    nest_under_section,
    parse_toml_text,
    to_toml,
)
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path


def test_parse_toml_text_unwraps_to_plain_dicts() -> None:
    data = parse_toml_text('[serializer]\nindent_width = 2\nidentifier_scope = "global"\n')
    assert data == {"serializer": {"indent_width": 2, "identifier_scope": "global"}}
    assert type(data["serializer"]) is dict


def test_parse_toml_text_raises_on_invalid_input() -> None:
    with pytest.raises(ParseError):
        parse_toml_text("[serializer\n")


def test_load_toml_dict_is_lenient(tmp_path: Path) -> None:
    broken = tmp_path / "c4dsl.toml"
    broken.write_text("indent_width = = 2\n", encoding="utf-8")
    assert load_toml_dict(broken) == {}
    assert load_toml_dict(tmp_path / "missing.toml") == {}


def test_nest_under_section_and_get_section_round_trip() -> None:
    nested = nest_under_section({"serializer": {"indent_width": 4}}, "tool.c4dsl")
    assert nested == {"tool": {"c4dsl": {"serializer": {"indent_width": 4}}}}
    assert get_section(nested, "tool.c4dsl") == {"serializer": {"indent_width": 4}}
    assert get_section(nested, "tool.other") is None
    assert get_section({"tool": 3}, "tool.c4dsl") is None


def test_to_toml_drops_none_values() -> None:
    text = to_toml({"list": [1, None], "serializer": {"indent_width": 2, "default_name": None}})
    parsed: Any = tomlkit.parse(text).unwrap()
    assert parsed == {"list": [1], "serializer": {"indent_width": 2}}


@parametrize(
    ("value", "expected"),
    [("abc", "abc"), (3, "3"), (True, "True"), (1.5, "1.5"), ([1], None), (None, None)],
)
def test_get_string_value_or_none(value: object, expected: str | None) -> None:
    assert get_string_value_or_none({"k": value}, "k") == expected


@parametrize(
    ("value", "expected"),
    [(4, 4), (" 8 ", 8), (True, None), ("four", None), (2.0, None)],
)
def test_get_int_value_or_none(value: object, expected: int | None) -> None:
    assert get_int_value_or_none({"k": value}, "k") == expected


def test_get_bool_value_or_none() -> None:
    assert get_bool_value_or_none({"k": False}, "k") is False
    assert get_bool_value_or_none({"k": 2}, "k") is True
    assert get_bool_value_or_none({"k": "yes"}, "k") is None
    assert get_bool_value_or_none({}, "k") is None


def test_list_and_table_getters_default_to_empty() -> None:
    table = {"l": [1, 2], "t": {"a": 1}, "bad": "x"}
    assert get_list_value(table, "l") == [1, 2]
    assert get_list_value(table, "bad") == []
    assert get_table_value(table, "t") == {"a": 1}
    assert get_table_value(table, "bad") == {}
    assert get_table_value(table, "missing") == {}
