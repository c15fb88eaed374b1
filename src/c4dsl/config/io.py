# topmark:header:start
#
#   project      : C4DSL
#   file         : io.py
#   file_relpath : src/c4dsl/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O and value getters for configuration tables.

Parsing and rendering are done with `tomlkit`; parsed documents are unwrapped
into plain `dict` structures. The getters extract typed values from those
tables and only log at DEBUG level when a value has the wrong shape, leaving
user-facing warnings to the callers.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from c4dsl.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from c4dsl.config.logging import C4dslLogger

logger: C4dslLogger = get_logger(__name__)

TomlTable = dict[str, Any]


# --- TOML file I/O ---


def parse_toml_text(text: str) -> TomlTable:
    """Parse TOML text into a plain dict.

    Args:
        text (str): The TOML document.

    Returns:
        TomlTable: The unwrapped document.

    Raises:
        TomlkitParseError: If the text is not valid TOML.
    """
    doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Errors are logged and an empty dict is returned on failure. Encoding is
    assumed to be UTF-8.

    Args:
        path (Path): Path to a TOML document (``c4dsl.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.
    """
    try:
        return parse_toml_text(path.read_text(encoding="utf-8"))
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def _strip_none_for_toml(value: object) -> object:
    """Remove `None` entries from mappings and lists (TOML has no null)."""
    if isinstance(value, Mapping):
        out: dict[str, object] = {}
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        for k_any, v_any in m.items():
            if v_any is None:
                logger.debug("Ignoring `None` entry in Mapping for key %s", k_any)
                continue
            out[str(k_any)] = _strip_none_for_toml(v_any)
        return out

    if isinstance(value, list):
        seq: list[object] = cast("list[object]", value)
        return [_strip_none_for_toml(v) for v in seq if v is not None]

    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string, dropping `None` values."""
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))


def nest_under_section(toml_dict: TomlTable, section: str) -> TomlTable:
    """Return ``toml_dict`` nested under a dotted section path.

    Args:
        toml_dict (TomlTable): The table to nest.
        section (str): Dotted section, e.g. ``"tool.c4dsl"``.

    Returns:
        TomlTable: A new table where ``toml_dict`` sits under ``section``.
    """
    nested: TomlTable = toml_dict
    for part in reversed(section.split(".")):
        nested = {part: nested}
    return nested


def get_section(toml_dict: TomlTable, section: str) -> TomlTable | None:
    """Return the table found under a dotted section path, or None."""
    current: Any = toml_dict
    for part in section.split("."):
        if not isinstance(current, dict):
            return None
        current = cast("TomlTable", current).get(part)
    return cast("TomlTable", current) if isinstance(current, dict) else None


# --- Value getters ---


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Strings are returned as is; ``int``, ``float`` and ``bool`` values are
    coerced with ``str(...)``. Missing or non-coercible values yield ``None``.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The extracted or coerced string value.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    logger.debug("Cannot coerce %r to string, returning None", value)
    return None


def get_int_value_or_none(table: TomlTable, key: str) -> int | None:
    """Extract an optional integer value (bools are rejected)."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    logger.debug("Cannot coerce %r to int, returning None", value)
    return None


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value; integers are coerced via ``bool()``."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    logger.debug("Cannot coerce %r to bool, returning None", value)
    return None


def get_list_value(table: TomlTable, key: str) -> list[Any]:
    """Extract a list value, or an empty list when missing or not a list."""
    value: Any | None = table.get(key)
    if isinstance(value, list):
        return list(cast("list[Any]", value))
    if value is not None:
        logger.debug("Expected list for key %s, got %r; using []", key, value)
    return []


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table, or an empty dict when missing or not a table."""
    value: Any | None = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.debug("Expected table for key %s, got %r; using {}", key, value)
    return {}
