# topmark:header:start
#
#   project      : C4DSL
#   file         : model.py
#   file_relpath : src/c4dsl/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serializer configuration model and merge policy.

This module defines:
    - `Config`: an immutable snapshot handed to the serializer.
    - `MutableConfig`: a mutable builder used during discovery and merging; it
      can be frozen into `Config` and thawed back for edits.

Merge order (lowest to highest precedence):
    1) Built-in defaults
    2) ``pyproject.toml`` (``[tool.c4dsl]``) then ``c4dsl.toml`` in the anchor directory
    3) Extra config files passed explicitly via ``--config`` (in the order provided)
    4) Overrides (CLI options or API dicts)

Invalid values never abort loading: they are recorded as warnings in the
config's diagnostics and the previous layer's value is kept.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from c4dsl.config.diagnostics import Diagnostic, DiagnosticLog
from c4dsl.config.io import (
    get_int_value_or_none,
    get_section,
    get_string_value_or_none,
    get_table_value,
    load_toml_dict,
    nest_under_section,
    to_toml,
)
from c4dsl.config.keys import Toml
from c4dsl.config.logging import get_logger
from c4dsl.config.types import IdentifierScopeMode
from c4dsl.constants import (
    C4DSL_TOML_NAME,
    DEFAULT_INDENT_WIDTH,
    DEFAULT_WORKSPACE_DESCRIPTION,
    DEFAULT_WORKSPACE_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from c4dsl.config.io import TomlTable
    from c4dsl.config.logging import C4dslLogger
    from c4dsl.config.types import ArgsLike

logger: C4dslLogger = get_logger(__name__)

MAX_INDENT_WIDTH: int = 16


def load_defaults_dict() -> TomlTable:
    """Return the runtime defaults as a TOML-compatible dict (no I/O)."""
    return {
        Toml.SECTION_SERIALIZER: {
            Toml.KEY_INDENT_WIDTH: DEFAULT_INDENT_WIDTH,
            Toml.KEY_IDENTIFIER_SCOPE: IdentifierScopeMode.HIERARCHICAL.value,
            Toml.KEY_DEFAULT_NAME: DEFAULT_WORKSPACE_NAME,
            Toml.KEY_DEFAULT_DESCRIPTION: DEFAULT_WORKSPACE_DESCRIPTION,
        },
    }


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable serializer configuration.

    Attributes:
        indent_width (int): Number of spaces per indentation level.
        identifier_scope (IdentifierScopeMode): Uniqueness scope for short identifiers.
        default_name (str): Workspace name used when none is set on the builder.
        default_description (str): Workspace description used when none is set.
        config_files (tuple[Path | str, ...]): Config sources merged into this snapshot.
        diagnostics (tuple[Diagnostic, ...]): Warnings collected while loading and merging.
    """

    indent_width: int = DEFAULT_INDENT_WIDTH
    identifier_scope: IdentifierScopeMode = IdentifierScopeMode.HIERARCHICAL
    default_name: str = DEFAULT_WORKSPACE_NAME
    default_description: str = DEFAULT_WORKSPACE_DESCRIPTION
    config_files: tuple[Path | str, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def to_toml_dict(self) -> TomlTable:
        """Convert this config into a TOML-serializable dict."""
        return {
            Toml.SECTION_SERIALIZER: {
                Toml.KEY_INDENT_WIDTH: self.indent_width,
                Toml.KEY_IDENTIFIER_SCOPE: self.identifier_scope.value,
                Toml.KEY_DEFAULT_NAME: self.default_name,
                Toml.KEY_DEFAULT_DESCRIPTION: self.default_description,
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            indent_width=self.indent_width,
            identifier_scope=self.identifier_scope,
            default_name=self.default_name,
            default_description=self.default_description,
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog.from_iterable(self.diagnostics),
        )


@functools.cache
def default_config() -> Config:
    """Return the built-in default configuration (no discovery)."""
    return MutableConfig.from_defaults().freeze()


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Fields left as ``None`` inherit from the layer below when merged and fall
    back to the built-in defaults when frozen.
    """

    indent_width: int | None = None
    identifier_scope: IdentifierScopeMode | None = None
    default_name: str | None = None
    default_description: str | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`."""
        return Config(
            indent_width=(
                self.indent_width if self.indent_width is not None else DEFAULT_INDENT_WIDTH
            ),
            identifier_scope=self.identifier_scope or IdentifierScopeMode.HIERARCHICAL,
            default_name=(
                self.default_name if self.default_name is not None else DEFAULT_WORKSPACE_NAME
            ),
            default_description=(
                self.default_description
                if self.default_description is not None
                else DEFAULT_WORKSPACE_DESCRIPTION
            ),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def get_default_config_toml(cls, *, for_pyproject: bool = False) -> str:
        """Render the default configuration as TOML text.

        Args:
            for_pyproject (bool): If True, nest the output under ``[tool.c4dsl]``.

        Returns:
            str: The TOML document.
        """
        data: TomlTable = load_defaults_dict()
        if for_pyproject:
            data = nest_under_section(data, PYPROJECT_TOOL_SECTION)
        return to_toml(data)

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the built-in defaults."""
        draft = cls.from_toml_dict(load_defaults_dict())
        draft.config_files = ["<defaults>"]
        return draft

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a draft config from a parsed TOML dict.

        Args:
            data (TomlTable): The parsed TOML data (the ``[tool.c4dsl]`` table for pyproject).
            config_file (Path | None): Source file, recorded for provenance and messages.

        Returns:
            MutableConfig: The resulting draft.
        """
        draft = cls()
        source: str = str(config_file) if config_file else "<dict>"
        if config_file is not None:
            draft.config_files = [config_file]

        serializer_tbl: TomlTable = get_table_value(data, Toml.SECTION_SERIALIZER)
        logger.trace("TOML [serializer] from %s: %s", source, serializer_tbl)

        if Toml.KEY_INDENT_WIDTH in serializer_tbl:
            width = get_int_value_or_none(serializer_tbl, Toml.KEY_INDENT_WIDTH)
            if width is None or not 0 < width <= MAX_INDENT_WIDTH:
                draft.diagnostics.add_warning(
                    f"{source}: ignoring invalid {Toml.KEY_INDENT_WIDTH} "
                    f"{serializer_tbl[Toml.KEY_INDENT_WIDTH]!r} "
                    f"(expected an integer between 1 and {MAX_INDENT_WIDTH})"
                )
            else:
                draft.indent_width = width

        if Toml.KEY_IDENTIFIER_SCOPE in serializer_tbl:
            raw_scope = get_string_value_or_none(serializer_tbl, Toml.KEY_IDENTIFIER_SCOPE)
            scope = IdentifierScopeMode.parse(raw_scope)
            if scope is None:
                choices = ", ".join(m.value for m in IdentifierScopeMode)
                draft.diagnostics.add_warning(
                    f"{source}: ignoring unknown {Toml.KEY_IDENTIFIER_SCOPE} "
                    f"{raw_scope!r} (expected one of: {choices})"
                )
            else:
                draft.identifier_scope = scope

        draft.default_name = get_string_value_or_none(serializer_tbl, Toml.KEY_DEFAULT_NAME)
        draft.default_description = get_string_value_or_none(
            serializer_tbl, Toml.KEY_DEFAULT_DESCRIPTION
        )
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``c4dsl.toml`` and ``pyproject.toml``; for the latter the
        ``[tool.c4dsl]`` table is used.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft, or None if a pyproject has no
                ``[tool.c4dsl]`` table.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_section: TomlTable | None = get_section(toml_data, PYPROJECT_TOOL_SECTION)
            if not tool_section:
                logger.debug("[%s] section missing in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            toml_data = tool_section

        return cls.from_toml_dict(toml_data, config_file=path)

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files found in the ``start`` directory.

        Within the directory ``pyproject.toml`` comes first and ``c4dsl.toml``
        second, so a later merge gives ``c4dsl.toml`` precedence.

        Args:
            start (Path): Anchor file or directory.

        Returns:
            list[Path]: Existing config files in merge order.
        """
        anchor: Path = start.resolve()
        if anchor.is_file():
            anchor = anchor.parent
        found: list[Path] = []
        for name in (PYPROJECT_TOML_NAME, C4DSL_TOML_NAME):
            candidate = anchor / name
            if candidate.is_file():
                logger.debug("Discovered config file: %s", candidate)
                found.append(candidate)
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft.

        Args:
            anchor (Path | None): Directory (or file) where discovery starts; CWD if None.
            extra_config_files (Iterable[Path] | None): Explicit files merged last, in order.
            no_config (bool): If True, skip discovery of local config files.

        Returns:
            MutableConfig: A draft ready to be frozen or further edited.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            for cfg_path in cls.discover_local_config_files(anchor or Path.cwd()):
                mc = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra))
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        merged = MutableConfig(
            indent_width=(
                other.indent_width if other.indent_width is not None else self.indent_width
            ),
            identifier_scope=other.identifier_scope or self.identifier_scope,
            default_name=(
                other.default_name if other.default_name is not None else self.default_name
            ),
            default_description=(
                other.default_description
                if other.default_description is not None
                else self.default_description
            ),
            config_files=self.config_files + other.config_files,
        )
        merged.diagnostics.extend(self.diagnostics)
        merged.diagnostics.extend(other.diagnostics)
        return merged

    def apply_overrides(self, args: ArgsLike) -> MutableConfig:
        """Apply explicit overrides (CLI options or API dicts) in place.

        Recognized keys mirror the ``[serializer]`` table; ``None`` values are
        ignored so unset CLI options never clobber file values.

        Args:
            args (ArgsLike): Mapping of override values.

        Returns:
            MutableConfig: This draft, for chaining.
        """
        overlay = MutableConfig.from_toml_dict(
            {Toml.SECTION_SERIALIZER: {k: v for k, v in args.items() if v is not None}}
        )
        # Overrides carry no file provenance.
        overlay.config_files = []
        merged = self.merge_with(overlay)
        self.indent_width = merged.indent_width
        self.identifier_scope = merged.identifier_scope
        self.default_name = merged.default_name
        self.default_description = merged.default_description
        self.diagnostics = merged.diagnostics
        return self
