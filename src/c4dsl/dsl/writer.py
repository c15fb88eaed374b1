# topmark:header:start
#
#   project      : C4DSL
#   file         : writer.py
#   file_relpath : src/c4dsl/dsl/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Indentation-aware line buffer for DSL output.

`BlockWriter` is the only place that knows how lines nest: callers append
unindented text and move the depth with `indent` / `unindent` (or the
`block` context manager). `reindent_by_brace_depth` re-derives indentation
for fragments rendered elsewhere before they are spliced in.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

from c4dsl.constants import DEFAULT_INDENT_WIDTH
from c4dsl.dsl.templates import BLOCK_CLOSE

if TYPE_CHECKING:
    from collections.abc import Iterator


class BlockWriter:
    """Append-only line buffer with a current indentation depth.

    Args:
        indent_width (int): Spaces per indentation level.
    """

    def __init__(self, indent_width: int = DEFAULT_INDENT_WIDTH) -> None:
        self.indent_unit: str = " " * indent_width
        self._lines: list[str] = []
        self._depth: int = 0

    @property
    def depth(self) -> int:
        """Current indentation depth."""
        return self._depth

    def add_line(self, text: str) -> None:
        """Append ``text`` prefixed with the current indentation."""
        self._lines.append(f"{self.indent_unit * self._depth}{text}")

    def add_lines(self, fragment: str) -> None:
        """Append every line of an already indented ``fragment`` at the current depth.

        Blank lines stay blank.
        """
        for line in fragment.split("\n"):
            if line.strip():
                self.add_line(line)
            else:
                self.add_empty_line()

    def add_empty_line(self) -> None:
        """Append a blank line, unaffected by indentation."""
        self._lines.append("")

    def indent(self) -> None:
        """Increase the depth by one level."""
        self._depth += 1

    def unindent(self) -> None:
        """Decrease the depth by one level; a no-op at depth zero."""
        if self._depth > 0:
            self._depth -= 1

    @contextmanager
    def block(self, header: str) -> Iterator[BlockWriter]:
        """Write ``header``, indent for the body, then close with ``}``.

        ``header`` must already end with its opening brace.
        """
        self.add_line(header)
        self.indent()
        try:
            yield self
        finally:
            self.unindent()
        self.add_line(BLOCK_CLOSE)

    def clear(self) -> None:
        """Drop all lines and reset the depth."""
        self._lines.clear()
        self._depth = 0

    def is_empty(self) -> bool:
        """Return True if no line was written."""
        return not self._lines

    def to_string(self) -> str:
        """Join all lines with ``\\n`` (no trailing newline)."""
        return "\n".join(self._lines)

    def __str__(self) -> str:
        return self.to_string()


def reindent_by_brace_depth(block: str, indent_width: int = DEFAULT_INDENT_WIDTH) -> str:
    """Re-indent a rendered fragment using only its ``{`` / ``}`` counts.

    Each non-blank line is stripped and re-indented at the current brace
    depth. A line starting with ``}`` is dedented before it is written; all
    other braces on a line take effect after it, so ``x = a "b" "c" {}``
    keeps the depth of its siblings. Blank lines are kept as they are and the
    depth never drops below zero.

    Args:
        block (str): The fragment to re-indent.
        indent_width (int): Spaces per indentation level.

    Returns:
        str: The re-indented fragment.
    """
    unit = " " * indent_width
    depth = 0
    out: list[str] = []
    for line in block.splitlines():
        trimmed = line.strip()
        if not trimmed:
            out.append(line)
            continue
        opening = trimmed.count("{")
        closing = trimmed.count("}")
        if trimmed.startswith("}"):
            depth = max(0, depth - closing)
            out.append(f"{unit * depth}{trimmed}")
            depth += opening
        else:
            out.append(f"{unit * depth}{trimmed}")
            depth = max(0, depth + opening - closing)
    return "\n".join(out)
