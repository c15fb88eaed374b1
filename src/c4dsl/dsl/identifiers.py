# topmark:header:start
#
#   project      : C4DSL
#   file         : identifiers.py
#   file_relpath : src/c4dsl/dsl/identifiers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Short DSL identifiers derived from element names.

An identifier is the lower-cased first letter of every whitespace-separated
word of a name: ``"Web App"`` becomes ``wa``. Collisions inside one scope are
resolved with numeric suffixes in allocation order, so three people named
``"User"`` become ``u``, ``u1`` and ``u2``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from c4dsl.config.logging import get_logger
from c4dsl.dsl.escaping import format_identifier

if TYPE_CHECKING:
    from collections.abc import MutableSet

    from c4dsl.config.logging import C4dslLogger

logger: C4dslLogger = get_logger(__name__)


def generate(name: str) -> str:
    """Return the initials of ``name``, lower-cased.

    An empty or whitespace-only name yields an empty identifier.
    """
    return "".join(token[0] for token in name.split()).lower()


def generate_unique(name: str, used: MutableSet[str]) -> str:
    """Return an identifier for ``name`` that is not in ``used`` and record it.

    The initials are formatted as a DSL identifier first, so ``used`` only
    ever holds formatted identifiers and two names whose initials format alike
    still get distinct identifiers. The formatted base wins when free;
    otherwise suffixes 1, 2, 3, ... are tried in order. The winner is added to
    ``used``.

    Args:
        name (str): Element display name.
        used (MutableSet[str]): Identifiers already taken in the current scope.

    Returns:
        str: The allocated identifier.
    """
    base = format_identifier(generate(name))
    identifier = base
    counter = 1
    while identifier in used:
        identifier = f"{base}{counter}"
        counter += 1
    used.add(identifier)
    logger.trace("Allocated identifier %r for %r", identifier, name)
    return identifier


class IdentifierScope:
    """One naming scope: the set of identifiers already handed out.

    The walker opens a scope per parent in hierarchical mode, or shares a
    single scope across the workspace in global mode.
    """

    def __init__(self, label: str = "workspace") -> None:
        self.label = label
        self._used: set[str] = set()

    def allocate(self, name: str) -> str:
        """Allocate a unique identifier for ``name`` within this scope."""
        return generate_unique(name, self._used)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._used

    def __len__(self) -> int:
        return len(self._used)

    def __repr__(self) -> str:
        return f"IdentifierScope({self.label!r}, used={sorted(self._used)!r})"
