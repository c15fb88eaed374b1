# topmark:header:start
#
#   project      : C4DSL
#   file         : identity.py
#   file_relpath : src/c4dsl/model/identity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Element identities and the allocator that mints them.

An `ElementIdentity` is created exactly once per element, when the element
value is built. Identities compare by object identity: two elements that share
a display name still have distinct identities, and a copy of an element keeps
the identity of its original.

Identities are minted by an explicit `IdentityAllocator` rather than a module
level counter, so tests can create a fresh allocator and get deterministic
serial numbers.
"""

from __future__ import annotations

from dataclasses import dataclass

from c4dsl.config.logging import get_logger
from c4dsl.model.types import ElementKind

logger = get_logger(__name__)


@dataclass(frozen=True, eq=False, slots=True)
class ElementIdentity:
    """Opaque token naming one element.

    Attributes:
        kind (ElementKind): Kind of the element this identity was minted for.
        serial (int): Allocation number, unique per allocator.
        name (str): Display name of the element at allocation time. Only used
            to derive a fallback reference for elements that were never walked.
    """

    kind: ElementKind
    serial: int
    name: str

    def __str__(self) -> str:
        return f"{self.kind.value}#{self.serial}"


class IdentityAllocator:
    """Mints `ElementIdentity` tokens with increasing serial numbers."""

    def __init__(self, start: int = 1) -> None:
        self._start = start
        self._next = start

    @property
    def issued(self) -> int:
        """Number of identities minted since creation or the last reset."""
        return self._next - self._start

    def mint(self, kind: ElementKind, name: str) -> ElementIdentity:
        """Return a new identity for an element of ``kind`` called ``name``."""
        identity = ElementIdentity(kind=kind, serial=self._next, name=name)
        self._next += 1
        logger.trace("Minted identity %s for %r", identity, name)
        return identity

    def reset(self, start: int | None = None) -> None:
        """Restart numbering at ``start`` (or the original start value)."""
        if start is not None:
            self._start = start
        self._next = self._start
