# topmark:header:start
#
#   project      : C4DSL
#   file         : paths.py
#   file_relpath : src/c4dsl/dsl/paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolution of element identities to hierarchical DSL paths.

The walker registers every element it emits (``a``, ``a.wa``, ``a.wa.a``).
Relationships and views are resolved afterwards. An endpoint that was never
registered is not an error: it falls back to a reference derived from the
endpoint itself, so elements declared outside the walked model can still be
referenced.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from c4dsl.config.logging import get_logger
from c4dsl.dsl.escaping import format_identifier, format_reference
from c4dsl.dsl.identifiers import generate
from c4dsl.model.identity import ElementIdentity
from c4dsl.model.relationship import to_endpoint

if TYPE_CHECKING:
    from c4dsl.config.logging import C4dslLogger
    from c4dsl.model.relationship import EndpointLike

logger: C4dslLogger = get_logger(__name__)

PATH_SEPARATOR: str = "."


def join_path(*segments: str) -> str:
    """Join identifier segments into a hierarchical path."""
    return PATH_SEPARATOR.join(segments)


class PathResolver:
    """Maps `ElementIdentity` to its hierarchical path.

    One resolver belongs to one serialization pass.
    """

    def __init__(self) -> None:
        self._paths: dict[ElementIdentity, str] = {}

    def register(self, identity: ElementIdentity, path: str) -> None:
        """Record the path of ``identity``.

        Raises:
            AssertionError: If ``identity`` was already registered, which means
                the same element value was reached twice during the walk.
        """
        if identity in self._paths:
            raise AssertionError(
                f"{identity} ({identity.name!r}) registered twice: "
                f"{self._paths[identity]!r} and {path!r}"
            )
        self._paths[identity] = path
        logger.trace("Registered %s -> %s", identity, path)

    def is_registered(self, identity: ElementIdentity) -> bool:
        """Return True if ``identity`` has a registered path."""
        return identity in self._paths

    def path_of(self, identity: ElementIdentity) -> str | None:
        """Return the registered path of ``identity``, or None."""
        return self._paths.get(identity)

    def resolve(self, ref: EndpointLike) -> str:
        """Return the DSL reference for an element, identity or raw string.

        Registered identities resolve to their path. Unregistered identities
        fall back to the initials of the element name; raw strings fall back
        to themselves, formatted segment by segment.
        """
        endpoint = to_endpoint(ref)
        if isinstance(endpoint, ElementIdentity):
            path = self._paths.get(endpoint)
            if path is not None:
                return path
            fallback = format_identifier(generate(endpoint.name))
            logger.debug("%s is not part of the model; using %r", endpoint, fallback)
            return fallback
        fallback = format_reference(endpoint)
        logger.debug("Raw reference %r resolved to %r", endpoint, fallback)
        return fallback

    def __len__(self) -> int:
        return len(self._paths)
