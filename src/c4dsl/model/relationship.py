# topmark:header:start
#
#   project      : C4DSL
#   file         : relationship.py
#   file_relpath : src/c4dsl/model/relationship.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Relationships between elements.

A relationship stores its endpoints, never the element values themselves.
An endpoint is either the `ElementIdentity` of a modelled element (which
carries the element kind) or a raw DSL reference string for something declared
elsewhere. Relationships may cross containment levels.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from c4dsl.model.identity import ElementIdentity
from c4dsl.model.types import InteractionStyle

if TYPE_CHECKING:
    from c4dsl.model.elements import Identifiable
    from c4dsl.model.types import ElementKind

Endpoint = Union[ElementIdentity, str]
EndpointLike = Union["Identifiable", ElementIdentity, str]


def to_endpoint(ref: EndpointLike) -> Endpoint:
    """Normalize an element, identity or raw string to an `Endpoint`."""
    if isinstance(ref, (ElementIdentity, str)):
        return ref
    return ref.identity


@dataclass(frozen=True, slots=True)
class Relationship:
    """A directed, described dependency from ``source`` to ``target``."""

    source: Endpoint
    target: Endpoint
    description: str
    technology: str | None = None
    interaction_style: InteractionStyle = InteractionStyle.SYNCHRONOUS

    @property
    def source_kind(self) -> ElementKind | None:
        """Kind of the source element, or None for a raw reference."""
        return self.source.kind if isinstance(self.source, ElementIdentity) else None

    @property
    def target_kind(self) -> ElementKind | None:
        """Kind of the target element, or None for a raw reference."""
        return self.target.kind if isinstance(self.target, ElementIdentity) else None
