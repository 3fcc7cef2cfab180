"""
Subgraph Models

Data classes for type descriptors, cache hints and resolved entities.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

TYPENAME_FIELD = "__typename"

# (reference, context, info) -> value | None | awaitable of either
ReferenceResolver = Callable[[Mapping[str, Any], Any, Any], Any]


class CacheScope(str, Enum):
    """Who may cache a response."""

    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"


@dataclass(frozen=True)
class CacheHint:
    """
    Cache directive attached to a type.

    max_age is in seconds; None leaves the accumulated policy untouched.
    """

    max_age: int | None = None
    scope: CacheScope | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "max_age": self.max_age,
            "scope": self.scope.value if self.scope else None,
        }


@dataclass(frozen=True)
class ObjectType:
    """
    An object-shaped type in the schema.

    Only object types can carry field resolvers, so only they are valid
    entity targets.
    """

    name: str
    fields: tuple[str, ...] = ()
    resolve_reference: ReferenceResolver | None = None
    cache_hint: CacheHint | None = None
    description: str | None = None

    def has_reference_resolver(self) -> bool:
        """Check whether this type declares its own reference resolver."""
        return self.resolve_reference is not None


@dataclass(frozen=True)
class ScalarType:
    """A leaf type such as String or _Any."""

    name: str
    description: str | None = None


@dataclass(frozen=True)
class UnionType:
    """A union of object types, such as _Entity."""

    name: str
    types: tuple[str, ...] = ()
    description: str | None = None


TypeDescriptor = Union[ObjectType, ScalarType, UnionType]


def is_object_type(type_: Any) -> bool:
    """Check whether a descriptor is object-shaped."""
    return isinstance(type_, ObjectType)


@dataclass(frozen=True)
class EntityResult:
    """
    A resolved entity tagged with the type name of its source reference.

    The payload is kept as returned by the resolver and the type name is
    applied to a copy when the value is read, so the resolver's object is
    never mutated and one object shared by several results keeps each tag.
    """

    type_name: str
    payload: Any

    @property
    def value(self) -> Any:
        """
        Return the payload stamped with type_name.

        Mappings get a copy with __typename overwritten. Other objects get a
        shallow copy with the attribute set when they allow it; anything that
        cannot be copied or take the attribute is returned as is.
        """
        if isinstance(self.payload, Mapping):
            return {**self.payload, TYPENAME_FIELD: self.type_name}
        try:
            stamped = copy.copy(self.payload)
            setattr(stamped, TYPENAME_FIELD, self.type_name)
        except (copy.Error, AttributeError, TypeError):
            return self.payload
        return stamped

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {"type_name": self.type_name, "payload": self.payload}
