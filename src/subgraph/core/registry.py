"""
Schema Registry

Immutable name -> type descriptor lookup used by the entity dispatcher.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from types import MappingProxyType
from typing import Protocol, runtime_checkable

from ..exceptions import DuplicateTypeError
from ..utils import MultiMap, require
from .models import ObjectType, TypeDescriptor, is_object_type

logger = logging.getLogger(__name__)


@runtime_checkable
class TypeRegistry(Protocol):
    """Anything the dispatcher can look entity types up in."""

    def lookup(self, type_name: str) -> ObjectType | None:
        """Return the object type named type_name, or None."""
        ...


class SchemaRegistry:
    """
    In-memory registry of the types that make up a subgraph schema.

    Built once at schema construction and read-only afterwards, so it can be
    shared across concurrent requests.
    """

    def __init__(self, types: Iterable[TypeDescriptor]):
        by_name: MultiMap[str, TypeDescriptor] = MultiMap()
        for type_ in types:
            require(type_.name, f"Type descriptor has no name: {type_!r}")
            by_name.add(type_.name, type_)

        for name, descriptors in by_name.items():
            if len(descriptors) > 1:
                raise DuplicateTypeError(name, len(descriptors))

        self._types = MappingProxyType(
            {name: descriptors[0] for name, descriptors in by_name.items()}
        )
        logger.debug(f"Schema registry built with {len(self._types)} types")

    def get_type(self, type_name: str) -> TypeDescriptor | None:
        """Return the descriptor registered under type_name, of any kind."""
        return self._types.get(type_name)

    def lookup(self, type_name: str) -> ObjectType | None:
        """
        Return the object type named type_name.

        Scalars and unions are reported as missing, the same as unknown names.
        """
        type_ = self._types.get(type_name)
        if type_ is None or not is_object_type(type_):
            return None
        return type_

    def object_types(self) -> list[ObjectType]:
        """Return all object types in registration order."""
        return [t for t in self._types.values() if is_object_type(t)]

    def type_names(self) -> list[str]:
        """Return all registered type names in registration order."""
        return list(self._types)

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._types

    def __iter__(self) -> Iterator[TypeDescriptor]:
        return iter(self._types.values())

    def __len__(self) -> int:
        return len(self._types)
