"""
Core entity resolution logic.

This module contains the dispatch logic for `_entities`,
independent of any transport or GraphQL framework.
"""

from .cache_control import CacheControl, CachePolicy
from .dispatcher import EntityDispatcher, ResolveInfo, default_resolve_reference
from .models import (
    CacheHint,
    CacheScope,
    EntityResult,
    ObjectType,
    ScalarType,
    UnionType,
)
from .registry import SchemaRegistry, TypeRegistry

__all__ = [
    "CacheControl",
    "CacheHint",
    "CachePolicy",
    "CacheScope",
    "EntityDispatcher",
    "EntityResult",
    "ObjectType",
    "ResolveInfo",
    "ScalarType",
    "SchemaRegistry",
    "TypeRegistry",
    "UnionType",
    "default_resolve_reference",
]
