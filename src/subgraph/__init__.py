"""
Subgraph Entity Resolution

Resolves `_entities` representations for a federated GraphQL subgraph.

Usage:
    from src.subgraph import EntityDispatcher, ObjectType, SchemaRegistry

    registry = SchemaRegistry([ObjectType("Product", resolve_reference=load_product)])
    dispatcher = EntityDispatcher(registry)
    results = await dispatcher.resolve_representations(representations, context, info)
"""

__version__ = "0.1.0"

from .config import SubgraphConfig, configure_logging, load_config
from .core.cache_control import CacheControl, CachePolicy
from .core.dispatcher import EntityDispatcher, ResolveInfo
from .core.models import CacheHint, CacheScope, EntityResult, ObjectType, ScalarType, UnionType
from .core.registry import SchemaRegistry
from .core.types import service_field
from .exceptions import (
    MalformedReferenceError,
    SubgraphError,
    UnresolvableTypeError,
)

__all__ = [
    "CacheControl",
    "CacheHint",
    "CachePolicy",
    "CacheScope",
    "EntityDispatcher",
    "EntityResult",
    "MalformedReferenceError",
    "ObjectType",
    "ResolveInfo",
    "ScalarType",
    "SchemaRegistry",
    "SubgraphConfig",
    "SubgraphError",
    "UnionType",
    "UnresolvableTypeError",
    "configure_logging",
    "load_config",
    "service_field",
]
