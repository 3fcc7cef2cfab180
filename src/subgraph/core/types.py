"""
Federation Types

Names and helpers for the types a subgraph adds to its schema:
- _Entity: union of every entity type
- _Any: scalar carrying raw representations
- _Service: service metadata exposing the subgraph SDL
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .models import ScalarType, UnionType
from .registry import SchemaRegistry

ENTITY_TYPE_NAME = "_Entity"
SERVICE_TYPE_NAME = "_Service"
ANY_TYPE_NAME = "_Any"

FEDERATION_TYPE_NAMES: frozenset[str] = frozenset(
    {SERVICE_TYPE_NAME, ANY_TYPE_NAME, ENTITY_TYPE_NAME}
)

SDL_DESCRIPTION = (
    "The sdl representing the federated service capabilities. Includes federation "
    "directives, removes federation types, and includes rest of full schema after "
    "schema directives have been applied"
)


class ServiceDefinition(BaseModel):
    """Value of the `_service` field."""

    model_config = ConfigDict(frozen=True)

    sdl: str | None = Field(default=None, description=SDL_DESCRIPTION)


def service_field(sdl: str | None) -> ServiceDefinition:
    """Return the static service metadata for this subgraph."""
    return ServiceDefinition(sdl=sdl)


def serialize_any(value: Any) -> Any:
    """Serialize an _Any value; representations pass through untouched."""
    return value


def is_federation_type(type_or_name: Any) -> bool:
    """Check whether a type (or type name) is one of the federation types."""
    name = type_or_name if isinstance(type_or_name, str) else getattr(type_or_name, "name", None)
    return name in FEDERATION_TYPE_NAMES


def entity_type_members(registry: SchemaRegistry) -> list[str]:
    """Return the sorted names of object types that can appear in _Entity."""
    return sorted(
        type_.name for type_ in registry.object_types() if not is_federation_type(type_)
    )


def entity_union(registry: SchemaRegistry) -> UnionType:
    """Build the _Entity union over the registry's entity types."""
    return UnionType(name=ENTITY_TYPE_NAME, types=tuple(entity_type_members(registry)))


def any_scalar() -> ScalarType:
    """Build the _Any scalar."""
    return ScalarType(name=ANY_TYPE_NAME)
