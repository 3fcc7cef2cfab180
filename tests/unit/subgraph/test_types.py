"""Tests for federation types and service metadata."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.subgraph.core.models import ObjectType, ScalarType
from src.subgraph.core.registry import SchemaRegistry
from src.subgraph.core.types import (
    ANY_TYPE_NAME,
    ENTITY_TYPE_NAME,
    SERVICE_TYPE_NAME,
    ServiceDefinition,
    any_scalar,
    entity_type_members,
    entity_union,
    is_federation_type,
    serialize_any,
    service_field,
)


class TestServiceField:
    """Test suite for the _service metadata."""

    def test_returns_sdl(self) -> None:
        """The SDL is exposed as given."""
        sdl = "type Product @key(fields: \"id\") { id: ID! }"
        assert service_field(sdl).sdl == sdl

    def test_sdl_may_be_absent(self) -> None:
        """A missing SDL serializes as null."""
        assert service_field(None).model_dump() == {"sdl": None}

    def test_is_frozen(self) -> None:
        """Service metadata is immutable."""
        definition = ServiceDefinition(sdl="type Query")
        with pytest.raises(ValidationError):
            definition.sdl = "changed"


class TestFederationTypes:
    """Test suite for federation type helpers."""

    @pytest.mark.parametrize("name", [ENTITY_TYPE_NAME, SERVICE_TYPE_NAME, ANY_TYPE_NAME])
    def test_federation_names(self, name) -> None:
        """Federation type names are recognized."""
        assert is_federation_type(name)

    def test_descriptors_are_recognized(self) -> None:
        """Descriptors are matched by name."""
        assert is_federation_type(any_scalar())
        assert not is_federation_type(ObjectType("Product"))
        assert not is_federation_type(None)

    def test_serialize_any_is_identity(self) -> None:
        """_Any passes representations through untouched."""
        representation = {"__typename": "Product", "id": "1"}
        assert serialize_any(representation) is representation

    def test_entity_union_members(self) -> None:
        """_Entity contains the sorted non-federation object types."""
        registry = SchemaRegistry(
            [
                ObjectType("User"),
                ObjectType("Product"),
                ObjectType(SERVICE_TYPE_NAME, fields=("sdl",)),
                ScalarType("Date"),
            ]
        )

        assert entity_type_members(registry) == ["Product", "User"]
        union = entity_union(registry)
        assert union.name == ENTITY_TYPE_NAME
        assert union.types == ("Product", "User")
