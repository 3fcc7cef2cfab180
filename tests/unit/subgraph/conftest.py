"""Shared fixtures for subgraph tests."""

from __future__ import annotations

import asyncio

import pytest

from src.subgraph.core.models import (
    CacheHint,
    CacheScope,
    ObjectType,
    ScalarType,
    UnionType,
)
from src.subgraph.core.registry import SchemaRegistry


def resolve_product(reference, context, info):
    """Synchronous resolver that ignores the reference's own fields."""
    return {"name": "Widget"}


async def resolve_review(reference, context, info):
    """Asynchronous resolver that tries to claim a different type name."""
    await asyncio.sleep(0)
    return {"id": reference["id"], "body": "Great", "__typename": "Comment"}


@pytest.fixture
def registry() -> SchemaRegistry:
    """Registry with a mix of entity, plain and non-object types."""
    return SchemaRegistry(
        [
            ObjectType(
                "Product",
                fields=("id", "name"),
                resolve_reference=resolve_product,
                cache_hint=CacheHint(max_age=60),
            ),
            ObjectType("User", fields=("id",)),
            ObjectType(
                "Review",
                fields=("id", "body"),
                resolve_reference=resolve_review,
                cache_hint=CacheHint(max_age=30, scope=CacheScope.PRIVATE),
            ),
            ScalarType("_Any"),
            UnionType("SearchResult", types=("Product", "User")),
        ]
    )
