"""
Subgraph Exception Hierarchy

Structured exception types for entity resolution.
All subgraph-specific exceptions inherit from SubgraphError.

Usage:
    from src.subgraph.exceptions import UnresolvableTypeError

    try:
        results = await dispatcher.resolve_all(representations, context, info)
    except UnresolvableTypeError as e:
        logger.error(f"Entity batch rejected: {e}")
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class SubgraphError(Exception):
    """
    Base exception for all subgraph errors.

    Attributes:
        message: Human-readable error description
        code: Optional machine-readable error code for programmatic handling
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code
        super().__init__(message)

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class PreconditionError(SubgraphError):
    """A required condition did not hold."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="PRECONDITION_FAILED")


# =============================================================================
# Schema Errors
# =============================================================================


class DuplicateTypeError(SubgraphError):
    """More than one type descriptor was registered under the same name."""

    def __init__(self, type_name: str, count: int) -> None:
        super().__init__(
            f'Type "{type_name}" is defined {count} times in the schema',
            code="DUPLICATE_TYPE",
        )
        self.type_name = type_name
        self.count = count


# =============================================================================
# Entity Resolution Errors
# =============================================================================


class UnresolvableTypeError(SubgraphError):
    """A reference names a type that is absent or not an object type."""

    def __init__(
        self,
        type_name: Any,
        message: str | None = None,
        code: str = "UNRESOLVABLE_TYPE",
    ) -> None:
        if message is None:
            message = (
                f'The _entities resolver tried to load an entity for type "{type_name}", '
                "but no object type of that name was found in the schema"
            )
        super().__init__(message, code=code)
        self.type_name = type_name


class MalformedReferenceError(UnresolvableTypeError):
    """A reference is not a mapping or carries no usable __typename."""

    def __init__(self, reference: Any) -> None:
        type_name = reference.get("__typename") if isinstance(reference, Mapping) else None
        super().__init__(
            type_name,
            message=f"Entity reference is missing a non-empty __typename: {reference!r}",
            code="MALFORMED_REFERENCE",
        )
        self.reference = reference
