"""
Entity Dispatcher

Resolves `_entities` representations into typed objects:
- Looks up each reference's __typename in the schema registry
- Selects the type's reference resolver, or echoes the reference back
- Narrows the request cache policy by the entity type
- Tags every non-null result with the reference's type name

A single unresolvable type or resolver failure fails the whole batch.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from ..config import SubgraphConfig
from ..exceptions import MalformedReferenceError, UnresolvableTypeError
from .cache_control import CacheControl
from .models import TYPENAME_FIELD, CacheHint, EntityResult, ObjectType, ReferenceResolver
from .registry import TypeRegistry

logger = logging.getLogger(__name__)


@dataclass
class ResolveInfo:
    """
    Execution info handed to reference resolvers.

    cache_control is None when the caller does not track cache policy.
    """

    field_name: str = "_entities"
    cache_control: CacheControl | None = None


def default_resolve_reference(reference: Mapping[str, Any], context: Any, info: Any) -> Any:
    """Treat the reference's own fields as the resolved object."""
    return reference


def _stamp(value: Any, type_name: str) -> EntityResult | None:
    if value is None:
        return None
    return EntityResult(type_name=type_name, payload=value)


async def _stamp_when_ready(pending: Awaitable[Any], type_name: str) -> EntityResult | None:
    return _stamp(await pending, type_name)


def _discard(pending: Awaitable[Any]) -> None:
    # Only never-started coroutines; running tasks belong to the caller
    if inspect.iscoroutine(pending):
        pending.close()


class EntityDispatcher:
    """
    Dispatcher for entity references.

    Each reference goes through lookup -> select -> cache restrict -> invoke
    -> stamp independently. Synchronous resolvers finish inside dispatch();
    asynchronous ones are left pending and joined in input order.
    """

    def __init__(
        self,
        registry: TypeRegistry,
        config: SubgraphConfig | None = None,
    ):
        self._registry = registry
        self._config = config or SubgraphConfig()

    @property
    def registry(self) -> TypeRegistry:
        return self._registry

    def dispatch(
        self,
        references: Sequence[Mapping[str, Any]],
        context: Any = None,
        info: Any = None,
    ) -> list[EntityResult | None | Awaitable[EntityResult | None]]:
        """
        Start resolution of every reference without awaiting any of them.

        Args:
            references: Entity representations, each with a __typename
            context: Request context passed through to resolvers
            info: Execution info passed through to resolvers

        Returns:
            One entry per reference, in input order. Entries are EntityResult,
            None, or an awaitable of either.

        Raises:
            MalformedReferenceError: If a reference has no usable __typename
            UnresolvableTypeError: If a __typename is not an object type
        """
        logger.debug(
            f"{self._config.service_name}: dispatching {len(references)} entity references"
        )

        lookups: dict[str, ObjectType] = {}
        invoked: list[tuple[str, Any]] = []
        try:
            for reference in references:
                invoked.append(self._invoke(reference, context, info, lookups))
        except BaseException:
            for _, value in invoked:
                if inspect.isawaitable(value):
                    _discard(value)
            raise

        return [
            _stamp_when_ready(value, type_name)
            if inspect.isawaitable(value)
            else _stamp(value, type_name)
            for type_name, value in invoked
        ]

    async def resolve_all(
        self,
        references: Sequence[Mapping[str, Any]],
        context: Any = None,
        info: Any = None,
    ) -> list[EntityResult | None]:
        """
        Resolve every reference and wait for all of them.

        Results are positionally aligned with references regardless of the
        order in which asynchronous resolvers complete.
        """
        entries = self.dispatch(references, context, info)

        pending = [(i, entry) for i, entry in enumerate(entries) if inspect.isawaitable(entry)]
        if not pending:
            return entries

        completed = await asyncio.gather(*(entry for _, entry in pending))
        results = list(entries)
        for (i, _), result in zip(pending, completed):
            results[i] = result
        return results

    async def resolve_representations(
        self,
        references: Sequence[Mapping[str, Any]],
        context: Any = None,
        info: Any = None,
    ) -> list[Any]:
        """Resolve references and return plain stamped values for `_entities`."""
        results = await self.resolve_all(references, context, info)
        return [result.value if result is not None else None for result in results]

    def _invoke(
        self,
        reference: Mapping[str, Any],
        context: Any,
        info: Any,
        lookups: dict[str, ObjectType],
    ) -> tuple[str, Any]:
        type_name = self._type_name_of(reference)
        type_ = self._lookup(type_name, lookups)

        self._restrict_cache_policy(type_, info)

        resolve_reference = self._select_resolver(type_)
        return type_name, resolve_reference(reference, context, info)

    @staticmethod
    def _type_name_of(reference: Any) -> str:
        if not isinstance(reference, Mapping):
            raise MalformedReferenceError(reference)
        type_name = reference.get(TYPENAME_FIELD)
        if not isinstance(type_name, str) or not type_name:
            raise MalformedReferenceError(reference)
        return type_name

    def _lookup(self, type_name: str, lookups: dict[str, ObjectType]) -> ObjectType:
        if self._config.memoize_lookups and type_name in lookups:
            return lookups[type_name]

        type_ = self._registry.lookup(type_name)
        if type_ is None:
            raise UnresolvableTypeError(type_name)

        lookups[type_name] = type_
        return type_

    @staticmethod
    def _select_resolver(type_: ObjectType) -> ReferenceResolver:
        if type_.has_reference_resolver():
            return type_.resolve_reference
        return default_resolve_reference

    def _restrict_cache_policy(self, type_: ObjectType, info: Any) -> None:
        if not self._config.respect_cache_hints:
            return

        # Older callers or disabled cache tracking leave these unset
        cache_control = getattr(info, "cache_control", None)
        if cache_control is None:
            return
        restrict = getattr(getattr(cache_control, "cache_hint", None), "restrict", None)
        if restrict is None:
            return

        hint = cache_control.cache_hint_from_type(type_)
        if hint is None and self._config.default_max_age is not None:
            hint = CacheHint(max_age=self._config.default_max_age)
        if hint is not None:
            restrict(hint)
