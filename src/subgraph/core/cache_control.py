"""
Cache Control

Per-request cache policy accumulator and the execution-context hook the
entity dispatcher uses to narrow it by entity type.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .models import CacheHint, CacheScope, ObjectType


class CachePolicy:
    """
    Mutable cache policy for one response.

    restrict() only ever narrows the policy: the smallest max_age wins and a
    PRIVATE scope is never widened back to PUBLIC. Restrictions commute, so
    concurrent entity resolutions can apply them in any order.
    """

    def __init__(self, max_age: int | None = None, scope: CacheScope | None = None):
        self.max_age = max_age
        self.scope = scope

    def restrict(self, hint: CacheHint) -> None:
        """Merge hint into the policy, keeping the most restrictive values."""
        if hint.max_age is not None and (self.max_age is None or hint.max_age < self.max_age):
            self.max_age = hint.max_age
        if hint.scope is not None and self.scope != CacheScope.PRIVATE:
            self.scope = hint.scope

    def replace(self, hint: CacheHint) -> None:
        """Overwrite any values hint sets."""
        if hint.max_age is not None:
            self.max_age = hint.max_age
        if hint.scope is not None:
            self.scope = hint.scope

    def policy_if_cacheable(self) -> CacheHint | None:
        """Return the effective policy, or None if the response is uncacheable."""
        if not self.max_age:
            return None
        return CacheHint(max_age=self.max_age, scope=self.scope or CacheScope.PUBLIC)

    def __repr__(self) -> str:
        return f"CachePolicy(max_age={self.max_age!r}, scope={self.scope!r})"


@dataclass
class CacheControl:
    """
    Cache tracking state carried by a request's execution info.

    Attributes:
        cache_hint: Policy accumulated over the whole response
        default_max_age: max_age applied to types that declare no hint
    """

    cache_hint: CachePolicy = field(default_factory=CachePolicy)
    default_max_age: int | None = None

    def cache_hint_from_type(self, type_: ObjectType) -> CacheHint | None:
        """Return the cache hint declared on type_, falling back to the default."""
        if type_.cache_hint is not None:
            return type_.cache_hint
        if self.default_max_age is not None:
            return CacheHint(max_age=self.default_max_age)
        return None
