# entity_route_context/contracts/context.py
"""
Context contracts.

A context is a named, typed slot that components query for contextual data
(here: "the entity this page is about"). It carries a definition, an
optional bound value, and the cacheability metadata the value depends on.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Protocol

# Max-age sentinel for values that never expire.
PERMANENT = -1


@dataclass
class CacheableMetadata:
    """Request dimensions and invalidation tags a value depends on.

    Attributes:
        cache_contexts: Request dimensions the value varies by (``"route"``).
        cache_tags: Invalidation tags (``"node:1"``).
        max_age: Seconds the value stays valid, ``PERMANENT`` for forever.
    """

    cache_contexts: list[str] = field(default_factory=list)
    cache_tags: list[str] = field(default_factory=list)
    max_age: int = PERMANENT

    def set_cache_contexts(self, contexts: Iterable[str]) -> CacheableMetadata:
        self.cache_contexts = sorted(set(contexts))
        return self

    def add_cache_contexts(self, contexts: Iterable[str]) -> CacheableMetadata:
        self.cache_contexts = sorted({*self.cache_contexts, *contexts})
        return self

    def add_cache_tags(self, tags: Iterable[str]) -> CacheableMetadata:
        self.cache_tags = sorted({*self.cache_tags, *tags})
        return self

    def merge(self, other: CacheableMetadata) -> CacheableMetadata:
        """Return a new instance combining both; max-age takes the minimum."""
        if self.max_age == PERMANENT:
            max_age = other.max_age
        elif other.max_age == PERMANENT:
            max_age = self.max_age
        else:
            max_age = min(self.max_age, other.max_age)
        return CacheableMetadata(
            cache_contexts=sorted({*self.cache_contexts, *other.cache_contexts}),
            cache_tags=sorted({*self.cache_tags, *other.cache_tags}),
            max_age=max_age,
        )


@dataclass
class ContextDefinition:
    """Type and presentation of a context slot."""

    data_type: str = "any"
    label: str | None = None
    required: bool = True
    description: str | None = None
    default_value: Any = None

    def set_required(self, required: bool = True) -> ContextDefinition:
        self.required = required
        return self

    def set_default_value(self, value: Any) -> ContextDefinition:
        self.default_value = value
        return self

    def data_type_matches(self, data_type: str) -> bool:
        """Whether a value of ``data_type`` satisfies this definition.

        A generic ``entity`` definition accepts ``entity`` as well as any
        ``entity:<type>``; specific types must match exactly.
        """
        if self.data_type == "any" or self.data_type == data_type:
            return True
        return data_type.startswith(f"{self.data_type}:")

    def describe(self) -> dict[str, Any]:
        return {
            "data_type": self.data_type,
            "label": self.label,
            "required": self.required,
            "description": self.description,
            "has_default_value": self.default_value is not None,
        }


class EntityContextDefinition(ContextDefinition):
    """Definition of a context holding an entity of one type."""

    @classmethod
    def create(cls, entity_type_id: str, label: str | None = None) -> EntityContextDefinition:
        return cls(data_type=f"entity:{entity_type_id}", label=label)

    @property
    def entity_type_id(self) -> str:
        return self.data_type.split(":", 1)[1]


class Context:
    """A context definition with an optional value and its cacheability."""

    def __init__(
        self,
        definition: ContextDefinition,
        value: Any = None,
        cacheability: CacheableMetadata | None = None,
    ) -> None:
        self._definition = definition
        self._value = value
        self._cacheability = cacheability or CacheableMetadata()

    def get_context_definition(self) -> ContextDefinition:
        return self._definition

    def get_context_value(self) -> Any:
        """Bound value, or the definition's default when nothing is bound."""
        if self._value is None:
            return self._definition.default_value
        return self._value

    def has_context_value(self) -> bool:
        return self._value is not None

    def add_cacheable_dependency(self, dependency: CacheableMetadata) -> Context:
        self._cacheability = self._cacheability.merge(dependency)
        return self

    @property
    def cacheability(self) -> CacheableMetadata:
        return self._cacheability

    @property
    def cache_contexts(self) -> list[str]:
        return list(self._cacheability.cache_contexts)

    def describe(self) -> dict[str, Any]:
        return {
            **self._definition.describe(),
            "has_value": self.has_context_value(),
            "cache_contexts": self.cache_contexts,
        }

    def __repr__(self) -> str:
        return (
            f"Context(data_type={self._definition.data_type!r}, "
            f"has_value={self.has_context_value()})"
        )


class EntityContext(Context):
    """Context holding an entity."""

    @classmethod
    def from_entity_type_id(cls, entity_type_id: str, label: str | None = None) -> EntityContext:
        return cls(EntityContextDefinition.create(entity_type_id, label=label))


class ContextProvider(Protocol):
    """Source of contexts for the current request and for configuration UIs."""

    def get_runtime_contexts(
        self, unqualified_context_ids: Iterable[str]
    ) -> Mapping[str, Context]: ...

    def get_available_contexts(self) -> Mapping[str, Context]: ...
