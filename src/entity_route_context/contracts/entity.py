# entity_route_context/contracts/entity.py
"""
Entity contracts.

An entity is the content object a route is about (a node being viewed, an
article being edited). Host code subclasses :class:`ContentEntity` and
declares the entity type through class attributes; the runtime derives an
:class:`EntityTypeDefinition` from the class at registration.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, ClassVar, Mapping, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict


@runtime_checkable
class EntityInterface(Protocol):
    """Anything that knows which entity type it belongs to."""

    def get_entity_type_id(self) -> str: ...


class ContentEntity(BaseModel):
    """Base class for host entities.

    Class attributes
    ~~~~~~~~~~~~~~~~
    entity_type_id
        Machine-readable entity type (e.g. ``"node"``).
    label
        Human-readable entity type label (e.g. ``"Content"``).
    links
        Link templates, keyed by template name (``"canonical"``,
        ``"edit-form"``, ...) with the route path as value.
    bundle_key
        Field holding the bundle id, ``None`` if the type has no bundles.
    bundle_entity_type
        Entity type that defines the bundles (e.g. ``"node_type"``).
    """

    model_config = ConfigDict(extra="allow")

    entity_type_id: ClassVar[str]
    label: ClassVar[str]
    links: ClassVar[dict[str, str]] = {}
    bundle_key: ClassVar[str | None] = None
    bundle_entity_type: ClassVar[str | None] = None

    id: int | str | None = None

    def get_entity_type_id(self) -> str:
        return self.entity_type_id

    def get_bundle(self) -> str:
        """Bundle id, falling back to the entity type id for unbundled types."""
        if self.bundle_key is None:
            return self.entity_type_id
        return str(getattr(self, self.bundle_key, None) or self.entity_type_id)

    def is_new(self) -> bool:
        return self.id is None


@dataclass(frozen=True)
class EntityTypeDefinition:
    """Resolved description of one entity type.

    Attributes:
        id: Entity type identifier.
        label: Human-readable label.
        entity_class: Class used to construct instances.
        links: Link template name to route path, in declaration order.
        bundle_key: Field holding the bundle id, if any.
        bundle_entity_type: Entity type defining the bundles, if any.
    """

    id: str
    label: str
    entity_class: type[ContentEntity]
    links: dict[str, str] = field(default_factory=dict)
    bundle_key: str | None = None
    bundle_entity_type: str | None = None

    @classmethod
    def from_entity_class(cls, entity_class: type[ContentEntity]) -> EntityTypeDefinition:
        return cls(
            id=entity_class.entity_type_id,
            label=getattr(entity_class, "label", entity_class.entity_type_id),
            entity_class=entity_class,
            links=dict(entity_class.links),
            bundle_key=entity_class.bundle_key,
            bundle_entity_type=entity_class.bundle_entity_type,
        )

    def with_overrides(self, overrides: Mapping[str, Any]) -> EntityTypeDefinition:
        """Apply YAML overrides. Links are merged over the declared ones."""
        changes: dict[str, Any] = {}
        if overrides.get("label"):
            changes["label"] = str(overrides["label"])
        if overrides.get("links"):
            changes["links"] = {**self.links, **dict(overrides["links"])}
        return replace(self, **changes) if changes else self

    def get_link_templates(self) -> dict[str, str]:
        return dict(self.links)

    def has_link_template(self, key: str) -> bool:
        return key in self.links

    def is_bundleable(self) -> bool:
        return bool(self.bundle_entity_type) and self.bundle_key is not None
