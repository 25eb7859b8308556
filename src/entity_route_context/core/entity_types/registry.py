# entity_route_context/core/entity_types/registry.py
"""
Entity type manager and bundle info registry.
"""
from __future__ import annotations

import logging
from typing import Any, Iterator, Mapping

from entity_route_context.contracts.entity import EntityTypeDefinition
from entity_route_context.core.entity_types.storage import InMemoryEntityStorage

logger = logging.getLogger(__name__)


class EntityTypeManager:
    """Registry of entity type definitions and their storages."""

    def __init__(self) -> None:
        self._definitions: dict[str, EntityTypeDefinition] = {}
        self._storages: dict[str, InMemoryEntityStorage] = {}

    def register(self, definition: EntityTypeDefinition) -> None:
        if definition.id in self._definitions:
            raise ValueError(f"Entity type '{definition.id}' is already registered")
        self._definitions[definition.id] = definition
        logger.debug(
            "Registered entity type '%s' with link templates %s",
            definition.id,
            list(definition.links),
        )

    def get_definition(self, entity_type_id: str) -> EntityTypeDefinition:
        try:
            return self._definitions[entity_type_id]
        except KeyError:
            raise KeyError(
                f"Entity type '{entity_type_id}' not found. "
                f"Available: {list(self._definitions)}"
            )

    def has_definition(self, entity_type_id: str) -> bool:
        return entity_type_id in self._definitions

    def get_definitions(self) -> dict[str, EntityTypeDefinition]:
        return dict(self._definitions)

    def get_storage(self, entity_type_id: str) -> InMemoryEntityStorage:
        storage = self._storages.get(entity_type_id)
        if storage is None:
            storage = InMemoryEntityStorage(self.get_definition(entity_type_id))
            self._storages[entity_type_id] = storage
        return storage

    def list(self) -> list[dict[str, Any]]:
        return [
            {
                "id": d.id,
                "label": d.label,
                "links": dict(d.links),
                "bundle_key": d.bundle_key,
                "bundle_entity_type": d.bundle_entity_type,
            }
            for d in self._definitions.values()
        ]

    def __iter__(self) -> Iterator[EntityTypeDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, entity_type_id: str) -> bool:
        return entity_type_id in self._definitions


class BundleInfoRegistry:
    """Bundle id to bundle metadata, per entity type.

    Bundles are returned in registration order. Nothing else about the order
    is guaranteed.
    """

    def __init__(self) -> None:
        self._bundles: dict[str, dict[str, dict[str, Any]]] = {}

    def set_bundle_info(
        self, entity_type_id: str, bundles: Mapping[str, Mapping[str, Any]]
    ) -> None:
        self._bundles[entity_type_id] = {
            str(bundle_id): dict(info or {}) for bundle_id, info in bundles.items()
        }

    def add_bundle(self, entity_type_id: str, bundle_id: str, label: str | None = None) -> None:
        self._bundles.setdefault(entity_type_id, {})[bundle_id] = {
            "label": label or bundle_id
        }

    def get_bundle_info(self, entity_type_id: str) -> dict[str, dict[str, Any]]:
        return dict(self._bundles.get(entity_type_id, {}))

    def get_all_bundle_info(self) -> dict[str, dict[str, dict[str, Any]]]:
        return {k: dict(v) for k, v in self._bundles.items()}
