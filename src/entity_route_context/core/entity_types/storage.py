# entity_route_context/core/entity_types/storage.py
"""
In-memory entity storage, one instance per entity type.
"""
from __future__ import annotations

import itertools
import logging
from typing import Any, Iterable, Mapping

from entity_route_context.contracts.entity import ContentEntity, EntityTypeDefinition

logger = logging.getLogger(__name__)


class InMemoryEntityStorage:
    """Dict-backed storage for a single entity type."""

    def __init__(self, definition: EntityTypeDefinition) -> None:
        self._definition = definition
        self._entities: dict[str, ContentEntity] = {}
        self._ids = itertools.count(1)

    @property
    def entity_type_id(self) -> str:
        return self._definition.id

    def create(self, values: Mapping[str, Any] | None = None) -> ContentEntity:
        """Build an unsaved entity. Validation errors propagate."""
        return self._definition.entity_class(**dict(values or {}))

    def save(self, entity: ContentEntity) -> ContentEntity:
        if entity.get_entity_type_id() != self._definition.id:
            raise ValueError(
                f"Cannot save '{entity.get_entity_type_id()}' entity in "
                f"'{self._definition.id}' storage"
            )
        if entity.id is None:
            entity.id = next(self._ids)
        self._entities[str(entity.id)] = entity
        logger.debug("Saved %s entity id=%s", self._definition.id, entity.id)
        return entity

    def load(self, entity_id: int | str) -> ContentEntity | None:
        return self._entities.get(str(entity_id))

    def load_multiple(self, ids: Iterable[int | str] | None = None) -> dict[str, ContentEntity]:
        if ids is None:
            return dict(self._entities)
        keys = [str(i) for i in ids]
        return {k: self._entities[k] for k in keys if k in self._entities}

    def delete(self, entity: ContentEntity) -> None:
        if entity.id is not None:
            self._entities.pop(str(entity.id), None)

    def __len__(self) -> int:
        return len(self._entities)
