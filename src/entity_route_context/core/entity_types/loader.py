# entity_route_context/core/entity_types/loader.py
"""
Entity type loader – imports entity classes, validates, and registers them.
"""
from __future__ import annotations

import logging

from entity_route_context.contracts.entity import ContentEntity, EntityTypeDefinition
from entity_route_context.core.entity_types.config import EntityTypesConfig
from entity_route_context.core.entity_types.registry import (
    BundleInfoRegistry,
    EntityTypeManager,
)
from entity_route_context.core.loader import import_attr

logger = logging.getLogger(__name__)


def load_and_register_entity_types(
    *,
    cfg: EntityTypesConfig,
    manager: EntityTypeManager | None = None,
    bundle_info: BundleInfoRegistry | None = None,
) -> tuple[EntityTypeManager, BundleInfoRegistry]:
    """Import entity classes, apply overrides, and register them.

    Args:
        cfg: Entity types configuration from YAML.
        manager: Registry to fill (a new one by default).
        bundle_info: Bundle registry to fill (a new one by default).

    Returns:
        The populated ``(EntityTypeManager, BundleInfoRegistry)``.
    """
    manager = manager if manager is not None else EntityTypeManager()
    bundle_info = bundle_info if bundle_info is not None else BundleInfoRegistry()

    for spec in cfg.entity_types:
        if not spec.enabled:
            logger.info("Skipping disabled entity type '%s'", spec.id)
            continue

        logger.info("Loading entity type '%s' from '%s'", spec.id, spec.import_path)
        entity_class = import_attr(spec.import_path)

        if not (isinstance(entity_class, type) and issubclass(entity_class, ContentEntity)):
            raise TypeError(
                f"Entity type '{spec.id}' must be a ContentEntity subclass, "
                f"got {type(entity_class).__name__}"
            )

        if entity_class.entity_type_id != spec.id:
            raise ValueError(
                f"Entity type id mismatch: YAML says '{spec.id}', "
                f"class says '{entity_class.entity_type_id}'"
            )

        definition = EntityTypeDefinition.from_entity_class(entity_class)
        manager.register(definition.with_overrides(spec.overrides))

        if spec.bundles:
            bundle_info.set_bundle_info(spec.id, spec.bundles)

    logger.info("Registered %d entity type(s)", len(manager))
    return manager, bundle_info
