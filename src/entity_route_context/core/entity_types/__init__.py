from entity_route_context.core.entity_types.config import (
    EntityTypesConfig,
    EntityTypeSpec,
    load_entity_types_config,
)
from entity_route_context.core.entity_types.loader import load_and_register_entity_types
from entity_route_context.core.entity_types.registry import (
    BundleInfoRegistry,
    EntityTypeManager,
)
from entity_route_context.core.entity_types.storage import InMemoryEntityStorage

__all__ = [
    "EntityTypesConfig",
    "EntityTypeSpec",
    "load_entity_types_config",
    "load_and_register_entity_types",
    "BundleInfoRegistry",
    "EntityTypeManager",
    "InMemoryEntityStorage",
]
