"""Public contracts for entity route contexts."""
from entity_route_context.contracts.context import (
    PERMANENT,
    CacheableMetadata,
    Context,
    ContextDefinition,
    ContextProvider,
    EntityContext,
    EntityContextDefinition,
)
from entity_route_context.contracts.entity import (
    ContentEntity,
    EntityInterface,
    EntityTypeDefinition,
)
from entity_route_context.contracts.routing import RouteMatch

__all__ = [
    "PERMANENT", "CacheableMetadata",
    "Context", "ContextDefinition", "ContextProvider",
    "EntityContext", "EntityContextDefinition",
    "ContentEntity", "EntityInterface", "EntityTypeDefinition",
    "RouteMatch",
]
