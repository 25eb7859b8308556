"""Expose the entity owned by the current route as a context value."""
from entity_route_context.core.context_provider import EntityRouteContext
from entity_route_context.core.route_helper import EntityRouteHelper

__version__ = "0.1.0"

__all__ = ["EntityRouteContext", "EntityRouteHelper", "__version__"]
