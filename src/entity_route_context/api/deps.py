# entity_route_context/api/deps.py
"""
FastAPI dependencies for request-scoped services.

Provides:
- ``get_route_match``: Build a ``RouteMatch`` for the matched route, with
  entity parameters upcast from storage.
- ``get_context_provider``: The ``EntityRouteContext`` for this request.
- ``get_canonical_entity``: The entity the current route is about, if any.
"""
from __future__ import annotations

import logging
from typing import Any

from fastapi import Depends, HTTPException, Request

from entity_route_context.contracts.entity import EntityInterface
from entity_route_context.contracts.routing import RouteMatch
from entity_route_context.core.context_provider import EntityRouteContext
from entity_route_context.core.entity_types.registry import EntityTypeManager

logger = logging.getLogger(__name__)


def _state(request: Request, name: str) -> Any:
    svc = getattr(request.app.state, name, None)
    if svc is None:
        raise HTTPException(500, f"'{name}' not configured on application state")
    return svc


def _upcast_parameters(
    path_params: dict[str, Any], manager: EntityTypeManager
) -> dict[str, Any]:
    """Replace ``{<entity_type_id>}`` path parameters with loaded entities.

    Unknown ids are left as the raw path value.
    """
    parameters: dict[str, Any] = {}
    for name, raw in path_params.items():
        value = raw
        if manager.has_definition(name):
            entity = manager.get_storage(name).load(raw)
            if entity is not None:
                value = entity
            else:
                logger.debug("No '%s' entity with id '%s'", name, raw)
        parameters[name] = value
    return parameters


async def get_route_match(request: Request) -> RouteMatch:
    """Describe the route that matched this request."""
    route = request.scope.get("route")
    manager: EntityTypeManager = _state(request, "entity_type_manager")

    return RouteMatch(
        route_name=getattr(route, "name", None),
        route_path=getattr(route, "path", None),
        parameters=_upcast_parameters(dict(request.path_params), manager),
    )


async def get_context_provider(
    request: Request,
    route_match: RouteMatch = Depends(get_route_match),
) -> EntityRouteContext:
    return EntityRouteContext(
        entity_type_manager=_state(request, "entity_type_manager"),
        route_match=route_match,
        helper=_state(request, "route_helper"),
        bundle_info=_state(request, "bundle_info"),
    )


async def get_canonical_entity(
    provider: EntityRouteContext = Depends(get_context_provider),
) -> EntityInterface | None:
    """Entity bound to ``canonical_entity``, or ``None``."""
    contexts = provider.get_runtime_contexts([EntityRouteContext.CANONICAL_ENTITY])
    context = contexts.get(EntityRouteContext.CANONICAL_ENTITY)
    return context.get_context_value() if context else None
