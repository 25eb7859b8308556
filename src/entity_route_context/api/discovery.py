# entity_route_context/api/discovery.py
"""
Root-level discovery and health endpoints.
"""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request

from entity_route_context.contracts.routing import RouteMatch
from entity_route_context.core.context_provider import EntityRouteContext

router = APIRouter()


def _services(request: Request) -> tuple[Any, Any, Any] | None:
    """Manager, route helper and bundle info, or ``None`` unless all are set."""
    state = request.app.state
    services = tuple(
        getattr(state, name, None)
        for name in ("entity_type_manager", "route_helper", "bundle_info")
    )
    if any(svc is None for svc in services):
        return None
    return services


@router.get("/health")
async def health(request: Request) -> dict:
    manager = getattr(request.app.state, "entity_type_manager", None)
    return {
        "status": "healthy",
        "entity_types": len(manager) if manager else 0,
    }


@router.get("/entity-types")
async def list_entity_types(request: Request) -> list[dict]:
    """Registered entity types with their route names and bundles."""
    services = _services(request)
    if services is None:
        return []
    manager, helper, bundle_info = services
    return [
        {
            **entry,
            "route_names": helper.get_route_names(entry["id"]),
            "bundles": list(bundle_info.get_bundle_info(entry["id"])),
        }
        for entry in manager.list()
    ]


@router.get("/contexts")
async def list_contexts(request: Request) -> dict[str, dict]:
    """Contexts a configuration UI can bind to."""
    services = _services(request)
    if services is None:
        return {}
    manager, helper, bundle_info = services
    provider = EntityRouteContext(
        entity_type_manager=manager,
        route_match=RouteMatch(),
        helper=helper,
        bundle_info=bundle_info,
    )
    return {key: ctx.describe() for key, ctx in provider.get_available_contexts().items()}
