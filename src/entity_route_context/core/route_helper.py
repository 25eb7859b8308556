# entity_route_context/core/route_helper.py
"""
Entity route helper.

Entity types own routes through their link templates. Each template maps to
a conventional route name::

    entity.<entity_type_id>.<template key with '-' replaced by '_'>

so ``edit-form`` of ``node`` is served by ``entity.node.edit_form``. The
helper derives those names and maps a matched route back to its entity type
and template.
"""
from __future__ import annotations

import logging

from entity_route_context.contracts.routing import RouteMatch
from entity_route_context.core.entity_types.registry import EntityTypeManager

logger = logging.getLogger(__name__)


class EntityRouteHelper:
    """Maps entity types to route names and back."""

    def __init__(self, entity_type_manager: EntityTypeManager, prefix: str = "entity") -> None:
        self._entity_type_manager = entity_type_manager
        self._prefix = prefix

    def route_name(self, entity_type_id: str, template_key: str) -> str:
        return f"{self._prefix}.{entity_type_id}.{template_key.replace('-', '_')}"

    def get_route_names(self, entity_type_id: str) -> list[str]:
        """Route names for every link template of the entity type."""
        return list(self._link_template_routes(entity_type_id))

    def get_all_route_names(self) -> dict[str, str]:
        """Route name to entity type id, across all entity types."""
        route_names: dict[str, str] = {}
        for definition in self._entity_type_manager:
            for route_name in self._link_template_routes(definition.id):
                route_names[route_name] = definition.id
        return route_names

    def get_link_template_by_route_match(
        self, route_match: RouteMatch
    ) -> tuple[str, str] | None:
        """Return ``(entity_type_id, template_key)`` owning the matched route."""
        route_name = route_match.route_name
        if not route_name:
            return None

        for definition in self._entity_type_manager:
            routes = self._link_template_routes(definition.id)
            template_key = routes.get(route_name)
            if template_key is not None:
                return definition.id, template_key

        logger.debug("Route '%s' is not an entity link template route", route_name)
        return None

    def get_entity_type_id(self, route_name: str | None) -> str | None:
        match = self.get_link_template_by_route_match(RouteMatch(route_name=route_name))
        return match[0] if match else None

    def _link_template_routes(self, entity_type_id: str) -> dict[str, str]:
        # route name -> template key, in link declaration order
        if not self._entity_type_manager.has_definition(entity_type_id):
            return {}
        definition = self._entity_type_manager.get_definition(entity_type_id)
        return {
            self.route_name(entity_type_id, key): key
            for key in definition.get_link_templates()
        }
