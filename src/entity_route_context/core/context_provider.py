# entity_route_context/core/context_provider.py
"""
Entity route context provider.

Publishes the entity owned by the current route as ``canonical_entity`` and
``canonical_entity:<entity_type_id>``, and advertises one context per entity
type for configuration UIs.
"""
from __future__ import annotations

import gettext
import logging
from typing import Callable, Iterable

from entity_route_context.contracts.context import (
    CacheableMetadata,
    Context,
    ContextDefinition,
    EntityContext,
    EntityContextDefinition,
)
from entity_route_context.contracts.entity import EntityInterface
from entity_route_context.contracts.routing import RouteMatch
from entity_route_context.core.entity_types.registry import (
    BundleInfoRegistry,
    EntityTypeManager,
)
from entity_route_context.core.route_helper import EntityRouteHelper

logger = logging.getLogger(__name__)


class EntityRouteContext:
    """Determines if the route is owned by an entity's link template."""

    CANONICAL_ENTITY = "canonical_entity"

    # Entity type id is appended.
    CANONICAL_ENTITY_PREFIX = "canonical_entity:"

    def __init__(
        self,
        entity_type_manager: EntityTypeManager,
        route_match: RouteMatch,
        helper: EntityRouteHelper,
        bundle_info: BundleInfoRegistry,
        translate: Callable[[str], str] | None = None,
    ) -> None:
        self._entity_type_manager = entity_type_manager
        self._route_match = route_match
        self._helper = helper
        self._bundle_info = bundle_info
        self._t = translate or gettext.gettext

    def get_runtime_contexts(self, unqualified_context_ids: Iterable[str]) -> dict[str, Context]:
        requested = set(unqualified_context_ids)
        entity_type_id = self._helper.get_entity_type_id(self._route_match.route_name)

        qualified_id = (
            self.CANONICAL_ENTITY_PREFIX + entity_type_id if entity_type_id else None
        )
        if self.CANONICAL_ENTITY not in requested and qualified_id not in requested:
            return {}

        if entity_type_id is None:
            return {}

        entity = self._find_entity_parameter(entity_type_id)
        if entity is None:
            logger.debug(
                "Route '%s' has no '%s' parameter",
                self._route_match.route_name,
                entity_type_id,
            )
            return {}

        definition = EntityContextDefinition.create(entity_type_id).set_required(False)
        context = Context(definition, entity)
        context.add_cacheable_dependency(
            CacheableMetadata().set_cache_contexts(["route"])
        )

        return {
            self.CANONICAL_ENTITY: context,
            qualified_id: context,
        }

    def get_available_contexts(self) -> dict[str, Context]:
        contexts: dict[str, Context] = {}

        # A generic 'entity' definition matches 'entity' and every
        # 'entity:<type>', see ContextDefinition.data_type_matches().
        contexts[self.CANONICAL_ENTITY] = Context(
            ContextDefinition("entity", self._t("Entity from route"))
        )

        entity_type_ids = list(dict.fromkeys(self._helper.get_all_route_names().values()))
        labels = {
            entity_type_id: str(self._entity_type_manager.get_definition(entity_type_id).label)
            for entity_type_id in entity_type_ids
        }

        # Context select fields show entries in the order provided.
        for entity_type_id, label in sorted(labels.items(), key=lambda item: item[1]):
            context = EntityContext.from_entity_type_id(
                entity_type_id,
                self._t("{entity_type} from route").replace("{entity_type}", label),
            )

            sample = self.generate_entity(entity_type_id)
            if sample is not None:
                context.get_context_definition().set_default_value(sample)

            contexts[self.CANONICAL_ENTITY_PREFIX + entity_type_id] = context

        return contexts

    def generate_entity(self, entity_type_id: str) -> EntityInterface | None:
        """Create an unsaved placeholder entity, or ``None`` if that fails.

        Bundleable types get the first registered bundle. Which bundle that
        is should not matter: the sample is never read for its values.
        """
        try:
            definition = self._entity_type_manager.get_definition(entity_type_id)
            storage = self._entity_type_manager.get_storage(entity_type_id)

            if definition.is_bundleable():
                bundle_id = next(iter(self._bundle_info.get_bundle_info(entity_type_id)), None)
                if bundle_id is None:
                    return None
                return storage.create({definition.bundle_key: bundle_id})

            return storage.create()
        except Exception as exc:
            logger.debug("Could not generate sample '%s' entity: %s", entity_type_id, exc)
            return None

    def _find_entity_parameter(self, entity_type_id: str) -> EntityInterface | None:
        # First parameter of the matching type wins.
        return next(
            (
                parameter
                for parameter in self._route_match.parameters.values()
                if isinstance(parameter, EntityInterface)
                and not isinstance(parameter, type)
                and parameter.get_entity_type_id() == entity_type_id
            ),
            None,
        )
