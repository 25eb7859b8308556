# tests/conftest.py
import pytest

from entity_route_context.contracts.entity import EntityTypeDefinition
from entity_route_context.core.entity_types.registry import (
    BundleInfoRegistry,
    EntityTypeManager,
)
from entity_route_context.core.route_helper import EntityRouteHelper
from tests.helpers.entities import EntityTest, Node, User, Vocabulary


@pytest.fixture
def manager() -> EntityTypeManager:
    mgr = EntityTypeManager()
    for cls in (EntityTest, Node, User, Vocabulary):
        mgr.register(EntityTypeDefinition.from_entity_class(cls))
    return mgr


@pytest.fixture
def bundle_info() -> BundleInfoRegistry:
    reg = BundleInfoRegistry()
    reg.add_bundle("node", "article", "Article")
    reg.add_bundle("node", "page", "Basic page")
    return reg


@pytest.fixture
def helper(manager: EntityTypeManager) -> EntityRouteHelper:
    return EntityRouteHelper(manager)
