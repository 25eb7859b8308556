# tests/test_entity_types.py
"""
Unit tests for the entity type manager, storage and bundle registry.
"""
import pytest
from pydantic import ValidationError

from entity_route_context.contracts.entity import EntityTypeDefinition
from entity_route_context.core.entity_types.registry import (
    BundleInfoRegistry,
    EntityTypeManager,
)
from tests.helpers.entities import EntityTest, Node, User


class TestEntityTypeManager:
    def test_register_and_get(self, manager):
        assert "node" in manager
        assert manager.get_definition("node").label == "Content"
        assert manager.has_definition("user")

    def test_duplicate_raises(self, manager):
        with pytest.raises(ValueError, match="already registered"):
            manager.register(EntityTypeDefinition.from_entity_class(Node))

    def test_missing_raises(self, manager):
        with pytest.raises(KeyError, match="not found"):
            manager.get_definition("nope")

    def test_iteration_order(self, manager):
        assert [d.id for d in manager] == [
            "entity_test",
            "node",
            "user",
            "taxonomy_vocabulary",
        ]
        assert len(manager) == 4

    def test_list(self, manager):
        listed = {d["id"]: d for d in manager.list()}
        assert listed["node"]["bundle_key"] == "type"
        assert listed["node"]["links"]["canonical"] == "/node/{node}"

    def test_storage_is_reused(self, manager):
        assert manager.get_storage("node") is manager.get_storage("node")

    def test_storage_for_unknown_type(self, manager):
        with pytest.raises(KeyError):
            manager.get_storage("nope")


class TestInMemoryEntityStorage:
    def test_create_is_unsaved(self, manager):
        storage = manager.get_storage("node")
        node = storage.create({"type": "article", "title": "Draft"})
        assert node.is_new()
        assert node.title == "Draft"
        assert len(storage) == 0

    def test_create_failure_propagates(self, manager):
        with pytest.raises(ValidationError):
            manager.get_storage("user").create()

    def test_save_and_load(self, manager):
        storage = manager.get_storage("entity_test")
        first = storage.save(storage.create({"name": "one"}))
        second = storage.save(storage.create({"name": "two"}))
        assert (first.id, second.id) == (1, 2)
        assert storage.load(1) is first
        assert storage.load("2") is second
        assert storage.load(3) is None

    def test_save_keeps_explicit_id(self, manager):
        storage = manager.get_storage("node")
        node = storage.save(Node(id="abc"))
        assert storage.load("abc") is node

    def test_save_wrong_type(self, manager):
        with pytest.raises(ValueError, match="Cannot save"):
            manager.get_storage("node").save(EntityTest())

    def test_load_multiple_and_delete(self, manager):
        storage = manager.get_storage("user")
        a = storage.save(User(name="a"))
        b = storage.save(User(name="b"))
        assert set(storage.load_multiple()) == {"1", "2"}
        assert storage.load_multiple([2, 7]) == {"2": b}
        storage.delete(a)
        assert storage.load(1) is None


class TestBundleInfoRegistry:
    def test_registration_order(self, bundle_info):
        assert list(bundle_info.get_bundle_info("node")) == ["article", "page"]
        assert bundle_info.get_bundle_info("node")["page"] == {"label": "Basic page"}

    def test_unknown_type(self, bundle_info):
        assert bundle_info.get_bundle_info("user") == {}

    def test_set_replaces(self, bundle_info):
        bundle_info.set_bundle_info("node", {"event": {"label": "Event"}})
        assert list(bundle_info.get_bundle_info("node")) == ["event"]

    def test_returns_copies(self, bundle_info):
        bundle_info.get_bundle_info("node").clear()
        assert bundle_info.get_bundle_info("node")

    def test_all(self):
        reg = BundleInfoRegistry()
        reg.add_bundle("media", "image")
        assert reg.get_all_bundle_info() == {"media": {"image": {"label": "image"}}}
