# tests/test_route_helper.py
"""
Unit tests for entity route name derivation and reverse lookup.
"""
import pytest

from entity_route_context.contracts.routing import RouteMatch
from entity_route_context.core.route_helper import EntityRouteHelper


class TestGetRouteNames:
    def test_entity_test_routes(self, helper):
        result = helper.get_route_names("entity_test")
        assert "entity.entity_test.canonical" in result
        assert "entity.entity_test.add_form" in result
        assert "entity.entity_test.edit_form" in result
        assert "entity.entity_test.delete_form" in result
        assert len(result) == 4

    def test_declaration_order(self, helper):
        assert helper.get_route_names("node") == [
            "entity.node.canonical",
            "entity.node.edit_form",
            "entity.node.delete_form",
        ]

    def test_unknown_type(self, helper):
        assert helper.get_route_names("nope") == []

    def test_type_without_links(self, helper):
        assert helper.get_route_names("taxonomy_vocabulary") == []

    def test_custom_prefix(self, manager):
        helper = EntityRouteHelper(manager, prefix="content")
        assert "content.node.edit_form" in helper.get_route_names("node")


class TestGetAllRouteNames:
    def test_maps_route_to_entity_type(self, helper):
        names = helper.get_all_route_names()
        assert names["entity.node.canonical"] == "node"
        assert names["entity.user.edit_form"] == "user"
        assert names["entity.entity_test.add_form"] == "entity_test"

    def test_union_of_all_types(self, helper, manager):
        expected = {
            name
            for definition in manager
            for name in helper.get_route_names(definition.id)
        }
        assert set(helper.get_all_route_names()) == expected

    def test_types_without_links_absent(self, helper):
        assert "taxonomy_vocabulary" not in helper.get_all_route_names().values()


class TestGetLinkTemplateByRouteMatch:
    def test_edit_form(self, helper):
        route_match = RouteMatch(
            route_name="entity.entity_test.edit_form",
            route_path="/entity_test/manage/{entity_test}/edit",
        )
        assert helper.get_link_template_by_route_match(route_match) == (
            "entity_test",
            "edit-form",
        )

    def test_inverts_every_route_name(self, helper, manager):
        for definition in manager:
            for key in definition.get_link_templates():
                route_name = helper.route_name(definition.id, key)
                match = helper.get_link_template_by_route_match(
                    RouteMatch(route_name=route_name)
                )
                assert match == (definition.id, key)

    @pytest.mark.parametrize(
        "route_name",
        [None, "", "system.admin", "entity.node", "entity.node.revisions", "entity.nope.canonical"],
    )
    def test_no_match(self, helper, route_name):
        assert helper.get_link_template_by_route_match(RouteMatch(route_name=route_name)) is None


class TestGetEntityTypeId:
    def test_known_route(self, helper):
        assert helper.get_entity_type_id("entity.node.delete_form") == "node"

    def test_unknown_route(self, helper):
        assert helper.get_entity_type_id("view.frontpage.page_1") is None

    def test_no_route_name(self, helper):
        assert helper.get_entity_type_id(None) is None
