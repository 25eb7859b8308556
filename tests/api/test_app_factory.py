from __future__ import annotations

from pathlib import Path

from fastapi.testclient import TestClient

from entity_route_context.core.config import Settings
from entity_route_context.main import create_app


def test_app_starts_without_config(tmp_path: Path) -> None:
    settings = Settings(entity_types_config_paths=[str(tmp_path / "none.yaml")])
    client = TestClient(create_app(settings))

    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["entity_types"] == 0


def test_app_loads_entity_types(tmp_path: Path) -> None:
    config = tmp_path / "entity_types.yaml"
    config.write_text(
        "entity_types:\n"
        "  - id: node\n"
        "    import: tests.helpers.entities:Node\n"
        "    bundles:\n"
        "      article: {label: Article}\n",
        encoding="utf-8",
    )
    settings = Settings(
        entity_types_config_paths=[str(config)],
        route_name_prefix="content",
    )
    app = create_app(settings)
    client = TestClient(app)

    resp = client.get("/entity-types")
    assert resp.status_code == 200
    assert resp.json()[0]["route_names"][0] == "content.node.canonical"
    assert app.state.route_helper.get_entity_type_id("content.node.edit_form") == "node"
