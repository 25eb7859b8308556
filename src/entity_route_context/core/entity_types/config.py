# entity_route_context/core/entity_types/config.py
"""
Entity type configuration loading.

Entity types are declared in code (ContentEntity subclasses) and listed in
YAML, where labels, extra link templates and bundles can be set per
deployment.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

from entity_route_context.core.loader import load_yaml_files, substitute_env_vars

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntityTypeSpec:
    """YAML-declared entity type."""

    id: str
    import_path: str
    enabled: bool = True
    overrides: dict[str, Any] = field(default_factory=dict)
    bundles: dict[str, dict[str, Any]] = field(default_factory=dict)


@dataclass(frozen=True)
class EntityTypesConfig:
    entity_types: list[EntityTypeSpec] = field(default_factory=list)


def load_entity_types_config(patterns: Iterable[str]) -> EntityTypesConfig:
    """Load entity type declarations from YAML.

    Expected structure::

        entity_types:
          - id: node
            import: myapp.entities:Node
            enabled: true
            label: Content
            links:
              version-history: /node/{node}/revisions
            bundles:
              article: {label: Article}
              page: {label: Basic page}

    A later file declaring the same ``id`` replaces the earlier entry.
    """
    yamls = load_yaml_files(patterns)
    types_map: dict[str, dict[str, Any]] = {}

    for data in yamls:
        for raw in data.get("entity_types", []):
            types_map[raw["id"]] = substitute_env_vars(raw)

    specs: list[EntityTypeSpec] = []
    for raw in types_map.values():
        overrides = {k: raw[k] for k in ("label", "links") if raw.get(k)}
        bundles = {
            str(bundle_id): dict(info or {})
            for bundle_id, info in (raw.get("bundles") or {}).items()
        }
        specs.append(
            EntityTypeSpec(
                id=raw["id"],
                import_path=raw["import"],
                enabled=raw.get("enabled", True),
                overrides=overrides,
                bundles=bundles,
            )
        )

    logger.info(
        "Loaded %d entity type spec(s): %s", len(specs), [s.id for s in specs]
    )
    return EntityTypesConfig(entity_types=specs)
