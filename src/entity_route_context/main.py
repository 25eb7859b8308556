# entity_route_context/main.py
"""
Application factory.

Creates a FastAPI application wired with the entity type registry, bundle
info and route helper that entity route contexts are resolved against.
Host applications add their own entity routes, named by link template
convention (``entity.node.canonical``), to the returned app.
"""
from __future__ import annotations

import logging
import sys

from fastapi import FastAPI

from entity_route_context.api.discovery import router as discovery_router
from entity_route_context.core.config import Settings, settings as default_settings
from entity_route_context.core.entity_types.config import load_entity_types_config
from entity_route_context.core.entity_types.loader import load_and_register_entity_types
from entity_route_context.core.route_helper import EntityRouteHelper

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        stream=sys.stdout,
        format="%(asctime)s %(levelname)-8s %(name)s  %(message)s",
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build and wire the FastAPI application."""
    settings = settings or default_settings
    _configure_logging(settings.log_level)
    logger.info("Creating entity route context application (env=%s)", settings.app_env)

    try:
        cfg = load_entity_types_config(settings.entity_types_config_paths)
        manager, bundle_info = load_and_register_entity_types(cfg=cfg)
    except Exception:
        logger.exception("Failed to load entity types")
        raise

    app = FastAPI(
        title="Entity Route Context",
        version="0.1.0",
        description="Publishes the entity owned by the current route as a context",
    )

    app.state.entity_type_manager = manager
    app.state.bundle_info = bundle_info
    app.state.route_helper = EntityRouteHelper(manager, prefix=settings.route_name_prefix)

    app.include_router(discovery_router)

    logger.info(
        "Serving %d entity type(s): %s",
        len(manager),
        [d.id for d in manager],
    )
    return app

