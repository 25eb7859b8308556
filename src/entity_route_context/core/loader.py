# entity_route_context/core/loader.py
"""
Helpers behind the YAML entity type declarations.

``import_attr`` resolves the ``import:`` value of an entry to its entity
class, ``substitute_env_vars`` expands placeholders in labels and link
paths, and ``load_yaml_files`` reads the configured globs.
"""
from __future__ import annotations

import importlib
import logging
import os
import re
from glob import glob
from pathlib import Path
from typing import Any, Iterable

import yaml

logger = logging.getLogger(__name__)

# ${VAR} or ${VAR:-default}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


def import_attr(path: str) -> Any:
    """Resolve ``'package.module:Name'`` to the named object.

    Raises ``ValueError`` when the colon is missing, ``ImportError`` for an
    unknown module and ``AttributeError`` when the module lacks the name.
    """
    module_name, sep, attr = path.partition(":")
    if not sep:
        raise ValueError(f"Invalid import path '{path}', expected 'module:attr'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        logger.error("Failed to import module '%s'", module_name)
        raise ImportError(f"Cannot import module '{module_name}'") from exc

    if not hasattr(module, attr):
        logger.error("Module '%s' has no attribute '%s'", module_name, attr)
        raise AttributeError(f"Module '{module_name}' has no attribute '{attr}'")
    return getattr(module, attr)


def substitute_env_vars(value: Any) -> Any:
    """Expand ``${VAR}`` / ``${VAR:-default}`` in strings, lists and dicts.

    Other values pass through untouched. An unset variable without a default
    is a configuration error.
    """
    if isinstance(value, str):
        return ENV_VAR_PATTERN.sub(_env_value, value)
    if isinstance(value, dict):
        return {key: substitute_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [substitute_env_vars(item) for item in value]
    return value


def _env_value(match: re.Match) -> str:
    name, default = match.group(1), match.group(2)
    found = os.environ.get(name, default)
    if found is None:
        raise ValueError(
            f"Environment variable '{name}' is not set and no default provided"
        )
    return found


def load_yaml_files(patterns: Iterable[str]) -> list[dict[str, Any]]:
    """Parse every file matched by ``patterns``, ordered by resolved path.

    Empty files count as ``{}``. Callers merge the documents, so a file that
    sorts later wins over an earlier one.
    """
    patterns = list(patterns)
    files = sorted({Path(match).resolve() for pattern in patterns for match in glob(pattern)})

    if not files:
        logger.warning("No config files found matching patterns: %s", patterns)
        return []

    logger.info("Loading config files: %s", [str(f) for f in files])

    documents: list[dict[str, Any]] = []
    for path in files:
        try:
            with path.open("r", encoding="utf-8") as fh:
                documents.append(yaml.safe_load(fh) or {})
        except yaml.YAMLError as exc:
            logger.error("Failed to load YAML file '%s': %s", path, exc)
            raise
    return documents
