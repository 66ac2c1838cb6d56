from __future__ import annotations

"""Process start-up: logging, component discovery and declaration loading."""

import logging
from typing import Dict, List

from dynamic_component.components.base import ComponentSpec
from dynamic_component.components.catalog import ComponentCatalog, catalog as default_catalog
from dynamic_component.components.config import load_declarations
from dynamic_component.components.dynamic import DynamicLoader  # noqa: F401  registers "Dynamic"
from dynamic_component.core.config import Settings, settings as default_settings
from dynamic_component.core.logging_config import configure_logging

_log = logging.getLogger(__name__)


def bootstrap(
    config: Settings | None = None,
    catalog: ComponentCatalog | None = None,
) -> Dict[str, List[ComponentSpec]]:
    """Configure logging, import configured component packages and read declarations.

    Returns the per-controller declarations (empty when no file is configured).
    """
    config = config or default_settings
    catalog = catalog or default_catalog
    configure_logging(config.log_level)

    for package in config.component_packages:
        catalog.discover(package)

    declarations: Dict[str, List[ComponentSpec]] = {}
    if config.components_file is not None:
        declarations = load_declarations(config.components_file)

    _log.info(
        "%s %s ready components=%d controllers=%d",
        config.app_name,
        config.version,
        len(catalog.names()),
        len(declarations),
    )
    return declarations
