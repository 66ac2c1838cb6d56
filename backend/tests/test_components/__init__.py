"""Component modules picked up by catalog discovery tests."""

from dynamic_component.components.catalog import ComponentCatalog

discovery_catalog = ComponentCatalog()
