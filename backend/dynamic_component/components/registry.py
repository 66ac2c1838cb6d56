from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List

from .base import Component, ComponentSpec, Initializable, LoadRequest, Startable, normalize_specs
from .catalog import ComponentCatalog, catalog as default_catalog

if TYPE_CHECKING:  # pragma: no cover
    from dynamic_component.controllers.base import Controller

_log = logging.getLogger(__name__)


class ComponentRegistry:
    """Per-controller component loader.

    Instances are cached by bare name for the lifetime of the registry, so a
    component requested twice (directly or as a dependency of another one) is
    constructed and configured once.
    """

    def __init__(self, catalog: ComponentCatalog | None = None):
        self._catalog = catalog or default_catalog
        self._loaded: Dict[str, Component] = {}
        self._settings: Dict[str, Dict[str, Any]] = {}
        self._primary: List[str] = []

    @property
    def catalog(self) -> ComponentCatalog:
        return self._catalog

    @property
    def primary(self) -> List[str]:
        return list(self._primary)

    def loaded_names(self) -> List[str]:
        return list(self._loaded.keys())

    def get(self, name: str) -> Component | None:
        return self._loaded.get(name)

    def settings_for(self, name: str) -> Dict[str, Any]:
        return dict(self._settings.get(name) or {})

    def load(self, controller: Controller, request: LoadRequest) -> List[str]:
        """Attach every component in ``request`` to ``controller``.

        Returns the names loaded by this call, transitive dependencies
        included, in the order they were constructed.
        """
        before = set(self._loaded)
        for spec in request:
            self._attach(controller, spec, owner=None)
        newly_loaded = [name for name in self._loaded if name not in before]
        if newly_loaded:
            _log.debug("controller=%s loaded components=%s", controller.name, newly_loaded)
        return newly_loaded

    def load_declared(self, controller: Controller) -> List[str]:
        return self.load(controller, LoadRequest(normalize_specs(controller.components)))

    def initialize(self, controller: Controller) -> None:
        # Snapshot of everything loaded so far, dependencies included; components
        # attached while this loop runs are initialized by whoever loaded them.
        for name in list(self._loaded):
            instance = self._loaded[name]
            if isinstance(instance, Initializable) and instance.enabled:
                instance.initialize(controller, self.settings_for(name))

    def startup(self, controller: Controller) -> None:
        for name in list(self._primary):
            instance = self._loaded[name]
            if isinstance(instance, Startable) and instance.enabled:
                instance.startup(controller)

    def _attach(self, controller: Controller, spec: ComponentSpec, owner: Component | None) -> Component:
        name = spec.name
        instance = self._loaded.get(name)
        if instance is None:
            cls = self._catalog.get(spec.identifier)
            instance = cls(spec.settings)
            self._loaded[name] = instance
            self._settings[name] = dict(spec.settings)
            _log.debug("constructed component %s for controller=%s", spec.identifier, controller.name)
            for dependency in normalize_specs(instance.components):
                self._attach(controller, dependency, owner=instance)
        if owner is None:
            controller.attach(name, instance)
            if name not in self._primary:
                self._primary.append(name)
        else:
            setattr(owner, name, instance)
        return instance
