from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping

from dynamic_component.components.base import Component
from dynamic_component.components.registry import ComponentRegistry

_log = logging.getLogger(__name__)


class Preparable(ABC):
    """Capability: ``prepare`` runs once, while the controller's components initialize."""

    @abstractmethod
    def prepare(self) -> None:
        raise NotImplementedError


class Controller:
    """Per-request owner of attached components.

    ``components`` declares what the registry loads before ``initialize``;
    attached components are reachable as attributes (``controller.Session``).
    """

    name: str = ''
    components: Any = ()

    def __init__(self, params: Mapping[str, Any] | None = None, registry: ComponentRegistry | None = None) -> None:
        self._attached: Dict[str, Component] = {}
        self.params: Dict[str, Any] = dict(params or {})
        self.registry = registry or ComponentRegistry()
        if not self.name:
            cls_name = self.__class__.__name__
            self.name = cls_name[:-len('Controller')] if cls_name.endswith('Controller') and cls_name != 'Controller' else cls_name

    def __getattr__(self, item: str) -> Component:
        attached = self.__dict__.get('_attached') or {}
        if item in attached:
            return attached[item]
        raise AttributeError(f"{self.__class__.__name__!r} has no attribute or component {item!r}")

    @property
    def attached(self) -> Dict[str, Component]:
        return dict(self._attached)

    def attach(self, name: str, instance: Component) -> None:
        self._attached[name] = instance

    def has_component(self, name: str) -> bool:
        return self._attached.get(name) is not None

    def startup_process(self) -> None:
        """Load declared components, then run their initialize and startup callbacks."""
        self.registry.load_declared(self)
        self.registry.initialize(self)
        self.registry.startup(self)
        _log.debug("controller=%s components ready: %s", self.name, list(self._attached))
