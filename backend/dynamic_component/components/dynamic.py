from __future__ import annotations
"""Dynamic component loading.

``DynamicLoader`` lets a controller load components after the declared
components have been loaded, typically from its ``prepare`` hook::

    class FooController(Controller, Preparable):
        components = ['Dynamic']

        def prepare(self):
            if some_condition:
                self.Dynamic.load_components('Session', 'Admin')

Components loaded this way can load further components from their own
``initialize`` callback::

    @component(name='Admin')
    class AdminComponent(Component, Initializable):
        def initialize(self, controller, settings):
            controller.Dynamic.load_components('Auth')

Every newly loaded component is initialized exactly once, and only while the
loader's own ``initialize`` is running. Loads requested afterwards still
attach the components but skip their ``initialize``.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List

from pydantic import BaseModel, field_validator

from dynamic_component.controllers.base import Controller, Preparable
from dynamic_component.utils.string_utils import camelize

from .base import Component, Initializable, LoadRequest, normalize_specs
from .catalog import component

_log = logging.getLogger(__name__)


class LoaderState(str, Enum):
    UNINITIALIZED = 'uninitialized'
    INITIALIZING = 'initializing'
    INITIALIZED = 'initialized'


class DynamicOptions(BaseModel):
    # if true, tries to load the component named after params['prefix']
    prefix: bool = False

    model_config = {
        'extra': 'ignore'
    }

    @field_validator('prefix', mode='before')
    @classmethod
    def _truthy(cls, value: Any) -> bool:
        return bool(value)


@component(name='Dynamic')
class DynamicLoader(Component, Initializable):

    def __init__(self, settings: Dict[str, Any] | None = None) -> None:
        super().__init__(settings)
        self.state = LoaderState.UNINITIALIZED
        self._controller: Controller | None = None

    @property
    def initialized(self) -> bool:
        return self.state is LoaderState.INITIALIZED

    def initialize(self, controller: Controller, settings: Dict[str, Any]) -> None:
        if self.state is not LoaderState.UNINITIALIZED:
            _log.warning("DynamicLoader for controller=%s already %s; ignoring initialize()", controller.name, self.state.value)
            return
        options = DynamicOptions.model_validate(settings or {})
        self._controller = controller
        self.state = LoaderState.INITIALIZING
        try:
            prefix = controller.params.get('prefix')
            if options.prefix and prefix:
                self._load_prefix_component(str(prefix))
            if isinstance(controller, Preparable):
                self._call_initialize_method(controller.prepare)
        finally:
            self.state = LoaderState.INITIALIZED

    def load_components(self, *components: Any) -> List[str]:
        """Load components that are not attached to the controller yet.

        load_components('Session')
        load_components('Session', 'Plugin.Admin')
        load_components(['Session', {'Auth': {'login': '/users/login'}}])
        load_components({'Session': {}, 'Auth': {'login': '/users/login'}})

        Returns the newly loaded component names, dependencies included.
        """
        controller = self._controller
        if controller is None:
            raise RuntimeError("DynamicLoader.load_components() called before initialize()")

        to_load = []
        for spec in normalize_specs(components):
            if getattr(controller, spec.name, None):
                _log.debug("component %s already present on controller=%s; skipping", spec.identifier, controller.name)
                continue
            to_load.append(spec)
        if not to_load:
            return []

        newly_loaded = controller.registry.load(controller, LoadRequest(to_load))
        self._initialize_components(controller, newly_loaded)
        return newly_loaded

    def _call_initialize_method(self, method: Callable[..., Any], *args: Any) -> bool:
        if self.state is not LoaderState.INITIALIZING:
            # Only reachable from within initialize().
            _log.debug("skipping %s: loader is %s", getattr(method, '__qualname__', method), self.state.value)
            return False
        method(*args)
        return True

    def _initialize_components(self, controller: Controller, names: Iterable[str]) -> None:
        registry = controller.registry
        for name in names:
            instance = registry.get(name)
            if isinstance(instance, Initializable) and instance.enabled is True:
                self._call_initialize_method(instance.initialize, controller, registry.settings_for(name))

    def _load_prefix_component(self, prefix: str) -> bool:
        controller = self._controller
        identifier = camelize(prefix)
        if not identifier or not controller.registry.catalog.exists(identifier):
            _log.debug("no component for prefix=%s on controller=%s", prefix, controller.name)
            return False
        self.load_components(identifier)
        return True
