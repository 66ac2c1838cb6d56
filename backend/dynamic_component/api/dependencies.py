"""
FastAPI integration.
Builds one controller (and so one DynamicLoader) per request.
"""

import logging
from typing import Callable, Dict, List, Optional, Type, TypeVar

from fastapi import Request

from dynamic_component.components.base import ComponentSpec
from dynamic_component.components.catalog import ComponentCatalog
from dynamic_component.components.registry import ComponentRegistry
from dynamic_component.controllers.base import Controller

C = TypeVar("C", bound=Controller)

_log = logging.getLogger(__name__)


def controller_dependency(
    controller_cls: Type[C],
    *,
    catalog: Optional[ComponentCatalog] = None,
    declarations: Optional[Dict[str, List[ComponentSpec]]] = None,
) -> Callable[[Request], C]:
    """Return a FastAPI dependency yielding a started ``controller_cls``.

    Routing params are the request's path params; a ``prefix`` query
    parameter is used when the route itself has no ``prefix`` segment.
    Declarations, when given, override the class-level ``components`` for
    controllers listed in them.
    """

    def _dependency(request: Request) -> C:
        params = dict(request.path_params)
        if 'prefix' not in params and request.query_params.get('prefix'):
            params['prefix'] = request.query_params['prefix']
        controller = controller_cls(params=params, registry=ComponentRegistry(catalog))
        if declarations and controller.name in declarations:
            controller.components = list(declarations[controller.name])
        controller.startup_process()
        _log.debug("request %s %s handled by controller=%s", request.method, request.url.path, controller.name)
        return controller

    return _dependency
