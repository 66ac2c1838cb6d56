from __future__ import annotations

import importlib
import logging
import pkgutil
from typing import Dict, List, Type

from .base import Component

_log = logging.getLogger(__name__)


class ComponentNotFoundError(LookupError):
    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"Component not found: {identifier}")


def _qualify(name: str, plugin: str | None) -> str:
    return f"{plugin}.{name}" if plugin else name


class ComponentCatalog:
    """Lookup from component identifier (``"Name"`` or ``"Plugin.Name"``) to class."""

    def __init__(self):
        self._classes: Dict[str, Type[Component]] = {}

    def register(self, cls: Type[Component], name: str | None = None, plugin: str | None = None) -> Type[Component]:
        if not (isinstance(cls, type) and issubclass(cls, Component)):
            raise TypeError(f"{cls!r} is not a Component subclass")
        name = name or cls.__dict__.get("name") or cls.__name__
        plugin = plugin if plugin is not None else cls.__dict__.get("plugin")
        identifier = _qualify(name, plugin)
        if identifier in self._classes:
            raise ValueError(f"Component already registered: {identifier}")
        cls.name = name
        cls.plugin = plugin
        self._classes[identifier] = cls
        _log.debug("registered component %s -> %s.%s", identifier, cls.__module__, cls.__qualname__)
        return cls

    def unregister(self, identifier: str) -> None:
        self._classes.pop(identifier, None)

    def get(self, identifier: str) -> Type[Component]:
        cls = self._classes.get(identifier)
        if cls is None:
            raise ComponentNotFoundError(identifier)
        return cls

    def exists(self, identifier: str) -> bool:
        return identifier in self._classes

    def names(self) -> List[str]:
        return list(self._classes.keys())

    def discover(self, package: str) -> List[str]:
        """Import ``package`` and all of its submodules so ``@component`` decorators run.

        Returns the imported module names. Import errors propagate.
        """
        pkg = importlib.import_module(package)
        imported = [pkg.__name__]
        search = getattr(pkg, '__path__', None)
        if not search:
            return imported
        for info in pkgutil.walk_packages(search, prefix=f"{pkg.__name__}."):
            try:
                importlib.import_module(info.name)
            except Exception:
                _log.error("component module import failed module=%s", info.name, exc_info=True)
                raise
            imported.append(info.name)
        _log.info("discovered components package=%s modules=%d", package, len(imported))
        return imported


catalog = ComponentCatalog()


def component(*, name: str | None = None, plugin: str | None = None, target: ComponentCatalog | None = None):
    """Class decorator registering a ``Component`` subclass in the catalog."""
    def wrapper(cls: Type[Component]) -> Type[Component]:
        (target or catalog).register(cls, name=name, plugin=plugin)
        return cls
    return wrapper
