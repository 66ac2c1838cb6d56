from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Tuple

if TYPE_CHECKING:  # pragma: no cover
    from dynamic_component.controllers.base import Controller


def split_plugin_name(identifier: str) -> Tuple[str | None, str]:
    """Split ``"Plugin.Name"`` into ``("Plugin", "Name")``; bare names give ``(None, name)``."""
    plugin, sep, name = identifier.rpartition('.')
    if not sep:
        return None, identifier
    return plugin or None, name


@dataclass(slots=True)
class ComponentSpec:
    identifier: str
    settings: Dict[str, Any] = field(default_factory=dict)

    @property
    def plugin(self) -> str | None:
        return split_plugin_name(self.identifier)[0]

    @property
    def name(self) -> str:
        return split_plugin_name(self.identifier)[1]


@dataclass(slots=True)
class LoadRequest:
    """Ordered set of components a registry should attach in one pass."""

    specs: List[ComponentSpec] = field(default_factory=list)

    def __iter__(self):
        return iter(self.specs)


def normalize_specs(components: Any) -> List[ComponentSpec]:
    """Normalize component declarations into ``ComponentSpec`` pairs.

    Accepts a single identifier, a sequence of identifiers, a mapping of
    identifier to settings, or a sequence mixing identifiers and mappings.
    ``None`` settings are treated as empty.
    """
    if components is None:
        return []
    if isinstance(components, ComponentSpec):
        return [components]
    if isinstance(components, str):
        return [ComponentSpec(components)]
    if isinstance(components, Mapping):
        return [ComponentSpec(str(ident), dict(cfg or {})) for ident, cfg in components.items()]
    specs: List[ComponentSpec] = []
    for item in components:
        specs.extend(normalize_specs(item))
    return specs


class Component:
    """Base class for behaviour modules attached to a controller.

    ``components`` lists the components this one depends on; the registry
    loads them first and attaches them to this instance as attributes.
    """

    name: str = ''
    plugin: str | None = None
    components: Any = ()
    enabled: bool = True

    def __init__(self, settings: Mapping[str, Any] | None = None) -> None:
        self.settings: Dict[str, Any] = dict(settings or {})

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r} enabled={self.enabled}>"


class Initializable(ABC):
    """Capability: the component wants a one-time ``initialize`` callback."""

    @abstractmethod
    def initialize(self, controller: Controller, settings: Dict[str, Any]) -> None:
        raise NotImplementedError


class Startable(ABC):
    """Capability: the component wants a ``startup`` callback before the action runs."""

    @abstractmethod
    def startup(self, controller: Controller) -> None:
        raise NotImplementedError
