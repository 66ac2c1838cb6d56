from __future__ import annotations
"""Per-controller component declarations read from YAML.

    controllers:
      Posts:
        components:
          - Dynamic: {prefix: true}
          - Session
      Users:
        components: {Dynamic: {}, Auth: {login: /users/login}}

The string ``null`` (any case) is treated as a missing value, so
``Session: null`` declares Session with no settings.
"""
import logging
import pathlib
from typing import Dict, List

import yaml

from dynamic_component.utils.string_utils import normalize_null_strings

from .base import ComponentSpec, normalize_specs

_log = logging.getLogger(__name__)


def parse_declarations(data: object, source: str = '<memory>') -> Dict[str, List[ComponentSpec]]:
    data = normalize_null_strings(data) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{source}: top level must be a mapping")
    controllers = data.get('controllers') or {}
    if not isinstance(controllers, dict):
        raise ValueError(f"{source}: 'controllers' must be a mapping")
    out: Dict[str, List[ComponentSpec]] = {}
    for name, entry in controllers.items():
        if entry is None:
            out[str(name)] = []
            continue
        if not isinstance(entry, dict):
            raise ValueError(f"{source}: controller {name!r} must be a mapping")
        try:
            out[str(name)] = normalize_specs(entry.get('components'))
        except (TypeError, AttributeError) as exc:
            raise ValueError(f"{source}: invalid components for controller {name!r}: {exc}") from exc
    return out


def load_declarations(path: pathlib.Path | str) -> Dict[str, List[ComponentSpec]]:
    path = pathlib.Path(path)
    raw = yaml.safe_load(path.read_text())
    declarations = parse_declarations(raw, source=str(path))
    _log.info("loaded component declarations file=%s controllers=%d", path, len(declarations))
    return declarations
