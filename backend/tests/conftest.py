import pathlib
import sys

import pytest

# Ensure backend root (containing the dynamic_component package) is on sys.path
BACKEND_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from dynamic_component.components.registry import ComponentRegistry

from tests.component_helpers import make_component, new_catalog


@pytest.fixture
def catalog():
    return new_catalog()


@pytest.fixture
def calls():
    return []


@pytest.fixture
def registry(catalog):
    return ComponentRegistry(catalog)


@pytest.fixture
def component_factory(catalog, calls):
    def _make(name, **kwargs):
        kwargs.setdefault('calls', calls)
        return make_component(catalog, name, **kwargs)
    return _make
