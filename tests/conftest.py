import pytest

from scalability_modeling.flavors import catalogs
from scalability_modeling.interface import InstanceConfiguration


@pytest.fixture(autouse=True)
def default_catalog():
    """
    Hand out the bundled flavor catalog and restore it after the test.

    Tests that call catalogs.load() with their own catalog would otherwise
    change the prices seen by every test that runs after them.
    """
    original = catalogs.catalog
    yield original
    catalogs.load(original)


@pytest.fixture
def current():
    return InstanceConfiguration(
        min_flavor="S", max_flavor="S", min_instances=5, max_instances=5
    )
