# pylint: disable=cyclic-import
# in FlavorCatalogs.catalog it imports from flavors.profiles dynamically
import json
import logging
import os
from pathlib import Path
from typing import Dict
from typing import List
from typing import Optional
from typing import Union

from scalability_modeling.interface import Flavor
from scalability_modeling.interface import FlavorCatalog
from scalability_modeling.interface import FlavorScale

logger = logging.getLogger(__name__)

DEFAULT_PROFILE = "clever-cloud"

default_scale: FlavorScale = FlavorScale()


def flavor_index(name: str) -> int:
    return default_scale.index_of(name)


def is_flavor_greater(a: str, b: str) -> bool:
    return default_scale.is_greater(a, b)


def is_valid_flavor(name: str) -> bool:
    return default_scale.is_valid(name)


def load_catalog(catalog: Dict) -> FlavorCatalog:
    return FlavorCatalog(**catalog)


def merge_catalog_data(existing: Dict, override: Dict) -> Dict:
    """Overlay one catalog file on top of another

    Flavors present in both take the override's fields, new flavors are
    appended after the existing ones so the smallest-first order of the base
    file is kept.
    """
    merged = existing.copy()
    if "currency" in override:
        merged["currency"] = override["currency"]

    flavors: List[Dict] = [f.copy() for f in existing.get("flavors", [])]
    by_name = {f["name"]: f for f in flavors}
    for flavor in override.get("flavors", []):
        if flavor["name"] in by_name:
            logger.debug("Overriding flavor %s", flavor["name"])
            by_name[flavor["name"]].update(flavor)
        else:
            added = flavor.copy()
            flavors.append(added)
            by_name[added["name"]] = added
    merged["flavors"] = flavors
    return merged


def load_catalog_from_disk(
    catalog_paths: Union[List[Path], Optional[str]] = os.environ.get(
        "FLAVOR_CATALOG_PATH"
    ),
) -> FlavorCatalog:
    if catalog_paths is None:
        catalog_paths = []
    if isinstance(catalog_paths, str):
        catalog_paths = [Path(catalog_paths)]

    combined: Dict = {}
    for catalog_path in catalog_paths:
        logger.debug("Loading flavor catalog from: %s", catalog_path)
        with open(catalog_path, encoding="utf-8") as fd:
            combined = merge_catalog_data(combined, json.load(fd))

    return load_catalog(combined)


class FlavorCatalogs:
    def __init__(self):
        self._catalog: Optional[FlavorCatalog] = None

    def load(self, new_catalog: FlavorCatalog) -> None:
        self._catalog = new_catalog

    @property
    def catalog(self) -> FlavorCatalog:
        if self._catalog is None:
            from scalability_modeling.flavors.profiles import common_catalogs

            self._catalog = common_catalogs[DEFAULT_PROFILE]
        return self._catalog

    def flavor(self, name: str) -> Flavor:
        return self.catalog.flavor(name)


catalogs: FlavorCatalogs = FlavorCatalogs()
