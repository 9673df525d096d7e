import logging
from importlib import resources
from pathlib import Path
from typing import Dict

from scalability_modeling.flavors import load_catalog_from_disk
from scalability_modeling.interface import FlavorCatalog

logger = logging.getLogger(__name__)
common_catalogs: Dict[str, FlavorCatalog] = {}


profiles_dir = Path(str(resources.files(__name__)))
for profile in sorted(profiles_dir.glob("*.json")):
    logger.debug("Loading flavor catalog=%s from %s", profile.stem, profile)
    common_catalogs[profile.stem] = load_catalog_from_disk(catalog_paths=[profile])
