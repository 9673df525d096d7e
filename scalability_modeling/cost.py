"""Monthly cost of a scalability configuration.

The estimate brackets what an application can cost: running its minimum
instance count at its minimum flavor, up to its maximum count at its maximum
flavor. Prices come from a FlavorCatalog snapshot, by default the bundled
one.
"""

import logging
from typing import List
from typing import Optional
from typing import Tuple

from scalability_modeling.flavors import catalogs
from scalability_modeling.interface import CostEstimate
from scalability_modeling.interface import FlavorCatalog
from scalability_modeling.interface import HOURS_PER_MONTH
from scalability_modeling.interface import interval
from scalability_modeling.interface import Interval
from scalability_modeling.interface import ScalabilityConfig

logger = logging.getLogger(__name__)

# Used for a missing flavor bound and to price flavors the catalog lacks
DEFAULT_FLAVOR = "S"
DEFAULT_INSTANCES = 1


def _hourly_price(catalog: FlavorCatalog, flavor: Optional[str]) -> float:
    name = flavor or DEFAULT_FLAVOR
    price = catalog.price(name)
    if price is None:
        logger.warning(
            "Flavor %s is not in the catalog, pricing it as %s", name, DEFAULT_FLAVOR
        )
        price = catalog.price(DEFAULT_FLAVOR) or 0.0
    return price


def _instance_bounds(config: ScalabilityConfig) -> Tuple[int, int]:
    scaling = config.instance_scaling
    min_instances = scaling.min_instances
    max_instances = scaling.max_instances
    return (
        DEFAULT_INSTANCES if min_instances is None else min_instances,
        DEFAULT_INSTANCES if max_instances is None else max_instances,
    )


def estimate_cost(
    config: ScalabilityConfig, catalog: Optional[FlavorCatalog] = None
) -> CostEstimate:
    """Estimate the monthly cost range of a configuration

    The configuration is not validated, an inverted one simply yields a
    maximum below the minimum.
    """
    if catalog is None:
        catalog = catalogs.catalog

    min_instances, max_instances = _instance_bounds(config)

    monthly_min = (
        _hourly_price(catalog, config.flavor_scaling.min_flavor)
        * min_instances
        * HOURS_PER_MONTH
    )
    monthly_max = (
        _hourly_price(catalog, config.flavor_scaling.max_flavor)
        * max_instances
        * HOURS_PER_MONTH
    )

    return CostEstimate(
        monthly_min=monthly_min,
        monthly_max=monthly_max,
        currency=catalog.currency,
        breakdown={
            "min_cost": monthly_min,
            "max_cost": monthly_max,
            "min_instances": float(min_instances),
            "max_instances": float(max_instances),
        },
    )


def estimate_cost_interval(
    config: ScalabilityConfig, catalog: Optional[FlavorCatalog] = None
) -> Interval:
    """Spread of monthly cost over every state the configuration allows

    Each (flavor, instance count) combination between the bounds is one
    sample; the result holds the extremes and the 5th/50th/95th percentiles.
    """
    if catalog is None:
        catalog = catalogs.catalog
    scale = catalog.scale

    min_flavor = config.flavor_scaling.min_flavor or DEFAULT_FLAVOR
    max_flavor = config.flavor_scaling.max_flavor or DEFAULT_FLAVOR
    min_instances, max_instances = _instance_bounds(config)

    low_idx, high_idx = sorted(
        (scale.index_of(min_flavor), scale.index_of(max_flavor))
    )
    if scale.is_valid(min_flavor) and scale.is_valid(max_flavor):
        flavors = list(scale.names[low_idx : high_idx + 1])
    else:
        flavors = [min_flavor, max_flavor]
    low_count, high_count = sorted((min_instances, max_instances))
    counts = range(low_count, high_count + 1)

    samples: List[float] = [
        _hourly_price(catalog, flavor) * count * HOURS_PER_MONTH
        for flavor in flavors
        for count in counts
    ]
    return interval(samples)
