"""Reconcile a partial scaling request with an application's current bounds.

Each pair of bounds (flavors, instance counts) is merged independently. When
the caller only moves one side of a pair and that breaks the ordering, the
side they did not touch follows it::

    current = InstanceConfiguration(
        min_flavor="S", max_flavor="S", min_instances=5, max_instances=5
    )
    merge_scalability_parameters(ScalabilityParameters(min_flavor="M"), current)
    # -> M/M/5/5

If both sides are given explicitly they are taken as-is, even when inverted;
rejecting those is the job of ``validation.validate_parameters``.
"""

import logging
from typing import Callable
from typing import Optional
from typing import Tuple
from typing import TypeVar

from scalability_modeling.flavors import default_scale
from scalability_modeling.interface import FlavorScale
from scalability_modeling.interface import InstanceConfiguration
from scalability_modeling.interface import Preset
from scalability_modeling.interface import ScalabilityParameters

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _merge_bounds(
    requested_min: Optional[T],
    requested_max: Optional[T],
    current_min: T,
    current_max: T,
    rank: Callable[[T], int],
) -> Tuple[T, T]:
    new_min = current_min if requested_min is None else requested_min
    new_max = current_max if requested_max is None else requested_max

    if requested_min is not None and requested_max is None:
        if rank(new_min) > rank(new_max):
            logger.debug("Raising max bound %s to match min %s", new_max, new_min)
            new_max = new_min
    elif requested_max is not None and requested_min is None:
        if rank(new_max) < rank(new_min):
            logger.debug("Lowering min bound %s to match max %s", new_min, new_max)
            new_min = new_max

    return new_min, new_max


def merge_scalability_parameters(
    params: ScalabilityParameters,
    current: InstanceConfiguration,
    scale: FlavorScale = default_scale,
) -> InstanceConfiguration:
    """Apply ``params`` on top of ``current`` and return the new bounds

    ``current`` is left untouched. This never fails, an inverted pair that
    the caller asked for explicitly is returned inverted.
    """
    min_flavor, max_flavor = _merge_bounds(
        params.requested("min_flavor"),
        params.requested("max_flavor"),
        current.min_flavor,
        current.max_flavor,
        rank=scale.index_of,
    )
    min_instances, max_instances = _merge_bounds(
        params.requested("min_instances"),
        params.requested("max_instances"),
        current.min_instances,
        current.max_instances,
        rank=int,
    )
    return InstanceConfiguration(
        min_flavor=min_flavor,
        max_flavor=max_flavor,
        min_instances=min_instances,
        max_instances=max_instances,
    )


def apply_preset(
    preset: Preset,
    current: InstanceConfiguration,
    scale: FlavorScale = default_scale,
) -> InstanceConfiguration:
    return merge_scalability_parameters(
        preset.configuration.to_parameters(), current, scale=scale
    )
