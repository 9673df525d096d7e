from typing import Optional

from scalability_modeling.interface import FlavorScaling
from scalability_modeling.interface import InstanceConfiguration
from scalability_modeling.interface import InstanceScaling
from scalability_modeling.interface import ScalabilityConfig
from scalability_modeling.interface import ScalingConstraints
from scalability_modeling.interface import ScalingStrategy


_STRATEGIES = {
    (False, False): ScalingStrategy.fixed,
    (False, True): ScalingStrategy.horizontal,
    (True, False): ScalingStrategy.vertical,
    (True, True): ScalingStrategy.full_auto,
}


def strategy_for(flavor_scaling: bool, instance_scaling: bool) -> ScalingStrategy:
    return _STRATEGIES[(bool(flavor_scaling), bool(instance_scaling))]


def detect_scaling_strategy(config: ScalabilityConfig) -> ScalingStrategy:
    """Label a configuration by the scaling dimensions it enables

    The ``strategy`` already stored on the configuration is ignored, only the
    ``enabled`` flags are looked at.
    """
    return strategy_for(config.flavor_scaling.enabled, config.instance_scaling.enabled)


def config_for_instance(
    instance: InstanceConfiguration,
    constraints: Optional[ScalingConstraints] = None,
) -> ScalabilityConfig:
    """Describe running instance bounds as a ScalabilityConfig

    A dimension counts as enabled when its bounds differ.
    """
    flavor_scaling = FlavorScaling(
        min_flavor=instance.min_flavor,
        max_flavor=instance.max_flavor,
        enabled=instance.min_flavor != instance.max_flavor,
    )
    instance_scaling = InstanceScaling(
        min_instances=instance.min_instances,
        max_instances=instance.max_instances,
        enabled=instance.min_instances != instance.max_instances,
    )
    return ScalabilityConfig(
        strategy=strategy_for(flavor_scaling.enabled, instance_scaling.enabled),
        flavor_scaling=flavor_scaling,
        instance_scaling=instance_scaling,
        constraints=constraints or ScalingConstraints(),
    )
