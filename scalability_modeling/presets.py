"""Named scalability configurations for common deployment profiles

The catalog is built once at import time from frozen models and handed out
as a tuple, so it can be shared freely between callers.
"""

from typing import Tuple

from scalability_modeling.interface import FlavorScaling
from scalability_modeling.interface import InstanceScaling
from scalability_modeling.interface import Preset
from scalability_modeling.interface import PresetCategory
from scalability_modeling.interface import ScalabilityConfig
from scalability_modeling.interface import ScalingStrategy


_DEFAULT_PRESETS: Tuple[Preset, ...] = (
    Preset(
        id="dev-fixed",
        name="Development Fixed",
        description="Fixed single instance for development",
        category=PresetCategory.development,
        configuration=ScalabilityConfig(
            strategy=ScalingStrategy.fixed,
            flavor_scaling=FlavorScaling(min_flavor="S", max_flavor="S"),
            instance_scaling=InstanceScaling(min_instances=1, max_instances=1),
        ),
        applicable_types=("node", "php", "python", "ruby"),
        tags=("development", "single-instance"),
    ),
    Preset(
        id="staging-horizontal",
        name="Staging Horizontal",
        description="Horizontal scaling for staging environment",
        category=PresetCategory.staging,
        configuration=ScalabilityConfig(
            strategy=ScalingStrategy.horizontal,
            flavor_scaling=FlavorScaling(min_flavor="S", max_flavor="S"),
            instance_scaling=InstanceScaling(
                min_instances=1, max_instances=3, enabled=True
            ),
        ),
        applicable_types=("node", "php", "python", "ruby", "java"),
        tags=("staging", "horizontal-scaling"),
    ),
    Preset(
        id="prod-full-auto",
        name="Production Full Auto",
        description="Full auto-scaling for production workloads",
        category=PresetCategory.production,
        configuration=ScalabilityConfig(
            strategy=ScalingStrategy.full_auto,
            flavor_scaling=FlavorScaling(min_flavor="S", max_flavor="L", enabled=True),
            instance_scaling=InstanceScaling(
                min_instances=2, max_instances=10, enabled=True
            ),
        ),
        applicable_types=("node", "php", "python", "ruby", "java", "go"),
        tags=("production", "auto-scaling", "high-availability"),
    ),
    Preset(
        id="high-traffic",
        name="High Traffic",
        description="Optimized for high traffic applications",
        category=PresetCategory.high_traffic,
        configuration=ScalabilityConfig(
            strategy=ScalingStrategy.full_auto,
            flavor_scaling=FlavorScaling(
                min_flavor="M", max_flavor="2XL", enabled=True
            ),
            instance_scaling=InstanceScaling(
                min_instances=3, max_instances=20, enabled=True
            ),
        ),
        applicable_types=("node", "php", "python", "ruby", "java", "go"),
        tags=("high-traffic", "performance", "auto-scaling"),
    ),
    Preset(
        id="cost-optimized",
        name="Cost Optimized",
        description="Optimized for cost efficiency",
        category=PresetCategory.cost_optimized,
        configuration=ScalabilityConfig(
            strategy=ScalingStrategy.horizontal,
            flavor_scaling=FlavorScaling(min_flavor="XS", max_flavor="S"),
            instance_scaling=InstanceScaling(
                min_instances=1, max_instances=5, enabled=True
            ),
        ),
        applicable_types=("node", "php", "python", "ruby", "static"),
        tags=("cost-optimized", "small-instances"),
    ),
)


def get_default_presets() -> Tuple[Preset, ...]:
    return _DEFAULT_PRESETS


def get_preset(preset_id: str) -> Preset:
    for preset in _DEFAULT_PRESETS:
        if preset.id == preset_id:
            return preset
    raise KeyError(f"Unknown preset {preset_id}")


def presets_by_category(category: PresetCategory) -> Tuple[Preset, ...]:
    return tuple(p for p in _DEFAULT_PRESETS if p.category == category)


def presets_for_type(app_type: str) -> Tuple[Preset, ...]:
    """Presets suitable for an application type such as "python" or "java" """
    return tuple(p for p in _DEFAULT_PRESETS if app_type in p.applicable_types)
