"""Validation of scaling requests and configurations

Problems are reported in a ValidationResult rather than raised. Errors mean
the request must not be sent upstream, warnings are informational only.
"""

from typing import List
from typing import Optional

from scalability_modeling.flavors import default_scale
from scalability_modeling.interface import FlavorScale
from scalability_modeling.interface import ScalabilityConfig
from scalability_modeling.interface import ScalabilityParameters
from scalability_modeling.interface import ScalingConstraints
from scalability_modeling.interface import ScalingStrategy
from scalability_modeling.interface import ValidationResult

NO_OPTION = "You should provide at least 1 option"
FLAVOR_ORDER = "min-flavor can't be a greater flavor than max-flavor"
INSTANCE_ORDER = "min-instances can't be greater than max-instances"


def _check_order(
    scale: FlavorScale,
    min_flavor: Optional[str],
    max_flavor: Optional[str],
    min_instances: Optional[int],
    max_instances: Optional[int],
) -> List[str]:
    errors = []
    if min_flavor is not None and max_flavor is not None:
        if scale.index_of(min_flavor) > scale.index_of(max_flavor):
            errors.append(FLAVOR_ORDER)
    if min_instances is not None and max_instances is not None:
        if min_instances > max_instances:
            errors.append(INSTANCE_ORDER)
    return errors


def validate_parameters(
    params: ScalabilityParameters, scale: FlavorScale = default_scale
) -> ValidationResult:
    """Check a raw scaling request before it is merged

    Unknown flavors and instance counts below one are only warnings since
    the platform may still accept them.
    """
    errors: List[str] = []
    warnings: List[str] = []

    if params.is_empty:
        errors.append(NO_OPTION)

    errors.extend(
        _check_order(
            scale,
            params.requested("min_flavor"),
            params.requested("max_flavor"),
            params.requested("min_instances"),
            params.requested("max_instances"),
        )
    )

    for field, label in (("min_flavor", "min-flavor"), ("max_flavor", "max-flavor")):
        flavor = params.requested(field)
        if flavor is not None and not scale.is_valid(flavor):
            warnings.append(f"Invalid {label}: {flavor}")

    for field, label in (
        ("min_instances", "min-instances"),
        ("max_instances", "max-instances"),
    ):
        count = params.requested(field)
        if count is not None and count < 1:
            warnings.append(f"{label} must be at least 1")

    return ValidationResult(errors=errors, warnings=warnings)


def _check_constraints(
    scale: FlavorScale, config: ScalabilityConfig, constraints: ScalingConstraints
) -> List[str]:
    errors = []
    max_instances = config.instance_scaling.max_instances
    if max_instances is not None and max_instances > constraints.max_allowed_instances:
        errors.append(
            f"max-instances can't be greater than {constraints.max_allowed_instances}"
        )

    for label, flavor in (
        ("min-flavor", config.flavor_scaling.min_flavor),
        ("max-flavor", config.flavor_scaling.max_flavor),
    ):
        if flavor is None:
            continue
        if flavor not in constraints.allowed_flavors:
            errors.append(f"{label} {flavor} is not allowed")
        elif not (
            constraints.min_flavor_index
            <= scale.index_of(flavor)
            <= constraints.max_flavor_index
        ):
            errors.append(f"{label} {flavor} is out of the allowed range")
    return errors


def _strategy_warnings(config: ScalabilityConfig) -> List[str]:
    flavor = config.flavor_scaling.enabled
    instances = config.instance_scaling.enabled

    match config.strategy:
        case ScalingStrategy.fixed if flavor and instances:
            return ["Fixed strategy with both flavor and instance scaling enabled"]
        case ScalingStrategy.horizontal if flavor:
            return ["Horizontal strategy with flavor scaling enabled"]
        case ScalingStrategy.vertical if instances:
            return ["Vertical strategy with instance scaling enabled"]
        case ScalingStrategy.full_auto if not (flavor or instances):
            return ["Full-auto strategy with no scaling enabled"]
        case _:
            return []


def validate_config(
    config: ScalabilityConfig, scale: FlavorScale = default_scale
) -> ValidationResult:
    """Check a complete configuration, including its account constraints"""
    errors = _check_order(
        scale,
        config.flavor_scaling.min_flavor,
        config.flavor_scaling.max_flavor,
        config.instance_scaling.min_instances,
        config.instance_scaling.max_instances,
    )
    errors.extend(_check_constraints(scale, config, config.constraints))

    warnings = _strategy_warnings(config)
    if config.separate_build:
        if config.build_flavor is None:
            warnings.append("Separate build enabled without a build flavor")
        elif not scale.is_valid(config.build_flavor):
            warnings.append(f"Invalid build-flavor: {config.build_flavor}")

    return ValidationResult(errors=errors, warnings=warnings)
