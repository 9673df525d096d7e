import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any
from typing import Dict
from typing import Optional
from typing import Sequence

from scalability_modeling.cost import estimate_cost
from scalability_modeling.flavors import catalogs
from scalability_modeling.flavors import load_catalog_from_disk
from scalability_modeling.interface import InstanceConfiguration
from scalability_modeling.interface import ScalabilityParameters
from scalability_modeling.interface import ScalingConstraints
from scalability_modeling.merge import apply_preset
from scalability_modeling.merge import merge_scalability_parameters
from scalability_modeling.presets import get_default_presets
from scalability_modeling.presets import get_preset
from scalability_modeling.strategy import config_for_instance
from scalability_modeling.strategy import detect_scaling_strategy
from scalability_modeling.validation import validate_config
from scalability_modeling.validation import validate_parameters

logger = logging.getLogger(__name__)

REQUEST_FIELDS = ("min_flavor", "max_flavor", "min_instances", "max_instances")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scale",
        description=(
            "Merge new scaling bounds into an application's current bounds, "
            "validate them and estimate the monthly cost"
        ),
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--current-min-flavor", default="S")
    parser.add_argument("--current-max-flavor", default="S")
    parser.add_argument("--current-min-instances", type=int, default=1)
    parser.add_argument("--current-max-instances", type=int, default=1)

    parser.add_argument("--min-flavor", help="Requested smallest flavor")
    parser.add_argument("--max-flavor", help="Requested largest flavor")
    parser.add_argument("--min-instances", type=int, help="Requested minimum count")
    parser.add_argument("--max-instances", type=int, help="Requested maximum count")
    parser.add_argument(
        "--preset",
        choices=[p.id for p in get_default_presets()],
        help="Start from a preset, explicit bounds take precedence over it",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        help="Flavor catalog JSON to price with instead of the bundled one",
    )
    parser.add_argument("--debug", action="store_true", help="Show verbose output")
    return parser


def requested_parameters(args: Any) -> ScalabilityParameters:
    """Only the bounds given on the command line count as provided"""
    request: Dict[str, Any] = {}
    for field in REQUEST_FIELDS:
        value = getattr(args, field)
        if value is not None:
            request[field] = value
    return ScalabilityParameters(**request)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    catalog = catalogs.catalog
    if args.catalog is not None:
        catalog = load_catalog_from_disk(catalog_paths=[args.catalog])

    current = InstanceConfiguration(
        min_flavor=args.current_min_flavor,
        max_flavor=args.current_max_flavor,
        min_instances=args.current_min_instances,
        max_instances=args.current_max_instances,
    )
    params = requested_parameters(args)
    if args.preset is not None:
        # The preset becomes the starting point, explicit flags are merged on top
        preset = get_preset(args.preset)
        current = apply_preset(preset, current, scale=catalog.scale)
        if params.is_empty:
            params = preset.configuration.to_parameters()

    request_check = validate_parameters(params, scale=catalog.scale)
    if not request_check.is_valid:
        for error in request_check.errors:
            print(f"ERROR: {error}", file=sys.stderr)
        return 1

    merged = merge_scalability_parameters(params, current, scale=catalog.scale)
    logger.debug("Merged %s into %s: %s", params, current, merged)
    constraints = ScalingConstraints(
        allowed_flavors=catalog.scale.names,
        max_flavor_index=len(catalog.scale) - 1,
    )
    config = config_for_instance(merged, constraints=constraints)

    config_check = validate_config(config, scale=catalog.scale)
    if not config_check.is_valid:
        for error in config_check.errors:
            print(f"ERROR: {error}", file=sys.stderr)
        return 1

    for warning in request_check.warnings + config_check.warnings:
        print(f"WARNING: {warning}", file=sys.stderr)

    strategy = detect_scaling_strategy(config)
    result = {
        "instance": merged.model_dump(),
        "strategy": str(strategy),
        "strategy_description": strategy.description,
        "warnings": list(request_check.warnings + config_check.warnings),
        "cost": estimate_cost(config, catalog=catalog).model_dump(),
    }
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
