from __future__ import annotations

from typing import Annotated
from typing import Any
from typing import Dict
from typing import Iterator
from typing import Mapping
from typing import Optional
from typing import Sequence
from typing import Tuple

import numpy as np
from pydantic import AfterValidator
from pydantic import BaseModel
from pydantic import computed_field
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator
from pydantic import PlainSerializer

from scalability_modeling.enum_utils import DescribedStrEnum

# Every cost the engine reports is expressed in this currency
CURRENCY = "EUR"
HOURS_PER_MONTH = 24 * 30
# Plan-tier ceiling used when the caller does not supply one
DEFAULT_MAX_ALLOWED_INSTANCES = 40
DEFAULT_FLAVOR_NAMES: Tuple[str, ...] = (
    "pico",
    "nano",
    "XS",
    "S",
    "M",
    "L",
    "XL",
    "2XL",
    "3XL",
)


class ExcludeUnsetModel(BaseModel):
    def model_dump(self, *args, **kwargs):
        if "exclude_unset" not in kwargs:
            kwargs["exclude_unset"] = True
        return super().model_dump(*args, **kwargs)

    def model_dump_json(self, *args, **kwargs):
        if "exclude_unset" not in kwargs:
            kwargs["exclude_unset"] = True
        return super().model_dump_json(*args, **kwargs)


class FrozenMapping(Mapping[str, Any]):
    """Read-only, hashable mapping for keyed fields of frozen models

    Values must be hashable themselves (numbers, strings or frozen models).
    """

    __slots__ = ("_data",)

    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        self._data: Dict[str, Any] = dict(data or {})

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def __repr__(self) -> str:
        return f"FrozenMapping({self._data!r})"


def _freeze(value: Mapping[str, Any]) -> FrozenMapping:
    return FrozenMapping(value)


def _thaw(value: Mapping[str, Any]) -> Dict[str, Any]:
    return dict(value)


###############################################################################
#              Models (structs) for how we describe intervals                 #
###############################################################################


class Interval(ExcludeUnsetModel):
    low: float
    mid: float
    high: float
    # How confident are we of this interval
    confidence: float = 1.0

    minimum_value: Optional[float] = None
    maximum_value: Optional[float] = None
    model_config = ConfigDict(frozen=True)

    @property
    def minimum(self) -> float:
        if self.minimum_value is None:
            return self.low
        return self.minimum_value

    @property
    def maximum(self) -> float:
        if self.maximum_value is None:
            return self.high
        return self.maximum_value


def interval(samples: Sequence[float], low_p: int = 5, high_p: int = 95) -> Interval:
    p = np.percentile(a=samples, q=[0, low_p, 50, high_p, 100])
    conf = (high_p - low_p) / 100
    return Interval(
        low=float(p[1]),
        mid=float(p[2]),
        high=float(p[3]),
        minimum_value=float(p[0]),
        maximum_value=float(p[4]),
        confidence=conf,
    )


###############################################################################
#              Models (structs) for how we describe flavors                   #
###############################################################################


class Flavor(ExcludeUnsetModel):
    """Represents a named compute size (e.g. "S" or "2XL") and its price

    Prices are per running hour of a single instance.
    """

    name: str
    mem_mib: int = Field(title="Memory in MiB")
    cpus: int
    gpus: int = 0
    disk_gib: int = 0
    price: float = Field(
        default=0,
        title="Price per hour",
        description=f"Hourly price of one instance in {CURRENCY}",
    )
    available: bool = True
    microservice: bool = False
    machine_learning: bool = False

    model_config = ConfigDict(frozen=True)

    @property
    def monthly_price(self) -> float:
        return self.price * HOURS_PER_MONTH


class FlavorScale(ExcludeUnsetModel):
    """The total order over flavor names, index 0 is the smallest

    Flavor names do not sort lexically by power ("2XL" < "XL" as strings) so
    all comparisons go through the position in this sequence.
    """

    names: Tuple[str, ...] = DEFAULT_FLAVOR_NAMES

    model_config = ConfigDict(frozen=True)

    def index_of(self, name: str) -> int:
        """Position of the flavor, unknown flavors rank as the smallest"""
        try:
            return self.names.index(name)
        except ValueError:
            return 0

    def is_greater(self, a: str, b: str) -> bool:
        return self.index_of(a) > self.index_of(b)

    def is_valid(self, name: str) -> bool:
        return name in self.names

    def __len__(self) -> int:
        return len(self.names)


class FlavorCatalog(ExcludeUnsetModel):
    """Snapshot of the flavors a provider offers, ordered smallest first"""

    flavors: Tuple[Flavor, ...] = ()
    currency: str = CURRENCY

    model_config = ConfigDict(frozen=True)

    @field_validator("currency")
    @classmethod
    def _engine_currency(cls, currency: str) -> str:
        if currency != CURRENCY:
            raise ValueError(
                f"Catalog priced in {currency}, only {CURRENCY} prices are supported"
            )
        return currency

    @model_validator(mode="after")
    def _unique_names(self) -> "FlavorCatalog":
        seen = set()
        for f in self.flavors:
            if f.name in seen:
                raise ValueError(
                    f"Duplicate flavor {f.name}! A catalog lists each flavor once"
                )
            seen.add(f.name)
        return self

    @property
    def scale(self) -> FlavorScale:
        return FlavorScale(names=tuple(f.name for f in self.flavors))

    def flavor(self, name: str) -> Flavor:
        for f in self.flavors:
            if f.name == name:
                return f
        raise KeyError(f"Unknown flavor {name}")

    def price(self, name: str) -> Optional[float]:
        try:
            return self.flavor(name).price
        except KeyError:
            return None


###############################################################################
#              Models (structs) for scaling requests and state                #
###############################################################################


class InstanceConfiguration(ExcludeUnsetModel):
    """The scaling bounds an application currently runs with"""

    min_flavor: str
    max_flavor: str
    min_instances: int
    max_instances: int

    model_config = ConfigDict(frozen=True)


class ScalabilityParameters(ExcludeUnsetModel):
    """A partial scaling request

    Only the fields a caller passes explicitly count as provided, which is
    tracked by pydantic in ``model_fields_set``. Leaving a field out and
    setting it to the current value are different requests: only an
    untouched bound may be moved by the merge.
    """

    min_flavor: Optional[str] = None
    max_flavor: Optional[str] = None
    min_instances: Optional[int] = None
    max_instances: Optional[int] = None

    model_config = ConfigDict(frozen=True)

    def provided(self, field: str) -> bool:
        return field in self.model_fields_set and getattr(self, field) is not None

    def requested(self, field: str) -> Optional[Any]:
        """The value of ``field`` if it was provided, otherwise None"""
        return getattr(self, field) if self.provided(field) else None

    @property
    def is_empty(self) -> bool:
        return not any(self.provided(f) for f in type(self).model_fields)


class ScalingStrategy(DescribedStrEnum):
    """Which scaling dimensions an application uses"""

    fixed = "fixed", "Neither the flavor nor the instance count changes"
    horizontal = "horizontal", "Only the number of instances changes"
    vertical = "vertical", "Only the flavor changes"
    full_auto = "full-auto", "Both the flavor and the number of instances change"


class PresetCategory(DescribedStrEnum):
    """Deployment profile a preset is meant for"""

    development = "Development", "Single small instance for day to day development"
    staging = "Staging", "Pre-production environment with light horizontal scaling"
    production = "Production", "Highly available production workloads"
    high_traffic = "High Traffic", "Large flavors and many instances for heavy load"
    cost_optimized = "Cost Optimized", "Small flavors favouring a low monthly bill"


class FlavorScaling(ExcludeUnsetModel):
    min_flavor: Optional[str] = None
    max_flavor: Optional[str] = None
    enabled: bool = False

    model_config = ConfigDict(frozen=True)


class InstanceScaling(ExcludeUnsetModel):
    min_instances: Optional[int] = None
    max_instances: Optional[int] = None
    enabled: bool = False

    model_config = ConfigDict(frozen=True)


class BuildFlavorConfig(ExcludeUnsetModel):
    flavor: str
    enabled: bool = False

    model_config = ConfigDict(frozen=True)


BuildFlavors = Annotated[
    Mapping[str, BuildFlavorConfig],
    AfterValidator(_freeze),
    PlainSerializer(_thaw, return_type=Dict[str, BuildFlavorConfig]),
]


class ScalingConstraints(ExcludeUnsetModel):
    """Account level limits a configuration has to respect"""

    max_allowed_instances: int = DEFAULT_MAX_ALLOWED_INSTANCES
    allowed_flavors: Tuple[str, ...] = DEFAULT_FLAVOR_NAMES
    min_flavor_index: int = 0
    max_flavor_index: int = len(DEFAULT_FLAVOR_NAMES) - 1

    model_config = ConfigDict(frozen=True)


class ScalabilityConfig(ExcludeUnsetModel):
    """Complete description of how an application may scale"""

    strategy: ScalingStrategy
    flavor_scaling: FlavorScaling = FlavorScaling()
    instance_scaling: InstanceScaling = InstanceScaling()
    build_flavors: BuildFlavors = FrozenMapping()
    constraints: ScalingConstraints = ScalingConstraints()
    separate_build: bool = False
    build_flavor: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    def to_parameters(self) -> ScalabilityParameters:
        """The bounds this configuration sets, as a scaling request"""
        bounds = {
            "min_flavor": self.flavor_scaling.min_flavor,
            "max_flavor": self.flavor_scaling.max_flavor,
            "min_instances": self.instance_scaling.min_instances,
            "max_instances": self.instance_scaling.max_instances,
        }
        return ScalabilityParameters(
            **{k: v for k, v in bounds.items() if v is not None}
        )


###############################################################################
#              Models (structs) for results handed back to callers            #
###############################################################################


class ValidationResult(ExcludeUnsetModel):
    errors: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)

    @computed_field(return_type=bool)  # type: ignore
    @property
    def is_valid(self):
        return len(self.errors) == 0


Breakdown = Annotated[
    Mapping[str, float],
    AfterValidator(_freeze),
    PlainSerializer(_thaw, return_type=Dict[str, float]),
]


class CostEstimate(ExcludeUnsetModel):
    monthly_min: float
    monthly_max: float
    currency: str = CURRENCY
    breakdown: Breakdown = FrozenMapping()

    model_config = ConfigDict(frozen=True)


class Preset(ExcludeUnsetModel):
    """A named starting point for a scalability configuration"""

    id: str
    name: str
    description: str
    category: PresetCategory
    configuration: ScalabilityConfig
    applicable_types: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)
