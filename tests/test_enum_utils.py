import pytest
from pydantic import BaseModel

from scalability_modeling.interface import PresetCategory
from scalability_modeling.interface import ScalingStrategy

DESCRIBED_ENUMS = [ScalingStrategy, PresetCategory]


@pytest.mark.parametrize("enum_class", DESCRIBED_ENUMS)
def test_enums_are_described(enum_class):
    """Every member documents itself rather than inheriting the class doc"""
    enum_name = enum_class.__name__
    assert enum_class.__doc__, f"{enum_name} must have a class docstring"

    for member in enum_class:
        assert member.description.strip(), f"{enum_name}.{member.name} is bare"
        assert member.__doc__ == member.description
        assert member.__doc__ != enum_class.__doc__


def test_value_is_the_string():
    assert str(PresetCategory.high_traffic) == "High Traffic"
    assert f"{PresetCategory.cost_optimized}" == "Cost Optimized"
    assert PresetCategory.staging == "Staging"
    assert ScalingStrategy("full-auto") is ScalingStrategy.full_auto
    assert ScalingStrategy.vertical.description == "Only the flavor changes"


def test_description_is_not_part_of_the_value():
    with pytest.raises(ValueError):
        ScalingStrategy("Only the flavor changes")


class _Holder(BaseModel):
    strategy: ScalingStrategy


def test_pydantic_round_trip():
    holder = _Holder(strategy="horizontal")
    assert holder.strategy is ScalingStrategy.horizontal
    assert holder.model_dump(mode="json") == {"strategy": "horizontal"}
