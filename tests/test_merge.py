from scalability_modeling.interface import FlavorScale
from scalability_modeling.interface import InstanceConfiguration
from scalability_modeling.interface import ScalabilityParameters
from scalability_modeling.merge import apply_preset
from scalability_modeling.merge import merge_scalability_parameters
from scalability_modeling.presets import get_preset


def _config(min_flavor, max_flavor, min_instances, max_instances):
    return InstanceConfiguration(
        min_flavor=min_flavor,
        max_flavor=max_flavor,
        min_instances=min_instances,
        max_instances=max_instances,
    )


def test_scale_up_max_flavor(current):
    result = merge_scalability_parameters(
        ScalabilityParameters(min_flavor="M"), current
    )
    assert result == _config("M", "M", 5, 5)


def test_scale_down_min_flavor(current):
    result = merge_scalability_parameters(
        ScalabilityParameters(max_flavor="XS"), current
    )
    assert result == _config("XS", "XS", 5, 5)


def test_augment_max_instances(current):
    result = merge_scalability_parameters(
        ScalabilityParameters(min_instances=6), current
    )
    assert result == _config("S", "S", 6, 6)


def test_diminish_min_instances(current):
    result = merge_scalability_parameters(
        ScalabilityParameters(max_instances=4), current
    )
    assert result == _config("S", "S", 4, 4)


def test_no_adjustment_when_still_ordered():
    current = _config("XS", "L", 2, 8)
    result = merge_scalability_parameters(
        ScalabilityParameters(min_flavor="M", max_instances=3), current
    )
    assert result == _config("M", "L", 2, 3)


def test_both_flavors_explicit_pass_through():
    current = _config("S", "S", 1, 1)
    result = merge_scalability_parameters(
        ScalabilityParameters(min_flavor="M", max_flavor="L"), current
    )
    assert result == _config("M", "L", 1, 1)


def test_explicit_inverted_pair_is_not_corrected():
    current = _config("S", "S", 1, 1)
    result = merge_scalability_parameters(
        ScalabilityParameters(
            min_flavor="L", max_flavor="M", min_instances=5, max_instances=3
        ),
        current,
    )
    assert result == _config("L", "M", 5, 3)


def test_both_instances_explicit():
    current = _config("S", "S", 1, 1)
    result = merge_scalability_parameters(
        ScalabilityParameters(min_instances=2, max_instances=5), current
    )
    assert result.min_instances == 2
    assert result.max_instances == 5


def test_all_parameters():
    current = _config("XS", "M", 2, 8)
    result = merge_scalability_parameters(
        ScalabilityParameters(
            min_flavor="S", max_flavor="L", min_instances=3, max_instances=10
        ),
        current,
    )
    assert result == _config("S", "L", 3, 10)


def test_empty_parameters_is_identity(current):
    assert merge_scalability_parameters(ScalabilityParameters(), current) == current
    merged = merge_scalability_parameters(
        ScalabilityParameters(min_flavor="M"), current
    )
    assert merge_scalability_parameters(ScalabilityParameters(), merged) == merged


def test_explicit_none_is_not_provided(current):
    params = ScalabilityParameters(min_flavor=None, max_instances=None)
    assert not params.provided("min_flavor")
    assert params.is_empty
    assert merge_scalability_parameters(params, current) == current


def test_setting_current_value_counts_as_provided():
    current = _config("S", "M", 1, 1)
    # max left out: it follows min up
    result = merge_scalability_parameters(
        ScalabilityParameters(min_flavor="L"), current
    )
    assert result == _config("L", "L", 1, 1)

    # max given with its current value: it stays put
    result = merge_scalability_parameters(
        ScalabilityParameters(min_flavor="L", max_flavor="M"), current
    )
    assert result == _config("L", "M", 1, 1)


def test_current_is_not_mutated(current):
    before = current.model_copy()
    merge_scalability_parameters(
        ScalabilityParameters(min_flavor="XL", max_instances=1), current
    )
    assert current == before


def test_unknown_flavor_ranks_smallest(current):
    # "huge" is not on the scale, it ranks below S and drags min down with it
    result = merge_scalability_parameters(
        ScalabilityParameters(max_flavor="huge"), current
    )
    assert result == _config("huge", "huge", 5, 5)


def test_custom_scale():
    scale = FlavorScale(names=("small", "medium", "big"))
    current = _config("small", "small", 1, 1)
    result = merge_scalability_parameters(
        ScalabilityParameters(min_flavor="big"), current, scale=scale
    )
    assert result == _config("big", "big", 1, 1)


def test_apply_preset(current):
    result = apply_preset(get_preset("prod-full-auto"), current)
    assert result == _config("S", "L", 2, 10)

    result = apply_preset(get_preset("dev-fixed"), current)
    assert result == _config("S", "S", 1, 1)


def test_requested_values():
    params = ScalabilityParameters(min_flavor="M", max_flavor=None, min_instances=0)
    assert params.requested("min_flavor") == "M"
    assert params.requested("max_flavor") is None
    assert params.requested("min_instances") == 0
    assert params.requested("max_instances") is None
