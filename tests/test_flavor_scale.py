import itertools

import pytest

from scalability_modeling.flavors import default_scale
from scalability_modeling.flavors import flavor_index
from scalability_modeling.flavors import is_flavor_greater
from scalability_modeling.flavors import is_valid_flavor
from scalability_modeling.interface import DEFAULT_FLAVOR_NAMES
from scalability_modeling.interface import FlavorScale


@pytest.mark.parametrize(
    "name,expected",
    [
        ("pico", 0),
        ("nano", 1),
        ("XS", 2),
        ("S", 3),
        ("M", 4),
        ("L", 5),
        ("XL", 6),
        ("2XL", 7),
        ("3XL", 8),
    ],
)
def test_flavor_index(name, expected):
    assert flavor_index(name) == expected


def test_unknown_flavor_ranks_smallest():
    assert flavor_index("Invalid") == 0
    assert flavor_index("") == 0
    # Case sensitive
    assert flavor_index("xl") == 0


def test_is_greater():
    assert is_flavor_greater("M", "S")
    assert not is_flavor_greater("S", "M")
    assert not is_flavor_greater("S", "S")
    # Not lexical
    assert is_flavor_greater("2XL", "XL")
    assert is_flavor_greater("3XL", "2XL")


def test_is_greater_agrees_with_index():
    for a, b in itertools.product(DEFAULT_FLAVOR_NAMES, repeat=2):
        assert is_flavor_greater(a, b) == (flavor_index(a) > flavor_index(b))


def test_index_is_monotonic():
    indexes = [flavor_index(n) for n in DEFAULT_FLAVOR_NAMES]
    assert indexes == sorted(indexes)
    assert len(set(indexes)) == len(indexes)


def test_is_valid():
    assert is_valid_flavor("S")
    assert is_valid_flavor("3XL")
    assert not is_valid_flavor("Invalid")
    assert not is_valid_flavor("")
    assert not is_valid_flavor("s")


def test_custom_scale():
    scale = FlavorScale(names=("small", "big"))
    assert scale.index_of("big") == 1
    assert scale.is_greater("big", "small")
    assert not scale.is_valid("S")
    assert len(scale) == 2
    assert len(default_scale) == 9
