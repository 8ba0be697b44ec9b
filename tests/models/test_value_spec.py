"""
Unit tests for value specification parsing
"""

import pytest

from models.easing import ease_in_quad
from models.enums import ExtrapolationMode
from models.errors import DomainError, InvalidSpecificationError
from models.value_spec import ConstantValue, KeyframePair, parse_spec


def test_number_becomes_constant():
    assert parse_spec(5) == ConstantValue(5)
    assert parse_spec(0.25) == ConstantValue(0.25)


def test_pair_becomes_keyframes():
    spec = parse_spec(([0, 20], [0, 1]))
    assert isinstance(spec, KeyframePair)
    assert spec.domain == (0, 20)
    assert spec.range == (0, 1)
    assert spec.start == 0
    assert spec.end == 20
    assert len(spec) == 2


def test_options_are_applied():
    spec = parse_spec([[0, 10], [0, 1], {"extrapolate_left": "EXTEND", "easing": "ease-in-quad"}])
    assert spec.extrapolate_left is ExtrapolationMode.EXTEND
    assert spec.extrapolate_right is ExtrapolationMode.CLAMP
    assert spec.easing is ease_in_quad


def test_mapping_form():
    spec = parse_spec({"domain": [0, 10], "range": [1, 2], "extrapolate_right": "identity"})
    assert spec.extrapolate_right is ExtrapolationMode.IDENTITY
    assert parse_spec({"value": 3}) == ConstantValue(3)


def test_defaults_fill_missing_modes():
    spec = parse_spec(
        {"domain": [0, 10], "range": [1, 2], "extrapolate_left": "clamp"},
        default_left=ExtrapolationMode.EXTEND,
        default_right=ExtrapolationMode.EXTEND,
    )
    assert spec.extrapolate_left is ExtrapolationMode.CLAMP
    assert spec.extrapolate_right is ExtrapolationMode.EXTEND


def test_specs_pass_through():
    spec = KeyframePair((0, 1), (0, 1))
    assert parse_spec(spec) is spec


@pytest.mark.parametrize("raw", [
    "fast",
    None,
    True,
    [[0, 10]],
    [[0, 10], [0, 1], {"easing": "linear"}, "extra"],
    [[0, 10], [0, 1], "linear"],
    {"domain": [0, 10]},
    {"value": "big"},
    {"domain": [0, 10], "range": [0, 1], "speed": 2},
    ("0,10", [0, 1]),
])
def test_malformed_raw_forms_fail(raw):
    with pytest.raises(InvalidSpecificationError):
        parse_spec(raw)


def test_error_carries_details():
    with pytest.raises(InvalidSpecificationError) as info:
        KeyframePair((0, 10, 5), (0, 1, 2))

    err = info.value
    assert isinstance(err, DomainError)
    assert err.code == "INVALID_SPECIFICATION"
    assert err.details["index"] == 2
    assert err.details["domain"] == [0, 10, 5]


def test_equal_specs_compare_equal_and_hash():
    a = KeyframePair([0, 10], [0, 1])
    b = KeyframePair((0, 10), (0, 1))
    assert a == b
    assert hash(a) == hash(b)
