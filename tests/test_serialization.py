import pytest

from models.enums import ExtrapolationMode, LogLevel
from models.errors import InvalidSpecificationError
from models.value_spec import ConstantValue, KeyframePair
from utils.serialization import Serializer


def test_enum_conversion():
    assert Serializer.enum_to_str(ExtrapolationMode.EXTEND) == "EXTEND"
    assert Serializer.enum_to_str(None) is None
    assert Serializer.str_to_enum("extend", ExtrapolationMode) is ExtrapolationMode.EXTEND
    assert Serializer.str_to_enum(LogLevel.WARN, LogLevel) is LogLevel.WARN

    with pytest.raises(ValueError):
        Serializer.str_to_enum("mirror", ExtrapolationMode)


def test_constant_to_dict():
    assert Serializer.spec_to_dict(ConstantValue(3)) == {"value": 3}


def test_keyframes_to_dict():
    spec = KeyframePair(
        (0, 20), (0, 1),
        extrapolate_right=ExtrapolationMode.EXTEND,
        easing="easeOutCubic",
    )
    assert Serializer.spec_to_dict(spec) == {
        "domain": [0, 20],
        "range": [0, 1],
        "extrapolate_left": "clamp",
        "extrapolate_right": "extend",
        "easing": "ease_out_cubic",
    }


def test_dict_form_rebuilds_an_equal_spec():
    spec = KeyframePair((0, 10, 10, 20), (0, 1, 2, 3), easing="ease_in_sine")
    assert Serializer.spec_from_dict(Serializer.spec_to_dict(spec)) == spec


def test_custom_easing_cannot_be_serialized():
    spec = KeyframePair((0, 1), (0, 1), easing=lambda t: t)
    with pytest.raises(InvalidSpecificationError):
        Serializer.spec_to_dict(spec)


def test_describe():
    assert Serializer.describe(ConstantValue(0)) == "constant 0"
    assert Serializer.describe(KeyframePair((0, 20), (0, 1))) == "0→0, 20→1"

    spec = KeyframePair((0, 20), (0, 1), extrapolate_left=ExtrapolationMode.EXTEND, easing="ease_in")
    assert Serializer.describe(spec) == "0→0, 20→1 | ease_in_quad | left=extend"
