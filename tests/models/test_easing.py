import pytest

from models.easing import (
    EASINGS,
    ease_in_out_quad,
    ease_in_quad,
    ease_out_quad,
    easing_name,
    get_easing,
    normalize_easing_name,
)
from models.errors import InvalidSpecificationError, UnknownEasingError


@pytest.mark.parametrize("name", sorted(EASINGS))
def test_every_curve_keeps_endpoints(name):
    fn = EASINGS[name]
    assert fn(0) == pytest.approx(0)
    assert fn(1) == pytest.approx(1)


def test_quadratic_values():
    assert EASINGS["linear"](0.5) == 0.5
    assert ease_in_quad(0.5) == 0.25
    assert ease_out_quad(0.5) == 0.75
    assert ease_in_out_quad(0.25) == 0.125
    assert ease_in_out_quad(0.75) == 0.875


def test_short_names_are_quadratic():
    assert EASINGS["ease_in"] is ease_in_quad
    assert EASINGS["ease_out"] is ease_out_quad
    assert EASINGS["ease_in_out"] is ease_in_out_quad


@pytest.mark.parametrize("raw", ["easeInQuad", "ease-in-quad", "EASE_IN_QUAD", " ease_in_quad "])
def test_name_spellings(raw):
    assert normalize_easing_name(raw) == "ease_in_quad"
    assert get_easing(raw) is ease_in_quad


def test_callables_and_none_pass_through():
    custom = lambda t: t  # noqa: E731
    assert get_easing(custom) is custom
    assert get_easing(None) is None


def test_unknown_easing():
    with pytest.raises(UnknownEasingError) as info:
        get_easing("wobble")
    assert isinstance(info.value, InvalidSpecificationError)
    assert info.value.code == "UNKNOWN_EASING"
    assert "linear" in info.value.details["valid_names"]

    with pytest.raises(UnknownEasingError):
        get_easing(42)


def test_easing_name_prefers_full_names():
    assert easing_name(ease_in_quad) == "ease_in_quad"
    assert easing_name(None) is None
    assert easing_name(lambda t: t) is None
