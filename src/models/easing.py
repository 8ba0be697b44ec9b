"""
Easing Curves

Reshape segment progress (t: 0.0-1.0) before a keyframe segment is mixed
linearly. Every named curve maps 0 → 0 and 1 → 1.
"""

import math
import re
from typing import Callable, Dict, Optional, Union

from models.errors import UnknownEasingError

EasingFunction = Callable[[float], float]
EasingLike = Union[str, EasingFunction]


def ease_linear(t: float) -> float:
    """
    Linear easing (constant speed)

    Args:
        t: Progress (0.0 = start, 1.0 = end)

    Returns:
        Eased progress
    """
    return t


def ease_in_quad(t: float) -> float:
    """Quadratic ease-in (slow start → fast end)"""
    return t * t


def ease_out_quad(t: float) -> float:
    """Quadratic ease-out (fast start → slow end)"""
    return 1 - (1 - t) * (1 - t)


def ease_in_out_quad(t: float) -> float:
    """Quadratic ease-in-out (slow start → fast middle → slow end)"""
    return 2 * t * t if t < 0.5 else 1 - (-2 * t + 2) ** 2 / 2


def ease_in_cubic(t: float) -> float:
    """Cubic ease-in (very slow start)"""
    return t * t * t


def ease_out_cubic(t: float) -> float:
    """Cubic ease-out (very slow end)"""
    return 1 - (1 - t) ** 3


def ease_in_out_cubic(t: float) -> float:
    """Cubic ease-in-out (very smooth acceleration/deceleration)"""
    return 4 * t ** 3 if t < 0.5 else 1 - (-2 * t + 2) ** 3 / 2


def ease_in_sine(t: float) -> float:
    return 1 - math.cos((t * math.pi) / 2)


def ease_out_sine(t: float) -> float:
    return math.sin((t * math.pi) / 2)


def ease_in_out_sine(t: float) -> float:
    return -(math.cos(math.pi * t) - 1) / 2


def ease_in_quart(t: float) -> float:
    """Quartic ease-in"""
    return t ** 4


def ease_out_quart(t: float) -> float:
    """Quartic ease-out"""
    return 1 - (1 - t) ** 4


def ease_in_out_quart(t: float) -> float:
    """Quartic ease-in-out"""
    return 8 * t ** 4 if t < 0.5 else 1 - 8 * (t - 1) ** 4


# ease_in / ease_out / ease_in_out are the quadratic curves
EASINGS: Dict[str, EasingFunction] = {
    "linear": ease_linear,
    "ease_in_quad": ease_in_quad,
    "ease_out_quad": ease_out_quad,
    "ease_in_out_quad": ease_in_out_quad,
    "ease_in_cubic": ease_in_cubic,
    "ease_out_cubic": ease_out_cubic,
    "ease_in_out_cubic": ease_in_out_cubic,
    "ease_in_sine": ease_in_sine,
    "ease_out_sine": ease_out_sine,
    "ease_in_out_sine": ease_in_out_sine,
    "ease_in_quart": ease_in_quart,
    "ease_out_quart": ease_out_quart,
    "ease_in_out_quart": ease_in_out_quart,
    "ease_in": ease_in_quad,
    "ease_out": ease_out_quad,
    "ease_in_out": ease_in_out_quad,
}

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def normalize_easing_name(name: str) -> str:
    """'easeInQuad', 'ease-in-quad' and 'EASE_IN_QUAD' all become 'ease_in_quad'"""
    return _CAMEL_BOUNDARY.sub("_", name.strip()).replace("-", "_").lower()


def get_easing(easing: Optional[EasingLike]) -> Optional[EasingFunction]:
    """
    Resolve an easing name or callable

    Args:
        easing: Registered name, callable, or None (linear)

    Returns:
        Easing callable, or None when no easing was requested

    Raises:
        UnknownEasingError: If a name is not registered
    """
    if easing is None:
        return None
    if callable(easing):
        return easing
    if isinstance(easing, str):
        key = normalize_easing_name(easing)
        if key in EASINGS:
            return EASINGS[key]
        raise UnknownEasingError(easing, sorted(EASINGS))
    raise UnknownEasingError(repr(easing), sorted(EASINGS))


def easing_name(fn: Optional[EasingFunction]) -> Optional[str]:
    """Reverse lookup of a registered easing (first matching name), None for custom curves"""
    if fn is None:
        return None
    for name, registered in EASINGS.items():
        if registered is fn:
            return name
    return None
