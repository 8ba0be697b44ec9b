"""
Interpolation Resolver

Maps (value specification, frame) to a scalar. Pure and stateless: no caching,
no module-level mutable state, no logging on the hot path. The same arguments
always produce the same value, in any call order, from any number of render
passes at once.

Semantics for a KeyframePair (domain d, range r):
  frame <  d[0]      → left extrapolation (CLAMP: r[0])
  frame >  d[-1]     → right extrapolation (CLAMP: r[-1])
  frame == d[-1]     → r[-1]
  d[i] <= frame < d[i+1] → r[i] + ease(t) * (r[i+1] - r[i])

Repeated domain values are steps: the post-step value applies from the step
frame on, e.g. d=(10, 10, 20), r=(0, 1, 2) gives 0 at frame 9 and 1 at frame 10.
"""

import math
from bisect import bisect_right
from typing import Any, Optional, Sequence, Union

from models.easing import EasingFunction, EasingLike, get_easing
from models.enums import ExtrapolationMode
from models.errors import InvalidSpecificationError
from models.value_spec import (
    ConstantValue,
    KeyframePair,
    ValueSpec,
    is_number,
    parse_spec,
    to_extrapolation_mode,
    validate_keyframes,
)

Number = Union[int, float]


def resolve(spec: Union[ValueSpec, Number], frame: Number) -> Any:
    """
    Resolve a value specification at a frame

    Args:
        spec: ConstantValue, KeyframePair, or a bare number (constant)
        frame: Frame number (any real number, no bounds assumed)

    Returns:
        Resolved scalar. Constants are returned unchanged.

    Raises:
        InvalidSpecificationError: If spec is not a value specification
            (use resolve_value() for inline raw forms)

    Example:
        opacity = KeyframePair((0, 20), (0, 1))
        resolve(opacity, 5)   # 0.25
        resolve(opacity, 40)  # 1
    """
    if isinstance(spec, KeyframePair):
        _check_frame(frame)
        return _resolve_keyframes(
            frame,
            spec.domain,
            spec.range,
            spec.extrapolate_left,
            spec.extrapolate_right,
            spec.easing,
        )

    if isinstance(spec, ConstantValue):
        return spec.value

    if is_number(spec):
        return spec

    raise InvalidSpecificationError(
        f"Expected a value specification, got {type(spec).__name__}",
        details={"spec": repr(spec)},
    )


def resolve_value(raw: Any, frame: Number) -> Any:
    """Parse an inline specification (number, (domain, range[, options]) or mapping) and resolve it"""
    return resolve(parse_spec(raw), frame)


def interpolate(
    frame: Number,
    domain: Sequence[Number],
    values: Sequence[Number],
    extrapolate_left: Union[str, ExtrapolationMode] = ExtrapolationMode.CLAMP,
    extrapolate_right: Union[str, ExtrapolationMode] = ExtrapolationMode.CLAMP,
    easing: Optional[EasingLike] = None,
) -> float:
    """
    Interpolate raw keyframe sequences at a frame

    Validates on every call; build a KeyframePair once when the same curve is
    resolved repeatedly.

    Args:
        frame: Frame number
        domain: Non-decreasing control frames (at least 2)
        values: Output values, same length as domain
        extrapolate_left: Mode before domain[0] ("clamp", "extend", "identity")
        extrapolate_right: Mode after domain[-1]
        easing: Easing name or callable applied per segment

    Raises:
        InvalidSpecificationError: On malformed keyframes, modes or easing
    """
    validate_keyframes(domain, values)
    _check_frame(frame)
    return _resolve_keyframes(
        frame,
        domain,
        values,
        to_extrapolation_mode(extrapolate_left),
        to_extrapolation_mode(extrapolate_right),
        get_easing(easing),
    )


def _check_frame(frame: Any) -> None:
    if not is_number(frame):
        raise TypeError(f"frame must be a number, got {type(frame).__name__}")
    if isinstance(frame, float) and math.isnan(frame):
        raise ValueError("frame must not be NaN")


def _resolve_keyframes(
    frame: Number,
    domain: Sequence[Number],
    values: Sequence[Number],
    left: ExtrapolationMode,
    right: ExtrapolationMode,
    ease: Optional[EasingFunction],
) -> Any:
    last = len(domain) - 1

    if frame < domain[0]:
        if left is ExtrapolationMode.CLAMP:
            return values[0]
        if left is ExtrapolationMode.IDENTITY:
            return frame
        return _segment_value(frame, domain, values, 0, ease)

    if frame >= domain[last]:
        if frame == domain[last] or right is ExtrapolationMode.CLAMP:
            return values[last]
        if right is ExtrapolationMode.IDENTITY:
            return frame
        return _segment_value(frame, domain, values, last - 1, ease)

    # d[0] <= frame < d[last]: the rightmost d[i] <= frame has d[i+1] > d[i]
    index = bisect_right(domain, frame) - 1
    return _segment_value(frame, domain, values, index, ease)


def _segment_value(
    frame: Number,
    domain: Sequence[Number],
    values: Sequence[Number],
    index: int,
    ease: Optional[EasingFunction],
) -> Any:
    start, end = domain[index], domain[index + 1]
    if start == end:
        return values[index + 1] if frame >= end else values[index]

    t = (frame - start) / (end - start)
    if ease is not None:
        t = ease(t)
    return values[index] + t * (values[index + 1] - values[index])
