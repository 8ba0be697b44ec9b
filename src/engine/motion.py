"""
Motion helpers

Timing, stagger and style building for declarative motions. Every helper
reduces to resolver calls: progress is a clamped (start, end) → (0, 1)
keyframe pair, and multi-value keyframes are spread evenly over progress.
"""

from numbers import Real
from typing import Any, Dict, Mapping, Optional, Sequence, Union

from engine.resolver import resolve
from models.easing import EasingLike, get_easing
from models.errors import InvalidSpecificationError
from models.timing import MotionTiming
from models.value_spec import KeyframePair, is_number
from utils.logger import get_category_logger, LogCategory

log = get_category_logger(LogCategory.MOTION)

AnimatedValue = Union[Real, Sequence[Real]]

DEFAULT_FPS = 30

# (key, CSS function, unit) in output order
TRANSFORM_FUNCTIONS = (
    ("x", "translateX", "px"),
    ("y", "translateY", "px"),
    ("z", "translateZ", "px"),
    ("scale", "scale", ""),
    ("scale_x", "scaleX", ""),
    ("scale_y", "scaleY", ""),
    ("rotate", "rotate", "deg"),
    ("rotate_x", "rotateX", "deg"),
    ("rotate_y", "rotateY", "deg"),
    ("rotate_z", "rotateZ", "deg"),
    ("skew", "skew", "deg"),
    ("skew_x", "skewX", "deg"),
    ("skew_y", "skewY", "deg"),
)
_TRANSFORM_KEYS = {key for key, _, _ in TRANSFORM_FUNCTIONS}
_STYLE_KEYS = {"opacity", "blur"}


def stagger_frame(frame: float, unit_index: int, stagger: float) -> float:
    """Frame as seen by unit `unit_index` when each unit starts `stagger` frames after the previous one"""
    return frame - unit_index * stagger


def motion_progress(timing: MotionTiming, frame: float, fps: float = DEFAULT_FPS) -> float:
    """
    Progress (0.0-1.0) of a motion at a frame

    Args:
        timing: Motion timing (window, delay, stagger, unit index)
        frame: Current host frame
        fps: Frames per second; default duration is one second

    Returns:
        Progress clamped to [0, 1]

    Raises:
        InvalidSpecificationError: If the motion window is empty or reversed
    """
    if timing.frames is not None:
        start, end = timing.frames
    else:
        start = 0
        end = timing.duration if timing.duration is not None else fps

    if end <= start:
        log.error("Empty motion window", start=start, end=end)
        raise InvalidSpecificationError(
            f"Motion window must end after it starts: ({start}, {end})",
            details={"start": start, "end": end},
        )

    if timing.cycle_offset is not None:
        base = timing.cycle_offset
    else:
        base = max(0, frame - timing.delay)

    relative = stagger_frame(base, timing.unit_index, timing.stagger)
    return resolve(KeyframePair((start, end), (0.0, 1.0)), relative)


def interpolate_keyframes(
    value: AnimatedValue,
    progress: float,
    easing: Optional[EasingLike] = None,
) -> float:
    """
    Value of evenly spaced keyframes at a progress

    [0, 100] is 50 at progress 0.5; [0, 100, 0] peaks at 0.5 and returns to 0.
    Easing applies inside each segment.

    Raises:
        InvalidSpecificationError: For an empty or non-numeric keyframe list
    """
    if is_number(value):
        return value

    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence) or len(value) == 0:
        raise InvalidSpecificationError(
            f"Keyframes must be a number or a non-empty sequence, got {value!r}",
        )

    if len(value) == 1:
        return value[0]

    segments = len(value) - 1
    domain = tuple(i / segments for i in range(segments + 1))
    return resolve(KeyframePair(domain, tuple(value), easing=easing), progress)


def build_transform(
    transforms: Mapping[str, AnimatedValue],
    progress: float,
    easing: Optional[EasingLike] = None,
) -> str:
    """CSS transform string, e.g. 'translateX(12px) rotate(45deg)'"""
    unknown = set(transforms) - _TRANSFORM_KEYS
    if unknown:
        log.error("Unknown transform properties", properties=", ".join(sorted(unknown)))
        raise InvalidSpecificationError(
            f"Unknown transform properties: {', '.join(sorted(unknown))}",
            details={"valid_properties": sorted(_TRANSFORM_KEYS)},
        )

    ease = get_easing(easing)
    parts = []
    for key, function, unit in TRANSFORM_FUNCTIONS:
        if key in transforms:
            value = interpolate_keyframes(transforms[key], progress, ease)
            parts.append(f"{function}({css_number(value)}{unit})")
    return " ".join(parts)


def build_motion_style(
    progress: float,
    transforms: Optional[Mapping[str, AnimatedValue]] = None,
    styles: Optional[Mapping[str, AnimatedValue]] = None,
    easing: Optional[EasingLike] = None,
    base_style: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Complete style dictionary for a motion at a progress

    Args:
        progress: Motion progress (see motion_progress)
        transforms: Transform keyframes (x, y, z, scale, rotate, skew, ...)
        styles: Visual keyframes (opacity, blur)
        easing: Easing applied to every property
        base_style: Static entries copied into the result first

    Returns:
        Dict with optional 'transform', 'opacity' and 'filter' entries
    """
    styles = styles or {}
    unknown = set(styles) - _STYLE_KEYS
    if unknown:
        log.error("Unknown style properties", properties=", ".join(sorted(unknown)))
        raise InvalidSpecificationError(
            f"Unknown style properties: {', '.join(sorted(unknown))}",
            details={"valid_properties": sorted(_STYLE_KEYS)},
        )

    ease = get_easing(easing)
    result: Dict[str, Any] = dict(base_style or {})

    transform = build_transform(transforms or {}, progress, ease)
    if transform:
        result["transform"] = transform

    if "opacity" in styles:
        result["opacity"] = interpolate_keyframes(styles["opacity"], progress, ease)

    if "blur" in styles:
        blur = interpolate_keyframes(styles["blur"], progress, ease)
        result["filter"] = f"blur({css_number(blur)}px)"

    return result


def css_number(value: float) -> str:
    """Render a number for CSS: 12.0 → '12', 0.123456 → '0.1235'"""
    rounded = round(float(value), 4)
    if rounded.is_integer():
        return str(int(rounded))
    return repr(rounded)
