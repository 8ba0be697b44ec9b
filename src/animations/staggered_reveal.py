"""
Staggered Reveal Animation

Reveals a list of items one after another. Every item shares one motion
(transform and style keyframes); each item's timing is shifted by its stagger
index, so item N sees the base frame minus N * stagger.
"""

import random
from typing import Any, Dict, List, Mapping, Optional, Union

from animations.base import BaseAnimation
from engine.motion import AnimatedValue, build_motion_style, motion_progress, DEFAULT_FPS
from models.enums import StaggerDirection
from models.errors import InvalidSpecificationError
from models.timing import MotionTiming
from utils.enum_helper import EnumHelper


def stagger_order(count: int, direction: StaggerDirection, seed: int = 0) -> List[int]:
    """
    Stagger index for each item position

    Args:
        count: Number of items
        direction: FORWARD, REVERSE, CENTER or RANDOM
        seed: Shuffle seed for RANDOM

    Returns:
        List where entry i is the stagger index of item i
    """
    if direction is StaggerDirection.REVERSE:
        return [count - 1 - i for i in range(count)]

    if direction is StaggerDirection.CENTER:
        mid = count // 2
        return [abs(i - mid) for i in range(count)]

    if direction is StaggerDirection.RANDOM:
        order = list(range(count))
        random.Random(seed).shuffle(order)
        return [order.index(i) for i in range(count)]

    return list(range(count))


class StaggeredRevealAnimation(BaseAnimation):
    """
    Staggered reveal of `count` items.

    Constructor arguments:
    - count: number of items
    - timing: MotionTiming shared by all items (unit_index is replaced per item)
    - transforms: transform keyframes (x, y, scale, rotate, ...)
    - styles: visual keyframes (opacity, blur)
    - direction: stagger direction (forward, reverse, center, random)
    - fps: render fps, used when timing has neither frames nor duration
    """

    PARAMS = {}

    def __init__(
        self,
        count: int,
        timing: Optional[MotionTiming] = None,
        transforms: Optional[Mapping[str, AnimatedValue]] = None,
        styles: Optional[Mapping[str, AnimatedValue]] = None,
        direction: Union[str, StaggerDirection] = StaggerDirection.FORWARD,
        seed: int = 0,
        fps: float = DEFAULT_FPS,
    ):
        super().__init__()
        if not isinstance(count, int) or count < 0:
            raise InvalidSpecificationError(f"count must be a non-negative integer, got {count!r}")

        self.count = count
        self.timing = timing or MotionTiming()
        self.transforms = dict(transforms or {})
        self.styles = dict(styles if styles is not None else {"opacity": [0, 1]})
        self.fps = fps

        if isinstance(direction, StaggerDirection):
            self.direction = direction
        else:
            self.direction = EnumHelper.from_string(StaggerDirection, str(direction), default=None)
            if self.direction is None:
                raise InvalidSpecificationError(
                    f"Unknown stagger direction '{direction}'",
                    details={"valid_directions": EnumHelper.list_names(StaggerDirection, lowercase=True)},
                )

        self._order = stagger_order(count, self.direction, seed)
        # Validates transform/style keys up front
        build_motion_style(0.0, self.transforms, self.styles, self.timing.easing)

    def progress_at(self, index: int, frame: int) -> float:
        """Motion progress of item `index` at a frame"""
        return motion_progress(self.timing.with_unit(self._order[index]), frame, self.fps)

    def style_at(self, frame: int) -> Dict[str, Any]:
        """{"items": [style per item]}"""
        return {"items": self.item_styles(frame)}

    def item_styles(self, frame: int) -> List[Dict[str, Any]]:
        return [
            build_motion_style(
                self.progress_at(index, frame),
                self.transforms,
                self.styles,
                self.timing.easing,
            )
            for index in range(self.count)
        ]
