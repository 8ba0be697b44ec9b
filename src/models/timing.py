"""
Motion timing model

Describes when a motion runs relative to the host frame counter. Timing is
turned into a 0..1 progress value by engine.motion.motion_progress().
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from models.easing import EasingFunction, get_easing
from models.errors import InvalidSpecificationError
from models.value_spec import is_number


@dataclass(frozen=True)
class MotionTiming:
    """
    Timing configuration for a motion

    Attributes:
        frames: Explicit (start, end) window; overrides duration
        duration: Motion length in frames when frames is not given
                  (None = one second at the render fps)
        delay: Frames to wait before the motion starts
        stagger: Extra delay per unit (item, word, character)
        unit_index: Index of the unit this timing applies to
        easing: Easing name or callable applied to progress
        cycle_offset: Fixed base frame (replaces frame - delay) for looping motions

    Examples:
        # Fade in over 30 frames after a 10 frame delay
        MotionTiming(duration=30, delay=10)

        # Third list item, 5 frames behind the previous one
        MotionTiming(duration=20, stagger=5, unit_index=2, easing="ease_out")
    """
    frames: Optional[Tuple[float, float]] = None
    duration: Optional[float] = None
    delay: float = 0
    stagger: float = 0
    unit_index: int = 0
    easing: Optional[EasingFunction] = None
    cycle_offset: Optional[float] = None

    def __post_init__(self):
        if self.frames is not None:
            if len(self.frames) != 2 or not all(is_number(f) for f in self.frames):
                raise InvalidSpecificationError(
                    f"frames must be a (start, end) pair, got {self.frames!r}",
                    details={"frames": self.frames},
                )
            object.__setattr__(self, "frames", tuple(self.frames))

        for name in ("duration", "cycle_offset"):
            value = getattr(self, name)
            if value is not None and not is_number(value):
                raise InvalidSpecificationError(f"{name} must be a number, got {value!r}")

        for name in ("delay", "stagger", "unit_index"):
            if not is_number(getattr(self, name)):
                raise InvalidSpecificationError(f"{name} must be a number, got {getattr(self, name)!r}")

        object.__setattr__(self, "easing", get_easing(self.easing))

    def with_unit(self, unit_index: int) -> "MotionTiming":
        """Copy of this timing for another unit (item index)"""
        return MotionTiming(
            frames=self.frames,
            duration=self.duration,
            delay=self.delay,
            stagger=self.stagger,
            unit_index=unit_index,
            easing=self.easing,
            cycle_offset=self.cycle_offset,
        )
