"""
FrameSampler - resolves a set of named value specifications over many frames.

Used for previews and scrubbing: frames may be requested in any order and any
number of times; rows come back in request order. Sampling keeps no state
between calls.
"""

from typing import Any, Dict, Iterable, List, Mapping

from engine.resolver import resolve
from models.errors import InvalidSpecificationError
from models.value_spec import ValueSpec, parse_spec
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SAMPLER)


class FrameSampler:
    """
    Resolve several named specifications for a sequence of frames

    Example:
        sampler = FrameSampler({"opacity": ([0, 20], [0, 1]), "blur": 0})
        sampler.sample([0, 10, 20])
        # [{"frame": 0, "opacity": 0, "blur": 0}, {"frame": 10, ...}, ...]
    """

    def __init__(self, specs: Mapping[str, Any]):
        """
        Args:
            specs: Map of column name → value specification (or raw form)
        """
        if "frame" in specs:
            raise InvalidSpecificationError("'frame' is reserved for the frame column")

        self.specs: Dict[str, ValueSpec] = {name: parse_spec(raw) for name, raw in specs.items()}
        log.debug("FrameSampler initialized", columns=", ".join(self.specs) or "-")

    @property
    def columns(self) -> List[str]:
        return ["frame", *self.specs]

    def sample_frame(self, frame: int) -> Dict[str, Any]:
        row: Dict[str, Any] = {"frame": frame}
        for name, spec in self.specs.items():
            row[name] = resolve(spec, frame)
        return row

    def sample(self, frames: Iterable[int]) -> List[Dict[str, Any]]:
        """One row per requested frame, in request order"""
        return [self.sample_frame(frame) for frame in frames]


def frame_range(text: str) -> range:
    """
    Parse 'start:stop[:step]' (stop exclusive) or a single frame 'N'

    Examples:
        frame_range("0:40:5")  # range(0, 40, 5)
        frame_range("12")      # range(12, 13)

    Raises:
        ValueError: On malformed text or a zero step
    """
    parts = text.strip().split(":")
    try:
        numbers = [int(p) for p in parts]
    except ValueError:
        raise ValueError(f"Invalid frame range '{text}', expected start:stop[:step]") from None

    if len(numbers) == 1:
        return range(numbers[0], numbers[0] + 1)
    if len(numbers) in (2, 3):
        step = numbers[2] if len(numbers) == 3 else 1
        if step == 0:
            raise ValueError(f"Invalid frame range '{text}': step must not be 0")
        return range(numbers[0], numbers[1], step)

    raise ValueError(f"Invalid frame range '{text}', expected start:stop[:step]")
