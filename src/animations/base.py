"""
Base Animation Class

All presentational consumers inherit from BaseAnimation and implement style_at().
"""

from typing import Any, Dict, Iterable, Iterator, Tuple

from engine.resolver import resolve
from models.errors import InvalidSpecificationError
from models.value_spec import ValueSpec, parse_spec


class BaseAnimation:
    """
    Base class for frame-addressable animations

    An animation declares each animated property once as a value specification
    and derives a style dictionary for any frame on request.

    IMPORTANT:
    - Instances hold no per-frame state; style_at() may be called for any
      frame, in any order, any number of times.
    - PARAMS lists the animated properties with their default raw specs;
      overrides passed to __init__ are parsed and validated immediately.

    Subclasses MUST implement style_at(frame) which returns a dict of style values.
    """
    PARAMS: Dict[str, Any] = {}

    def __init__(self, **params: Any):
        unknown = set(params) - set(self.PARAMS)
        if unknown:
            raise InvalidSpecificationError(
                f"Unknown parameters for {type(self).__name__}: {', '.join(sorted(unknown))}",
                details={"valid_params": sorted(self.PARAMS)},
            )

        self.params: Dict[str, ValueSpec] = {
            name: parse_spec(params.get(name, default))
            for name, default in self.PARAMS.items()
        }

    # ------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------

    def style_at(self, frame: int) -> Dict[str, Any]:
        raise NotImplementedError

    def render(self, frames: Iterable[int]) -> Iterator[Tuple[int, Dict[str, Any]]]:
        """Yield (frame, style) for each requested frame (seeking and repeats are fine)"""
        for frame in frames:
            yield frame, self.style_at(frame)

    # ------------------------------------------------------------
    # Parameter helpers
    # ------------------------------------------------------------

    def get_param(self, name: str) -> ValueSpec:
        return self.params[name]

    def set_param(self, name: str, raw: Any) -> None:
        if name not in self.PARAMS:
            raise InvalidSpecificationError(f"Unknown parameter '{name}' for {type(self).__name__}")
        self.params[name] = parse_spec(raw)

    def value_at(self, name: str, frame: int) -> Any:
        """Resolve one animated property at a frame"""
        return resolve(self.params[name], frame)
