"""
Background Animation

Full-frame gradient or solid layer with a slowly drifting radial centre and
an optional animated blur.
"""

from typing import Any, Dict, Optional, Sequence, Union

from animations.base import BaseAnimation
from engine.motion import css_number
from models.enums import BackgroundVariant
from models.errors import InvalidSpecificationError
from utils.enum_helper import EnumHelper
from utils.logger import LogCategory, get_category_logger

log = get_category_logger(LogCategory.ANIMATION)

DEFAULT_COLORS = ("#0f172a", "#1e293b", "#6366f1")


class BackgroundAnimation(BaseAnimation):
    """
    Background layer.

    Colors are passed through untouched (no color-space handling).

    Supported parameters:
    - blur: blur radius in px (default 0, no filter emitted while 0)
    - drift: radial centre drift progress (default 0 → 1 over frames 0-120)
    """

    PARAMS = {
        "blur": 0,
        "drift": ([0, 120], [0, 1]),
    }

    def __init__(
        self,
        variant: Union[str, BackgroundVariant] = BackgroundVariant.GRADIENT,
        colors: Optional[Sequence[str]] = None,
        **params: Any,
    ):
        super().__init__(**params)
        self.variant = self._parse_variant(variant)
        self.colors = tuple(colors) if colors is not None else DEFAULT_COLORS

        if len(self.colors) != 3:
            raise InvalidSpecificationError(
                f"Background needs exactly 3 colors, got {len(self.colors)}",
                details={"colors": list(self.colors)},
            )

        log.debug("Background created", variant=self.variant.name, colors=", ".join(self.colors))

    @staticmethod
    def _parse_variant(variant: Union[str, BackgroundVariant]) -> BackgroundVariant:
        if isinstance(variant, BackgroundVariant):
            return variant
        parsed = EnumHelper.from_string(BackgroundVariant, str(variant), default=None)
        if parsed is None:
            raise InvalidSpecificationError(
                f"Unknown background variant '{variant}'",
                details={"valid_variants": EnumHelper.list_names(BackgroundVariant, lowercase=True)},
            )
        return parsed

    def background_image(self, frame: int) -> str:
        first, middle, last = self.colors

        if self.variant is BackgroundVariant.SOLID:
            return ""

        if self.variant is BackgroundVariant.RADIAL:
            drift = self.value_at("drift", frame)
            x = css_number(30 + drift * 20)
            y = css_number(40 + drift * 10)
            return f"radial-gradient(circle at {x}% {y}%, {first}, {middle}, {last})"

        return f"linear-gradient(135deg, {first}, {middle} 45%, {last})"

    def style_at(self, frame: int) -> Dict[str, Any]:
        style: Dict[str, Any] = {
            "position": "absolute",
            "inset": 0,
            "background_color": self.colors[0],
            "background_image": self.background_image(frame),
        }

        blur = self.value_at("blur", frame)
        if blur:
            style["filter"] = f"blur({css_number(blur)}px)"

        if self.variant is not BackgroundVariant.SOLID:
            style["transform"] = "scale(1.05)"

        return style
