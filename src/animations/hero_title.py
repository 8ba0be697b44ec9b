"""
Hero Title Animation

Large title that fades in while sliding up into place.
"""

from typing import Any, Dict

from animations.base import BaseAnimation
from engine.motion import css_number


class HeroTitleAnimation(BaseAnimation):
    """
    Hero title: opacity and vertical offset resolved per frame.

    Supported parameters:
    - opacity: default fade 0 → 1 over frames 0-20
    - translate_y: default offset 16px → 0px over frames 0-20
    """

    PARAMS = {
        "opacity": ([0, 20], [0, 1]),
        "translate_y": ([0, 20], [16, 0]),
    }

    def style_at(self, frame: int) -> Dict[str, Any]:
        return {
            "opacity": self.value_at("opacity", frame),
            "transform": f"translateY({css_number(self.value_at('translate_y', frame))}px)",
        }
