"""
Presentational animations built on the interpolation resolver

- base: Base animation class
- hero_title, background, staggered_reveal: Animation implementations
"""

from .base import BaseAnimation
from .hero_title import HeroTitleAnimation
from .background import BackgroundAnimation
from .staggered_reveal import StaggeredRevealAnimation

__all__ = [
    "BaseAnimation",
    "HeroTitleAnimation",
    "BackgroundAnimation",
    "StaggeredRevealAnimation",
]
