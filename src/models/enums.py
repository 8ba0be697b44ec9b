"""
Enums shared across the resolver, motion helpers and consumers
"""

from enum import Enum, auto


class ExtrapolationMode(Enum):
    """
    Behaviour of a keyframe pair outside its declared domain

    CLAMP: Hold the first/last range value (boundary clamp)
    EXTEND: Continue the first/last segment linearly
    IDENTITY: Return the frame number itself
    """
    CLAMP = auto()
    EXTEND = auto()
    IDENTITY = auto()


class BackgroundVariant(Enum):
    """Background layer styles"""
    GRADIENT = auto()   # Linear 135° gradient through three colors
    RADIAL = auto()     # Radial gradient with drifting centre
    SOLID = auto()      # Flat first color


class StaggerDirection(Enum):
    """Order in which staggered items start"""
    FORWARD = auto()    # First item first
    REVERSE = auto()    # Last item first
    CENTER = auto()     # Middle item first, spreading outwards
    RANDOM = auto()     # Seeded shuffle (same seed → same order)


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    MOTION = auto()      # Timing, stagger, motion styles
    ANIMATION = auto()   # Presentational consumers
    PRESET = auto()      # Named preset registry
    SAMPLER = auto()     # Frame range sampling
    SYSTEM = auto()      # Startup, shutdown, errors

