"""
Models package - Value specifications, timing and configuration schema
"""

from .enums import ExtrapolationMode, BackgroundVariant, StaggerDirection, LogLevel, LogCategory
from .errors import DomainError, InvalidSpecificationError, UnknownEasingError, PresetNotFoundError, ConfigError
from .value_spec import ConstantValue, KeyframePair, ValueSpec, parse_spec
from .timing import MotionTiming

__all__ = [
    'ExtrapolationMode',
    'BackgroundVariant',
    'StaggerDirection',
    'LogLevel',
    'LogCategory',
    'DomainError',
    'InvalidSpecificationError',
    'UnknownEasingError',
    'PresetNotFoundError',
    'ConfigError',
    'ConstantValue',
    'KeyframePair',
    'ValueSpec',
    'parse_spec',
    'MotionTiming',
]
