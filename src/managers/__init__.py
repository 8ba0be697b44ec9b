"""
Managers for configuration and presets
"""

from .config_manager import ConfigManager
from .preset_manager import PresetManager

__all__ = ['ConfigManager', 'PresetManager']
