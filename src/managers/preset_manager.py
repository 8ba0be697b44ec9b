"""
Preset Manager - Named value specifications from YAML

Parses the presets: section of the configuration into value specifications.
Every preset is validated at load time; a malformed preset stops loading.
"""

from typing import Any, Dict, List

from engine.resolver import resolve
from models.enums import ExtrapolationMode, LogLevel
from models.errors import InvalidSpecificationError, PresetNotFoundError
from models.value_spec import ValueSpec
from utils.logger import get_logger, LogCategory
from utils.serialization import Serializer

log = get_logger().for_category(LogCategory.PRESET)


class PresetManager:
    """
    Registry of named value specifications

    Responsibilities:
    - Parse preset definitions from config
    - Provide lookup and resolution by name

    Example:
        presets = PresetManager({
            'hero_title.opacity': {'domain': [0, 20], 'range': [0, 1]},
            'background.blur': 0,
        })
        presets.resolve('hero_title.opacity', 5)  # 0.25
    """

    def __init__(
        self,
        data: Dict[str, Any],
        default_left: ExtrapolationMode = ExtrapolationMode.CLAMP,
        default_right: ExtrapolationMode = ExtrapolationMode.CLAMP,
    ):
        """
        Initialize with raw preset definitions

        Args:
            data: Map of preset name → number or {domain, range, ...} mapping
            default_left: Left extrapolation for presets that don't set one
            default_right: Right extrapolation for presets that don't set one

        Raises:
            InvalidSpecificationError: If any preset is malformed
        """
        self.default_left = default_left
        self.default_right = default_right
        self.presets: Dict[str, ValueSpec] = {}

        for name, raw in (data or {}).items():
            self.add(name, raw)

        log.info("Presets loaded", count=len(self.presets))

    def add(self, name: str, raw: Any) -> ValueSpec:
        """Parse and register one preset (replaces an existing one with the same name)"""
        try:
            spec = Serializer.spec_from_dict(raw, self.default_left, self.default_right)
        except InvalidSpecificationError as ex:
            log.error(f"Invalid preset '{name}'", error=ex.message)
            ex.details["preset"] = name
            raise

        self.presets[name] = spec
        if log.is_enabled(LogLevel.DEBUG):
            log.debug(f"Loaded preset: {name}", spec=Serializer.describe(spec))
        return spec

    def get(self, name: str) -> ValueSpec:
        """Get preset by name, raise PresetNotFoundError if missing"""
        try:
            return self.presets[name]
        except KeyError:
            raise PresetNotFoundError(name) from None

    def resolve(self, name: str, frame: int) -> Any:
        """Resolve a preset at a frame"""
        return resolve(self.get(name), frame)

    def names(self) -> List[str]:
        """All preset names, sorted"""
        return sorted(self.presets)

    def __contains__(self, name: str) -> bool:
        return name in self.presets

    def __len__(self) -> int:
        return len(self.presets)
