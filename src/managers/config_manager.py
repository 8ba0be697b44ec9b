"""
Config Manager

Main configuration manager with include system support.
Loads modular YAML files, validates the merged document and initializes the
preset registry.
"""

from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml
from pydantic import ValidationError

from managers.preset_manager import PresetManager
from models.config import AppConfig, LoggingSettings, RenderSettings, ResolverSettings
from models.errors import ConfigError
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.CONFIG)

SRC_DIR = Path(__file__).parent.parent


class ConfigManager:
    """
    Main configuration manager with include system support

    Loads config.yaml and processes include: directive to load modular YAML files.
    Validates the merged data against AppConfig and builds a PresetManager.

    Example:
        config = ConfigManager()
        config.load()

        fps = config.render.fps
        opacity = config.preset_manager.get("hero_title.opacity")
    """

    def __init__(
        self,
        config_path: Union[str, Path] = "config/config.yaml",
        defaults_path: Union[str, Path] = "config/factory_defaults.yaml",
    ):
        """
        Initialize ConfigManager

        Args:
            config_path: Path to main config.yaml (absolute, or relative to src/)
            defaults_path: Path to factory defaults fallback
        """
        self.config_path = self._resolve_path(config_path)
        self.factory_defaults_path = self._resolve_path(defaults_path)
        self.data: Dict = {}

        # Set by load()
        self.config: Optional[AppConfig] = None
        self.preset_manager: Optional[PresetManager] = None

    @staticmethod
    def _resolve_path(path: Union[str, Path]) -> Path:
        path = Path(path)
        return path if path.is_absolute() else SRC_DIR / path

    def load(self) -> AppConfig:
        """
        Load YAML configuration with include system support

        Process:
        1. Load main config.yaml
        2. If it has 'include:' list, load and merge those files
        3. Otherwise treat as monolithic config
        4. Fallback to factory defaults when the main file can't be read
        5. Validate, then initialize the preset registry

        Returns:
            Validated AppConfig

        Raises:
            ConfigError: If no configuration can be read or validation fails
            InvalidSpecificationError: If a preset is malformed
        """
        try:
            main_config = self._read_yaml(self.config_path)

            if 'include' in main_config:
                log.info("Using include-based configuration")
                includes = main_config.pop('include') or []
                self.data = self._load_with_includes(includes, self.config_path.parent)
                # Keys in the main file win over included ones
                self.data.update(main_config)
            else:
                log.info("Using monolithic configuration")
                self.data = main_config

        except (OSError, yaml.YAMLError) as ex:
            log.error(f"Failed to load {self.config_path.name}", error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")

            try:
                self.data = self._read_yaml(self.factory_defaults_path)
            except (OSError, yaml.YAMLError) as defaults_ex:
                raise ConfigError(
                    "No usable configuration found",
                    details={
                        "config_path": str(self.config_path),
                        "defaults_path": str(self.factory_defaults_path),
                        "error": str(defaults_ex),
                    },
                ) from defaults_ex

        self.config = self._validate(self.data)
        self.preset_manager = PresetManager(
            self.config.presets,
            default_left=self.config.resolver.left_mode,
            default_right=self.config.resolver.right_mode,
        )

        log.info(
            "Configuration ready",
            fps=self.config.render.fps,
            presets=len(self.preset_manager),
        )
        return self.config

    @staticmethod
    def _read_yaml(path: Path) -> Dict:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"{path.name} must contain a mapping at top level",
                details={"path": str(path), "type": type(data).__name__},
            )
        return data

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict:
        """
        Load and merge multiple YAML files from include list

        Args:
            include_list: List of filenames to load (e.g., ["resolver.yaml", "presets.yaml"])
            config_dir: Directory containing config files

        Returns:
            Merged config dict (later files override earlier top-level keys,
            presets sections are merged)
        """
        merged: Dict = {}

        for filename in include_list:
            filepath = config_dir / filename
            try:
                file_data = self._read_yaml(filepath)
            except FileNotFoundError:
                log.error(f"File not found: {filename}")
                raise

            presets = file_data.pop('presets', None) or {}
            merged.update(file_data)
            if presets:
                merged.setdefault('presets', {}).update(presets)
            log.info(f"Loaded {filename}", keys=str(list(file_data.keys()) + (['presets'] if presets else [])))

        log.info("Config merge complete", total_keys=len(merged), keys=str(list(merged.keys())[:10]))
        return merged

    @staticmethod
    def _validate(data: Dict) -> AppConfig:
        try:
            return AppConfig.model_validate(data)
        except ValidationError as ex:
            errors = [
                f"{'.'.join(str(x) for x in error['loc'])}: {error['msg']}"
                for error in ex.errors()
            ]
            log.error("Configuration validation failed", details=errors)
            raise ConfigError(
                "Configuration validation failed",
                details={"errors": errors},
            ) from ex

    # ------------------------------------------------------------
    # Section accessors
    # ------------------------------------------------------------

    def _require_loaded(self) -> AppConfig:
        if self.config is None:
            raise ConfigError("Configuration not loaded, call load() first")
        return self.config

    @property
    def render(self) -> RenderSettings:
        return self._require_loaded().render

    @property
    def logging(self) -> LoggingSettings:
        return self._require_loaded().logging

    @property
    def resolver(self) -> ResolverSettings:
        return self._require_loaded().resolver
