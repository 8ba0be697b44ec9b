"""
Configuration schema - Pydantic models for the merged YAML configuration

config.yaml (plus its include: files) is validated against AppConfig after
merging. Presets are kept raw here and parsed into value specifications by
PresetManager, which knows the resolver defaults.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.enums import ExtrapolationMode, LogLevel
from utils.enum_helper import EnumHelper


class RenderSettings(BaseModel):
    """Output format of the host renderer"""
    model_config = ConfigDict(extra="forbid")

    fps: int = Field(30, gt=0, description="Frames per second")
    width: int = Field(1920, gt=0, description="Frame width in px")
    height: int = Field(1080, gt=0, description="Frame height in px")


class LoggingSettings(BaseModel):
    """Logger configuration"""
    model_config = ConfigDict(extra="forbid")

    level: str = Field("INFO", description="Minimum level: DEBUG, INFO, WARN, ERROR")
    use_colors: bool = Field(True, description="ANSI colors in terminal output")

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        return EnumHelper.from_string(LogLevel, value).name

    @property
    def log_level(self) -> LogLevel:
        return LogLevel[self.level]


class ResolverSettings(BaseModel):
    """Defaults applied to presets that don't name their extrapolation modes"""
    model_config = ConfigDict(extra="forbid")

    default_extrapolate_left: str = Field("clamp", description="clamp, extend or identity")
    default_extrapolate_right: str = Field("clamp", description="clamp, extend or identity")

    @field_validator("default_extrapolate_left", "default_extrapolate_right")
    @classmethod
    def _known_mode(cls, value: str) -> str:
        return EnumHelper.from_string(ExtrapolationMode, value).name.lower()

    @property
    def left_mode(self) -> ExtrapolationMode:
        return EnumHelper.from_string(ExtrapolationMode, self.default_extrapolate_left)

    @property
    def right_mode(self) -> ExtrapolationMode:
        return EnumHelper.from_string(ExtrapolationMode, self.default_extrapolate_right)


class AppConfig(BaseModel):
    """Complete merged configuration"""
    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "render": {"fps": 30, "width": 1920, "height": 1080},
                "logging": {"level": "INFO", "use_colors": True},
                "resolver": {"default_extrapolate_left": "clamp", "default_extrapolate_right": "clamp"},
                "presets": {"hero_title.opacity": {"domain": [0, 20], "range": [0, 1]}},
            }
        },
    )

    render: RenderSettings = Field(default_factory=RenderSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    resolver: ResolverSettings = Field(default_factory=ResolverSettings)
    presets: Dict[str, Any] = Field(default_factory=dict, description="Named raw value specifications")

    @field_validator("presets", mode="before")
    @classmethod
    def _empty_presets(cls, value: Any) -> Any:
        # "presets:" with no entries loads as None
        return {} if value is None else value
