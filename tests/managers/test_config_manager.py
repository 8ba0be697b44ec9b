"""
Tests for ConfigManager and PresetManager
"""

import pytest

from managers import ConfigManager, PresetManager
from models.enums import ExtrapolationMode, LogLevel
from models.errors import ConfigError, InvalidSpecificationError, PresetNotFoundError
from models.value_spec import ConstantValue, KeyframePair


MONOLITHIC = """
render:
  fps: 24
logging:
  level: debug
presets:
  title.opacity:
    domain: [0, 20]
    range: [0, 1]
  background.blur: 0
"""


def make_manager(tmp_path, config="config.yaml", defaults="defaults.yaml"):
    return ConfigManager(config_path=tmp_path / config, defaults_path=tmp_path / defaults)


class TestConfigManager:

    def test_monolithic_config(self, tmp_path, write_yaml):
        write_yaml("config.yaml", MONOLITHIC)
        manager = make_manager(tmp_path)
        config = manager.load()

        assert config.render.fps == 24
        assert config.render.width == 1920
        assert manager.logging.log_level is LogLevel.DEBUG
        assert manager.resolver.left_mode is ExtrapolationMode.CLAMP
        assert manager.preset_manager.resolve("title.opacity", 5) == 0.25
        assert manager.preset_manager.get("background.blur") == ConstantValue(0)

    def test_include_based_config(self, tmp_path, write_yaml):
        write_yaml("config.yaml", "include:\n  - render.yaml\n  - a.yaml\n  - b.yaml\n")
        write_yaml("render.yaml", "render:\n  fps: 60\n")
        write_yaml("a.yaml", "presets:\n  a.x: 1\n  shared: 1\n")
        write_yaml("b.yaml", "presets:\n  b.y:\n    domain: [0, 10]\n    range: [0, 100]\n  shared: 2\n")

        manager = make_manager(tmp_path)
        manager.load()

        assert manager.render.fps == 60
        assert manager.preset_manager.names() == ["a.x", "b.y", "shared"]
        assert manager.preset_manager.resolve("shared", 0) == 2
        assert manager.preset_manager.resolve("b.y", 5) == 50

    def test_resolver_defaults_apply_to_presets(self, tmp_path, write_yaml):
        write_yaml("config.yaml", """
resolver:
  default_extrapolate_left: extend
  default_extrapolate_right: identity
presets:
  ramp:
    domain: [0, 10]
    range: [0, 100]
  clamped:
    domain: [0, 10]
    range: [0, 100]
    extrapolate_left: clamp
""")
        presets = make_manager(tmp_path)
        presets.load()
        presets = presets.preset_manager

        assert presets.resolve("ramp", -5) == -50
        assert presets.resolve("ramp", 15) == 15
        assert presets.resolve("clamped", -5) == 0

    def test_missing_config_falls_back_to_defaults(self, tmp_path, write_yaml):
        write_yaml("defaults.yaml", "presets:\n  fallback: 7\n")
        manager = make_manager(tmp_path)
        manager.load()
        assert manager.preset_manager.resolve("fallback", 100) == 7

    def test_missing_include_falls_back_to_defaults(self, tmp_path, write_yaml):
        write_yaml("config.yaml", "include:\n  - missing.yaml\n")
        write_yaml("defaults.yaml", "render:\n  fps: 25\n")
        manager = make_manager(tmp_path)
        assert manager.load().render.fps == 25

    def test_no_configuration_at_all(self, tmp_path):
        with pytest.raises(ConfigError) as info:
            make_manager(tmp_path).load()
        assert info.value.code == "CONFIG_ERROR"

    @pytest.mark.parametrize("text", [
        "render:\n  fps: 0\n",
        "logging:\n  level: LOUD\n",
        "resolver:\n  default_extrapolate_left: mirror\n",
        "colors:\n  - red\n",
        "- just\n- a list\n",
    ])
    def test_invalid_config_fails(self, tmp_path, write_yaml, text):
        write_yaml("config.yaml", text)
        with pytest.raises(ConfigError):
            make_manager(tmp_path).load()

    def test_empty_presets_section(self, tmp_path, write_yaml):
        write_yaml("config.yaml", "presets:\n")
        manager = make_manager(tmp_path)
        manager.load()
        assert len(manager.preset_manager) == 0

    def test_invalid_preset_fails_fast(self, tmp_path, write_yaml):
        write_yaml("config.yaml", "presets:\n  broken:\n    domain: [0, 10, 5]\n    range: [0, 1, 2]\n")
        with pytest.raises(InvalidSpecificationError) as info:
            make_manager(tmp_path).load()
        assert info.value.details["preset"] == "broken"

    def test_sections_require_load(self, tmp_path):
        with pytest.raises(ConfigError):
            make_manager(tmp_path).render

    def test_repository_config(self):
        manager = ConfigManager()
        manager.load()
        presets = manager.preset_manager

        assert manager.render.fps == 30
        assert "hero_title.opacity" in presets
        assert presets.resolve("hero_title.opacity", 5) == 0.25
        assert presets.resolve("counter.step", 29) == 5
        assert presets.resolve("counter.step", 30) == 10
        assert presets.resolve("camera.dolly", 180) < presets.resolve("camera.dolly", 90)


class TestPresetManager:

    def test_lookup(self):
        presets = PresetManager({"b": 1, "a": ([0, 10], [0, 1])})
        assert presets.names() == ["a", "b"]
        assert isinstance(presets.get("a"), KeyframePair)
        assert presets.resolve("a", 5) == 0.5

    def test_unknown_preset(self):
        presets = PresetManager({})
        with pytest.raises(PresetNotFoundError) as info:
            presets.get("missing")
        assert isinstance(info.value, KeyError)
        assert str(info.value) == "Preset 'missing' not found"

    def test_add_replaces(self):
        presets = PresetManager({"x": 1})
        presets.add("x", {"domain": [0, 2], "range": [0, 4], "easing": "ease_in_quad"})
        assert presets.resolve("x", 1) == 1
