# tests/config/test_config_loader.py
"""
retro_chip8.configモジュールの単体テスト。
"""
import pytest

from retro_chip8.common.errors import ConfigError
from retro_chip8.config.loader import ConfigLoader
from retro_chip8.config.models import EmulatorConfig, DEFAULT_KEYS

class TestConfigLoader:
    def test_defaults(self):
        config = ConfigLoader().load_from_dict({})
        assert config == EmulatorConfig()
        assert config.display.width == 64
        assert config.display.height == 32
        assert config.cpu.instructions_per_second == 700
        assert config.cpu.timer_hz == 60
        assert config.cpu.sprite_wrap is False
        assert config.keys == DEFAULT_KEYS

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "display:\n"
            "  scale: 4\n"
            "  foreground: '#00FF00'\n"
            "cpu:\n"
            "  instructions_per_second: '0x200'\n"
            "  sprite_edge: WRAP\n"
            "  seed: 42\n"
        )
        config = ConfigLoader().load_from_file(str(path))
        assert config.display.scale == 4
        assert config.display.foreground == "#00FF00"
        assert config.cpu.instructions_per_second == 0x200
        assert config.cpu.sprite_wrap is True
        assert config.cpu.seed == 42

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert ConfigLoader().load_from_file(str(path)) == EmulatorConfig()

    @pytest.mark.parametrize("data", [
        {"display": {"width": 0}},
        {"display": {"scale": "big"}},
        {"cpu": {"sprite_edge": "bounce"}},
        {"cpu": {"timer_hz": -1}},
        {"cpu": {"max_catch_up": "soon"}},
        {"keys": ["X"] * 15},
        {"keys": "X"},
    ])
    def test_invalid_values(self, data):
        with pytest.raises(ConfigError):
            ConfigLoader().load_from_dict(data)

    def test_root_must_be_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigError, match="mapping"):
            ConfigLoader().load_from_file(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Failed to read config file"):
            ConfigLoader().load_from_file(str(tmp_path / "nope.yaml"))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("display: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            ConfigLoader().load_from_file(str(path))
