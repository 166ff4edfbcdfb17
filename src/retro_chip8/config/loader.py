import yaml
from typing import Dict, Any

from retro_chip8.common.errors import ConfigError
from .models import EmulatorConfig, DisplayConfig, CpuConfig, DEFAULT_KEYS, SPRITE_EDGE_CLIP, SPRITE_EDGE_WRAP

class ConfigLoader:
    def load_from_file(self, path: str) -> EmulatorConfig:
        try:
            with open(path, 'r') as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Failed to read config file {path}: {e.strerror or e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e
        return self.load_from_dict(data or {})

    def load_from_dict(self, data: Dict[str, Any]) -> EmulatorConfig:
        if not isinstance(data, dict):
            raise ConfigError("Config root must be a mapping.")

        display_data = data.get("display", {}) or {}
        display = DisplayConfig(
            width=self._parse_positive(display_data.get("width", 64), "display.width"),
            height=self._parse_positive(display_data.get("height", 32), "display.height"),
            scale=self._parse_positive(display_data.get("scale", 10), "display.scale"),
            foreground=str(display_data.get("foreground", "#FFFFFF")),
            background=str(display_data.get("background", "#000000")),
        )

        cpu_data = data.get("cpu", {}) or {}
        sprite_edge = str(cpu_data.get("sprite_edge", SPRITE_EDGE_CLIP)).lower()
        if sprite_edge not in (SPRITE_EDGE_CLIP, SPRITE_EDGE_WRAP):
            raise ConfigError(f"Invalid cpu.sprite_edge: {sprite_edge} (expected 'clip' or 'wrap')")
        seed = cpu_data.get("seed")
        cpu = CpuConfig(
            instructions_per_second=self._parse_positive(
                cpu_data.get("instructions_per_second", 700), "cpu.instructions_per_second"),
            timer_hz=self._parse_positive(cpu_data.get("timer_hz", 60), "cpu.timer_hz"),
            sprite_edge=sprite_edge,
            max_catch_up=self._parse_float(cpu_data.get("max_catch_up", 0.1), "cpu.max_catch_up"),
            seed=None if seed is None else self._parse_int(seed, "cpu.seed"),
        )

        keys = data.get("keys", DEFAULT_KEYS)
        if not isinstance(keys, list) or len(keys) != 16:
            raise ConfigError("keys must be a list of 16 key names (logical keys 0x0-0xF).")

        return EmulatorConfig(display=display, cpu=cpu, keys=[str(k) for k in keys])

    def _parse_int(self, value: Any, name: str) -> int:
        if isinstance(value, bool):
            raise ConfigError(f"Invalid integer format for {name}: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            try:
                if value.lower().startswith("0x"):
                    return int(value, 16)
                return int(value)
            except ValueError:
                pass
        raise ConfigError(f"Invalid integer format for {name}: {value}")

    def _parse_positive(self, value: Any, name: str) -> int:
        result = self._parse_int(value, name)
        if result <= 0:
            raise ConfigError(f"{name} must be positive: {result}")
        return result

    def _parse_float(self, value: Any, name: str) -> float:
        try:
            result = float(value)
        except (TypeError, ValueError):
            raise ConfigError(f"Invalid number for {name}: {value}")
        if result <= 0:
            raise ConfigError(f"{name} must be positive: {result}")
        return result
