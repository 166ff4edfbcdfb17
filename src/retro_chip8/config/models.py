from dataclasses import dataclass, field
from typing import List, Optional

# 論理キー 0x0..0xF に対応する物理キー名（Qt のキー名から "Key_" を除いたもの）
DEFAULT_KEYS = ["X", "1", "2", "3", "Q", "W", "E", "A", "S", "D", "Z", "C", "4", "R", "F", "V"]

SPRITE_EDGE_CLIP = "clip"
SPRITE_EDGE_WRAP = "wrap"

@dataclass
class DisplayConfig:
    width: int = 64
    height: int = 32
    scale: int = 10
    foreground: str = "#FFFFFF"
    background: str = "#000000"

@dataclass
class CpuConfig:
    instructions_per_second: int = 700
    timer_hz: int = 60
    sprite_edge: str = SPRITE_EDGE_CLIP  # "clip", "wrap"
    max_catch_up: float = 0.1
    seed: Optional[int] = None  # 乱数シード。None なら毎回異なる

    @property
    def sprite_wrap(self) -> bool:
        return self.sprite_edge == SPRITE_EDGE_WRAP

@dataclass
class EmulatorConfig:
    display: DisplayConfig = field(default_factory=DisplayConfig)
    cpu: CpuConfig = field(default_factory=CpuConfig)
    keys: List[str] = field(default_factory=lambda: list(DEFAULT_KEYS))
