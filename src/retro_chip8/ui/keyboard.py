# src/retro_chip8/ui/keyboard.py
"""
キーボード入力の状態管理。

Qtのキーイベントを論理キー(0x0-0xF)の押下状態に変換し、命令実装向けの Keypad と
スケジューラ向けの InputSource の両方を提供します。
"""
from typing import Dict, Iterable, Set

from PySide6.QtCore import Qt

from retro_chip8.common.errors import ConfigError
from retro_chip8.common.types import KeyMap
from retro_chip8.core.keypad import Keypad, KEY_COUNT
from retro_chip8.scheduler.scheduler import InputSource

# @intent:utility_function キー名のリスト（"X", "1", ...）を論理キー→Qtキーコードの対応表に変換します。
def key_map_from_names(names: Iterable[str]) -> KeyMap:
    names = list(names)
    if len(names) != KEY_COUNT:
        raise ConfigError(f"Expected {KEY_COUNT} key names, got {len(names)}")
    key_map: KeyMap = {}
    for logical, name in enumerate(names):
        member = getattr(Qt.Key, f"Key_{name}", None)
        if member is None:
            raise ConfigError(f"Unknown key name for logical key 0x{logical:X}: {name}")
        key_map[logical] = member.value
    return key_map

# @intent:responsibility 物理キーの押下状態を保持し、論理キーの問い合わせと終了要求に応答します。
class KeyboardState(Keypad, InputSource):
    def __init__(self, key_map: KeyMap):
        self._key_map = dict(key_map)
        self._reverse_map: Dict[int, int] = {physical: logical for logical, physical in key_map.items()}
        self._pressed: Set[int] = set()
        self._quit = False

    # @intent:responsibility 物理キーの押下を記録します。対応表に無いキーなら False を返します。
    def press(self, physical_key: int) -> bool:
        logical = self._reverse_map.get(physical_key)
        if logical is None:
            return False
        self._pressed.add(logical)
        return True

    def release(self, physical_key: int) -> bool:
        logical = self._reverse_map.get(physical_key)
        if logical is None:
            return False
        self._pressed.discard(logical)
        return True

    # ウィンドウがフォーカスを失ったときなど
    def release_all(self) -> None:
        self._pressed.clear()

    def is_pressed(self, key: int) -> bool:
        return key in self._pressed

    def request_quit(self) -> None:
        self._quit = True

    def quit_requested(self) -> bool:
        return self._quit
