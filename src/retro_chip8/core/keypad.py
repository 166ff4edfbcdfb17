# retro_chip8/core/keypad.py
"""
16キー入力デバイスのインターフェース。

命令実装は論理キー番号(0x0-0xF)と「押されているか」の述語のみを利用します。
物理キーとの対応付けは実装側（UI層）の責務です。
"""
from abc import ABC, abstractmethod
from typing import Optional

KEY_COUNT = 16

# @intent:responsibility 論理キーの押下状態を問い合わせるための抽象インターフェース。
class Keypad(ABC):
    @abstractmethod
    def is_pressed(self, key: int) -> bool:
        """
        論理キー `key` (0x0-0xF) が現在押されていれば True を返します。
        """
        pass

    # @intent:responsibility 押されている論理キーのうち最小の番号を返します。無ければ None。
    def first_pressed(self) -> Optional[int]:
        for key in range(KEY_COUNT):
            if self.is_pressed(key):
                return key
        return None
