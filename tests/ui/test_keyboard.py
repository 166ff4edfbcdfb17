# tests/ui/test_keyboard.py
"""
retro_chip8.ui.keyboardモジュールの単体テスト。
"""
import pytest
from PySide6.QtCore import Qt

from retro_chip8.common.errors import ConfigError
from retro_chip8.config.models import DEFAULT_KEYS
from retro_chip8.ui.keyboard import KeyboardState, key_map_from_names

@pytest.fixture
def keyboard():
    return KeyboardState(key_map_from_names(DEFAULT_KEYS))

class TestKeyMap:
    def test_default_layout(self):
        key_map = key_map_from_names(DEFAULT_KEYS)
        assert key_map[0x0] == Qt.Key.Key_X.value
        assert key_map[0x1] == Qt.Key.Key_1.value
        assert key_map[0xC] == Qt.Key.Key_4.value
        assert key_map[0xF] == Qt.Key.Key_V.value
        assert len(set(key_map.values())) == 16

    def test_unknown_key_name(self):
        names = list(DEFAULT_KEYS)
        names[3] = "NoSuchKey"
        with pytest.raises(ConfigError, match="0x3"):
            key_map_from_names(names)

    def test_wrong_count(self):
        with pytest.raises(ConfigError):
            key_map_from_names(DEFAULT_KEYS[:10])

class TestKeyboardState:
    def test_press_and_release(self, keyboard):
        assert keyboard.press(Qt.Key.Key_W.value)
        assert keyboard.is_pressed(0x5)
        assert keyboard.first_pressed() == 0x5
        assert keyboard.release(Qt.Key.Key_W.value)
        assert not keyboard.is_pressed(0x5)
        assert keyboard.first_pressed() is None

    def test_unmapped_key_is_ignored(self, keyboard):
        assert not keyboard.press(Qt.Key.Key_P.value)
        assert keyboard.first_pressed() is None

    def test_first_pressed_returns_lowest(self, keyboard):
        keyboard.press(Qt.Key.Key_V.value)
        keyboard.press(Qt.Key.Key_2.value)
        assert keyboard.first_pressed() == 0x2

    def test_release_all(self, keyboard):
        keyboard.press(Qt.Key.Key_Q.value)
        keyboard.release_all()
        assert not keyboard.is_pressed(0x4)

    def test_quit(self, keyboard):
        assert not keyboard.quit_requested()
        keyboard.request_quit()
        assert keyboard.quit_requested()
