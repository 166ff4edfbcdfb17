import sys
import unittest
from PySide6.QtWidgets import QApplication
from PySide6.QtGui import QColor

from retro_chip8.config.models import EmulatorConfig, DEFAULT_KEYS
from retro_chip8.core.cpu import Chip8Cpu
from retro_chip8.display.framebuffer import Framebuffer
from retro_chip8.timer.timers import TimerDriver
from retro_chip8.transport.bus import Memory
from retro_chip8.ui.display_view import DisplayView, WidgetPresenter
from retro_chip8.ui.keyboard import KeyboardState, key_map_from_names
from retro_chip8.core.operation import Operation
from retro_chip8.ui.main_window import MainWindow, format_register_line

class TestDisplayView(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        if not QApplication.instance():
            cls.app = QApplication(sys.argv)
        else:
            cls.app = QApplication.instance()

    def setUp(self):
        self.keyboard = KeyboardState(key_map_from_names(DEFAULT_KEYS))

    def test_image_matches_framebuffer(self):
        view = DisplayView(64, 32, self.keyboard, scale=4, foreground="#FFFFFF", background="#000000")
        fb = Framebuffer()
        fb.toggle(0, 0)
        fb.toggle(63, 31)
        view.render_framebuffer(fb)
        image = view.image()
        self.assertEqual((image.width(), image.height()), (64, 32))
        self.assertEqual(image.pixelColor(0, 0), QColor("#FFFFFF"))
        self.assertEqual(image.pixelColor(63, 31), QColor("#FFFFFF"))
        self.assertEqual(image.pixelColor(1, 0), QColor("#000000"))
        self.assertEqual((view.width(), view.height()), (256, 128))

    def test_presenter_counts_frames_and_forwards_sound(self):
        view = DisplayView(64, 32, self.keyboard)
        sounds = []
        presenter = WidgetPresenter(view, on_sound=sounds.append)
        presenter.present(Framebuffer())
        presenter.set_sound(True)
        self.assertEqual(presenter.frames_presented, 1)
        self.assertEqual(sounds, [True])

    def test_main_window_closes_on_quit_request(self):
        memory = Memory()
        memory.load(0x200, [0x12, 0x00])
        cpu = Chip8Cpu(memory, Framebuffer(), self.keyboard)
        timers = TimerDriver(cpu.get_state())
        window = MainWindow(cpu, timers, self.keyboard, EmulatorConfig())
        window.show()
        window.start()
        self.assertTrue(window.is_running())
        self.keyboard.request_quit()
        window._on_tick()
        self.assertFalse(window.is_running())
        self.assertFalse(window.isVisible())

    def test_format_register_line(self):
        registers = {"PC": 0x202, "I": 0x050, "SP": 1, "DT": 0x3C, "ST": 0, "VF": 1}
        self.assertEqual(format_register_line(registers), "PC=0202 I=0050 SP=1 DT=3C ST=00 VF=01")
        operation = Operation(0x6A12, "LD", ["VA", "#12"])
        self.assertEqual(format_register_line(registers, operation),
                         "PC=0202 I=0050 SP=1 DT=3C ST=00 VF=01  LD VA, #12")

    def test_main_window_shows_registers_in_status_bar(self):
        memory = Memory()
        memory.load(0x200, [0x12, 0x00])
        cpu = Chip8Cpu(memory, Framebuffer(), self.keyboard)
        window = MainWindow(cpu, TimerDriver(cpu.get_state()), self.keyboard, EmulatorConfig())
        window._on_tick()
        self.assertTrue(window.register_label.text().startswith("PC=0200 I=0000"))
        cpu.step()
        window._on_tick()
        self.assertIn("JP $200", window.register_label.text())

if __name__ == '__main__':
    unittest.main()
