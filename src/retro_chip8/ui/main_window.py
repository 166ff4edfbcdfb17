# src/retro_chip8/ui/main_window.py
"""
メインウィンドウの実装。
表示ウィジェットを保持し、QTimer からスケジューラを駆動します。
"""
import time
from typing import Dict, Optional

from PySide6.QtWidgets import QMainWindow, QLabel
from PySide6.QtCore import QTimer, Slot
from PySide6.QtGui import QCloseEvent

from retro_chip8.config.models import EmulatorConfig
from retro_chip8.core.cpu import Chip8Cpu
from retro_chip8.core.operation import Operation
from retro_chip8.scheduler.scheduler import Scheduler
from retro_chip8.timer.timers import TimerDriver
from .display_view import DisplayView, WidgetPresenter
from .keyboard import KeyboardState

# @intent:constant スケジューラを呼び出す間隔（ミリ秒）。実行レートは経過時間から算出されるため、この値には依存しません。
TICK_INTERVAL_MS = 2

# @intent:utility_function ステータスバーに表示するレジスタ行を組み立てます。
def format_register_line(registers: Dict[str, int], operation: Optional[Operation] = None) -> str:
    text = "PC=%04X I=%04X SP=%X DT=%02X ST=%02X VF=%02X" % (
        registers["PC"], registers["I"], registers["SP"], registers["DT"], registers["ST"], registers["VF"])
    if operation is not None:
        text += f"  {operation}"
    return text

# @intent:responsibility アプリケーションのメインウィンドウを定義し、表示とスケジューラを結び付けます。
class MainWindow(QMainWindow):
    """
    アプリケーションのメインウィンドウクラス。
    """
    def __init__(self, cpu: Chip8Cpu, timers: TimerDriver, keyboard: KeyboardState,
                 config: EmulatorConfig, title: str = "Chip-8 Emulator", parent=None):
        super(MainWindow, self).__init__(parent)
        self.setWindowTitle(title)
        self._cpu = cpu
        self._keyboard = keyboard

        display = config.display
        self.display_view = DisplayView(
            display.width, display.height, keyboard,
            scale=display.scale, foreground=display.foreground, background=display.background,
        )
        self.setCentralWidget(self.display_view)

        self.register_label = QLabel("")
        self.statusBar().addWidget(self.register_label)
        self.sound_label = QLabel("")
        self.statusBar().addPermanentWidget(self.sound_label)

        self.presenter = WidgetPresenter(self.display_view, on_sound=self._update_sound_indicator)
        self.scheduler = Scheduler(
            cpu, timers, keyboard, self.presenter,
            instructions_per_second=config.cpu.instructions_per_second,
            max_catch_up=config.cpu.max_catch_up,
        )

        self._timer = QTimer(self)
        self._timer.setInterval(TICK_INTERVAL_MS)
        self._timer.timeout.connect(self._on_tick)

    # @intent:responsibility 実行を開始します。
    def start(self) -> None:
        self.display_view.setFocus()
        self._timer.start()

    def is_running(self) -> bool:
        return self._timer.isActive()

    # @intent:responsibility タイマー周期ごとに1スライス分実行し、終了要求があればウィンドウを閉じます。
    @Slot()
    def _on_tick(self):
        if not self.scheduler.run_slice(time.perf_counter()):
            self._timer.stop()
            self.close()
            return
        self._update_register_line()

    def _update_register_line(self) -> None:
        text = format_register_line(self._cpu.get_register_map(), self._cpu.last_operation)
        if self._cpu.awaiting_key:
            text += "  Waiting for key..."
        if text != self.register_label.text():
            self.register_label.setText(text)

    def _update_sound_indicator(self, active: bool) -> None:
        self.sound_label.setText("SOUND" if active else "")

    # @intent:responsibility ウィンドウが閉じられる際に実行を停止します。保存すべき状態はありません。
    def closeEvent(self, event: QCloseEvent):
        self._timer.stop()
        self._keyboard.request_quit()
        event.accept()
