# src/retro_chip8/ui/display_view.py
"""
フレームバッファ表示ウィジェット。

点灯/消灯のピクセルを QImage(RGB32) に変換し、整数倍に拡大して描画します。
キーイベントは KeyboardState に転送します。
"""
from PySide6.QtWidgets import QWidget
from PySide6.QtCore import Qt, QSize
from PySide6.QtGui import QColor, QImage, QKeyEvent, QPainter, QPaintEvent, QFocusEvent

from retro_chip8.common.errors import DisplayInitError
from retro_chip8.display.framebuffer import Framebuffer
from retro_chip8.scheduler.scheduler import Presenter
from .keyboard import KeyboardState

# @intent:responsibility フレームバッファの内容を画面に表示し、キー入力を受け付けます。
class DisplayView(QWidget):
    """
    フレームバッファを表示するウィジェット。ピクセル(0,0)が左上です。
    """
    # @intent:post-condition 描画用のイメージが生成できない場合は DisplayInitError を送出します。
    def __init__(self, width: int, height: int, keyboard: KeyboardState, scale: int = 10,
                 foreground: str = "#FFFFFF", background: str = "#000000", parent=None):
        super().__init__(parent)
        self._keyboard = keyboard
        self._scale = scale
        self._image = QImage(width, height, QImage.Format.Format_RGB32)
        if self._image.isNull() or self._image.depth() != 32:
            raise DisplayInitError(f"Unsupported pixel format for {width}x{height} surface")
        self._on = QColor(foreground).rgb()
        self._off = QColor(background).rgb()
        self._image.fill(self._off)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setFixedSize(QSize(width * scale, height * scale))

    def image(self) -> QImage:
        return self._image

    # @intent:responsibility フレームバッファの各ピクセルを表示色に変換してイメージを更新します。
    def render_framebuffer(self, framebuffer: Framebuffer) -> None:
        for y, row in enumerate(framebuffer.rows()):
            for x, lit in enumerate(row):
                self._image.setPixel(x, y, self._on if lit else self._off)
        self.update()

    def paintEvent(self, event: QPaintEvent):
        painter = QPainter(self)
        painter.drawImage(self.rect(), self._image)
        painter.end()

    def keyPressEvent(self, event: QKeyEvent):
        if event.isAutoRepeat():
            return
        if int(event.key()) == Qt.Key.Key_Escape.value:
            self._keyboard.request_quit()
            return
        if not self._keyboard.press(int(event.key())):
            super().keyPressEvent(event)

    def keyReleaseEvent(self, event: QKeyEvent):
        if event.isAutoRepeat():
            return
        if not self._keyboard.release(int(event.key())):
            super().keyReleaseEvent(event)

    def focusOutEvent(self, event: QFocusEvent):
        self._keyboard.release_all()
        super().focusOutEvent(event)

# @intent:responsibility スケジューラからの表示要求を DisplayView とステータス表示に中継します。
class WidgetPresenter(Presenter):
    def __init__(self, view: DisplayView, on_sound=None):
        self._view = view
        self._on_sound = on_sound
        self.frames_presented = 0

    def present(self, framebuffer: Framebuffer) -> None:
        self._view.render_framebuffer(framebuffer)
        self.frames_presented += 1

    def set_sound(self, active: bool) -> None:
        if self._on_sound is not None:
            self._on_sound(active)
