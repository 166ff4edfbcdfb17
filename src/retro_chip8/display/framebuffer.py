# retro_chip8/display/framebuffer.py
"""
モノクロのフレームバッファ。

描画命令(DRW)とCLSからのみ変更され、表示層には読み取り専用で公開されます。
ピクセル(0,0)は左上です。
"""
from typing import List, Sequence, Tuple

DEFAULT_WIDTH = 64
DEFAULT_HEIGHT = 32

# @intent:responsibility 幅×高さのブール値グリッドと、前回の表示以降に変更があったかを示すダーティフラグを保持します。
class Framebuffer:
    """
    固定サイズのピクセルグリッド。
    スプライトの描画はピクセルを上書きせず、XORで反転させます。
    """
    # @intent:pre-condition width, heightは正の整数である必要があります。
    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT):
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid framebuffer size: {width}x{height}")
        self._width = width
        self._height = height
        self._pixels: List[List[bool]] = [[False] * width for _ in range(height)]
        self._dirty = False

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def dirty(self) -> bool:
        return self._dirty

    # @intent:responsibility 表示層が画面を更新した後に呼び出し、ダーティフラグを下ろします。
    def mark_clean(self) -> None:
        self._dirty = False

    def clear(self) -> None:
        for row in self._pixels:
            for x in range(self._width):
                row[x] = False
        self._dirty = True

    def get_pixel(self, x: int, y: int) -> bool:
        return self._pixels[y][x]

    # @intent:responsibility 1ピクセルをXORで反転し、反転前に点灯していたかを返します。
    # @intent:pre-condition 座標はグリッド内である必要があります。
    def toggle(self, x: int, y: int) -> bool:
        was_on = self._pixels[y][x]
        self._pixels[y][x] = not was_on
        self._dirty = True
        return was_on

    # @intent:responsibility スプライト(1バイト=1行、MSB先頭)をXOR描画し、衝突の有無を返します。
    # @intent:rationale 開始座標は一度だけ幅/高さで剰余を取ります。はみ出した部分は
    #                  wrap=False ならクリップ、wrap=True なら反対側の端に回り込みます。
    def draw_sprite(self, x: int, y: int, rows: Sequence[int], wrap: bool = False) -> bool:
        """
        スプライトを描画します。既に点灯していたピクセルを消した場合 True を返します。
        衝突はスプライト全体で累積され、途中で False に戻ることはありません。
        """
        origin_x = x % self._width
        origin_y = y % self._height
        collision = False
        for row_index, bits in enumerate(rows):
            py = origin_y + row_index
            if py >= self._height:
                if not wrap:
                    break
                py %= self._height
            for column in range(8):
                if not bits & (0x80 >> column):
                    continue
                px = origin_x + column
                if px >= self._width:
                    if not wrap:
                        break
                    px %= self._width
                if self.toggle(px, py):
                    collision = True
        self._dirty = True
        return collision

    # @intent:responsibility 表示層向けに、現在のピクセルを行ごとのタプルで返します。
    def rows(self) -> Tuple[Tuple[bool, ...], ...]:
        return tuple(tuple(row) for row in self._pixels)

    def lit_count(self) -> int:
        return sum(sum(1 for pixel in row if pixel) for row in self._pixels)
