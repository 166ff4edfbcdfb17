# retro_chip8/core/font.py
"""
16進数字フォントテーブル。

各グリフは5バイト（1バイト＝1走査線、MSBが左端）で、メモリの [0x050, 0x0A0) に配置されます。
プログラムは `FONT_START + 5 * digit` の式でグリフを参照するため、値は固定です。
"""
from retro_chip8.transport.bus import Memory

FONT_START = 0x050
GLYPH_SIZE = 5

FONT = bytes([
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
])

# @intent:utility_function 数字(下位4ビット)に対応するグリフの先頭アドレスを返します。
def glyph_address(digit: int) -> int:
    return FONT_START + GLYPH_SIZE * (digit & 0xF)

# @intent:responsibility フォントテーブルをメモリの予約領域に書き込みます。
def install_font(memory: Memory) -> None:
    memory.load(FONT_START, FONT)
