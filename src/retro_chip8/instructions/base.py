# src/retro_chip8/instructions/base.py
"""
命令実装用の共通ユーティリティ。
"""
import random
from dataclasses import dataclass, field

from retro_chip8.core.keypad import Keypad
from retro_chip8.core.operation import Operation
from retro_chip8.core.state import Chip8State
from retro_chip8.display.framebuffer import Framebuffer
from retro_chip8.transport.bus import Memory

# @intent:responsibility 命令の実行に必要な所有状態と協調オブジェクトをひとまとめにします。
# @intent:rationale 命令実装は ExecutionContext を排他的に受け取り、グローバル状態には触れません。
@dataclass
class ExecutionContext:
    state: Chip8State
    memory: Memory
    framebuffer: Framebuffer
    keypad: Keypad
    rng: random.Random = field(default_factory=random.Random)
    sprite_wrap: bool = False

# @intent:utility_function レジスタ名の表記。
def reg(index: int) -> str:
    return f"V{index:X}"

# @intent:utility_function 8ビット即値の表記。
def imm8(value: int) -> str:
    return f"#{value:02X}"

# @intent:utility_function 12ビットアドレスの表記。
def addr12(value: int) -> str:
    return f"${value:03X}"

# @intent:utility_function 次の1命令(2バイト)をスキップします。
def skip_next(state: Chip8State) -> None:
    state.pc = (state.pc + 2) & 0xFFFF

# @intent:utility_function オペランドなし命令のデコード結果を生成します。
def plain(opcode: int, mnemonic: str) -> Operation:
    return Operation(opcode, mnemonic)
