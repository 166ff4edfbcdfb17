# retro_chip8/core/cpu.py
"""
Core Layer (CPU)

このモジュールは、命令サイクル（フェッチ→PC更新→デコード→実行）の駆動を担当します。
具体的な命令の振る舞いは instructions パッケージに委譲されます。
"""
import logging
import random
from typing import Dict, Optional

from retro_chip8.core.font import install_font
from retro_chip8.core.keypad import Keypad
from retro_chip8.core.operation import Operation
from retro_chip8.core.state import Chip8State
from retro_chip8.display.framebuffer import Framebuffer
from retro_chip8.instructions import ExecutionContext, decode_opcode, execute_instruction
from retro_chip8.transport.bus import Memory

logger = logging.getLogger(__name__)

# @intent:responsibility メモリ、レジスタ、フレームバッファを唯一の変更者として操作し、1命令ずつ実行します。
class Chip8Cpu:
    """
    仮想マシンのCPU。
    状態オブジェクトはCPUが所有し、命令実装には ExecutionContext を通じて排他的に渡されます。
    """
    # @intent:pre-condition memoryにはフォントとプログラムがロード済み、またはこれからロードされる前提です。
    def __init__(self, memory: Memory, framebuffer: Framebuffer, keypad: Keypad,
                 rng: Optional[random.Random] = None, sprite_wrap: bool = False):
        self._memory = memory
        self._framebuffer = framebuffer
        self._keypad = keypad
        self._rng = rng if rng is not None else random.Random()
        self._sprite_wrap = sprite_wrap
        self._instruction_count = 0
        self._last_operation: Optional[Operation] = None
        install_font(self._memory)
        self._state = self._create_initial_state()
        self._context = self._create_context()

    def _create_initial_state(self) -> Chip8State:
        return Chip8State()

    def _create_context(self) -> ExecutionContext:
        return ExecutionContext(
            state=self._state,
            memory=self._memory,
            framebuffer=self._framebuffer,
            keypad=self._keypad,
            rng=self._rng,
            sprite_wrap=self._sprite_wrap,
        )

    # @intent:responsibility レジスタ、スタック、タイマーを初期状態に戻します。メモリの内容は保持されます。
    # @intent:post-condition 状態オブジェクトは同一のまま再初期化されるため、get_state() の参照先は変わりません。
    def reset(self) -> None:
        self._state.reset()
        self._instruction_count = 0
        self._last_operation = None

    def get_state(self) -> Chip8State:
        return self._state

    @property
    def memory(self) -> Memory:
        return self._memory

    @property
    def framebuffer(self) -> Framebuffer:
        return self._framebuffer

    @property
    def instruction_count(self) -> int:
        return self._instruction_count

    @property
    def last_operation(self) -> Optional[Operation]:
        return self._last_operation

    @property
    def awaiting_key(self) -> bool:
        return self._state.awaiting_key is not None

    # @intent:responsibility PCから2バイトを読み、ビッグエンディアンで16ビット命令語を組み立てます。
    def _fetch(self) -> int:
        pc = self._state.pc
        return (self._memory.read(pc) << 8) | self._memory.read(pc + 1)

    def _decode(self, opcode: int) -> Operation:
        return decode_opcode(opcode)

    def _execute(self, operation: Operation) -> bool:
        return execute_instruction(operation, self._context)

    # @intent:responsibility キー入力待ちのサブ状態を1回分処理します。
    # @intent:return キーが押されていて待ちが解除された場合 True。
    def _poll_awaited_key(self) -> bool:
        key = self._keypad.first_pressed()
        if key is None:
            return False
        self._state.v[self._state.awaiting_key] = key
        logger.debug("Key 0x%X received for V%X", key, self._state.awaiting_key)
        self._state.awaiting_key = None
        return True

    # @intent:responsibility CPUを1命令サイクル進め、フレームバッファを変更したかを返します。
    # @intent:flow キー待ち中ならキーパッドを確認するだけで戻ります。
    #              それ以外は フェッチ -> PC更新 -> デコード -> 実行 の順に処理します。
    def step(self) -> bool:
        """
        1命令を実行します。
        PCは実行前に2進めるため、ジャンプ/コール命令が設定したPCは上書きされません。
        """
        if self._state.awaiting_key is not None:
            self._poll_awaited_key()
            return False

        opcode = self._fetch()
        self._state.pc = (self._state.pc + 2) & 0xFFFF
        operation = self._decode(opcode)
        self._last_operation = operation
        self._instruction_count += 1
        return self._execute(operation)

    # @intent:responsibility 表示用に、現在のレジスタ値を辞書形式で提供します。
    def get_register_map(self) -> Dict[str, int]:
        s = self._state
        registers = {f"V{index:X}": value for index, value in enumerate(s.v)}
        registers.update({"I": s.i, "PC": s.pc, "SP": s.sp, "DT": s.delay, "ST": s.sound})
        return registers
