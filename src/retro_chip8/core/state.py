# retro_chip8/core/state.py
"""
Core Layer (CPU状態)

このモジュールは、仮想マシンのレジスタ群、コールスタック、タイマーを保持する
データ構造を定義します。振る舞いは持たず、命令実装とタイマードライバから操作されます。
"""
from dataclasses import dataclass, field
from typing import List, Optional

# @intent:constant プログラムイメージの開始アドレス（PCの初期値）。
PROGRAM_START = 0x200
# @intent:constant コールスタックの段数。スタックポインタはこの値でラップします。
STACK_DEPTH = 16
REGISTER_COUNT = 16
FLAG_REGISTER = 0xF

# @intent:responsibility 全レジスタ、スタック、タイマーの状態を保持します。
@dataclass
class Chip8State:
    """
    仮想マシンのレジスタ状態を保持するデータクラス。

    VF は汎用レジスタであると同時にフラグ（キャリー、ボロー、衝突）の格納先でもあり、
    独立したフラグとしては扱いません。
    I はアクセス時にのみ12ビットへマスクされ、代入時は16ビット値のまま保持されます。
    """
    v: List[int] = field(default_factory=lambda: [0] * REGISTER_COUNT)
    i: int = 0x0000
    pc: int = PROGRAM_START
    sp: int = 0
    stack: List[int] = field(default_factory=lambda: [0] * STACK_DEPTH)
    delay: int = 0
    sound: int = 0
    # Fx0A 実行後、キー入力を待っている間は格納先のレジスタ番号を保持する
    awaiting_key: Optional[int] = None

    @property
    def vf(self) -> int:
        return self.v[FLAG_REGISTER]

    @vf.setter
    def vf(self, value: int) -> None:
        self.v[FLAG_REGISTER] = value & 0xFF

    # @intent:responsibility 全フィールドを電源投入時の値に戻します。オブジェクト自体は置き換えません。
    def reset(self) -> None:
        self.v[:] = [0] * REGISTER_COUNT
        self.i = 0x0000
        self.pc = PROGRAM_START
        self.sp = 0
        self.stack[:] = [0] * STACK_DEPTH
        self.delay = 0
        self.sound = 0
        self.awaiting_key = None

    # @intent:responsibility 戻りアドレスをスタックに積みます。
    # @intent:rationale スタックポインタは16でラップし、17段目の呼び出しは最古のフレームを上書きします。
    def push(self, address: int) -> None:
        self.stack[self.sp % STACK_DEPTH] = address & 0xFFFF
        self.sp = (self.sp + 1) % STACK_DEPTH

    # @intent:responsibility スタックから戻りアドレスを取り出します。空のスタックでも例外にはしません。
    def pop(self) -> int:
        self.sp = (self.sp - 1) % STACK_DEPTH
        return self.stack[self.sp]
