# src/retro_chip8/instructions/alu.py
"""
算術論理演算命令の実装。

全ての演算結果は8ビットでラップします。VF をフラグとして使う加減算では、
結果を Vx に書き込んだ後に VF を書き込みます（x == F の場合はフラグ値が残る）。
シフト命令は逆に VF を先に書き込み、その後の Vx を読み直してシフトします
（x == F の場合はフラグ値がシフトされる）。
フラグ値は演算前のオペランドから計算します。
"""
from retro_chip8.core.operation import Operation
from retro_chip8.core.state import Chip8State
from .base import ExecutionContext, reg, imm8

# @intent:utility_function 結果を Vx に格納してから VF にフラグを書き込みます。
def store_with_flag(state: Chip8State, x: int, result: int, flag: int) -> None:
    state.v[x] = result & 0xFF
    state.vf = flag

def _xy(opcode: int):
    return [reg((opcode >> 8) & 0xF), reg((opcode >> 4) & 0xF)]

# --- LD Vx, nn (6xnn) ---
def decode_ld_imm(opcode: int) -> Operation:
    return Operation(opcode, "LD", [reg((opcode >> 8) & 0xF), imm8(opcode & 0xFF)])

def execute_ld_imm(ctx: ExecutionContext, op: Operation) -> bool:
    ctx.state.v[op.x] = op.nn
    return False

# --- ADD Vx, nn (7xnn) ---
def decode_add_imm(opcode: int) -> Operation:
    return Operation(opcode, "ADD", [reg((opcode >> 8) & 0xF), imm8(opcode & 0xFF)])

# @intent:responsibility 即値を加算します。キャリーフラグは変化しません。
def execute_add_imm(ctx: ExecutionContext, op: Operation) -> bool:
    ctx.state.v[op.x] = (ctx.state.v[op.x] + op.nn) & 0xFF
    return False

# --- LD Vx, Vy (8xy0) ---
def decode_ld_reg(opcode: int) -> Operation:
    return Operation(opcode, "LD", _xy(opcode))

def execute_ld_reg(ctx: ExecutionContext, op: Operation) -> bool:
    ctx.state.v[op.x] = ctx.state.v[op.y]
    return False

# --- OR Vx, Vy (8xy1) ---
def decode_or(opcode: int) -> Operation:
    return Operation(opcode, "OR", _xy(opcode))

def execute_or(ctx: ExecutionContext, op: Operation) -> bool:
    ctx.state.v[op.x] |= ctx.state.v[op.y]
    return False

# --- AND Vx, Vy (8xy2) ---
def decode_and(opcode: int) -> Operation:
    return Operation(opcode, "AND", _xy(opcode))

def execute_and(ctx: ExecutionContext, op: Operation) -> bool:
    ctx.state.v[op.x] &= ctx.state.v[op.y]
    return False

# --- XOR Vx, Vy (8xy3) ---
def decode_xor(opcode: int) -> Operation:
    return Operation(opcode, "XOR", _xy(opcode))

def execute_xor(ctx: ExecutionContext, op: Operation) -> bool:
    ctx.state.v[op.x] ^= ctx.state.v[op.y]
    return False

# --- ADD Vx, Vy (8xy4) ---
def decode_add_reg(opcode: int) -> Operation:
    return Operation(opcode, "ADD", _xy(opcode))

# @intent:responsibility 8ビット符号なしオーバーフロー時に VF=1、それ以外は VF=0。
def execute_add_reg(ctx: ExecutionContext, op: Operation) -> bool:
    res = ctx.state.v[op.x] + ctx.state.v[op.y]
    store_with_flag(ctx.state, op.x, res, 1 if res > 0xFF else 0)
    return False

# --- SUB Vx, Vy (8xy5) ---
def decode_sub(opcode: int) -> Operation:
    return Operation(opcode, "SUB", _xy(opcode))

# @intent:responsibility Vx - Vy。ボローが発生しなければ (Vx >= Vy) VF=1。
def execute_sub(ctx: ExecutionContext, op: Operation) -> bool:
    v1 = ctx.state.v[op.x]
    v2 = ctx.state.v[op.y]
    store_with_flag(ctx.state, op.x, v1 - v2, 1 if v1 >= v2 else 0)
    return False

# --- SHR Vx (8xy6) ---
def decode_shr(opcode: int) -> Operation:
    return Operation(opcode, "SHR", [reg((opcode >> 8) & 0xF)])

# @intent:responsibility シフト前の最下位ビットを VF に入れ、Vx を右に1ビットシフトします。
def execute_shr(ctx: ExecutionContext, op: Operation) -> bool:
    state = ctx.state
    state.vf = state.v[op.x] & 0x1
    state.v[op.x] = state.v[op.x] >> 1
    return False

# --- SUBN Vx, Vy (8xy7) ---
def decode_subn(opcode: int) -> Operation:
    return Operation(opcode, "SUBN", _xy(opcode))

# @intent:responsibility Vy - Vx。ボローが発生しなければ (Vy >= Vx) VF=1。
def execute_subn(ctx: ExecutionContext, op: Operation) -> bool:
    v1 = ctx.state.v[op.x]
    v2 = ctx.state.v[op.y]
    store_with_flag(ctx.state, op.x, v2 - v1, 1 if v2 >= v1 else 0)
    return False

# --- SHL Vx (8xyE) ---
def decode_shl(opcode: int) -> Operation:
    return Operation(opcode, "SHL", [reg((opcode >> 8) & 0xF)])

# @intent:responsibility シフト前の最上位ビットを VF に入れ、Vx を左に1ビットシフトします。
def execute_shl(ctx: ExecutionContext, op: Operation) -> bool:
    state = ctx.state
    state.vf = state.v[op.x] >> 7
    state.v[op.x] = (state.v[op.x] << 1) & 0xFF
    return False

# --- RND Vx, nn (Cxnn) ---
def decode_rnd(opcode: int) -> Operation:
    return Operation(opcode, "RND", [reg((opcode >> 8) & 0xF), imm8(opcode & 0xFF)])

# @intent:responsibility 乱数バイトと nn の論理積を Vx に格納します。nn=0 なら常に 0。
def execute_rnd(ctx: ExecutionContext, op: Operation) -> bool:
    ctx.state.v[op.x] = ctx.rng.randrange(0x100) & op.nn
    return False
