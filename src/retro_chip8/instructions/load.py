# src/retro_chip8/instructions/load.py
"""
ロード/ストア命令（インデックスレジスタ、タイマー、BCD、レジスタブロック転送、キー待ち）の実装。
"""
from retro_chip8.core.font import glyph_address
from retro_chip8.core.operation import Operation
from .base import ExecutionContext, reg, addr12

# --- LD I, nnn (Annn) ---
def decode_ld_i(opcode: int) -> Operation:
    return Operation(opcode, "LD", ["I", addr12(opcode & 0xFFF)])

def execute_ld_i(ctx: ExecutionContext, op: Operation) -> bool:
    ctx.state.i = op.nnn
    return False

# --- LD Vx, DT (Fx07) ---
def decode_ld_vx_dt(opcode: int) -> Operation:
    return Operation(opcode, "LD", [reg((opcode >> 8) & 0xF), "DT"])

def execute_ld_vx_dt(ctx: ExecutionContext, op: Operation) -> bool:
    ctx.state.v[op.x] = ctx.state.delay
    return False

# --- LD Vx, K (Fx0A) ---
def decode_ld_vx_k(opcode: int) -> Operation:
    return Operation(opcode, "LD", [reg((opcode >> 8) & 0xF), "K"])

# @intent:responsibility キー入力待ちのサブ状態に入ります。
# @intent:post-condition ブロックしません。待ちの解除は次回以降の CPU.step が行います。
def execute_ld_vx_k(ctx: ExecutionContext, op: Operation) -> bool:
    ctx.state.awaiting_key = op.x
    return False

# --- LD DT, Vx (Fx15) ---
def decode_ld_dt_vx(opcode: int) -> Operation:
    return Operation(opcode, "LD", ["DT", reg((opcode >> 8) & 0xF)])

def execute_ld_dt_vx(ctx: ExecutionContext, op: Operation) -> bool:
    ctx.state.delay = ctx.state.v[op.x]
    return False

# --- LD ST, Vx (Fx18) ---
def decode_ld_st_vx(opcode: int) -> Operation:
    return Operation(opcode, "LD", ["ST", reg((opcode >> 8) & 0xF)])

def execute_ld_st_vx(ctx: ExecutionContext, op: Operation) -> bool:
    ctx.state.sound = ctx.state.v[op.x]
    return False

# --- ADD I, Vx (Fx1E) ---
def decode_add_i(opcode: int) -> Operation:
    return Operation(opcode, "ADD", ["I", reg((opcode >> 8) & 0xF)])

# @intent:responsibility I に Vx を加算します。フラグは変化せず、I は16ビットのまま保持されます。
def execute_add_i(ctx: ExecutionContext, op: Operation) -> bool:
    ctx.state.i = (ctx.state.i + ctx.state.v[op.x]) & 0xFFFF
    return False

# --- LD F, Vx (Fx29) ---
def decode_ld_f(opcode: int) -> Operation:
    return Operation(opcode, "LD", ["F", reg((opcode >> 8) & 0xF)])

def execute_ld_f(ctx: ExecutionContext, op: Operation) -> bool:
    ctx.state.i = glyph_address(ctx.state.v[op.x])
    return False

# --- LD B, Vx (Fx33) ---
def decode_ld_b(opcode: int) -> Operation:
    return Operation(opcode, "LD", ["B", reg((opcode >> 8) & 0xF)])

# @intent:responsibility Vx の10進表現(百の位、十の位、一の位)を I, I+1, I+2 に格納します。
def execute_ld_b(ctx: ExecutionContext, op: Operation) -> bool:
    value = ctx.state.v[op.x]
    base = ctx.state.i
    ctx.memory.write(base, value // 100)
    ctx.memory.write(base + 1, (value // 10) % 10)
    ctx.memory.write(base + 2, value % 10)
    return False

# --- LD [I], Vx (Fx55) ---
def decode_ld_store(opcode: int) -> Operation:
    return Operation(opcode, "LD", ["[I]", reg((opcode >> 8) & 0xF)])

# @intent:responsibility V0..Vx (Vxを含む) を I から始まるメモリに格納します。I は変化しません。
def execute_ld_store(ctx: ExecutionContext, op: Operation) -> bool:
    for index in range(op.x + 1):
        ctx.memory.write(ctx.state.i + index, ctx.state.v[index])
    return False

# --- LD Vx, [I] (Fx65) ---
def decode_ld_load(opcode: int) -> Operation:
    return Operation(opcode, "LD", [reg((opcode >> 8) & 0xF), "[I]"])

def execute_ld_load(ctx: ExecutionContext, op: Operation) -> bool:
    for index in range(op.x + 1):
        ctx.state.v[index] = ctx.memory.read(ctx.state.i + index)
    return False
