# src/retro_chip8/instructions/control.py
"""
制御命令（画面消去、ジャンプ、サブルーチン、条件スキップ）の実装。
"""
from retro_chip8.core.operation import Operation
from .base import ExecutionContext, reg, imm8, addr12, skip_next, plain

# --- CLS (00E0) ---
def decode_cls(opcode: int) -> Operation:
    return plain(opcode, "CLS")

# @intent:responsibility フレームバッファを全消灯します。
def execute_cls(ctx: ExecutionContext, op: Operation) -> bool:
    ctx.framebuffer.clear()
    return True

# --- RET (00EE) ---
def decode_ret(opcode: int) -> Operation:
    return plain(opcode, "RET")

# @intent:responsibility スタックから戻りアドレスを取り出してPCに設定します。
def execute_ret(ctx: ExecutionContext, op: Operation) -> bool:
    ctx.state.pc = ctx.state.pop()
    return False

# --- JP nnn (1nnn) ---
def decode_jp(opcode: int) -> Operation:
    return Operation(opcode, "JP", [addr12(opcode & 0xFFF)])

def execute_jp(ctx: ExecutionContext, op: Operation) -> bool:
    ctx.state.pc = op.nnn
    return False

# --- CALL nnn (2nnn) ---
def decode_call(opcode: int) -> Operation:
    return Operation(opcode, "CALL", [addr12(opcode & 0xFFF)])

# @intent:responsibility 戻りアドレスをプッシュしてからジャンプします。
# @intent:pre-condition PCはフェッチ時点で既に次の命令を指しています。
def execute_call(ctx: ExecutionContext, op: Operation) -> bool:
    ctx.state.push(ctx.state.pc)
    ctx.state.pc = op.nnn
    return False

# --- SE Vx, nn (3xnn) ---
def decode_se_imm(opcode: int) -> Operation:
    return Operation(opcode, "SE", [reg((opcode >> 8) & 0xF), imm8(opcode & 0xFF)])

def execute_se_imm(ctx: ExecutionContext, op: Operation) -> bool:
    if ctx.state.v[op.x] == op.nn:
        skip_next(ctx.state)
    return False

# --- SNE Vx, nn (4xnn) ---
def decode_sne_imm(opcode: int) -> Operation:
    return Operation(opcode, "SNE", [reg((opcode >> 8) & 0xF), imm8(opcode & 0xFF)])

def execute_sne_imm(ctx: ExecutionContext, op: Operation) -> bool:
    if ctx.state.v[op.x] != op.nn:
        skip_next(ctx.state)
    return False

# --- SE Vx, Vy (5xy0) ---
def decode_se_reg(opcode: int) -> Operation:
    return Operation(opcode, "SE", [reg((opcode >> 8) & 0xF), reg((opcode >> 4) & 0xF)])

def execute_se_reg(ctx: ExecutionContext, op: Operation) -> bool:
    if ctx.state.v[op.x] == ctx.state.v[op.y]:
        skip_next(ctx.state)
    return False

# --- SNE Vx, Vy (9xy0) ---
def decode_sne_reg(opcode: int) -> Operation:
    return Operation(opcode, "SNE", [reg((opcode >> 8) & 0xF), reg((opcode >> 4) & 0xF)])

def execute_sne_reg(ctx: ExecutionContext, op: Operation) -> bool:
    if ctx.state.v[op.x] != ctx.state.v[op.y]:
        skip_next(ctx.state)
    return False

# --- JP V0, nnn (Bnnn) ---
def decode_jp_v0(opcode: int) -> Operation:
    return Operation(opcode, "JP", ["V0", addr12(opcode & 0xFFF)])

# @intent:responsibility nnn + V0 にジャンプします。アドレスは次のフェッチ時に12ビットへマスクされます。
def execute_jp_v0(ctx: ExecutionContext, op: Operation) -> bool:
    ctx.state.pc = op.nnn + ctx.state.v[0]
    return False

# --- SKP Vx (Ex9E) ---
def decode_skp(opcode: int) -> Operation:
    return Operation(opcode, "SKP", [reg((opcode >> 8) & 0xF)])

# @intent:responsibility Vxの値(下位4ビット)に対応する論理キーが押されていればスキップします。
def execute_skp(ctx: ExecutionContext, op: Operation) -> bool:
    if ctx.keypad.is_pressed(ctx.state.v[op.x] & 0xF):
        skip_next(ctx.state)
    return False

# --- SKNP Vx (ExA1) ---
def decode_sknp(opcode: int) -> Operation:
    return Operation(opcode, "SKNP", [reg((opcode >> 8) & 0xF)])

def execute_sknp(ctx: ExecutionContext, op: Operation) -> bool:
    if not ctx.keypad.is_pressed(ctx.state.v[op.x] & 0xF):
        skip_next(ctx.state)
    return False
